#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
源码序列化器

把 TreeCollector 收集到的目录树写成一个 Python 模块的源码。
该模块导入时重建出等价的只读 FileSystem。

生成的模块依次包含:
1. 模块 docstring (包名与"自动生成"说明) 和 import
2. 每个文件一个 bytes 数据块变量
3. 文件系统变量声明
4. 初始化函数 _init() 及其调用
"""

import logging
import stat
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .collector import TreeCollector
from ..core.entry import DEFAULT_DIR_MODE, NSEC_PER_SEC
from ..exceptions import InvalidArgumentError, PathConflictError
from ..hooks.base import SourceFormatHook
from ..hooks.compress import GzipCompressHook, NoneCompressHook
from ..hooks.format import AstFormatHook
from ..utils import (
    ROOT,
    base_name,
    blob_identifier,
    clean_local_path,
    join_path,
    parent_path,
    strip_prefix,
    validate_identifier,
)

logger = logging.getLogger(__name__)


# ==================== 配置 ====================

DEFAULT_PACKAGE_NAME = "assets"
DEFAULT_VARIABLE_NAME = "Assets"

# 生成的模块从这里导入运行时类型
RUNTIME_MODULE = "embedfs"


@dataclass
class GeneratorOptions:
    """
    生成选项

    package_name / variable_name 为空时使用默认值。
    """
    package_name: str = DEFAULT_PACKAGE_NAME
    variable_name: str = DEFAULT_VARIABLE_NAME
    compressed: bool = False
    strip_prefix: str = ""

    def __post_init__(self):
        if not self.package_name:
            self.package_name = DEFAULT_PACKAGE_NAME
        if not self.variable_name:
            self.variable_name = DEFAULT_VARIABLE_NAME

        for part in self.package_name.split("."):
            validate_identifier(part, "包名")
        validate_identifier(self.variable_name, "变量名")


@dataclass
class _Node:
    """序列化过程中的虚拟条目"""
    vfs_path: str
    local_path: Optional[str]  # 合成目录为 None
    mode: int
    mtime_sec: int = 0
    mtime_nsec: int = 0

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)


# ==================== 序列化器 ====================

class Serializer:
    """
    源码序列化器

    纯函数式: 相同的收集结果与选项总是生成相同的源码。
    """

    def __init__(
        self,
        options: Optional[GeneratorOptions] = None,
        format_hook: Optional[SourceFormatHook] = None
    ):
        """
        Args:
            options: 生成选项
            format_hook: 源码规范化钩子 (默认 AstFormatHook)
        """
        self._options = options or GeneratorOptions()
        self._compression_hook = (
            GzipCompressHook() if self._options.compressed else NoneCompressHook()
        )
        self._format_hook = format_hook or AstFormatHook()

    @property
    def options(self) -> GeneratorOptions:
        return self._options

    def serialize(self, collector: TreeCollector) -> str:
        """
        生成源码

        文件内容在此时从磁盘读取，而不是使用收集时的缓存。

        Args:
            collector: 已完成收集的 TreeCollector

        Returns:
            规范化后的源码文本

        Raises:
            OSError: 读取文件失败
            PathConflictError: 不同路径去除前缀后重名
            CanonicalizationError: 生成的源码无法解析
        """
        nodes, listing = self._build_tree(collector)

        blobs = self._read_blobs(nodes)
        source = self._render(nodes, listing, blobs)

        logger.info(
            "embedfs: 序列化 %d 个条目 (%d 个文件), compressed=%s",
            len(nodes), len(blobs), self._options.compressed
        )
        return self._format_hook.format(source)

    # ==================== 构建虚拟树 ====================

    def _vfs_path(self, local_path: str) -> str:
        prefix = self._options.strip_prefix
        if prefix:
            prefix = clean_local_path(prefix)
        return strip_prefix(local_path, prefix)

    def _build_tree(
        self,
        collector: TreeCollector
    ) -> Tuple[Dict[str, _Node], Dict[str, Dict[str, None]]]:
        """
        把收集结果转换为去除前缀后的虚拟路径

        目录映射与条目映射使用同一套去除前缀后的路径。
        同时补全祖先目录，保证每个非根路径的父目录存在且只列出它一次。
        """
        nodes: Dict[str, _Node] = {}
        # 目录 -> 有序的子项名称集合 (dict 保持插入顺序)
        listing: Dict[str, Dict[str, None]] = {}

        # 1. 条目
        for local_path, st in collector.files.items():
            vfs_path = self._vfs_path(local_path)
            existing = nodes.get(vfs_path)
            if existing is not None and existing.local_path != local_path:
                raise PathConflictError(existing.local_path, local_path, vfs_path)

            sec, nsec = divmod(st.st_mtime_ns, NSEC_PER_SEC)
            nodes[vfs_path] = _Node(vfs_path, local_path, st.st_mode, sec, nsec)
            if stat.S_ISDIR(st.st_mode):
                listing.setdefault(vfs_path, {})

        # 2. 目录子项 (保留收集顺序)
        #    未收集的父目录 (例如根路径所在的目录) 只用于传递子项
        for local_dir, names in collector.dirs.items():
            if local_dir in collector.files:
                listing.setdefault(self._vfs_path(local_dir), {})
            for name in names:
                child = self._vfs_path(clean_local_path(local_dir + "/" + name))
                if child != ROOT:
                    listing.setdefault(parent_path(child), {})[base_name(child)] = None

        # 3. 补全祖先目录
        root = nodes.get(ROOT)
        if root is not None and not root.is_dir:
            raise InvalidArgumentError(f"去除前缀后根目录是文件: {root.local_path}")

        listing.setdefault(ROOT, {})
        for path in sorted(set(nodes) | set(listing)):
            self._ensure_parents(path, nodes, listing)

        if collector.sort_children:
            listing = {
                dir_path: dict.fromkeys(sorted(names))
                for dir_path, names in listing.items()
            }

        return nodes, listing

    def _ensure_parents(
        self,
        path: str,
        nodes: Dict[str, _Node],
        listing: Dict[str, Dict[str, None]]
    ) -> None:
        if path not in nodes:
            nodes[path] = _Node(path, None, DEFAULT_DIR_MODE)
        elif not nodes[path].is_dir and listing.get(path):
            raise PathConflictError(
                nodes[path].local_path,
                self._descendant_local_path(path, nodes, listing),
                path
            )

        child = path
        while child != ROOT:
            parent = parent_path(child)
            node = nodes.get(parent)
            if node is None:
                nodes[parent] = _Node(parent, None, DEFAULT_DIR_MODE)
            elif not node.is_dir:
                raise PathConflictError(
                    node.local_path,
                    nodes[child].local_path
                    or self._descendant_local_path(child, nodes, listing),
                    parent
                )
            listing.setdefault(parent, {})[base_name(child)] = None
            child = parent

    def _descendant_local_path(
        self,
        path: str,
        nodes: Dict[str, _Node],
        listing: Dict[str, Dict[str, None]]
    ) -> Optional[str]:
        """
        查找 path 之下第一个真实收集的本地路径

        合成目录总是因为某个真实后代而存在，用它报告冲突。
        """
        for name in listing.get(path, {}):
            child = join_path(path, name)
            node = nodes.get(child)
            if node is not None and node.local_path is not None:
                return node.local_path
            found = self._descendant_local_path(child, nodes, listing)
            if found is not None:
                return found
        return None

    # ==================== 读取数据 ====================

    def _read_blobs(self, nodes: Dict[str, _Node]) -> Dict[str, Tuple[str, bytes]]:
        """
        读取并 (可选) 压缩每个文件的内容

        Returns:
            虚拟路径 -> (数据块变量名, 数据)，按原始路径排序
        """
        variable_name = self._options.variable_name
        files = sorted(
            (node for node in nodes.values() if not node.is_dir),
            key=lambda n: n.local_path
        )

        blobs: Dict[str, Tuple[str, bytes]] = {}
        for node in files:
            with open(node.local_path, 'rb') as f:
                data = f.read()

            data = self._compression_hook.compress(data)

            ident = blob_identifier(variable_name, node.local_path)
            blobs[node.vfs_path] = (ident, data)
            logger.debug(
                "embedfs: %s -> %s (%d bytes)", node.local_path, ident, len(data)
            )

        return blobs

    # ==================== 输出源码 ====================

    def _render(
        self,
        nodes: Dict[str, _Node],
        listing: Dict[str, Dict[str, None]],
        blobs: Dict[str, Tuple[str, bytes]]
    ) -> str:
        opts = self._options
        var = opts.variable_name
        lines: List[str] = []

        # 1. 模块头
        lines.append('"""')
        lines.append(f"Package {opts.package_name}: embedded file system {var}.")
        lines.append("")
        lines.append("Code generated by embedfs. DO NOT EDIT.")
        lines.append('"""')
        lines.append(f"from {RUNTIME_MODULE} import Entry, FileSystem")
        lines.append("")
        lines.append(f"__all__ = [{var!r}]")
        lines.append("")

        # 2. 数据块
        for ident, data in blobs.values():
            lines.append(f"{ident} = {data!r}")
        if blobs:
            lines.append("")

        # 3. 文件系统变量声明
        lines.append(f"{var}: FileSystem")
        lines.append("")

        # 4. 初始化函数
        lines.append("def _init():")
        lines.append(f"    global {var}")
        lines.append(f"    {var} = FileSystem(")
        lines.append("        dirs={")
        for dir_path in sorted(listing):
            names = list(listing[dir_path])
            lines.append(f"            {dir_path!r}: {names!r},")
        lines.append("        },")
        lines.append("        entries={")
        for vfs_path in sorted(nodes):
            entry = self._render_entry(nodes[vfs_path], blobs)
            lines.append(f"            {vfs_path!r}: {entry},")
        lines.append("        },")
        lines.append(f"        compressed={opts.compressed!r},")
        lines.append("    )")
        lines.append("")
        lines.append("_init()")
        lines.append("")

        return "\n".join(lines)

    @staticmethod
    def _render_entry(node: _Node, blobs: Dict[str, Tuple[str, bytes]]) -> str:
        parts = [
            f"path={node.vfs_path!r}",
            f"mode=0o{node.mode:o}",
            f"mtime_sec={node.mtime_sec!r}",
            f"mtime_nsec={node.mtime_nsec!r}",
        ]
        if not node.is_dir:
            parts.append(f"data={blobs[node.vfs_path][0]}")
        return "Entry(" + ", ".join(parts) + ")"


def serialize(
    collector: TreeCollector,
    options: Optional[GeneratorOptions] = None,
    format_hook: Optional[SourceFormatHook] = None
) -> str:
    """
    便捷函数: 按选项把收集结果序列化为源码

    Args:
        collector: 已完成收集的 TreeCollector
        options: 生成选项
        format_hook: 源码规范化钩子

    Returns:
        源码文本
    """
    return Serializer(options, format_hook=format_hook).serialize(collector)
