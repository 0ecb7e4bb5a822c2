#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
目录树收集器

遍历本地目录树，记录每个路径的 stat 信息以及目录 -> 子项名称的映射，
供 Serializer 生成源码使用。收集器是普通对象实例，不使用任何全局状态，
多个生成任务可以互不干扰地并行存在。
"""

import bisect
import fnmatch
import logging
import os
import posixpath
import stat
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Set, Tuple

from ..exceptions import InvalidOperationError, NotFoundError
from ..utils import clean_local_path

logger = logging.getLogger(__name__)


class TreeCollector:
    """
    目录树收集器

    - dirs: 目录路径 -> 子项名称列表
    - files: 路径 -> os.stat_result (文件与目录)

    路径均为 clean_local_path() 规范化后的本地路径 (未去除前缀)。
    add_path() 失败后收集器状态不完整，应丢弃重建。
    """

    def __init__(
        self,
        follow_symlinks: bool = True,
        exclude_patterns: Optional[List[str]] = None,
        sort_children: bool = True
    ):
        """
        初始化收集器

        Args:
            follow_symlinks: 是否跟随符号链接
            exclude_patterns: 排除的文件名模式 (glob，匹配最后一段名称)
            sort_children: 是否按名称排序同级子项 (关闭时保留目录枚举顺序)
        """
        self._follow_symlinks = follow_symlinks
        self._exclude_patterns = list(exclude_patterns or [])
        self._sort_children = sort_children

        # 内部状态
        self._dirs: Dict[str, List[str]] = {}
        self._files: Dict[str, os.stat_result] = {}
        # 当前遍历路径上的目录 (st_dev, st_ino)，用于识别符号链接环
        self._walking: Set[Tuple[int, int]] = set()

    def add_path(self, path: str) -> None:
        """
        添加文件或目录 (目录会递归添加)

        多次调用会累积到同一个收集器中，可以嵌入多个互不相交的根。

        Args:
            path: 本地路径

        Raises:
            NotFoundError: 路径不存在
            InvalidOperationError: 路径既不是普通文件也不是目录
            OSError: 读取目录或 stat 失败
        """
        p = clean_local_path(path)

        try:
            st = os.stat(p, follow_symlinks=self._follow_symlinks)
        except FileNotFoundError as e:
            raise NotFoundError(path) from e

        if not (stat.S_ISDIR(st.st_mode) or stat.S_ISREG(st.st_mode)):
            raise InvalidOperationError(path, "add_path")

        logger.debug("embedfs: 添加根路径 %s", p)
        # 文件根与目录根都登记到父目录列表，根目录 "." 与 "/" 没有父目录
        parent = posixpath.dirname(p) or "."
        self._register(None if parent == p else parent, p, st)

    def _register(
        self,
        parent: Optional[str],
        p: str,
        st: os.stat_result
    ) -> None:
        """登记单个路径，目录递归处理子项"""
        self._files[p] = st

        if parent is not None:
            self._list_child(parent, posixpath.basename(p))

        if stat.S_ISDIR(st.st_mode):
            self._dirs.setdefault(p, [])
            key = self._dir_key(p, st)
            self._walking.add(key)
            try:
                self._walk_dir(p)
            finally:
                self._walking.discard(key)

    def _list_child(self, parent: str, name: str) -> None:
        """把名称加入父目录列表，已存在时忽略"""
        siblings = self._dirs.setdefault(parent, [])
        if name in siblings:
            return
        if self._sort_children:
            bisect.insort(siblings, name)
        else:
            siblings.append(name)

    def _dir_key(self, path: str, st: os.stat_result) -> Tuple[int, int]:
        if st.st_ino == 0:
            # Windows 上 DirEntry.stat() 不提供 inode
            st = os.stat(path, follow_symlinks=self._follow_symlinks)
        return st.st_dev, st.st_ino

    def _walk_dir(self, dir_path: str) -> None:
        with os.scandir(dir_path) as it:
            children = list(it)

        if self._sort_children:
            children.sort(key=lambda e: e.name)

        for child in children:
            if self._is_excluded(child.name):
                logger.debug("embedfs: 排除 %s", child.path)
                continue

            child_path = clean_local_path(posixpath.join(dir_path, child.name))
            try:
                st = child.stat(follow_symlinks=self._follow_symlinks)
            except FileNotFoundError:
                # 悬空符号链接
                logger.debug("embedfs: 跳过无法访问的路径 %s", child_path)
                continue

            if not (stat.S_ISDIR(st.st_mode) or stat.S_ISREG(st.st_mode)):
                logger.debug("embedfs: 跳过特殊文件 %s", child_path)
                continue

            if stat.S_ISDIR(st.st_mode) and self._dir_key(child_path, st) in self._walking:
                logger.debug("embedfs: 跳过指向上层目录的符号链接 %s", child_path)
                continue

            self._register(dir_path, child_path, st)

    def _is_excluded(self, name: str) -> bool:
        return any(
            fnmatch.fnmatch(name, pattern) for pattern in self._exclude_patterns
        )

    # ==================== 查询 ====================

    @property
    def dirs(self) -> Mapping[str, List[str]]:
        """目录路径 -> 子项名称列表 (只读视图)"""
        return MappingProxyType(self._dirs)

    @property
    def files(self) -> Mapping[str, os.stat_result]:
        """路径 -> stat 信息 (只读视图)"""
        return MappingProxyType(self._files)

    @property
    def sort_children(self) -> bool:
        """同级子项是否按名称排序"""
        return self._sort_children

    def is_dir(self, path: str) -> bool:
        """
        已登记路径是否为目录

        Raises:
            NotFoundError: 路径未登记
        """
        p = clean_local_path(path)
        if p not in self._files:
            raise NotFoundError(path)
        return stat.S_ISDIR(self._files[p].st_mode)

    @property
    def file_count(self) -> int:
        """已登记的普通文件数量"""
        return sum(
            1 for st in self._files.values() if not stat.S_ISDIR(st.st_mode)
        )

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, path: str) -> bool:
        return clean_local_path(path) in self._files
