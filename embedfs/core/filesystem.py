#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
内存虚拟文件系统

由生成的源码在导入时构造，构造后只读。
支持按路径打开、分页列目录和遍历。
"""

import posixpath
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .entry import Entry
from .handle import DirectoryHandle, FileHandle
from ..hooks.compress import GzipCompressHook
from ..exceptions import InvalidArgumentError, InvalidOperationError, NotFoundError
from ..utils import ROOT, join_path, normalize_path


class FileSystem:
    """
    只读内存文件系统

    持有两个映射:
    - dirs: 目录路径 -> 子项名称序列 (构建时的插入顺序，不保证排序)
    - entries: 完整路径 -> Entry (文件与目录)

    compressed 为 True 时所有文件的 data 均为 gzip 数据。
    没有任何写入接口，可被任意多个线程并发读取而无需加锁。
    """

    def __init__(
        self,
        dirs: Mapping[str, Sequence[str]],
        entries: Mapping[str, Entry],
        compressed: bool = False
    ):
        """
        Args:
            dirs: 目录路径 -> 子项名称列表
            entries: 完整路径 -> Entry
            compressed: 文件数据是否为 gzip 压缩
        """
        self._dirs: Mapping[str, Tuple[str, ...]] = MappingProxyType(
            {path: tuple(names) for path, names in dirs.items()}
        )
        self._entries: Mapping[str, Entry] = MappingProxyType(dict(entries))
        self._compressed = bool(compressed)

    @property
    def dirs(self) -> Mapping[str, Tuple[str, ...]]:
        return self._dirs

    @property
    def entries(self) -> Mapping[str, Entry]:
        return self._entries

    @property
    def compressed(self) -> bool:
        return self._compressed

    # ==================== 查找 ====================

    def exists(self, path: str) -> bool:
        """检查虚拟路径是否存在"""
        return normalize_path(path) in self._entries

    def stat(self, path: str) -> Entry:
        """
        获取条目元信息

        Raises:
            NotFoundError: 路径不存在
        """
        key = normalize_path(path)
        if key not in self._entries:
            raise NotFoundError(path)
        return self._entries[key]

    def open(self, path: str) -> Union[FileHandle, DirectoryHandle]:
        """
        打开文件或目录

        文件返回带独立游标的 FileHandle，目录返回 DirectoryHandle。

        Raises:
            NotFoundError: 路径不存在
        """
        entry = self.stat(path)
        if entry.is_dir:
            return DirectoryHandle(self, entry)
        return FileHandle(self, entry)

    def read_bytes(self, path: str) -> bytes:
        """
        读取文件原始内容

        compressed 为 True 时自动解压。

        Raises:
            NotFoundError: 路径不存在
            InvalidOperationError: 路径是目录
        """
        entry = self.stat(path)
        if entry.is_dir:
            raise InvalidOperationError(entry.path, "read")
        if self._compressed:
            return GzipCompressHook().decompress(entry.data)
        return entry.data

    def list_children(
        self,
        dir_path: str,
        start: int = 0,
        count: Optional[int] = None
    ) -> List[Entry]:
        """
        分页列出目录子项

        超出范围的请求会被截断，start 已越过末尾时返回空列表。

        Args:
            dir_path: 目录路径
            start: 起始下标
            count: 最多返回的数量，None 表示到末尾

        Returns:
            子项 Entry 列表

        Raises:
            NotFoundError: 目录不存在
            InvalidArgumentError: start 或 count 为负数
        """
        key = normalize_path(dir_path)
        if key not in self._dirs:
            raise NotFoundError(dir_path)
        if start < 0:
            raise InvalidArgumentError(f"无效的起始下标: {start}")
        if count is not None and count < 0:
            raise InvalidArgumentError(f"无效的数量: {count}")

        names = self._dirs[key]
        stop = len(names) if count is None else min(start + count, len(names))
        return [self._entries[join_path(key, name)] for name in names[start:stop]]

    # ==================== 遍历 ====================

    def list_all(self) -> List[str]:
        """列出所有文件路径 (已排序，不含目录)"""
        return sorted(
            path for path, entry in self._entries.items() if not entry.is_dir
        )

    def walk(self, top: str = ROOT) -> Iterator[Tuple[str, List[str], List[str]]]:
        """
        自顶向下遍历目录树 (与 os.walk 相同的三元组)

        Yields:
            (目录路径, 子目录名列表, 文件名列表)

        Raises:
            NotFoundError: top 不是已知目录
        """
        key = normalize_path(top)
        if key not in self._dirs:
            raise NotFoundError(top)

        dirnames: List[str] = []
        filenames: List[str] = []
        for entry in self.list_children(key):
            if entry.is_dir:
                dirnames.append(entry.name)
            else:
                filenames.append(entry.name)

        yield key, dirnames, filenames

        for name in dirnames:
            child = posixpath.join(key, name)
            if child in self._dirs:
                yield from self.walk(child)

    def __contains__(self, path: str) -> bool:
        return self.exists(path)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"<FileSystem entries={len(self._entries)} "
            f"dirs={len(self._dirs)} compressed={self._compressed}>"
        )
