#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
文件句柄

FileSystem.open() 返回的句柄。普通文件句柄持有私有的 BytesIO 游标，
目录句柄持有列目录游标。句柄只引用所属的 FileSystem，不拥有它。
"""

import io
from typing import TYPE_CHECKING, List, Optional

from .entry import Entry
from ..exceptions import (
    ClosedHandleError,
    InvalidArgumentError,
    InvalidOperationError,
)

if TYPE_CHECKING:
    from .filesystem import FileSystem


class Handle:
    """句柄基类"""

    def __init__(self, fs: "FileSystem", entry: Entry):
        self._fs = fs
        self._entry = entry
        self._closed = False

    def _check_open(self) -> None:
        if self._closed:
            raise ClosedHandleError(self._entry.path)

    @property
    def path(self) -> str:
        return self._entry.path

    @property
    def closed(self) -> bool:
        return self._closed

    def stat(self) -> Entry:
        """返回条目元信息"""
        self._check_open()
        return self._entry

    def close(self) -> None:
        """关闭句柄 (可重复调用)"""
        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<{type(self).__name__} {self._entry.path!r} {state}>"


class FileHandle(Handle):
    """
    普通文件句柄

    每次 open 都会创建独立的游标，并发读取同一路径互不影响。
    """

    def __init__(self, fs: "FileSystem", entry: Entry):
        super().__init__(fs, entry)
        self._buf: Optional[io.BytesIO] = io.BytesIO(entry.data)

    def read(self, size: int = -1) -> bytes:
        """
        顺序读取

        Args:
            size: 最多读取的字节数，负数表示读到末尾

        Returns:
            读取的数据，到达末尾时返回 b''
        """
        self._check_open()
        return self._buf.read(size)

    def readinto(self, buffer) -> int:
        """读取到可写缓冲区，返回实际读取字节数 (0 表示末尾)"""
        self._check_open()
        return self._buf.readinto(buffer)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """
        移动读取位置

        Args:
            offset: 偏移量
            whence: io.SEEK_SET / io.SEEK_CUR / io.SEEK_END

        Returns:
            新的位置

        Raises:
            InvalidArgumentError: whence 无效，或新位置在 0 之前
        """
        self._check_open()
        if whence == io.SEEK_SET:
            base = 0
        elif whence == io.SEEK_CUR:
            base = self._buf.tell()
        elif whence == io.SEEK_END:
            base = len(self._entry.data)
        else:
            raise InvalidArgumentError(f"无效的 whence: {whence}")

        position = base + offset
        if position < 0:
            raise InvalidArgumentError(f"无效的偏移量: {position}")
        return self._buf.seek(position)

    def tell(self) -> int:
        self._check_open()
        return self._buf.tell()

    def readdir(self, count: int = -1) -> List[Entry]:
        self._check_open()
        raise InvalidOperationError(self._entry.path, "readdir")

    def close(self) -> None:
        self._buf = None
        super().close()


class DirectoryHandle(Handle):
    """
    目录句柄

    不能按字节读取，只能通过 readdir() 分批列出子项。
    """

    def __init__(self, fs: "FileSystem", entry: Entry):
        super().__init__(fs, entry)
        self._offset = 0

    def read(self, size: int = -1) -> bytes:
        self._check_open()
        raise InvalidOperationError(self._entry.path, "read")

    def readinto(self, buffer) -> int:
        self._check_open()
        raise InvalidOperationError(self._entry.path, "readinto")

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        self._check_open()
        raise InvalidOperationError(self._entry.path, "seek")

    def readdir(self, count: int = -1) -> List[Entry]:
        """
        列出子项

        Args:
            count: 大于 0 时最多返回 count 项并前移游标；
                   小于等于 0 时返回剩余全部子项

        Returns:
            Entry 列表，没有剩余子项时返回空列表
        """
        self._check_open()
        if count <= 0:
            entries = self._fs.list_children(self._entry.path, self._offset)
        else:
            entries = self._fs.list_children(
                self._entry.path, self._offset, count
            )
        self._offset += len(entries)
        return entries
