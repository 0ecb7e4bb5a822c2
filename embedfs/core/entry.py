#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
embedfs 数据结构定义

定义 Entry: 虚拟文件系统中的一个文件或目录。
"""

import stat
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from ..utils import base_name


# ==================== 常量定义 ====================

NSEC_PER_SEC = 1_000_000_000

# 合成目录 (没有对应的本地目录) 使用的模式位
DEFAULT_DIR_MODE = stat.S_IFDIR | 0o755

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


# ==================== Entry ====================

@dataclass(frozen=True)
class Entry:
    """
    文件/目录条目

    修改时间拆分为秒与纳秒两个整数字段，生成的源码中也按两个整数存储，
    避免依赖任何时间编码格式。data 只对普通文件有意义，
    是否为 gzip 压缩数据由所属 FileSystem 的 compressed 标志决定。
    """
    path: str
    mode: int
    mtime_sec: int = 0
    mtime_nsec: int = 0
    data: bytes = field(default=b"", repr=False)

    @classmethod
    def from_stat(cls, path: str, st, data: bytes = b"") -> "Entry":
        """由 os.stat_result 构造"""
        sec, nsec = divmod(st.st_mtime_ns, NSEC_PER_SEC)
        return cls(
            path=path,
            mode=st.st_mode,
            mtime_sec=sec,
            mtime_nsec=nsec,
            data=b"" if stat.S_ISDIR(st.st_mode) else data,
        )

    @classmethod
    def directory(cls, path: str) -> "Entry":
        """构造合成目录条目"""
        return cls(path=path, mode=DEFAULT_DIR_MODE)

    @property
    def name(self) -> str:
        """最后一段路径名"""
        return base_name(self.path)

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)

    @property
    def size(self) -> int:
        """数据字节数，目录为 0"""
        if self.is_dir:
            return 0
        return len(self.data)

    @property
    def perm(self) -> int:
        """仅权限位"""
        return stat.S_IMODE(self.mode)

    @property
    def mtime_ns(self) -> int:
        return self.mtime_sec * NSEC_PER_SEC + self.mtime_nsec

    @property
    def mod_time(self) -> datetime:
        """修改时间 (UTC，精度截断到微秒)"""
        return _EPOCH + timedelta(
            seconds=self.mtime_sec,
            microseconds=self.mtime_nsec // 1000
        )
