#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
内置压缩 Hook 实现 (基于标准库)
"""

import gzip

from .base import CompressionHook


class GzipCompressHook(CompressionHook):
    """
    gzip 压缩

    头部 mtime 固定为 0，相同输入总是得到相同输出，便于可复现构建。
    """

    def __init__(self, level: int = 9):
        """
        Args:
            level: 压缩级别 (0-9), 默认 9
        """
        self._level = level

    @property
    def display_name(self) -> str:
        return "gzip"

    def compress(self, data: bytes) -> bytes:
        return gzip.compress(data, compresslevel=self._level, mtime=0)

    def decompress(self, data: bytes) -> bytes:
        return gzip.decompress(data)


class NoneCompressHook(CompressionHook):
    """不压缩，原样返回数据"""

    @property
    def display_name(self) -> str:
        return "none"

    def compress(self, data: bytes) -> bytes:
        return data

    def decompress(self, data: bytes) -> bytes:
        return data
