#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
embedfs Hook 系统

提供压缩算法与源码规范化的可插拔接口。
"""

from .base import CompressionHook, SourceFormatHook
from .compress import GzipCompressHook, NoneCompressHook
from .format import AstFormatHook, ValidateOnlyFormatHook

__all__ = [
    # 抽象基类
    "CompressionHook",
    "SourceFormatHook",
    # 内置压缩实现
    "GzipCompressHook",
    "NoneCompressHook",
    # 源码规范化
    "AstFormatHook",
    "ValidateOnlyFormatHook",
]
