#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
embedfs - 把目录树嵌入 Python 模块的只读内存文件系统

构建时用 Generator 生成模块源码，运行时导入该模块即得到 FileSystem。
"""

__version__ = "0.1.0"

# 异常类
from .exceptions import (
    EmbedFSError,
    NotFoundError,
    InvalidOperationError,
    InvalidArgumentError,
    ClosedHandleError,
    PathConflictError,
    CanonicalizationError,
)

# 工具函数
from .utils import normalize_path, strip_prefix, blob_identifier

# 运行时
from .core import Entry, FileSystem, FileHandle, DirectoryHandle

# 生成器
from .generator import TreeCollector, GeneratorOptions, Serializer, serialize, Generator

# Hooks
from .hooks import (
    CompressionHook,
    SourceFormatHook,
    GzipCompressHook,
    NoneCompressHook,
    AstFormatHook,
    ValidateOnlyFormatHook,
)

__all__ = [
    # 版本
    "__version__",
    # 异常
    "EmbedFSError",
    "NotFoundError",
    "InvalidOperationError",
    "InvalidArgumentError",
    "ClosedHandleError",
    "PathConflictError",
    "CanonicalizationError",
    # 工具
    "normalize_path",
    "strip_prefix",
    "blob_identifier",
    # 运行时
    "Entry",
    "FileSystem",
    "FileHandle",
    "DirectoryHandle",
    # 生成器
    "TreeCollector",
    "GeneratorOptions",
    "Serializer",
    "serialize",
    "Generator",
    # Hooks
    "CompressionHook",
    "SourceFormatHook",
    "GzipCompressHook",
    "NoneCompressHook",
    "AstFormatHook",
    "ValidateOnlyFormatHook",
]
