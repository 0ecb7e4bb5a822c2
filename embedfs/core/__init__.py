#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
embedfs 核心模块

提供条目结构、文件句柄和只读内存文件系统。
生成的源码在运行时只依赖本模块。
"""

from .entry import Entry, DEFAULT_DIR_MODE
from .handle import Handle, FileHandle, DirectoryHandle
from .filesystem import FileSystem

__all__ = [
    "Entry",
    "DEFAULT_DIR_MODE",
    "Handle",
    "FileHandle",
    "DirectoryHandle",
    "FileSystem",
]
