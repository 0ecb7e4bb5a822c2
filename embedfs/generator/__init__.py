#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
embedfs 生成模块

遍历本地目录树并把它序列化为可导入的 Python 源码。
"""

from .collector import TreeCollector
from .serializer import (
    GeneratorOptions,
    Serializer,
    serialize,
    DEFAULT_PACKAGE_NAME,
    DEFAULT_VARIABLE_NAME,
)
from .builder import Generator

__all__ = [
    "TreeCollector",
    "GeneratorOptions",
    "Serializer",
    "serialize",
    "DEFAULT_PACKAGE_NAME",
    "DEFAULT_VARIABLE_NAME",
    "Generator",
]
