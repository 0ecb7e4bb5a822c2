#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
生成器

组合 TreeCollector 与 Serializer:
添加本地路径，然后把整棵树写成一个可导入的 Python 模块。
"""

import logging
import os
from typing import List, Optional, TextIO

from .collector import TreeCollector
from .serializer import GeneratorOptions, Serializer
from ..hooks.base import SourceFormatHook

logger = logging.getLogger(__name__)


class Generator:
    """
    资源模块生成器

    生成的模块通过 variable_name 变量导出 embedfs.FileSystem。

    Example:
        >>> gen = Generator(package_name="assets", strip_prefix="static")
        >>> gen.add("static")                        # doctest: +SKIP
        >>> gen.write_file("assets.py")              # doctest: +SKIP
    """

    def __init__(
        self,
        package_name: str = "",
        variable_name: str = "",
        compressed: bool = False,
        strip_prefix: str = "",
        exclude_patterns: Optional[List[str]] = None,
        sort_children: bool = True,
        format_hook: Optional[SourceFormatHook] = None
    ):
        """
        初始化生成器

        Args:
            package_name: 生成模块所属的包名 (默认 assets)
            variable_name: 导出的文件系统变量名 (默认 Assets)
            compressed: 是否使用 gzip 压缩文件内容
            strip_prefix: 从所有路径中去除的前缀
            exclude_patterns: 排除的文件名模式 (glob)
            sort_children: 是否按名称排序同级子项
            format_hook: 源码规范化钩子 (可选)

        Raises:
            InvalidArgumentError: 包名或变量名不是合法标识符
        """
        self._options = GeneratorOptions(
            package_name=package_name,
            variable_name=variable_name,
            compressed=compressed,
            strip_prefix=strip_prefix,
        )
        self._collector = TreeCollector(
            exclude_patterns=exclude_patterns,
            sort_children=sort_children,
        )
        self._serializer = Serializer(self._options, format_hook=format_hook)

    @property
    def options(self) -> GeneratorOptions:
        return self._options

    @property
    def collector(self) -> TreeCollector:
        return self._collector

    @property
    def entry_count(self) -> int:
        """已收集的条目数量 (文件与目录)"""
        return len(self._collector)

    def add(self, path: str) -> None:
        """
        添加文件或目录 (目录会递归添加)

        Raises:
            NotFoundError: 路径不存在
            OSError: 读取目录失败
        """
        self._collector.add_path(path)

    def add_all(self, paths: List[str]) -> None:
        """依次添加多个路径，遇到第一个错误即停止"""
        for path in paths:
            self.add(path)

    def generate(self) -> str:
        """
        生成模块源码

        Raises:
            OSError: 读取文件失败
            PathConflictError: 不同路径去除前缀后重名
            CanonicalizationError: 生成的源码无法解析
        """
        return self._serializer.serialize(self._collector)

    def write(self, stream: TextIO) -> None:
        """把生成的源码写入文本流"""
        stream.write(self.generate())

    def write_file(self, output_path: str) -> None:
        """
        把生成的源码写入文件

        源码完整生成后才打开目标文件，生成失败时不会留下输出文件。
        """
        source = self.generate()
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(source)

        logger.info(
            "embedfs: 已写入 %s (%d 个条目, %d bytes)",
            output_path, self.entry_count, len(source)
        )
