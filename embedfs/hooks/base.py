#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Hook 基类定义

定义压缩与源码规范化的抽象接口。
"""

from abc import ABC, abstractmethod


class CompressionHook(ABC):
    """
    压缩算法钩子

    压缩是文件系统级别的开关，所有文件使用同一个钩子。
    """

    @property
    def display_name(self) -> str:
        """
        可读名称 (用于日志显示)

        默认返回类名，子类可覆盖提供更友好的名称。
        """
        return type(self).__name__

    @abstractmethod
    def compress(self, data: bytes) -> bytes:
        """
        压缩数据

        Args:
            data: 原始数据

        Returns:
            压缩后的数据
        """
        pass

    @abstractmethod
    def decompress(self, data: bytes) -> bytes:
        """
        解压数据

        Args:
            data: 压缩后的数据

        Returns:
            解压后的数据
        """
        pass


class SourceFormatHook(ABC):
    """
    源码规范化钩子

    生成器拼接完源码后调用，负责校验语法并输出规范格式。
    """

    @abstractmethod
    def format(self, source: str) -> str:
        """
        规范化源码

        Args:
            source: 生成的源码文本

        Returns:
            规范化后的源码

        Raises:
            CanonicalizationError: 源码无法解析
        """
        pass
