#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
embedfs 异常定义

所有异常均继承自 EmbedFSError，便于统一捕获。
具体异常同时继承对应的内置异常，保留 except FileNotFoundError 等惯用写法。
"""


class EmbedFSError(Exception):
    """embedfs 基础异常"""
    pass


class NotFoundError(EmbedFSError, FileNotFoundError):
    """
    路径不存在异常

    生成阶段: 待收集的本地路径不存在。
    运行阶段: 虚拟文件系统中查找不到该路径。
    """
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"路径不存在: {path}")


class InvalidOperationError(EmbedFSError, OSError):
    """
    无效操作异常

    例如按文件读取目录，或对普通文件列出子项。
    """
    def __init__(self, path: str, operation: str):
        self.path = path
        self.operation = operation
        super().__init__(f"无效操作 '{operation}': {path}")


class InvalidArgumentError(EmbedFSError, ValueError):
    """
    无效参数异常

    例如 seek 到位置 0 之前，或变量名不是合法标识符。
    """
    pass


class ClosedHandleError(EmbedFSError, ValueError):
    """
    句柄已关闭异常

    在 close() 之后继续读取、定位或列目录时抛出。
    """
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"句柄已关闭: {path}")


class PathConflictError(EmbedFSError):
    """
    路径冲突异常

    当两个不同的本地路径在去除前缀后得到相同的虚拟路径时抛出。
    """
    def __init__(self, path1: str, path2: str, vfs_path: str):
        self.path1 = path1
        self.path2 = path2
        self.vfs_path = vfs_path
        super().__init__(
            f"路径冲突: '{path1}' 与 '{path2}' "
            f"去除前缀后均为 '{vfs_path}'"
        )


class CanonicalizationError(EmbedFSError):
    """
    源码规范化失败异常

    生成的源码无法解析。属于生成器内部缺陷，不应在运行时恢复。
    """
    def __init__(self, message: str, lineno: int = None):
        self.lineno = lineno
        if lineno is not None:
            message = f"{message} (第 {lineno} 行)"
        super().__init__(message)
