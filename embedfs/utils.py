#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
embedfs 工具函数

提供路径处理、前缀去除、内嵌数据标识符计算等通用功能。
"""

import hashlib
import keyword
import posixpath

from .exceptions import InvalidArgumentError


ROOT = "/"


def normalize_path(path: str, absolute: bool = True) -> str:
    """
    路径规范化

    1. 反斜杠统一为正斜杠
    2. 合并连续斜杠
    3. 移除末尾斜杠
    4. 可选: 以 / 开头 (absolute=True，虚拟文件系统默认)

    Args:
        path: 原始路径
        absolute: 是否以 / 开头

    Returns:
        规范化后的路径

    Examples:
        >>> normalize_path("a\\\\b.txt")
        '/a/b.txt'
        >>> normalize_path("/a//c/")
        '/a/c'
        >>> normalize_path("")
        '/'
        >>> normalize_path("/a/b", absolute=False)
        'a/b'
    """
    path = path.replace("\\", "/")

    while "//" in path:
        path = path.replace("//", "/")

    path = path.rstrip("/")

    if not absolute:
        path = path.lstrip("/")
    elif not path.startswith("/"):
        path = "/" + path

    if not path:
        path = ROOT if absolute else ""

    return path


def clean_local_path(path: str) -> str:
    """
    规范化本地路径 (生成阶段使用)

    统一为正斜杠并消除 '.' 与 '..' 片段，不强制以 / 开头。

    Examples:
        >>> clean_local_path("./a/../a/b/")
        'a/b'
        >>> clean_local_path("")
        '.'
    """
    path = path.replace("\\", "/")
    if not path:
        return "."
    return posixpath.normpath(path)


def strip_prefix(path: str, prefix: str) -> str:
    """
    去除路径前缀并转换为虚拟路径

    只按完整路径片段匹配: 前缀 "a" 会去除 "a/b.txt" 中的 "a"，
    但不会改动 "ab/c.txt"。去除后为空的路径即根目录 "/"。

    Args:
        path: 本地路径 (已规范化)
        prefix: 要去除的前缀，空字符串表示不去除

    Returns:
        以 / 开头的虚拟路径

    Examples:
        >>> strip_prefix("a/b.txt", "a")
        '/b.txt'
        >>> strip_prefix("a", "a")
        '/'
        >>> strip_prefix("ab/c.txt", "a")
        '/ab/c.txt'
    """
    if prefix:
        prefix = prefix.replace("\\", "/").rstrip("/")
        if not prefix:
            prefix = "/"
        if path == prefix:
            return ROOT
        if path.startswith(prefix + "/"):
            path = path[len(prefix):]
    return normalize_path(posixpath.normpath(normalize_path(path)))


def join_path(dir_path: str, name: str) -> str:
    """
    拼接目录路径与子项名称

    Examples:
        >>> join_path("/", "b.txt")
        '/b.txt'
        >>> join_path("/c", "d")
        '/c/d'
    """
    return normalize_path(posixpath.join(dir_path, name))


def parent_path(path: str) -> str:
    """返回虚拟路径的父目录 (根目录的父目录仍为根目录)"""
    return posixpath.dirname(normalize_path(path)) or ROOT


def base_name(path: str) -> str:
    """返回虚拟路径的最后一段，根目录返回 "/" """
    path = normalize_path(path)
    if path == ROOT:
        return ROOT
    return posixpath.basename(path)


def validate_identifier(name: str, what: str = "变量名") -> str:
    """
    检查名称是否为合法的 Python 标识符

    Raises:
        InvalidArgumentError: 不是合法标识符或是关键字
    """
    if not name.isidentifier() or keyword.iskeyword(name):
        raise InvalidArgumentError(f"无效的{what}: {name!r}")
    return name


def blob_identifier(variable_name: str, path: str) -> str:
    """
    计算内嵌数据块的变量名

    格式固定为 "_" + 变量名 + "_" + SHA1(原始路径 UTF-8) 的 40 位小写十六进制。
    只依赖路径，不依赖文件内容，内容相同的两个文件也会得到不同的标识符。

    Args:
        variable_name: 导出的文件系统变量名
        path: 收集时的原始路径 (去除前缀之前)

    Returns:
        合法的 Python 标识符

    Examples:
        >>> blob_identifier("Assets", "a/b.txt")[:8]
        '_Assets_'
    """
    digest = hashlib.sha1(path.encode("utf-8")).hexdigest()
    return f"_{variable_name}_{digest}"
