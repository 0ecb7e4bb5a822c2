#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
内置源码规范化 Hook 实现

基于标准库 ast: 解析校验语法，再按统一格式重新输出。
"""

import ast

from .base import SourceFormatHook
from ..exceptions import CanonicalizationError


class AstFormatHook(SourceFormatHook):
    """
    使用 ast.parse + ast.unparse 规范化

    注释不会保留，生成的说明文字应放在模块 docstring 中。
    """

    def format(self, source: str) -> str:
        try:
            tree = ast.parse(source, filename="<embedfs>", mode="exec")
        except SyntaxError as e:
            raise CanonicalizationError(
                f"生成的源码无法解析: {e.msg}", e.lineno
            ) from e
        return ast.unparse(tree) + "\n"


class ValidateOnlyFormatHook(SourceFormatHook):
    """
    只校验语法，保留原始排版

    适合需要保留生成器手工排版 (每个条目一行) 的场景。
    """

    def format(self, source: str) -> str:
        try:
            compile(source, "<embedfs>", "exec", flags=ast.PyCF_ONLY_AST)
        except SyntaxError as e:
            raise CanonicalizationError(
                f"生成的源码无法解析: {e.msg}", e.lineno
            ) from e
        if not source.endswith("\n"):
            source += "\n"
        return source
