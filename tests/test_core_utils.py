#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Utils 模块测试

测试路径处理与标识符工具函数。
"""

import hashlib

import pytest

from embedfs.exceptions import InvalidArgumentError
from embedfs.utils import (
    base_name,
    blob_identifier,
    clean_local_path,
    join_path,
    normalize_path,
    parent_path,
    strip_prefix,
    validate_identifier,
)


# ==================== normalize_path 测试 ====================

class TestNormalizePath:
    """normalize_path 测试"""

    @pytest.mark.parametrize("input_path,expected", [
        ("a/b.txt", "/a/b.txt"),
        ("/a/b.txt", "/a/b.txt"),
        ("a\\b.txt", "/a/b.txt"),
        ("/a//c/", "/a/c"),
        ("//", "/"),
        ("", "/"),
        ("/", "/"),
    ])
    def test_absolute(self, input_path, expected):
        """默认以 / 开头"""
        assert normalize_path(input_path) == expected

    def test_relative(self):
        """absolute=False 去除开头斜杠"""
        assert normalize_path("/a/b/", absolute=False) == "a/b"
        assert normalize_path("/", absolute=False) == ""


class TestCleanLocalPath:
    """clean_local_path 测试"""

    @pytest.mark.parametrize("input_path,expected", [
        ("a", "a"),
        ("./a/", "a"),
        ("a/./b", "a/b"),
        ("a/../c", "c"),
        ("a\\b", "a/b"),
        ("", "."),
        (".", "."),
        ("/abs/dir/", "/abs/dir"),
    ])
    def test_clean(self, input_path, expected):
        assert clean_local_path(input_path) == expected


# ==================== strip_prefix 测试 ====================

class TestStripPrefix:
    """strip_prefix 测试"""

    @pytest.mark.parametrize("path,prefix,expected", [
        # 整段前缀
        ("a", "a", "/"),
        ("a/b.txt", "a", "/b.txt"),
        ("a/c/d", "a", "/c/d"),
        ("a/b.txt", "a/", "/b.txt"),
        # 不在前缀下的路径保持不变
        ("ab/c.txt", "a", "/ab/c.txt"),
        ("x/y", "a", "/x/y"),
        # 不去除前缀
        ("a/b.txt", "", "/a/b.txt"),
        # 多段前缀
        ("static/img/logo.png", "static/img", "/logo.png"),
        # 当前目录
        (".", ".", "/"),
        (".", "", "/"),
        ("x", ".", "/x"),
        # 绝对路径
        ("/srv/www/index.html", "/srv/www", "/index.html"),
    ])
    def test_strip(self, path, prefix, expected):
        assert strip_prefix(path, prefix) == expected


# ==================== 路径拼接测试 ====================

class TestPathHelpers:
    """join_path / parent_path / base_name 测试"""

    def test_join(self):
        assert join_path("/", "b.txt") == "/b.txt"
        assert join_path("/c", "d") == "/c/d"

    def test_parent(self):
        assert parent_path("/c/d") == "/c"
        assert parent_path("/b.txt") == "/"
        assert parent_path("/") == "/"

    def test_base_name(self):
        assert base_name("/c/d.txt") == "d.txt"
        assert base_name("/") == "/"


# ==================== 标识符测试 ====================

class TestIdentifiers:
    """validate_identifier / blob_identifier 测试"""

    @pytest.mark.parametrize("name", ["Assets", "_x", "my_assets2"])
    def test_valid_identifier(self, name):
        assert validate_identifier(name) == name

    @pytest.mark.parametrize("name", ["", "1abc", "a-b", "class", "a b"])
    def test_invalid_identifier(self, name):
        with pytest.raises(InvalidArgumentError):
            validate_identifier(name)

    def test_blob_identifier_format(self):
        """固定格式: _变量名_SHA1十六进制"""
        expected = "_Assets_" + hashlib.sha1(b"a/b.txt").hexdigest()
        assert blob_identifier("Assets", "a/b.txt") == expected

    def test_blob_identifier_depends_on_path_only(self):
        """不同路径得到不同标识符，相同路径结果稳定"""
        first = blob_identifier("Assets", "a/b.txt")
        assert first == blob_identifier("Assets", "a/b.txt")
        assert first != blob_identifier("Assets", "a/c.txt")

    def test_blob_identifier_is_identifier(self):
        """非 ASCII 路径也生成合法标识符"""
        ident = blob_identifier("Assets", "静态/文件.txt")
        assert ident.isidentifier()
        assert len(ident) == len("_Assets_") + 40
