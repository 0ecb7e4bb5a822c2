#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
pytest 全局配置

提供共享 fixtures 和测试工具。
"""

import importlib.util
import itertools
import stat
from pathlib import Path

import pytest

from embedfs import Entry, FileSystem


# ==================== 目录树 Fixtures ====================

@pytest.fixture
def scenario_tree(tmp_path, monkeypatch):
    """
    最小场景: a/b.txt ("hi") 与空目录 a/c

    切换工作目录到 tmp_path，便于使用相对路径 "a"。
    """
    root = tmp_path / "a"
    root.mkdir()
    (root / "b.txt").write_bytes(b"hi")
    (root / "c").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sample_files(tmp_path, monkeypatch) -> tuple:
    """
    创建测试文件集 (位于 tmp_path/static)

    Returns:
        (目录相对路径 "static", 文件内容字典)
    """
    files = {
        "index.html": b"<html><body>hello</body></html>",
        "config.json": b'{"name": "test", "value": 123}',
        "img/logo.bin": bytes(range(256)),
        "img/icons/empty.txt": b"",
        "docs/nested/deep.txt": b"Deep nested file content\n",
        "中文文件.txt": "这是中文内容测试".encode("utf-8"),
    }

    base = tmp_path / "static"
    for name, content in files.items():
        path = base / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
    (base / "empty_dir").mkdir()

    monkeypatch.chdir(tmp_path)
    return "static", files


@pytest.fixture
def memory_fs() -> FileSystem:
    """
    直接构造的内存文件系统

    /
    ├── b.txt   ("hello world")
    ├── c/
    │   └── d.txt ("nested")
    └── e/      (空目录)
    """
    file_mode = stat.S_IFREG | 0o644
    return FileSystem(
        dirs={
            "/": ["b.txt", "c", "e"],
            "/c": ["d.txt"],
            "/e": [],
        },
        entries={
            "/": Entry.directory("/"),
            "/b.txt": Entry("/b.txt", file_mode, 1700000000, 123456789, b"hello world"),
            "/c": Entry.directory("/c"),
            "/c/d.txt": Entry("/c/d.txt", file_mode, 1700000001, 0, b"nested"),
            "/e": Entry.directory("/e"),
        },
    )


# ==================== 生成源码工具 ====================

_module_counter = itertools.count()


@pytest.fixture
def load_generated():
    """
    执行生成的源码并返回其中的 FileSystem 变量

    Usage:
        fs = load_generated(source)
        fs = load_generated(source, "MyAssets")
    """
    def _load(source: str, variable_name: str = "Assets") -> FileSystem:
        namespace = {}
        exec(compile(source, "<generated>", "exec"), namespace)
        return namespace[variable_name]

    return _load


@pytest.fixture
def import_generated():
    """
    把生成的源码文件作为真实模块导入

    每次使用唯一的模块名，避免 sys.modules 缓存干扰。
    """
    def _import(path: Path):
        name = f"_embedfs_generated_{next(_module_counter)}"
        spec = importlib.util.spec_from_file_location(name, str(path))
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    return _import
