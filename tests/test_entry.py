#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Entry 测试
"""

import dataclasses
import os
import stat
from datetime import datetime, timezone

import pytest

from embedfs import Entry
from embedfs.core.entry import DEFAULT_DIR_MODE


class TestEntry:
    """Entry 元信息访问"""

    def test_file_entry(self):
        """普通文件条目"""
        entry = Entry("/c/d.txt", stat.S_IFREG | 0o640, 10, 500, b"abc")

        assert entry.name == "d.txt"
        assert entry.size == 3
        assert not entry.is_dir
        assert entry.perm == 0o640
        assert entry.mtime_ns == 10 * 1_000_000_000 + 500

    def test_directory_entry(self):
        """合成目录条目"""
        entry = Entry.directory("/c")

        assert entry.is_dir
        assert entry.size == 0
        assert entry.mode == DEFAULT_DIR_MODE
        assert entry.mtime_sec == 0

    def test_root_name(self):
        """根目录名称为 /"""
        assert Entry.directory("/").name == "/"

    def test_mod_time(self):
        """修改时间转换为 UTC datetime"""
        entry = Entry("/x", stat.S_IFREG | 0o644, 1700000000, 123456789)
        expected = datetime(2023, 11, 14, 22, 13, 20, 123456, tzinfo=timezone.utc)
        assert entry.mod_time == expected

    def test_frozen(self):
        """条目不可修改"""
        entry = Entry.directory("/c")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.path = "/d"

    def test_from_stat(self, tmp_path):
        """由 os.stat_result 构造，保留模式与纳秒时间"""
        path = tmp_path / "f.txt"
        path.write_bytes(b"data")
        st = os.stat(path)

        entry = Entry.from_stat("/f.txt", st, b"data")

        assert entry.mode == st.st_mode
        assert entry.mtime_ns == st.st_mtime_ns
        assert 0 <= entry.mtime_nsec < 1_000_000_000
        assert entry.data == b"data"

    def test_from_stat_directory_drops_data(self, tmp_path):
        """目录条目不携带数据"""
        entry = Entry.from_stat("/", os.stat(tmp_path), b"ignored")
        assert entry.is_dir
        assert entry.data == b""
