#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Generator 测试
"""

import io
import os

import pytest

from embedfs import Generator, InvalidArgumentError, NotFoundError


class TestGenerator:
    """Generator 基础功能"""

    def test_generate(self, scenario_tree, load_generated):
        gen = Generator(strip_prefix="a")
        gen.add("a")

        assert gen.entry_count == 3
        fs = load_generated(gen.generate())
        assert fs.read_bytes("/b.txt") == b"hi"

    def test_write_stream(self, scenario_tree, load_generated):
        gen = Generator(variable_name="Static", compressed=True, strip_prefix="a")
        gen.add("a")

        buf = io.StringIO()
        gen.write(buf)

        fs = load_generated(buf.getvalue(), "Static")
        assert fs.compressed
        assert fs.read_bytes("/b.txt") == b"hi"

    def test_write_file(self, scenario_tree, import_generated):
        gen = Generator(strip_prefix="a")
        gen.add("a")

        output = scenario_tree / "out" / "assets.py"
        gen.write_file(str(output))

        module = import_generated(output)
        assert module.Assets.read_bytes("/b.txt") == b"hi"
        assert module.__all__ == ["Assets"]

    def test_failed_run_leaves_no_file(self, scenario_tree):
        """生成失败时不创建输出文件"""
        gen = Generator()
        gen.add("a")
        os.remove("a/b.txt")

        output = scenario_tree / "assets.py"
        with pytest.raises(OSError):
            gen.write_file(str(output))
        assert not output.exists()

    def test_add_all_stops_at_first_error(self, scenario_tree):
        gen = Generator()
        with pytest.raises(NotFoundError):
            gen.add_all(["a", "missing", "a/b.txt"])
        assert gen.entry_count == 3

    def test_invalid_variable(self):
        with pytest.raises(InvalidArgumentError):
            Generator(variable_name="not valid")

    def test_exclude_patterns(self, sample_files, load_generated):
        src, _ = sample_files
        gen = Generator(strip_prefix=src, exclude_patterns=["*.json"])
        gen.add(src)

        fs = load_generated(gen.generate())
        assert "/config.json" not in fs
        assert "/index.html" in fs

    def test_options_exposed(self):
        gen = Generator(package_name="web", compressed=True)
        assert gen.options.package_name == "web"
        assert gen.options.variable_name == "Assets"
        assert gen.options.compressed
        assert len(gen.collector) == 0
