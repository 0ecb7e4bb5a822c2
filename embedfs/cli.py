#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
命令行入口

    python -m embedfs [-o assets.py] [--compress] [--strip-prefix static] static/
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .exceptions import EmbedFSError
from .generator import DEFAULT_PACKAGE_NAME, DEFAULT_VARIABLE_NAME, Generator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="embedfs",
        description="把文件和目录嵌入到一个 Python 模块中，导入后得到只读内存文件系统",
    )
    parser.add_argument("paths", nargs="+", help="要嵌入的文件或目录")
    parser.add_argument(
        "-o", "--output",
        help="输出文件路径 (默认写到标准输出)",
    )
    parser.add_argument(
        "-p", "--package", default=DEFAULT_PACKAGE_NAME,
        help=f"生成模块的包名 (默认 {DEFAULT_PACKAGE_NAME})",
    )
    parser.add_argument(
        "-n", "--variable", default=DEFAULT_VARIABLE_NAME,
        help=f"导出的文件系统变量名 (默认 {DEFAULT_VARIABLE_NAME})",
    )
    parser.add_argument(
        "-z", "--compress", action="store_true",
        help="使用 gzip 压缩文件内容",
    )
    parser.add_argument(
        "-s", "--strip-prefix", default="",
        help="从所有路径中去除的前缀",
    )
    parser.add_argument(
        "-x", "--exclude", action="append", default=[],
        help="排除匹配的文件名 (glob，可重复)",
    )
    parser.add_argument(
        "--no-sort", action="store_true",
        help="保留目录枚举顺序，不按名称排序",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="输出调试日志",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        gen = Generator(
            package_name=args.package,
            variable_name=args.variable,
            compressed=args.compress,
            strip_prefix=args.strip_prefix,
            exclude_patterns=args.exclude,
            sort_children=not args.no_sort,
        )
        gen.add_all(args.paths)

        if args.output:
            gen.write_file(args.output)
        else:
            gen.write(sys.stdout)
    except (EmbedFSError, OSError) as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
