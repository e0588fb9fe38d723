# -*- coding: utf-8 -*-
"""
Packaging Tests
"""

import re
from pathlib import Path

import parser

PROJECT_ROOT = Path(__file__).parent.parent


def test_parser_package_is_the_project_one():
    assert Path(parser.__file__).resolve().parent == (PROJECT_ROOT / "parser").resolve()
    assert hasattr(parser, "load_catalog")


def test_python_floor_excludes_stdlib_parser_module():
    pyproject = (PROJECT_ROOT / "pyproject.toml").read_text(encoding="utf-8")

    match = re.search(r'requires-python\s*=\s*">=(\d+)\.(\d+)"', pyproject)

    assert match is not None
    assert (int(match.group(1)), int(match.group(2))) >= (3, 10)
