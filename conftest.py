#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from pathlib import Path

import pytest

test_types = ["unit"]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register the -T option to pytest"""
    parser.addoption(
        "-T",
        action="store",
        metavar="TYPE",
        default=None,
        help="Run tests of the given TYPE. Available types are: %s" % ", ".join(test_types),
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", "type(TYPE): Mark TYPE of test. Available: %s" % ", ".join(test_types)
    )


def pytest_collection_modifyitems(items: list[pytest.Item], config: pytest.Config) -> None:
    """Mark collected test types based on their location below tests/"""
    tests_dir = Path(__file__).parent / "tests"
    for item in items:
        type_marker = item.get_closest_marker("type")
        if type_marker and type_marker.args:
            continue  # Do not modify manually set marks
        file_path = Path("%s" % item.reportinfo()[0])
        if not file_path.is_relative_to(tests_dir):
            continue  # doctests of the package
        ty = file_path.relative_to(tests_dir).parts[0]
        if ty not in test_types:
            raise Exception(f"Test in {file_path} not TYPE marked: {item!r} ({ty!r})")
        item.add_marker(pytest.mark.type.with_args(ty))


def pytest_runtest_setup(item: pytest.Item) -> None:
    """Skip tests of unwanted types"""
    wanted = item.config.getoption("-T")
    test_type = item.get_closest_marker("type")
    if wanted and test_type is not None and test_type.args[0] != wanted:
        pytest.skip("Not testing type %r" % test_type.args[0])
