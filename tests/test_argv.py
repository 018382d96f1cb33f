# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for command-line word parsing."""

from __future__ import annotations

import pytest

from optnorm import normalize_cli_options
from optnorm.argv import parse_argv


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["--tab-width", "4", "file.js"], {"_": ["file.js"], "tab-width": "4"}),
        (["--tab-width=4"], {"_": [], "tab-width": "4"}),
        (["--semi", "file.js"], {"_": ["file.js"], "semi": True}),
        (["--no-semi"], {"_": [], "semi": False}),
        (["--semi=false"], {"_": [], "semi": False}),
        (["-h"], {"_": [], "h": ""}),
        (["--unknown"], {"_": [], "unknown": True}),
        (["--tab-width", "-2"], {"_": [], "tab-width": "-2"}),
        (["-p", "a", "-ab"], {"_": [], "p": "a", "a": True, "b": True}),
        (["--", "--semi", "x"], {"_": ["--semi", "x"]}),
    ],
)
def test_parse_argv(option_infos, argv: list[str], expected: dict[str, object]) -> None:
    assert parse_argv(argv, option_infos) == expected


def test_repeated_options_collect_into_lists(option_infos) -> None:
    result = parse_argv(["--plugin", "a", "--plugin", "b", "--plugin=c"], option_infos)

    assert result == {"_": [], "plugin": ["a", "b", "c"]}


def test_parsed_argv_normalizes(option_infos, logger) -> None:
    """Parser output feeds the command-line entry point directly."""

    raw = parse_argv(["--tab-width", "2", "--no-semi", "-p", "x", "src"], option_infos)

    assert normalize_cli_options(raw, option_infos, {"logger": logger}) == {
        "_": ["src"],
        "tab-width": 2,
        "semi": False,
        "plugin": ["x"],
    }
