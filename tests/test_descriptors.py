# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for key/value rendering strategies."""

from __future__ import annotations

import pytest

from optnorm.descriptors import API_DESCRIPTOR, CLI_DESCRIPTOR, Descriptor


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (False, "--no-foo"),
        (True, "--foo"),
        ("", "--foo without an argument"),
        ("y", "--foo=y"),
        (4, "--foo=4"),
    ],
)
def test_cli_pair_uses_flag_syntax(value: object, expected: str) -> None:
    """Booleans and empty strings render as flags rather than key=value."""

    assert CLI_DESCRIPTOR.pair("foo", value) == expected


def test_cli_pair_joins_list_values() -> None:
    """List values read like a comma-separated command-line argument."""

    assert CLI_DESCRIPTOR.pair("plugin", ["a", "b"]) == "--plugin=a,b"
    assert CLI_DESCRIPTOR.pair("plugin", ["a", None, 2, True]) == "--plugin=a,,2,true"
    assert CLI_DESCRIPTOR.pair("p", ["a"]) == "-p=a"


def test_cli_single_letter_keys_render_as_short_flags() -> None:
    assert CLI_DESCRIPTOR.key("x") == "-x"
    assert CLI_DESCRIPTOR.pair("x", True) == "-x"
    assert CLI_DESCRIPTOR.pair("x", False) == "--no-x"
    assert CLI_DESCRIPTOR.key("tab-width") == "--tab-width"


def test_cli_values_render_like_api_values() -> None:
    assert CLI_DESCRIPTOR.value("a") == '"a"'
    assert CLI_DESCRIPTOR.value([1, True]) == "[1, true]"


def test_api_key_quotes_non_identifiers() -> None:
    assert API_DESCRIPTOR.key("tabWidth") == "tabWidth"
    assert API_DESCRIPTOR.key("$scope") == "$scope"
    assert API_DESCRIPTOR.key("tab-width") == '"tab-width"'


def test_api_values_render_as_literals() -> None:
    """Values follow JSON spelling with spaced containers."""

    assert API_DESCRIPTOR.value("a") == '"a"'
    assert API_DESCRIPTOR.value(None) == "null"
    assert API_DESCRIPTOR.value(False) == "false"
    assert API_DESCRIPTOR.value(2.5) == "2.5"
    assert API_DESCRIPTOR.value(["a", 1]) == '["a", 1]'
    assert API_DESCRIPTOR.value({}) == "{}"
    assert API_DESCRIPTOR.value({"a": [True], "b-c": None}) == '{ a: [true], "b-c": null }'


def test_api_pair_renders_an_object_literal() -> None:
    assert API_DESCRIPTOR.pair("semi", False) == "{ semi: false }"


def test_strategies_satisfy_descriptor_protocol() -> None:
    assert isinstance(API_DESCRIPTOR, Descriptor)
    assert isinstance(CLI_DESCRIPTOR, Descriptor)
