# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for option descriptor parsing."""

from __future__ import annotations

import pytest

from optnorm.errors import OptionConfigurationError, OptionInfoError
from optnorm.model_options import (
    ChoiceInfo,
    OptionInfo,
    OptionKind,
    RedirectInfo,
    normalize_option_type,
    option_infos_array,
)


def test_from_mapping_reads_every_field() -> None:
    """Descriptor mappings use the camelCase keys of descriptor documents."""

    info = OptionInfo.from_mapping(
        {
            "name": "parser",
            "type": "choice",
            "alias": "P",
            "description": "Parser to use.",
            "oppositeDescription": "No parser.",
            "deprecated": "2.0.0",
            "redirect": {"option": "language", "value": "js"},
            "choices": ["babel", {"value": "postcss", "deprecated": True, "redirect": "css"}],
        },
        context="test",
    )

    assert info.name == "parser"
    assert info.option_type == "choice"
    assert info.alias == "P"
    assert info.opposite_description == "No parser."
    assert info.deprecated == "2.0.0"
    assert info.redirect == RedirectInfo(option="language", value="js")
    assert info.choices == (
        ChoiceInfo(value="babel"),
        ChoiceInfo(value="postcss", deprecated=True, redirect="css"),
    )
    assert info.array is False


def test_from_mapping_requires_a_name() -> None:
    with pytest.raises(OptionInfoError, match="expected 'name' to be a string"):
        OptionInfo.from_mapping({"type": "int"}, context="test")


def test_from_mapping_rejects_non_callable_exception() -> None:
    with pytest.raises(OptionInfoError, match="'exception' to be callable"):
        OptionInfo.from_mapping({"name": "a", "type": "int", "exception": "yes"}, context="test")


def test_from_mapping_keeps_callable_exception() -> None:
    def predicate(value: object) -> bool:
        return value == "x"

    info = OptionInfo.from_mapping({"name": "a", "type": "int", "exception": predicate}, context="test")

    assert info.exception is predicate


def test_choice_values_must_be_scalars() -> None:
    with pytest.raises(OptionInfoError, match="scalar"):
        ChoiceInfo.from_value({"value": "a", "redirect": ["b"]}, context="test")
    with pytest.raises(OptionInfoError, match="scalar"):
        ChoiceInfo.from_value(["a"], context="test")


def test_option_infos_array_rejects_duplicate_names() -> None:
    with pytest.raises(OptionInfoError, match="duplicate option name 'semi'"):
        option_infos_array(
            [{"name": "semi", "type": "boolean"}, OptionInfo(name="semi", option_type="boolean")],
            key="options",
            context="test",
        )


def test_option_infos_array_keeps_existing_infos() -> None:
    info = OptionInfo(name="semi", option_type="boolean")

    assert option_infos_array([info], key="options", context="test") == (info,)
    assert option_infos_array(None, key="options", context="test") == ()


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("int", OptionKind.INTEGER),
        ("boolean", OptionKind.BOOLEAN),
        ("choice", OptionKind.CHOICE),
        ("flag", OptionKind.FLAG),
        ("path", OptionKind.PATH),
        (OptionKind.FLAG, OptionKind.FLAG),
    ],
)
def test_normalize_option_type(raw: object, expected: OptionKind) -> None:
    assert normalize_option_type(raw, context="test") is expected


@pytest.mark.parametrize("raw", ["number", "", None, 3, "INT", "Boolean", "bool", "str", "integer"])
def test_normalize_option_type_rejects_unknown(raw: object) -> None:
    with pytest.raises(OptionConfigurationError, match="unexpected type"):
        normalize_option_type(raw, context="test")


def test_from_mapping_requires_boolean_array_flag() -> None:
    with pytest.raises(OptionInfoError, match="expected 'array' to be a boolean"):
        OptionInfo.from_mapping({"name": "plugin", "type": "path", "array": "yes"}, context="test")
