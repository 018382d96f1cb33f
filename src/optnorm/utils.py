# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Utility helpers for validating option descriptor JSON structures."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .errors import OptionInfoError
from .types import JSONValue


def expect_string(value: JSONValue | None, *, key: str, context: str) -> str:
    """Return ``value`` as ``str`` or raise a descriptor error.

    Args:
        value: Raw JSON value extracted from the descriptor payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str: Value as a string.

    Raises:
        OptionInfoError: If ``value`` is not a string.
    """
    if not isinstance(value, str):
        raise OptionInfoError(f"{context}: expected '{key}' to be a string")
    return value


def optional_string(value: JSONValue | None, *, key: str, context: str) -> str | None:
    """Return ``value`` as an optional string with validation.

    Args:
        value: Raw JSON value extracted from the descriptor payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str | None: ``value`` when present, otherwise ``None``.

    Raises:
        OptionInfoError: If ``value`` is present but not a string.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise OptionInfoError(f"{context}: expected '{key}' to be a string if present")
    return value


def optional_bool(
    value: JSONValue | None,
    *,
    key: str,
    context: str,
    default: bool = False,
) -> bool:
    """Return ``value`` as ``bool`` falling back to ``default`` when absent.

    Args:
        value: Raw JSON value extracted from the descriptor payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.
        default: Value returned when ``value`` is ``None``.

    Returns:
        bool: Boolean value derived from ``value`` or ``default``.

    Raises:
        OptionInfoError: If ``value`` is neither ``None`` nor a bool.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    raise OptionInfoError(f"{context}: expected '{key}' to be a boolean")


def expect_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, JSONValue]:
    """Return ``value`` as a mapping of JSON values or raise an error.

    Args:
        value: Raw JSON value extracted from the descriptor payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        Mapping[str, JSONValue]: ``value`` narrowed to a mapping.

    Raises:
        OptionInfoError: If ``value`` is not a mapping.
    """
    if not isinstance(value, Mapping):
        raise OptionInfoError(f"{context}: expected '{key}' to be an object")
    return value


def expect_sequence(value: JSONValue | None, *, key: str, context: str) -> Sequence[JSONValue]:
    """Return ``value`` as a non-string sequence or raise an error."""
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise OptionInfoError(f"{context}: expected '{key}' to be an array")
    return value


def is_sequence(value: object) -> bool:
    """Return ``True`` when ``value`` is a list-like, non-string sequence."""

    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


__all__ = [
    "expect_mapping",
    "expect_sequence",
    "expect_string",
    "is_sequence",
    "optional_bool",
    "optional_string",
]
