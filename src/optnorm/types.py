# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for option normalisation."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

OptionValue: TypeAlias = object
OptionMapping: TypeAlias = Mapping[str, OptionValue]
ExceptionPredicate: TypeAlias = Callable[[OptionValue], object]
DistanceFunction: TypeAlias = Callable[[str, str], int]

REST_ARGS_KEY: Final[str] = "_"
DEFAULT_SUGGESTION_DISTANCE: Final[int] = 3

__all__ = [
    "DEFAULT_SUGGESTION_DISTANCE",
    "REST_ARGS_KEY",
    "DistanceFunction",
    "ExceptionPredicate",
    "JSONPrimitive",
    "JSONValue",
    "OptionMapping",
    "OptionValue",
]
