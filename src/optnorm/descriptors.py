# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Strategies rendering option keys and values inside messages."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Final, Protocol, runtime_checkable

_IDENTIFIER_RE: Final[re.Pattern[str]] = re.compile(r"^[$_a-zA-Z][$_a-zA-Z0-9]*$")


@runtime_checkable
class Descriptor(Protocol):
    """Render option keys, values and key/value pairs as text."""

    def key(self, key: str) -> str:
        """Return the display form of the option name ``key``."""

    def value(self, value: object) -> str:
        """Return the display form of the option value ``value``."""

    def pair(self, key: str, value: object) -> str:
        """Return the display form of ``key`` set to ``value``."""


@dataclass(frozen=True, slots=True)
class ApiDescriptor:
    """Render options the way they are written in a programmatic call."""

    def key(self, key: str) -> str:
        return key if _IDENTIFIER_RE.match(key) else json.dumps(key, ensure_ascii=False)

    def value(self, value: object) -> str:
        if value is None or isinstance(value, (str, bool, int, float)):
            return json.dumps(value, ensure_ascii=False)
        if isinstance(value, Mapping):
            if not value:
                return "{}"
            entries = ", ".join(f"{self.key(str(key))}: {self.value(item)}" for key, item in value.items())
            return f"{{ {entries} }}"
        if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
            return f"[{', '.join(self.value(item) for item in value)}]"
        return repr(value)

    def pair(self, key: str, value: object) -> str:
        return self.value({key: value})


@dataclass(frozen=True, slots=True)
class CliDescriptor:
    """Render options the way they are written on a command line.

    Single-character names render as short flags (``-x``), longer names as
    long flags (``--name``). Booleans and the empty string render using flag
    syntax rather than ``key=value``. List values render comma-joined
    without quotes.
    """

    def key(self, key: str) -> str:
        return f"-{key}" if len(key) == 1 else f"--{key}"

    def value(self, value: object) -> str:
        return API_DESCRIPTOR.value(value)

    def pair(self, key: str, value: object) -> str:
        if value is False:
            return f"--no-{key}"
        if value is True:
            return self.key(key)
        if value == "":
            return f"{self.key(key)} without an argument"
        return f"{self.key(key)}={self._interpolate(value)}"

    def _interpolate(self, value: object) -> str:
        # lists join with bare commas: ["a", "b"] reads as a,b
        if isinstance(value, str):
            return value
        if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
            return ",".join("" if item is None else self._interpolate(item) for item in value)
        return self.value(value)


API_DESCRIPTOR: Final[ApiDescriptor] = ApiDescriptor()
CLI_DESCRIPTOR: Final[CliDescriptor] = CliDescriptor()

__all__ = [
    "API_DESCRIPTOR",
    "CLI_DESCRIPTOR",
    "ApiDescriptor",
    "CliDescriptor",
    "Descriptor",
]
