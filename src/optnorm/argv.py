# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Split a command line into the raw option mapping fed to the normaliser."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Final

from .errors import OptionConfigurationError
from .model_options import OptionInfo, OptionKind, normalize_option_type
from .types import REST_ARGS_KEY, OptionValue

_NEGATIVE_NUMBER_RE: Final[re.Pattern[str]] = re.compile(r"^-\d+(\.\d+)?$")
_BOOLEAN_TEXT: Final[dict[str, bool]] = {"true": True, "false": False}


def _boolean_names(option_infos: Sequence[OptionInfo]) -> frozenset[str]:
    names: set[str] = set()
    for option_info in option_infos:
        try:
            kind = normalize_option_type(option_info.option_type, context=option_info.name)
        except OptionConfigurationError:
            continue
        if kind is OptionKind.BOOLEAN:
            names.add(option_info.name)
            if option_info.alias:
                names.add(option_info.alias)
    return frozenset(names)


def _declared_names(option_infos: Sequence[OptionInfo]) -> frozenset[str]:
    names = {option_info.name for option_info in option_infos}
    names.update(option_info.alias for option_info in option_infos if option_info.alias)
    return frozenset(names)


def _takes_value(token: str) -> bool:
    return token == "-" or not token.startswith("-") or bool(_NEGATIVE_NUMBER_RE.match(token))


class _ArgvState:
    """Accumulate parsed options; repeated options collect into lists."""

    __slots__ = ("options", "rest")

    def __init__(self) -> None:
        self.options: dict[str, OptionValue] = {}
        self.rest: list[str] = []

    def assign(self, key: str, value: OptionValue) -> None:
        if key not in self.options:
            self.options[key] = value
            return
        current = self.options[key]
        if isinstance(current, list):
            current.append(value)
        else:
            self.options[key] = [current, value]


def parse_argv(argv: Sequence[str], option_infos: Sequence[OptionInfo]) -> dict[str, OptionValue]:
    """Return the raw option mapping described by ``argv``.

    Supported forms are ``--name=value``, ``--name value``, ``--name``,
    ``--no-name``, ``-x value`` and grouped short booleans such as ``-ab``.
    Boolean options never consume the following word; declared non-boolean
    options given without a value receive the empty string, undeclared ones
    ``True``. Bare words and everything after ``--`` are collected under ``_``.

    Args:
        argv: Command-line words, program name excluded.
        option_infos: Descriptors used to tell boolean options apart.

    Returns:
        dict[str, OptionValue]: Raw options keyed by the name as typed
        (aliases are resolved later by normalisation).
    """

    booleans = _boolean_names(option_infos)
    declared = _declared_names(option_infos)
    state = _ArgvState()

    def missing_value(key: str) -> OptionValue:
        return "" if key in declared and key not in booleans else True

    def convert(key: str, raw: str) -> OptionValue:
        if key in booleans and raw in _BOOLEAN_TEXT:
            return _BOOLEAN_TEXT[raw]
        return raw

    index = 0
    while index < len(argv):
        token = argv[index]
        following = argv[index + 1] if index + 1 < len(argv) else None
        if token == "--":
            state.rest.extend(argv[index + 1 :])
            break
        if token.startswith("--"):
            body = token[2:]
            if "=" in body:
                key, raw = body.split("=", 1)
                state.assign(key, convert(key, raw))
            elif body.startswith("no-") and len(body) > 3:
                state.assign(body[3:], False)
            elif body not in booleans and following is not None and _takes_value(following):
                state.assign(body, following)
                index += 1
            else:
                state.assign(body, True if body in booleans else missing_value(body))
        elif token.startswith("-") and token != "-" and not _NEGATIVE_NUMBER_RE.match(token):
            letters = token[1:]
            if "=" in letters:
                key, raw = letters.split("=", 1)
                state.assign(key, convert(key, raw))
            else:
                for letter in letters[:-1]:
                    state.assign(letter, True)
                last = letters[-1]
                if last not in booleans and following is not None and _takes_value(following):
                    state.assign(last, following)
                    index += 1
                else:
                    state.assign(last, True if last in booleans else missing_value(last))
        else:
            state.rest.append(token)
        index += 1

    return {REST_ARGS_KEY: state.rest, **state.options}


__all__ = ["parse_argv"]
