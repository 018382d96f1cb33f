# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Schema for options whose values name other command-line flags."""

from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text

from .distance import closest_match
from .schemas import (
    Choice,
    ChoiceSchema,
    DeprecationResult,
    RedirectResult,
    SchemaUtils,
    ValidationResult,
)
from .types import OptionValue


class FlagSchema:
    """Accept one known flag name, correcting near misses with a warning.

    Membership is checked against the flags exactly as given; suggestions are
    searched in sorted order so the first close flag alphabetically wins.
    """

    __slots__ = ("_choices", "_flags", "name")

    def __init__(self, *, name: str, flags: Iterable[str]) -> None:
        """Create the schema for option ``name`` accepting ``flags``.

        Args:
            name: Option name validated by this schema.
            flags: Every legal flag name.
        """

        given = tuple(flags)
        self.name = name
        self._choices = ChoiceSchema(name=name, choices=tuple(Choice(value=flag) for flag in given))
        self._flags = tuple(sorted(given))

    @property
    def flags(self) -> tuple[str, ...]:
        """Return the known flag names in sorted order."""

        return self._flags

    def preprocess(self, value: OptionValue, utils: SchemaUtils) -> OptionValue:
        """Return ``value``, or the closest known flag when ``value`` is unknown.

        Args:
            value: Raw option value.
            utils: Normalisation collaborators (logger, descriptor, distance).

        Returns:
            OptionValue: Suggested flag when one is within the suggestion
            distance, otherwise ``value`` unchanged.
        """

        if not isinstance(value, str) or not value or value in self._flags:
            return value
        suggestion = closest_match(
            value,
            self._flags,
            distance=utils.distance,
            limit=utils.suggestion_distance,
        )
        if suggestion is None:
            return value
        utils.logger.warn(
            Text.assemble(
                "Unknown flag ",
                (utils.descriptor.value(value), "yellow"),
                ", did you mean ",
                (utils.descriptor.value(suggestion), "blue"),
                "?",
            ),
        )
        return suggestion

    def validate(self, value: OptionValue, utils: SchemaUtils) -> ValidationResult:
        return self._choices.validate(value, utils)

    def expected(self, utils: SchemaUtils) -> str:
        del utils
        return "a flag"

    def deprecated(self, value: OptionValue, utils: SchemaUtils) -> DeprecationResult:
        return self._choices.deprecated(value, utils)

    def redirect(self, value: OptionValue, utils: SchemaUtils) -> RedirectResult:
        return self._choices.redirect(value, utils)

    def postprocess(self, value: OptionValue, utils: SchemaUtils) -> OptionValue:
        return self._choices.postprocess(value, utils)

    def overlap(self, current: OptionValue, new: OptionValue, utils: SchemaUtils) -> OptionValue:
        return self._choices.overlap(current, new, utils)


__all__ = ["FlagSchema"]
