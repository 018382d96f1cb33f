# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-option validation policies wrapped around schema primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .schemas import (
    DeprecationResult,
    OptionSchema,
    RedirectResult,
    RedirectTarget,
    SchemaUtils,
    ValidationResult,
)
from .types import ExceptionPredicate, OptionValue


@dataclass(frozen=True, slots=True)
class ValidationPolicy:
    """Validate single values with ``schema`` under descriptor overrides.

    ``exception`` accepts values the base schema would reject. Without it,
    ``None`` (an absent value) is always accepted. ``coerce`` rewrites raw
    input before the base schema sees it.
    """

    schema: OptionSchema
    exception: ExceptionPredicate | None = None
    coerce: Callable[[OptionValue], OptionValue] | None = None

    @property
    def name(self) -> str:
        return self.schema.name

    def preprocess(self, value: OptionValue, utils: SchemaUtils) -> OptionValue:
        if self.coerce is not None:
            value = self.coerce(value)
        return self.schema.preprocess(value, utils)

    def validate(self, value: OptionValue, utils: SchemaUtils) -> ValidationResult:
        if self.exception is not None:
            return True if self.exception(value) else self.schema.validate(value, utils)
        return value is None or self.schema.validate(value, utils)

    def expected(self, utils: SchemaUtils) -> str:
        return self.schema.expected(utils)

    def deprecated(self, value: OptionValue, utils: SchemaUtils) -> DeprecationResult:
        return self.schema.deprecated(value, utils)

    def redirect(self, value: OptionValue, utils: SchemaUtils) -> RedirectResult:
        return self.schema.redirect(value, utils)

    def postprocess(self, value: OptionValue, utils: SchemaUtils) -> OptionValue:
        return self.schema.postprocess(value, utils)

    def overlap(self, current: OptionValue, new: OptionValue, utils: SchemaUtils) -> OptionValue:
        return self.schema.overlap(current, new, utils)


@dataclass(frozen=True, slots=True)
class OptionHandlers:
    """Attach option-level redirect and deprecation rules to ``schema``.

    A truthy value of an option carrying ``redirect`` moves onto the target
    option; falsy values stay where they are. ``deprecated`` marks every use of
    the option, replacing value-level deprecations of the wrapped schema.
    """

    schema: OptionSchema
    redirect_to: RedirectTarget | None = None
    is_deprecated: bool = False

    @property
    def name(self) -> str:
        return self.schema.name

    def preprocess(self, value: OptionValue, utils: SchemaUtils) -> OptionValue:
        return self.schema.preprocess(value, utils)

    def validate(self, value: OptionValue, utils: SchemaUtils) -> ValidationResult:
        return self.schema.validate(value, utils)

    def expected(self, utils: SchemaUtils) -> str:
        return self.schema.expected(utils)

    def deprecated(self, value: OptionValue, utils: SchemaUtils) -> DeprecationResult:
        if self.is_deprecated:
            return True
        return self.schema.deprecated(value, utils)

    def redirect(self, value: OptionValue, utils: SchemaUtils) -> RedirectResult:
        if self.redirect_to is None:
            return self.schema.redirect(value, utils)
        if not value:
            return RedirectResult.keep(value)
        return RedirectResult.move(value, self.redirect_to)

    def postprocess(self, value: OptionValue, utils: SchemaUtils) -> OptionValue:
        return self.schema.postprocess(value, utils)

    def overlap(self, current: OptionValue, new: OptionValue, utils: SchemaUtils) -> OptionValue:
        return self.schema.overlap(current, new, utils)


__all__ = ["OptionHandlers", "ValidationPolicy"]
