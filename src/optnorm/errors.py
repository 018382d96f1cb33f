# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while normalising options."""

from __future__ import annotations


class OptionNormalizationError(RuntimeError):
    """Base class for every error raised by :mod:`optnorm`."""


class OptionConfigurationError(OptionNormalizationError):
    """Raised when an option descriptor cannot be turned into a schema."""


class OptionInfoError(OptionNormalizationError):
    """Raised when option descriptor metadata is malformed."""


class InvalidOptionValueError(OptionNormalizationError):
    """Raised when a supplied option value fails validation."""

    def __init__(self, message: str, *, key: str, value: object, expected: str) -> None:
        """Create the error for ``key`` holding the rejected ``value``.

        Args:
            message: Human-readable message rendered with the active descriptor.
            key: Option name whose value was rejected.
            value: Offending value (invalid elements only for array options).
            expected: Description of the values the schema accepts.
        """

        super().__init__(message)
        self.key = key
        self.value = value
        self.expected = expected


__all__ = (
    "InvalidOptionValueError",
    "OptionConfigurationError",
    "OptionInfoError",
    "OptionNormalizationError",
)
