# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Normalisation engine driving schemas over a raw option mapping."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

from rich.text import Text

from .descriptors import API_DESCRIPTOR, Descriptor
from .distance import closest_match, levenshtein
from .errors import InvalidOptionValueError
from .logging import OptionLogger
from .schemas import OptionSchema, RedirectTarget, SchemaUtils, schema_index
from .types import DEFAULT_SUGGESTION_DISTANCE, DistanceFunction, OptionMapping, OptionValue

LOGGER = logging.getLogger(__name__)

UnknownHandler: TypeAlias = Callable[[str, OptionValue, SchemaUtils], Mapping[str, OptionValue] | None]


def suggest_unknown_handler(key: str, value: OptionValue, utils: SchemaUtils) -> None:
    """Warn about an unknown option, naming the closest known option if any.

    The option is dropped from the result.

    Args:
        key: Unknown option name.
        value: Value supplied for ``key``.
        utils: Normalisation collaborators.
    """

    message = Text.assemble("Ignored unknown option ", (utils.descriptor.pair(key, value), "yellow"), ".")
    suggestion = closest_match(
        key,
        sorted(utils.schemas),
        distance=utils.distance,
        limit=utils.suggestion_distance,
    )
    if suggestion is not None:
        message.append_text(Text.assemble(" Did you mean ", (utils.descriptor.key(suggestion), "blue"), "?"))
    utils.logger.warn(message)


def invalid_value_error(key: str, value: OptionValue, expected: str, utils: SchemaUtils) -> InvalidOptionValueError:
    """Return the error raised when ``value`` fails validation for ``key``."""

    message = Text.assemble(
        "Invalid ",
        (utils.descriptor.key(key), "red"),
        " value. Expected ",
        (expected, "blue"),
        ", but received ",
        (utils.descriptor.value(value), "red"),
        ".",
    )
    return InvalidOptionValueError(message.plain, key=key, value=value, expected=expected)


def deprecation_message(
    key: str,
    value: OptionValue | None,
    redirect_to: RedirectTarget | None,
    utils: SchemaUtils,
    *,
    whole_option: bool,
) -> Text:
    """Return the warning shown when a deprecated option or value is used.

    Args:
        key: Option name.
        value: Deprecated value (ignored when ``whole_option`` is set).
        redirect_to: Where the setting was moved, if anywhere.
        utils: Normalisation collaborators.
        whole_option: Whether the option itself, not one value, is deprecated.

    Returns:
        Text: Styled message, e.g. ``--foo is deprecated; we now treat it as --bar.``
    """

    subject = utils.descriptor.key(key) if whole_option else utils.descriptor.pair(key, value)
    message = Text.assemble((subject, "yellow"), " is deprecated")
    if redirect_to is not None:
        message.append_text(
            Text.assemble("; we now treat it as ", (utils.descriptor.pair(redirect_to.key, redirect_to.value), "blue")),
        )
    message.append(".")
    return message


@dataclass(slots=True)
class Normalizer:
    """Normalise option mappings against a fixed list of schemas.

    Deprecation warnings are emitted at most once per option (or option/value
    pair) for the lifetime of the normaliser.
    """

    schemas: Sequence[OptionSchema]
    logger: OptionLogger
    descriptor: Descriptor = API_DESCRIPTOR
    unknown: UnknownHandler = suggest_unknown_handler
    distance: DistanceFunction = levenshtein
    suggestion_distance: int = DEFAULT_SUGGESTION_DISTANCE
    _utils: SchemaUtils = field(init=False, repr=False)
    _warned: set[str | tuple[str, str]] = field(init=False, repr=False, default_factory=set)

    def __post_init__(self) -> None:
        """Index the schemas by name and bundle the hook collaborators."""

        self._utils = SchemaUtils(
            descriptor=self.descriptor,
            logger=self.logger,
            schemas=schema_index(self.schemas),
            distance=self.distance,
            suggestion_distance=self.suggestion_distance,
        )

    def normalize(self, options: OptionMapping) -> dict[str, OptionValue]:
        """Return the validated, redirected form of ``options``.

        Args:
            options: Raw option mapping.

        Returns:
            dict[str, OptionValue]: Normalised options. Keys absent from
            ``options`` stay absent.

        Raises:
            InvalidOptionValueError: If a value fails its schema's validation.
        """

        normalized: dict[str, OptionValue] = {}
        pending: deque[OptionMapping] = deque([options])
        while pending:
            pending.extend(self._apply(pending.popleft(), normalized))
        schemas = self._utils.schemas
        for key, value in normalized.items():
            if key in schemas:
                normalized[key] = schemas[key].postprocess(value, self._utils)
        return normalized

    def _apply(self, options: OptionMapping, normalized: dict[str, OptionValue]) -> list[OptionMapping]:
        """Normalise one mapping into ``normalized`` and return transferred settings."""

        schemas = self._utils.schemas
        transferred: list[OptionMapping] = []
        known = [key for key in options if key in schemas]
        unknown = [key for key in options if key not in schemas]
        for key in known:
            schema = schemas[key]
            value = schema.preprocess(options[key], self._utils)
            result = schema.validate(value, self._utils)
            if result is not True:
                invalid = value if result is False else result.value  # type: ignore[union-attr]
                raise invalid_value_error(key, invalid, schema.expected(self._utils), self._utils)
            redirect = schema.redirect(value, self._utils)
            transferred.extend({transfer.target.key: transfer.target.value} for transfer in redirect.transfers)
            if redirect.has_remain:
                remain = redirect.remain
                normalized[key] = (
                    schema.overlap(normalized[key], remain, self._utils) if key in normalized else remain
                )
                self._warn_deprecated(schema, key, remain, None)
            for transfer in redirect.transfers:
                self._warn_deprecated(schema, key, transfer.source, transfer.target)

        for key in unknown:
            outcome = self.unknown(key, options[key], self._utils)
            if not outcome:
                continue
            for unknown_key, unknown_value in outcome.items():
                if unknown_key in schemas:
                    transferred.append({unknown_key: unknown_value})
                else:
                    normalized[unknown_key] = unknown_value
        if unknown:
            LOGGER.debug("handled %d unknown option(s): %s", len(unknown), ", ".join(unknown))
        return transferred

    def _warn_deprecated(
        self,
        schema: OptionSchema,
        key: str,
        value: OptionValue,
        redirect_to: RedirectTarget | None,
    ) -> None:
        result = schema.deprecated(value, self._utils)
        if result is False:
            return
        if result is True:
            if key in self._warned:
                return
            self._warned.add(key)
            self.logger.warn(deprecation_message(key, None, redirect_to, self._utils, whole_option=True))
            return
        for deprecated_value in result:
            marker = (key, self.descriptor.value(deprecated_value))
            if marker in self._warned:
                continue
            self._warned.add(marker)
            self.logger.warn(deprecation_message(key, deprecated_value, redirect_to, self._utils, whole_option=False))


def normalize(
    options: OptionMapping,
    schemas: Sequence[OptionSchema],
    *,
    logger: OptionLogger,
    unknown: UnknownHandler = suggest_unknown_handler,
    descriptor: Descriptor = API_DESCRIPTOR,
    distance: DistanceFunction = levenshtein,
    suggestion_distance: int = DEFAULT_SUGGESTION_DISTANCE,
) -> dict[str, OptionValue]:
    """Normalise ``options`` against ``schemas`` with a fresh :class:`Normalizer`."""

    normalizer = Normalizer(
        schemas=schemas,
        logger=logger,
        descriptor=descriptor,
        unknown=unknown,
        distance=distance,
        suggestion_distance=suggestion_distance,
    )
    return normalizer.normalize(options)


__all__ = [
    "Normalizer",
    "UnknownHandler",
    "deprecation_message",
    "invalid_value_error",
    "normalize",
    "suggest_unknown_handler",
]
