# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public entry points normalising programmatic and command-line options."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .builder import option_infos_to_schemas
from .descriptors import API_DESCRIPTOR, CLI_DESCRIPTOR
from .distance import levenshtein
from .engine import UnknownHandler, normalize, suggest_unknown_handler
from .logging import OptionLogger
from .model_options import OptionInfo, option_infos_array
from .schemas import SchemaUtils
from .types import DEFAULT_SUGGESTION_DISTANCE, DistanceFunction, OptionMapping, OptionValue
from .utils import is_sequence

LOGGER = logging.getLogger(__name__)


class NormalizeSettings(BaseModel):
    """Settings controlling one normalisation call."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    logger: OptionLogger
    is_cli: bool = False
    pass_through: bool | tuple[str, ...] = False
    suggestion_distance: int = Field(default=DEFAULT_SUGGESTION_DISTANCE, ge=1)
    distance: DistanceFunction = levenshtein

    @field_validator("pass_through", mode="before")
    @classmethod
    def _coerce_pass_through(cls, value: object) -> object:
        """Return ``value`` as a name tuple or a plain boolean.

        Args:
            value: Raw pass-through policy. Lists, tuples and sets name the
                unknown options to keep; any other value is read for truth.

        Returns:
            object: Tuple of names (element types are validated afterwards)
            or ``True``/``False``.
        """

        if isinstance(value, bool):
            return value
        if is_sequence(value) or isinstance(value, (set, frozenset)):
            return tuple(value)  # type: ignore[arg-type]
        return bool(value)


SettingsInput = NormalizeSettings | Mapping[str, object]


def _coerce_settings(opts: SettingsInput) -> NormalizeSettings:
    if isinstance(opts, NormalizeSettings):
        return opts
    return NormalizeSettings.model_validate(dict(opts))


def unknown_handler_for(pass_through: bool | tuple[str, ...]) -> UnknownHandler:
    """Return the handler applied to options no schema recognises.

    Args:
        pass_through: ``False`` to warn and drop unknown options, a tuple of
            names to keep only those, anything else truthy to keep them all.

    Returns:
        UnknownHandler: Handler passed to the engine.
    """

    if isinstance(pass_through, tuple):
        allowed = frozenset(pass_through)

        def keep_listed(key: str, value: OptionValue, utils: SchemaUtils) -> Mapping[str, OptionValue] | None:
            del utils
            return {key: value} if key in allowed else None

        return keep_listed
    if pass_through:

        def keep_all(key: str, value: OptionValue, utils: SchemaUtils) -> Mapping[str, OptionValue]:
            del utils
            return {key: value}

        return keep_all
    return suggest_unknown_handler


def normalize_options(
    options: OptionMapping,
    option_infos: Sequence[OptionInfo | Mapping[str, object]],
    settings: SettingsInput,
) -> dict[str, OptionValue]:
    """Normalise ``options`` against the schemas built from ``option_infos``.

    Args:
        options: Raw option mapping (command-line mode also accepts ``_``).
        option_infos: Option descriptors, as :class:`OptionInfo` or mappings.
        settings: Logger, mode and unknown-option policy.

    Returns:
        dict[str, OptionValue]: Coerced and validated options with redirects
        applied.

    Raises:
        OptionConfigurationError: If a descriptor declares an unknown type.
        OptionInfoError: If a descriptor mapping is malformed.
        InvalidOptionValueError: If a value fails validation.
    """

    resolved = _coerce_settings(settings)
    infos = option_infos_array(option_infos, key="option_infos", context="normalize")
    schemas = option_infos_to_schemas(infos, is_cli=resolved.is_cli)
    LOGGER.debug("normalizing %d option(s) in %s mode", len(options), "cli" if resolved.is_cli else "api")
    return normalize(
        options,
        schemas,
        logger=resolved.logger,
        unknown=unknown_handler_for(resolved.pass_through),
        descriptor=CLI_DESCRIPTOR if resolved.is_cli else API_DESCRIPTOR,
        distance=resolved.distance,
        suggestion_distance=resolved.suggestion_distance,
    )


def normalize_api_options(
    options: OptionMapping,
    option_infos: Sequence[OptionInfo | Mapping[str, object]],
    opts: SettingsInput,
) -> dict[str, OptionValue]:
    """Normalise options passed through a programmatic call."""

    settings = _coerce_settings(opts).model_copy(update={"is_cli": False})
    return normalize_options(options, option_infos, settings)


def normalize_cli_options(
    options: OptionMapping,
    option_infos: Sequence[OptionInfo | Mapping[str, object]],
    opts: SettingsInput,
) -> dict[str, OptionValue]:
    """Normalise options parsed from a command line.

    Command-line conventions apply unless ``opts`` sets ``is_cli`` explicitly:
    aliases, the positional ``_`` bucket, string-to-number and scalar-to-list
    coercion, and flag-style rendering in messages.
    """

    settings = _coerce_settings(opts)
    if "is_cli" not in settings.model_fields_set:
        settings = settings.model_copy(update={"is_cli": True})
    return normalize_options(options, option_infos, settings)


__all__ = [
    "NormalizeSettings",
    "normalize_api_options",
    "normalize_cli_options",
    "normalize_options",
    "unknown_handler_for",
]
