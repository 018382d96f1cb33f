# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option descriptor models consumed by the schema builder."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Final

from .errors import OptionConfigurationError, OptionInfoError
from .types import ExceptionPredicate, JSONPrimitive, JSONValue
from .utils import expect_mapping, expect_sequence, expect_string, optional_bool, optional_string


class OptionKind(str, Enum):
    """Enumerate the option kinds understood by the schema builder."""

    INTEGER = "int"
    CHOICE = "choice"
    BOOLEAN = "boolean"
    FLAG = "flag"
    PATH = "path"


_OPTION_KINDS: Final[dict[str, OptionKind]] = {kind.value: kind for kind in OptionKind}


def normalize_option_type(value: object, *, context: str) -> OptionKind:
    """Return the option kind named by ``value``.

    Args:
        value: Raw ``type`` attribute of an option descriptor.
        context: Human-readable context used in error messages.

    Returns:
        OptionKind: Kind whose value equals ``value`` exactly.

    Raises:
        OptionConfigurationError: If ``value`` does not name a known kind.

    """

    if isinstance(value, OptionKind):
        return value
    if isinstance(value, str) and value in _OPTION_KINDS:
        return _OPTION_KINDS[value]
    raise OptionConfigurationError(f"{context}: unexpected type {value!r}")


def _deprecation_marker(value: JSONValue | None, *, context: str) -> bool | str:
    """Return the deprecation marker (flag or version string) carried by ``value``."""

    if value is None:
        return False
    if isinstance(value, (bool, str)):
        return value
    raise OptionInfoError(f"{context}: expected 'deprecated' to be a boolean or version string")


@dataclass(frozen=True, slots=True)
class RedirectInfo:
    """Target option/value pair an option setting is moved onto."""

    option: str
    value: JSONValue

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> RedirectInfo:
        """Create redirect metadata from JSON data.

        Args:
            data: Mapping with ``option`` and ``value`` keys.
            context: Human-readable context used in error messages.

        Returns:
            RedirectInfo: Materialised redirect target.

        Raises:
            OptionInfoError: If ``option`` is missing or not a string.

        """

        option_value = expect_string(data.get("option"), key="option", context=context)
        return RedirectInfo(option=option_value, value=data.get("value"))


@dataclass(frozen=True, slots=True)
class ChoiceInfo:
    """One allowed value of a choice option."""

    value: JSONPrimitive
    description: str | None = None
    deprecated: bool | str = False
    redirect: JSONPrimitive = None

    @staticmethod
    def from_value(data: JSONValue, *, context: str) -> ChoiceInfo:
        """Create a choice from either a bare value or a choice record.

        Args:
            data: Scalar choice value or mapping with ``value`` and metadata.
            context: Human-readable context used in error messages.

        Returns:
            ChoiceInfo: Frozen choice definition.

        Raises:
            OptionInfoError: If the record carries malformed metadata.

        """

        if isinstance(data, ChoiceInfo):
            return data
        if not isinstance(data, Mapping):
            if data is not None and not isinstance(data, (str, int, float, bool)):
                raise OptionInfoError(f"{context}: expected a scalar choice value")
            return ChoiceInfo(value=data)
        value = data.get("value")
        redirect = data.get("redirect")
        if isinstance(value, (Mapping, list, tuple)) or isinstance(redirect, (Mapping, list, tuple)):
            raise OptionInfoError(f"{context}: choice values must be scalars")
        return ChoiceInfo(
            value=value,
            description=optional_string(data.get("description"), key="description", context=context),
            deprecated=_deprecation_marker(data.get("deprecated"), context=context),
            redirect=redirect,
        )


@dataclass(frozen=True, slots=True)
class OptionInfo:
    """Declarative description of one configurable option.

    ``option_type`` is kept verbatim; it is resolved to an :class:`OptionKind`
    when schemas are built so that descriptor lists can be assembled before
    they are checked.
    """

    name: str
    option_type: str | OptionKind
    array: bool = False
    alias: str | None = None
    choices: tuple[ChoiceInfo, ...] = ()
    description: str | None = None
    opposite_description: str | None = None
    exception: ExceptionPredicate | None = None
    redirect: RedirectInfo | None = None
    deprecated: bool | str = False

    @staticmethod
    def from_mapping(data: Mapping[str, object], *, context: str) -> OptionInfo:
        """Create an ``OptionInfo`` from descriptor data.

        Args:
            data: Mapping using the descriptor keys (``name``, ``type``,
                ``array``, ``alias``, ``choices``, ``description``,
                ``oppositeDescription``, ``exception``, ``redirect``,
                ``deprecated``).
            context: Human-readable context used in error messages.

        Returns:
            OptionInfo: Frozen descriptor instance.

        Raises:
            OptionInfoError: If required metadata is missing or malformed.

        """

        name_value = expect_string(data.get("name"), key="name", context=context)
        type_value = data.get("type")
        if not isinstance(type_value, (str, OptionKind)):
            raise OptionInfoError(f"{context}: expected 'type' to be a string")
        exception_value = data.get("exception")
        if exception_value is not None and not callable(exception_value):
            raise OptionInfoError(f"{context}: expected 'exception' to be callable")
        redirect_data = data.get("redirect")
        redirect_value = (
            RedirectInfo.from_mapping(
                expect_mapping(redirect_data, key="redirect", context=context),
                context=f"{context}.redirect",
            )
            if redirect_data is not None
            else None
        )
        choices_data = data.get("choices")
        choices_value: tuple[ChoiceInfo, ...] = ()
        if choices_data is not None:
            choices_value = tuple(
                ChoiceInfo.from_value(element, context=f"{context}.choices[{index}]")
                for index, element in enumerate(expect_sequence(choices_data, key="choices", context=context))
            )
        return OptionInfo(
            name=name_value,
            option_type=type_value,
            array=optional_bool(data.get("array"), key="array", context=context),
            alias=optional_string(data.get("alias"), key="alias", context=context),
            choices=choices_value,
            description=optional_string(data.get("description"), key="description", context=context),
            opposite_description=optional_string(
                data.get("oppositeDescription"),
                key="oppositeDescription",
                context=context,
            ),
            exception=exception_value,
            redirect=redirect_value,
            deprecated=_deprecation_marker(data.get("deprecated"), context=context),
        )


def option_infos_array(value: object, *, key: str, context: str) -> tuple[OptionInfo, ...]:
    """Return a tuple of option descriptors parsed from ``value``.

    Args:
        value: Raw value that should describe a list of option descriptors.
            Entries that already are :class:`OptionInfo` are kept as-is.
        key: Name of the key currently being parsed.
        context: Human-readable context used in error messages.

    Returns:
        tuple[OptionInfo, ...]: Immutable option descriptors.

    Raises:
        OptionInfoError: If the value is not a sequence of descriptor mappings
            or two descriptors share a name.

    """

    if value is None:
        return ()
    infos: list[OptionInfo] = []
    seen: set[str] = set()
    for index, element in enumerate(expect_sequence(value, key=key, context=context)):  # type: ignore[arg-type]
        if isinstance(element, OptionInfo):
            info = element
        else:
            element_mapping = expect_mapping(element, key=f"{key}[{index}]", context=context)
            info = OptionInfo.from_mapping(element_mapping, context=f"{context}.{key}[{index}]")
        if info.name in seen:
            raise OptionInfoError(f"{context}.{key}[{index}]: duplicate option name '{info.name}'")
        seen.add(info.name)
        infos.append(info)
    return tuple(infos)


__all__: Final[tuple[str, ...]] = (
    "ChoiceInfo",
    "OptionInfo",
    "OptionKind",
    "RedirectInfo",
    "normalize_option_type",
    "option_infos_array",
)
