# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Translate option descriptors into the schemas the engine validates against."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .errors import OptionConfigurationError
from .flag_schema import FlagSchema
from .model_options import ChoiceInfo, OptionInfo, OptionKind, normalize_option_type
from .policy import OptionHandlers, ValidationPolicy
from .schemas import (
    AliasSchema,
    AnySchema,
    ArraySchema,
    BooleanSchema,
    Choice,
    ChoiceSchema,
    IntegerSchema,
    OptionSchema,
    RedirectTarget,
    StringSchema,
)
from .types import REST_ARGS_KEY, OptionValue

LOGGER = logging.getLogger(__name__)


def option_infos_to_schemas(option_infos: Sequence[OptionInfo], *, is_cli: bool) -> list[OptionSchema]:
    """Return the ordered schema list for ``option_infos``.

    Command-line mode adds a catch-all ``_`` schema for positional arguments
    and one alias schema per descriptor declaring an ``alias``.

    Args:
        option_infos: Every option descriptor known to the caller.
        is_cli: Whether the options come from a command line.

    Returns:
        list[OptionSchema]: Schemas in descriptor order.

    Raises:
        OptionConfigurationError: If a descriptor declares an unknown type.
    """

    schemas: list[OptionSchema] = []
    if is_cli:
        schemas.append(AnySchema(name=REST_ARGS_KEY))
    for option_info in option_infos:
        schemas.append(option_info_to_schema(option_info, is_cli=is_cli, option_infos=option_infos))
        if option_info.alias and is_cli:
            schemas.append(AliasSchema(name=option_info.alias, source_name=option_info.name))
    LOGGER.debug("built %d schemas from %d option descriptors", len(schemas), len(option_infos))
    return schemas


def option_info_to_schema(
    option_info: OptionInfo,
    *,
    is_cli: bool,
    option_infos: Sequence[OptionInfo],
) -> OptionSchema:
    """Return the schema validating ``option_info``.

    Args:
        option_info: Descriptor to translate.
        is_cli: Whether values come from a command line (enables string
            coercion for integers and scalar wrapping for arrays).
        option_infos: Full descriptor list, used to gather flag names.

    Returns:
        OptionSchema: Schema wrapped with the descriptor's validation policy and,
        where declared, its array, redirect and deprecation rules.

    Raises:
        OptionConfigurationError: If ``option_info`` declares an unknown type.
    """

    kind = normalize_option_type(option_info.option_type, context=f"option '{option_info.name}'")
    base: OptionSchema
    coerce = None
    match kind:
        case OptionKind.INTEGER:
            base = IntegerSchema(name=option_info.name)
            if is_cli:
                coerce = parse_number
        case OptionKind.CHOICE:
            base = ChoiceSchema(
                name=option_info.name,
                choices=tuple(_to_choice(option_info.name, choice) for choice in option_info.choices),
            )
        case OptionKind.BOOLEAN:
            base = BooleanSchema(name=option_info.name)
        case OptionKind.FLAG:
            base = FlagSchema(name=option_info.name, flags=collect_flag_names(option_infos))
        case OptionKind.PATH:
            base = StringSchema(name=option_info.name)
        case _:
            raise OptionConfigurationError(f"option '{option_info.name}': unexpected type {kind!r}")

    schema: OptionSchema = ValidationPolicy(schema=base, exception=option_info.exception, coerce=coerce)
    if option_info.array:
        schema = ArraySchema(name=option_info.name, value_schema=schema, wrap_scalars=is_cli)
    if option_info.redirect is not None or option_info.deprecated:
        redirect_to = (
            RedirectTarget(key=option_info.redirect.option, value=option_info.redirect.value)
            if option_info.redirect is not None
            else None
        )
        schema = OptionHandlers(schema=schema, redirect_to=redirect_to, is_deprecated=bool(option_info.deprecated))
    return schema


def collect_flag_names(option_infos: Sequence[OptionInfo]) -> list[str]:
    """Return every name a flag-typed option may refer to.

    Each descriptor contributes its alias, its own name when it carries a
    description, and ``no-<name>`` when it carries an opposite description.

    Args:
        option_infos: Full descriptor list.

    Returns:
        list[str]: Flag names in descriptor order.
    """

    flags: list[str] = []
    for option_info in option_infos:
        if option_info.alias:
            flags.append(option_info.alias)
        if option_info.description:
            flags.append(option_info.name)
        if option_info.opposite_description:
            flags.append(f"no-{option_info.name}")
    return flags


def parse_number(value: OptionValue) -> OptionValue:
    """Return ``value`` converted to a number when it is a numeric string.

    Integral results are returned as ``int`` (``"4"`` and ``"4.0"`` both give
    ``4``); strings that are not numbers are returned unchanged so validation
    reports the original text.
    """

    if not isinstance(value, str):
        return value
    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return value
    return int(number) if number.is_integer() else number


def _to_choice(option_name: str, choice_info: ChoiceInfo) -> Choice:
    redirect = (
        RedirectTarget(key=option_name, value=choice_info.redirect) if choice_info.redirect is not None else None
    )
    return Choice(value=choice_info.value, deprecated=bool(choice_info.deprecated), redirect=redirect)


__all__ = [
    "collect_flag_names",
    "option_info_to_schema",
    "option_infos_to_schemas",
    "parse_number",
]
