# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema primitives validated by the normalisation engine.

Every schema exposes the same hooks (see :class:`OptionSchema`). Scalar type
checks are delegated to pydantic in strict mode so that, for example, ``True``
is never accepted where an integer is expected.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Final, Protocol, TypeAlias, runtime_checkable

from pydantic import StrictBool, StrictInt, StrictStr, TypeAdapter, ValidationError

from .descriptors import Descriptor
from .logging import OptionLogger
from .types import DistanceFunction, OptionValue
from .utils import is_sequence

_INTEGER_ADAPTER: Final[TypeAdapter[int]] = TypeAdapter(StrictInt)
_BOOLEAN_ADAPTER: Final[TypeAdapter[bool]] = TypeAdapter(StrictBool)
_STRING_ADAPTER: Final[TypeAdapter[str]] = TypeAdapter(StrictStr)


@dataclass(frozen=True, slots=True)
class SchemaUtils:
    """Collaborators handed to every schema hook during one normalisation."""

    descriptor: Descriptor
    logger: OptionLogger
    schemas: Mapping[str, OptionSchema]
    distance: DistanceFunction
    suggestion_distance: int


@dataclass(frozen=True, slots=True)
class Rejected:
    """Validation outcome naming the part of a value that was rejected."""

    value: OptionValue


ValidationResult: TypeAlias = bool | Rejected
DeprecationResult: TypeAlias = bool | tuple[OptionValue, ...]


@dataclass(frozen=True, slots=True)
class RedirectTarget:
    """Option/value pair a setting is moved onto."""

    key: str
    value: OptionValue


@dataclass(frozen=True, slots=True)
class Transfer:
    """A value moved away from its option onto ``target``."""

    source: OptionValue
    target: RedirectTarget


_NOTHING: Final = object()


@dataclass(frozen=True, slots=True)
class RedirectResult:
    """Outcome of a redirect hook: what stays on the option and what moves."""

    transfers: tuple[Transfer, ...] = ()
    remain: OptionValue = field(default=_NOTHING)

    @property
    def has_remain(self) -> bool:
        """Return ``True`` when part of the value stays on the option."""

        return self.remain is not _NOTHING

    @staticmethod
    def keep(value: OptionValue) -> RedirectResult:
        """Return a result leaving ``value`` on its option."""

        return RedirectResult(remain=value)

    @staticmethod
    def move(value: OptionValue, target: RedirectTarget) -> RedirectResult:
        """Return a result moving ``value`` onto ``target``."""

        return RedirectResult(transfers=(Transfer(source=value, target=target),))


@runtime_checkable
class OptionSchema(Protocol):
    """Hooks the normalisation engine calls for every option it recognises."""

    @property
    def name(self) -> str:
        """Return the option name this schema validates."""

    def preprocess(self, value: OptionValue, utils: SchemaUtils) -> OptionValue:
        """Return ``value`` rewritten before validation."""

    def validate(self, value: OptionValue, utils: SchemaUtils) -> ValidationResult:
        """Return ``True`` when ``value`` is acceptable."""

    def expected(self, utils: SchemaUtils) -> str:
        """Return a description of acceptable values for error messages."""

    def deprecated(self, value: OptionValue, utils: SchemaUtils) -> DeprecationResult:
        """Return ``True`` (whole option) or the deprecated values found in ``value``."""

    def redirect(self, value: OptionValue, utils: SchemaUtils) -> RedirectResult:
        """Return which part of ``value`` stays and which part moves elsewhere."""

    def postprocess(self, value: OptionValue, utils: SchemaUtils) -> OptionValue:
        """Return the final form of ``value`` once normalisation completed."""

    def overlap(self, current: OptionValue, new: OptionValue, utils: SchemaUtils) -> OptionValue:
        """Return the value kept when the option is assigned twice."""


@dataclass(frozen=True, slots=True)
class _BaseSchema:
    """Default hook implementations shared by the primitive schemas."""

    name: str

    def preprocess(self, value: OptionValue, utils: SchemaUtils) -> OptionValue:
        del utils
        return value

    def validate(self, value: OptionValue, utils: SchemaUtils) -> ValidationResult:
        del value, utils
        return True

    def expected(self, utils: SchemaUtils) -> str:
        del utils
        return "anything"

    def deprecated(self, value: OptionValue, utils: SchemaUtils) -> DeprecationResult:
        del value, utils
        return False

    def redirect(self, value: OptionValue, utils: SchemaUtils) -> RedirectResult:
        del utils
        return RedirectResult.keep(value)

    def postprocess(self, value: OptionValue, utils: SchemaUtils) -> OptionValue:
        del utils
        return value

    def overlap(self, current: OptionValue, new: OptionValue, utils: SchemaUtils) -> OptionValue:
        del current, utils
        return new


def _conforms(adapter: TypeAdapter[Any], value: OptionValue) -> bool:
    """Return ``True`` when ``value`` passes strict validation by ``adapter``."""

    try:
        adapter.validate_python(value, strict=True)
    except ValidationError:
        return False
    return True


@dataclass(frozen=True, slots=True)
class AnySchema(_BaseSchema):
    """Accept every value unchanged."""


def _integral(value: OptionValue) -> OptionValue:
    return int(value) if isinstance(value, float) and value.is_integer() else value


@dataclass(frozen=True, slots=True)
class IntegerSchema(_BaseSchema):
    """Accept integral numbers (booleans excluded).

    Floats with no fractional part, such as ``4.0`` read from JSON, count as
    integers and are normalised to ``int``.
    """

    def preprocess(self, value: OptionValue, utils: SchemaUtils) -> OptionValue:
        del utils
        return _integral(value)

    def validate(self, value: OptionValue, utils: SchemaUtils) -> ValidationResult:
        del utils
        return _conforms(_INTEGER_ADAPTER, _integral(value))

    def expected(self, utils: SchemaUtils) -> str:
        del utils
        return "an integer"


@dataclass(frozen=True, slots=True)
class BooleanSchema(_BaseSchema):
    """Accept ``True`` and ``False`` only."""

    def validate(self, value: OptionValue, utils: SchemaUtils) -> ValidationResult:
        del utils
        return _conforms(_BOOLEAN_ADAPTER, value)

    def expected(self, utils: SchemaUtils) -> str:
        del utils
        return "true or false"


@dataclass(frozen=True, slots=True)
class StringSchema(_BaseSchema):
    """Accept any string."""

    def validate(self, value: OptionValue, utils: SchemaUtils) -> ValidationResult:
        del utils
        return _conforms(_STRING_ADAPTER, value)

    def expected(self, utils: SchemaUtils) -> str:
        del utils
        return "a string"


@dataclass(frozen=True, slots=True)
class Choice:
    """Allowed value of a :class:`ChoiceSchema` with its handling rules."""

    value: OptionValue
    deprecated: bool = False
    redirect: RedirectTarget | None = None


def _choice_key(value: OptionValue) -> tuple[bool, OptionValue]:
    # keeps True and 1 apart while letting 1 and 1.0 match
    return isinstance(value, bool), value


def _sort_key(value: OptionValue) -> tuple[str, OptionValue]:
    return type(value).__name__, "" if value is None else value


@dataclass(frozen=True, slots=True)
class ChoiceSchema(_BaseSchema):
    """Accept one value out of a closed list of choices."""

    choices: tuple[Choice, ...]

    def find(self, value: OptionValue) -> Choice | None:
        """Return the choice equal to ``value``, if any."""

        key = _choice_key(value)
        return next((choice for choice in self.choices if _choice_key(choice.value) == key), None)

    def validate(self, value: OptionValue, utils: SchemaUtils) -> ValidationResult:
        del utils
        return self.find(value) is not None

    def expected(self, utils: SchemaUtils) -> str:
        visible = sorted((choice.value for choice in self.choices if not choice.deprecated), key=_sort_key)
        rendered = [utils.descriptor.value(value) for value in visible]
        head, tail = rendered[:-2], rendered[-2:]
        return ", ".join([*head, " or ".join(tail)])

    def deprecated(self, value: OptionValue, utils: SchemaUtils) -> DeprecationResult:
        del utils
        choice = self.find(value)
        return (value,) if choice is not None and choice.deprecated else False

    def redirect(self, value: OptionValue, utils: SchemaUtils) -> RedirectResult:
        del utils
        choice = self.find(value)
        if choice is not None and choice.redirect is not None:
            return RedirectResult.move(value, choice.redirect)
        return RedirectResult.keep(value)


@dataclass(frozen=True, slots=True)
class ArraySchema(_BaseSchema):
    """Accept a list whose elements all satisfy ``value_schema``.

    With ``wrap_scalars`` set, a lone value is turned into a one-element list
    before validation, the way repeated command-line flags collapse.
    """

    value_schema: OptionSchema
    wrap_scalars: bool = False

    def preprocess(self, value: OptionValue, utils: SchemaUtils) -> OptionValue:
        if self.wrap_scalars and not is_sequence(value):
            value = [value]
        if not is_sequence(value):
            return value
        return [self.value_schema.preprocess(item, utils) for item in value]  # type: ignore[union-attr]

    def validate(self, value: OptionValue, utils: SchemaUtils) -> ValidationResult:
        if not is_sequence(value):
            return False
        invalid: list[OptionValue] = []
        for item in value:  # type: ignore[union-attr]
            result = self.value_schema.validate(item, utils)
            if result is True:
                continue
            invalid.append(item if result is False else result.value)  # type: ignore[union-attr]
        return True if not invalid else Rejected(invalid)

    def expected(self, utils: SchemaUtils) -> str:
        return f"an array of {self.value_schema.expected(utils)}"

    def deprecated(self, value: OptionValue, utils: SchemaUtils) -> DeprecationResult:
        found: list[OptionValue] = []
        for item in value if is_sequence(value) else ():  # type: ignore[union-attr]
            result = self.value_schema.deprecated(item, utils)
            if result is True:
                found.append([item])
            elif result is not False:
                found.extend([entry] for entry in result)
        return tuple(found)

    def redirect(self, value: OptionValue, utils: SchemaUtils) -> RedirectResult:
        remain: list[OptionValue] = []
        transfers: list[Transfer] = []
        for item in value if is_sequence(value) else ():  # type: ignore[union-attr]
            result = self.value_schema.redirect(item, utils)
            if result.has_remain:
                remain.append(result.remain)
            transfers.extend(Transfer(source=[entry.source], target=entry.target) for entry in result.transfers)
        if not remain:
            return RedirectResult(transfers=tuple(transfers))
        return RedirectResult(transfers=tuple(transfers), remain=remain)

    def postprocess(self, value: OptionValue, utils: SchemaUtils) -> OptionValue:
        if not is_sequence(value):
            return value
        return [self.value_schema.postprocess(item, utils) for item in value]  # type: ignore[union-attr]

    def overlap(self, current: OptionValue, new: OptionValue, utils: SchemaUtils) -> OptionValue:
        del utils
        return [*_as_list(current), *_as_list(new)]


def _as_list(value: OptionValue) -> list[OptionValue]:
    return list(value) if is_sequence(value) else [value]  # type: ignore[call-overload]


@dataclass(frozen=True, slots=True)
class AliasSchema(_BaseSchema):
    """Forward values given under an alternate name to ``source_name``."""

    source_name: str

    def _source(self, utils: SchemaUtils) -> OptionSchema:
        return utils.schemas[self.source_name]

    def preprocess(self, value: OptionValue, utils: SchemaUtils) -> OptionValue:
        return self._source(utils).preprocess(value, utils)

    def validate(self, value: OptionValue, utils: SchemaUtils) -> ValidationResult:
        return self._source(utils).validate(value, utils)

    def expected(self, utils: SchemaUtils) -> str:
        return self._source(utils).expected(utils)

    def redirect(self, value: OptionValue, utils: SchemaUtils) -> RedirectResult:
        del utils
        return RedirectResult.move(value, RedirectTarget(key=self.source_name, value=value))


def schema_index(schemas: Sequence[OptionSchema]) -> dict[str, OptionSchema]:
    """Return ``schemas`` keyed by name; later entries win on duplicates."""

    return {schema.name: schema for schema in schemas}


__all__ = [
    "AliasSchema",
    "AnySchema",
    "ArraySchema",
    "BooleanSchema",
    "Choice",
    "ChoiceSchema",
    "DeprecationResult",
    "IntegerSchema",
    "OptionSchema",
    "RedirectResult",
    "RedirectTarget",
    "Rejected",
    "SchemaUtils",
    "StringSchema",
    "Transfer",
    "ValidationResult",
    "schema_index",
]
