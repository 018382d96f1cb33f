# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the schema-driven normalisation engine."""

from __future__ import annotations

import pytest

from optnorm.descriptors import CLI_DESCRIPTOR
from optnorm.engine import Normalizer, normalize
from optnorm.errors import InvalidOptionValueError, OptionNormalizationError
from optnorm.schemas import (
    ArraySchema,
    BooleanSchema,
    Choice,
    ChoiceSchema,
    IntegerSchema,
    RedirectTarget,
    SchemaUtils,
    StringSchema,
)


def test_valid_options_are_returned_unchanged(logger) -> None:
    schemas = [IntegerSchema(name="size"), BooleanSchema(name="semi")]

    assert normalize({"size": 2, "semi": False}, schemas, logger=logger) == {"size": 2, "semi": False}
    assert logger.messages == []


def test_absent_keys_stay_absent(logger) -> None:
    assert normalize({}, [IntegerSchema(name="size")], logger=logger) == {}


def test_invalid_value_raises_with_details(logger) -> None:
    """Validation failures carry the key, the rejected value and the expectation."""

    with pytest.raises(InvalidOptionValueError) as excinfo:
        normalize({"size": True}, [IntegerSchema(name="size")], logger=logger)

    error = excinfo.value
    assert str(error) == "Invalid size value. Expected an integer, but received true."
    assert error.key == "size"
    assert error.value is True
    assert error.expected == "an integer"
    assert isinstance(error, OptionNormalizationError)


def test_invalid_message_uses_cli_rendering(logger) -> None:
    with pytest.raises(InvalidOptionValueError, match=r"^Invalid --tab-width value\. Expected a string"):
        normalize({"tab-width": 4}, [StringSchema(name="tab-width")], logger=logger, descriptor=CLI_DESCRIPTOR)


def test_array_error_reports_only_rejected_elements(logger) -> None:
    schema = ArraySchema(name="sizes", value_schema=IntegerSchema(name="sizes"))

    with pytest.raises(InvalidOptionValueError) as excinfo:
        normalize({"sizes": [1, "b", 2]}, [schema], logger=logger)

    assert excinfo.value.value == ["b"]
    assert str(excinfo.value) == 'Invalid sizes value. Expected an array of an integer, but received ["b"].'


def test_choice_expected_lists_visible_values_sorted(schema_utils: SchemaUtils) -> None:
    schema = ChoiceSchema(
        name="quote",
        choices=(Choice(value="b"), Choice(value="a"), Choice(value="c"), Choice(value="z", deprecated=True)),
    )

    assert schema.expected(schema_utils) == '"a", "b" or "c"'


def test_choice_match_distinguishes_booleans_from_numbers(schema_utils: SchemaUtils) -> None:
    schema = ChoiceSchema(name="level", choices=(Choice(value=1), Choice(value="auto")))

    assert schema.validate(1, schema_utils) is True
    assert schema.validate(True, schema_utils) is False
    assert schema.expected(schema_utils) == '1 or "auto"'


def test_deprecated_choice_redirects_and_warns(logger) -> None:
    schema = ChoiceSchema(
        name="parser",
        choices=(
            Choice(value="css"),
            Choice(value="postcss", deprecated=True, redirect=RedirectTarget(key="parser", value="css")),
        ),
    )

    assert normalize({"parser": "postcss"}, [schema], logger=logger) == {"parser": "css"}
    assert logger.messages == ['{ parser: "postcss" } is deprecated; we now treat it as { parser: "css" }.']


def test_deprecation_warnings_are_emitted_once_per_normalizer(logger) -> None:
    schema = ChoiceSchema(name="parser", choices=(Choice(value="a"), Choice(value="old", deprecated=True)))
    normalizer = Normalizer(schemas=[schema], logger=logger)

    assert normalizer.normalize({"parser": "old"}) == {"parser": "old"}
    assert normalizer.normalize({"parser": "old"}) == {"parser": "old"}
    assert logger.messages == ['{ parser: "old" } is deprecated.']


def test_unknown_option_warns_with_suggestion(logger) -> None:
    schemas = [BooleanSchema(name="semi"), IntegerSchema(name="size")]

    assert normalize({"semii": True}, schemas, logger=logger) == {}
    assert logger.messages == ["Ignored unknown option { semii: true }. Did you mean semi?"]


def test_unknown_option_without_close_match(logger) -> None:
    assert normalize({"zzzzzz": 1}, [BooleanSchema(name="semi")], logger=logger) == {}
    assert logger.messages == ["Ignored unknown option { zzzzzz: 1 }."]


def test_unknown_handler_may_feed_known_options(logger) -> None:
    """Known keys returned by the unknown handler are normalised in a later pass."""

    def legacy(key: str, value: object, utils: SchemaUtils) -> dict[str, object]:
        del utils
        return {"size": int(str(value))} if key == "legacy-size" else {key: value}

    result = normalize(
        {"legacy-size": "4", "extra": "kept"},
        [IntegerSchema(name="size")],
        logger=logger,
        unknown=legacy,
    )

    assert result == {"size": 4, "extra": "kept"}


def test_unknown_handler_result_is_validated(logger) -> None:
    def bad(key: str, value: object, utils: SchemaUtils) -> dict[str, object]:
        del key, value, utils
        return {"size": "x"}

    with pytest.raises(InvalidOptionValueError):
        normalize({"other": 1}, [IntegerSchema(name="size")], logger=logger, unknown=bad)


def test_custom_distance_function_drives_suggestions(logger) -> None:
    def never_close(left: str, right: str) -> int:
        del left, right
        return 100

    normalize({"semii": True}, [BooleanSchema(name="semi")], logger=logger, distance=never_close)

    assert logger.messages == ["Ignored unknown option { semii: true }."]


def test_integer_schema_accepts_whole_floats(schema_utils: SchemaUtils) -> None:
    schema = IntegerSchema(name="size")

    assert schema.validate(4.0, schema_utils) is True
    assert schema.validate(4.5, schema_utils) is False
    assert schema.validate(True, schema_utils) is False
    assert schema.preprocess(4.0, schema_utils) == 4
    assert type(schema.preprocess(4.0, schema_utils)) is int
    assert schema.preprocess(4.5, schema_utils) == 4.5
