# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading option descriptor documents and value files."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from functools import lru_cache
from pathlib import Path
from typing import Final, cast

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from .errors import OptionInfoError
from .model_options import OptionInfo, option_infos_array
from .types import JSONValue

OPTION_INFOS_SCHEMA_PATH: Final[Path] = Path(__file__).with_name("schema") / "option_infos.schema.json"


def load_document(path: Path) -> JSONValue:
    """Load a JSON document from disk.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        JSONValue: Parsed JSON value extracted from the document.

    Raises:
        FileNotFoundError: If the JSON document is missing.
        OptionInfoError: If the document cannot be parsed.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        try:
            return cast(JSONValue, json.load(stream))
        except json.JSONDecodeError as exc:
            raise OptionInfoError(f"{path}: failed to parse JSON ({exc.msg} at line {exc.lineno})") from exc


@lru_cache(maxsize=1)
def _option_infos_validator() -> Draft202012Validator:
    """Return the cached validator for option descriptor documents."""

    schema = load_document(OPTION_INFOS_SCHEMA_PATH)
    if not isinstance(schema, Mapping):
        raise OptionInfoError(f"{OPTION_INFOS_SCHEMA_PATH}: expected a JSON object")
    return Draft202012Validator(schema)


def validate_option_infos_document(document: JSONValue, *, context: str) -> Sequence[JSONValue]:
    """Validate ``document`` against the descriptor schema and return its option list.

    Args:
        document: Parsed descriptor document (a list or ``{"options": [...]}``).
        context: Human-readable context used in error messages.

    Returns:
        Sequence[JSONValue]: Raw option descriptor entries.

    Raises:
        OptionInfoError: If the document violates the schema.
    """

    error = best_match(_option_infos_validator().iter_errors(document))
    if error is not None:
        location = "".join(f"[{part!r}]" for part in error.absolute_path) or "<root>"
        raise OptionInfoError(f"{context}{location}: {error.message}")
    if isinstance(document, Mapping):
        return cast(Sequence[JSONValue], document["options"])
    return cast(Sequence[JSONValue], document)


def load_option_infos(path: Path) -> tuple[OptionInfo, ...]:
    """Load and validate the option descriptors stored at ``path``.

    Args:
        path: JSON document holding descriptors.

    Returns:
        tuple[OptionInfo, ...]: Descriptors in document order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        OptionInfoError: If the document is not valid JSON or violates the schema.
    """

    entries = validate_option_infos_document(load_document(path), context=str(path))
    return option_infos_array(entries, key="options", context=str(path))


def load_option_values(path: Path) -> dict[str, JSONValue]:
    """Load a JSON object of raw option values for a programmatic normalisation."""

    document = load_document(path)
    if not isinstance(document, Mapping):
        raise OptionInfoError(f"{path}: expected a JSON object of option values")
    return dict(document)


__all__ = [
    "OPTION_INFOS_SCHEMA_PATH",
    "load_document",
    "load_option_infos",
    "load_option_values",
    "validate_option_infos_document",
]
