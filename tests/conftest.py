# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from optnorm.descriptors import API_DESCRIPTOR
from optnorm.distance import levenshtein
from optnorm.logging import Message, plain
from optnorm.model_options import ChoiceInfo, OptionInfo, RedirectInfo
from optnorm.schemas import SchemaUtils


@dataclass
class RecordingLogger:
    """Collect warnings as plain strings."""

    messages: list[str] = field(default_factory=list)

    def warn(self, message: Message) -> None:
        self.messages.append(plain(message))


@pytest.fixture
def logger() -> RecordingLogger:
    """Return a logger recording every warning it receives."""
    return RecordingLogger()


@pytest.fixture
def schema_utils(logger: RecordingLogger) -> SchemaUtils:
    """Return schema hook collaborators using the API descriptor."""
    return SchemaUtils(
        descriptor=API_DESCRIPTOR,
        logger=logger,
        schemas={},
        distance=levenshtein,
        suggestion_distance=3,
    )


@pytest.fixture
def option_infos() -> list[OptionInfo]:
    """Return a formatter-like descriptor list covering every option kind."""
    return [
        OptionInfo(
            name="help",
            option_type="flag",
            alias="h",
            description="Show help.",
            exception=lambda value: value == "",
        ),
        OptionInfo(name="tab-width", option_type="int", description="Spaces per indentation level."),
        OptionInfo(
            name="parser",
            option_type="choice",
            description="Which parser to use.",
            choices=(
                ChoiceInfo(value="babel"),
                ChoiceInfo(value="flow"),
                ChoiceInfo(value="css"),
                ChoiceInfo(value="postcss", deprecated=True, redirect="css"),
            ),
        ),
        OptionInfo(
            name="semi",
            option_type="boolean",
            description="Print semicolons.",
            opposite_description="Do not print semicolons.",
        ),
        OptionInfo(name="plugin", option_type="path", array=True, alias="p"),
        OptionInfo(
            name="use-flow-parser",
            option_type="boolean",
            deprecated=True,
            redirect=RedirectInfo(option="parser", value="flow"),
        ),
    ]
