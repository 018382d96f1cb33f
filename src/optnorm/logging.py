# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Message sinks used to surface normalisation warnings."""

from __future__ import annotations

import logging
from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Protocol, TypeAlias, runtime_checkable

import typer
from rich.console import Console
from rich.text import Text

Message: TypeAlias = Text | str


@runtime_checkable
class OptionLogger(Protocol):
    """Protocol describing the sink that receives normalisation warnings."""

    __slots__ = ()

    @abstractmethod
    def warn(self, message: Message) -> None:
        """Report a non-fatal problem found while normalising options.

        Args:
            message: Rich text (or plain string) describing the problem.
        """


def plain(message: Message) -> str:
    """Return ``message`` without any styling."""

    return message.plain if isinstance(message, Text) else message


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


@dataclass(slots=True)
class RichOptionLogger:
    """Render warnings and failures to a Rich console."""

    console: Console
    use_emoji: bool = True

    def warn(self, message: Message) -> None:
        """Print a warning ``message`` with the yellow warning prefix.

        Args:
            message: Rich text or plain string describing the warning.
        """

        self._print("⚠️ ", message, style="yellow")

    def fail(self, message: Message) -> None:
        """Print a failure ``message`` with the red failure prefix.

        Args:
            message: Rich text or plain string describing the failure.
        """

        self._print("❌ ", message, style="red")

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message)

    def _print(self, symbol: str, message: Message, *, style: str) -> None:
        text = Text(emoji(symbol, self.use_emoji), style=style)
        text.append_text(message if isinstance(message, Text) else Text(message))
        self.console.print(text)


@dataclass(slots=True)
class LoggingOptionLogger:
    """Forward warnings to a standard library :class:`logging.Logger`."""

    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("optnorm"))

    def warn(self, message: Message) -> None:
        """Log ``message`` at ``WARNING`` level as plain text."""

        self.logger.warning("%s", plain(message))


def build_option_logger(*, emoji: bool = True, no_color: bool = False, stderr: bool = True) -> RichOptionLogger:
    """Return a :class:`RichOptionLogger` bound to a dedicated console.

    Args:
        emoji: Whether messages may carry emoji prefixes.
        no_color: Whether terminal colour output should be disabled.
        stderr: Whether the console writes to standard error.

    Returns:
        RichOptionLogger: Logger instance bound to a fresh Rich console.
    """

    console = Console(no_color=no_color, highlight=False, stderr=stderr, soft_wrap=True)
    return RichOptionLogger(console=console, use_emoji=emoji)


__all__ = [
    "LoggingOptionLogger",
    "Message",
    "OptionLogger",
    "RichOptionLogger",
    "build_option_logger",
    "emoji",
    "plain",
]
