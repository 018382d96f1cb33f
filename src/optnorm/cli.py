# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line interface for normalising options against descriptor files."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from .argv import parse_argv
from .errors import OptionNormalizationError
from .io import load_option_infos, load_option_values
from .logging import build_option_logger
from .normalizer import NormalizeSettings, normalize_api_options, normalize_cli_options

app = typer.Typer(
    help="Normalise and validate option values against declarative descriptors.",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    """Normalise and validate option values against declarative descriptors."""


@app.command(
    "normalize",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def normalize_command(
    ctx: typer.Context,
    options_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="JSON document describing the known options.",
    ),
    api: Path | None = typer.Option(
        None,
        "--api",
        exists=True,
        dir_okay=False,
        help="JSON object of option values to normalise as a programmatic call.",
    ),
    pass_through: list[str] | None = typer.Option(
        None,
        "--pass-through",
        help="Keep this unknown option instead of warning about it (repeatable).",
    ),
    allow_unknown: bool = typer.Option(False, "--allow-unknown", help="Keep every unknown option."),
    emoji: bool = typer.Option(True, "--emoji/--no-emoji", help="Prefix messages with emoji."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable coloured messages."),
) -> None:
    """Print the normalised options as JSON.

    Without --api, the words after ``--`` are parsed as a command line.
    """

    logger = build_option_logger(emoji=emoji, no_color=no_color)
    policy: bool | tuple[str, ...] = True if allow_unknown else tuple(pass_through or ())
    settings = NormalizeSettings(logger=logger, pass_through=policy or False)
    try:
        option_infos = load_option_infos(options_file)
        if api is not None:
            result = normalize_api_options(load_option_values(api), option_infos, settings)
        else:
            result = normalize_cli_options(parse_argv(ctx.args, option_infos), option_infos, settings)
    except OptionNormalizationError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc

    logger.echo(json.dumps(result, indent=2, sort_keys=True, default=str))


__all__ = ["app"]
