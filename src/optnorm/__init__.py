# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Option normalisation and validation against declarative descriptors."""

from __future__ import annotations

from importlib import metadata

from .argv import parse_argv
from .errors import (
    InvalidOptionValueError,
    OptionConfigurationError,
    OptionInfoError,
    OptionNormalizationError,
)
from .io import load_option_infos
from .logging import LoggingOptionLogger, OptionLogger, RichOptionLogger, build_option_logger
from .model_options import ChoiceInfo, OptionInfo, OptionKind, RedirectInfo
from .normalizer import NormalizeSettings, normalize_api_options, normalize_cli_options

try:
    __version__ = metadata.version("optnorm")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

__all__ = [
    "ChoiceInfo",
    "InvalidOptionValueError",
    "LoggingOptionLogger",
    "NormalizeSettings",
    "OptionConfigurationError",
    "OptionInfo",
    "OptionInfoError",
    "OptionKind",
    "OptionLogger",
    "OptionNormalizationError",
    "RedirectInfo",
    "RichOptionLogger",
    "__version__",
    "build_option_logger",
    "load_option_infos",
    "normalize_api_options",
    "normalize_cli_options",
    "parse_argv",
]
