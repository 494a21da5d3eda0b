"""rdcfg - reader for small sectioned key=value configuration files."""

from __future__ import annotations

# Loading
from rdcfg.loader import load, loads, parse
from rdcfg.options import LoaderOptions

# Document model
from rdcfg.document import ConfigDocument
from rdcfg.section import DEFAULT_SECTION, Section

# Errors
from rdcfg.errors import (
    ConfigError,
    ConfigLookupError,
    ConfigNotFoundError,
    ConfigReadError,
    DuplicateKeyError,
    DuplicateSectionError,
    EmptySectionNameError,
    ErrorCodes,
    FormatError,
    KeyNotFoundError,
    MissingTrailingNewlineError,
    SectionNotFoundError,
    ValueParseError,
)

__version__ = "0.1.0"

__all__ = [
    # Loading
    "load",
    "loads",
    "parse",
    "LoaderOptions",
    # Document model
    "ConfigDocument",
    "Section",
    "DEFAULT_SECTION",
    # Errors
    "ErrorCodes",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigReadError",
    "FormatError",
    "MissingTrailingNewlineError",
    "EmptySectionNameError",
    "DuplicateSectionError",
    "DuplicateKeyError",
    "ConfigLookupError",
    "SectionNotFoundError",
    "KeyNotFoundError",
    "ValueParseError",
]
