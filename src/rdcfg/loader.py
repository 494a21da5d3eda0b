"""Loader -- turns configuration text into a ConfigDocument.

Format::

    # comment
    ip = 127.0.0.1
    port = 1234

    [broker]
    listen_port = 7777

Every whitespace character listed in ``LoaderOptions.strip_chars`` is
removed from the whole buffer before parsing, including inside values.
Lines that are neither a comment, a header nor an assignment are dropped
without error.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator

from rdcfg.document import ConfigDocument
from rdcfg.errors import (
    ConfigNotFoundError,
    ConfigReadError,
    DuplicateSectionError,
    EmptySectionNameError,
    MissingTrailingNewlineError,
)
from rdcfg.options import LoaderOptions
from rdcfg.section import DEFAULT_SECTION

__all__ = ["LineKind", "Line", "classify", "scan", "parse", "loads", "load"]

logger = logging.getLogger(__name__)


class LineKind(str, Enum):
    """Shape of one whitespace-stripped line."""

    BLANK = "blank"
    COMMENT = "comment"
    SECTION = "section"
    ASSIGNMENT = "assignment"
    IGNORED = "ignored"


@dataclass(frozen=True)
class Line:
    """A classified line with its 1-based position in the source."""

    number: int
    text: str
    kind: LineKind


def classify(text: str) -> LineKind:
    """Classify a single line that has already had whitespace stripped."""
    if not text:
        return LineKind.BLANK
    if text.startswith("#"):
        return LineKind.COMMENT
    if text.startswith("[") and text.endswith("]"):
        return LineKind.SECTION
    # At least one character on each side of some '='.
    if "=" in text[1:-1]:
        return LineKind.ASSIGNMENT
    return LineKind.IGNORED


def _strip(text: str, chars: str) -> str:
    return text.translate({ord(c): None for c in chars})


def scan(text: str, options: LoaderOptions | None = None) -> Iterator[Line]:
    """Strip whitespace from ``text`` and yield each line with its shape."""
    opts = options or LoaderOptions()
    stripped = _strip(text, opts.strip_chars)
    lines = stripped.split("\n")
    # The mandatory trailing newline leaves one empty element at the end.
    if lines and lines[-1] == "":
        lines.pop()
    for number, raw in enumerate(lines, start=1):
        yield Line(number=number, text=raw, kind=classify(raw))


def parse(text: str, options: LoaderOptions | None = None, source: str | None = None) -> ConfigDocument:
    """Parse complete configuration text into a ConfigDocument.

    Args:
        text: The full file content. Must end with a newline.
        options: Loader settings; defaults to ``LoaderOptions()``.
        source: Optional origin (usually a file path) recorded on the document.

    Returns:
        The populated document.

    Raises:
        MissingTrailingNewlineError: If ``text`` does not end with ``"\\n"``.
        EmptySectionNameError: For a header such as ``[]``.
        DuplicateSectionError: If a header repeats the section directly
            before it (or, with ``strict_sections``, any earlier section).
        DuplicateKeyError: If a key is assigned twice within one section.
    """
    if not text.endswith("\n"):
        raise MissingTrailingNewlineError()

    opts = options or LoaderOptions()
    logger.debug("Parsing configuration from %s", source or "<text>")

    document = ConfigDocument(source=source)
    current_name = DEFAULT_SECTION
    current = document.section(DEFAULT_SECTION)
    seen: set[str] = set()

    for line in scan(text, opts):
        if line.kind in (LineKind.BLANK, LineKind.COMMENT):
            continue

        if line.kind == LineKind.IGNORED:
            logger.debug("Ignoring malformed line %d: %r", line.number, line.text)
            continue

        if line.kind == LineKind.SECTION:
            name = line.text.strip("[]")
            if not name:
                raise EmptySectionNameError(line=line.number)
            # Only the immediately preceding header is compared unless
            # strict_sections is set; a reopened section replaces the earlier one.
            if name == current_name:
                raise DuplicateSectionError(section=name, line=line.number)
            if name in seen:
                if opts.strict_sections:
                    raise DuplicateSectionError(section=name, line=line.number)
                logger.warning(
                    "Section '%s' reopened at line %d; entries from its earlier occurrence are discarded",
                    name,
                    line.number,
                )
            seen.add(name)
            current_name = name
            current = document._add_section(name)
            continue

        key, _, value = line.text.partition("=")
        current.set(key, value, line=line.number)

    logger.debug(
        "Parsed configuration from %s: %d section(s)",
        source or "<text>",
        len(document.section_names()),
    )
    return document


def loads(text: str, options: LoaderOptions | None = None) -> ConfigDocument:
    """Parse configuration text. Same as ``parse`` without a source."""
    return parse(text, options)


def load(path: str | os.PathLike[str], options: LoaderOptions | None = None) -> ConfigDocument:
    """Read a configuration file in full and parse it.

    Raises:
        ConfigNotFoundError: If ``path`` is not an existing regular file.
        ConfigReadError: If the file cannot be read or decoded.
        FormatError: If the content violates the file grammar.
    """
    opts = options or LoaderOptions()
    file_path = Path(path)
    if not file_path.is_file():
        raise ConfigNotFoundError(config_path=str(file_path))

    try:
        # No newline translation: parse() must see the bytes as written.
        text = file_path.read_bytes().decode(opts.encoding)
    except UnicodeDecodeError as e:
        raise ConfigReadError(
            config_path=str(file_path), reason=f"not valid {opts.encoding}: {e}", cause=e
        ) from e
    except OSError as e:
        raise ConfigReadError(config_path=str(file_path), reason=str(e), cause=e) from e

    return parse(text, opts, source=str(file_path))
