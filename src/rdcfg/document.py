"""ConfigDocument -- the loaded configuration and its query API."""

from __future__ import annotations

import math
import re
from typing import TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from rdcfg.errors import SectionNotFoundError, ValueParseError
from rdcfg.section import DEFAULT_SECTION, Section

__all__ = ["ConfigDocument"]

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

M = TypeVar("M", bound=BaseModel)


def _normalize_section(name: str | None) -> str:
    return name if name else DEFAULT_SECTION


class ConfigDocument:
    """A parsed configuration file: a mapping of section name to Section.

    The default section always exists and holds the assignments that
    precede the first header. Documents are built by the loader and are
    read-only afterwards, so a single instance can be shared between
    threads without locking.

    Pass ``""`` (or ``None``) as the section name to address the default
    section.
    """

    def __init__(self, source: str | None = None) -> None:
        self._sections: dict[str, Section] = {}
        self.source = source
        self._add_section(DEFAULT_SECTION)

    def _add_section(self, name: str) -> Section:
        """Register a fresh section under ``name``, replacing any previous one."""
        self._sections.pop(name, None)
        section = Section(name)
        self._sections[name] = section
        return section

    # === Sections ===

    def has_section(self, name: str | None) -> bool:
        return _normalize_section(name) in self._sections

    def section(self, name: str | None) -> Section:
        """Return the section registered under ``name``.

        Raises:
            SectionNotFoundError: If no such section exists.
        """
        key = _normalize_section(name)
        try:
            return self._sections[key]
        except KeyError:
            raise SectionNotFoundError(section=key) from None

    def section_names(self) -> list[str]:
        """Names of the sections declared in the file, excluding the default section."""
        return [name for name in self._sections if name != DEFAULT_SECTION]

    # === Lookups ===

    def get(self, section: str | None, key: str) -> str:
        """Return the raw string value of ``key`` in ``section``.

        Raises:
            SectionNotFoundError: If the section does not exist.
            KeyNotFoundError: If the key is absent from the section.
        """
        return self.section(section).get(key)

    def get_int(self, section: str | None, key: str) -> int:
        """Return ``key`` parsed as a base-10 integer.

        Raises:
            ValueParseError: If the value is not an optionally signed run of digits
                or falls outside the signed 64-bit range.
        """
        raw = self.get(section, key)
        if not _INT_PATTERN.fullmatch(raw):
            raise ValueParseError(value=raw, target="int", reason="invalid base-10 integer")
        value = int(raw)
        if not _INT_MIN <= value <= _INT_MAX:
            raise ValueParseError(value=raw, target="int", reason="value out of 64-bit range")
        return value

    def get_float(self, section: str | None, key: str) -> float:
        """Return ``key`` parsed as a 64-bit float.

        Raises:
            ValueParseError: If the value is not a valid float literal.
        """
        raw = self.get(section, key)
        if "_" in raw:
            raise ValueParseError(value=raw, target="float", reason="underscores are not allowed")
        try:
            value = float(raw)
        except ValueError as e:
            raise ValueParseError(value=raw, target="float", reason="invalid float literal", cause=e) from e
        if math.isinf(value) and raw.lstrip("+-").lower() not in ("inf", "infinity"):
            raise ValueParseError(value=raw, target="float", reason="value out of range")
        return value

    def get_default(self, key: str) -> str:
        return self.get(DEFAULT_SECTION, key)

    def get_default_int(self, key: str) -> int:
        return self.get_int(DEFAULT_SECTION, key)

    def get_default_float(self, key: str) -> float:
        return self.get_float(DEFAULT_SECTION, key)

    def section_as(self, section: str | None, model: type[M]) -> M:
        """Validate a whole section into a Pydantic model.

        Values are passed as strings, so the model's fields rely on
        Pydantic's lax-mode coercion (``"7777"`` -> ``7777``).

        Raises:
            SectionNotFoundError: If the section does not exist.
            ValueParseError: If the entries do not satisfy the model.
        """
        sec = self.section(section)
        try:
            return model.model_validate(dict(sec.entries))
        except PydanticValidationError as e:
            errors = [
                {
                    "path": "/" + "/".join(str(segment) for segment in err.get("loc", ())),
                    "message": err.get("msg", ""),
                }
                for err in e.errors()
            ]
            exc = ValueParseError(
                value=dict(sec.entries),
                target=model.__name__,
                reason=f"{len(errors)} validation error(s)",
                cause=e,
            )
            exc.details["errors"] = errors
            raise exc from e

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_section(name)

    def __repr__(self) -> str:
        return f"ConfigDocument(source={self.source!r}, sections={self.section_names()!r})"
