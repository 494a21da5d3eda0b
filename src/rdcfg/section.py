"""Section store: the key/value pairs under one section header."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

from rdcfg.errors import DuplicateKeyError, KeyNotFoundError

__all__ = ["DEFAULT_SECTION", "Section"]

# Whitespace is stripped before headers are read, so no header can produce this name.
DEFAULT_SECTION = " "


class Section:
    """Key/value store scoped to one named section.

    Keys are unique: ``set`` refuses to overwrite. Only the loader mutates a
    section; once a document is returned its sections are read-only through
    the public API.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._entries: dict[str, str] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_default(self) -> bool:
        return self._name == DEFAULT_SECTION

    @property
    def entries(self) -> Mapping[str, str]:
        """Read-only view of the section's key/value pairs."""
        return MappingProxyType(self._entries)

    def get(self, key: str) -> str:
        """Return the value stored under ``key``.

        Raises:
            KeyNotFoundError: If the key is absent.
        """
        try:
            return self._entries[key]
        except KeyError:
            raise KeyNotFoundError(section=self._name, key=key) from None

    def set(self, key: str, value: str, line: int | None = None) -> None:
        """Insert a new key.

        Raises:
            DuplicateKeyError: If the key already exists. The stored value is kept.
        """
        if key in self._entries:
            raise DuplicateKeyError(section=self._name, key=key, line=line)
        self._entries[key] = value

    def set_force(self, key: str, value: str) -> None:
        """Insert or overwrite ``key`` unconditionally."""
        self._entries[key] = value

    def keys(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Section(name={self._name!r}, keys={len(self._entries)})"
