"""Error hierarchy for rdcfg."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
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
    "ErrorCodes",
]


class ConfigError(Exception):
    """Base error for all rdcfg errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# === File access ===


class ConfigNotFoundError(ConfigError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )

    @property
    def config_path(self) -> str:
        return self.details["config_path"]


class ConfigReadError(ConfigError):
    """Raised when a configuration file exists but cannot be read in full."""

    def __init__(self, config_path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_READ_ERROR",
            message=f"Cannot read configuration file '{config_path}': {reason}",
            details={"config_path": config_path, "reason": reason},
            **kwargs,
        )


# === Format ===


class FormatError(ConfigError):
    """Raised when configuration text violates the file grammar.

    ``reason`` is a short fixed phrase identifying the violation and
    ``line`` the 1-based line number it was found on, or ``None`` when the
    violation concerns the buffer as a whole.
    """

    def __init__(self, reason: str, line: int | None = None, **kwargs: Any) -> None:
        where = f" (line {line})" if line is not None else ""
        super().__init__(
            code="CONFIG_FORMAT_ERROR",
            message=f"Invalid configuration format{where}: {reason}",
            details={"reason": reason, "line": line},
            **kwargs,
        )

    @property
    def reason(self) -> str:
        return self.details["reason"]

    @property
    def line(self) -> int | None:
        return self.details["line"]


class MissingTrailingNewlineError(FormatError):
    """Raised when configuration text does not end with a newline."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(reason="missing trailing newline", **kwargs)


class EmptySectionNameError(FormatError):
    """Raised for a section header with nothing between the brackets."""

    def __init__(self, line: int | None = None, **kwargs: Any) -> None:
        super().__init__(reason="section name is null", line=line, **kwargs)


class DuplicateSectionError(FormatError):
    """Raised when a section header repeats the section it would open."""

    def __init__(self, section: str, line: int | None = None, **kwargs: Any) -> None:
        super().__init__(reason="repeat section name", line=line, **kwargs)
        self.details["section"] = section

    @property
    def section(self) -> str:
        return self.details["section"]


class DuplicateKeyError(FormatError):
    """Raised when a key is assigned twice within one section."""

    def __init__(self, section: str, key: str, line: int | None = None, **kwargs: Any) -> None:
        super().__init__(reason="key already exists", line=line, **kwargs)
        self.details["section"] = section
        self.details["key"] = key

    @property
    def section(self) -> str:
        return self.details["section"]

    @property
    def key(self) -> str:
        return self.details["key"]


# === Lookup ===


class ConfigLookupError(ConfigError):
    """Base for lookups against a loaded document that find nothing."""


class SectionNotFoundError(ConfigLookupError):
    """Raised when no section exists under the requested name."""

    def __init__(self, section: str, **kwargs: Any) -> None:
        super().__init__(
            code="SECTION_NOT_FOUND",
            message=f"section not found: '{section}'",
            details={"section": section},
            **kwargs,
        )

    @property
    def section(self) -> str:
        return self.details["section"]


class KeyNotFoundError(ConfigLookupError):
    """Raised when the requested key is absent from its section."""

    def __init__(self, section: str, key: str, **kwargs: Any) -> None:
        super().__init__(
            code="KEY_NOT_FOUND",
            message=f"key not found: '{key}' in section '{section}'",
            details={"section": section, "key": key},
            **kwargs,
        )

    @property
    def section(self) -> str:
        return self.details["section"]

    @property
    def key(self) -> str:
        return self.details["key"]


# === Value conversion ===


class ValueParseError(ConfigError):
    """Raised when a looked-up value cannot be converted to the requested type."""

    def __init__(self, value: Any, target: str, reason: str | None = None, **kwargs: Any) -> None:
        message = f"Cannot parse {value!r} as {target}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            code="VALUE_PARSE_ERROR",
            message=message,
            details={"value": value, "target": target},
            **kwargs,
        )

    @property
    def value(self) -> Any:
        return self.details["value"]

    @property
    def target(self) -> str:
        return self.details["target"]


class ErrorCodes:
    """All rdcfg error codes as constants.

    Example:
        if error.code == ErrorCodes.KEY_NOT_FOUND:
            use_fallback()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_READ_ERROR = "CONFIG_READ_ERROR"
    CONFIG_FORMAT_ERROR = "CONFIG_FORMAT_ERROR"
    SECTION_NOT_FOUND = "SECTION_NOT_FOUND"
    KEY_NOT_FOUND = "KEY_NOT_FOUND"
    VALUE_PARSE_ERROR = "VALUE_PARSE_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
