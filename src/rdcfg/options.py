"""Loader settings."""

from __future__ import annotations

import codecs

from pydantic import BaseModel, ConfigDict, field_validator

__all__ = ["LoaderOptions"]


class LoaderOptions(BaseModel):
    """Settings that control how configuration text is read and parsed.

    Attributes:
        encoding: Text encoding used by ``load`` when reading a file.
        strip_chars: Characters removed from the whole buffer before parsing.
            Always includes the space; add ``"\\t\\r"`` to also drop tabs
            and carriage returns.
        strict_sections: Reject any section header naming a section that was
            already opened earlier in the file, not only the one directly
            before it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    encoding: str = "utf-8"
    strip_chars: str = " "
    strict_sections: bool = False

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {v}") from e
        return v

    @field_validator("strip_chars")
    @classmethod
    def _check_strip_chars(cls, v: str) -> str:
        # A kept space would let a header such as "[ ]" name the default section.
        if " " not in v:
            raise ValueError("strip_chars must include a space")
        if "\n" in v:
            raise ValueError("strip_chars must not contain a newline")
        return v
