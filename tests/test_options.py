"""Tests for LoaderOptions."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from rdcfg.options import LoaderOptions


class TestLoaderOptions:
    def test_defaults(self) -> None:
        opts = LoaderOptions()
        assert opts.encoding == "utf-8"
        assert opts.strip_chars == " "
        assert opts.strict_sections is False

    def test_frozen(self) -> None:
        opts = LoaderOptions()
        with pytest.raises(ValidationError):
            opts.strict_sections = True

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoaderOptions(interpolate=True)  # type: ignore[call-arg]

    def test_unknown_encoding_rejected(self) -> None:
        with pytest.raises(ValidationError, match="unknown encoding"):
            LoaderOptions(encoding="no-such-codec")

    @pytest.mark.parametrize("chars", ["", "\t", " \n"])
    def test_bad_strip_chars_rejected(self, chars: str) -> None:
        with pytest.raises(ValidationError):
            LoaderOptions(strip_chars=chars)

    def test_space_is_always_stripped(self) -> None:
        with pytest.raises(ValidationError, match="must include a space"):
            LoaderOptions(strip_chars="\t\r")
        assert LoaderOptions(strip_chars=" \t\r").strip_chars == " \t\r"
