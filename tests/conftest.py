"""Shared fixtures for the rdcfg test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from rdcfg.document import ConfigDocument
from rdcfg.loader import loads

SAMPLE_CONFIG = (
    "# default\n"
    "ip = 127.0.0.1\n"
    "port=1234\n"
    "\n"
    "[broker]\n"
    "listen_port = 7777\n"
    "time = 10\n"
)

FULL_CONFIG = (
    "#default\n"
    " ip = 127.0.0.1\n"
    "\n"
    "port  =  7890\n"
    "ratio = 0.75\n"
    "\n"
    "# for broker\n"
    "[broker]\n"
    "  listen_port = 7777\n"
    "time = 10\n"
    "\n"
    "# for logger\n"
    "  [ logger ]\n"
    "listen_port = 1888\n"
    "dsn = user=admin;password=secret\n"
)


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_CONFIG


@pytest.fixture
def sample_doc() -> ConfigDocument:
    return loads(SAMPLE_CONFIG)


@pytest.fixture
def full_doc() -> ConfigDocument:
    return loads(FULL_CONFIG)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Writes FULL_CONFIG to a temp file and returns its path."""
    path = tmp_path / "app.cfg"
    path.write_text(FULL_CONFIG)
    return path
