"""Tests for the rdcfg public API surface.

Verifies that all expected names are importable from the top-level
``rdcfg`` package and that ``__all__`` matches what is exported.
"""

import rdcfg


class TestPublicAPIImports:
    def test_loading_functions(self):
        from rdcfg import load, loads, parse

        assert callable(load)
        assert callable(loads)
        assert callable(parse)

    def test_document_model(self):
        from rdcfg import DEFAULT_SECTION, ConfigDocument, Section

        assert ConfigDocument is not None
        assert Section is not None
        assert DEFAULT_SECTION == " "

    def test_errors(self):
        from rdcfg import ConfigError, FormatError, ValueParseError

        assert issubclass(FormatError, ConfigError)
        assert issubclass(ValueParseError, ConfigError)


class TestAll:
    def test_every_name_in_all_exists(self):
        for name in rdcfg.__all__:
            assert hasattr(rdcfg, name), name

    def test_version(self):
        assert isinstance(rdcfg.__version__, str)

    def test_end_to_end(self, tmp_path):
        path = tmp_path / "app.cfg"
        path.write_text("# default\nip = 127.0.0.1\nport=1234\n\n[broker]\nlisten_port = 7777\ntime = 10\n")
        doc = rdcfg.load(path)
        assert doc.get_default("ip") == "127.0.0.1"
        assert doc.get_int("broker", "listen_port") == 7777
