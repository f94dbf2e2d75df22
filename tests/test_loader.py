import logging

import pytest

from fbi import FBILoader, FBIParserError, ParseErrorKind


@pytest.fixture
def loader():
    return FBILoader(config={"enable_logger": False})


class TestLoader:

    def test_loads_text(self, loader, sample_text):
        result = loader.loads(sample_text)
        assert result.ok
        assert result.value.get_section("server").get_value("port") == "8080"

    def test_loads_bytes_with_bom(self, loader):
        result = loader.loads(b"\xef\xbb\xbf[a]{x=1;}")
        assert result.value.get_section("a").get_value("x") == "1"

    def test_custom_encoding(self):
        loader = FBILoader(config={"encoding": "latin-1", "enable_logger": False})
        result = loader.loads("name = café;".encode("latin-1"))
        assert result.value.get_value("name") == "café"

    def test_load_path(self, loader, tmp_path, sample_text):
        path = tmp_path / "sample.fbi"
        path.write_text(sample_text, encoding="utf-8")
        assert loader.load(path).get_value("name") == "demo"

    def test_load_path_error_is_returned(self, loader, tmp_path):
        path = tmp_path / "broken.fbi"
        path.write_text("[a]{\n}\n}", encoding="utf-8")
        result = loader.load_path(path)
        assert result.error.kind is ParseErrorKind.UNMATCHED_CLOSE
        assert (result.error.line, result.error.column) == (3, 1)

    def test_load_raises(self, loader, tmp_path):
        path = tmp_path / "broken.fbi"
        path.write_text("[a]{", encoding="utf-8")
        with pytest.raises(FBIParserError):
            loader.load(path)

    def test_missing_file(self, loader, tmp_path):
        with pytest.raises(FileNotFoundError):
            loader.load_path(tmp_path / "missing.fbi")

    def test_parser_options_forwarded(self):
        loader = FBILoader(config={"parser_options": {"strict": False}, "enable_logger": False})
        assert loader.loads("x=1;;").ok

    def test_errors_are_logged(self, caplog):
        loader = FBILoader()
        with caplog.at_level(logging.INFO, logger="fbi.loader"):
            loader.loads("}", source="inline")
        messages = [record.getMessage() for record in caplog.records if record.levelno == logging.ERROR]
        assert len(messages) == 1
        assert messages[0].startswith("Failed to parse inline")

    def test_disabled_logger_is_silent(self, caplog):
        loader = FBILoader(config={"enable_logger": False})
        with caplog.at_level(logging.DEBUG, logger="fbi.loader"):
            loader.loads("}")
        assert not [record for record in caplog.records if record.name == "fbi.loader"]
