"""Tests for the simple reading functions."""

import io
import logging
from pathlib import Path

import pytest

from xml_struct_reader import read, read_file, read_string
from xml_struct_reader.shared import (
    InvalidArgumentError,
    MalformedXMLError,
    ReaderOption,
)


class TestReadFunctions:
    """Test read, read_string and read_file."""

    def test_read_string(self) -> None:
        """Test reading XML content from a string."""
        assert read_string("<root><item>value</item></root>") == {
            "root": {"item": "value"}
        }

    def test_read_string_with_options(self) -> None:
        """Test that options reach the reader."""
        result = read_string(
            "<root>  value  </root>", {ReaderOption.TEXT_TRIM: False}
        )

        assert result == {"root": "  value  "}

    def test_read_file(self, tmp_path: Path) -> None:
        """Test reading from a file path."""
        path = tmp_path / "document.xml"
        path.write_text('<?xml version="1.0"?>\n<root test="value"/>\n', encoding="utf-8")

        assert read_file(path) == {"root": {"test": "value"}}
        assert read_file(str(path)) == {"root": {"test": "value"}}

    def test_read_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises OSError."""
        with pytest.raises(OSError):
            read_file(tmp_path / "missing.xml")

    @pytest.mark.parametrize("source", [
        "<element>value</element>",
        "  \n<element>value</element>",
        b"<element>value</element>",
        bytearray(b"<element>value</element>"),
    ])
    def test_read_detects_content(self, source: object) -> None:
        """Test automatic detection of XML content."""
        assert read(source) == {"element": "value"}

    def test_read_detects_paths(self, tmp_path: Path) -> None:
        """Test automatic detection of file paths."""
        path = tmp_path / "document.xml"
        path.write_text("<element>value</element>", encoding="utf-8")

        assert read(path) == {"element": "value"}
        assert read(str(path)) == {"element": "value"}

    def test_read_file_objects(self) -> None:
        """Test reading from open text and binary streams."""
        assert read(io.StringIO("<element>value</element>")) == {"element": "value"}
        assert read(io.BytesIO(b"<element>value</element>")) == {"element": "value"}

    def test_read_unsupported_type(self) -> None:
        """Test that unsupported inputs are rejected."""
        with pytest.raises(InvalidArgumentError, match="Unable to read input of type int"):
            read(42)

    def test_malformed_content(self) -> None:
        """Test that malformed content raises MalformedXMLError."""
        with pytest.raises(MalformedXMLError, match="mismatched tag"):
            read_string("<root><a></b></root>")

    def test_correlation_id_in_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that the correlation ID reaches reader log records."""
        with caplog.at_level(logging.INFO, logger="xml_struct_reader"):
            read_string("<root/>", correlation_id="req-42")

        records = [r for r in caplog.records if r.getMessage() == "Read completed"]
        assert records
        assert records[0].correlation_id == "req-42"
        assert records[0].elements_read == 1
