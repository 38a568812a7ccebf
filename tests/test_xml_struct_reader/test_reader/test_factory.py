"""Tests for reader factories."""

import io
from pathlib import Path

import pytest

from xml_struct_reader.interpretation.context import Context
from xml_struct_reader.reader import (
    DefaultXMLStructReader,
    DefaultXMLStructReaderFactory,
)
from xml_struct_reader.shared import InvalidArgumentError, ReaderOption
from xml_struct_reader.stream import StreamDelegate


class TestDefaultXMLStructReaderFactory:
    """Test reader creation."""

    def test_invalid_owner_raises_error(self) -> None:
        """Test that the owner must be a reader."""
        with pytest.raises(InvalidArgumentError, match="Owner is not a valid object."):
            DefaultXMLStructReaderFactory(object())

    def test_invalid_context_raises_error(self) -> None:
        """Test that the context must be a Context."""
        with pytest.raises(InvalidArgumentError, match="Context is not a valid object."):
            DefaultXMLStructReaderFactory(None, {"listElement": "item"})

    def test_create_from_path(self, tmp_path: Path) -> None:
        """Test creating a reader for a file path."""
        path = tmp_path / "document.xml"
        path.write_text("<root><a>1</a></root>", encoding="utf-8")

        reader = DefaultXMLStructReaderFactory().create_reader(path)

        assert isinstance(reader, DefaultXMLStructReader)
        assert reader.stream.owns_file
        assert reader.read() == {"root": {"a": "1"}}
        assert reader.stream.closed

    def test_create_from_string_path(self, tmp_path: Path) -> None:
        """Test creating a reader for a path given as string."""
        path = tmp_path / "document.xml"
        path.write_text("<root/>", encoding="utf-8")

        with DefaultXMLStructReaderFactory().create_reader(str(path)) as reader:
            assert reader.read() == {"root": None}

    def test_create_from_file_object(self) -> None:
        """Test creating a reader for an open file object."""
        stream = io.StringIO("<root>value</root>")
        reader = DefaultXMLStructReaderFactory().create_reader(stream)

        assert not reader.stream.owns_file
        assert reader.read() == {"root": "value"}
        assert not stream.closed

    def test_create_from_delegate(self) -> None:
        """Test that an existing delegate is passed through."""
        delegate = StreamDelegate(io.StringIO("<root/>"))
        reader = DefaultXMLStructReaderFactory().create_reader(delegate)

        assert reader.stream is delegate
        reader.close()

    def test_missing_path_raises_os_error(self, tmp_path: Path) -> None:
        """Test that an unopenable path raises OSError."""
        with pytest.raises(OSError):
            DefaultXMLStructReaderFactory().create_reader(tmp_path / "missing.xml")

    def test_factory_context_and_correlation(self) -> None:
        """Test that an ownerless factory hands over its own settings."""
        context = Context({"inherited": True})
        factory = DefaultXMLStructReaderFactory(context=context, correlation_id="abc")
        reader = factory.create_reader(io.StringIO("<root/>"), {"text_trim": False})

        assert reader.context is context
        assert reader.correlation_id == "abc"
        assert reader.include_depth == 0
        assert reader.options.text_trim is False
        reader.close()

    def test_owner_settings_are_inherited(self) -> None:
        """Test that created readers inherit from their owner."""
        owner = DefaultXMLStructReader(
            io.StringIO("<owner/>"),
            {ReaderOption.TEXT_TRIM: False},
            Context({"inherited": True}),
            correlation_id="abc",
        )
        reader = DefaultXMLStructReaderFactory(owner).create_reader(io.StringIO("<root/>"))

        assert reader.options.text_trim is False
        assert reader.correlation_id == "abc"
        assert reader.include_depth == 1
        assert reader.context == owner.context
        assert reader.context is not owner.context
        reader.close()
        owner.close()

    def test_reader_class_can_be_replaced(self) -> None:
        """Test substituting the reader class on a factory subclass."""

        class UppercaseReader(DefaultXMLStructReader):
            def get_data(self):
                return {str(key).upper(): value for key, value in super().get_data().items()}

        class UppercaseFactory(DefaultXMLStructReaderFactory):
            reader_class = UppercaseReader

        reader = UppercaseFactory().create_reader(io.StringIO("<root>value</root>"))

        assert reader.read() == {"ROOT": "value"}
