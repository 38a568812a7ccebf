"""Tests for reader options."""

from pathlib import Path

import pytest

from xml_struct_reader.reader import (
    DefaultXMLStructReaderFactory,
    XMLStructReaderFactory,
)
from xml_struct_reader.shared.config import (
    ConfigError,
    ConfigValidationError,
    ConflictPolicy,
    ReaderOption,
    ReaderOptions,
    default_options,
)
from xml_struct_reader.shared.errors import XMLStructReaderError


class TestReaderOptions:
    """Test suite for ReaderOptions."""

    def test_default_configuration(self) -> None:
        """Test default option values."""
        options = ReaderOptions()

        assert options[ReaderOption.KEY_CONFLICT] is ConflictPolicy.REPLACE
        assert options[ReaderOption.TEXT_TRIM] is True
        assert options[ReaderOption.TEXT_JOIN] is True
        assert options[ReaderOption.TEXT_SKIP_EMPTY] is True
        assert options[ReaderOption.INCLUDE_PATH] is None
        assert options[ReaderOption.INCLUDE_READER_FACTORY] is None
        assert options[ReaderOption.INCLUDE_CONSTANTS] == {}
        assert options[ReaderOption.INCLUDE_MAX_DEPTH] == 16

    def test_string_and_enum_keys_are_interchangeable(self) -> None:
        """Test lookups by enum member and by plain string."""
        options = ReaderOptions(overrides={"text_trim": False})

        assert options[ReaderOption.TEXT_TRIM] is False
        assert options["text_trim"] is False
        assert ReaderOption.TEXT_TRIM in options
        assert "text_trim" in options

    def test_unknown_keys_are_ignored(self) -> None:
        """Test that unknown keys are dropped on write and default on read."""
        options = ReaderOptions(overrides={"unknown": "value"})

        assert "unknown" not in options
        assert options.get("unknown") is None
        assert options.get("unknown", "fallback") == "fallback"
        assert len(options) == len(default_options())

    def test_custom_default_set(self) -> None:
        """Test whitelisting against a custom default set."""
        defaults = {"test1": "default", "test2": "default"}
        options = ReaderOptions(defaults, {"test1": "custom", "text_trim": False})

        assert options["test1"] == "custom"
        assert options["test2"] == "default"
        assert "text_trim" not in options

    def test_options_are_immutable(self) -> None:
        """Test that options cannot be changed after construction."""
        options = ReaderOptions()

        with pytest.raises(TypeError):
            options["text_trim"] = False  # type: ignore

    def test_key_conflict_accepts_policy_name(self) -> None:
        """Test that a policy given by name is normalized."""
        options = ReaderOptions(overrides={ReaderOption.KEY_CONFLICT: "merge"})

        assert options.key_conflict is ConflictPolicy.MERGE

    def test_invalid_key_conflict_raises_error(self) -> None:
        """Test that an unknown policy name is rejected."""
        with pytest.raises(ConfigValidationError, match="key_conflict must be one of"):
            ReaderOptions(overrides={ReaderOption.KEY_CONFLICT: "append"})

    def test_invalid_include_path_raises_error(self) -> None:
        """Test that a non-path include_path is rejected."""
        with pytest.raises(ConfigValidationError) as exc_info:
            ReaderOptions(overrides={ReaderOption.INCLUDE_PATH: 42})

        assert exc_info.value.field_name == "include_path"
        assert isinstance(exc_info.value, ConfigError)

    def test_include_path_accepts_path_objects(self) -> None:
        """Test that include_path accepts Path instances."""
        options = ReaderOptions(overrides={ReaderOption.INCLUDE_PATH: Path("/tmp")})

        assert options[ReaderOption.INCLUDE_PATH] == Path("/tmp")

    def test_invalid_include_constants_raises_error(self) -> None:
        """Test that include_constants must be a mapping."""
        with pytest.raises(ConfigValidationError, match="include_constants must be a mapping"):
            ReaderOptions(overrides={ReaderOption.INCLUDE_CONSTANTS: ["ROOT"]})

    def test_invalid_include_max_depth_raises_error(self) -> None:
        """Test that include_max_depth must be positive."""
        with pytest.raises(ConfigValidationError, match="include_max_depth must be > 0"):
            ReaderOptions(overrides={ReaderOption.INCLUDE_MAX_DEPTH: 0})

    def test_text_properties(self) -> None:
        """Test convenience accessors for text options."""
        options = ReaderOptions(overrides={
            ReaderOption.TEXT_TRIM: False,
            ReaderOption.TEXT_JOIN: False,
            ReaderOption.TEXT_SKIP_EMPTY: False,
        })

        assert options.text_trim is False
        assert options.text_join is False
        assert options.text_skip_empty is False

    def test_override_creates_new_options(self) -> None:
        """Test that override leaves the original untouched."""
        options = ReaderOptions()
        overridden = options.override(text_trim=False, unknown=True)

        assert options.text_trim is True
        assert overridden.text_trim is False
        assert "unknown" not in overridden

    def test_to_dict_uses_enum_names(self) -> None:
        """Test dictionary conversion."""
        data = ReaderOptions().to_dict()

        assert data["key_conflict"] == "REPLACE"
        assert data["text_trim"] is True

    def test_reader_option_str(self) -> None:
        """Test that option keys render as their string value."""
        assert str(ReaderOption.INCLUDE_PATH) == "include_path"

    @pytest.mark.parametrize("name", [
        "DefaultXMLStructReaderFactory",
        "xml_struct_reader.reader.factory.DefaultXMLStructReaderFactory",
    ])
    def test_include_reader_factory_by_name(self, name: str) -> None:
        """Test that a factory type name resolves to its class."""
        options = ReaderOptions(overrides={ReaderOption.INCLUDE_READER_FACTORY: name})

        assert options[ReaderOption.INCLUDE_READER_FACTORY] is DefaultXMLStructReaderFactory

    def test_include_reader_factory_class(self) -> None:
        """Test that a factory class is kept as is."""
        options = ReaderOptions(
            overrides={ReaderOption.INCLUDE_READER_FACTORY: DefaultXMLStructReaderFactory}
        )

        assert options[ReaderOption.INCLUDE_READER_FACTORY] is DefaultXMLStructReaderFactory

    @pytest.mark.parametrize("factory", [
        "NoSuchFactory",
        "no.such.module.Factory",
        "",
        dict,
        XMLStructReaderFactory,
        DefaultXMLStructReaderFactory(),
        42,
    ])
    def test_invalid_include_reader_factory_raises_error(self, factory: object) -> None:
        """Test that anything but a concrete reader factory is rejected."""
        with pytest.raises(ConfigValidationError) as exc_info:
            ReaderOptions(overrides={ReaderOption.INCLUDE_READER_FACTORY: factory})

        assert exc_info.value.field_name == "include_reader_factory"

    def test_config_errors_are_reader_errors(self) -> None:
        """Test that configuration errors share the reader error base."""
        with pytest.raises(XMLStructReaderError):
            ReaderOptions(overrides={ReaderOption.INCLUDE_MAX_DEPTH: -1})
