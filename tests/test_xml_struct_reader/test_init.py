"""Tests for the package's public surface."""

import xml_struct_reader


class TestPackage:
    """Test package metadata and exports."""

    def test_version(self) -> None:
        """Test the version string."""
        assert xml_struct_reader.__version__ == "0.1.0"

    def test_all_exports_exist(self) -> None:
        """Test that every name in __all__ is importable."""
        for name in xml_struct_reader.__all__:
            assert hasattr(xml_struct_reader, name), name

    def test_level_one_api(self) -> None:
        """Test the simple functions through the package root."""
        xml = (
            f'<root xmlns:x="{xml_struct_reader.STRUCT_NAMESPACE}" '
            'x:listElement="item"><item>a</item><item>b</item></root>'
        )

        assert xml_struct_reader.read(xml) == {"root": ["a", "b"]}
