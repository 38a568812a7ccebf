"""Tests for qualified-name parsing."""

from xml_struct_reader.interpretation.names import STRUCT_NAMESPACE, QualifiedName


class TestQualifiedName:
    """Test QualifiedName parsing and formatting."""

    def test_parse_without_namespace(self) -> None:
        """Test that a plain name has no namespace."""
        qname = QualifiedName.parse("element")

        assert qname.namespace is None
        assert qname.local == "element"
        assert str(qname) == "element"

    def test_parse_with_namespace(self) -> None:
        """Test splitting namespace URI and local name."""
        qname = QualifiedName.parse(f"{STRUCT_NAMESPACE} include")

        assert qname == (STRUCT_NAMESPACE, "include")
        assert str(qname) == "{urn:xml-struct-reader:struct}include"

    def test_parse_splits_on_last_separator(self) -> None:
        """Test that only the last separator splits the name."""
        qname = QualifiedName.parse("urn:a b element", separator=" ")

        assert qname.namespace == "urn:a b"
        assert qname.local == "element"
