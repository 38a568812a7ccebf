"""Qualified-name resolution.

Expat runs in namespace-aware mode and reports names as the namespace URI
and local name joined by NAMESPACE_SEPARATOR. Prefixes are already resolved
by the time a name reaches this module.
"""

from typing import NamedTuple, Optional

NAMESPACE_SEPARATOR = " "

# Reserved namespace for in-document directives
STRUCT_NAMESPACE = "urn:xml-struct-reader:struct"


class QualifiedName(NamedTuple):
    """Namespace and local part of a tag or attribute name."""

    namespace: Optional[str]
    local: str

    @classmethod
    def parse(cls, raw: str, separator: str = NAMESPACE_SEPARATOR) -> "QualifiedName":
        """Split a raw name on the last namespace separator.

        Examples:
            >>> QualifiedName.parse("urn:x element")
            QualifiedName(namespace='urn:x', local='element')
            >>> QualifiedName.parse("element")
            QualifiedName(namespace=None, local='element')
        """
        namespace, found, local = raw.rpartition(separator)
        if not found:
            return cls(None, raw)
        return cls(namespace, local)

    def __str__(self) -> str:
        if self.namespace is None:
            return self.local
        return f"{{{self.namespace}}}{self.local}"
