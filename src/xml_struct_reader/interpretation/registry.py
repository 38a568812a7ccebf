"""Interpreter registry keyed by namespace and name.

Element and attribute factories live in one table, told apart by their
InterpreterType. Lookup falls back from the most specific entry to the
universal wildcard in a fixed order:

    1. exact namespace, exact name
    2. wildcard namespace, exact name
    3. exact namespace, wildcard name
    4. wildcard namespace, wildcard name

A namespace of None means "no namespace" and is matched exactly, just like
any URI; only WILDCARD matches every namespace.
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

WILDCARD = "*"

Factory = Callable[..., Any]
RegistryKey = Tuple["InterpreterType", str, str]

# Internal key for the "no namespace" slot, distinct from WILDCARD
_NO_NAMESPACE = ""


class InterpreterType(Enum):
    """Kinds of interpreter stored in the registry."""

    ELEMENT = "element"
    ATTRIBUTE = "attribute"


def _namespace_key(namespace: Optional[str]) -> str:
    return _NO_NAMESPACE if namespace is None else namespace


class InterpreterRegistry:
    """Lookup table mapping qualified names to interpreter factories."""

    def __init__(self) -> None:
        self._factories: Dict[RegistryKey, Factory] = {}

    def register(
        self,
        kind: InterpreterType,
        namespace: Optional[str],
        name: Optional[str],
        factory: Factory,
    ) -> None:
        """Register a factory.

        Args:
            kind: Interpreter type the factory produces
            namespace: Namespace URI, None for no namespace, or WILDCARD
            name: Local name, or WILDCARD (None is treated as WILDCARD)
            factory: Callable producing an interpreter instance
        """
        if not callable(factory):
            raise TypeError("Interpreter factory must be callable")
        key = (kind, _namespace_key(namespace), WILDCARD if name is None else name)
        self._factories[key] = factory

    def candidates(
        self, kind: InterpreterType, namespace: Optional[str], name: str
    ) -> List[RegistryKey]:
        """Return lookup keys in precedence order."""
        ns = _namespace_key(namespace)
        return [
            (kind, ns, name),
            (kind, WILDCARD, name),
            (kind, ns, WILDCARD),
            (kind, WILDCARD, WILDCARD),
        ]

    def lookup(
        self, kind: InterpreterType, namespace: Optional[str], name: str
    ) -> Optional[Factory]:
        """Find the most specific factory for a name, or None."""
        for key in self.candidates(kind, namespace, name):
            factory = self._factories.get(key)
            if factory is not None:
                return factory
        return None

    def __contains__(self, key: object) -> bool:
        return key in self._factories

    def __len__(self) -> int:
        return len(self._factories)
