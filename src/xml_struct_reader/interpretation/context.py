"""Parse-time context scopes.

Each open element owns a Context snapshot cloned from its parent's. Most
entries inherit down the whole subtree, but the single-use directives
(list grouping, text merging and key override) belong to the element that
declared them: a child drops the copies it inherited as soon as its
interpreter is constructed.
"""

from collections.abc import MutableMapping
from typing import Any, Dict, Iterator, List, Optional

LIST_ELEMENT = "listElement"
TEXT_KEY = "textKey"
KEY = "key"

SINGLE_USE_DIRECTIVES = (LIST_ELEMENT, TEXT_KEY, KEY)


class Context(MutableMapping):
    """Mapping of directive name to value for one element scope."""

    def __init__(self, values: Optional[Dict[str, Any]] = None) -> None:
        self._values: Dict[str, Any] = dict(values or {})

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._values[key] = value

    def __delitem__(self, key: str) -> None:
        del self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Context({self._values!r})"

    def clone(self) -> "Context":
        """Copy this scope for a child element.

        Values are strings, booleans or None, so a shallow copy isolates
        the child's mutations from the parent.
        """
        return Context(self._values)

    def consume_directives(self) -> None:
        """Drop inherited single-use directives from this scope."""
        for directive in SINGLE_USE_DIRECTIVES:
            self._values.pop(directive, None)

    @property
    def list_element(self) -> Optional[str]:
        return self._values.get(LIST_ELEMENT)

    @property
    def text_key(self) -> Optional[str]:
        return self._values.get(TEXT_KEY)

    @property
    def key_override(self) -> Optional[str]:
        return self._values.get(KEY)


class ContextStack:
    """Stack of context snapshots mirroring the element nesting depth."""

    def __init__(self, root: Context) -> None:
        self._root = root
        self._stack: List[Context] = []

    def push(self, context: Context) -> None:
        self._stack.append(context)

    def pop(self) -> Context:
        return self._stack.pop()

    def top(self) -> Context:
        """Context of the innermost open element, or the root context."""
        return self._stack[-1] if self._stack else self._root

    @property
    def depth(self) -> int:
        return len(self._stack)
