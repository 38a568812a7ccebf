"""Interpretation layer for structured XML reading.

This module turns tokenizer events into structured values. Tag and
attribute names are resolved to interpreters through a namespace-aware
registry, and every open element accumulates data in its interpreter until
it closes and is reduced into its parent.

Key Components:
    QualifiedName: Namespace and local name of a tag or attribute
    InterpreterRegistry: Four-tier fallback lookup of interpreter factories
    Context: Per-element directive scope, cloned on descent
    DefaultElement: Reducer producing lists, mappings and scalars
    StructInclude: Splices included documents into the parent element
    RootContainer: Collects the document element's value
"""

from .attributes import (
    AttributeInterpreter,
    DefaultAttribute,
    EmptyAttribute,
    StructAttribute,
    decode_struct_value,
)
from .context import (
    KEY,
    LIST_ELEMENT,
    SINGLE_USE_DIRECTIVES,
    TEXT_KEY,
    Context,
    ContextStack,
)
from .elements import (
    DataPair,
    DefaultElement,
    ElementInterpreter,
    ParsedValue,
    RootContainer,
    reduce_pairs,
)
from .include import INCLUDE_ELEMENT, StructInclude, substitute_constants
from .names import NAMESPACE_SEPARATOR, STRUCT_NAMESPACE, QualifiedName
from .registry import WILDCARD, InterpreterRegistry, InterpreterType

__all__ = [
    "AttributeInterpreter",
    "DefaultAttribute",
    "EmptyAttribute",
    "StructAttribute",
    "decode_struct_value",
    "KEY",
    "LIST_ELEMENT",
    "SINGLE_USE_DIRECTIVES",
    "TEXT_KEY",
    "Context",
    "ContextStack",
    "DataPair",
    "DefaultElement",
    "ElementInterpreter",
    "ParsedValue",
    "RootContainer",
    "reduce_pairs",
    "INCLUDE_ELEMENT",
    "StructInclude",
    "substitute_constants",
    "NAMESPACE_SEPARATOR",
    "STRUCT_NAMESPACE",
    "QualifiedName",
    "WILDCARD",
    "InterpreterRegistry",
    "InterpreterType",
]
