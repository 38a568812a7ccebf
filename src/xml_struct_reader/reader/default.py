"""Default structured reader built on interpreters.

DefaultXMLStructReader keeps three structures in lockstep with the XML
nesting depth: the element trail (one interpreter per open element), the
context stack (one snapshot per open element) and, below both, the root
container that receives the document element's value.
"""

from typing import Any, List, Optional, Tuple

from xml_struct_reader.interpretation import (
    SINGLE_USE_DIRECTIVES,
    STRUCT_NAMESPACE,
    WILDCARD,
    Context,
    ContextStack,
    DefaultAttribute,
    DefaultElement,
    ElementInterpreter,
    EmptyAttribute,
    InterpreterRegistry,
    InterpreterType,
    QualifiedName,
    RootContainer,
    StructAttribute,
    StructInclude,
)
from xml_struct_reader.interpretation.include import INCLUDE_ELEMENT
from xml_struct_reader.reader.base import XMLStructReader
from xml_struct_reader.shared import (
    AttributeInterpreterNotFoundError,
    DataNotReadyError,
    ElementInterpreterNotFoundError,
)


class DefaultXMLStructReader(XMLStructReader):
    """Reader that maps a document onto nested lists and dictionaries.

    Examples:
        >>> import io
        >>> DefaultXMLStructReader(io.StringIO("<root><a>1</a></root>")).read()
        {'root': {'a': '1'}}
    """

    def __init__(
        self,
        stream: Any,
        options: Optional[dict] = None,
        context: Optional[Context] = None,
        correlation_id: Optional[str] = None,
        include_depth: int = 0,
    ) -> None:
        super().__init__(stream, options, context, correlation_id, include_depth)
        self.registry = InterpreterRegistry()
        self._context_stack = ContextStack(self.context)
        self._trail: List[ElementInterpreter] = []
        self._root = RootContainer(self)
        self.register_interpreters(self.registry)

    def register_interpreters(self, registry: InterpreterRegistry) -> None:
        """Register the default element and attribute interpreters.

        Subclasses override this to install their own set; a set without
        a wildcard entry makes unmatched names a hard error.
        """
        registry.register(InterpreterType.ELEMENT, WILDCARD, WILDCARD, DefaultElement)
        registry.register(
            InterpreterType.ELEMENT, STRUCT_NAMESPACE, INCLUDE_ELEMENT, StructInclude
        )

        registry.register(InterpreterType.ATTRIBUTE, WILDCARD, WILDCARD, DefaultAttribute)
        registry.register(
            InterpreterType.ATTRIBUTE, STRUCT_NAMESPACE, WILDCARD, EmptyAttribute
        )
        for directive in SINGLE_USE_DIRECTIVES:
            registry.register(
                InterpreterType.ATTRIBUTE, STRUCT_NAMESPACE, directive, StructAttribute
            )

    @property
    def depth(self) -> int:
        """Number of currently open elements."""
        return len(self._trail)

    @property
    def current_element(self) -> ElementInterpreter:
        """Innermost open interpreter, or the root container."""
        return self._trail[-1] if self._trail else self._root

    def start_element(self, name: str, attributes: List[Tuple[str, str]]) -> None:
        qname = QualifiedName.parse(name)
        factory = self.registry.lookup(
            InterpreterType.ELEMENT, qname.namespace, qname.local
        )
        if factory is None:
            raise ElementInterpreterNotFoundError(qname.namespace, qname.local)

        context = self._context_stack.top().clone()
        interpreter = factory(qname.local, context, self, self.current_element)
        self._context_stack.push(interpreter.context)
        self._trail.append(interpreter)

        for attribute_name, value in attributes:
            self.process_attribute(interpreter, attribute_name, value)

    def process_attribute(
        self, element: ElementInterpreter, name: str, value: str
    ) -> None:
        """Hand one attribute to its interpreter."""
        qname = QualifiedName.parse(name)
        factory = self.registry.lookup(
            InterpreterType.ATTRIBUTE, qname.namespace, qname.local
        )
        if factory is None:
            raise AttributeInterpreterNotFoundError(qname.namespace, qname.local)
        factory(qname.local, self).process(element, value)

    def character_data(self, data: str) -> None:
        if self._trail:
            self._trail[-1].add_character_data(data)

    def end_element(self, name: str) -> None:
        # Reduce while the element's context is still on top, then drop both
        self._trail[-1].close()
        self._trail.pop()
        self._context_stack.pop()

    def get_data(self) -> Any:
        """Return the document's value.

        Raises:
            DataNotReadyError: If ``read`` has not completed successfully
        """
        if not self.is_done:
            raise DataNotReadyError("Data is not ready; call read() first.")
        return self._root.get_data()
