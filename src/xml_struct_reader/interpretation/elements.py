"""Element interpreters and the default reduction algorithm.

An element interpreter lives for as long as its element is open. It collects
ordered key/value pairs from attributes and closed child elements, buffers
character data, and on close reduces everything into one value that it hands
to its parent under its output key.

Reduction of a pair list into a value:

    * pairs whose key matches the list-grouping directive (or every child
      pair when the directive is the wildcard) become list items
    * remaining pairs go into a mapping, duplicates resolved by the
      configured ConflictPolicy
    * only list items -> list, only named pairs -> dict, both -> one dict
      holding integer indices for list items and names for the rest
"""

import weakref
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Union

from xml_struct_reader.interpretation.context import Context
from xml_struct_reader.interpretation.registry import WILDCARD
from xml_struct_reader.shared.config import ConflictPolicy, ReaderOptions
from xml_struct_reader.shared.errors import DataNotReadyError, InvalidArgumentError

# None, str, list of ParsedValue or dict of Key -> ParsedValue
ParsedValue = Any
Key = Union[str, int]


class DataPair(NamedTuple):
    """One accumulated key/value pair.

    Attributes:
        key: Mapping key, or the item's name when it becomes a list item
        value: Reduced value
        groupable: Whether list grouping may claim this pair. Only data
            from child elements is groupable; attributes and merged text
            always stay mapping entries.
    """

    key: Key
    value: ParsedValue
    groupable: bool = True


def reduce_pairs(
    pairs: Iterable[DataPair],
    list_element: Optional[str] = None,
    policy: ConflictPolicy = ConflictPolicy.REPLACE,
) -> ParsedValue:
    """Reduce accumulated pairs into a list or mapping.

    Args:
        pairs: Pairs in arrival order
        list_element: Active list-grouping key, WILDCARD, or None
        policy: How repeated mapping keys are resolved

    Returns:
        A list when every pair became a list item, otherwise a dict

    Examples:
        >>> reduce_pairs([DataPair("a", "1"), DataPair("a", "2")])
        {'a': '2'}
        >>> reduce_pairs([DataPair("a", "1"), DataPair("a", "2")],
        ...              policy=ConflictPolicy.MERGE)
        {'a': ['1', '2']}
        >>> reduce_pairs([DataPair("i", "0"), DataPair("x", "x"),
        ...               DataPair("i", "1")], list_element="i")
        {0: '0', 'x': 'x', 1: '1'}
    """
    result: Dict[Key, ParsedValue] = {}
    repeated: Dict[Key, List[ParsedValue]] = {}
    index = 0
    named = False

    for pair in pairs:
        if (
            list_element is not None
            and pair.groupable
            and (list_element == WILDCARD or pair.key == list_element)
        ):
            while index in result:
                index += 1
            result[index] = pair.value
            index += 1
            continue

        named = True
        if policy is ConflictPolicy.MERGE and pair.key in result:
            if pair.key in repeated:
                repeated[pair.key].append(pair.value)
            else:
                repeated[pair.key] = [result[pair.key], pair.value]
        else:
            result[pair.key] = pair.value

    for key, values in repeated.items():
        result[key] = values

    if not named:
        return list(result.values())
    return result


class ElementInterpreter(ABC):
    """Base class for everything that interprets one open element.

    Subclasses receive data through the ``add_*`` methods while the element
    is open and produce their value in ``finalize``. The parent is held as a
    weak back-reference; the reader's element trail owns the interpreters.
    """

    # Whether inherited single-use directives are dropped at construction
    consumes_directives = True

    def __init__(
        self,
        name: str,
        context: Context,
        reader: Any,
        parent: Optional["ElementInterpreter"] = None,
    ) -> None:
        """Initialize interpreter.

        Args:
            name: Local element name
            context: This element's own context snapshot
            reader: Reader driving the parse
            parent: Interpreter of the enclosing element

        Raises:
            InvalidArgumentError: If context is not a Context
        """
        if not isinstance(context, Context):
            raise InvalidArgumentError("Context is not a valid object.")

        self.name = name
        self.context = context
        self._reader = weakref.ref(reader)
        self._parent = weakref.ref(parent) if parent is not None else None
        self.options: ReaderOptions = reader.options

        if self.consumes_directives:
            self.context.consume_directives()

    @property
    def reader(self) -> Any:
        return self._reader()

    @property
    def parent(self) -> Optional["ElementInterpreter"]:
        return self._parent() if self._parent is not None else None

    @property
    def output_key(self) -> Key:
        """Key under which this element's value is stored in its parent."""
        override = self.context.key_override
        return override if override is not None else self.name

    @abstractmethod
    def add_element_data(self, key: Key, value: ParsedValue) -> None:
        """Accept the reduced value of a closed child element."""

    @abstractmethod
    def add_attribute_data(self, key: str, value: ParsedValue) -> None:
        """Accept data produced by an attribute interpreter."""

    @abstractmethod
    def add_character_data(self, data: str) -> None:
        """Accept a run of character data."""

    @abstractmethod
    def finalize(self) -> ParsedValue:
        """Reduce accumulated data into this element's value."""

    def close(self) -> ParsedValue:
        """Finalize and hand the value to the parent."""
        value = self.finalize()
        parent = self.parent
        if parent is not None:
            parent.add_element_data(self.output_key, value)
        return value


class DefaultElement(ElementInterpreter):
    """General-purpose reducer for ordinary elements."""

    def __init__(
        self,
        name: str,
        context: Context,
        reader: Any,
        parent: Optional[ElementInterpreter] = None,
    ) -> None:
        super().__init__(name, context, reader, parent)
        self._data: List[DataPair] = []
        self._text: List[str] = []
        self._text_runs: List[str] = []

    @property
    def data(self) -> List[DataPair]:
        return list(self._data)

    @property
    def splits_text_runs(self) -> bool:
        """Whether text interrupted by children is kept as separate runs."""
        return not self.options.text_join and self.context.text_key is not None

    def add_element_data(self, key: Key, value: ParsedValue) -> None:
        self._split_text_run()
        self._data.append(DataPair(key, value))

    def add_attribute_data(self, key: str, value: ParsedValue) -> None:
        self._data.append(DataPair(key, value, groupable=False))

    def add_character_data(self, data: str) -> None:
        if self.options.text_skip_empty and not data.strip():
            return
        self._text.append(data)

    def _split_text_run(self) -> None:
        if self.splits_text_runs and self._text:
            self._text_runs.append("".join(self._text))
            self._text.clear()

    def collect_text(self) -> Union[None, str, List[str]]:
        """Build the text value from buffered character data.

        Returns a string, or a list of runs when runs are kept separate.
        None means the text was dropped as empty.
        """
        split = self.splits_text_runs
        if split:
            self._split_text_run()
            runs = list(self._text_runs)
        else:
            runs = ["".join(self._text)]

        if self.options.text_trim:
            runs = [run.strip() for run in runs]
        if self.options.text_skip_empty:
            runs = [run for run in runs if run.strip()]

        if split:
            return runs or None
        return runs[0] if runs else None

    def finalize(self) -> ParsedValue:
        pairs = list(self._data)

        text_key = self.context.text_key
        if text_key is not None:
            text = self.collect_text()
            if text is not None:
                pairs.append(DataPair(text_key, text, groupable=False))

        if pairs:
            return reduce_pairs(
                pairs, self.context.list_element, self.options.key_conflict
            )
        return self.collect_text()


class RootContainer(DefaultElement):
    """Sentinel parent of the document element.

    Keeps the reader's initial context untouched and exposes the top-level
    element's pair as the read result.
    """

    consumes_directives = False

    def __init__(self, reader: Any, context: Optional[Context] = None) -> None:
        super().__init__(
            "", context if context is not None else reader.context, reader, None
        )

    @property
    def is_ready(self) -> bool:
        return bool(self._data)

    def add_character_data(self, data: str) -> None:
        pass

    def finalize(self) -> ParsedValue:
        return reduce_pairs(self._data, None, self.options.key_conflict)

    def close(self) -> ParsedValue:
        return self.finalize()

    def get_data(self) -> ParsedValue:
        """Return the document's value.

        Raises:
            DataNotReadyError: If no top-level element has closed yet
        """
        if not self.is_ready:
            raise DataNotReadyError("Data is not ready; the document has not been read.")
        return self.finalize()
