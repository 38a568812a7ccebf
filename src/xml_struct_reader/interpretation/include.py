"""File inclusion through the reserved ``include`` element.

``<x:include file="path"/>`` (or a ``<file>`` child) reads another document
with a nested reader and splices that document's root pair into the
including element's parent, under the included root's own tag name. A path
that is missing or cannot be opened contributes nothing.
"""

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, List, Optional

from xml_struct_reader.interpretation.context import Context
from xml_struct_reader.interpretation.elements import (
    DataPair,
    ElementInterpreter,
    Key,
    ParsedValue,
    reduce_pairs,
)
from xml_struct_reader.shared.config import DEFAULT_INCLUDE_MAX_DEPTH, ReaderOption
from xml_struct_reader.shared.errors import IncludeDepthError
from xml_struct_reader.shared.result import DiagnosticSeverity

INCLUDE_ELEMENT = "include"
FILE_KEY = "file"

_PLACEHOLDER = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

_NOT_LOADED = object()


def substitute_constants(path: str, constants: Optional[Mapping]) -> str:
    """Replace ``${NAME}`` placeholders; undefined names become empty.

    Examples:
        >>> substitute_constants("${ROOT}/a.xml", {"ROOT": "/data"})
        '/data/a.xml'
        >>> substitute_constants("${MISSING}/a.xml", {})
        '/a.xml'
    """
    constants = constants or {}

    def replace(match: "re.Match[str]") -> str:
        value = constants.get(match.group(1))
        return "" if value is None else str(value)

    return _PLACEHOLDER.sub(replace, path)


class StructInclude(ElementInterpreter):
    """Element interpreter that splices an included document into its parent."""

    def __init__(
        self,
        name: str,
        context: Context,
        reader: Any,
        parent: Optional[ElementInterpreter] = None,
    ) -> None:
        super().__init__(name, context, reader, parent)
        self.metadata: Dict[Key, ParsedValue] = {}
        self._included: Any = _NOT_LOADED
        self.logger = reader.logger.child("struct_include")

    def add_element_data(self, key: Key, value: ParsedValue) -> None:
        self.metadata[key] = value

    def add_attribute_data(self, key: str, value: ParsedValue) -> None:
        self.metadata[key] = value

    def add_character_data(self, data: str) -> None:
        pass

    @property
    def path(self) -> Optional[str]:
        """Requested path with placeholders substituted, or None."""
        file = self.metadata.get(FILE_KEY)
        if not isinstance(file, str) or not file.strip():
            return None
        return substitute_constants(
            file.strip(), self.options.get(ReaderOption.INCLUDE_CONSTANTS)
        )

    def resolve_path(self) -> Optional[Path]:
        """Find the included file, trying the include base path first."""
        path = self.path
        if path is None:
            return None

        candidates: List[Path] = []
        base = self.options.get(ReaderOption.INCLUDE_PATH)
        if base:
            candidates.append(Path(base) / path)
        candidates.append(Path(path))

        for candidate in candidates:
            if candidate.is_file():
                return candidate
        return None

    def _skip(self, message: str, details: Dict[str, Any]) -> None:
        reader = self.reader
        reader.metrics.includes_skipped += 1
        reader.add_diagnostic(
            DiagnosticSeverity.WARNING, message, "struct_include", details=details
        )
        self.logger.warning(message, extra=details)

    def _create_factory(self) -> Any:
        from xml_struct_reader.reader.factory import DefaultXMLStructReaderFactory

        factory_class = (
            self.options.get(ReaderOption.INCLUDE_READER_FACTORY)
            or DefaultXMLStructReaderFactory
        )
        return factory_class(self.reader, self.context.clone())

    def get_included_data(self) -> Optional[ParsedValue]:
        """Read the included document once and cache its data.

        Returns:
            The included document's data, or None when it was skipped

        Raises:
            IncludeDepthError: If nesting exceeds the include depth limit
        """
        if self._included is not _NOT_LOADED:
            return self._included

        self._included = None
        reader = self.reader

        resolved = self.resolve_path()
        if resolved is None:
            self._skip(
                "Included file could not be resolved",
                {"requested": self.metadata.get(FILE_KEY), "path": self.path},
            )
            return None

        limit = self.options.get(ReaderOption.INCLUDE_MAX_DEPTH) or DEFAULT_INCLUDE_MAX_DEPTH
        depth = reader.include_depth + 1
        if depth > limit:
            raise IncludeDepthError(depth, limit, str(resolved))

        self.logger.debug(
            "Reading included file",
            extra={"path": str(resolved), "include_depth": depth},
        )

        try:
            sub_reader = self._create_factory().create_reader(resolved, self.options)
        except OSError as e:
            self._skip(
                "Included file could not be opened",
                {"path": str(resolved), "error": str(e)},
            )
            return None

        with sub_reader:
            self._included = sub_reader.read()

        reader.metrics.includes_resolved += 1
        return self._included

    def finalize(self) -> ParsedValue:
        """Reduce the included data with this element's own directives."""
        data = self.get_included_data()
        if data is None:
            return None
        if not isinstance(data, Mapping):
            return data

        override = self.context.key_override
        pairs = [
            DataPair(override if override is not None else key, value)
            for key, value in data.items()
        ]
        return reduce_pairs(
            pairs, self.context.list_element, self.options.key_conflict
        )

    def close(self) -> ParsedValue:
        """Splice the included entries into the parent."""
        value = self.finalize()
        parent = self.parent
        if value is None or parent is None:
            return value

        if isinstance(value, list):
            for index, item in enumerate(value):
                parent.add_element_data(index, item)
        elif isinstance(value, Mapping):
            for key, item in value.items():
                parent.add_element_data(key, item)
        else:
            parent.add_element_data(self.output_key, value)
        return value
