"""Reader options for structured XML reading.

Options are identified by the closed ReaderOption enum. A ReaderOptions
instance is built from a reader's default option set and a caller-supplied
mapping: keys that are not part of the defaults are silently dropped, and
the result is immutable once constructed.
"""

import importlib
import inspect
from collections.abc import Mapping
from enum import Enum, auto
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Optional

from xml_struct_reader.shared.errors import XMLStructReaderError

DEFAULT_INCLUDE_MAX_DEPTH = 16

# Module searched for include reader factories given by bare class name
DEFAULT_FACTORY_MODULE = "xml_struct_reader.reader"


class ReaderOption(str, Enum):
    """Recognized option keys."""

    KEY_CONFLICT = "key_conflict"
    TEXT_TRIM = "text_trim"
    TEXT_JOIN = "text_join"
    TEXT_SKIP_EMPTY = "text_skip_empty"
    INCLUDE_PATH = "include_path"
    INCLUDE_READER_FACTORY = "include_reader_factory"
    INCLUDE_CONSTANTS = "include_constants"
    INCLUDE_MAX_DEPTH = "include_max_depth"

    def __str__(self) -> str:
        return self.value


class ConflictPolicy(Enum):
    """What happens when a mapping key is seen more than once."""

    REPLACE = auto()  # Last writer wins
    MERGE = auto()    # Repeated keys collect their values into a list


class ConfigError(XMLStructReaderError):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when an option value fails validation."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


def default_options() -> Dict[str, Any]:
    """Return the option set recognized by every reader."""
    return {
        ReaderOption.KEY_CONFLICT.value: ConflictPolicy.REPLACE,
        ReaderOption.TEXT_TRIM.value: True,
        ReaderOption.TEXT_JOIN.value: True,
        ReaderOption.TEXT_SKIP_EMPTY.value: True,
        ReaderOption.INCLUDE_PATH.value: None,
        ReaderOption.INCLUDE_READER_FACTORY.value: None,
        ReaderOption.INCLUDE_CONSTANTS.value: {},
        ReaderOption.INCLUDE_MAX_DEPTH.value: DEFAULT_INCLUDE_MAX_DEPTH,
    }


def resolve_factory(factory: Any) -> type:
    """Resolve an include reader factory given as class or type name.

    A bare name is looked up in DEFAULT_FACTORY_MODULE, a dotted name is
    imported from its module.

    Raises:
        ConfigValidationError: If the name cannot be resolved or does not
            denote a reader factory class
    """
    field_name = ReaderOption.INCLUDE_READER_FACTORY.value

    if isinstance(factory, str):
        module_name, _, class_name = factory.strip().rpartition(".")
        try:
            module = importlib.import_module(module_name or DEFAULT_FACTORY_MODULE)
            factory = getattr(module, class_name)
        except (ImportError, AttributeError, ValueError) as e:
            raise ConfigValidationError(
                f"include_reader_factory '{factory}' could not be resolved",
                field_name=field_name,
                suggestions=["DefaultXMLStructReaderFactory"],
            ) from e

    if (
        not isinstance(factory, type)
        or inspect.isabstract(factory)
        or not callable(getattr(factory, "create_reader", None))
    ):
        raise ConfigValidationError(
            "include_reader_factory must be a reader factory class or its name",
            field_name=field_name,
        )
    return factory


def _key(option: Any) -> str:
    """Normalize an option key given as enum member or plain string."""
    if isinstance(option, ReaderOption):
        return option.value
    return str(option)


class ReaderOptions(Mapping):
    """Immutable, whitelisted option mapping.

    Lookups accept either ReaderOption members or their string values.
    Unknown keys read through ``get`` yield the supplied default.
    """

    def __init__(
        self,
        defaults: Optional[Mapping] = None,
        overrides: Optional[Mapping] = None,
    ) -> None:
        """Initialize options.

        Args:
            defaults: The recognized option set with default values
            overrides: Caller-supplied values; unknown keys are ignored

        Raises:
            ConfigValidationError: If a recognized option has an invalid value
        """
        values = {_key(k): v for k, v in (defaults or default_options()).items()}
        for option, value in (overrides or {}).items():
            key = _key(option)
            if key in values:
                values[key] = value

        self._values = MappingProxyType(values)
        self._validate()

    def _validate(self) -> None:
        """Validate and normalize recognized option values."""
        values = dict(self._values)

        policy = values.get(ReaderOption.KEY_CONFLICT.value)
        if policy is not None and not isinstance(policy, ConflictPolicy):
            try:
                values[ReaderOption.KEY_CONFLICT.value] = ConflictPolicy[
                    str(policy).upper()
                ]
            except KeyError as e:
                raise ConfigValidationError(
                    f"key_conflict must be one of {[p.name for p in ConflictPolicy]}",
                    field_name=ReaderOption.KEY_CONFLICT.value,
                ) from e

        include_path = values.get(ReaderOption.INCLUDE_PATH.value)
        if include_path is not None and not isinstance(include_path, (str, Path)):
            raise ConfigValidationError(
                "include_path must be a string, a Path or None",
                field_name=ReaderOption.INCLUDE_PATH.value,
            )

        constants = values.get(ReaderOption.INCLUDE_CONSTANTS.value)
        if constants is not None and not isinstance(constants, Mapping):
            raise ConfigValidationError(
                "include_constants must be a mapping",
                field_name=ReaderOption.INCLUDE_CONSTANTS.value,
            )

        factory = values.get(ReaderOption.INCLUDE_READER_FACTORY.value)
        if factory is not None:
            values[ReaderOption.INCLUDE_READER_FACTORY.value] = resolve_factory(factory)

        max_depth = values.get(ReaderOption.INCLUDE_MAX_DEPTH.value)
        if max_depth is not None and (
            not isinstance(max_depth, int) or max_depth <= 0
        ):
            raise ConfigValidationError(
                "include_max_depth must be > 0",
                field_name=ReaderOption.INCLUDE_MAX_DEPTH.value,
            )

        self._values = MappingProxyType(values)

    def __getitem__(self, option: Any) -> Any:
        return self._values[_key(option)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, option: object) -> bool:
        return _key(option) in self._values

    def __repr__(self) -> str:
        return f"ReaderOptions({dict(self._values)!r})"

    @property
    def key_conflict(self) -> ConflictPolicy:
        """Configured key-conflict policy."""
        return self.get(ReaderOption.KEY_CONFLICT, ConflictPolicy.REPLACE)

    @property
    def text_trim(self) -> bool:
        return bool(self.get(ReaderOption.TEXT_TRIM, True))

    @property
    def text_join(self) -> bool:
        return bool(self.get(ReaderOption.TEXT_JOIN, True))

    @property
    def text_skip_empty(self) -> bool:
        return bool(self.get(ReaderOption.TEXT_SKIP_EMPTY, True))

    def override(self, **kwargs: Any) -> "ReaderOptions":
        """Create a new option set with specific overrides.

        Example:
            >>> options = ReaderOptions()
            >>> options.override(text_trim=False)[ReaderOption.TEXT_TRIM]
            False
        """
        values = dict(self._values)
        values.update(kwargs)
        return ReaderOptions(self._values, values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert options to a plain dictionary."""
        return {
            key: value.name if isinstance(value, Enum) else value
            for key, value in self._values.items()
        }
