"""
Configuration validation framework.

This module provides the diagnostics model and the validators that turn
raw configuration data into diagnostics.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional, Iterator, Generic, TypeVar

from buildkit_provider.core.enums import DiagnosticKind, DiagnosticSeverity
from buildkit_provider.logger import get_buildkit_logger
from .schema import Schema, ListNestedAttribute, NestedAttributeObject

T = TypeVar('T')


@dataclass(frozen=True)
class Diagnostic:
    """A structured error or warning surfaced to the host."""
    severity: DiagnosticSeverity
    kind: DiagnosticKind
    summary: str
    detail: str = ""
    attribute: Optional[str] = None

    @classmethod
    def error(cls, kind: DiagnosticKind, summary: str, detail: str = "",
              attribute: Optional[str] = None) -> "Diagnostic":
        return cls(DiagnosticSeverity.ERROR, kind, summary, detail, attribute)

    @classmethod
    def warning(cls, kind: DiagnosticKind, summary: str, detail: str = "",
                attribute: Optional[str] = None) -> "Diagnostic":
        return cls(DiagnosticSeverity.WARNING, kind, summary, detail, attribute)

    def __str__(self):
        return f"{self.summary}: {self.detail}" if self.detail else self.summary


class Diagnostics:
    """Ordered collection of diagnostics."""

    def __init__(self, items: Optional[List[Diagnostic]] = None):
        self._items: List[Diagnostic] = list(items or [])

    def append(self, diagnostic: Diagnostic):
        self._items.append(diagnostic)

    def extend(self, diagnostics):
        self._items.extend(diagnostics)

    def has_error(self) -> bool:
        return any(d.severity == DiagnosticSeverity.ERROR for d in self._items)

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self._items if d.severity == DiagnosticSeverity.ERROR]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self._items if d.severity == DiagnosticSeverity.WARNING]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return len(self._items) > 0

    def __getitem__(self, index) -> Diagnostic:
        return self._items[index]

    def __repr__(self):
        return f"Diagnostics({self._items!r})"


@dataclass
class ValidationResult(Generic[T]):
    """Result of configuration validation: the canonical value or diagnostics."""
    value: Optional[T] = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    @property
    def is_valid(self) -> bool:
        return not self.diagnostics.has_error()

    def as_tuple(self):
        return self.value, self.diagnostics

    def __bool__(self):
        return self.is_valid


class ConfigValidator(ABC):
    """Abstract base class for configuration validators."""

    def __init__(self, domain: str):
        self.domain = domain
        self.logger = get_buildkit_logger().bind(component=f"ConfigValidator_{domain}")

    @abstractmethod
    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """Validate configuration data."""
        pass


class SchemaValidator(ConfigValidator):
    """
    Shape validator driven by a Schema declaration.

    Checks attribute names and value types only. Required-ness of nested
    attributes is left to the domain validator, which owns that policy.
    """

    def __init__(self, domain: str, schema: Schema):
        super().__init__(domain)
        self.schema = schema

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """Validate configuration against schema."""
        result = ValidationResult(value=config)

        if not isinstance(config, dict):
            result.diagnostics.append(Diagnostic.error(
                DiagnosticKind.INVALID_ATTRIBUTE_TYPE,
                "Invalid Configuration",
                f"Configuration must be an object, got {type(config).__name__}"
            ))
            result.value = None
            return result

        self._validate_attributes(config, self.schema.attributes, result.diagnostics)
        if result.diagnostics.has_error():
            result.value = None
        return result

    def _validate_attributes(self, config: Dict[str, Any], attributes, diagnostics: Diagnostics, path: str = ""):
        """Recursively validate a mapping against attribute declarations."""
        for key, value in config.items():
            full_path = f"{path}.{key}" if path else key

            if key not in attributes:
                diagnostics.append(Diagnostic.error(
                    DiagnosticKind.UNKNOWN_ATTRIBUTE,
                    "Unsupported Argument",
                    f"An argument named '{full_path}' is not expected here.",
                    attribute=full_path
                ))
                continue

            if value is None:
                continue

            attribute = attributes[key]
            if not isinstance(value, attribute.python_type):
                diagnostics.append(Diagnostic.error(
                    DiagnosticKind.INVALID_ATTRIBUTE_TYPE,
                    "Incorrect Attribute Value Type",
                    f"Attribute '{full_path}' must be of type {attribute.type_name}, "
                    f"got {type(value).__name__}",
                    attribute=full_path
                ))
                continue

            if isinstance(attribute, ListNestedAttribute):
                self._validate_nested_list(value, attribute.nested_object, diagnostics, full_path)

    def _validate_nested_list(self, items: list, nested: NestedAttributeObject,
                              diagnostics: Diagnostics, path: str):
        for index, item in enumerate(items):
            item_path = f"{path}[{index}]"
            if not isinstance(item, dict):
                diagnostics.append(Diagnostic.error(
                    DiagnosticKind.INVALID_ATTRIBUTE_TYPE,
                    "Incorrect Attribute Value Type",
                    f"Attribute '{item_path}' must be of type object, got {type(item).__name__}",
                    attribute=item_path
                ))
                continue
            self._validate_attributes(item, nested.attributes, diagnostics, item_path)
