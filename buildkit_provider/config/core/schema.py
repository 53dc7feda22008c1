"""
Schema attribute declarations.

This module provides the building blocks a provider uses to declare the
shape of its configuration: scalar string attributes and lists of nested
objects, each marked required/optional/sensitive with a description.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Mapping, Union


@dataclass(frozen=True)
class StringAttribute:
    """A scalar string attribute."""
    description: str = ""
    required: bool = False
    optional: bool = False
    sensitive: bool = False

    python_type = str
    type_name = "string"

    def to_dict(self) -> Dict[str, Any]:
        data = {"type": self.type_name, "description": self.description}
        if self.sensitive:
            data["sensitive"] = True
        return data


@dataclass(frozen=True)
class NestedAttributeObject:
    """The object shape repeated by a list nested attribute."""
    attributes: Mapping[str, "Attribute"] = field(default_factory=dict)

    def required_names(self) -> List[str]:
        return [name for name, attr in self.attributes.items() if attr.required]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {name: attr.to_dict() for name, attr in self.attributes.items()},
            "required": self.required_names()
        }


@dataclass(frozen=True)
class ListNestedAttribute:
    """An ordered list of nested objects."""
    nested_object: NestedAttributeObject = field(default_factory=NestedAttributeObject)
    description: str = ""
    required: bool = False
    optional: bool = False
    sensitive: bool = False

    python_type = list
    type_name = "array"

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "type": self.type_name,
            "description": self.description,
            "items": self.nested_object.to_dict()
        }
        if self.sensitive:
            data["sensitive"] = True
        return data


Attribute = Union[StringAttribute, ListNestedAttribute]


@dataclass(frozen=True)
class Schema:
    """
    Top-level configuration schema.

    Hosts use it to introspect the accepted keys and to check the surface
    shape of raw configuration before it reaches value validation.
    """
    attributes: Mapping[str, Attribute] = field(default_factory=dict)
    description: str = ""

    def required_names(self) -> List[str]:
        return [name for name, attr in self.attributes.items() if attr.required]

    def sensitive_paths(self) -> List[str]:
        """Dotted paths of every attribute marked sensitive."""
        paths = []
        for name, attr in self.attributes.items():
            if attr.sensitive:
                paths.append(name)
            if isinstance(attr, ListNestedAttribute):
                for nested_name, nested in attr.nested_object.attributes.items():
                    if nested.sensitive:
                        paths.append(f"{name}.{nested_name}")
        return paths

    def to_dict(self) -> Dict[str, Any]:
        """Render as a JSON-schema-like dictionary."""
        return {
            "type": "object",
            "description": self.description,
            "properties": {name: attr.to_dict() for name, attr in self.attributes.items()},
            "required": self.required_names()
        }
