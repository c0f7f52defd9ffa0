"""
Schema Model
=============
A `PropertySchema` describes the shape of one JSON value. Nodes nest through
`properties` (objects) and `items` (arrays, one child per position).

Schemas usually arrive as plain JSON dicts with camelCase keys:

    {
        "type": "object",
        "properties": {
            "id":    {"type": "integer", "minimum": 1},
            "email": {"type": "string", "format": "email"},
            "tags":  {"type": "array", "items": [{"type": "string"}]}
        }
    }

`PropertySchema.from_dict` turns that into a tree of nodes. No validation is
performed beyond what is needed to build the tree.
"""

import dataclasses as dc
from typing import Any, Dict, List, Optional

# Integral floats (3.0) in these fields are narrowed to int
_INTEGER_FIELDS = ("minimum", "maximum", "length", "min_length", "max_length")

# camelCase JSON key → dataclass field
_FIELD_ALIASES = {
    "enum": "enum",
    "useDefault": "use_default",
    "default": "default",
    "minLength": "min_length",
    "maxLength": "max_length",
    "countryCode": "country_code",
}


@dc.dataclass
class PropertySchema:
    type: str
    format: Optional[str] = None
    pattern: Optional[str] = None
    enum: Optional[List[Any]] = None
    use_default: bool = False
    default: Any = None
    minimum: Optional[int] = None
    maximum: Optional[int] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    length: Optional[int] = None
    country_code: Optional[str] = None
    items: Optional[List["PropertySchema"]] = None
    properties: Optional[Dict[str, "PropertySchema"]] = None
    # Informational only: every declared property is always generated
    required: Optional[List[str]] = None

    @staticmethod
    def from_dict(node: Dict[str, Any]) -> "PropertySchema":
        kwargs: Dict[str, Any] = {"type": node.get("type")}

        for key in ("format", "pattern", "minimum", "maximum", "length", "required"):
            if key in node:
                kwargs[key] = node[key]

        for key, field_name in _FIELD_ALIASES.items():
            if key in node:
                kwargs[field_name] = node[key]

        items = node.get("items")
        if items is not None:
            # A single item schema is treated as a one-element tuple
            if isinstance(items, dict):
                items = [items]
            kwargs["items"] = [PropertySchema.from_dict(item) for item in items]

        properties = node.get("properties")
        if properties is not None:
            kwargs["properties"] = {
                name: PropertySchema.from_dict(child)
                for name, child in properties.items()
            }

        for field_name in _INTEGER_FIELDS:
            value = kwargs.get(field_name)
            if isinstance(value, float) and value.is_integer():
                kwargs[field_name] = int(value)

        kwargs["use_default"] = bool(kwargs.get("use_default", False))
        return PropertySchema(**kwargs)
