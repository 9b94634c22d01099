"""Simple JSON-schema definitions, generation from types and validation."""

from __future__ import annotations

import dataclasses
import inspect
import json
import types
import typing
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


class DataType(str, Enum):
    OBJECT = "object"
    NUMBER = "number"
    INTEGER = "integer"
    STRING = "string"
    ARRAY = "array"
    NULL = "null"
    BOOLEAN = "boolean"


class SchemaValidationError(ValueError):
    """Data does not match the schema."""


@dataclass
class Definition:
    """A JSON schema node."""

    type: Optional[DataType] = None
    description: str = ""
    enum: list = field(default_factory=list)
    properties: dict = field(default_factory=dict)
    required: list = field(default_factory=list)
    items: Optional["Definition"] = None
    additional_properties: Any = None

    def to_dict(self) -> dict:
        out: dict = {}
        if self.type:
            out["type"] = DataType(self.type).value
        if self.description:
            out["description"] = self.description
        if self.enum:
            out["enum"] = list(self.enum)
        out["properties"] = {k: v.to_dict() for k, v in self.properties.items()}
        if self.required:
            out["required"] = list(self.required)
        if self.items is not None:
            out["items"] = self.items.to_dict()
        if self.additional_properties is not None:
            ap = self.additional_properties
            out["additionalProperties"] = ap.to_dict() if isinstance(ap, Definition) else ap
        return out

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    def unmarshal(self, content: Union[str, bytes]) -> Any:
        """Parse content, check it against this schema and return it."""
        return verify_schema_and_unmarshal(self, content)


_SIMPLE_NAMES: dict = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "None": type(None),
    "NoneType": type(None),
    "list": list,
    "tuple": tuple,
    "set": set,
    "frozenset": frozenset,
    "List": list,
    "Tuple": tuple,
    "Set": set,
    "FrozenSet": frozenset,
    "Sequence": list,
}


def _split_top_level(text: str, sep: str) -> list:
    parts = []
    depth = 0
    current = []
    for ch in text:
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
        if ch == sep and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    parts.append("".join(current).strip())
    return parts


def _lookup_name(name: str, owner: type) -> Any:
    for prefix in ("typing.", "t."):
        if name.startswith(prefix):
            name = name[len(prefix):]
    if name in _SIMPLE_NAMES:
        return _SIMPLE_NAMES[name]
    if name == owner.__name__:
        return owner
    module = inspect.getmodule(owner)
    target: Any = module
    for part in name.split("."):
        if target is None or not hasattr(target, part):
            raise TypeError(f"unsupported type: {name!r}")
        target = getattr(target, part)
    return target


def _resolve_annotation(annotation: Any, owner: type) -> Any:
    """Turn a string annotation into a type object without running code."""
    if not isinstance(annotation, str):
        return annotation
    text = annotation.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"":
        text = text[1:-1].strip()
    alternatives = _split_top_level(text, "|")
    if len(alternatives) > 1:
        resolved = tuple(_resolve_annotation(a, owner) for a in alternatives)
        return Union[resolved]
    if text.endswith("]") and "[" in text:
        head, inner = text.split("[", 1)
        head = head.strip()
        args = tuple(
            _resolve_annotation(a, owner) for a in _split_top_level(inner[:-1], ",") if a
        )
        base = head.split(".")[-1]
        if base == "Optional":
            return Optional[args[0]]
        if base == "Union":
            return Union[args]
        container = _lookup_name(head, owner)
        if container in (list, tuple, set, frozenset):
            return typing.List[args[0]] if container is list else container[args]
        raise TypeError(f"unsupported type: {text!r}")
    return _lookup_name(text, owner)


def generate_schema_for_type(tp: Any) -> Definition:
    """Derive a schema from a Python type or dataclass."""
    if tp is str:
        return Definition(type=DataType.STRING)
    if tp is bool:
        return Definition(type=DataType.BOOLEAN)
    if tp is int:
        return Definition(type=DataType.INTEGER)
    if tp is float:
        return Definition(type=DataType.NUMBER)
    origin = typing.get_origin(tp)
    args = typing.get_args(tp)
    if origin in (list, tuple, set, frozenset) or tp in (list, tuple):
        if not args:
            raise TypeError(f"unsupported type: {tp!r}")
        return Definition(type=DataType.ARRAY, items=generate_schema_for_type(args[0]))
    if origin is Union or (hasattr(types, "UnionType") and isinstance(tp, types.UnionType)):
        rest = [a for a in args if a is not type(None)]
        if len(rest) == 1 and len(args) == 2:
            return generate_schema_for_type(rest[0])
        raise TypeError(f"unsupported type: {tp!r}")
    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        return _schema_object(tp)
    raise TypeError(f"unsupported type: {tp!r}")


def _schema_object(tp: type) -> Definition:
    properties: dict = {}
    required: list = []
    for f in dataclasses.fields(tp):
        if f.name.startswith("_"):
            continue
        tag = f.metadata.get("json", "")
        is_required = True
        if not tag:
            name = f.name
        elif tag.endswith(",omitempty"):
            name = tag[: -len(",omitempty")]
            is_required = False
        else:
            name = tag
        item = generate_schema_for_type(_resolve_annotation(f.type, tp))
        description = f.metadata.get("description", "")
        if description:
            item.description = description
        properties[name] = item
        flag = f.metadata.get("required")
        if flag is not None:
            is_required = bool(flag)
        if is_required:
            required.append(name)
    return Definition(
        type=DataType.OBJECT,
        properties=properties,
        required=required,
        additional_properties=False,
    )


def validate(schema: Definition, data: Any) -> bool:
    """Check data against schema."""
    kind = schema.type
    if kind == DataType.OBJECT:
        if not isinstance(data, dict):
            return False
        if any(name not in data for name in schema.required):
            return False
        return all(
            validate(sub, data[key]) for key, sub in schema.properties.items() if key in data
        )
    if kind == DataType.ARRAY:
        if not isinstance(data, list):
            return False
        if schema.items is None:
            raise ValueError("array schema has no items definition")
        return all(validate(schema.items, item) for item in data)
    if kind == DataType.STRING:
        return isinstance(data, str)
    if kind == DataType.NUMBER:
        return isinstance(data, (int, float)) and not isinstance(data, bool)
    if kind == DataType.INTEGER:
        return isinstance(data, int) and not isinstance(data, bool)
    if kind == DataType.BOOLEAN:
        return isinstance(data, bool)
    if kind == DataType.NULL:
        return data is None
    return False


def verify_schema_and_unmarshal(schema: Definition, content: Union[str, bytes]) -> Any:
    """Parse JSON content, validate it and return the decoded value."""
    data = json.loads(content)
    if not validate(schema, data):
        raise SchemaValidationError("data validation failed against the provided schema")
    return data