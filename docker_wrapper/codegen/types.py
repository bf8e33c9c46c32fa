"""Map flag value-type tags to field annotations and rendering shapes."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..metadata.model import FlagSpec
from ..runtime import RenderShape
from .naming import field_name

LOGGER = logging.getLogger(__name__)

LIST_TAG = "list"
MAP_TAG = "map"

PRIMITIVE_TAGS: dict[str, type] = {
    "bool": bool,
    "string": str,
    "rune": str,
    "int": int,
    "int8": int,
    "int16": int,
    "int32": int,
    "int64": int,
    "uint": int,
    "uint8": int,
    "uint16": int,
    "uint32": int,
    "uint64": int,
    "uintptr": int,
    "byte": int,
    "float32": float,
    "float64": float,
    "complex64": complex,
    "complex128": complex,
}

_HELPERS = {
    RenderShape.SINGLE: "flag",
    RenderShape.LIST: "list_flag",
    RenderShape.MAP: "map_flag",
}


@dataclass(frozen=True)
class FieldPlan:
    """How one flag appears in the generated option record."""

    flag: FlagSpec
    attr: str
    annotation: str
    shape: RenderShape
    python_type: object

    @property
    def helper(self) -> str:
        """Name of the runtime helper declaring this field."""
        return _HELPERS[self.shape]


def classify(tag: str) -> tuple[type, RenderShape]:
    """Return the value type and rendering shape for a type tag.

    Unknown tags fall back to an opaque string rendered like any scalar.
    """
    if tag == LIST_TAG:
        return list, RenderShape.LIST
    if tag == MAP_TAG:
        return dict, RenderShape.MAP
    if tag in PRIMITIVE_TAGS:
        return PRIMITIVE_TAGS[tag], RenderShape.SINGLE
    LOGGER.debug(f"Unrecognised flag type {tag!r}, rendering as string")
    return str, RenderShape.SINGLE


def plan_field(flag: FlagSpec) -> FieldPlan:
    value_type, shape = classify(flag.type)
    if shape is RenderShape.LIST:
        annotation = "list[str] | None"
        python_type = list[str] | None
    elif shape is RenderShape.MAP:
        annotation = "dict[str, str] | None"
        python_type = dict[str, str] | None
    else:
        annotation = f"{value_type.__name__} | None"
        python_type = value_type | None
    return FieldPlan(
        flag=flag,
        attr=field_name(flag.name),
        annotation=annotation,
        shape=shape,
        python_type=python_type,
    )


__all__ = ["FieldPlan", "LIST_TAG", "MAP_TAG", "PRIMITIVE_TAGS", "classify", "plan_field"]
