"""Closed code domains used by the document schema.

Every domain exposes ``from_code`` which either returns the matching member or
raises :class:`~gltf_lite.exceptions.InvalidEnumCode`. Nothing is ever mapped
to a default member behind the caller's back.
"""

from __future__ import annotations

import re
from enum import Enum, IntEnum
from typing import Any

from .exceptions import InvalidEnumCode


def domain_name(enum_cls: type) -> str:
    """Return the snake_case domain label for an enum class (``WrapMode`` -> ``wrap_mode``)."""

    return re.sub(r"(?<!^)(?=[A-Z])", "_", enum_cls.__name__).lower()


class _CodeMixin:
    @classmethod
    def from_code(cls, value: Any):
        # bool is an int subclass; ``true`` must never decode as 1
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidEnumCode(domain_name(cls), value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidEnumCode(domain_name(cls), value) from None


class ComponentType(_CodeMixin, IntEnum):
    BYTE = 5120
    UNSIGNED_BYTE = 5121
    SHORT = 5122
    UNSIGNED_SHORT = 5123
    UNSIGNED_INT = 5125
    FLOAT = 5126

    def byte_size(self) -> int:
        return _COMPONENT_SIZES[self]


_COMPONENT_SIZES = {
    ComponentType.BYTE: 1,
    ComponentType.UNSIGNED_BYTE: 1,
    ComponentType.SHORT: 2,
    ComponentType.UNSIGNED_SHORT: 2,
    ComponentType.UNSIGNED_INT: 4,
    ComponentType.FLOAT: 4,
}


class PrimitiveMode(_CodeMixin, IntEnum):
    POINTS = 0
    LINES = 1
    LINE_LOOP = 2
    LINE_STRIP = 3
    TRIANGLES = 4
    TRIANGLE_STRIP = 5
    TRIANGLE_FAN = 6


class Filter(_CodeMixin, IntEnum):
    NEAREST = 9728
    LINEAR = 9729
    NEAREST_MIPMAP_NEAREST = 9984
    LINEAR_MIPMAP_NEAREST = 9985
    NEAREST_MIPMAP_LINEAR = 9986
    LINEAR_MIPMAP_LINEAR = 9987


class WrapMode(_CodeMixin, IntEnum):
    CLAMP_TO_EDGE = 33071
    MIRRORED_REPEAT = 33648
    REPEAT = 10497


class BufferViewTarget(_CodeMixin, IntEnum):
    ARRAY_BUFFER = 34962
    ELEMENT_ARRAY_BUFFER = 34963


class AlphaMode(str, Enum):
    OPAQUE = "OPAQUE"
    MASK = "MASK"
    BLEND = "BLEND"

    @classmethod
    def from_code(cls, value: Any) -> "AlphaMode":
        if not isinstance(value, str):
            raise InvalidEnumCode(domain_name(cls), value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidEnumCode(domain_name(cls), value) from None


# Components per element for each accessor type tag.
ACCESSOR_TYPE_SIZES = {
    "SCALAR": 1,
    "VEC2": 2,
    "VEC3": 3,
    "VEC4": 4,
    "MAT2": 4,
    "MAT3": 9,
    "MAT4": 16,
}
