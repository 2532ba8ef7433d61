"""Shared helper utilities."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple, TypeVar

Vector3 = Tuple[float, float, float]
Quaternion = Tuple[float, float, float, float]
T = TypeVar("T")


def debug_trim_string(value: Optional[str], limit: int = 30) -> Optional[str]:
    """Shorten long strings (mostly base64 data URIs) for ``repr`` output."""

    if value is None or len(value) <= limit:
        return value
    return f"{value[:limit]}.., total length: {len(value)}"


def to_float_tuple(values: Iterable[T], size: int) -> Tuple[float, ...]:
    """Convert a JSON number array into a tuple of ``size`` floats."""

    items = list(values)
    if len(items) != size:
        raise ValueError(f"Expected a {size} component vector.")
    return tuple(float(value) for value in items)


def vector_or(values: Optional[Sequence[float]], default: Tuple[float, ...]) -> Tuple[float, ...]:
    """Return ``values`` as a float tuple, or ``default`` when it is absent."""

    if values is None:
        return default
    return to_float_tuple(values, len(default))
