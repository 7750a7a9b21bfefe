from __future__ import annotations

from typing import Any

from pairs.errors import InvalidDimension


def validate_dimension(dimension: Any) -> int:
    """Return ``dimension`` when it is a positive even integer, raise InvalidDimension otherwise."""
    if isinstance(dimension, bool) or not isinstance(dimension, int):
        raise InvalidDimension(f"Board dimension must be an integer, got {dimension!r}")
    if dimension <= 0:
        raise InvalidDimension(f"Board dimension must be positive, got {dimension}")
    if dimension % 2 != 0:
        raise InvalidDimension(f"Board dimension must be an even number, got {dimension}")
    return dimension


def parse_dimension(value: Any) -> int:
    """Validate a raw difficulty selector value such as ``4`` or ``"4"``."""
    if isinstance(value, str):
        text = value.strip()
        try:
            value = int(text)
        except ValueError as exc:
            raise InvalidDimension(f"Board dimension must be a number, got {text!r}") from exc
    return validate_dimension(value)
