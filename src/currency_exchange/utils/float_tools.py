from __future__ import annotations

import math
from decimal import Decimal
from typing import TypeAlias

# Use where optimal type is `float`, but other types are also acceptable (and will be converted to `float`)
FloatLike: TypeAlias = float | int | Decimal | str


def as_finite_float(value: FloatLike) -> float:
    """Converts input to a finite `float`.

    Args:
        value: Input value as `FloatLike`.

    Returns:
        Value converted to `float`.

    Raises:
        TypeError: If $value is a bool or not a `FloatLike` type.
        ValueError: If $value cannot be parsed or is NaN / infinite.
    """
    # Raise: bool is an int subclass, but True / False are never meant as amounts or rates
    if isinstance(value, bool) or not isinstance(value, (float, int, Decimal, str)):
        raise TypeError(f"$value must be float, int, Decimal or str, but provided value is: {value!r}")

    # Raise: ints beyond the float range cannot be represented at all
    try:
        result = float(value)
    except OverflowError as e:
        raise ValueError(f"$value is too large for a float, but provided value is: {value!r}") from e

    # Raise: NaN and infinities break ordering and equality
    if not math.isfinite(result):
        raise ValueError(f"$value must be a finite number, but provided value is: {value!r}")

    return result
