from __future__ import annotations

from enum import StrEnum
from typing import Any, Optional, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


class ColorMapping(StrEnum):
    """Scalar projection of a complex value."""
    MODULUS = "modulus"
    ARGUMENT = "argument"
    REAL = "real"
    IMAGINARY = "imaginary"


def modulus(value: complex | npt.NDArray[np.complex128]) -> float | npt.NDArray[np.float64]:
    """|value|"""
    return np.abs(value)


def argument(value: complex | npt.NDArray[np.complex128]) -> float | npt.NDArray[np.float64]:
    """Phase angle in (-pi, pi]."""
    # +0j turns a negative zero imaginary part into +0, so the negative real axis maps to +pi
    return np.angle(np.asarray(value, dtype=np.complex128) + (0.0 + 0.0j))


def project(
    values: complex | npt.NDArray[np.complex128],
    mapping: ColorMapping | str
) -> float | npt.NDArray[np.float64]:
    """
    Extract one scalar from complex values.

    Args:
        values: Complex scalar or array.
        mapping: Which projection to take.

    Raises:
        ValueError: If `mapping` is not a known projection name.

    Returns:
        Float scalar or array of the same shape as `values`.
    """
    match ColorMapping(mapping):
        case ColorMapping.MODULUS:
            return modulus(values)
        case ColorMapping.ARGUMENT:
            return argument(values)
        case ColorMapping.REAL:
            return np.real(values)
        case ColorMapping.IMAGINARY:
            return np.imag(values)


def mark_invalid(scalars: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Replace every non-finite scalar by NaN."""
    scalars = np.asarray(scalars, dtype=np.float64)
    return np.where(np.isfinite(scalars), scalars, np.nan)


def to_complex_point(value: complex) -> dict[str, float]:
    """Convert a complex number to the {"re", "im"} mapping used in payloads."""
    value = complex(value)
    return {"re": value.real, "im": value.imag}


def from_complex_point(point: dict[str, Any]) -> complex:
    """Inverse of :func:`to_complex_point`; missing parts default to 0."""
    return complex(float(point.get("re", 0.0)), float(point.get("im", 0.0)))


def points_to_list(points: npt.NDArray[np.complex128]) -> list[dict[str, float]]:
    return [to_complex_point(p) for p in points]


def grid_to_list(grid: npt.NDArray[np.float64]) -> list[list[Optional[float]]]:
    """Nested lists with None in place of NaN, for JSON payloads."""
    return [[None if np.isnan(v) else float(v) for v in row] for row in grid]
