"""
Sampling helpers shared by the generators.

Sample positions are computed as ``start + k * step`` (not with
``np.linspace``) so every generator places its samples identically.
"""
from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

import numpy as np

from complexplane.config import INVALID
from complexplane.expression import CompiledExpression, EvaluationError, parse_and_compile
from complexplane.model.configs import Region

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def step_size(start: float, stop: float, n: int) -> float:
    """Spacing of `n` samples covering [start, stop] including both endpoints."""
    return (stop - start) / max(n - 1, 1)


def parameter_samples(t_min: float, t_max: float, steps: int) -> tuple[npt.NDArray[np.float64], float]:
    """
    Parameter values for a curve.

    Returns:
        A tuple of the (steps,) array of parameter values and the spacing dt.
    """
    dt = step_size(t_min, t_max, steps)
    return t_min + np.arange(max(steps, 0), dtype=np.float64) * dt, dt


def grid_axes(region: Region, resolution: int) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """x (columns) and y (rows) sample coordinates of a square grid."""
    n = max(resolution, 0)
    dx = step_size(region.x_min, region.x_max, n)
    dy = step_size(region.y_min, region.y_max, n)
    index = np.arange(n, dtype=np.float64)
    return region.x_min + index * dx, region.y_min + index * dy


def grid_points(x_axis: npt.NDArray[np.float64], y_axis: npt.NDArray[np.float64]) -> npt.NDArray[np.complex128]:
    """Complex sample points, shape (len(y), len(x)): row j is y_axis[j]."""
    xx, yy = np.meshgrid(x_axis, y_axis)
    return xx + 1j * yy


def compile_or_none(text: str, variable: str) -> Optional[CompiledExpression]:
    """Compile `text`, or None when it is blank or malformed."""
    if not text or not text.strip():
        return None
    return parse_and_compile(text, variable)


def evaluate_or_invalid(compiled: CompiledExpression, values) -> npt.NDArray[np.complex128]:
    """
    Evaluate over an array, turning an EvaluationError into all-invalid output.

    Unknown functions, wrong arity and undefined symbols do not depend on the
    sample value, so the whole batch fails the same way each sample would.
    """
    try:
        return compiled.evaluate_array(values)
    except EvaluationError as e:
        logger.warning(f"Evaluation of '{compiled.node}' failed: {e}")
        return np.full(np.shape(values), INVALID, dtype=np.complex128)
