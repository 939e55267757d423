"""
Contour Generator
=================
Samples parametric curves gamma(t), optionally composed with f(z).
"""
from __future__ import annotations

import logging
from typing import List, Optional, TYPE_CHECKING

import numpy as np

from complexplane.config import CURVE_VARIABLE, FUNCTION_VARIABLE
from complexplane.generators.sampling import compile_or_none, evaluate_or_invalid, parameter_samples
from complexplane.model.configs import ContourConfig, ContourEntry
from complexplane.model.results import ContourData

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def sample_contour(
    curve_expr: str,
    transform_expr: Optional[str],
    t_min: float,
    t_max: float,
    steps: int
) -> npt.NDArray[np.complex128]:
    """
    Sample gamma(t), or f(gamma(t)) when a transform is given, over [t_min, t_max].

    Samples without a finite value are dropped, so the result can be shorter
    than `steps`; a position in the output does not identify its parameter
    value.

    Args:
        curve_expr: gamma(t), an expression in `t`.
        transform_expr: Optional f(z), an expression in `z`. Blank means none.
        t_min: Start of the parameter range.
        t_max: End of the parameter range (inclusive).
        steps: Number of parameter samples.

    Returns:
        Complex array of the surviving points in increasing parameter order.
        Empty if the curve expression is blank or malformed.
    """
    curve = compile_or_none(curve_expr, CURVE_VARIABLE)
    if curve is None:
        return np.empty(0, dtype=np.complex128)

    transform = None
    if transform_expr and transform_expr.strip():
        transform = compile_or_none(transform_expr, FUNCTION_VARIABLE)
        if transform is None:
            logger.warning(f"Failed to generate contour for '{curve_expr}': invalid transform '{transform_expr}'")
            return np.empty(0, dtype=np.complex128)

    t_values, _ = parameter_samples(t_min, t_max, steps)
    points = evaluate_or_invalid(curve, t_values)
    if transform is not None:
        points = evaluate_or_invalid(transform, points)

    points = points[np.isfinite(points)]
    logger.debug(f"Contour '{curve_expr}': {points.size}/{t_values.size} finite samples")
    return points


def contour_label(entry: ContourEntry) -> str:
    """Expression text echoed with the result: f(gamma) when a transform is set."""
    if entry.has_transform:
        return f"{entry.transform_function}({entry.expression})"
    return entry.expression


def generate_contour_points(config: ContourConfig) -> List[ContourData]:
    """
    Sample every enabled, non-blank contour with its own parameter range.

    Returns:
        One ContourData per active entry, in configuration order.
    """
    return [
        ContourData(
            id=entry.id,
            points=sample_contour(
                entry.expression,
                entry.transform_function,
                entry.t_min,
                entry.t_max,
                entry.t_steps,
            ),
            color=entry.color,
            expression=contour_label(entry),
            t_min=entry.t_min,
            t_max=entry.t_max,
            animation_speed=entry.animation_speed,
        )
        for entry in config.contours
        if entry.is_active
    ]
