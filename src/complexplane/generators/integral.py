"""
Contour Integral Engine
=======================
Estimates the contour integral of f along gamma,

    integral_gamma f(z) dz = integral_{t_min}^{t_max} f(gamma(t)) * gamma'(t) dt,

with a left Riemann sum over the sampled parameter values. gamma'(t) comes
from numerical differentiation with a step h = dt * DERIVATIVE_STEP_FACTOR.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from complexplane.config import CURVE_VARIABLE, DEFAULT_INTEGRAND, DERIVATIVE_STEP_FACTOR, FUNCTION_VARIABLE
from complexplane.generators.sampling import compile_or_none, evaluate_or_invalid, parameter_samples
from complexplane.model.configs import ContourEntry
from complexplane.model.results import ContourIntegralResult

logger = logging.getLogger(__name__)


def integrate(
    curve_expr: str,
    integrand_expr: Optional[str],
    t_min: float,
    t_max: float,
    steps: int,
    id: str = "",
    color: str = "",
) -> Optional[ContourIntegralResult]:
    """
    Accumulate f(gamma(t)) * gamma'(t) * dt over the parameter samples.

    Per sample:
        1. gamma(t); skipped if not finite.
        2. gamma'(t) by central difference; if gamma(t+h) or gamma(t-h) is not
           finite, forward difference; skipped if gamma(t+h) is not finite.
        3. f(gamma(t)) and the integrand vector; skipped if either is not finite.

    Args:
        curve_expr: gamma(t), an expression in `t`.
        integrand_expr: f(z), an expression in `z`. Blank means the constant 1.
        t_min: Start of the parameter range.
        t_max: End of the parameter range (inclusive).
        steps: Number of parameter samples.
        id: Identifier echoed in the result.
        color: Display color echoed in the result.

    Returns:
        The result, or None if either expression cannot be parsed or no
        sample survives.
    """
    f_expr = integrand_expr if integrand_expr and integrand_expr.strip() else DEFAULT_INTEGRAND

    gamma = compile_or_none(curve_expr, CURVE_VARIABLE)
    f = compile_or_none(f_expr, FUNCTION_VARIABLE)
    if gamma is None or f is None:
        return None

    t_values, dt = parameter_samples(t_min, t_max, steps)
    h = dt * DERIVATIVE_STEP_FACTOR

    points = evaluate_or_invalid(gamma, t_values)
    ahead = evaluate_or_invalid(gamma, t_values + h)
    behind = evaluate_or_invalid(gamma, t_values - h)

    with np.errstate(all="ignore"):
        central = (ahead - behind) / (2 * h)
        forward = (ahead - points) / h
        derivative = np.where(np.isfinite(ahead) & np.isfinite(behind), central, forward)

        f_values = evaluate_or_invalid(f, points)
        vectors = f_values * derivative

    keep = (
        np.isfinite(points)
        & np.isfinite(ahead)
        & np.isfinite(f_values)
        & np.isfinite(vectors)
    )
    n_kept = int(keep.sum())
    logger.debug(f"Contour integral of '{f_expr}' along '{curve_expr}': {n_kept}/{t_values.size} samples")
    if n_kept == 0:
        return None

    vectors = vectors[keep]
    running_sum = np.cumsum(vectors * dt)

    return ContourIntegralResult(
        id=id,
        color=color,
        t_values=t_values[keep],
        contour_points=points[keep],
        integrand_vectors=vectors,
        running_sum=running_sum,
        final_value=complex(running_sum[-1]),
        expression=curve_expr,
        transform_function=f_expr,
    )


def compute_contour_integral(entry: ContourEntry) -> Optional[ContourIntegralResult]:
    """Contour integral for one entry, using its transform as the integrand."""
    if not entry.expression or not entry.expression.strip():
        return None
    return integrate(
        entry.expression,
        entry.transform_function,
        entry.t_min,
        entry.t_max,
        entry.t_steps,
        id=entry.id,
        color=entry.color,
    )
