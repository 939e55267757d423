"""
Math Engine
===========
The boundary between the numeric core and the presentation layer.

Why is this file needed?
------------------------
1. Single entry point: The UI only talks to ``MathEngine``; it never touches
   the parser, compiler or generators directly.
2. Containment: Every operation returns an empty or None result for bad user
   input instead of raising, so a half-typed expression never breaks a redraw.

Every call is pure and idempotent. A caller that wants to discard a stale
computation simply ignores its result.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from complexplane.expression import ExpressionNode
from complexplane.expression.parser import parse_expression as _parse_expression
from complexplane.generators.contour import generate_contour_points
from complexplane.generators.grid import generate_domain_coloring_data, generate_surface_3d_data
from complexplane.generators.integral import compute_contour_integral
from complexplane.model.configs import ContourConfig, ContourEntry, DomainColoringConfig, Surface3DConfig
from complexplane.model.results import ContourData, ContourIntegralResult, DomainColoringData, Surface3DData

logger = logging.getLogger(__name__)


class MathEngine:
    """Stateless facade over the four generators and the parser."""

    @staticmethod
    def parse_expression(text: str, variable: str) -> Optional[ExpressionNode]:
        """Parse an expression; None if it is empty or malformed."""
        return _parse_expression(text, variable)

    @staticmethod
    def evaluate_contour(config: ContourConfig) -> List[ContourData]:
        """Sample all enabled contours over their own parameter ranges."""
        results = generate_contour_points(config)
        logger.debug(f"Evaluated {len(results)} of {len(config.contours)} contours")
        return results

    @staticmethod
    def evaluate_contour_integral(entry: ContourEntry) -> Optional[ContourIntegralResult]:
        """Integrand vectors f(gamma(t)) * gamma'(t) and the running sum."""
        return compute_contour_integral(entry)

    @staticmethod
    def evaluate_domain_coloring(config: DomainColoringConfig) -> DomainColoringData:
        """Evaluate f(z) over a rectangle for heatmap rendering."""
        return generate_domain_coloring_data(config)

    @staticmethod
    def evaluate_surface_3d(config: Surface3DConfig) -> Surface3DData:
        """Evaluate f(z) over a rectangle for surface rendering."""
        return generate_surface_3d_data(config)


math_engine = MathEngine()

parse_expression = MathEngine.parse_expression
evaluate_contour = MathEngine.evaluate_contour
evaluate_contour_integral = MathEngine.evaluate_contour_integral
evaluate_domain_coloring = MathEngine.evaluate_domain_coloring
evaluate_surface_3d = MathEngine.evaluate_surface_3d
