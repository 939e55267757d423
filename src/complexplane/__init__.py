"""
complexplane: expression evaluation over the complex plane.

Parses user expressions, compiles them once, and samples them as parametric
contours, domain-coloring grids, 3D surface grids and contour integrals.
"""
from complexplane.engine import (
    MathEngine,
    evaluate_contour,
    evaluate_contour_integral,
    evaluate_domain_coloring,
    evaluate_surface_3d,
    math_engine,
    parse_expression,
)
from complexplane.expression import (
    CompiledExpression,
    EmptyExpressionError,
    EvaluationError,
    ExpressionError,
    ParseError,
    compile_expression,
    evaluate,
    is_valid,
    parse,
)
from complexplane.generators import integrate, sample_contour, sample_grid
from complexplane.logging_config import setup_logging
from complexplane.model import (
    ContourConfig,
    ContourData,
    ContourEntry,
    ContourIntegralResult,
    DomainColoringConfig,
    DomainColoringData,
    Region,
    Surface3DConfig,
    Surface3DData,
)
from complexplane.utils import ColorMapping

__all__ = [
    'MathEngine',
    'math_engine',
    'parse_expression',
    'evaluate_contour',
    'evaluate_contour_integral',
    'evaluate_domain_coloring',
    'evaluate_surface_3d',
    'parse',
    'is_valid',
    'compile_expression',
    'evaluate',
    'CompiledExpression',
    'ExpressionError',
    'ParseError',
    'EmptyExpressionError',
    'EvaluationError',
    'sample_contour',
    'sample_grid',
    'integrate',
    'ColorMapping',
    'Region',
    'ContourEntry',
    'ContourConfig',
    'DomainColoringConfig',
    'Surface3DConfig',
    'ContourData',
    'ContourIntegralResult',
    'DomainColoringData',
    'Surface3DData',
    'setup_logging',
]
