"""
Lenient evaluation helpers.

These wrap parse/compile/evaluate for callers that want ``None`` instead of
an exception, e.g. a UI showing the value under the cursor.
"""
from __future__ import annotations

import logging
from typing import Optional

from complexplane.config import CURVE_VARIABLE
from complexplane.expression.compiler import CompiledExpression, compile_expression
from complexplane.expression.errors import EmptyExpressionError, EvaluationError, ParseError
from complexplane.expression.parser import parse

logger = logging.getLogger(__name__)


def parse_and_compile(text: str, variable: str) -> Optional[CompiledExpression]:
    """
    Parse and compile an expression for repeated evaluation.

    Returns:
        The compiled expression, or None if the text is empty or malformed.
    """
    try:
        return compile_expression(parse(text), variable)
    except EmptyExpressionError:
        return None
    except ParseError as e:
        logger.warning(f"Failed to parse/compile expression '{text}': {e}")
        return None


def evaluate_at(compiled: CompiledExpression, point: complex) -> Optional[complex]:
    """Evaluate at a single point, returning None on an evaluation error."""
    try:
        return compiled.evaluate(point)
    except EvaluationError as e:
        logger.warning(f"Evaluation error: {e}")
        return None


def evaluate_expression_at(text: str, variable: str, point: complex) -> Optional[complex]:
    """Parse, compile and evaluate `text` at `point` in one call."""
    compiled = parse_and_compile(text, variable)
    if compiled is None:
        return None
    return evaluate_at(compiled, point)


def evaluate_at_t(text: str, t: float) -> Optional[complex]:
    """Evaluate a curve expression at the real parameter value `t`."""
    return evaluate_expression_at(text, CURVE_VARIABLE, complex(t, 0.0))
