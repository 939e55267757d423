"""
Expression language: parse text into a tree, compile the tree once, then
evaluate it over complex numbers as many times as needed.
"""
from complexplane.expression.compiler import CompiledExpression, compile_expression, evaluate
from complexplane.expression.errors import (
    EmptyExpressionError,
    EvaluationError,
    ExpressionError,
    ParseError,
)
from complexplane.expression.evaluator import (
    evaluate_at,
    evaluate_at_t,
    evaluate_expression_at,
    parse_and_compile,
)
from complexplane.expression.nodes import (
    BinaryOp,
    Call,
    Constant,
    ExpressionNode,
    NumberLiteral,
    UnaryOp,
    Variable,
    free_symbols,
)
from complexplane.expression.parser import is_valid, parse, parse_expression

__all__ = [
    'parse',
    'parse_expression',
    'is_valid',
    'compile_expression',
    'evaluate',
    'CompiledExpression',
    'parse_and_compile',
    'evaluate_at',
    'evaluate_at_t',
    'evaluate_expression_at',
    'ExpressionError',
    'ParseError',
    'EmptyExpressionError',
    'EvaluationError',
    'ExpressionNode',
    'NumberLiteral',
    'Constant',
    'Variable',
    'UnaryOp',
    'BinaryOp',
    'Call',
    'free_symbols',
]
