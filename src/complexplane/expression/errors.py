"""Exceptions raised by the expression parser and evaluator."""
from __future__ import annotations

from typing import Optional


class ExpressionError(ValueError):
    """Base class for every failure caused by the expression text."""


class ParseError(ExpressionError):
    """
    The expression text is malformed.

    Attributes:
        text: The offending expression text.
        position: Character offset where parsing failed, if known.
    """

    def __init__(self, message: str, text: str = "", position: Optional[int] = None) -> None:
        self.text = text
        self.position = position
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)


class EmptyExpressionError(ParseError):
    """The expression text is empty or whitespace only."""

    def __init__(self, text: str = "") -> None:
        super().__init__("Expression is empty.", text=text)


class EvaluationError(ExpressionError):
    """Unknown function, wrong argument count or undefined symbol."""
