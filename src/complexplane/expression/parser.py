"""
Expression Parser
=================
Recursive-descent parser turning expression text into an immutable tree.

Grammar (lowest to highest precedence)::

    additive       := multiplicative (("+" | "-") multiplicative)*
    multiplicative := unary (("*" | "/") unary)*
    unary          := ("-" | "+") unary | power
    power          := primary (("^" | "**") unary)?
    primary        := NUMBER | NAME "(" [additive ("," additive)*] ")" | NAME | "(" additive ")"

Exponentiation is right-associative and binds tighter than a leading sign,
so ``-z^2`` is ``-(z^2)`` while ``2^-1`` is still accepted.
"""
from __future__ import annotations

import logging
import re
from typing import NamedTuple, Optional

from complexplane.config import RESERVED_CONSTANTS
from complexplane.expression.errors import EmptyExpressionError, ParseError
from complexplane.expression.nodes import (
    BinaryOp,
    Call,
    Constant,
    ExpressionNode,
    NumberLiteral,
    UnaryOp,
    Variable,
)

logger = logging.getLogger(__name__)


class Token(NamedTuple):
    kind: str  # NUMBER, NAME, OP or EOF
    value: str
    position: int


TOKEN_RE = re.compile(
    r"(?P<NUMBER>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
    r"|(?P<NAME>[A-Za-z_][A-Za-z_0-9]*)"
    r"|(?P<OP>\*\*|[-+*/^(),])"
    r"|(?P<SPACE>\s+)"
)


def tokenize(text: str) -> list[Token]:
    """
    Split expression text into tokens.

    Raises:
        ParseError: If the text contains a character outside the grammar.
    """
    tokens: list[Token] = []
    pos = 0
    while pos < len(text):
        match = TOKEN_RE.match(text, pos)
        if match is None:
            raise ParseError(f"Unexpected character {text[pos]!r}", text=text, position=pos)
        kind = match.lastgroup
        if kind != "SPACE":
            value = match.group()
            # '**' is an alias for '^'
            tokens.append(Token(kind, "^" if value == "**" else value, pos))
        pos = match.end()
    tokens.append(Token("EOF", "", len(text)))
    return tokens


class Parser:
    """Single-use parser over one expression string."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.tokens = tokenize(text)
        self.pos = 0

    def peek(self) -> Token:
        return self.tokens[self.pos]

    def consume(self) -> Token:
        token = self.tokens[self.pos]
        if token.kind != "EOF":
            self.pos += 1
        return token

    def expect(self, value: str) -> Token:
        token = self.consume()
        if token.value != value:
            found = "end of input" if token.kind == "EOF" else repr(token.value)
            raise ParseError(f"Expected {value!r}, found {found}", text=self.text, position=token.position)
        return token

    def _is_op(self, *values: str) -> bool:
        token = self.peek()
        return token.kind == "OP" and token.value in values

    def parse(self) -> ExpressionNode:
        node = self.additive()
        token = self.peek()
        if token.kind != "EOF":
            raise ParseError(f"Unexpected token {token.value!r}", text=self.text, position=token.position)
        return node

    def additive(self) -> ExpressionNode:
        node = self.multiplicative()
        while self._is_op("+", "-"):
            op = self.consume().value
            node = BinaryOp(op, node, self.multiplicative())
        return node

    def multiplicative(self) -> ExpressionNode:
        node = self.unary()
        while self._is_op("*", "/"):
            op = self.consume().value
            node = BinaryOp(op, node, self.unary())
        return node

    def unary(self) -> ExpressionNode:
        if self._is_op("-"):
            self.consume()
            return UnaryOp("-", self.unary())
        if self._is_op("+"):
            self.consume()
            return self.unary()
        return self.power()

    def power(self) -> ExpressionNode:
        base = self.primary()
        if self._is_op("^"):
            self.consume()
            return BinaryOp("^", base, self.unary())
        return base

    def primary(self) -> ExpressionNode:
        token = self.consume()

        if token.kind == "NUMBER":
            return NumberLiteral(float(token.value))

        if token.kind == "NAME":
            if self._is_op("("):
                self.consume()
                return Call(token.value, self.arguments())
            if token.value in RESERVED_CONSTANTS:
                return Constant(token.value)
            return Variable(token.value)

        if token.kind == "OP" and token.value == "(":
            node = self.additive()
            self.expect(")")
            return node

        found = "end of input" if token.kind == "EOF" else repr(token.value)
        raise ParseError(f"Unexpected {found}", text=self.text, position=token.position)

    def arguments(self) -> tuple[ExpressionNode, ...]:
        if self._is_op(")"):
            self.consume()
            return ()
        args = [self.additive()]
        while self._is_op(","):
            self.consume()
            args.append(self.additive())
        self.expect(")")
        return tuple(args)


def parse(text: str) -> ExpressionNode:
    """
    Parse expression text into a tree. Never evaluates anything.

    Args:
        text: Expression such as ``"z^2 + 1"`` or ``"exp(i * t)"``.

    Raises:
        EmptyExpressionError: If the text is empty or whitespace only.
        ParseError: If the text is malformed.

    Returns:
        The root node of the expression tree.
    """
    if text is None or not text.strip():
        raise EmptyExpressionError(text or "")
    return Parser(text).parse()


def is_valid(text: str) -> bool:
    """Parse-only validation for live input checking."""
    try:
        parse(text)
    except ParseError:
        return False
    return True


def parse_expression(text: str, variable: str) -> Optional[ExpressionNode]:
    """
    Lenient form of :func:`parse` used at the engine boundary.

    Returns:
        The tree, or None when the text is empty or malformed.
    """
    try:
        return parse(text)
    except EmptyExpressionError:
        return None
    except ParseError as e:
        logger.warning(f"Failed to parse expression '{text}' in '{variable}': {e}")
        return None
