"""
Expression Tree
===============
Immutable AST nodes produced by the parser.

The set of node types is closed: the compiler dispatches over exactly these
six classes with a ``match`` statement.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NumberLiteral:
    value: float

    def __str__(self) -> str:
        return repr(self.value) if not self.value.is_integer() else str(int(self.value))


@dataclass(frozen=True)
class Constant:
    """One of the reserved names ``i``, ``pi`` or ``e``."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Variable:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class UnaryOp:
    op: str
    operand: ExpressionNode

    def __str__(self) -> str:
        return f"{self.op}({self.operand})"


@dataclass(frozen=True)
class BinaryOp:
    op: str
    left: ExpressionNode
    right: ExpressionNode

    def __str__(self) -> str:
        return f"({self.left} {self.op} {self.right})"


@dataclass(frozen=True)
class Call:
    name: str
    args: tuple[ExpressionNode, ...]

    def __str__(self) -> str:
        return f"{self.name}({', '.join(str(arg) for arg in self.args)})"


ExpressionNode = Union[NumberLiteral, Constant, Variable, UnaryOp, BinaryOp, Call]


def free_symbols(node: ExpressionNode) -> set[str]:
    """Return the names of all variables referenced by the tree."""
    match node:
        case Variable(name=name):
            return {name}
        case UnaryOp(operand=operand):
            return free_symbols(operand)
        case BinaryOp(left=left, right=right):
            return free_symbols(left) | free_symbols(right)
        case Call(args=args):
            symbols: set[str] = set()
            for arg in args:
                symbols |= free_symbols(arg)
            return symbols
        case _:
            return set()
