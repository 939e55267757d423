"""
Complex Function Kernels
========================
Vectorized complex arithmetic and elementary functions.

Every kernel takes and returns ``complex128`` arrays and works element-wise,
so a scalar evaluation and a whole grid evaluation share the same semantics.
Numeric edge cases never raise: division by zero and ``log(0)`` produce the
invalid value ``nan+nanj``, overflow produces infinities, and both propagate
through later arithmetic like IEEE-754 NaN.

All multivalued functions use the principal branch, with the cut on the
negative real axis and the argument taken in (-pi, pi]. A negative zero
imaginary part is treated as +0 so that ``sqrt(-4)`` is ``2i``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, TYPE_CHECKING

import numpy as np

from complexplane.config import INVALID

if TYPE_CHECKING:
    import numpy.typing as npt

_POSITIVE_ZERO = 0.0 + 0.0j


def as_complex(values) -> npt.NDArray[np.complex128]:
    return np.asarray(values, dtype=np.complex128)


def principal(z: npt.NDArray[np.complex128]) -> npt.NDArray[np.complex128]:
    """Replace signed zeros by +0 so values on the cut get argument +pi."""
    return z + _POSITIVE_ZERO


def add(a: npt.NDArray[np.complex128], b: npt.NDArray[np.complex128]) -> npt.NDArray[np.complex128]:
    return a + b


def subtract(a: npt.NDArray[np.complex128], b: npt.NDArray[np.complex128]) -> npt.NDArray[np.complex128]:
    return a - b


def multiply(a: npt.NDArray[np.complex128], b: npt.NDArray[np.complex128]) -> npt.NDArray[np.complex128]:
    return a * b


def negate(a: npt.NDArray[np.complex128]) -> npt.NDArray[np.complex128]:
    # 0 - a instead of -a: keeps zero parts at +0
    return _POSITIVE_ZERO - a


def divide(a: npt.NDArray[np.complex128], b: npt.NDArray[np.complex128]) -> npt.NDArray[np.complex128]:
    """Complex division; a zero denominator gives the invalid value."""
    with np.errstate(all="ignore"):
        quotient = a / b
    return np.where(b == 0, INVALID, quotient)


def power(z: npt.NDArray[np.complex128], w: npt.NDArray[np.complex128]) -> npt.NDArray[np.complex128]:
    """
    Principal-branch power ``z^w = exp(w * log(z))``.

    A zero base is resolved explicitly: ``0^0 = 1`` and ``0^w = 0`` for any
    other finite exponent. A non-finite base or exponent gives the invalid
    value, including ``nan^0``.
    """
    with np.errstate(all="ignore"):
        result = np.power(principal(z), w)
    finite = np.isfinite(z) & np.isfinite(w)
    zero_base = finite & (z == 0)
    result = np.where(zero_base & (w == 0), 1.0 + 0.0j, result)
    result = np.where(zero_base & (w != 0), _POSITIVE_ZERO, result)
    return np.where(finite, result, INVALID)


def log(z: npt.NDArray[np.complex128]) -> npt.NDArray[np.complex128]:
    """Principal natural logarithm; ``log(0)`` is invalid."""
    with np.errstate(all="ignore"):
        result = np.log(principal(z))
    return np.where(z == 0, INVALID, result)


def log_base(z: npt.NDArray[np.complex128], base: npt.NDArray[np.complex128]) -> npt.NDArray[np.complex128]:
    return divide(log(z), log(base))


def sqrt(z: npt.NDArray[np.complex128]) -> npt.NDArray[np.complex128]:
    with np.errstate(all="ignore"):
        return np.sqrt(principal(z))


def arg(z: npt.NDArray[np.complex128]) -> npt.NDArray[np.complex128]:
    return as_complex(np.angle(principal(z)))


def _lift(func: Callable) -> Callable[[npt.NDArray[np.complex128]], npt.NDArray[np.complex128]]:
    """Lift a numpy ufunc to a kernel that always returns complex."""
    def kernel(z: npt.NDArray[np.complex128]) -> npt.NDArray[np.complex128]:
        with np.errstate(all="ignore"):
            return as_complex(func(z))
    kernel.__name__ = getattr(func, "__name__", "kernel")
    return kernel


def _log(
    z: npt.NDArray[np.complex128],
    base: Optional[npt.NDArray[np.complex128]] = None
) -> npt.NDArray[np.complex128]:
    return log(z) if base is None else log_base(z, base)


@dataclass(frozen=True)
class FunctionSpec:
    """A callable exposed to expressions together with its accepted arities."""
    name: str
    kernel: Callable[..., npt.NDArray[np.complex128]]
    arities: tuple[int, ...] = (1,)

    def accepts(self, n_args: int) -> bool:
        return n_args in self.arities


FUNCTIONS: dict[str, FunctionSpec] = {
    spec.name: spec
    for spec in [
        FunctionSpec("sin", _lift(np.sin)),
        FunctionSpec("cos", _lift(np.cos)),
        FunctionSpec("tan", _lift(np.tan)),
        FunctionSpec("sinh", _lift(np.sinh)),
        FunctionSpec("cosh", _lift(np.cosh)),
        FunctionSpec("tanh", _lift(np.tanh)),
        FunctionSpec("asin", _lift(np.arcsin)),
        FunctionSpec("acos", _lift(np.arccos)),
        FunctionSpec("atan", _lift(np.arctan)),
        FunctionSpec("exp", _lift(np.exp)),
        FunctionSpec("log", _log, arities=(1, 2)),
        FunctionSpec("ln", log),
        FunctionSpec("sqrt", sqrt),
        FunctionSpec("abs", _lift(np.abs)),
        FunctionSpec("arg", arg),
        FunctionSpec("re", _lift(np.real)),
        FunctionSpec("im", _lift(np.imag)),
        FunctionSpec("conj", _lift(np.conjugate)),
        FunctionSpec("pow", power, arities=(2,)),
    ]
}

BINARY_OPERATORS: dict[str, Callable[..., npt.NDArray[np.complex128]]] = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
    "^": power,
}

UNARY_OPERATORS: dict[str, Callable[..., npt.NDArray[np.complex128]]] = {
    "-": negate,
}
