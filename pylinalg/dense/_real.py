"""
Elementwise real-valued functions for Vector.

Each function converts the elements to a float64 array, applies the
matching numpy ufunc under np.errstate(all='ignore') and converts back to
Python floats. IEEE-754 semantics therefore hold: NaN propagates, domain
errors give NaN, ln(0) = -inf, and nothing raises or warns.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.protocols import RealScalar

RealKernel = Callable[[NDArray[np.float64]], NDArray[np.float64]]


def apply_real(elements: list[RealScalar], kernel: RealKernel) -> list[float]:
    """Evaluate ``kernel`` over ``elements`` in double precision."""
    arr = np.fromiter((float(x) for x in elements), dtype=np.float64, count=len(elements))
    with np.errstate(all='ignore'):
        out = kernel(arr)
    return out.tolist()


def _signum(a: NDArray[np.float64]) -> NDArray[np.float64]:
    # copysign keeps the sign of zero: +0.0 -> 1.0, -0.0 -> -1.0
    return np.where(np.isnan(a), np.nan, np.copysign(1.0, a))


def _round_half_away(a: NDArray[np.float64]) -> NDArray[np.float64]:
    t = np.trunc(a)
    return np.where(np.abs(a - t) >= 0.5, t + np.copysign(1.0, a), t)


def _fract(a: NDArray[np.float64]) -> NDArray[np.float64]:
    return a - np.trunc(a)


class RealFunctionsMixin:
    """
    Elementwise transcendental and rounding functions.

    Requires the host class to implement ``_map_real(kernel)`` returning a
    new container of the same shape.
    """

    __slots__ = ()

    def _map_real(self, kernel: RealKernel) -> Any:
        raise NotImplementedError

    # --- Sign and magnitude ---

    def abs(self) -> Any:
        """Absolute value of each element."""
        return self._map_real(np.abs)

    def signum(self) -> Any:
        """
        Sign of each element.

        1.0 for positive, +0.0 and +inf; -1.0 for negative, -0.0 and -inf;
        NaN for NaN.
        """
        return self._map_real(_signum)

    def recip(self) -> Any:
        """Reciprocal 1/x of each element."""
        return self._map_real(np.reciprocal)

    # --- Powers and roots ---

    def sqrt(self) -> Any:
        """Square root; NaN for negative input."""
        return self._map_real(np.sqrt)

    def cbrt(self) -> Any:
        return self._map_real(np.cbrt)

    def powi(self, n: int) -> Any:
        """Raise each element to an integer power."""
        exponent = float(int(n))
        return self._map_real(lambda a: np.power(a, exponent))

    def powf(self, p: float) -> Any:
        """Raise each element to a real power; NaN for negative base with fractional p."""
        exponent = float(p)
        return self._map_real(lambda a: np.power(a, exponent))

    # --- Exponentials and logarithms ---

    def exp(self) -> Any:
        return self._map_real(np.exp)

    def exp2(self) -> Any:
        return self._map_real(np.exp2)

    def exp_m1(self) -> Any:
        """exp(x) - 1, accurate near zero."""
        return self._map_real(np.expm1)

    def ln(self) -> Any:
        """Natural logarithm; -inf at 0, NaN for negative input."""
        return self._map_real(np.log)

    def ln_1p(self) -> Any:
        """ln(1 + x), accurate near zero."""
        return self._map_real(np.log1p)

    def log(self, base: float) -> Any:
        """Logarithm in an arbitrary base, computed as ln(x) / ln(base)."""
        ln_base = np.log(np.float64(base))
        return self._map_real(lambda a: np.log(a) / ln_base)

    def log2(self) -> Any:
        return self._map_real(np.log2)

    def log10(self) -> Any:
        return self._map_real(np.log10)

    # --- Trigonometry ---

    def sin(self) -> Any:
        return self._map_real(np.sin)

    def cos(self) -> Any:
        return self._map_real(np.cos)

    def tan(self) -> Any:
        return self._map_real(np.tan)

    def asin(self) -> Any:
        return self._map_real(np.arcsin)

    def acos(self) -> Any:
        return self._map_real(np.arccos)

    def atan(self) -> Any:
        return self._map_real(np.arctan)

    def sinh(self) -> Any:
        return self._map_real(np.sinh)

    def cosh(self) -> Any:
        return self._map_real(np.cosh)

    def tanh(self) -> Any:
        return self._map_real(np.tanh)

    def asinh(self) -> Any:
        return self._map_real(np.arcsinh)

    def acosh(self) -> Any:
        return self._map_real(np.arccosh)

    def atanh(self) -> Any:
        return self._map_real(np.arctanh)

    def to_degrees(self) -> Any:
        return self._map_real(np.degrees)

    def to_radians(self) -> Any:
        return self._map_real(np.radians)

    # --- Rounding ---

    def floor(self) -> Any:
        return self._map_real(np.floor)

    def ceil(self) -> Any:
        return self._map_real(np.ceil)

    def round(self) -> Any:
        """Round to nearest integer, halves away from zero (2.5 -> 3.0, -2.5 -> -3.0)."""
        return self._map_real(_round_half_away)

    def trunc(self) -> Any:
        """Integer part, rounding toward zero."""
        return self._map_real(np.trunc)

    def fract(self) -> Any:
        """Fractional part, x - trunc(x)."""
        return self._map_real(_fract)
