"""
Core protocols for PyLinalg.

These define the structural interfaces element types must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that int, float, complex, Fraction, Decimal and NumPy scalars all qualify
without registration.

Design Principles:
    - Minimal contracts: prescribe only the arithmetic the engine performs
    - Layered: RealScalar adds ordering on top of Scalar
"""

from typing import Protocol, Any, runtime_checkable


@runtime_checkable
class Scalar(Protocol):
    """
    Capability set required of every Vector/Matrix element.

    Additive and multiplicative identities are obtained from the element's
    type (``kind(0)``, ``kind(1)``); see pylinalg.core.scalar. Compound
    assignment falls back to the binary operators.
    """

    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...

    def __truediv__(self, other: Any) -> Any:
        ...

    def __neg__(self) -> Any:
        ...

    def __eq__(self, other: object) -> bool:
        ...


@runtime_checkable
class RealScalar(Scalar, Protocol):
    """
    Scalar with real-number ordering.

    Required by the elementwise transcendental family (ln, sqrt, sin, ...),
    which evaluates in IEEE-754 double precision.
    """

    def __lt__(self, other: Any) -> bool:
        ...

    def __float__(self) -> float:
        ...
