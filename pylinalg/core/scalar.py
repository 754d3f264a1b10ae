"""
Scalar identities and classification.

Provides the additive/multiplicative identities for an element type and
the test that routes ``container OP value`` to scalar broadcast.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np


def zero(kind: type = float) -> Any:
    """Additive identity of ``kind``."""
    return kind(0)


def one(kind: type = float) -> Any:
    """Multiplicative identity of ``kind``."""
    return kind(1)


def zero_like(value: Any) -> Any:
    """Additive identity of the type of ``value``."""
    return type(value)(0)


def is_scalar(value: Any) -> bool:
    """
    True if ``value`` is a single number rather than a container.

    Accepts any numbers.Number (int, float, complex, Fraction, Decimal)
    and NumPy scalars. bool is rejected: it is a Number but never a
    sensible broadcast operand.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (numbers.Number, np.number))
