"""
Tolerance tiers for numerical comparison.

Defines precision expectations for different element kinds:
- EXACT: integers, Fraction, Decimal; results must match bit for bit
- FP64: double precision; accumulation-order drift only
- FP32: single precision (NumPy float32 elements)

Used by Vector.allclose / Matrix.allclose and by the test suite.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact arithmetic: results must be identical',
)

FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision: reassociation drift only',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision',
)


def select_tolerance(kind: type) -> ToleranceTier:
    """Select the appropriate tolerance tier for an element type."""
    if kind is np.float32 or kind is np.float16:
        return FP32
    if issubclass(kind, (float, complex, np.floating, np.complexfloating)):
        return FP64
    return EXACT


def is_close(a: Any, b: Any, tier: ToleranceTier = FP64) -> bool:
    """
    Check if two scalars are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    NaN is never close to anything; equal infinities are close. Decimal
    operands get the tier's tolerances converted to Decimal.
    """
    if a == b:
        return True
    if tier.rtol == 0 and tier.atol == 0:
        return False
    diff = abs(a - b)
    if diff != diff:
        return False
    atol, rtol = tier.atol, tier.rtol
    if isinstance(diff, Decimal):
        atol, rtol = Decimal(atol), Decimal(rtol)
    return bool(diff <= atol + rtol * abs(b))
