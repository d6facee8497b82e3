"""
Storage precision and comparison tolerances.

Matrices are stored in single precision. Elimination itself compares
against exact zero; the tolerance tiers below exist for comparing
float32 results against float64 references (tests, benchmarks).
"""

from dataclasses import dataclass

import numpy as np


# Storage dtype for every MatrixStore
MATRIX_DTYPE = np.float32


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Well-conditioned systems, float32 arithmetic vs float64 reference
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='single precision elimination vs double precision reference',
)

# Ill-conditioned systems, float32 arithmetic
FP32_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='fp32_ill_conditioned',
    description='single precision elimination, ill-conditioned',
)


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select the tolerance tier for comparing a float32 result."""
    if is_ill_conditioned:
        return FP32_ILL_CONDITIONED
    return FP32
