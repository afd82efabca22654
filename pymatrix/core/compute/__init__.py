"""
Shared compute infrastructure for pymatrix.

This module contains the numeric kernels and comparison tolerances shared
by every container type.

Submodules:
    kernels: Sequential-accumulation reductions (sum, dot, norm)
    tolerances: Tolerance tiers for approximate comparison
"""

from pymatrix.core.compute.kernels import (
    sequential_sum,
    sequential_dot,
    sequential_norm,
)
from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    FP64,
    FP64_LOOSE,
    select_tolerance,
)

__all__ = [
    # Kernels
    "sequential_sum",
    "sequential_dot",
    "sequential_norm",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FP64",
    "FP64_LOOSE",
    "select_tolerance",
]
