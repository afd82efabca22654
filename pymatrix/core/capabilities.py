"""
Capability string constants for pymatrix.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Usage:
    from pymatrix.core.capabilities import (
        CAPABILITY_SCALABLE,
        CAPABILITY_VECTOR_OPS,
    )

    if x.supports(CAPABILITY_VECTOR_OPS):
        n = x.length()
"""

# Reports its dimensions as a (rows, cols) pair
CAPABILITY_SHAPED = 'shaped'

# Supports in-place (mul) and pure (scaled) scalar multiplication
CAPABILITY_SCALABLE = 'scalable'

# Row-vector operations: add, minus, dot, cross, length, transpose
CAPABILITY_VECTOR_OPS = 'vector_ops'

# Matrix operations: add, minus, matmul, transpose
CAPABILITY_MATRIX_OPS = 'matrix_ops'

# All capabilities as a frozenset for validation
ALL_CAPABILITIES = frozenset({
    CAPABILITY_SHAPED,
    CAPABILITY_SCALABLE,
    CAPABILITY_VECTOR_OPS,
    CAPABILITY_MATRIX_OPS,
})

__all__ = [
    'CAPABILITY_SHAPED',
    'CAPABILITY_SCALABLE',
    'CAPABILITY_VECTOR_OPS',
    'CAPABILITY_MATRIX_OPS',
    'ALL_CAPABILITIES',
]
