"""
Tolerance tiers for approximate comparison.

Defines precision expectations for different comparison needs:
- EXACT: bit-identical results (same kernel, same accumulation order)
- FP64: double precision, results from reordered but equivalent arithmetic
- FP64_LOOSE: double precision after long chains of operations

Used by the containers' allclose() and by the test suite.
"""

from dataclasses import dataclass

import numpy as np

from pymatrix.core.exceptions import ValidationError


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str

    def allclose(self, a, b) -> bool:
        """
        True if every element satisfies |a - b| <= atol + rtol * |b|.

        NaNs in matching positions compare equal.
        """
        return bool(np.allclose(a, b, rtol=self.rtol, atol=self.atol, equal_nan=True))


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Bit-identical up to the sign of zero',
)

FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='fp64',
    description='Double precision, a few ulps of rounding',
)

FP64_LOOSE = ToleranceTier(
    rtol=1e-8,
    atol=1e-10,
    name='fp64_loose',
    description='Double precision after accumulated rounding',
)

_TIERS = {tier.name: tier for tier in (EXACT, FP64, FP64_LOOSE)}


def select_tolerance(name: str) -> ToleranceTier:
    """
    Look up a tolerance tier by name.

    Raises:
        ValidationError: If name is not a known tier
    """
    try:
        return _TIERS[name]
    except KeyError:
        raise ValidationError(
            f"Unknown tolerance tier: {name!r}. Expected one of {sorted(_TIERS)}"
        ) from None
