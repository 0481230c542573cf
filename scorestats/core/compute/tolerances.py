"""
Tolerance tiers for numerical validation.

Defines precision expectations for the different kinds of reported values:
- Exact arithmetic (t, r, F before rounding): machine precision
- Reported values: bounded by the 3-decimal rounding step
- Approximated tail probabilities: bounded by the approximation error

Used by the test suite to compare against exact reference implementations.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Closed-form statistics computed in float64
EXACT_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='exact_fp64',
    description='float64 arithmetic, matches exact reference implementations',
)

# Any value after the 3-decimal rounding step
ROUNDED_3DP = ToleranceTier(
    rtol=0.0,
    atol=5e-4 + 1e-12,
    name='rounded_3dp',
    description='Reported value, rounded half-up to 3 decimals',
)

# Approximated p-values (power-law t tail, normal tail, bounded F)
P_VALUE_APPROXIMATION = ToleranceTier(
    rtol=0.0,
    atol=0.05,
    name='p_value_approximation',
    description='Approximate tail probability vs exact distribution',
)


def select_tolerance(quantity: str) -> ToleranceTier:
    """Select the tolerance tier for a given kind of reported quantity."""
    if quantity in ('p_value', 'pvalue'):
        return P_VALUE_APPROXIMATION
    if quantity == 'exact':
        return EXACT_FP64
    return ROUNDED_3DP
