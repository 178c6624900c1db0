"""
Centralized numeric constants and tolerances.

The accuracy threshold and barrier sentinel are fixed by the pricing
methodology and are not user-configurable.

References:
    [T1] Hull (2021) Ch. 15 - Options pricing precision requirements
"""

from typing import Final

# =============================================================================
# Decision Constants
# =============================================================================

#: Simulated price is accepted when |exact - approx| < ACCURACY_THRESHOLD
#: (strict inequality, currency units)
ACCURACY_THRESHOLD: Final[float] = 0.01

#: Barrier value reported by payoffs that carry no barrier
BARRIER_SENTINEL: Final[float] = 0.0

#: Barriers with |value - sentinel| <= this are treated as absent in reports
BARRIER_DISPLAY_THRESHOLD: Final[float] = 0.1

# =============================================================================
# Analytical Tolerances (Deterministic)
# =============================================================================

#: No-arbitrage bounds and intrinsic-value checks
ANTI_PATTERN_TOLERANCE: Final[float] = 1e-10

#: Put-call parity: C - P = S - K*exp(-rT)
PUT_CALL_PARITY_TOLERANCE: Final[float] = 1e-8
