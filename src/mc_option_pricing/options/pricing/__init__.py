"""
Closed-form option pricing.

Provides:
- Black-Scholes analytical prices for European calls and puts
- Put-call parity check
"""

from mc_option_pricing.options.pricing.black_scholes import (
    black_scholes_call,
    black_scholes_price,
    black_scholes_put,
    put_call_parity_check,
)

__all__ = [
    "black_scholes_call",
    "black_scholes_price",
    "black_scholes_put",
    "put_call_parity_check",
]
