"""
Black-Scholes closed-form pricing for European options.

Provides the analytic benchmark that simulated prices are judged against.

References
----------
[T1] Black, F., & Scholes, M. (1973). The pricing of options and corporate liabilities.
[T1] Hull, J. C. (2018). Options, Futures, and Other Derivatives (10th ed.).
"""

import numpy as np
from scipy import stats

from mc_option_pricing.config.tolerances import PUT_CALL_PARITY_TOLERANCE
from mc_option_pricing.options.payoffs.base import OptionType


def _calculate_d1_d2(
    spot: float,
    strike: float,
    rate: float,
    dividend: float,
    volatility: float,
    time_to_expiry: float,
) -> tuple[float, float]:
    """
    Calculate d1 and d2 parameters.

    [T1] d1 = (ln(S/K) + (r - q + σ²/2)T) / (σ√T)
    [T1] d2 = d1 - σ√T

    Degenerate inputs (zero spot, strike or volatility) yield ±inf/NaN,
    which propagate to the caller unchanged.
    """
    sqrt_t = np.sqrt(time_to_expiry)
    vol_sqrt_t = volatility * sqrt_t

    with np.errstate(divide="ignore", invalid="ignore"):
        d1 = (
            np.log(np.float64(spot) / strike)
            + (rate - dividend + 0.5 * volatility**2) * time_to_expiry
        ) / vol_sqrt_t

    d2 = d1 - vol_sqrt_t

    return d1, d2


def black_scholes_call(
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_expiry: float,
    dividend: float = 0.0,
) -> float:
    """
    Price European call option using Black-Scholes.

    [T1] C = S*e^(-qT)*N(d1) - K*e^(-rT)*N(d2)

    Parameters
    ----------
    spot : float
        Current spot price
    strike : float
        Strike price
    rate : float
        Risk-free rate (decimal)
    volatility : float
        Volatility (decimal)
    time_to_expiry : float
        Time to expiry (years)
    dividend : float, default 0.0
        Dividend yield (decimal)

    Returns
    -------
    float
        Call option price

    Examples
    --------
    >>> round(black_scholes_call(60, 65, 0.08, 0.30, 0.25), 4)
    2.1334
    """
    _validate_inputs(spot, strike, volatility, time_to_expiry)

    if time_to_expiry == 0:
        return max(spot - strike, 0.0)

    d1, d2 = _calculate_d1_d2(spot, strike, rate, dividend, volatility, time_to_expiry)

    call_price = (
        spot * np.exp(-dividend * time_to_expiry) * stats.norm.cdf(d1)
        - strike * np.exp(-rate * time_to_expiry) * stats.norm.cdf(d2)
    )

    return float(call_price)


def black_scholes_put(
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_expiry: float,
    dividend: float = 0.0,
) -> float:
    """
    Price European put option using Black-Scholes.

    [T1] P = K*e^(-rT)*N(-d2) - S*e^(-qT)*N(-d1)

    Examples
    --------
    >>> round(black_scholes_put(60, 65, 0.08, 0.30, 0.25), 4)
    5.8463
    """
    _validate_inputs(spot, strike, volatility, time_to_expiry)

    if time_to_expiry == 0:
        return max(strike - spot, 0.0)

    d1, d2 = _calculate_d1_d2(spot, strike, rate, dividend, volatility, time_to_expiry)

    put_price = (
        strike * np.exp(-rate * time_to_expiry) * stats.norm.cdf(-d2)
        - spot * np.exp(-dividend * time_to_expiry) * stats.norm.cdf(-d1)
    )

    return float(put_price)


def black_scholes_price(
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_expiry: float,
    option_type: OptionType,
    dividend: float = 0.0,
) -> float:
    """
    Price European option using Black-Scholes.

    Parameters
    ----------
    option_type : OptionType
        Call or put

    Returns
    -------
    float
        Option price
    """
    if option_type == OptionType.CALL:
        return black_scholes_call(spot, strike, rate, volatility, time_to_expiry, dividend)
    else:
        return black_scholes_put(spot, strike, rate, volatility, time_to_expiry, dividend)


def put_call_parity_check(
    call_price: float,
    put_price: float,
    spot: float,
    strike: float,
    rate: float,
    time_to_expiry: float,
    dividend: float = 0.0,
    tolerance: float = PUT_CALL_PARITY_TOLERANCE,
) -> tuple[bool, float]:
    """
    Verify put-call parity holds.

    [T1] Put-Call Parity: C - P = S*e^(-qT) - K*e^(-rT)

    Returns
    -------
    tuple[bool, float]
        (parity_holds, error)
    """
    lhs = call_price - put_price
    rhs = spot * np.exp(-dividend * time_to_expiry) - strike * np.exp(-rate * time_to_expiry)
    error = float(abs(lhs - rhs))
    return error < tolerance, error


def _validate_inputs(
    spot: float,
    strike: float,
    volatility: float,
    time_to_expiry: float,
) -> None:
    """Validate Black-Scholes inputs."""
    if spot < 0:
        raise ValueError(f"CRITICAL: spot must be >= 0, got {spot}")
    if strike < 0:
        raise ValueError(f"CRITICAL: strike must be >= 0, got {strike}")
    if volatility < 0:
        raise ValueError(f"CRITICAL: volatility must be >= 0, got {volatility}")
    if time_to_expiry < 0:
        raise ValueError(f"CRITICAL: time_to_expiry must be >= 0, got {time_to_expiry}")
