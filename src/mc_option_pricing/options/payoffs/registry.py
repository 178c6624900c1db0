"""
Payoff Registry - single entry point for contract selection.

Maps a PayoffKind (or its string value) to a configured payoff object.
Used by the orchestrator when the contract is swapped between runs.
"""

from typing import Optional, Union

from mc_option_pricing.options.payoffs.barrier import DownAndOutPayoff, UpAndOutPayoff
from mc_option_pricing.options.payoffs.base import BasePayoff, OptionType, PayoffKind
from mc_option_pricing.options.payoffs.vanilla import AsianPayoff, EuropeanPayoff

_BARRIER_KINDS = {
    PayoffKind.UP_AND_OUT_CALL: (UpAndOutPayoff, OptionType.CALL),
    PayoffKind.UP_AND_OUT_PUT: (UpAndOutPayoff, OptionType.PUT),
    PayoffKind.DOWN_AND_OUT_CALL: (DownAndOutPayoff, OptionType.CALL),
    PayoffKind.DOWN_AND_OUT_PUT: (DownAndOutPayoff, OptionType.PUT),
}

_PLAIN_KINDS = {
    PayoffKind.EUROPEAN_CALL: (EuropeanPayoff, OptionType.CALL),
    PayoffKind.EUROPEAN_PUT: (EuropeanPayoff, OptionType.PUT),
    PayoffKind.ASIAN_CALL: (AsianPayoff, OptionType.CALL),
    PayoffKind.ASIAN_PUT: (AsianPayoff, OptionType.PUT),
}


def available_payoffs() -> list[str]:
    """List the selectable payoff identifiers."""
    return [kind.value for kind in PayoffKind]


def get_payoff(
    kind: Union[PayoffKind, str],
    barrier: Optional[float] = None,
) -> BasePayoff:
    """
    Build a payoff from its identifier.

    Parameters
    ----------
    kind : PayoffKind or str
        Contract identifier (e.g. PayoffKind.EUROPEAN_PUT or "european_put")
    barrier : float, optional
        Knock-out level, required for barrier kinds

    Returns
    -------
    BasePayoff
        Configured payoff

    Raises
    ------
    ValueError
        If kind is unknown, or a barrier kind is requested without barrier

    Examples
    --------
    >>> get_payoff("european_call").name
    'European Call'
    >>> get_payoff(PayoffKind.UP_AND_OUT_CALL, barrier=120.0).upper_barrier
    120.0
    """
    if isinstance(kind, str):
        try:
            kind = PayoffKind(kind.lower())
        except ValueError:
            available = ", ".join(available_payoffs())
            raise ValueError(
                f"CRITICAL: Unknown payoff '{kind}'. Available: {available}"
            ) from None

    if kind in _PLAIN_KINDS:
        cls, option_type = _PLAIN_KINDS[kind]
        return cls(option_type)

    cls, option_type = _BARRIER_KINDS[kind]
    if barrier is None:
        raise ValueError(f"CRITICAL: {kind.value} requires a barrier level")
    return cls(option_type, barrier)
