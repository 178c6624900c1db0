"""
Knock-out barrier payoffs.

[T1] Up-and-out: vanilla payout while S < H_up, 0 once S >= H_up
[T1] Down-and-out: vanilla payout while S > H_down, 0 once S <= H_down

The barrier is tested against the price the engine hands to evaluate()
(the terminal simulated price). Continuous monitoring along the path is not
modelled.
"""

from mc_option_pricing.options.payoffs.base import BasePayoff, OptionType, intrinsic_value


def _type_label(option_type: OptionType) -> str:
    return "Call" if option_type == OptionType.CALL else "Put"


class UpAndOutPayoff(BasePayoff):
    """
    Up-and-out barrier option.

    Parameters
    ----------
    option_type : OptionType
        Call or put
    barrier : float
        Upper knock-out level (> 0)

    Examples
    --------
    >>> payoff = UpAndOutPayoff(OptionType.CALL, barrier=120.0)
    >>> payoff.evaluate(100.0, 110.0)
    10.0
    >>> payoff.evaluate(100.0, 125.0)
    0.0
    """

    def __init__(self, option_type: OptionType, barrier: float):
        if barrier <= 0:
            raise ValueError(f"CRITICAL: barrier must be > 0, got {barrier}")

        self.option_type = option_type
        self.barrier = barrier
        self.name = f"Up and Out Barrier {_type_label(option_type)}"

    def evaluate(self, strike: float, price: float) -> float:
        if price >= self.barrier:
            return 0.0
        return intrinsic_value(self.option_type, strike, price)

    @property
    def upper_barrier(self) -> float:
        return self.barrier


class DownAndOutPayoff(BasePayoff):
    """
    Down-and-out barrier option.

    Parameters
    ----------
    option_type : OptionType
        Call or put
    barrier : float
        Lower knock-out level (> 0)
    """

    def __init__(self, option_type: OptionType, barrier: float):
        if barrier <= 0:
            raise ValueError(f"CRITICAL: barrier must be > 0, got {barrier}")

        self.option_type = option_type
        self.barrier = barrier
        self.name = f"Down and Out Barrier {_type_label(option_type)}"

    def evaluate(self, strike: float, price: float) -> float:
        if price <= self.barrier:
            return 0.0
        return intrinsic_value(self.option_type, strike, price)

    @property
    def lower_barrier(self) -> float:
        return self.barrier
