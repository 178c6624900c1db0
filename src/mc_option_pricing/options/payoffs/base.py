"""
Base classes for option payoffs.

A payoff maps (strike, price) to a non-negative payout. The engine feeds it
either the terminal simulated price or, for averaging payoffs, the arithmetic
mean of the per-step prices.

The numerically significant capabilities (call vs put, averaging) are carried
as explicit flags on the payoff. Nothing in the engine inspects display names.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable

from mc_option_pricing.config.tolerances import BARRIER_SENTINEL


class OptionType(Enum):
    """Option type enumeration."""

    CALL = "call"
    PUT = "put"


class PayoffKind(Enum):
    """Contract menu offered by the payoff registry."""

    EUROPEAN_CALL = "european_call"
    EUROPEAN_PUT = "european_put"
    ASIAN_CALL = "asian_call"
    ASIAN_PUT = "asian_put"
    UP_AND_OUT_CALL = "up_and_out_call"
    UP_AND_OUT_PUT = "up_and_out_put"
    DOWN_AND_OUT_CALL = "down_and_out_call"
    DOWN_AND_OUT_PUT = "down_and_out_put"


PayoffFunction = Callable[[float, float], float]


def intrinsic_value(option_type: OptionType, strike: float, price: float) -> float:
    """
    Intrinsic value of a vanilla option.

    [T1] Call: max(S - K, 0)
    [T1] Put: max(K - S, 0)
    """
    if option_type == OptionType.CALL:
        return max(price - strike, 0.0)
    return max(strike - price, 0.0)


class BasePayoff(ABC):
    """
    Abstract base class for option payoffs.

    Subclasses must:
    1. Implement evaluate()
    2. Never return a negative payout
    3. Declare option_type, and is_averaging when the payoff wants the mean
       of the per-step prices instead of the terminal price
    """

    #: Human-readable name shown in reports
    name: str = "Payoff"

    #: Call or put; selects the closed-form benchmark
    option_type: OptionType = OptionType.CALL

    #: Request the arithmetic mean of per-step prices from the engine
    is_averaging: bool = False

    @abstractmethod
    def evaluate(self, strike: float, price: float) -> float:
        """
        Calculate the payout.

        Parameters
        ----------
        strike : float
            Strike price
        price : float
            Terminal simulated price, or the path average for averaging payoffs

        Returns
        -------
        float
            Undiscounted payout (>= 0)
        """
        pass

    def __call__(self, strike: float, price: float) -> float:
        return self.evaluate(strike, price)

    @property
    def is_call(self) -> bool:
        """True when the closed-form benchmark is the call formula."""
        return self.option_type == OptionType.CALL

    @property
    def upper_barrier(self) -> float:
        """Upper barrier, or BARRIER_SENTINEL when not applicable."""
        return BARRIER_SENTINEL

    @property
    def lower_barrier(self) -> float:
        """Lower barrier, or BARRIER_SENTINEL when not applicable."""
        return BARRIER_SENTINEL

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class CallablePayoff(BasePayoff):
    """
    Adapter for a plain (strike, price) -> payout callable.

    Parameters
    ----------
    func : PayoffFunction
        Pure payout function
    name : str
        Display name
    option_type : OptionType
        Benchmark family
    is_averaging : bool, default False
        Feed the path average instead of the terminal price
    upper_barrier, lower_barrier : float, default BARRIER_SENTINEL
        Reported barrier levels

    Examples
    --------
    >>> digital = CallablePayoff(lambda k, s: 1.0 if s > k else 0.0, "Digital Call", OptionType.CALL)
    >>> digital(100.0, 101.0)
    1.0
    """

    def __init__(
        self,
        func: PayoffFunction,
        name: str,
        option_type: OptionType,
        is_averaging: bool = False,
        upper_barrier: float = BARRIER_SENTINEL,
        lower_barrier: float = BARRIER_SENTINEL,
    ):
        self._func = func
        self.name = name
        self.option_type = option_type
        self.is_averaging = is_averaging
        self._upper = upper_barrier
        self._lower = lower_barrier

    def evaluate(self, strike: float, price: float) -> float:
        return float(self._func(strike, price))

    @property
    def upper_barrier(self) -> float:
        return self._upper

    @property
    def lower_barrier(self) -> float:
        return self._lower
