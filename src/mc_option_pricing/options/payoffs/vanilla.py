"""
European and Asian (arithmetic average) payoffs.

[T1] European call: max(S_T - K, 0), put: max(K - S_T, 0)
[T1] Asian call: max(A - K, 0), put: max(K - A, 0), A = mean of path prices

The Asian payoffs only declare is_averaging; the engine supplies the
average.
"""

from mc_option_pricing.options.payoffs.base import BasePayoff, OptionType, intrinsic_value


class EuropeanPayoff(BasePayoff):
    """
    Plain vanilla European payoff.

    Parameters
    ----------
    option_type : OptionType
        Call or put

    Examples
    --------
    >>> EuropeanPayoff(OptionType.PUT).evaluate(65.0, 60.0)
    5.0
    """

    def __init__(self, option_type: OptionType):
        self.option_type = option_type
        self.name = "European Call" if option_type == OptionType.CALL else "European Put"

    def evaluate(self, strike: float, price: float) -> float:
        return intrinsic_value(self.option_type, strike, price)


class AsianPayoff(BasePayoff):
    """
    Arithmetic-average Asian payoff.

    Parameters
    ----------
    option_type : OptionType
        Call or put
    """

    is_averaging = True

    def __init__(self, option_type: OptionType):
        self.option_type = option_type
        self.name = "Asian Call" if option_type == OptionType.CALL else "Asian Put"

    def evaluate(self, strike: float, price: float) -> float:
        return intrinsic_value(self.option_type, strike, price)
