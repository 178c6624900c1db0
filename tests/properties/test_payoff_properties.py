"""
Property-based tests for payoffs.

1. Every payoff is non-negative
2. Knock-out payoffs never exceed the vanilla payoff
3. Knock-out payoffs are zero on the far side of the barrier
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from mc_option_pricing.options.payoffs.barrier import DownAndOutPayoff, UpAndOutPayoff
from mc_option_pricing.options.payoffs.base import OptionType
from mc_option_pricing.options.payoffs.registry import available_payoffs, get_payoff
from mc_option_pricing.options.payoffs.vanilla import EuropeanPayoff

price_strategy = st.floats(min_value=0.0, max_value=1e4, allow_nan=False, allow_infinity=False)
level_strategy = st.floats(min_value=0.01, max_value=1e4, allow_nan=False, allow_infinity=False)
type_strategy = st.sampled_from(list(OptionType))


class TestNonNegativity:
    @given(
        kind=st.sampled_from(available_payoffs()),
        strike=price_strategy,
        price=price_strategy,
        barrier=level_strategy,
    )
    @settings(max_examples=300)
    def test_all_payoffs_non_negative(self, kind, strike, price, barrier) -> None:
        payoff = get_payoff(kind, barrier=barrier)

        assert payoff.evaluate(strike, price) >= 0.0


class TestKnockOut:
    @given(option_type=type_strategy, strike=price_strategy, price=price_strategy, barrier=level_strategy)
    @settings(max_examples=200)
    def test_up_and_out(self, option_type, strike, price, barrier) -> None:
        payoff = UpAndOutPayoff(option_type, barrier)
        vanilla = EuropeanPayoff(option_type).evaluate(strike, price)
        value = payoff.evaluate(strike, price)

        assert value <= vanilla
        if price >= barrier:
            assert value == 0.0
        else:
            assert value == vanilla

    @given(option_type=type_strategy, strike=price_strategy, price=price_strategy, barrier=level_strategy)
    @settings(max_examples=200)
    def test_down_and_out(self, option_type, strike, price, barrier) -> None:
        payoff = DownAndOutPayoff(option_type, barrier)
        vanilla = EuropeanPayoff(option_type).evaluate(strike, price)
        value = payoff.evaluate(strike, price)

        assert value <= vanilla
        if price <= barrier:
            assert value == 0.0
        else:
            assert value == vanilla
