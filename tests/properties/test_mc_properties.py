"""
Property-based tests for the simulation engine and statistics.

1. Series lengths always equal the path count
2. Simulated prices are non-negative for non-negative payoffs
3. Standard deviation and standard error are never negative
4. The decision is symmetric and strict

References:
    [T1] Glasserman (2003) Ch. 3-4 - Monte Carlo Methods
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from mc_option_pricing.analysis.statistics import compute_summary_statistics, decide
from mc_option_pricing.config.tolerances import ACCURACY_THRESHOLD
from mc_option_pricing.options.payoffs.registry import available_payoffs, get_payoff
from mc_option_pricing.options.simulation.monte_carlo import MonteCarloEngine
from mc_option_pricing.options.simulation.parameters import ModelSelection, OptionParameters
from mc_option_pricing.reporting.output import file_suffix

# =============================================================================
# Strategy Definitions
# =============================================================================

# Constrained strategies for MC (expensive to run)
spot_strategy = st.floats(min_value=50.0, max_value=200.0, allow_nan=False, allow_infinity=False)
strike_strategy = st.floats(min_value=50.0, max_value=200.0, allow_nan=False, allow_infinity=False)
rate_strategy = st.floats(min_value=0.0, max_value=0.10, allow_nan=False, allow_infinity=False)
vol_strategy = st.floats(min_value=0.05, max_value=0.50, allow_nan=False, allow_infinity=False)
time_strategy = st.floats(min_value=0.1, max_value=2.0, allow_nan=False, allow_infinity=False)
count_strategy = st.integers(min_value=2, max_value=60)
payout_strategy = st.lists(
    st.floats(min_value=0.0, max_value=1e4, allow_nan=False, allow_infinity=False),
    min_size=2,
    max_size=200,
)


class TestEngineProperties:
    @given(
        spot=spot_strategy,
        strike=strike_strategy,
        rate=rate_strategy,
        vol=vol_strategy,
        t=time_strategy,
        n=count_strategy,
        scheme=st.sampled_from([1, 2, 3]),
        kind=st.sampled_from(available_payoffs()),
    )
    @settings(max_examples=50, deadline=None)
    def test_series_and_price(self, spot, strike, rate, vol, t, n, scheme, kind) -> None:
        params = OptionParameters(vol, rate, t, spot, strike, n)
        selection = ModelSelection(
            payoff=get_payoff(kind, barrier=spot * 1.2),
            discretization=scheme,
            step_count=5,
            seed=7,
        )

        output = MonteCarloEngine().run(params, selection)

        assert len(output.path_series) == n
        assert len(output.payout_series) == n
        assert output.approximated_price >= 0.0
        assert output.run_result.step_count == (0 if scheme == 1 else 5)


class TestStatisticsProperties:
    @given(
        payouts=payout_strategy,
        rate=rate_strategy,
        t=time_strategy,
    )
    @settings(max_examples=200)
    def test_spread_non_negative(self, payouts, rate, t) -> None:
        stats = compute_summary_statistics(payouts, payouts, rate, t)

        assert stats.standard_deviation >= 0.0
        assert stats.standard_error >= 0.0
        assert stats.standard_error <= stats.standard_deviation
        assert stats.min_price <= stats.mean_price * (1 + 1e-12) + 1e-12
        assert stats.mean_price <= stats.max_price * (1 + 1e-12) + 1e-12

    @given(
        exact=st.floats(min_value=-1e3, max_value=1e3, allow_nan=False),
        approx=st.floats(min_value=-1e3, max_value=1e3, allow_nan=False),
    )
    def test_decision(self, exact, approx) -> None:
        assert decide(exact, approx) == decide(approx, exact)
        assert decide(exact, approx) == (abs(exact - approx) < ACCURACY_THRESHOLD)
        assert decide(exact, exact)


class TestFileSuffixProperties:
    @given(st.integers(min_value=0, max_value=5000))
    def test_suffix_unique_and_uppercase(self, index) -> None:
        suffix = file_suffix(index)

        assert suffix.isalpha() and suffix.isupper()
        assert suffix != file_suffix(index + 1)

    @given(st.integers(min_value=0, max_value=25))
    def test_single_letters(self, index) -> None:
        assert file_suffix(index) == chr(ord("A") + index)
        assert len(file_suffix(index)) == 1
