"""
Centralized pytest fixtures for the mc-option-pricing test suite.

Fixture Categories:
1. Option Parameters - Standard inputs for pricing runs
2. Textbook Examples - Closed-form reference values
3. Deterministic Random Sources - Scripted normal draws for exact checks
4. Records - Prebuilt run results for presentation tests
"""

import itertools
from dataclasses import dataclass
from typing import Iterable

import pytest

from mc_option_pricing.analysis.statistics import Statistics
from mc_option_pricing.options.payoffs.base import OptionType
from mc_option_pricing.options.payoffs.vanilla import EuropeanPayoff
from mc_option_pricing.options.simulation.monte_carlo import RunResult
from mc_option_pricing.options.simulation.parameters import ModelSelection, OptionParameters
from mc_option_pricing.options.simulation.random_source import RandomSource
from mc_option_pricing.orchestration.runner import RunRecord

# =============================================================================
# TOLERANCE TIERS
# =============================================================================


@dataclass(frozen=True)
class ToleranceTiers:
    """
    Tiered tolerance framework for different test types.

    Derived from precision requirements, not ad hoc.
    """

    # Deterministic arithmetic (scheme steps, stub-driven runs)
    anti_pattern: float = 1e-10

    # Closed-form values quoted to 4 decimal places
    textbook: float = 1e-3

    # Monte Carlo vs analytical: multiples of the run's standard error
    mc_standard_errors: float = 4.0


TOLERANCES = ToleranceTiers()


@pytest.fixture(scope="session")
def tolerances() -> ToleranceTiers:
    """Provide tiered tolerance settings for all tests."""
    return TOLERANCES


# =============================================================================
# OPTION PARAMETERS
# =============================================================================


@pytest.fixture
def put_params() -> OptionParameters:
    """Hull put example: S=60, K=65, r=8%, σ=30%, T=0.25, small path count."""
    return OptionParameters(
        volatility=0.30, rate=0.08, expiry=0.25, spot=60.0, strike=65.0, simulation_count=200
    )


@pytest.fixture
def atm_params() -> OptionParameters:
    """ATM parameters: S=K=100, r=5%, σ=20%, T=1."""
    return OptionParameters(
        volatility=0.20, rate=0.05, expiry=1.0, spot=100.0, strike=100.0, simulation_count=100
    )


@pytest.fixture
def european_put_selection() -> ModelSelection:
    return ModelSelection(payoff=EuropeanPayoff(OptionType.PUT), seed=42)


# =============================================================================
# TEXTBOOK EXAMPLES
# =============================================================================


@dataclass(frozen=True)
class TextbookExample:
    """Closed-form reference case."""

    name: str
    spot: float
    strike: float
    rate: float
    volatility: float
    time_to_expiry: float
    expected_call: float
    expected_put: float


# Hull (2021) Options, Futures, and Other Derivatives - European put example
HULL_PUT_EXAMPLE = TextbookExample(
    name="Hull put S=60 K=65",
    spot=60.0,
    strike=65.0,
    rate=0.08,
    volatility=0.30,
    time_to_expiry=0.25,
    expected_call=2.1334,
    expected_put=5.8463,
)

# Hull (2021) Example 15.6
HULL_EXAMPLE_15_6 = TextbookExample(
    name="Hull Example 15.6",
    spot=42.0,
    strike=40.0,
    rate=0.10,
    volatility=0.20,
    time_to_expiry=0.5,
    expected_call=4.7594,
    expected_put=0.8086,
)


@pytest.fixture
def hull_put_example() -> TextbookExample:
    return HULL_PUT_EXAMPLE


@pytest.fixture
def textbook_examples() -> list[TextbookExample]:
    """All textbook examples for batch validation."""
    return [HULL_PUT_EXAMPLE, HULL_EXAMPLE_15_6]


# =============================================================================
# DETERMINISTIC RANDOM SOURCES
# =============================================================================


class ConstantRandomSource(RandomSource):
    """Returns the same normal draw every time."""

    name = "Constant"

    def __init__(self, value: float = 0.0):
        self.value = value
        self.calls = 0

    def next_standard_normal(self) -> float:
        self.calls += 1
        return self.value


class SequenceRandomSource(RandomSource):
    """Cycles through a fixed list of normal draws."""

    name = "Sequence"

    def __init__(self, values: Iterable[float]):
        self._values = itertools.cycle(list(values))

    def next_standard_normal(self) -> float:
        return next(self._values)


@pytest.fixture
def zero_source() -> ConstantRandomSource:
    return ConstantRandomSource(0.0)


@pytest.fixture
def alternating_source() -> SequenceRandomSource:
    return SequenceRandomSource([1.0, -1.0])


# =============================================================================
# RECORDS
# =============================================================================


def make_record(
    params: OptionParameters,
    step_count: int = 0,
    upper_barrier: float = 0.0,
    lower_barrier: float = 0.0,
    payoff_name: str = "European Put",
    price: float = 5.85,
) -> RunRecord:
    """Build a RunRecord without running a simulation."""
    result = RunResult(
        approximated_price=price,
        parameters=params,
        step_count=step_count,
        model_names=("Default Random Engine", "GBM", payoff_name),
        upper_barrier=upper_barrier,
        lower_barrier=lower_barrier,
    )
    stats = Statistics(
        mean_price=60.5,
        max_price=90.0,
        min_price=35.0,
        standard_deviation=4.2,
        standard_error=0.042,
        exact_price=5.8463,
        decision=False,
        elapsed_seconds=0.125,
    )
    return RunRecord(run_result=result, statistics=stats)


@pytest.fixture
def sample_record(put_params) -> RunRecord:
    return make_record(put_params)


@pytest.fixture
def record_factory():
    """Build RunRecords with custom step counts and barriers."""
    return make_record


@pytest.fixture
def constant_source_factory():
    """Build constant-draw sources (one per engine for parallel runs)."""
    return ConstantRandomSource


@pytest.fixture
def sequence_source_factory():
    return SequenceRandomSource
