"""
Run statistics, analytic benchmark and accuracy decision.

Consumes the per-path series of a simulation run and produces:
- mean / max / min of the simulated terminal prices
- standard deviation and standard error of the discounted payout
- the Black-Scholes reference price
- a binary decision: is the simulated price within ACCURACY_THRESHOLD?
- the wall-clock time of the run

[T1] SD = sqrt((Σp² - (Σp)²/n) / (n - 1)) · e^(-rT)
[T1] SE = SD / √n

The benchmark is the vanilla call or put formula chosen from the payoff's
option type. Exotic payoffs (Asian, barrier) are still compared against the
vanilla price, so their decision is only indicative.
"""

import logging
import math
import time
from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np

from mc_option_pricing.config.tolerances import ACCURACY_THRESHOLD
from mc_option_pricing.errors import InvalidConfiguration
from mc_option_pricing.options.payoffs.base import BasePayoff, OptionType
from mc_option_pricing.options.pricing.black_scholes import black_scholes_price
from mc_option_pricing.options.simulation.monte_carlo import SimulationOutput
from mc_option_pricing.options.simulation.parameters import OptionParameters

logger = logging.getLogger(__name__)

Series = Union[Sequence[float], np.ndarray]


@dataclass(frozen=True)
class SummaryStatistics:
    """
    Descriptive statistics of one run.

    Attributes
    ----------
    mean_price, max_price, min_price : float
        Over the simulated terminal prices
    standard_deviation : float
        Discounted payout standard deviation
    standard_error : float
        standard_deviation / √n
    """

    mean_price: float
    max_price: float
    min_price: float
    standard_deviation: float
    standard_error: float


@dataclass(frozen=True)
class Statistics:
    """
    Immutable statistics of one run, as handed to presentation.

    Attributes
    ----------
    mean_price, max_price, min_price : float
        Over the simulated terminal prices
    standard_deviation, standard_error : float
        Of the discounted payout
    exact_price : float
        Closed-form benchmark
    decision : bool
        True when |exact_price - approximated_price| < ACCURACY_THRESHOLD
    elapsed_seconds : float
        Wall-clock time of the simulation
    """

    mean_price: float
    max_price: float
    min_price: float
    standard_deviation: float
    standard_error: float
    exact_price: float
    decision: bool
    elapsed_seconds: float

    def to_dict(self) -> dict:
        return {
            "mean_price": self.mean_price,
            "max_price": self.max_price,
            "min_price": self.min_price,
            "standard_deviation": self.standard_deviation,
            "standard_error": self.standard_error,
            "exact_price": self.exact_price,
            "decision": self.decision,
            "elapsed_seconds": self.elapsed_seconds,
        }


def compute_summary_statistics(
    path_series: Series,
    payout_series: Series,
    rate: float,
    expiry: float,
) -> SummaryStatistics:
    """
    Descriptive statistics from raw series.

    Parameters
    ----------
    path_series : sequence of float
        Terminal simulated prices
    payout_series : sequence of float
        Undiscounted payouts, parallel to path_series
    rate, expiry : float
        Discounting inputs

    Returns
    -------
    SummaryStatistics

    Raises
    ------
    InvalidConfiguration
        If fewer than two payouts are given (n - 1 = 0), or the series are
        empty or of different lengths
    """
    prices = np.asarray(path_series, dtype=float)
    payouts = np.asarray(payout_series, dtype=float)
    n = len(payouts)

    if n < 2:
        raise InvalidConfiguration(
            f"CRITICAL: standard deviation needs at least 2 paths, got {n}"
        )
    if len(prices) != n:
        raise InvalidConfiguration(
            f"CRITICAL: path and payout series differ in length ({len(prices)} vs {n})"
        )

    total = float(np.sum(payouts))
    total_sq = float(np.sum(payouts**2))

    # Rounding can leave a tiny negative variance for constant payouts
    variance = max((total_sq - total * total / n) / (n - 1), 0.0)
    sd = math.sqrt(variance) * math.exp(-rate * expiry)
    se = sd / math.sqrt(n)

    return SummaryStatistics(
        mean_price=float(np.mean(prices)),
        max_price=float(np.max(prices)),
        min_price=float(np.min(prices)),
        standard_deviation=sd,
        standard_error=se,
    )


def exact_price(parameters: OptionParameters, option_type: OptionType) -> float:
    """
    Black-Scholes benchmark for the run's parameters.

    [T1] d1 = (ln(S/K) + (r + σ²/2)T) / (σ√T), d2 = d1 - σ√T
    """
    return black_scholes_price(
        spot=parameters.spot,
        strike=parameters.strike,
        rate=parameters.rate,
        volatility=parameters.volatility,
        time_to_expiry=parameters.expiry,
        option_type=option_type,
    )


def decide(exact: float, approximated: float) -> bool:
    """
    Accept the simulated price when it lies strictly within ACCURACY_THRESHOLD.

    Examples
    --------
    >>> decide(2.1334, 2.1300)
    True
    >>> decide(1.00, 1.02)
    False
    """
    return bool(abs(exact - approximated) < ACCURACY_THRESHOLD)


class Stopwatch:
    """
    Wall-clock timer with high-resolution readings.

    reset() zeroes the reported elapsed time without restarting the clock.
    """

    def __init__(self) -> None:
        self._start: Optional[float] = None
        self._end: Optional[float] = None
        self._elapsed = 0.0

    def start(self) -> None:
        self._start = time.perf_counter()
        self._end = None

    def stop(self) -> None:
        if self._start is None:
            raise RuntimeError("CRITICAL: stopwatch stopped before it was started")
        self._end = time.perf_counter()
        self._elapsed = self._end - self._start

    def reset(self) -> None:
        self._elapsed = 0.0

    @property
    def elapsed_seconds(self) -> float:
        return self._elapsed


class StatisticsEngine:
    """
    Statistics, benchmark and decision for simulation runs.

    Examples
    --------
    >>> stats_engine = StatisticsEngine()
    >>> stats_engine.start_timer()
    >>> output = engine.run(params, selection)
    >>> stats_engine.stop_timer()
    >>> statistics = stats_engine.summarize(output, selection.payoff)
    """

    def __init__(self) -> None:
        self._stopwatch = Stopwatch()

    # -------------------------------------------------------------------------
    # Timer
    # -------------------------------------------------------------------------

    def start_timer(self) -> None:
        self._stopwatch.start()

    def stop_timer(self) -> None:
        self._stopwatch.stop()

    def reset_timer(self) -> None:
        self._stopwatch.reset()

    def elapsed_seconds(self) -> float:
        return self._stopwatch.elapsed_seconds

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def compute_statistics(self, output: SimulationOutput) -> SummaryStatistics:
        """Descriptive statistics of a run (see compute_summary_statistics)."""
        params = output.run_result.parameters
        return compute_summary_statistics(
            output.path_series, output.payout_series, params.rate, params.expiry
        )

    def compute_exact_price(self, parameters: OptionParameters, payoff: BasePayoff) -> float:
        """Vanilla benchmark: call formula when payoff.is_call, put formula otherwise."""
        return exact_price(parameters, OptionType.CALL if payoff.is_call else OptionType.PUT)

    def decide(self, exact: float, approximated: float) -> bool:
        return decide(exact, approximated)

    def summarize(self, output: SimulationOutput, payoff: BasePayoff) -> Statistics:
        """
        Full statistics for a run.

        Parameters
        ----------
        output : SimulationOutput
            Result of MonteCarloEngine.run
        payoff : BasePayoff
            Payoff used for the run (selects the benchmark formula)

        Returns
        -------
        Statistics

        Raises
        ------
        InvalidConfiguration
            If the run has fewer than two paths
        """
        summary = self.compute_statistics(output)
        exact = self.compute_exact_price(output.run_result.parameters, payoff)
        decision = self.decide(exact, output.approximated_price)

        if not decision:
            logger.info(
                f"Simulated price {output.approximated_price:.6f} not within "
                f"{ACCURACY_THRESHOLD} of exact price {exact:.6f}"
            )

        return Statistics(
            mean_price=summary.mean_price,
            max_price=summary.max_price,
            min_price=summary.min_price,
            standard_deviation=summary.standard_deviation,
            standard_error=summary.standard_error,
            exact_price=exact,
            decision=decision,
            elapsed_seconds=self.elapsed_seconds(),
        )
