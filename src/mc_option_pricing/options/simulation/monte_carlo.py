"""
Monte Carlo option pricing engine.

Simulates N independent paths of the underlying with the selected
discretization scheme, evaluates the payoff on each terminal (or averaged)
price, and returns the discounted average payout together with the raw
per-path series used by the statistics module.

[T1] Estimator: V ≈ e^(-rT) · (1/N) · Σ payoff_i, converging at rate 1/√N

See: Glasserman (2003) "Monte Carlo Methods in Financial Engineering"
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from mc_option_pricing.config.settings import SETTINGS
from mc_option_pricing.errors import InvalidSelection, InvalidStepCount
from mc_option_pricing.options.simulation.parameters import ModelSelection, OptionParameters
from mc_option_pricing.options.simulation.random_source import RandomSource, make_random_source
from mc_option_pricing.options.simulation.schemes import DiscretizationScheme, get_scheme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    """
    Immutable outcome of one pricing run.

    Attributes
    ----------
    approximated_price : float
        Discounted Monte Carlo price
    parameters : OptionParameters
        Inputs used for the run
    step_count : int
        Sub-intervals used (0 when there is no time discretization)
    model_names : tuple[str, str, str]
        (random engine, scheme, payoff) display names
    upper_barrier : float
        Upper barrier of the payoff (sentinel 0 when absent)
    lower_barrier : float
        Lower barrier of the payoff (sentinel 0 when absent)
    """

    approximated_price: float
    parameters: OptionParameters
    step_count: int
    model_names: tuple[str, str, str]
    upper_barrier: float
    lower_barrier: float

    @property
    def payoff_name(self) -> str:
        return self.model_names[2]


@dataclass(frozen=True)
class SimulationOutput:
    """
    Everything a run produces.

    Attributes
    ----------
    approximated_price : float
        Discounted Monte Carlo price
    path_series : np.ndarray
        Terminal simulated price of each path, shape (N,)
    payout_series : np.ndarray
        Undiscounted payout of each path, shape (N,)
    run_result : RunResult
        Summary for presentation and benchmarking
    """

    approximated_price: float
    path_series: np.ndarray
    payout_series: np.ndarray
    run_result: RunResult

    @property
    def n_paths(self) -> int:
        return len(self.path_series)


class MonteCarloEngine:
    """
    Per-run simulation loop.

    Parameters
    ----------
    random_source : RandomSource, optional
        Injected normal source. None builds a fresh source per run from the
        selection's random_engine and seed.
    scheme : DiscretizationScheme, optional
        Injected scheme. None resolves the scheme from the selection.
    progress_interval : int, optional
        Log progress every this many paths (DEBUG level)

    Examples
    --------
    >>> engine = MonteCarloEngine()
    >>> params = OptionParameters(0.30, 0.08, 0.25, 60.0, 65.0, 10_000)
    >>> selection = ModelSelection(payoff=EuropeanPayoff(OptionType.PUT), seed=42)
    >>> output = engine.run(params, selection)
    >>> len(output.path_series)
    10000
    """

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        scheme: Optional[DiscretizationScheme] = None,
        progress_interval: Optional[int] = None,
    ):
        self.random_source = random_source
        self.scheme = scheme
        self.progress_interval = progress_interval or SETTINGS.simulation.progress_interval

        self._path_series: list[float] = []
        self._payout_series: list[float] = []

    @property
    def path_series(self) -> list[float]:
        """Copy of the current run's terminal prices."""
        return list(self._path_series)

    @property
    def payout_series(self) -> list[float]:
        """Copy of the current run's payouts."""
        return list(self._payout_series)

    def clear_series(self) -> None:
        """Empty the per-run series before the next run."""
        self._path_series.clear()
        self._payout_series.clear()

    def run(self, parameters: OptionParameters, selection: ModelSelection) -> SimulationOutput:
        """
        Price one contract.

        Parameters
        ----------
        parameters : OptionParameters
            Option and simulation inputs
        selection : ModelSelection
            Scheme, engine, payoff and step count

        Returns
        -------
        SimulationOutput
            Price, per-path series and run summary. If the scheme cannot be
            resolved the price is 0 and the series are empty.

        Raises
        ------
        InvalidStepCount
            If an injected time-stepped scheme is paired with step_count < 1
        """
        if self._path_series or self._payout_series:
            logger.debug("Discarding series left over from a previous run")
            self.clear_series()

        source = self.random_source or make_random_source(selection.random_engine, selection.seed)

        scheme = self.scheme
        if scheme is None:
            try:
                scheme = get_scheme(selection.discretization)
            except InvalidSelection as e:
                logger.warning(f"{e}; no deterministic request for pricing, price set to 0")
                return self._build_output(
                    0.0, parameters, selection, step_count=0, scheme_name=str(selection.discretization)
                )

        if scheme.is_time_stepped:
            if selection.step_count < 1:
                raise InvalidStepCount(
                    f"CRITICAL: step_count must be >= 1 for {scheme.name}, got {selection.step_count}"
                )
            price = self._simulate_stepped(parameters, selection, scheme, source)
            step_count = selection.step_count
        else:
            price = self._simulate_closed_form(parameters, selection, scheme, source)
            step_count = 0

        logger.info(
            f"{selection.payoff.name} via {scheme.name}: price={price:.6f} "
            f"({parameters.simulation_count} paths, {step_count} steps)"
        )
        return self._build_output(price, parameters, selection, step_count, scheme.name)

    def _simulate_closed_form(
        self,
        parameters: OptionParameters,
        selection: ModelSelection,
        scheme: DiscretizationScheme,
        source: RandomSource,
    ) -> float:
        """Single exact step per path; payout averaged inline."""
        n_sim = parameters.simulation_count
        strike = parameters.strike
        expiry = parameters.expiry
        payoff = selection.payoff

        base = scheme.start(parameters.spot, parameters.rate, parameters.volatility, expiry)
        sqrt_t = np.sqrt(expiry)

        price = 0.0
        for i in range(n_sim):
            normal = source.next_standard_normal()
            terminal = float(
                scheme.advance(base, parameters.rate, parameters.volatility, expiry, sqrt_t, normal)
            )
            self._path_series.append(terminal)

            payout = payoff.evaluate(strike, terminal)
            self._payout_series.append(payout)

            price += payout / n_sim
            self._log_progress(i)

        return price * parameters.discount_factor

    def _simulate_stepped(
        self,
        parameters: OptionParameters,
        selection: ModelSelection,
        scheme: DiscretizationScheme,
        source: RandomSource,
    ) -> float:
        """step_count + 1 sub-steps per path; payout sum divided once at the end."""
        n_sim = parameters.simulation_count
        n_steps = selection.step_count
        strike = parameters.strike
        rate = parameters.rate
        vol = parameters.volatility
        payoff = selection.payoff
        averaging = payoff.is_averaging

        dt = parameters.expiry / n_steps
        sqrt_dt = np.sqrt(dt)

        total = 0.0
        for i in range(n_sim):
            value = float(scheme.start(parameters.spot, rate, vol, parameters.expiry))
            running_sum = 0.0

            for _ in range(n_steps + 1):
                normal = source.next_standard_normal()
                value = float(scheme.advance(value, rate, vol, dt, sqrt_dt, normal))
                if averaging:
                    running_sum += value

            self._path_series.append(value)

            if averaging:
                payout = payoff.evaluate(strike, running_sum / (n_steps + 1))
            else:
                payout = payoff.evaluate(strike, value)
            self._payout_series.append(payout)

            total += payout
            self._log_progress(i)

        return (total / n_sim) * parameters.discount_factor

    def _log_progress(self, index: int) -> None:
        if index % self.progress_interval == 0:
            logger.debug(f"  path {index}")

    def _build_output(
        self,
        price: float,
        parameters: OptionParameters,
        selection: ModelSelection,
        step_count: int,
        scheme_name: Optional[str] = None,
    ) -> SimulationOutput:
        price = float(price)
        if scheme_name is None:
            scheme_name = selection.discretization.display_name
        run_result = RunResult(
            approximated_price=price,
            parameters=parameters,
            step_count=step_count,
            model_names=(selection.random_engine.display_name, scheme_name, selection.payoff.name),
            upper_barrier=selection.payoff.upper_barrier,
            lower_barrier=selection.payoff.lower_barrier,
        )
        return SimulationOutput(
            approximated_price=price,
            path_series=np.array(self._path_series, dtype=float),
            payout_series=np.array(self._payout_series, dtype=float),
            run_result=run_result,
        )
