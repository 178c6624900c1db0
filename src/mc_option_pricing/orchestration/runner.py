"""
Run Orchestrator - sequences single or repeated pricing runs.

Each run: start timer -> simulate -> stop timer -> statistics -> record ->
clear the engine's series -> reset timer. Between runs the payoff may be
swapped; all other inputs stay constant.

Design Principles:
- **Wrapper Pattern**: the orchestrator drives the engine and statistics
  module without reaching into them
- **Run isolation**: every run owns its series and random source, so runs
  can be dispatched in parallel when configured
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

from mc_option_pricing.analysis.statistics import Statistics, StatisticsEngine
from mc_option_pricing.errors import InvalidRunCount
from mc_option_pricing.options.payoffs.base import BasePayoff
from mc_option_pricing.options.simulation.monte_carlo import MonteCarloEngine, RunResult
from mc_option_pricing.options.simulation.parameters import ModelSelection, OptionParameters

logger = logging.getLogger(__name__)

#: Called with the index of the run just finished; returns the payoff for the
#: next run, or None to keep the current one
NextPayoff = Callable[[int], Optional[BasePayoff]]


@dataclass(frozen=True)
class OrchestratorConfig:
    """
    Configuration for run execution.

    Attributes
    ----------
    parallel : bool
        Dispatch runs on a thread pool instead of one after another
    n_workers : Optional[int]
        Number of worker threads (None = auto)
    verbose : bool
        Log progress for every run
    """

    parallel: bool = False
    n_workers: Optional[int] = None
    verbose: bool = False


@dataclass(frozen=True)
class RunRecord:
    """
    One (RunResult, Statistics) pair.

    Unpacks like a tuple: ``result, stats = record``.
    """

    run_result: RunResult
    statistics: Statistics

    def __iter__(self) -> Iterator:
        return iter((self.run_result, self.statistics))


class RunOrchestrator:
    """
    Drive K pricing runs over constant option parameters.

    Parameters
    ----------
    engine_factory : Callable[[], MonteCarloEngine], default MonteCarloEngine
        Builds the simulation engine. Sequential mode reuses one engine and
        clears its series after every run; parallel mode builds one per run.
    config : OrchestratorConfig, optional
        Execution configuration

    Examples
    --------
    >>> orchestrator = RunOrchestrator()
    >>> records = orchestrator.run(params, selection, n_runs=3)
    >>> [r.run_result.approximated_price for r in records]
    """

    def __init__(
        self,
        engine_factory: Callable[[], MonteCarloEngine] = MonteCarloEngine,
        config: Optional[OrchestratorConfig] = None,
    ):
        self.engine_factory = engine_factory
        self.config = config or OrchestratorConfig()
        self.engine = engine_factory()
        self.statistics_engine = StatisticsEngine()

    def run_single(self, parameters: OptionParameters, selection: ModelSelection) -> RunRecord:
        """Price one contract."""
        return self.run(parameters, selection, n_runs=1)[0]

    def run(
        self,
        parameters: OptionParameters,
        selection: ModelSelection,
        n_runs: int = 1,
        next_payoff: Optional[NextPayoff] = None,
    ) -> List[RunRecord]:
        """
        Execute n_runs pricing runs.

        Parameters
        ----------
        parameters : OptionParameters
            Constant option inputs
        selection : ModelSelection
            Model choice for the first run
        n_runs : int, default 1
            Number of runs (>= 1)
        next_payoff : NextPayoff, optional
            Payoff swap between runs

        Returns
        -------
        List[RunRecord]
            One record per run, in run order

        Raises
        ------
        InvalidRunCount
            If n_runs < 1; nothing is computed
        """
        if n_runs < 1:
            raise InvalidRunCount(f"CRITICAL: n_runs must be >= 1, got {n_runs}")

        start_time = time.perf_counter()
        selections = self._plan_selections(selection, n_runs, next_payoff)

        if self.config.verbose:
            logger.info(f"Running {n_runs} pricing run(s)...")

        if self.config.parallel and n_runs > 1:
            records = self._run_parallel(parameters, selections)
        else:
            records = []
            for i, sel in enumerate(selections):
                if self.config.verbose:
                    logger.info(f"  [{i+1}/{n_runs}] {sel.payoff.name}")

                records.append(
                    self._run_one(self.engine, self.statistics_engine, parameters, sel)
                )

        if self.config.verbose:
            logger.info(f"Completed in {time.perf_counter() - start_time:.2f}s")

        return records

    def _plan_selections(
        self,
        selection: ModelSelection,
        n_runs: int,
        next_payoff: Optional[NextPayoff],
    ) -> List[ModelSelection]:
        """Resolve every run's selection before any run starts."""
        selections = [selection]
        for i in range(n_runs - 1):
            current = selections[-1]
            payoff = next_payoff(i) if next_payoff is not None else None
            selections.append(current.with_payoff(payoff) if payoff is not None else current)
        return selections

    @staticmethod
    def _run_one(
        engine: MonteCarloEngine,
        statistics_engine: StatisticsEngine,
        parameters: OptionParameters,
        selection: ModelSelection,
    ) -> RunRecord:
        try:
            statistics_engine.start_timer()
            output = engine.run(parameters, selection)
            statistics_engine.stop_timer()

            statistics = statistics_engine.summarize(output, selection.payoff)
        finally:
            statistics_engine.reset_timer()
            engine.clear_series()

        return RunRecord(run_result=output.run_result, statistics=statistics)

    def _run_isolated(self, parameters: OptionParameters, selection: ModelSelection) -> RunRecord:
        """Run with a private engine and statistics module."""
        return self._run_one(self.engine_factory(), StatisticsEngine(), parameters, selection)

    def _run_parallel(
        self,
        parameters: OptionParameters,
        selections: List[ModelSelection],
    ) -> List[RunRecord]:
        """Run on a thread pool; records come back in submission order."""
        with ThreadPoolExecutor(max_workers=self.config.n_workers) as executor:
            futures = [
                executor.submit(self._run_isolated, parameters, sel) for sel in selections
            ]
            records = []
            for i, future in enumerate(futures):
                records.append(future.result())
                if self.config.verbose:
                    logger.info(f"  Completed: [{i+1}/{len(futures)}] {selections[i].payoff.name}")

        return records
