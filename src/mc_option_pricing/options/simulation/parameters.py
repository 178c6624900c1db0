"""
Run inputs: option parameters and model selection.

Both are frozen for the duration of a run. Between runs, a multi-run caller
may swap the payoff with ModelSelection.with_payoff().
"""

import math
import numbers
from dataclasses import dataclass, field, replace
from typing import Optional

from mc_option_pricing.errors import InvalidStepCount
from mc_option_pricing.options.payoffs.base import BasePayoff
from mc_option_pricing.options.simulation.random_source import (
    EngineSelector,
    RandomEngineKind,
    resolve_engine_kind,
)
from mc_option_pricing.options.simulation.schemes import (
    DiscretizationKind,
    SchemeSelector,
    resolve_discretization_kind,
)


@dataclass(frozen=True)
class OptionParameters:
    """
    Option and simulation inputs.

    Attributes
    ----------
    volatility : float
        Volatility (annualized, decimal)
    rate : float
        Risk-free rate (annualized, decimal)
    expiry : float
        Time to expiry in years
    spot : float
        Initial price of the underlying
    strike : float
        Strike price
    simulation_count : int
        Number of simulated paths
    """

    volatility: float
    rate: float
    expiry: float
    spot: float
    strike: float
    simulation_count: int

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.volatility < 0:
            raise ValueError(f"CRITICAL: volatility must be >= 0, got {self.volatility}")
        if self.rate < 0:
            raise ValueError(f"CRITICAL: rate must be >= 0, got {self.rate}")
        if self.expiry < 0:
            raise ValueError(f"CRITICAL: expiry must be >= 0, got {self.expiry}")
        if self.spot < 0:
            raise ValueError(f"CRITICAL: spot must be >= 0, got {self.spot}")
        if self.strike < 0:
            raise ValueError(f"CRITICAL: strike must be >= 0, got {self.strike}")
        if isinstance(self.simulation_count, bool) or not isinstance(
            self.simulation_count, numbers.Integral
        ):
            raise ValueError(
                f"CRITICAL: simulation_count must be an integer, got {self.simulation_count!r}"
            )
        if self.simulation_count <= 0:
            raise ValueError(
                f"CRITICAL: simulation_count must be > 0, got {self.simulation_count}"
            )

    @property
    def discount_factor(self) -> float:
        """exp(-r·T)."""
        return math.exp(-self.rate * self.expiry)

    def as_tuple(self) -> tuple[float, float, float, float, float, int]:
        """(volatility, rate, expiry, spot, strike, simulation_count)."""
        return (
            self.volatility,
            self.rate,
            self.expiry,
            self.spot,
            self.strike,
            self.simulation_count,
        )


@dataclass(frozen=True)
class ModelSelection:
    """
    Model choices for one run.

    Attributes
    ----------
    payoff : BasePayoff
        Contract payoff
    discretization : DiscretizationKind
        Scheme; int/str selectors are accepted and unknown values fall back
        to CLOSED_FORM with a warning
    random_engine : RandomEngineKind
        Engine; unknown values fall back to DEFAULT with a warning
    step_count : int
        Sub-intervals for time-stepped schemes (>= 1). Ignored by CLOSED_FORM.
    seed : int, optional
        Fixed random seed. None reseeds from the clock on every draw.

    Raises
    ------
    InvalidStepCount
        If a time-stepped scheme is selected with step_count < 1
    """

    payoff: BasePayoff
    discretization: DiscretizationKind = DiscretizationKind.CLOSED_FORM
    random_engine: RandomEngineKind = RandomEngineKind.DEFAULT
    step_count: int = 0
    seed: Optional[int] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        # Frozen dataclass workaround: use object.__setattr__
        object.__setattr__(
            self, "discretization", resolve_discretization_kind(self.discretization)
        )
        object.__setattr__(self, "random_engine", resolve_engine_kind(self.random_engine))

        if self.discretization.is_time_stepped and self.step_count < 1:
            raise InvalidStepCount(
                f"CRITICAL: step_count must be >= 1 for {self.discretization.display_name}, "
                f"got {self.step_count}"
            )

    @classmethod
    def create(
        cls,
        payoff: BasePayoff,
        discretization: SchemeSelector = DiscretizationKind.CLOSED_FORM,
        random_engine: EngineSelector = RandomEngineKind.DEFAULT,
        step_count: int = 0,
        seed: Optional[int] = None,
    ) -> "ModelSelection":
        """Build from raw selectors (menu numbers, names or enums)."""
        return cls(
            payoff=payoff,
            discretization=discretization,  # type: ignore[arg-type]
            random_engine=random_engine,  # type: ignore[arg-type]
            step_count=step_count,
            seed=seed,
        )

    @property
    def effective_step_count(self) -> int:
        """Configured steps, or 0 when there is no time discretization."""
        return self.step_count if self.discretization.is_time_stepped else 0

    @property
    def model_names(self) -> tuple[str, str, str]:
        """(random engine, scheme, payoff) display names."""
        return (
            self.random_engine.display_name,
            self.discretization.display_name,
            self.payoff.name,
        )

    def with_payoff(self, payoff: BasePayoff) -> "ModelSelection":
        """Copy with the payoff replaced."""
        return replace(self, payoff=payoff)
