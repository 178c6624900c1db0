"""
Monte Carlo simulation for option pricing.

Provides:
- Normal variate sources (default / Mersenne Twister engines)
- Discretization schemes (closed-form GBM, explicit Euler, Milstein)
- Run inputs (OptionParameters, ModelSelection)
- Monte Carlo pricing engine
"""

from mc_option_pricing.options.simulation.monte_carlo import (
    MonteCarloEngine,
    RunResult,
    SimulationOutput,
)
from mc_option_pricing.options.simulation.parameters import ModelSelection, OptionParameters
from mc_option_pricing.options.simulation.random_source import (
    NumpyRandomSource,
    RandomEngineKind,
    RandomSource,
    make_random_source,
    parse_engine_kind,
    resolve_engine_kind,
)
from mc_option_pricing.options.simulation.schemes import (
    ClosedFormScheme,
    DiscretizationKind,
    DiscretizationScheme,
    ExplicitEulerScheme,
    MilsteinScheme,
    get_scheme,
    parse_discretization_kind,
    resolve_discretization_kind,
)

__all__ = [
    # Engine
    "MonteCarloEngine",
    "RunResult",
    "SimulationOutput",
    # Inputs
    "ModelSelection",
    "OptionParameters",
    # Random sources
    "NumpyRandomSource",
    "RandomEngineKind",
    "RandomSource",
    "make_random_source",
    "parse_engine_kind",
    "resolve_engine_kind",
    # Schemes
    "ClosedFormScheme",
    "DiscretizationKind",
    "DiscretizationScheme",
    "ExplicitEulerScheme",
    "MilsteinScheme",
    "get_scheme",
    "parse_discretization_kind",
    "resolve_discretization_kind",
]
