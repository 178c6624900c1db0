"""
mc-option-pricing: Monte Carlo pricing of European, Asian and barrier options.

Quick Start
-----------
>>> from mc_option_pricing import (
...     EuropeanPayoff, ModelSelection, OptionParameters, OptionType, RunOrchestrator,
... )
>>> params = OptionParameters(volatility=0.30, rate=0.08, expiry=0.25,
...                           spot=60.0, strike=65.0, simulation_count=100_000)
>>> selection = ModelSelection(payoff=EuropeanPayoff(OptionType.PUT), seed=42)
>>> result, stats = RunOrchestrator().run_single(params, selection)
>>> stats.exact_price  # Black-Scholes benchmark, ~5.8463

See Also
--------
- examples/price_european_put.py for a command-line driver

Version: 0.1.0
"""

__version__ = "0.1.0"

# =============================================================================
# Run Inputs
# =============================================================================
from mc_option_pricing.options.simulation.parameters import ModelSelection, OptionParameters
from mc_option_pricing.options.simulation.random_source import RandomEngineKind
from mc_option_pricing.options.simulation.schemes import DiscretizationKind

# =============================================================================
# Payoffs
# =============================================================================
from mc_option_pricing.options.payoffs.base import (
    BasePayoff,
    CallablePayoff,
    OptionType,
    PayoffKind,
)
from mc_option_pricing.options.payoffs.vanilla import AsianPayoff, EuropeanPayoff
from mc_option_pricing.options.payoffs.barrier import DownAndOutPayoff, UpAndOutPayoff
from mc_option_pricing.options.payoffs.registry import available_payoffs, get_payoff

# =============================================================================
# Pricing
# =============================================================================
from mc_option_pricing.options.pricing import (
    black_scholes_call,
    black_scholes_price,
    black_scholes_put,
)
from mc_option_pricing.options.simulation.monte_carlo import (
    MonteCarloEngine,
    RunResult,
    SimulationOutput,
)

# =============================================================================
# Statistics and Orchestration
# =============================================================================
from mc_option_pricing.analysis.statistics import Statistics, StatisticsEngine
from mc_option_pricing.orchestration.runner import (
    OrchestratorConfig,
    RunOrchestrator,
    RunRecord,
)

# =============================================================================
# Input / Output
# =============================================================================
from mc_option_pricing.io.input import parameters_from_mapping
from mc_option_pricing.reporting.output import RunReporter

# =============================================================================
# Configuration and Errors
# =============================================================================
from mc_option_pricing.config.settings import SETTINGS
from mc_option_pricing.errors import (
    InvalidConfiguration,
    InvalidRunCount,
    InvalidSelection,
    InvalidStepCount,
    PricingConfigurationError,
)

__all__ = [
    # Version
    "__version__",
    # Inputs
    "ModelSelection",
    "OptionParameters",
    "RandomEngineKind",
    "DiscretizationKind",
    # Payoffs
    "BasePayoff",
    "CallablePayoff",
    "OptionType",
    "PayoffKind",
    "AsianPayoff",
    "EuropeanPayoff",
    "DownAndOutPayoff",
    "UpAndOutPayoff",
    "available_payoffs",
    "get_payoff",
    # Pricing
    "black_scholes_call",
    "black_scholes_price",
    "black_scholes_put",
    "MonteCarloEngine",
    "RunResult",
    "SimulationOutput",
    # Statistics / orchestration
    "Statistics",
    "StatisticsEngine",
    "OrchestratorConfig",
    "RunOrchestrator",
    "RunRecord",
    # I/O
    "parameters_from_mapping",
    "RunReporter",
    # Config / errors
    "SETTINGS",
    "InvalidConfiguration",
    "InvalidRunCount",
    "InvalidSelection",
    "InvalidStepCount",
    "PricingConfigurationError",
]
