"""
Frozen configuration settings for Monte Carlo option pricing.

All configuration is immutable (frozen dataclasses) so a run cannot
change its own settings halfway through.
"""

from dataclasses import dataclass

from mc_option_pricing.config.tolerances import (
    ACCURACY_THRESHOLD,
    BARRIER_DISPLAY_THRESHOLD,
    BARRIER_SENTINEL,
)

# =============================================================================
# Simulation Configuration
# =============================================================================


@dataclass(frozen=True)
class SimulationConfig:
    """
    Immutable simulation configuration.

    Attributes
    ----------
    default_simulation_count : int
        Path count used when the caller supplies none
    default_step_count : int
        Sub-intervals for Euler/Milstein when the caller supplies none
    progress_interval : int
        Emit a progress log line every this many paths
    cev_exponent : float
        Elasticity exponent of the diffusion coefficient (1.0 = GBM)
    """

    default_simulation_count: int = 100_000
    default_step_count: int = 100
    progress_interval: int = 10_000
    cev_exponent: float = 1.0


# =============================================================================
# Parameter Defaults
# =============================================================================


@dataclass(frozen=True)
class ParameterDefaults:
    """
    Substitutes applied to missing or out-of-range user inputs.

    Attributes
    ----------
    volatility, rate : float
        Accepted range is [0, max_volatility] / [0, max_rate]
    expiry, spot, strike : float
        Must be >= 0
    simulation_count : int
        Must be > 0
    """

    volatility: float = 0.1
    rate: float = 0.1
    expiry: float = 0.25
    spot: float = 100.0
    strike: float = 120.0
    simulation_count: int = 100_000
    max_volatility: float = 10.0
    max_rate: float = 10.0


# =============================================================================
# Decision Configuration
# =============================================================================


@dataclass(frozen=True)
class DecisionConfig:
    """
    Read-only view of the fixed decision constants.

    Note
    ----
    Values come from config/tolerances.py and are not meant to be overridden.
    """

    accuracy_threshold: float = ACCURACY_THRESHOLD
    barrier_sentinel: float = BARRIER_SENTINEL
    barrier_display_threshold: float = BARRIER_DISPLAY_THRESHOLD


# =============================================================================
# Report Configuration
# =============================================================================


@dataclass(frozen=True)
class ReportConfig:
    """
    Immutable report configuration.

    Attributes
    ----------
    file_stem : str
        Base name of text/CSV report files; a letter suffix is appended
    elapsed_precision : int
        Significant digits for elapsed time
    """

    file_stem: str = "Monte Carlo Option Pricing"
    elapsed_precision: int = 12
    csv_separator: str = ","


# =============================================================================
# Master Configuration
# =============================================================================


@dataclass(frozen=True)
class Settings:
    """
    Master frozen configuration combining all sub-configs.

    Usage
    -----
    >>> from mc_option_pricing.config.settings import SETTINGS
    >>> SETTINGS.simulation.progress_interval
    10000
    """

    simulation: SimulationConfig = SimulationConfig()
    defaults: ParameterDefaults = ParameterDefaults()
    decision: DecisionConfig = DecisionConfig()
    report: ReportConfig = ReportConfig()


# Singleton instance - import this
SETTINGS = Settings()
