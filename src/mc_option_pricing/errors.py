"""
Configuration errors raised by the pricing engine.

Numeric code never raises for domain reasons (NaN/Inf propagate). Only
configuration problems land here:

- InvalidSelection: unknown scheme or engine selector (resolvers catch it
  and fall back to the documented default)
- InvalidStepCount: time-stepped scheme requested with fewer than 1 step
- InvalidRunCount: fewer than 1 run requested
- InvalidConfiguration: degenerate inputs for the statistics module
"""


class PricingConfigurationError(ValueError):
    """Base class for configuration errors."""

    pass


class InvalidSelection(PricingConfigurationError):
    """Raised when a discretization or random engine selector is not recognised."""

    pass


class InvalidStepCount(PricingConfigurationError):
    """Raised when a time-stepped scheme is given step_count < 1."""

    pass


class InvalidRunCount(PricingConfigurationError):
    """Raised when fewer than one run is requested."""

    pass


class InvalidConfiguration(PricingConfigurationError):
    """Raised when statistics cannot be computed from the given series."""

    pass
