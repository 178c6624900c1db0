"""
Parameter acquisition from loosely-typed user input.

Accepts a mapping of raw values (strings from a prompt, CLI or config file,
or numbers) and returns validated OptionParameters. Missing, unparsable or
out-of-range entries are replaced by SETTINGS.defaults with a warning; this
is the only place where defaults are substituted.

Accepted ranges:
- volatility: [0, max_volatility]
- rate: [0, max_rate]
- expiry, spot, strike: >= 0
- simulation_count: integer > 0
"""

import logging
import math
from typing import Any, Mapping, Optional

from mc_option_pricing.config.settings import SETTINGS, ParameterDefaults
from mc_option_pricing.options.simulation.parameters import OptionParameters

logger = logging.getLogger(__name__)


def _to_float(value: Any) -> Optional[float]:
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(result) else result


def _to_int(value: Any) -> Optional[int]:
    number = _to_float(value)
    if number is None or math.isinf(number) or number != int(number):
        return None
    return int(number)


def _resolve_float(
    mapping: Mapping[str, Any],
    key: str,
    default: float,
    upper: Optional[float] = None,
) -> float:
    raw = mapping.get(key)
    value = _to_float(raw)

    if value is None:
        logger.warning(f"{key}={raw!r} is missing or not a number; using default {default}")
        return default
    if value < 0 or (upper is not None and value > upper):
        bound = f"[0, {upper}]" if upper is not None else ">= 0"
        logger.warning(f"{key}={value} outside {bound}; using default {default}")
        return default
    return value


def _resolve_count(mapping: Mapping[str, Any], key: str, default: int) -> int:
    raw = mapping.get(key)
    value = _to_int(raw)

    if value is None or value <= 0:
        logger.warning(f"{key}={raw!r} is not a positive integer; using default {default}")
        return default
    return value


def parameters_from_mapping(
    mapping: Mapping[str, Any],
    defaults: Optional[ParameterDefaults] = None,
) -> OptionParameters:
    """
    Build OptionParameters, substituting defaults for bad entries.

    Parameters
    ----------
    mapping : Mapping[str, Any]
        Keys: volatility, rate, expiry, spot, strike, simulation_count.
        Values may be numbers or numeric strings.
    defaults : ParameterDefaults, optional
        Substitutes; SETTINGS.defaults when None

    Returns
    -------
    OptionParameters
        Always valid

    Examples
    --------
    >>> params = parameters_from_mapping({"volatility": "0.3", "rate": "-1"})
    >>> params.volatility, params.rate
    (0.3, 0.1)
    """
    d = defaults or SETTINGS.defaults

    return OptionParameters(
        volatility=_resolve_float(mapping, "volatility", d.volatility, upper=d.max_volatility),
        rate=_resolve_float(mapping, "rate", d.rate, upper=d.max_rate),
        expiry=_resolve_float(mapping, "expiry", d.expiry),
        spot=_resolve_float(mapping, "spot", d.spot),
        strike=_resolve_float(mapping, "strike", d.strike),
        simulation_count=_resolve_count(mapping, "simulation_count", d.simulation_count),
    )
