"""
Discretization schemes for the underlying's price process.

[T1] SDE: dS = r·S dt + σ·S^β dW, β = CEV exponent (1.0 = GBM)

Schemes:
- CLOSED_FORM: exact lognormal terminal sample, no time stepping
      S_T = S·exp(T(r - σ²/2)) · exp(√(σ²T)·Z)
- EXPLICIT_EULER: S' = S + dt·μ(r,S) + √dt·σ(S)·Z
- MILSTEIN: Euler + ½·σ(S)·σ'(S)·((√dt·Z)² - dt)

The scheme is chosen once per run and applied to every path and step.

See: Glasserman (2003) Ch. 6 - Discretization methods
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Union

import numpy as np

from mc_option_pricing.config.settings import SETTINGS
from mc_option_pricing.errors import InvalidSelection

logger = logging.getLogger(__name__)


class DiscretizationKind(Enum):
    """Discretization scheme enumeration."""

    CLOSED_FORM = "closed_form"
    EXPLICIT_EULER = "explicit_euler"
    MILSTEIN = "milstein"

    @property
    def display_name(self) -> str:
        """Name reported in run results."""
        return _DISPLAY_NAMES[self]

    @property
    def is_time_stepped(self) -> bool:
        """True when the scheme iterates over sub-intervals."""
        return self != DiscretizationKind.CLOSED_FORM


_DISPLAY_NAMES = {
    DiscretizationKind.CLOSED_FORM: "GBM",
    DiscretizationKind.EXPLICIT_EULER: "Explicit Euler",
    DiscretizationKind.MILSTEIN: "Milstein Method",
}

_MENU_CHOICES = {
    1: DiscretizationKind.CLOSED_FORM,
    2: DiscretizationKind.EXPLICIT_EULER,
    3: DiscretizationKind.MILSTEIN,
}

SchemeSelector = Union[DiscretizationKind, int, str]


# =============================================================================
# Coefficient Functions
# =============================================================================


def gbm_terminal_base(spot: float, expiry: float, volatility: float, rate: float) -> float:
    """
    Deterministic part of the exact GBM solution.

    [T1] S·exp(T·(r - σ²/2))
    """
    return spot * np.exp(expiry * (rate - 0.5 * volatility * volatility))


def drift(rate: float, price: float) -> float:
    """[T1] Risk-neutral drift μ(r, S) = r·S."""
    return rate * price


def diffusion(volatility: float, price: float, beta: float = SETTINGS.simulation.cev_exponent) -> float:
    """[T1] Diffusion coefficient σ(S) = σ·S^β."""
    return volatility * price**beta


def diffusion_derivative(
    volatility: float,
    price: float,
    beta: float = SETTINGS.simulation.cev_exponent,
) -> float:
    """
    Diffusion derivative term used by the Milstein correction.

    0.5·σ·β·S^(β-1), which reduces to 0.5·σ for β = 1.
    """
    return 0.5 * volatility * beta * price ** (beta - 1.0)


# =============================================================================
# Schemes
# =============================================================================


class DiscretizationScheme(ABC):
    """
    Capability: advance a simulated price.

    The engine calls start() once per path, then advance() once per step.
    Closed form is a single exact step over the whole expiry.
    """

    kind: DiscretizationKind

    @property
    def name(self) -> str:
        return self.kind.display_name

    @property
    def is_time_stepped(self) -> bool:
        return self.kind.is_time_stepped

    def start(self, spot: float, rate: float, volatility: float, expiry: float) -> float:
        """Initial price of each path."""
        return spot

    @abstractmethod
    def advance(
        self,
        price: float,
        rate: float,
        volatility: float,
        dt: float,
        sqrt_dt: float,
        normal: float,
    ) -> float:
        """
        Advance price by one step.

        Parameters
        ----------
        price : float
            Current price
        rate, volatility : float
            Model inputs
        dt, sqrt_dt : float
            Step length and its square root (expiry for closed form)
        normal : float
            Standard normal draw for this step

        Returns
        -------
        float
            Price at the end of the step
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ClosedFormScheme(DiscretizationScheme):
    """Exact lognormal terminal sampling."""

    kind = DiscretizationKind.CLOSED_FORM

    def start(self, spot: float, rate: float, volatility: float, expiry: float) -> float:
        return gbm_terminal_base(spot, expiry, volatility, rate)

    def advance(self, price, rate, volatility, dt, sqrt_dt, normal):
        return price * np.exp(np.sqrt(volatility * volatility * dt) * normal)


class ExplicitEulerScheme(DiscretizationScheme):
    """Explicit (Euler-Maruyama) scheme."""

    kind = DiscretizationKind.EXPLICIT_EULER

    def advance(self, price, rate, volatility, dt, sqrt_dt, normal):
        return price + dt * drift(rate, price) + sqrt_dt * diffusion(volatility, price) * normal


class MilsteinScheme(DiscretizationScheme):
    """Euler with the second-order Milstein correction."""

    kind = DiscretizationKind.MILSTEIN

    def advance(self, price, rate, volatility, dt, sqrt_dt, normal):
        sig = diffusion(volatility, price)
        correction = 0.5 * sig * diffusion_derivative(volatility, price) * ((sqrt_dt * normal) ** 2 - dt)
        return price + dt * drift(rate, price) + sqrt_dt * sig * normal + correction


_SCHEMES: dict[DiscretizationKind, type[DiscretizationScheme]] = {
    DiscretizationKind.CLOSED_FORM: ClosedFormScheme,
    DiscretizationKind.EXPLICIT_EULER: ExplicitEulerScheme,
    DiscretizationKind.MILSTEIN: MilsteinScheme,
}


def parse_discretization_kind(selector: SchemeSelector) -> DiscretizationKind:
    """
    Strict lookup of a scheme selector.

    Accepts the enum, its string value or display name, or the numeric menu
    choice as an int or digit string (1 = GBM closed form, 2 = explicit Euler, 3 = Milstein).

    Raises
    ------
    InvalidSelection
        If the selector is not recognised
    """
    if isinstance(selector, DiscretizationKind):
        return selector
    if isinstance(selector, int) and not isinstance(selector, bool):
        if selector in _MENU_CHOICES:
            return _MENU_CHOICES[selector]
    elif isinstance(selector, str):
        key = selector.strip().lower()
        if key.isdigit() and int(key) in _MENU_CHOICES:
            return _MENU_CHOICES[int(key)]
        for kind in DiscretizationKind:
            if key in (kind.value, kind.display_name.lower()):
                return kind

    raise InvalidSelection(f"CRITICAL: unknown discretization selector {selector!r}")


def resolve_discretization_kind(selector: SchemeSelector) -> DiscretizationKind:
    """Lenient lookup: unknown selectors fall back to CLOSED_FORM with a warning."""
    try:
        return parse_discretization_kind(selector)
    except InvalidSelection as e:
        logger.warning(f"{e}; using {DiscretizationKind.CLOSED_FORM.display_name} model")
        return DiscretizationKind.CLOSED_FORM


def get_scheme(kind: DiscretizationKind) -> DiscretizationScheme:
    """
    Scheme instance for a kind.

    Raises
    ------
    InvalidSelection
        If kind has no registered scheme
    """
    try:
        return _SCHEMES[kind]()
    except KeyError:
        raise InvalidSelection(f"CRITICAL: no scheme registered for {kind!r}") from None
