"""
Standard normal variate sources.

Two interchangeable engines:
- DEFAULT: numpy's default bit generator (PCG64, permuted linear congruential)
- MERSENNE_TWISTER: MT19937

Without a seed, the generator is rebuilt from a high-resolution clock
reading on every draw, so repeated calls in one process never replay the
same sequence. With a seed, one generator lives for the life of the source
and the sequence is reproducible.

Sources are plain objects owned by the engine (or injected by tests); there
is no process-global generator.
"""

import logging
import time
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Union

import numpy as np

from mc_option_pricing.errors import InvalidSelection

logger = logging.getLogger(__name__)


class RandomEngineKind(Enum):
    """Random generation engine enumeration."""

    DEFAULT = "default"
    MERSENNE_TWISTER = "mersenne_twister"

    @property
    def display_name(self) -> str:
        """Name reported in run results."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    RandomEngineKind.DEFAULT: "Default Random Engine",
    RandomEngineKind.MERSENNE_TWISTER: "Mersenne Twister",
}

# Numeric menu selectors accepted from user-facing front ends
_MENU_CHOICES = {
    1: RandomEngineKind.DEFAULT,
    2: RandomEngineKind.MERSENNE_TWISTER,
}

EngineSelector = Union[RandomEngineKind, int, str]


class RandomSource(ABC):
    """Capability: produce N(0, 1) variates one at a time."""

    name: str = "Random Source"

    @abstractmethod
    def next_standard_normal(self) -> float:
        """Draw one standard normal variate."""
        pass


def _clock_seed() -> np.random.SeedSequence:
    """Seed material from the wall clock and the high-resolution counter."""
    return np.random.SeedSequence((time.time_ns(), time.perf_counter_ns()))


def _bit_generator(kind: RandomEngineKind, seed) -> np.random.BitGenerator:
    if kind == RandomEngineKind.MERSENNE_TWISTER:
        return np.random.MT19937(seed)
    return np.random.PCG64(seed)


class NumpyRandomSource(RandomSource):
    """
    numpy-backed normal variate source.

    Parameters
    ----------
    kind : RandomEngineKind
        Engine algorithm
    seed : int, optional
        Fixed seed. None reseeds from the clock on every draw.

    Examples
    --------
    >>> source = NumpyRandomSource(RandomEngineKind.MERSENNE_TWISTER, seed=42)
    >>> isinstance(source.next_standard_normal(), float)
    True
    """

    def __init__(self, kind: RandomEngineKind = RandomEngineKind.DEFAULT, seed: Optional[int] = None):
        self.kind = kind
        self.seed = seed
        self.name = kind.display_name

        self._rng: Optional[np.random.Generator] = None
        if seed is not None:
            self._rng = np.random.Generator(_bit_generator(kind, seed))

    def next_standard_normal(self) -> float:
        if self._rng is not None:
            return float(self._rng.standard_normal())

        rng = np.random.Generator(_bit_generator(self.kind, _clock_seed()))
        return float(rng.standard_normal())


def parse_engine_kind(selector: EngineSelector) -> RandomEngineKind:
    """
    Strict lookup of a random engine selector.

    Accepts the enum, its string value or display name, or the numeric menu
    choice as an int or digit string (1 = default, 2 = Mersenne Twister).

    Raises
    ------
    InvalidSelection
        If the selector is not recognised
    """
    if isinstance(selector, RandomEngineKind):
        return selector
    if isinstance(selector, int) and not isinstance(selector, bool):
        if selector in _MENU_CHOICES:
            return _MENU_CHOICES[selector]
    elif isinstance(selector, str):
        key = selector.strip().lower()
        if key.isdigit() and int(key) in _MENU_CHOICES:
            return _MENU_CHOICES[int(key)]
        for kind in RandomEngineKind:
            if key in (kind.value, kind.display_name.lower()):
                return kind

    raise InvalidSelection(f"CRITICAL: unknown random engine selector {selector!r}")


def resolve_engine_kind(selector: EngineSelector) -> RandomEngineKind:
    """
    Lenient lookup: unknown selectors fall back to DEFAULT with a warning.
    """
    try:
        return parse_engine_kind(selector)
    except InvalidSelection as e:
        logger.warning(f"{e}; using {RandomEngineKind.DEFAULT.display_name}")
        return RandomEngineKind.DEFAULT


def make_random_source(selector: EngineSelector = RandomEngineKind.DEFAULT, seed: Optional[int] = None) -> NumpyRandomSource:
    """
    Build a fresh random source for one run.

    Parameters
    ----------
    selector : RandomEngineKind, int or str
        Engine choice; unrecognised values fall back to DEFAULT
    seed : int, optional
        Fixed seed for reproducible runs

    Returns
    -------
    NumpyRandomSource
        New source owned by the caller
    """
    return NumpyRandomSource(resolve_engine_kind(selector), seed)
