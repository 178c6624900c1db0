"""
Tests for discretization schemes.

[T1] Euler: S' = S + dt·r·S + √dt·σ·S·Z
[T1] Milstein: Euler + ½·σS·(½σ)·((√dt·Z)² - dt)
[T1] Closed form: S_T = S·exp(T(r - σ²/2))·exp(√(σ²T)·Z)
"""

import logging
import math

import pytest

from mc_option_pricing.config.tolerances import ANTI_PATTERN_TOLERANCE
from mc_option_pricing.errors import InvalidSelection
from mc_option_pricing.options.simulation.schemes import (
    ClosedFormScheme,
    DiscretizationKind,
    ExplicitEulerScheme,
    MilsteinScheme,
    diffusion,
    diffusion_derivative,
    drift,
    gbm_terminal_base,
    get_scheme,
    parse_discretization_kind,
    resolve_discretization_kind,
)


class TestCoefficients:
    def test_drift(self) -> None:
        assert drift(0.05, 100.0) == pytest.approx(5.0)

    def test_diffusion_gbm(self) -> None:
        assert diffusion(0.2, 100.0) == pytest.approx(20.0)

    def test_diffusion_cev(self) -> None:
        assert diffusion(0.2, 100.0, beta=0.5) == pytest.approx(2.0)

    def test_diffusion_derivative_gbm(self) -> None:
        """β = 1 reduces to ½σ, independent of S."""
        assert diffusion_derivative(0.3, 50.0) == pytest.approx(0.15)
        assert diffusion_derivative(0.3, 500.0) == pytest.approx(0.15)

    def test_gbm_terminal_base(self) -> None:
        assert gbm_terminal_base(100.0, 1.0, 0.2, 0.05) == pytest.approx(100.0 * math.exp(0.03))


class TestSchemeSteps:
    """Exact single-step values."""

    def test_euler_step(self) -> None:
        scheme = ExplicitEulerScheme()
        # 100 + 0.01·5 + 0.1·20·1
        assert scheme.advance(100.0, 0.05, 0.2, 0.01, 0.1, 1.0) == pytest.approx(102.05)

    def test_euler_start_is_spot(self) -> None:
        assert ExplicitEulerScheme().start(100.0, 0.05, 0.2, 1.0) == 100.0

    def test_milstein_correction_vanishes_when_increment_matches_dt(self) -> None:
        # (√dt·Z)² = dt for Z = 1
        assert MilsteinScheme().advance(100.0, 0.05, 0.2, 0.01, 0.1, 1.0) == pytest.approx(102.05)

    def test_milstein_step(self) -> None:
        # Euler 104.05 + ½·20·0.1·(0.04 - 0.01)
        assert MilsteinScheme().advance(100.0, 0.05, 0.2, 0.01, 0.1, 2.0) == pytest.approx(104.08)

    def test_milstein_zero_draw(self) -> None:
        # S(1 + r·dt - ¼σ²·dt)
        value = MilsteinScheme().advance(100.0, 0.05, 0.2, 0.01, 0.1, 0.0)
        assert value == pytest.approx(100.0 * (1 + 0.0005 - 0.0001), abs=ANTI_PATTERN_TOLERANCE)

    def test_closed_form(self) -> None:
        scheme = ClosedFormScheme()
        base = scheme.start(100.0, 0.05, 0.2, 1.0)

        assert base == pytest.approx(100.0 * math.exp(0.03))
        assert scheme.advance(base, 0.05, 0.2, 1.0, 1.0, 0.0) == pytest.approx(base)
        assert scheme.advance(base, 0.05, 0.2, 1.0, 1.0, 1.5) == pytest.approx(base * math.exp(0.3))


class TestSchemeSelection:
    @pytest.mark.parametrize(
        "selector,expected",
        [
            (1, DiscretizationKind.CLOSED_FORM),
            (2, DiscretizationKind.EXPLICIT_EULER),
            (3, DiscretizationKind.MILSTEIN),
            ("GBM", DiscretizationKind.CLOSED_FORM),
            ("milstein", DiscretizationKind.MILSTEIN),
            ("Milstein Method", DiscretizationKind.MILSTEIN),
            ("explicit_euler", DiscretizationKind.EXPLICIT_EULER),
            ("2", DiscretizationKind.EXPLICIT_EULER),
            (" 3 ", DiscretizationKind.MILSTEIN),
        ],
    )
    def test_parse(self, selector, expected) -> None:
        assert parse_discretization_kind(selector) is expected

    @pytest.mark.parametrize("selector", [0, 4, "4", "runge_kutta", False])
    def test_parse_unknown_raises(self, selector) -> None:
        with pytest.raises(InvalidSelection):
            parse_discretization_kind(selector)

    def test_resolve_falls_back_to_closed_form(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            assert resolve_discretization_kind(9) is DiscretizationKind.CLOSED_FORM
        assert "GBM" in caplog.text

    @pytest.mark.parametrize(
        "kind,cls",
        [
            (DiscretizationKind.CLOSED_FORM, ClosedFormScheme),
            (DiscretizationKind.EXPLICIT_EULER, ExplicitEulerScheme),
            (DiscretizationKind.MILSTEIN, MilsteinScheme),
        ],
    )
    def test_get_scheme(self, kind, cls) -> None:
        scheme = get_scheme(kind)

        assert isinstance(scheme, cls)
        assert scheme.name == kind.display_name
        assert scheme.is_time_stepped == kind.is_time_stepped

    def test_get_scheme_unknown_raises(self) -> None:
        with pytest.raises(InvalidSelection):
            get_scheme("not-a-kind")

    def test_time_stepped_flags(self) -> None:
        assert not DiscretizationKind.CLOSED_FORM.is_time_stepped
        assert DiscretizationKind.EXPLICIT_EULER.is_time_stepped
        assert DiscretizationKind.MILSTEIN.is_time_stepped
