#!/usr/bin/env python3
"""
Tests for the friction factor correlation library.

Validates the correlations against:
- The laminar override (64/Re below Re = 4000)
- Independent implementations in the fluids library
- Cross-correlation consistency with the Colebrook equation
"""

import math
from concurrent.futures import ThreadPoolExecutor

import fluids.friction
import pytest

from correlations import (
    CORRELATIONS, CORRELATION_INFO, chen, colebrook, colebrook_solve,
    get_correlation, goudar_sonnad, haaland, list_correlations, serghides,
    swamee_jain, wood, zigrang_sylvester
)

ALL_NAMES = [
    "swameeJain", "colebrook", "haaland", "chen",
    "zigrangSylvester", "goudarSonnad", "serghides", "wood",
]

TURBULENT_POINTS = [
    (0.0, 5000),
    (1e-6, 1e5),
    (0.0002, 50000),
    (0.001, 1e6),
    (0.01, 1e7),
    (0.05, 4000),
    (1e-5, 1e8),
]


class TestRegistry:
    """Test the correlation registry."""

    def test_registration_order(self):
        """Names come back in the fixed registration order."""
        assert list_correlations() == ALL_NAMES

    def test_list_is_a_copy(self):
        """Mutating the returned list does not touch the registry."""
        names = list_correlations()
        names.append("bogus")
        assert "bogus" not in list_correlations()

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            CORRELATIONS["bogus"] = swamee_jain  # type: ignore[index]

    def test_names_map_to_functions(self):
        assert get_correlation("swameeJain") is swamee_jain
        assert get_correlation("colebrook") is colebrook
        assert get_correlation("zigrangSylvester") is zigrang_sylvester
        assert get_correlation("goudarSonnad") is goudar_sonnad

    def test_unknown_name_raises_key_error(self):
        with pytest.raises(KeyError):
            get_correlation("nonexistent")

    def test_every_correlation_has_info(self):
        assert list(CORRELATION_INFO) == ALL_NAMES
        for name, info in CORRELATION_INFO.items():
            assert info.name == name
            assert info.function is CORRELATIONS[name]

    def test_validity_range_is_advisory(self):
        """Swamee-Jain documents Re > 5000, Colebrook documents no limits."""
        sj = CORRELATION_INFO["swameeJain"]
        assert sj.in_validity_range(1e-4, 1e5)
        assert not sj.in_validity_range(1e-4, 4500)
        assert not sj.in_validity_range(0.1, 1e5)
        assert CORRELATION_INFO["colebrook"].in_validity_range(0.5, 10)


class TestLaminarOverride:
    """Below Re = 4000 every correlation returns 64/Re exactly."""

    @pytest.mark.parametrize("name", ALL_NAMES)
    @pytest.mark.parametrize("Re", [1.0, 100.0, 2000.0, 2300.0, 3000.0, 3999.999])
    def test_laminar_value(self, name, Re):
        assert CORRELATIONS[name](0.0002, Re) == 64 / Re

    @pytest.mark.parametrize("name", ALL_NAMES)
    def test_override_ignores_roughness(self, name):
        assert CORRELATIONS[name](0.05, 3500) == CORRELATIONS[name](0.0, 3500)

    @pytest.mark.parametrize("name", ALL_NAMES)
    def test_turbulent_formula_at_threshold(self, name):
        """At exactly Re = 4000 the turbulent formula applies."""
        assert CORRELATIONS[name](0.0002, 4000) != 64 / 4000


class TestTurbulentValues:
    """Turbulent results are finite and positive."""

    @pytest.mark.parametrize("name", [n for n in ALL_NAMES if n != "wood"])
    @pytest.mark.parametrize("eD,Re", TURBULENT_POINTS)
    def test_finite_positive(self, name, eD, Re):
        f = CORRELATIONS[name](eD, Re)
        assert isinstance(f, float)
        assert math.isfinite(f)
        assert f > 0

    @pytest.mark.parametrize("eD,Re", [p for p in TURBULENT_POINTS if p[0] > 0])
    def test_wood_finite_positive(self, eD, Re):
        f = wood(eD, Re)
        assert math.isfinite(f)
        assert f > 0

    def test_wood_smooth_pipe_is_zero(self):
        """Every Wood term scales with e/D, so a smooth pipe gives zero."""
        assert wood(0.0, 50000) == 0.0

    @pytest.mark.parametrize("name", ALL_NAMES)
    def test_idempotent(self, name):
        """Same inputs, bit-identical output."""
        fn = CORRELATIONS[name]
        assert fn(0.0002, 50000) == fn(0.0002, 50000)

    def test_concurrent_calls_agree(self):
        """No shared state between calls."""
        points = TURBULENT_POINTS * 20
        expected = [colebrook(eD, Re) for eD, Re in points]
        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(pool.map(lambda p: colebrook(*p), points))
        assert actual == expected

    def test_friction_decreases_with_reynolds(self):
        """Along a Moody curve f falls as Re rises in the turbulent range."""
        values = [colebrook(1e-4, Re) for Re in (1e4, 1e5, 1e6, 1e7)]
        assert values == sorted(values, reverse=True)

    def test_friction_increases_with_roughness(self):
        values = [colebrook(eD, 1e5) for eD in (0.0, 1e-4, 1e-3, 1e-2)]
        assert values == sorted(values)


class TestAgainstFluids:
    """Compare explicit correlations to the fluids library implementations."""

    @pytest.mark.parametrize("eD,Re", TURBULENT_POINTS)
    def test_swamee_jain(self, eD, Re):
        """fluids writes the Re term as (6.97/Re)^0.9 instead of 5.74/Re^0.9."""
        assert swamee_jain(eD, Re) == pytest.approx(fluids.friction.Swamee_Jain_1976(Re=Re, eD=eD), rel=1e-4)

    @pytest.mark.parametrize("eD,Re", TURBULENT_POINTS)
    def test_haaland(self, eD, Re):
        assert haaland(eD, Re) == pytest.approx(fluids.friction.Haaland(Re=Re, eD=eD), rel=1e-9)

    @pytest.mark.parametrize("eD,Re", TURBULENT_POINTS)
    def test_serghides(self, eD, Re):
        assert serghides(eD, Re) == pytest.approx(fluids.friction.Serghides_1(Re=Re, eD=eD), rel=1e-9)

    @pytest.mark.parametrize("eD,Re", TURBULENT_POINTS)
    def test_colebrook_matches_exact_solution(self, eD, Re):
        """Fixed-point iteration agrees with the Lambert-W closed form."""
        assert colebrook(eD, Re) == pytest.approx(fluids.friction.Colebrook(Re=Re, eD=eD), rel=1e-7)


class TestPinnedValues:
    """Reference values for correlations whose fluids counterparts use other forms."""

    @pytest.mark.parametrize("eD,Re,expected", [
        (0.0002, 50000, 0.0217450453084125),
        (0.001, 1e6, 0.019957015094987),
        (1e-6, 1e5, 0.0180989314788763),
        (0.01, 1e7, 0.0378877342220767),
        (0.05, 4000, 0.077092693033128),
        (0.0, 1e5, 0.0180931984405747),
    ])
    def test_chen(self, eD, Re, expected):
        assert chen(eD, Re) == pytest.approx(expected, rel=1e-9)

    @pytest.mark.parametrize("eD,Re,expected", [
        (0.0002, 50000, 0.00564654313304373),
        (1e-6, 1e5, 0.00404494969160171),
        (0.05, 4000, 0.00687637681142774),
        (0.0, 1e5, 0.00405465689932298),
    ])
    def test_zigrang_sylvester(self, eD, Re, expected):
        assert zigrang_sylvester(eD, Re) == pytest.approx(expected, rel=1e-9)

    @pytest.mark.parametrize("eD,Re,expected", [
        (0.0002, 50000, 0.0141496938181158),
        (0.001, 1e6, 0.0130690360079569),
        (1e-6, 1e5, 0.0117923248389469),
        (0.01, 1e7, 0.02484246628789),
        (0.05, 4000, 0.0504497926966512),
        (0.0, 1e5, 0.0117887730188898),
    ])
    def test_goudar_sonnad(self, eD, Re, expected):
        assert goudar_sonnad(eD, Re) == pytest.approx(expected, rel=1e-9)

    @pytest.mark.parametrize("eD,Re,expected", [
        (0.0002, 50000, 0.0216203507635325),
        (0.001, 1e6, 0.0209892585364003),
        (1e-6, 1e5, 0.0149761303937252),
        (0.01, 1e7, 0.0386612981798063),
        (0.05, 4000, 0.0773312946913697),
    ])
    def test_wood(self, eD, Re, expected):
        """88 * (e/D)^0.44 form; fluids.friction.Wood_1966 uses the exponent 0.4."""
        assert wood(eD, Re) == pytest.approx(expected, rel=1e-9)


class TestColebrook:
    """Test the Colebrook fixed-point solver."""

    def test_reference_point(self):
        """e/D = 0.0002, Re = 50000 gives f close to 0.0216."""
        f = colebrook(0.0002, 50000)
        assert f == pytest.approx(0.02159, rel=2e-3)

    def test_converges(self):
        solution = colebrook_solve(0.0002, 50000)
        assert solution.converged
        assert 1 <= solution.iterations < 100
        assert solution.friction_factor == colebrook(0.0002, 50000)

    def test_fixed_point_residual(self):
        """The returned value satisfies the Colebrook equation."""
        eD, Re = 0.0002, 50000
        f = colebrook(eD, Re)
        rhs = 0.25 / math.log10(eD / 3.7 + 2.51 / (Re * math.sqrt(f))) ** 2
        assert abs(rhs - f) < 1e-9

    def test_agrees_with_serghides_within_one_percent(self):
        f_cb = colebrook(0.0002, 50000)
        f_sg = serghides(0.0002, 50000)
        assert abs(f_sg - f_cb) / f_cb < 0.01

    def test_agrees_with_haaland_within_its_accuracy(self):
        """Haaland is a ±1.5% approximation of Colebrook."""
        f_cb = colebrook(0.0002, 50000)
        f_ha = haaland(0.0002, 50000)
        assert abs(f_ha - f_cb) / f_cb < 0.015

    def test_agrees_with_swamee_jain_within_one_percent(self):
        f_cb = colebrook(0.0002, 50000)
        assert abs(swamee_jain(0.0002, 50000) - f_cb) / f_cb < 0.01

    def test_chen_close_to_colebrook(self):
        f_cb = colebrook(0.0002, 50000)
        assert abs(chen(0.0002, 50000) - f_cb) / f_cb < 0.02

    def test_laminar_solution_skips_iteration(self):
        solution = colebrook_solve(0.0002, 1000)
        assert solution.friction_factor == 0.064
        assert solution.iterations == 0
        assert solution.converged

    def test_iteration_cap_returns_last_estimate(self, monkeypatch, caplog):
        """Hitting the cap is silent apart from a debug log."""
        monkeypatch.setattr("correlations.darcy.COLEBROOK_MAX_ITERATIONS", 2)
        eD, Re = 0.0002, 50000

        f1 = 0.25 / math.log10(eD / 3.7 + 2.51 / (Re * math.sqrt(0.02))) ** 2
        f2 = 0.25 / math.log10(eD / 3.7 + 2.51 / (Re * math.sqrt(f1))) ** 2

        with caplog.at_level("DEBUG", logger="friction-mcp.darcy"):
            solution = colebrook_solve(eD, Re)

        assert not solution.converged
        assert solution.iterations == 2
        assert solution.friction_factor == f2
        assert colebrook(eD, Re) == f2
        assert "did not converge" in caplog.text


class TestWood:
    """Wood correlation value check."""

    def test_reference_point(self):
        eD, Re = 0.0002, 50000
        expected = (0.094 * eD ** 0.225 + 0.53 * eD
                    + 88 * eD ** 0.44 * Re ** (-1.62 * eD ** 0.134))
        assert wood(eD, Re) == expected
        assert 0.02 < wood(eD, Re) < 0.023
