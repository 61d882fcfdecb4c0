"""Beam integrator tests, including property-based checks."""

import math

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

from satin.functions.gaussian import compute_output_power
from satin.mesh.grid import Grid
from satin.physics.laser import Laser
from satin.solvers.integrator import BeamIntegrator
from satin.types import SATURATION_SWEEP, GaussianResult


class TestGrid:

    def test_axial_window(self, grid):
        assert grid.z_nodes == 8001
        assert grid.z_center == 4000
        assert grid.z_index[0] == -4000
        assert grid.z_index[-1] == 4000

    def test_radial_nodes_accumulate(self, grid):
        assert grid.r_grid[0] == 0.0
        assert grid.r_grid[-1] <= 0.5
        assert grid.r_grid[-1] + grid.r_res > 0.5
        assert grid.r_nodes in (250, 251)


class TestLaser:

    def test_derived_parameters(self, laser):
        assert laser.area == pytest.approx(math.pi * 0.18**2)
        assert laser.rayleigh_range == pytest.approx(math.pi * 0.09 / 10.6e-3)

    def test_input_intensity(self, laser):
        assert laser.input_intensity(100) == pytest.approx(200 / (math.pi * 0.18**2))

    def test_gain_term(self):
        assert Laser.gain_term(20.0, 4e-2) == pytest.approx(20.0 / 32e3 * 4e-2)


class TestBeamIntegrator:

    def test_result_fields(self, integrator):
        result = integrator.integrate(100, 10000.0, 20.0)
        assert isinstance(result, GaussianResult)
        assert result.input_power == 100
        assert result.saturation_intensity == 10000
        assert isinstance(result.saturation_intensity, int)
        assert np.isfinite(result.output_power)
        assert result.output_power > 0

    def test_deterministic(self, integrator):
        first = integrator.integrate(250, 17000, 18.5)
        second = integrator.integrate(250, 17000, 18.5)
        assert first.output_power == second.output_power

    def test_gain_amplifies(self, integrator):
        """A positive small-signal gain must return more power than a null one."""
        amplified = integrator.integrate(100, 10000, 20.0).output_power
        passive = integrator.integrate(100, 10000, 0.0).output_power
        assert amplified > passive

    def test_zero_power_is_not_validated(self, integrator):
        result = integrator.integrate(0, 10000, 20.0)
        assert result.output_power == 0.0

    def test_matches_plain_python_loop(self, grid, laser):
        """Kernel follows the reference double loop on a reduced grid."""
        small = Grid(z_nodes=201, r_max=0.05)
        integrator = BeamIntegrator(laser, small)

        inten_0 = laser.input_intensity(100)
        sat_i = 12000.0
        sat_g = sat_i * laser.gain_term(20.0, small.z_res)
        expected = 0.0
        r = 0.0
        while r <= small.r_max:
            inten = inten_0 * math.exp(-2 * r**2 / laser.radius_sq)
            for p in integrator.profile:
                inten *= 1 + sat_g / (sat_i + inten) - p
            expected += inten * (2 * math.pi * small.r_res) * r
            r += small.r_res

        result = integrator.integrate(100, sat_i, 20.0)
        assert result.output_power == pytest.approx(expected, rel=1e-12)

    def test_profile_length_mismatch(self, grid, laser):
        with pytest.raises(ValueError, match="axial nodes"):
            BeamIntegrator(laser, grid, profile=np.zeros(10))

    def test_kernel_direct_call(self, grid, integrator):
        power = compute_output_power(
            1000.0, 10000.0, 10000.0 * 2.5e-5,
            integrator.profile, grid.r_grid, 0.18**2, grid.annulus_factor,
        )
        assert np.isfinite(power)

    @settings(max_examples=20, deadline=None)
    @given(
        input_power=st.integers(min_value=1, max_value=5000),
        step=st.integers(min_value=1, max_value=2000),
        sat_index=st.integers(min_value=0, max_value=len(SATURATION_SWEEP) - 1),
    )
    def test_monotone_in_input_power(self, integrator, input_power, step, sat_index):
        saturation_intensity = SATURATION_SWEEP[sat_index]
        lower = integrator.integrate(input_power, saturation_intensity, 20.0)
        upper = integrator.integrate(input_power + step, saturation_intensity, 20.0)
        assert upper.output_power >= lower.output_power
