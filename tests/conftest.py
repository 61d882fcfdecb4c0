"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest

from satin.mesh.grid import Grid
from satin.physics.device import DeviceConfig
from satin.physics.laser import Laser
from satin.solvers.integrator import BeamIntegrator

FIXED_MOMENT = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def grid():
    return Grid()


@pytest.fixture(scope="session")
def laser():
    return Laser()


@pytest.fixture(scope="session")
def integrator(grid, laser):
    return BeamIntegrator(laser, grid)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_MOMENT


@pytest.fixture
def device():
    return DeviceConfig(
        small_signal_gain=20.0,
        discharge_pressure=150,
        output_path="p150.dat",
        gain_medium_label="CO2/N2/He",
    )
