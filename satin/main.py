"""Main entry point for the SATIN package."""

import logging

from .data.loader import load_input_powers, load_laser_data
from .functions.profile import default_axial_profile
from .mesh.grid import Grid
from .physics.laser import Laser
from .solvers.coordinator import RunCoordinator
from .solvers.integrator import BeamIntegrator
from .solvers.processor import DeviceProcessor
from .solvers.sweep import SaturationSweep

logger = logging.getLogger(__name__)


def calculate(config, devices=None, input_powers=None, clock=None):
    """
    Run the saturation sweep of every device and input power.

    Parameters
    ----------
    config : ConfigOptions
        Execution, profile and input options.
    devices : sequence of DeviceConfig, optional
        Devices to process. Loaded from the laser data file
        when not given.
    input_powers : sequence of integers, optional
        Input powers to process. Loaded from the input-power
        file when not given.
    clock : callable, optional
        Timestamp source for the reports.

    Returns
    -------
    outcome : RunOutcome
        Truthy iff every device processed every input power.

    """
    if input_powers is None:
        input_powers = load_input_powers(config.inputs.input_powers)
    if devices is None:
        devices = load_laser_data(config.inputs.laser_data)

    # Initialize classes
    grid = Grid()
    laser = Laser()
    profile = default_axial_profile(config.profile.division)
    logger.debug("Axial profile built with '%s' division", config.profile.division)

    integrator = BeamIntegrator(laser, grid, profile=profile)
    sweep = SaturationSweep(
        integrator,
        concurrent=config.execution.concurrent_sweep,
        max_workers=config.execution.max_workers,
    )
    processor = DeviceProcessor(sweep, base_dir=config.inputs.output_dir, clock=clock)
    coordinator = RunCoordinator(
        processor,
        concurrent=config.execution.concurrent_devices,
        max_workers=config.execution.max_workers,
        progress=config.execution.progress,
    )

    # Run simulation
    return coordinator.run(devices, input_powers)
