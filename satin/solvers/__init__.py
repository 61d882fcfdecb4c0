"""Solvers subpackage initialization file for importing utilities."""

from .coordinator import RunCoordinator
from .integrator import BeamIntegrator
from .processor import DeviceProcessor
from .sweep import SaturationSweep

__all__ = ["BeamIntegrator", "SaturationSweep", "DeviceProcessor", "RunCoordinator"]
