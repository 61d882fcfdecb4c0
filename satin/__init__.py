"""
Root initialization file for importing SATIN package and modules.
"""

from ._version import __version__
from .config import ConfigOptions
from .data.store import ReportWriter
from .main import calculate
from .mesh.grid import Grid
from .physics.device import DeviceConfig
from .physics.laser import Laser
from .solvers.coordinator import RunCoordinator
from .solvers.integrator import BeamIntegrator
from .solvers.processor import DeviceProcessor
from .solvers.sweep import SaturationSweep
from .types import SATURATION_SWEEP, GaussianResult, RunOutcome

__all__ = [
    "__version__",
    "ConfigOptions",
    "ReportWriter",
    "calculate",
    "Grid",
    "DeviceConfig",
    "Laser",
    "BeamIntegrator",
    "SaturationSweep",
    "DeviceProcessor",
    "RunCoordinator",
    "SATURATION_SWEEP",
    "GaussianResult",
    "RunOutcome",
]
