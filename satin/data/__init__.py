"""Data subpackage initialization file for importing utilities."""

from .diagnostics import validate_results
from .loader import load_input_powers, load_laser_data
from .store import ReportWriter

__all__ = [
    "ReportWriter",
    "load_input_powers",
    "load_laser_data",
    "validate_results",
]
