"""Methods subpackage initialization file for importing functions."""

from .gaussian import compute_output_power
from .profile import compute_axial_profile, default_axial_profile

__all__ = [
    "compute_output_power",
    "compute_axial_profile",
    "default_axial_profile",
]
