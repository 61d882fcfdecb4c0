"""
Axial correction profile module.

How this works
--------------

1. Every axial sample `i` of the window gets an offset
`z_inc = (i - center) / scale` measured in axial steps.

2. The correction coefficient of that sample is the
gaussian-beam divergence term

    profile[i] = z_inc * 2 * dz / (z1^2 + z_inc^2)

where `z1` is the Rayleigh range of the beam.

3. The divide of step 1 comes in two flavours. The "true"
mode is a floating-point division. The "truncate" mode is
an integer division truncating toward zero, which turns
`z_inc` into a staircase and reproduces the reports of the
integer-arithmetic variant of the model.

4. Nothing in the table depends on the input power, so it
is built once per (grid, laser, division) and shared,
read-only, by every integration of the run.

"""

from functools import lru_cache

import numpy as np

from ..config import PROFILE_DIVISION_MODES
from ..mesh.grid import Grid
from ..physics.laser import Laser


def compute_axial_profile(grid, laser, division="true"):
    """
    Compute the axial correction table.

    Parameters
    ----------
    grid : object
        Contains the axial window parameters.
    laser : object
        Contains the beam Rayleigh range.
    division : str, default: "true"
        Division of the axial offset, "true" or "truncate".

    Returns
    -------
    profile : (K,) ndarray
        Read-only correction coefficient per axial sample.
        K is the number of axial nodes.

    """
    if division == "true":
        z_inc = grid.z_index / grid.z_scale
    elif division == "truncate":
        z_inc = np.trunc(grid.z_index / grid.z_scale)
    else:
        raise ValueError(
            f"Invalid profile division: '{division}'. "
            f"Available modes are: {', '.join(PROFILE_DIVISION_MODES)}"
        )

    z_inc = z_inc.astype(np.float64)
    profile = z_inc * 2 * grid.z_res / (laser.rayleigh_range_sq + z_inc**2)
    profile.setflags(write=False)

    return profile


@lru_cache(maxsize=None)
def default_axial_profile(division="true"):
    """Axial profile of the default grid and laser, cached per division."""
    return compute_axial_profile(Grid(), Laser(), division)
