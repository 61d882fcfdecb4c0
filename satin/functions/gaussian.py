"""Helper module for the gaussian-beam output power integral."""

import numpy as np
from numba import njit


@njit(nogil=True, cache=True)
def compute_output_power(inten_0_a, sat_i_a, sat_g_a, prof_a, r_g_a, rad_sq_a, ann_c_a):
    """
    Compute the output power of a saturated gaussian beam
    integrating over the axial and radial coordinates.

    The axial update of every radial node depends on the
    running intensity, so samples are walked in index order.
    Radial contributions are summed in radius order.

    Parameters
    ----------
    inten_0_a : float
        Input beam peak intensity.
    sat_i_a : float
        Saturation intensity.
    sat_g_a : float
        Saturation intensity times the gain per axial step.
    prof_a : (K,) array_like
        Axial correction profile.
    r_g_a : (M,) array_like
        Radial coordinates grid.
    rad_sq_a : float
        Squared beam radius.
    ann_c_a : float
        Annulus area factor, 2 * pi * dr.

    Returns
    -------
    power : float
        Output power of the beam.

    """
    power = 0.0
    for ii in range(r_g_a.shape[0]):
        r = r_g_a[ii]
        inten = inten_0_a * np.exp(-2 * r**2 / rad_sq_a)
        for kk in range(prof_a.shape[0]):
            inten *= 1 + sat_g_a / (sat_i_a + inten) - prof_a[kk]
        power += inten * ann_c_a * r

    return power
