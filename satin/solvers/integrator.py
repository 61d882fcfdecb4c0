"""Beam integrator module for one (input power, saturation intensity) pair."""

from ..functions.gaussian import compute_output_power
from ..functions.profile import compute_axial_profile
from ..types import GaussianResult


class BeamIntegrator:
    """Gaussian-beam output power integrator."""

    def __init__(self, laser, grid, profile=None, division="true"):
        """Initialize integrator with the beam and mesh parameters.

        Parameters
        ----------
        laser : object
            Contains the laser beam parameters.
        grid : object
            Contains the grid input parameters.
        profile : (K,) array_like, optional
            Precomputed axial correction profile. Built from
            the grid and laser when not given.
        division : str, default: "true"
            Division mode used when the profile is built here.

        """
        self.laser = laser
        self.grid = grid
        if profile is None:
            profile = compute_axial_profile(grid, laser, division)
        if len(profile) != grid.z_nodes:
            raise ValueError(
                f"Axial profile has {len(profile)} samples, "
                f"but the grid has {grid.z_nodes} axial nodes."
            )
        self.profile = profile

        # Initialize frequent arguments
        self.r_grid = grid.r_grid
        self.z_res = grid.z_res
        self.annulus_c = grid.annulus_factor
        self.radius_sq = laser.radius_sq

    def integrate(self, input_power, saturation_intensity, small_signal_gain):
        """
        Compute the output power for one input power and
        saturation intensity of a device.

        Parameters
        ----------
        input_power : integer
            Input beam power. Not validated, non-positive
            values give degenerate results.
        saturation_intensity : float
            Saturation intensity of the gain medium.
        small_signal_gain : float
            Small-signal gain of the device.

        Returns
        -------
        result : GaussianResult
            Input power, truncated saturation intensity and
            output power.

        """
        saturation_intensity = float(saturation_intensity)
        input_intensity = self.laser.input_intensity(input_power)
        gain_term = self.laser.gain_term(small_signal_gain, self.z_res)

        output_power = compute_output_power(
            input_intensity,
            saturation_intensity,
            saturation_intensity * gain_term,
            self.profile,
            self.r_grid,
            self.radius_sq,
            self.annulus_c,
        )

        return GaussianResult(
            int(input_power), int(saturation_intensity), float(output_power)
        )
