"""Laser beam properties for the CO2 gaussian-beam amplifier."""

import numpy as np

RADIUS = 18e-2  # [cm]
WAIST = 3e-1  # [cm]
WAVELENGTH = 10.6e-3  # [cm]
GAIN_SCALE = 32e3


class Laser:
    """
    Gaussian beam crossing the gain medium.

    Lengths are given in centimeters and powers in
    watts, so intensities come out in W/cm2.
    """

    def __init__(self, radius=RADIUS, waist=WAIST, wavelength=WAVELENGTH):
        # Initialize parameters
        self.radius = radius
        self.waist = waist
        self.wavelength = wavelength

        self._init_parameters()

    def _init_parameters(self):
        """Initialize derived beam optical properties."""
        self.area = np.pi * self.radius**2
        self.radius_sq = self.radius**2
        self.rayleigh_range = np.pi * self.waist**2 / self.wavelength
        self.rayleigh_range_sq = self.rayleigh_range**2

    def input_intensity(self, input_power):
        """Peak intensity of a gaussian beam with the given power."""
        return 2 * float(input_power) / self.area

    @staticmethod
    def gain_term(small_signal_gain, z_res):
        """Small-signal gain accumulated over one axial step."""
        return (float(small_signal_gain) / GAIN_SCALE) * z_res
