"""Laser device (gain medium) configuration records."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DeviceConfig:
    """
    One configured laser gain-medium setup.

    Instances are read-only and shared by every concurrent
    unit of work during a run.
    """
    small_signal_gain: float # [-]
    discharge_pressure: int # [kPa]
    output_path: str
    gain_medium_label: str
