"""Physics subpackage initialization file for importing utilities."""

from .device import DeviceConfig
from .laser import Laser

__all__ = ["DeviceConfig", "Laser"]
