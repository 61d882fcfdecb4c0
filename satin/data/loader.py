"""Input records loading module."""

import logging
from pathlib import Path

from ..physics.device import DeviceConfig

logger = logging.getLogger(__name__)

LASER_FIELDS = 4


def _read_tokens(path):
    """Split a records file on any whitespace."""
    return Path(path).read_text(encoding="utf-8").split()


def load_input_powers(path):
    """
    Load the input powers, one integer per record.

    Parameters
    ----------
    path : str or Path
        Input-power records file.

    Returns
    -------
    input_powers : list of integers
        Input powers in file order [W].

    """
    input_powers = []
    for token in _read_tokens(path):
        try:
            input_powers.append(int(token))
        except ValueError as exc:
            raise ValueError(
                f"Invalid input power '{token}' in {path}. "
                f"Input powers must be integers."
            ) from exc

    logger.info("Loaded %d input powers from %s", len(input_powers), path)
    return input_powers


def load_laser_data(path):
    """
    Load the device records.

    Every record is made of the report path, the small-signal
    gain, the discharge pressure and the gain medium label.

    Parameters
    ----------
    path : str or Path
        Device records file.

    Returns
    -------
    devices : list of DeviceConfig
        Devices in file order.

    """
    tokens = _read_tokens(path)
    if len(tokens) % LASER_FIELDS != 0:
        raise ValueError(
            f"Incomplete device record in {path}: found {len(tokens)} fields, "
            f"expected a multiple of {LASER_FIELDS}."
        )

    devices = []
    for start in range(0, len(tokens), LASER_FIELDS):
        output_path, gain, pressure, label = tokens[start : start + LASER_FIELDS]
        try:
            devices.append(
                DeviceConfig(
                    small_signal_gain=float(gain),
                    discharge_pressure=int(pressure),
                    output_path=output_path,
                    gain_medium_label=label,
                )
            )
        except ValueError as exc:
            raise ValueError(
                f"Invalid device record '{' '.join(tokens[start : start + LASER_FIELDS])}' "
                f"in {path}."
            ) from exc

    logger.info("Loaded %d devices from %s", len(devices), path)
    return devices
