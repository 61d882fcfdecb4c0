"""Diagnosing tools module."""

import logging

import numpy as np

logger = logging.getLogger(__name__)


def validate_results(results, device=None):
    """
    Validate numerical results of one saturation sweep.

    Non-finite output powers are reported but kept, the
    report writes them verbatim.

    Parameters
    ----------
    results : list of GaussianResult
        Results of the sweep.
    device : object, optional
        Device the results belong to, used in the message.

    Returns
    -------
    binary : bool
        True if every output power is finite.

    """
    if not results:
        return True

    output_power = np.array([res.output_power for res in results], dtype=np.float64)
    bad = ~np.isfinite(output_power)
    if np.any(bad):
        where = f" for {device.output_path}" if device is not None else ""
        logger.warning(
            "%d non-finite output power values at Pin = %d W%s",
            int(np.count_nonzero(bad)),
            results[0].input_power,
            where,
        )
        return False

    return True
