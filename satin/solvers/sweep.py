"""Saturation intensity sweep module."""

import logging
from concurrent.futures import ThreadPoolExecutor

from ..types import SATURATION_SWEEP

logger = logging.getLogger(__name__)


class SaturationSweep:
    """Fan-out of the beam integrator over the saturation intensities."""

    def __init__(self, integrator, concurrent=True, max_workers=None, sweep=SATURATION_SWEEP):
        """Initialize sweep.

        Parameters
        ----------
        integrator : object
            Beam integrator computing one output power.
        concurrent : bool, default: True
            Whether each saturation intensity runs as its own
            unit of work.
        max_workers : integer, optional
            Cap on the threads of the sweep pool. One thread
            per saturation intensity when not given.
        sweep : tuple of integers
            Ascending saturation intensities.

        """
        self.integrator = integrator
        self.concurrent = concurrent
        self.sweep = tuple(sweep)
        self.max_workers = max_workers or len(self.sweep)

    def run(self, input_power, small_signal_gain):
        """
        Compute the output power of every saturation intensity
        for one input power.

        Returns
        -------
        results : list of GaussianResult
            One result per saturation intensity, in sweep order.

        """
        results = [None] * len(self.sweep)

        def sweep_wrapper(ss):
            """Wrapper for parallel computation of each intensity."""
            return self.integrator.integrate(
                input_power, self.sweep[ss], small_signal_gain
            )

        if self.concurrent:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                outputs = list(executor.map(sweep_wrapper, range(len(self.sweep))))
        else:
            outputs = [sweep_wrapper(ss) for ss in range(len(self.sweep))]

        for ss, result in enumerate(outputs):
            results[ss] = result

        logger.debug(
            "Swept %d saturation intensities for Pin = %d W",
            len(results),
            input_power,
        )
        return results
