"""Device processor module writing one report per device."""

import logging

from ..data.diagnostics import validate_results
from ..data.paths import get_report_path
from ..data.store import ReportWriter

logger = logging.getLogger(__name__)


class DeviceProcessor:
    """Runs the saturation sweep of every input power for a device."""

    def __init__(self, sweep, base_dir=None, clock=None):
        """Initialize device processor.

        Parameters
        ----------
        sweep : object
            Saturation sweep computing 16 results per input power.
        base_dir : str or Path, optional
            Base directory for relative report paths.
        clock : callable, optional
            Timestamp source for the report header and footer.

        """
        self.sweep = sweep
        self.base_dir = base_dir
        self.clock = clock

    def process(self, device, input_powers):
        """
        Compute and write the report of one device.

        Parameters
        ----------
        device : DeviceConfig
            Device parameters and report destination.
        input_powers : sequence of integers
            Input powers, in report order.

        Returns
        -------
        count : integer
            Number of input powers processed.

        """
        report_path = get_report_path(device.output_path, self.base_dir)
        count = 0

        with ReportWriter(report_path, clock=self.clock) as report:
            report.write_header(device)
            for input_power in input_powers:
                results = self.sweep.run(input_power, device.small_signal_gain)
                validate_results(results, device)
                report.write_results(results)
                count += 1
            report.write_footer()

        logger.info("Device %s done: %d input powers", device.output_path, count)
        return count

    __call__ = process
