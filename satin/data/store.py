"""Device report saving module."""

import logging
from datetime import datetime
from pathlib import Path

import numpy as np

logger = logging.getLogger(__name__)

HEADER_TEMPLATE = (
    "Start date: {date}\n"
    "\n"
    "Gaussian Beam\n"
    "\n"
    "Pressure in Main Discharge = {pressure:d}kPa\n"
    "Small-signal Gain = {gain:4.1f}\n"
    "CO2 via {label}\n"
    "\n"
    "Pin\t\tPout\t\tSat. Int\tln(Pout/Pin)\tPout-Pin\n"
    "(watts)\t\t(watts)\t\t(watts/cm2)\t\t\t(watts)\n"
)
ROW_TEMPLATE = "{pin:d}\t\t{pout:7.3f}\t\t{sat:d}\t\t{log_gain:5.3f}\t\t{diff:7.3f}\n"
FOOTER_TEMPLATE = "\nEnd date: {date}\n"


def _now():
    return datetime.now().astimezone()


def format_timestamp(moment):
    """Timestamp format used in the report header and footer."""
    return moment.strftime("%Y-%m-%d %H:%M:%S %z")


def format_row(result):
    """
    Format one report line.

    Non-finite values coming from degenerate input powers
    are written as they are.
    """
    pin = result.input_power
    pout = np.float64(result.output_power)
    with np.errstate(divide="ignore", invalid="ignore"):
        log_gain = np.log(pout / np.float64(pin))
    return ROW_TEMPLATE.format(
        pin=pin,
        pout=pout,
        sat=result.saturation_intensity,
        log_gain=log_gain,
        diff=pout - pin,
    )


class ReportWriter:
    """Handles the text report of one device."""

    def __init__(self, report_path, clock=None):
        """Initialize report writer.

        Parameters
        ----------
        report_path : str or Path
            Report destination. A file already there is replaced.
        clock : callable, optional
            Returns the datetime stamped in the header and footer.
            Local time is used when not given.

        """
        self.report_path = Path(report_path)
        self.clock = clock or _now
        self._file = None

    def __enter__(self):
        self.report_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.report_path, "w", encoding="utf-8")
        return self

    def __exit__(self, exc_type, exc, tb):
        self._file.close()
        self._file = None

    def write_header(self, device):
        """Write start date and device parameters."""
        self._file.write(
            HEADER_TEMPLATE.format(
                date=format_timestamp(self.clock()),
                pressure=device.discharge_pressure,
                gain=device.small_signal_gain,
                label=device.gain_medium_label,
            )
        )

    def write_results(self, results):
        """Write one line per result, keeping their order."""
        self._file.writelines(format_row(result) for result in results)

    def write_footer(self):
        """Write end date."""
        self._file.write(FOOTER_TEMPLATE.format(date=format_timestamp(self.clock())))
        logger.info("Report saved to %s", self.report_path)
