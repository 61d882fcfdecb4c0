"""Run coordinator module for the fan-out over devices."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed

from tqdm import tqdm

from ..types import RunOutcome

logger = logging.getLogger(__name__)


class RunCoordinator:
    """Dispatches the device processor over every device of a run."""

    def __init__(self, processor, concurrent=True, max_workers=None, progress=False):
        """Initialize run coordinator.

        Parameters
        ----------
        processor : callable
            Called as processor(device, input_powers), returns the
            number of input powers processed.
        concurrent : bool, default: True
            Whether each device runs as its own unit of work.
        max_workers : integer, optional
            Cap on the threads of the device pool. One thread per
            device when not given.
        progress : bool, default: False
            Whether to show a progress bar over devices.

        """
        self.processor = processor
        self.concurrent = concurrent
        self.max_workers = max_workers
        self.progress = progress

    def run(self, devices, input_powers):
        """
        Process every device and check the run completeness.

        Returns
        -------
        outcome : RunOutcome
            Truthy iff every device processed every input power.

        Raises
        ------
        OSError
            When a device fails to write its report. Units already
            running are not cancelled, the error is raised once the
            device pool has shut down.

        """
        devices = list(devices)
        input_powers = tuple(input_powers)
        expected = len(devices) * len(input_powers)

        logger.info(
            "Running %d devices x %d input powers (%s)",
            len(devices),
            len(input_powers),
            "concurrent" if self.concurrent else "sequential",
        )

        with tqdm(total=len(devices), desc="Devices", disable=not self.progress) as pbar:
            if self.concurrent and devices:
                completed = self._run_concurrent(devices, input_powers, pbar)
            else:
                completed = self._run_sequential(devices, input_powers, pbar)

        outcome = RunOutcome(completed=completed, expected=expected)
        if not outcome:
            logger.warning(
                "Run incomplete: %d of %d units processed", completed, expected
            )
        return outcome

    def _run_sequential(self, devices, input_powers, pbar):
        completed = 0
        for device in devices:
            completed += self.processor(device, input_powers)
            pbar.update(1)
        return completed

    def _run_concurrent(self, devices, input_powers, pbar):
        completed = 0
        max_workers = self.max_workers or len(devices)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [
                executor.submit(self.processor, device, input_powers)
                for device in devices
            ]
            # One count per device, in completion order
            for future in as_completed(futures):
                completed += future.result()
                pbar.update(1)
        return completed
