"""Entry point for running the package with 'python -m satin'."""

import argparse
import logging
import sys
import time

from ._version import __version__
from .config import ConfigOptions
from .main import calculate

logger = logging.getLogger("satin")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="python -m satin",
        description="Gaussian-beam CO2 amplifier output power over a saturation intensity sweep",
    )
    parser.add_argument(
        "--concurrent", action=argparse.BooleanOptionalAction, default=True,
        help="Run every device as its own unit of work (default: on)",
    )
    parser.add_argument(
        "--sweep-concurrent", action=argparse.BooleanOptionalAction, default=None,
        help="Run every saturation intensity as its own unit of work (default: same as --concurrent)",
    )
    parser.add_argument(
        "--input-powers", default="pin.dat",
        help="Input-power records file (default: pin.dat)",
    )
    parser.add_argument(
        "--laser-data", default="laser.dat",
        help="Device records file (default: laser.dat)",
    )
    parser.add_argument(
        "--output-dir", default=None,
        help="Base directory for relative report paths (default: $SATIN_BASE_DIR or .)",
    )
    parser.add_argument(
        "--profile-division", choices=("true", "truncate"), default="true",
        help="Division of the axial offset in the correction profile (default: true)",
    )
    parser.add_argument(
        "--max-workers", type=int, default=None,
        help="Cap on the threads of each worker pool",
    )
    parser.add_argument(
        "--progress", action=argparse.BooleanOptionalAction, default=True,
        help="Show a progress bar over devices (default: on)",
    )
    parser.add_argument(
        "--log-level", default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level (default: INFO)",
    )
    return parser


def main(argv=None):
    """Main function."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print(f"Running SATIN v{__version__} for Python")

    try:
        config = ConfigOptions.build(
            execution={
                "concurrent_devices": args.concurrent,
                "concurrent_sweep": args.sweep_concurrent,
                "max_workers": args.max_workers,
                "progress": args.progress,
            },
            profile={"division": args.profile_division},
            inputs={
                "input_powers": args.input_powers,
                "laser_data": args.laser_data,
                "output_dir": args.output_dir,
            },
        )

        start = time.perf_counter()
        outcome = calculate(config)
        end = time.perf_counter()
    except (OSError, ValueError) as exc:
        logger.error("Fatal error: %s", exc)
        return 1

    print(f"The time was {end - start:.3f} s.")

    if not outcome:
        logger.error(
            "Run failed to complete: %d of %d units processed",
            outcome.completed,
            outcome.expected,
        )
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
