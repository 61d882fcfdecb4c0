"""Module for the directories used by the data subpackage."""

import os
from pathlib import Path

DEFAULT_BASE_DIR = Path(".")
BASE_DIR_ENV = "SATIN_BASE_DIR"


def _resolve_base_dir(base_path=None) -> Path:
    """Resolve base directory from explicit path or environment."""
    if base_path is not None:
        return Path(base_path)
    return Path(os.environ.get(BASE_DIR_ENV, str(DEFAULT_BASE_DIR)))


def get_base_dir(base_path=None) -> Path:
    """Get user base directory for the device reports."""
    return _resolve_base_dir(base_path)


def get_report_path(output_path, base_path=None) -> Path:
    """
    Resolve the report destination of a device.

    Absolute paths are kept untouched, relative ones are
    placed under the base directory.
    """
    report_path = Path(output_path)
    if report_path.is_absolute():
        return report_path
    return _resolve_base_dir(base_path) / report_path


__all__ = [
    "DEFAULT_BASE_DIR",
    "BASE_DIR_ENV",
    "get_base_dir",
    "get_report_path",
]
