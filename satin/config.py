"""SATIN configuration file module."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Type

from .data.paths import get_base_dir

PROFILE_DIVISION_MODES = ("true", "truncate")

@dataclass
class ExecutionConfig:
    concurrent_devices: bool = True
    concurrent_sweep: Optional[bool] = None # follows concurrent_devices
    max_workers: Optional[int] = None
    progress: bool = True

    def __post_init__(self):
        if self.concurrent_sweep is None:
            self.concurrent_sweep = self.concurrent_devices
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(
                f"Invalid number of workers: {self.max_workers}. "
                f"It must be a positive integer."
            )

@dataclass
class ProfileConfig:
    division: str = "true" # "true" | "truncate"

    def __post_init__(self):
        division = self.division.lower() if isinstance(self.division, str) else self.division
        if division not in PROFILE_DIVISION_MODES:
            raise ValueError(
                f"Invalid profile division: '{self.division}'. "
                f"Available modes are: {', '.join(PROFILE_DIVISION_MODES)}"
            )
        self.division = division

@dataclass
class InputConfig:
    input_powers: Path = Path("pin.dat")
    laser_data: Path = Path("laser.dat")
    output_dir: Optional[Path] = None

    def __post_init__(self):
        self.input_powers = Path(self.input_powers)
        self.laser_data = Path(self.laser_data)
        self.output_dir = get_base_dir(self.output_dir)

CONFIG_CLASSES: Dict[str, Type] = {
    "execution": ExecutionConfig,
    "profile": ProfileConfig,
    "input": InputConfig,
}

def _lowercase_dict(d: Dict) -> Dict:
    new_dict = {}
    for k, v in d.items():
        lower_key = k.lower()
        if isinstance(v, dict):
            new_dict[lower_key] = _lowercase_dict(v)
        else:
            new_dict[lower_key] = v
    return new_dict

@dataclass
class ConfigOptions:
    """
    This class gathers the dataclass groups needed for
    starting a run. Every group has defaults, so any of
    them can be left out when building the options.

    The available options are

    Parameters                          Choice
    =============================       ======================================
     concurrent_devices : bool          one worker per device | sequential
     concurrent_sweep : bool            one worker per saturation value | sequential
     max_workers : int                  cap on the threads of each pool
     progress : bool                    show a progress bar over devices
     division : str                     "true" | "truncate"
     input_powers : Path                input-power records file
     laser_data : Path                  device records file
     output_dir : Path                  base for relative report paths
    =============================       ======================================

    """
    execution: ExecutionConfig = field(default_factory=ExecutionConfig)
    profile: ProfileConfig = field(default_factory=ProfileConfig)
    inputs: InputConfig = field(default_factory=InputConfig)

    @staticmethod
    def build(
        execution: Optional[Dict] = None,
        profile: Optional[Dict] = None,
        inputs: Optional[Dict] = None,
    ) -> "ConfigOptions":

        groups = _lowercase_dict({
            "execution": execution or {},
            "profile": profile or {},
            "input": inputs or {},
        })

        built = {}
        for group_name, group_params in groups.items():
            group_class = CONFIG_CLASSES[group_name]
            try:
                built[group_name] = group_class(**group_params)
            except TypeError as exc:
                raise ValueError(f"Invalid {group_name} options: {exc}") from exc

        return ConfigOptions(
            execution=built["execution"],
            profile=built["profile"],
            inputs=built["input"],
        )
