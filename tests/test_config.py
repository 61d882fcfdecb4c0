"""Configuration and command line tests."""

from pathlib import Path

import pytest

from satin.__main__ import build_parser, main
from satin.config import ConfigOptions, ExecutionConfig, ProfileConfig
from satin.data.paths import BASE_DIR_ENV


class TestConfigOptions:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv(BASE_DIR_ENV, raising=False)
        config = ConfigOptions.build()
        assert config.execution.concurrent_devices is True
        assert config.execution.concurrent_sweep is True
        assert config.profile.division == "true"
        assert config.inputs.input_powers == Path("pin.dat")
        assert config.inputs.laser_data == Path("laser.dat")
        assert config.inputs.output_dir == Path(".")

    def test_sweep_follows_devices(self):
        assert ExecutionConfig(concurrent_devices=False).concurrent_sweep is False
        assert ExecutionConfig(concurrent_devices=False, concurrent_sweep=True).concurrent_sweep is True

    def test_keys_are_case_insensitive(self):
        config = ConfigOptions.build(
            execution={"CONCURRENT_DEVICES": False},
            profile={"Division": "TRUNCATE"},
        )
        assert config.execution.concurrent_devices is False
        assert config.profile.division == "truncate"

    def test_invalid_division(self):
        with pytest.raises(ValueError, match="Invalid profile division"):
            ConfigOptions.build(profile={"division": "floor"})

    @pytest.mark.parametrize("division", [None, 1, ["true"]])
    def test_non_string_division(self, division):
        with pytest.raises(ValueError, match="Invalid profile division"):
            ConfigOptions.build(profile={"division": division})

    def test_profile_config_validates_directly(self):
        assert ProfileConfig(division="Truncate").division == "truncate"
        with pytest.raises(ValueError, match="Available modes are: true, truncate"):
            ProfileConfig(division="floor")

    def test_unknown_option(self):
        with pytest.raises(ValueError, match="Invalid execution options"):
            ConfigOptions.build(execution={"threads": 4})

    def test_invalid_max_workers(self):
        with pytest.raises(ValueError, match="workers"):
            ConfigOptions.build(execution={"max_workers": 0})

    def test_output_dir_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv(BASE_DIR_ENV, str(tmp_path))
        assert ConfigOptions.build().inputs.output_dir == tmp_path


class TestCommandLine:

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.concurrent is True
        assert args.sweep_concurrent is None
        assert args.profile_division == "true"

    def test_parser_flags(self):
        args = build_parser().parse_args(["--no-concurrent", "--sweep-concurrent"])
        assert args.concurrent is False
        assert args.sweep_concurrent is True

    def test_run(self, tmp_path, capsys):
        (tmp_path / "pin.dat").write_text("100\n200\n")
        (tmp_path / "laser.dat").write_text("p150.dat 20.0 150 CO2/N2/He\n")
        status = main([
            "--input-powers", str(tmp_path / "pin.dat"),
            "--laser-data", str(tmp_path / "laser.dat"),
            "--output-dir", str(tmp_path / "out"),
            "--no-progress",
        ])
        assert status == 0
        report = (tmp_path / "out" / "p150.dat").read_text()
        assert report.startswith("Start date: ")
        assert "End date: " in report
        out = capsys.readouterr().out
        assert "Running SATIN" in out
        assert "The time was" in out

    def test_missing_input_file(self, tmp_path):
        status = main([
            "--input-powers", str(tmp_path / "missing.dat"),
            "--laser-data", str(tmp_path / "laser.dat"),
            "--no-progress",
        ])
        assert status == 1

    def test_malformed_records(self, tmp_path):
        (tmp_path / "pin.dat").write_text("100\n")
        (tmp_path / "laser.dat").write_text("p150.dat 20.0\n")
        status = main([
            "--input-powers", str(tmp_path / "pin.dat"),
            "--laser-data", str(tmp_path / "laser.dat"),
            "--no-progress",
        ])
        assert status == 1
