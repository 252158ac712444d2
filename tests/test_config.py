"""Tests for configuration loading."""

from pathlib import Path

import tomllib

from config import Config, load_config


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_writes_defaults(self, tmp_path):
        config_path = tmp_path / "config" / "tally.toml"

        config = load_config(config_path)

        assert config == Config.default()
        assert config_path.exists()
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        assert data["logging"]["level"] == "INFO"
        assert data["logging"]["console_level"] == "WARNING"

    def test_reads_values(self, tmp_path):
        config_path = tmp_path / "tally.toml"
        config_path.write_text(
            f'base_dir = "{tmp_path / "data"}"\n'
            "[logging]\n"
            'level = "debug"\n'
            'console_level = "error"\n'
            f'log_dir = "{tmp_path / "elsewhere"}"\n'
        )

        config = load_config(config_path)

        assert config.base_dir == tmp_path / "data"
        assert config.log_level == "DEBUG"
        assert config.console_log_level == "ERROR"
        assert config.log_dir == tmp_path / "elsewhere"

    def test_missing_keys_use_defaults(self, tmp_path):
        config_path = tmp_path / "tally.toml"
        config_path.write_text(f'base_dir = "{tmp_path}"\n')

        config = load_config(config_path)

        assert config.log_level == "INFO"
        assert config.console_log_level == "WARNING"
        assert config.log_dir == Path(tmp_path) / "logs"
