"""Tests for seeding configuration and the .env loader."""
import logging
import os

from seedgen.config import SeedingConfig, configure_logging, load_config, read_dotenv_settings


class TestSeedingConfig:
    def test_defaults(self):
        config = SeedingConfig.from_env()
        assert config == SeedingConfig()
        assert config.seed_method == "nodes"
        assert config.encoding == "utf-8"
        assert config.prescan_files is False
        assert config.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SEEDGEN_SEED_METHOD", " file(seeds.txt) ")
        monkeypatch.setenv("SEEDGEN_SEED_ENCODING", "latin-1")
        monkeypatch.setenv("SEEDGEN_PRESCAN_SEED_FILES", "Yes")
        monkeypatch.setenv("SEEDGEN_LOG_LEVEL", "debug")
        config = SeedingConfig.from_env()
        assert config.seed_method == "file(seeds.txt)"
        assert config.encoding == "latin-1"
        assert config.prescan_files is True
        assert config.log_level == "DEBUG"

    def test_prescan_flag_false_values(self, monkeypatch):
        monkeypatch.setenv("SEEDGEN_PRESCAN_SEED_FILES", "0")
        assert SeedingConfig.from_env().prescan_files is False


class TestLoadConfig:
    def test_reads_dotenv(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "# seeding\nSEEDGEN_SEED_METHOD='edges'\nexport SEEDGEN_PRESCAN_SEED_FILES=1\n",
            encoding="utf-8",
        )
        config = load_config(str(env_file))
        assert config.seed_method == "edges"
        assert config.prescan_files is True

    def test_environment_wins_over_dotenv(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("SEEDGEN_SEED_METHOD=edges\n", encoding="utf-8")
        monkeypatch.setenv("SEEDGEN_SEED_METHOD", "unused_nodes")
        assert load_config(str(env_file)).seed_method == "unused_nodes"

    def test_missing_dotenv_is_ignored(self, tmp_path):
        assert load_config(str(tmp_path / "missing.env")) == SeedingConfig()


class TestReadDotenvSettings:
    def test_only_seedgen_keys(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            '# local settings\nOPENAI_API_KEY=secret\nSEEDGEN_LOG_LEVEL="INFO"\n'
            "not a pair\n=orphan\nexport SEEDGEN_SEED_ENCODING = latin-1\n",
            encoding="utf-8",
        )
        assert read_dotenv_settings(env_file) == {
            "SEEDGEN_LOG_LEVEL": "INFO",
            "SEEDGEN_SEED_ENCODING": "latin-1",
        }

    def test_does_not_touch_environment(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("SEEDGEN_SEED_METHOD=edges\n", encoding="utf-8")
        read_dotenv_settings(env_file)
        assert "SEEDGEN_SEED_METHOD" not in os.environ

    def test_missing_file(self, tmp_path):
        assert read_dotenv_settings(tmp_path / "nothing") == {}


class TestLoadConfigLogging:
    def test_logs_settings_taken_from_file(self, tmp_path, monkeypatch, caplog):
        env_file = tmp_path / ".env"
        env_file.write_text("SEEDGEN_SEED_METHOD=edges\nSEEDGEN_LOG_LEVEL=INFO\n", encoding="utf-8")
        monkeypatch.setenv("SEEDGEN_LOG_LEVEL", "ERROR")
        with caplog.at_level(logging.INFO, logger="seedgen.config"):
            config = load_config(str(env_file))
        assert config.seed_method == "edges"
        assert config.log_level == "ERROR"
        assert "SEEDGEN_SEED_METHOD" in caplog.text
        assert "SEEDGEN_LOG_LEVEL" not in caplog.text


class TestConfigureLogging:
    def test_unknown_level_falls_back(self, monkeypatch, caplog):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
        with caplog.at_level(logging.WARNING, logger="seedgen.config"):
            configure_logging(SeedingConfig(log_level="LOUD"))
        assert calls["level"] == logging.WARNING
        assert "LOUD" in caplog.text

    def test_level_from_config(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
        configure_logging(SeedingConfig(log_level="DEBUG"))
        assert calls["level"] == logging.DEBUG
