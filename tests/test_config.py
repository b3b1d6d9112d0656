import importlib

import pytest

from numkit import config


def test_defaults_when_config_file_empty():
    assert config.get("LOG_LEVEL") == "INFO"
    assert config.get("NUMERIC_DELIMITERS") == [","]
    assert config.get("RANGE_OUTPUT_LIMIT") == 1000
    assert config.get("MISSING", "fallback") == "fallback"


def test_yaml_values_override_defaults(isolated_config):
    isolated_config.write_text("LOG_LEVEL: DEBUG\nNUMERIC_DELIMITERS:\n  - ';'\n  - ','\n")
    config.reload()
    assert config.get("LOG_LEVEL") == "DEBUG"
    assert config.get("NUMERIC_DELIMITERS") == [";", ","]


def test_env_file_splits_delimiters(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("# comment\nNUMERIC_DELIMITERS=;, ,\nRANGE_OUTPUT_LIMIT=5\n")
    monkeypatch.setenv("NUMKIT_CONFIG", str(env_file))
    config.reload()
    assert config.get("NUMERIC_DELIMITERS") == [";"]
    assert config.get("RANGE_OUTPUT_LIMIT") == 5


def test_invalid_yaml_falls_back_to_defaults(isolated_config):
    isolated_config.write_text("LOG_LEVEL: [unclosed\n")
    config.reload()
    assert config.get("LOG_LEVEL") == "INFO"


def test_update_persists_to_yaml(isolated_config):
    config.update({"RANGE_OUTPUT_LIMIT": 10, "UNKNOWN": 1})
    assert config.get("RANGE_OUTPUT_LIMIT") == 10
    assert "RANGE_OUTPUT_LIMIT: 10" in isolated_config.read_text()
    assert "UNKNOWN" not in isolated_config.read_text()

    cfg = importlib.reload(config)
    assert cfg.get("RANGE_OUTPUT_LIMIT") == 10


def test_save_config_raises_when_path_not_writable(tmp_path):
    with pytest.raises(OSError):
        config.save_config(config.AppConfig(), tmp_path / "missing" / "config.yaml")
