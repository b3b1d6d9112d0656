import importlib

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point configuration at an empty file so local settings never leak in."""
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("")
    monkeypatch.setenv("NUMKIT_CONFIG", str(cfg_file))
    monkeypatch.delenv("NUMKIT_DEBUG", raising=False)
    monkeypatch.delenv("NUMKIT_LOG_LEVEL", raising=False)
    config = importlib.import_module("numkit.config")
    config.reload()
    yield cfg_file
    config.reload()
