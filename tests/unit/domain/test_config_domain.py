from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies defaults and the environment layer without touching os.environ.
"""

from batchjson.domain.config import get_default_config, load_config
from batchjson.domain.constants import INPUT_DIR_ENV_VAR


def test_defaults_have_no_input_directory():
    cfg = get_default_config()

    assert cfg["input_path"] == ""
    assert cfg["extensions"] == [".json"]
    assert cfg["fail_fast"] is False


def test_load_config_reads_input_dir_from_environment():
    cfg = load_config({INPUT_DIR_ENV_VAR: "  /srv/exports  "})

    assert cfg["input_path"] == "/srv/exports"


def test_load_config_ignores_blank_environment_value():
    cfg = load_config({INPUT_DIR_ENV_VAR: "   "})

    assert cfg["input_path"] == ""


def test_load_config_defaults_to_os_environ(monkeypatch):
    monkeypatch.setenv(INPUT_DIR_ENV_VAR, "/from/env")

    assert load_config()["input_path"] == "/from/env"
