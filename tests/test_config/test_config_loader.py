"""Tests for ConfigLoader and configuration models."""

import pytest
from pydantic import ValidationError

from bosh_topology.config.loader import ConfigLoader
from bosh_topology.config.models import CollectorSystemConfig


def write_config(tmp_path, content):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(content)
    return str(config_file)


def test_load_minimal_config(tmp_path):
    config = ConfigLoader.load_from_file(write_config(tmp_path, """
director:
  inventory_path: inventory.yaml
"""))

    assert config.director.inventory_path == "inventory.yaml"
    assert config.filters.deployments == []
    assert config.logging.level == "INFO"


def test_env_var_substitution(tmp_path, monkeypatch):
    monkeypatch.setenv("INVENTORY_PATH", "/var/bosh/inventory.yaml")
    monkeypatch.setenv("DEPLOYMENT", "cf")
    monkeypatch.delenv("UNSET_DEPLOYMENT", raising=False)

    config = ConfigLoader.load_from_file(write_config(tmp_path, """
director:
  inventory_path: ${INVENTORY_PATH}
filters:
  deployments: ["${DEPLOYMENT}", "${UNSET_DEPLOYMENT}"]
logging:
  level: debug
"""))

    assert config.director.inventory_path == "/var/bosh/inventory.yaml"
    assert config.filters.deployments == ["cf"]
    assert config.logging.level == "DEBUG"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader.load_from_file(str(tmp_path / "missing.yaml"))


def test_missing_director_section(tmp_path):
    with pytest.raises(ValidationError):
        ConfigLoader.load_from_file(write_config(tmp_path, "filters: {}\n"))


def test_invalid_log_level():
    with pytest.raises(ValidationError, match="Log level"):
        CollectorSystemConfig(director={"inventory_path": "x"}, logging={"level": "LOUD"})
