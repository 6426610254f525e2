"""Unit tests for Config and VersionConfig (springgen.config).

Tests cover:
- Defaults
- save/load round trip
- from_env overrides
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from springgen.config import Config, VersionConfig


pytestmark = pytest.mark.unit


class TestVersionConfig:
    def test_defaults(self):
        versions = VersionConfig()
        assert versions.spring_boot == "3.2.5"
        assert versions.java == "17"
        assert versions.dependency_management == "1.1.4"
        assert versions.springdoc == "2.3.0"
        assert versions.mysql_connector == "8.0.33"


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.output_dir == Path(".")
        assert config.overwrite is False
        assert config.api_server_url == "http://localhost:8080"
        assert isinstance(config.versions, VersionConfig)

    def test_save_and_load(self, tmp_path: Path):
        config = Config(output_dir=tmp_path / "out", overwrite=True)
        config.versions.java = "21"
        saved = config.save(tmp_path / "nested" / "springgen.json")
        assert saved.exists()

        loaded = Config.load(saved)
        assert loaded.output_dir == tmp_path / "out"
        assert loaded.overwrite is True
        assert loaded.versions.java == "21"

    def test_from_env_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()
        assert config.output_dir == Path(".")
        assert config.overwrite is False

    def test_from_env_overrides(self, tmp_path: Path):
        env = {
            "SPRINGGEN_OUTPUT_DIR": str(tmp_path),
            "SPRINGGEN_OVERWRITE": "yes",
            "SPRINGGEN_API_SERVER_URL": "https://api.example.com",
            "SPRINGGEN_SPRING_BOOT_VERSION": "3.3.0",
            "SPRINGGEN_JAVA_VERSION": "21",
            "SPRINGGEN_SPRINGDOC_VERSION": "2.5.0",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.output_dir == tmp_path
        assert config.overwrite is True
        assert config.api_server_url == "https://api.example.com"
        assert config.versions.spring_boot == "3.3.0"
        assert config.versions.java == "21"
        assert config.versions.springdoc == "2.5.0"

    @pytest.mark.parametrize("value", ["0", "false", "no", ""])
    def test_overwrite_falsy_values(self, value):
        with patch.dict(os.environ, {"SPRINGGEN_OVERWRITE": value}, clear=True):
            assert Config.from_env().overwrite is False
