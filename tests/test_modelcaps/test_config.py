"""Tests for ModelcapsConfig."""
from __future__ import annotations

import dataclasses

import pytest

from modelcaps.config import CLOUD_API_HOST, ModelcapsConfig
from modelcaps.errors import ConfigurationError


class TestModelcapsConfig:
    def test_defaults(self) -> None:
        config = ModelcapsConfig()
        assert config.api_host == CLOUD_API_HOST
        assert config.timeout == 30.0

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            ModelcapsConfig().timeout = 1.0  # type: ignore[misc]

    def test_from_env_empty(self) -> None:
        assert ModelcapsConfig.from_env({}) == ModelcapsConfig()

    def test_from_env_values(self) -> None:
        config = ModelcapsConfig.from_env(
            {"MODELCAPS_API_HOST": "https://api.example.com/", "MODELCAPS_TIMEOUT": "5"}
        )
        assert config.api_host == "https://api.example.com"
        assert config.timeout == 5.0

    def test_from_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MODELCAPS_API_HOST", "http://localhost:8099")
        monkeypatch.delenv("MODELCAPS_TIMEOUT", raising=False)
        assert ModelcapsConfig.from_env().api_host == "http://localhost:8099"

    def test_bad_host(self) -> None:
        with pytest.raises(ConfigurationError):
            ModelcapsConfig.from_env({"MODELCAPS_API_HOST": "api.example.com"})

    @pytest.mark.parametrize("value", ["soon", "0", "-1"])
    def test_bad_timeout(self, value: str) -> None:
        with pytest.raises(ConfigurationError):
            ModelcapsConfig.from_env({"MODELCAPS_TIMEOUT": value})
