"""
Unit tests for backend/core/engine_config.py
"""

import dataclasses

import pytest

from api.deps import get_engine_config
from backend.core.engine_config import (
    DEFAULT_ENGINE_CONFIG,
    AdaptiveEngineConfig,
    engine_config_from_settings,
    resolve_config,
)
from backend.settings import Settings
from domain.models import BASE_TIME_CONSTANTS, EQUIPMENT_PREFERENCES


@pytest.mark.unit
class TestEngineConfig:
    """Immutable engine tunables."""

    def test_defaults(self):
        config = AdaptiveEngineConfig()
        assert config.baseline_volume_load == 1000
        assert config.min_load_ratio == 0.5
        assert config.minutes_per_exercise == 8
        assert config.min_session_exercises == 3
        assert config.base_time_constants is BASE_TIME_CONSTANTS
        assert config.equipment_preferences is EQUIPMENT_PREFERENCES

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_ENGINE_CONFIG.minutes_per_exercise = 5

    def test_from_settings(self):
        settings = Settings(
            minutes_per_exercise=10,
            max_alternatives=2,
            distinguish_duration_failures=True,
            _env_file=None,
        )
        config = engine_config_from_settings(settings)
        assert config.minutes_per_exercise == 10
        assert config.max_alternatives == 2
        assert config.distinguish_duration_failures is True

    def test_resolve_config(self):
        custom = AdaptiveEngineConfig(minutes_per_exercise=5)
        assert resolve_config(None) is DEFAULT_ENGINE_CONFIG
        assert resolve_config(custom) is custom

    def test_provider_builds_from_injected_settings(self):
        settings = Settings(
            environment="test",
            minutes_per_exercise=12,
            distinguish_duration_failures=True,
            _env_file=None,
        )

        config = get_engine_config(settings)

        assert config.minutes_per_exercise == 12
        assert config.distinguish_duration_failures is True
        assert config.equipment_preferences is EQUIPMENT_PREFERENCES
