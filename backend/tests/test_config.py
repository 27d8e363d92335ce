"""Tests for configuration management."""
import pytest


def test_settings_has_default_values(monkeypatch: pytest.MonkeyPatch) -> None:
    """Settings should provide sensible defaults for optional fields."""
    monkeypatch.delenv("COLOR_TOLERANCE", raising=False)
    monkeypatch.delenv("DEFAULT_TRANSFER_STRENGTH", raising=False)

    from style_engine.core.config import Settings
    settings = Settings(_env_file=None)

    assert settings.app_name == "style-consistency-engine"
    assert settings.color_tolerance == 20
    assert settings.default_transfer_strength == 75
    assert settings.backend_port == 8000
    assert settings.frontend_port == 3000
    assert settings.backend_host == "localhost"


def test_settings_loads_env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    """Engine defaults can be overridden from the environment."""
    monkeypatch.setenv("COLOR_TOLERANCE", "35")
    monkeypatch.setenv("DEFAULT_TRANSFER_STRENGTH", "100")

    from style_engine.core.config import Settings
    settings = Settings(_env_file=None)

    assert settings.color_tolerance == 35
    assert settings.default_transfer_strength == 100


def test_settings_rejects_out_of_range_values(monkeypatch: pytest.MonkeyPatch) -> None:
    """Percent settings must stay within 0-100."""
    monkeypatch.setenv("COLOR_TOLERANCE", "150")

    from pydantic import ValidationError
    from style_engine.core.config import Settings

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached() -> None:
    from style_engine.core.config import get_settings
    assert get_settings() is get_settings()
