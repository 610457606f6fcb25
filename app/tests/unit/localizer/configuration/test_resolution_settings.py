"""Unit tests for localizer.configuration module.

Tests cover:
- ResolutionSettings defaults and environment overrides
- Settings aggregation and production detection
"""

from pathlib import Path

from localizer.configuration import ResolutionSettings, Settings
from localizer.resources import ResolutionPolicy


class TestResolutionSettings:
    """Test suite for ResolutionSettings configuration."""

    def test_defaults(self, monkeypatch):
        """ResolutionSettings uses correct default values."""
        for name in (
            "LOCALIZER_USE_DEFAULT_ON_MISSING",
            "LOCALIZER_THROW_ON_MISSING",
            "LOCALIZER_RESOURCES_DIR",
            "LOCALIZER_USE_CACHE",
            "LOCALIZER_STRICT_INTERPOLATION",
        ):
            monkeypatch.delenv(name, raising=False)

        resolution = ResolutionSettings()

        assert resolution.use_default_on_missing is True
        assert resolution.throw_on_missing is True
        assert resolution.resources_dir is None
        assert resolution.use_cache is True
        assert resolution.strict_interpolation is True

    def test_environment_overrides(self, monkeypatch):
        """ResolutionSettings reads LOCALIZER_* variables."""
        monkeypatch.setenv("LOCALIZER_USE_DEFAULT_ON_MISSING", "false")
        monkeypatch.setenv("LOCALIZER_THROW_ON_MISSING", "false")
        monkeypatch.setenv("LOCALIZER_RESOURCES_DIR", "/srv/strings")
        monkeypatch.setenv("LOCALIZER_USE_CACHE", "false")

        resolution = ResolutionSettings()

        assert resolution.use_default_on_missing is False
        assert resolution.throw_on_missing is False
        assert resolution.resources_dir == Path("/srv/strings")
        assert resolution.use_cache is False

    def test_keyword_overrides(self):
        """Fields can be set by alias or by name."""
        by_alias = ResolutionSettings(LOCALIZER_THROW_ON_MISSING=False)
        by_name = ResolutionSettings(throw_on_missing=False)

        assert by_alias.throw_on_missing is False
        assert by_name.throw_on_missing is False

    def test_to_policy(self):
        """to_policy() carries both missing resource flags."""
        policy = ResolutionSettings(
            use_default_on_missing=False, throw_on_missing=False
        ).to_policy()

        assert isinstance(policy, ResolutionPolicy)
        assert policy == ResolutionPolicy(
            use_default_on_missing=False, throw_on_missing=False
        )

    def test_to_policy_defaults(self, monkeypatch):
        """Default settings produce the default policy."""
        monkeypatch.delenv("LOCALIZER_USE_DEFAULT_ON_MISSING", raising=False)
        monkeypatch.delenv("LOCALIZER_THROW_ON_MISSING", raising=False)

        assert ResolutionSettings().to_policy() == ResolutionPolicy()


class TestSettings:
    """Test suite for the aggregated Settings."""

    def test_resolution_section_created(self):
        """Settings instantiates its resolution section."""
        settings = Settings()
        assert isinstance(settings.resolution, ResolutionSettings)

    def test_resolution_section_override(self):
        """An explicit section replaces the default one."""
        resolution = ResolutionSettings(throw_on_missing=False)
        settings = Settings(resolution=resolution)

        assert settings.resolution.throw_on_missing is False

    def test_is_production(self, monkeypatch):
        """Production is detected by an empty PREFIX."""
        monkeypatch.setenv("PREFIX", "")
        assert Settings().is_production is True

        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False
