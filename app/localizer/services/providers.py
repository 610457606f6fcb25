"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for the localizer.
"""

from functools import lru_cache

from localizer.configuration import Settings
from localizer.resources.factory import create_localizer
from localizer.resources.service import LocalizationService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_localization_service() -> LocalizationService:
    """
    Get application-scoped localization service singleton.

    Wiring point only: consumers receive the service through their
    constructors rather than calling this provider themselves.

    Returns:
        LocalizationService: Cached service over a Localizer built from settings.
    """
    settings = get_settings()
    return LocalizationService(localizer=create_localizer(settings=settings.resolution))
