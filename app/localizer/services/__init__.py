"""Application-scoped providers."""

from localizer.services.providers import get_localization_service, get_settings

__all__ = ["get_settings", "get_localization_service"]
