"""Localizer configuration module - public API.

Exports:
    settings: Module-level Settings instance
    Settings: Main settings class (for testing/overrides)
    ResolutionSettings: Missing resource policy and catalog location

Example:
    ```python
    from localizer.services import get_settings

    settings = get_settings()
    throw = settings.resolution.throw_on_missing
    ```
"""

from localizer.configuration.resolution import ResolutionSettings
from localizer.configuration.settings import Settings, settings

__all__ = ["Settings", "ResolutionSettings", "settings"]
