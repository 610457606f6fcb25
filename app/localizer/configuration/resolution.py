"""String resource resolution settings."""

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from pydantic import Field

from localizer.configuration.base import LocalizerBaseSettings

if TYPE_CHECKING:
    from localizer.resources.models import ResolutionPolicy


class ResolutionSettings(LocalizerBaseSettings):
    """Configuration for string resource resolution.

    Environment Variables:
        LOCALIZER_USE_DEFAULT_ON_MISSING: Return the caller's default value
            when no loader finds the key (default: True)
        LOCALIZER_THROW_ON_MISSING: Raise ResourceNotFound when no loader finds
            the key and no default applies (default: True)
        LOCALIZER_RESOURCES_DIR: Directory with YAML string catalogs
        LOCALIZER_USE_CACHE: Keep parsed catalogs in memory (default: True)
        LOCALIZER_STRICT_INTERPOLATION: Fail on placeholders the context
            object cannot resolve (default: True)

    Missing resource handling:
        1. default value, if enabled and the caller supplied one
        2. ResourceNotFound, if throwing is enabled
        3. "[Warning: String resource for '<key>' not found]"

    Example:
        ```python
        from localizer.services import get_settings

        resolution = get_settings().resolution
        if resolution.throw_on_missing:
            ...
        ```
    """

    use_default_on_missing: bool = Field(
        default=True,
        alias="LOCALIZER_USE_DEFAULT_ON_MISSING",
        description="Use the caller supplied default when a resource is missing",
    )
    throw_on_missing: bool = Field(
        default=True,
        alias="LOCALIZER_THROW_ON_MISSING",
        description="Raise ResourceNotFound when a resource is missing",
    )
    resources_dir: Optional[Path] = Field(
        default=None,
        alias="LOCALIZER_RESOURCES_DIR",
        description="Directory containing <bundle>[.<locale>][@<style>].yml files",
    )
    use_cache: bool = Field(
        default=True,
        alias="LOCALIZER_USE_CACHE",
        description="Cache parsed YAML catalogs in memory",
    )
    strict_interpolation: bool = Field(
        default=True,
        alias="LOCALIZER_STRICT_INTERPOLATION",
        description="Raise on placeholders missing from the context object",
    )

    def to_policy(self) -> "ResolutionPolicy":
        """Build the missing resource policy these settings describe."""
        # Imported here: localizer.resources imports this package at load time.
        from localizer.resources.models import ResolutionPolicy

        return ResolutionPolicy(
            use_default_on_missing=self.use_default_on_missing,
            throw_on_missing=self.throw_on_missing,
        )
