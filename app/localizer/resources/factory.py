"""Factory functions for creating string resource components.

Builds a Localizer with a loader chain, policy and interpolator derived
from ResolutionSettings.
"""

from typing import Optional, Sequence

from localizer.configuration import ResolutionSettings
from localizer.logging import get_module_logger
from localizer.resources.chain import LocalizerConfig
from localizer.resources.interpolation import Interpolator, VariableInterpolator
from localizer.resources.loader import (
    ClassStringResourceLoader,
    RequesterStringResourceLoader,
    StringResourceLoader,
    YAMLStringResourceLoader,
)
from localizer.resources.resolver import Localizer

logger = get_module_logger()


def create_default_loaders(settings: ResolutionSettings) -> list[StringResourceLoader]:
    """Build the default loader chain for the given settings.

    Order:
        1. Requester-scoped keys from the YAML catalogs
        2. Bundles embedded in the requester's class
        3. Unscoped keys from the YAML catalogs

    Without a resources directory only the class loader is registered.

    Raises:
        ValueError: If resources_dir is set but does not exist.
    """
    if settings.resources_dir is None:
        return [ClassStringResourceLoader()]

    yaml_loader = YAMLStringResourceLoader(
        resources_dir=settings.resources_dir,
        use_cache=settings.use_cache,
    )
    return [
        RequesterStringResourceLoader(yaml_loader),
        ClassStringResourceLoader(),
        yaml_loader,
    ]


def create_localizer(
    settings: Optional[ResolutionSettings] = None,
    loaders: Optional[Sequence[StringResourceLoader]] = None,
    interpolator: Optional[Interpolator] = None,
) -> Localizer:
    """Create and configure a Localizer instance.

    Args:
        settings: Resolution settings (default: read from environment).
        loaders: Explicit loader chain (default: create_default_loaders()).
        interpolator: Placeholder engine (default: VariableInterpolator with
            settings.strict_interpolation).

    Returns:
        Localizer: Configured localizer instance

    Usage:
        localizer = create_localizer()

        localizer = create_localizer(loaders=[CatalogStringResourceLoader(catalogs)])
    """
    settings = settings or ResolutionSettings()
    if loaders is None:
        loaders = create_default_loaders(settings)

    config = LocalizerConfig(
        loaders=loaders,
        policy=settings.to_policy(),
    )
    interpolator = interpolator or VariableInterpolator(
        strict=settings.strict_interpolation
    )

    logger.info(
        "localizer_created",
        loader_count=len(config.loaders),
        resources_dir=str(settings.resources_dir) if settings.resources_dir else None,
        use_default_on_missing=settings.use_default_on_missing,
        throw_on_missing=settings.throw_on_missing,
    )
    return Localizer(config=config, interpolator=interpolator)
