"""String resource system - locale and style aware string resolution.

Resolves lookup keys through an ordered chain of loaders, interpolates the
first match against a context object and applies the missing resource
policy when nothing matches.

Main components:
- models: Locale, ResourceCatalog, ResolutionPolicy, ResolveOptions, SessionContext
- loader: StringResourceLoader and catalog, YAML, class and requester loaders
- interpolation: Interpolator protocol, VariableInterpolator, NullInterpolator
- chain: LoaderChain and LocalizerConfig
- resolver: Localizer
- service: LocalizationService facade
"""

from localizer.resources.chain import LoaderChain, LocalizerConfig
from localizer.resources.errors import InterpolationError, ResourceNotFound
from localizer.resources.factory import create_localizer
from localizer.resources.interpolation import (
    Interpolator,
    NullInterpolator,
    VariableInterpolator,
)
from localizer.resources.loader import (
    CatalogStringResourceLoader,
    ClassStringResourceLoader,
    RequesterStringResourceLoader,
    StringResourceLoader,
    YAMLStringResourceLoader,
)
from localizer.resources.models import (
    Locale,
    ResolutionPolicy,
    ResolveOptions,
    ResourceCatalog,
    SessionContext,
)
from localizer.resources.resolver import MISSING_RESOURCE_WARNING, Localizer
from localizer.resources.service import LocalizationService
from localizer.resources.session import session_from_requester

__all__ = [
    "Locale",
    "ResourceCatalog",
    "ResolutionPolicy",
    "ResolveOptions",
    "SessionContext",
    "StringResourceLoader",
    "CatalogStringResourceLoader",
    "YAMLStringResourceLoader",
    "ClassStringResourceLoader",
    "RequesterStringResourceLoader",
    "Interpolator",
    "VariableInterpolator",
    "NullInterpolator",
    "LoaderChain",
    "LocalizerConfig",
    "Localizer",
    "MISSING_RESOURCE_WARNING",
    "LocalizationService",
    "ResourceNotFound",
    "InterpolationError",
    "create_localizer",
    "session_from_requester",
]
