"""Localization service for dependency injection.

Provides a class-based interface to the string resource system for easier
DI and testing.
"""

from typing import Any, Optional

from localizer.resources.factory import create_localizer
from localizer.resources.loader import StringResourceLoader
from localizer.resources.models import LocaleLike, ResolutionPolicy, ResolveOptions
from localizer.resources.resolver import Localizer


class LocalizationService:
    """Class-based localization service.

    Thin facade over a Localizer so callers hold an explicit, mockable
    reference instead of reaching for shared state.

    Usage:
        service = LocalizationService()
        title = service.get_string("signup.title", locale="fr-FR")

        # Injected into a consumer
        class SignupPage:
            def __init__(self, localization: LocalizationService):
                self.localization = localization
    """

    def __init__(self, localizer: Optional[Localizer] = None):
        """Initialize localization service.

        Args:
            localizer: Optional pre-configured Localizer instance.
                       If not provided, creates default via factory.
        """
        self._localizer = localizer or create_localizer()

    def resolve(self, key: str, options: Optional[ResolveOptions] = None) -> str:
        """Resolve a key to a string.

        Raises:
            ResourceNotFound: If missing and the policy throws.
        """
        return self._localizer.resolve(key, options)

    def get_string(
        self,
        key: str,
        requester: Any = None,
        context: Any = None,
        locale: LocaleLike = None,
        style: Optional[str] = None,
        default: Optional[str] = None,
    ) -> str:
        return self._localizer.get_string(
            key,
            requester=requester,
            context=context,
            locale=locale,
            style=style,
            default=default,
        )

    def add_loader(self, loader: StringResourceLoader) -> None:
        """Register a loader at the lowest priority."""
        self._localizer.config.loaders.add(loader)

    def set_policy(self, policy: ResolutionPolicy) -> None:
        """Replace the missing resource policy for subsequent calls."""
        self._localizer.config.policy = policy

    @property
    def localizer(self) -> Localizer:
        """Access underlying Localizer instance."""
        return self._localizer
