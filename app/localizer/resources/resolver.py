"""Localizer - resolves lookup keys into localized, interpolated strings.

Core component of the string resource system: walks the loader chain,
interpolates the first hit and applies the missing resource policy.
"""

from typing import Any, Optional

from localizer.logging import get_module_logger
from localizer.resources.chain import LocalizerConfig
from localizer.resources.errors import ResourceNotFound
from localizer.resources.interpolation import Interpolator, VariableInterpolator
from localizer.resources.models import LocaleLike, ResolveOptions, coerce_locale
from localizer.resources.session import SessionResolver, session_from_requester

logger = get_module_logger()

MISSING_RESOURCE_WARNING = "[Warning: String resource for '{key}' not found]"


class Localizer:
    """Resolves string resources through an ordered loader chain.

    The first loader returning a string wins and later loaders are not
    queried. When no loader matches, the policy decides between the
    caller's default, ResourceNotFound and a warning string, in that order.

    Attributes:
        config: Shared loader chain and resolution policy.
        interpolator: Fills placeholders in found strings.
        session_resolver: Supplies locale/style for a requester.
    """

    def __init__(
        self,
        config: LocalizerConfig,
        interpolator: Optional[Interpolator] = None,
        session_resolver: Optional[SessionResolver] = None,
    ):
        self.config = config
        self.interpolator = interpolator or VariableInterpolator()
        self.session_resolver = session_resolver or session_from_requester

    def resolve(self, key: str, options: Optional[ResolveOptions] = None) -> str:
        """Resolve a key to a string.

        Args:
            key: Lookup key.
            options: Requester, context object, locale, style and default.

        Returns:
            The interpolated string, the default value, or the missing
            resource warning string.

        Raises:
            ResourceNotFound: If nothing matched, no default applies and
                the policy throws on missing resources.
        """
        options = options or ResolveOptions()
        loaders = self.config.loaders.snapshot()
        policy = self.config.policy

        locale = coerce_locale(options.locale)
        style = options.style
        if options.requester is not None and options.inherit_session and (
            locale is None or style is None
        ):
            session = self.session_resolver(options.requester)
            if session is not None:
                locale = locale if locale is not None else session.locale
                style = style if style is not None else session.style

        for loader in loaders:
            string = loader.load(options.requester, key, locale, style)
            if string is not None:
                logger.debug(
                    "resource_found",
                    key=key,
                    loader=loader.name,
                    locale=str(locale) if locale else None,
                    style=style,
                )
                if options.context is None:
                    return string
                return self.interpolator.render(string, options.context)

        if policy.use_default_on_missing and options.default is not None:
            return options.default

        logger.warning(
            "resource_not_found",
            key=key,
            locale=str(locale) if locale else None,
            style=style,
            loader_count=len(loaders),
        )
        if policy.throw_on_missing:
            raise ResourceNotFound(key)
        return MISSING_RESOURCE_WARNING.format(key=key)

    def get_string(
        self,
        key: str,
        requester: Any = None,
        context: Any = None,
        locale: LocaleLike = None,
        style: Optional[str] = None,
        default: Optional[str] = None,
    ) -> str:
        """Resolve a key with keyword arguments instead of ResolveOptions.

        Locale and style left as None are taken from the requester's
        session context.
        """
        return self.resolve(
            key,
            ResolveOptions(
                requester=requester,
                context=context,
                locale=locale,
                style=style,
                default=default,
            ),
        )
