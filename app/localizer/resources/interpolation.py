"""Placeholder interpolation for resolved strings.

The resolver only depends on the Interpolator protocol; any templating
approach can be plugged in behind render().
"""

import re
from collections.abc import Mapping
from typing import Any, List, Protocol, runtime_checkable

from localizer.logging import get_module_logger
from localizer.resources.errors import InterpolationError

logger = get_module_logger()

# {{ user.name }} or {user.name}
_PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([\w.]+)\s*\}\}|\{([\w.]+)\}")

_MISSING = object()


@runtime_checkable
class Interpolator(Protocol):
    """Fills placeholders in a template from a context object."""

    def render(self, template: str, context: Any) -> str:
        """Return template with placeholders replaced.

        A None context returns the template unchanged.
        """
        ...


class NullInterpolator:
    """Returns templates verbatim."""

    def render(self, template: str, context: Any) -> str:
        return template


class VariableInterpolator:
    """Interpolates {{name}} and {name} placeholders.

    Names may be dotted paths (``{user.name}``). Each segment is looked up
    by item access on mappings and attribute access otherwise.

    Attributes:
        strict: Raise InterpolationError for placeholders the context cannot
            resolve. When False they are left in place.
    """

    def __init__(self, strict: bool = True):
        self.strict = strict

    def render(self, template: str, context: Any) -> str:
        """Perform variable interpolation in a template.

        Args:
            template: String with {{variable}} or {variable} placeholders.
            context: Mapping or object the variables are read from.

        Returns:
            Template with variables interpolated.

        Raises:
            InterpolationError: If strict and a variable is not found.
        """
        if context is None:
            return template

        # Validate every placeholder before substituting anything
        values = {}
        for match in _PLACEHOLDER_PATTERN.finditer(template):
            path = match.group(1) or match.group(2)
            if path in values:
                continue
            value = self._lookup(context, path.split("."))
            if value is _MISSING and self.strict:
                logger.error(
                    "missing_interpolation_variable",
                    variable=path,
                    context_type=type(context).__name__,
                )
                raise InterpolationError(path, template)
            values[path] = value

        def _replace(match: "re.Match[str]") -> str:
            path = match.group(1) or match.group(2)
            value = values[path]
            if value is _MISSING:
                return match.group(0)
            return str(value)

        return _PLACEHOLDER_PATTERN.sub(_replace, template)

    @staticmethod
    def _lookup(context: Any, segments: List[str]) -> Any:
        current = context
        for segment in segments:
            if isinstance(current, Mapping):
                if segment not in current:
                    return _MISSING
                current = current[segment]
            else:
                current = getattr(current, segment, _MISSING)
                if current is _MISSING:
                    return _MISSING
        return current

