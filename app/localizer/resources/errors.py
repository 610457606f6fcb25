"""Errors raised by the string resource system."""

from typing import Optional


class ResourceNotFound(LookupError):
    """No loader produced a string and the policy says to fail.

    Attributes:
        key: The lookup key that could not be resolved.
        message: Human-readable description.
    """

    def __init__(self, key: str, message: Optional[str] = None):
        self.key = key
        self.message = message or f"Unable to find resource: {key}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InterpolationError(ValueError):
    """A placeholder could not be resolved against the context object."""

    def __init__(self, variable: str, template: str):
        self.variable = variable
        self.template = template
        super().__init__(f"Missing interpolation variable: {variable}")
