"""Exceptions for the entity context package.

Template input never raises: malformed templates, unknown filters and missing
entities all degrade to literal text or empty values. These exceptions cover
configuration and programming errors only.
"""


class EntityContextError(Exception):
    """Base exception for entity context errors."""


class EntityContextConfigError(EntityContextError):
    """Raised when an entity context configuration is invalid."""


class FilterRegistrationError(EntityContextError):
    """Raised when a filter handler cannot be registered."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Cannot register filter '{name}': {reason}")


class CardConfigError(EntityContextError):
    """Raised when a card configuration document cannot be parsed."""
