"""Custom exceptions for themekit."""


class ThemekitError(Exception):
    """Base exception for themekit operations."""


class HelperRegistrationError(ThemekitError):
    """A helper could not be bound into a templating environment."""
