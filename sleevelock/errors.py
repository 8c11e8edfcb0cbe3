"""Exceptions raised before any geometry is built."""


class SleevelockError(Exception):
    """Base class for sleevelock errors."""


class ConfigurationError(SleevelockError, ValueError):
    """A parameter is unknown, missing, non-numeric or has an unrecognised value."""

    def __init__(self, message: str, keys: list[str] | None = None):
        super().__init__(message)
        self.keys = keys or []


class DerivationError(SleevelockError, ValueError):
    """A derived parameter references an unresolved or cyclic dependency."""

    def __init__(self, message: str, path: list[str] | None = None):
        super().__init__(message)
        self.path = path or []
