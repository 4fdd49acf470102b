"""Custom exceptions for framediag."""


class FrameDiagError(Exception):
    """Base exception for all framediag errors."""


class SettingsError(FrameDiagError):
    """Raised when the settings file cannot be read or written."""


class LifecycleError(FrameDiagError):
    """Raised when the application cannot be restarted."""
