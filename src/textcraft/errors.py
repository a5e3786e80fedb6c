class TextcraftError(Exception):
    """Base error for Textcraft domain exceptions."""


class InvalidUsernameError(TextcraftError):
    """Raised when a username is empty or contains non-alphanumeric characters."""


class DuplicateUsernameError(TextcraftError):
    """Raised when registering a username that already exists in the roster."""


class SettingsError(TextcraftError):
    """Raised when a settings file cannot be parsed into valid settings."""


class NegativeAmountError(TextcraftError, ValueError):
    """Raised when a money or health amount is negative."""
