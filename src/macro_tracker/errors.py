"""Application error types."""


class MacroTrackerError(Exception):
    """Base class for errors raised by application services."""


class EmailAlreadyRegisteredError(MacroTrackerError):
    """Raised when signing up with an email that already has an account."""


class InvalidCredentialsError(MacroTrackerError):
    """Raised when an email and password pair does not match an account."""


class InvalidPasswordError(MacroTrackerError):
    """Raised when a new password does not meet the minimum length."""


class InvalidProfileError(MacroTrackerError):
    """Raised when onboarding answers cannot produce a profile."""


class ProfileNotFoundError(MacroTrackerError):
    """Raised when an operation needs a profile the user has not created."""
