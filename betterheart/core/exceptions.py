"""
Custom exceptions for Better Heart.

All exceptions inherit from BetterHeartError for easy catching.
"""


class BetterHeartError(Exception):
    """Base exception for all Better Heart errors."""

    pass


class ConfigurationError(BetterHeartError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        super().__init__(message)


class ValidationError(BetterHeartError):
    """
    Raised when the current step cannot be left.

    Recovered locally: the session refuses the move and stays put.
    """

    def __init__(
        self,
        message: str,
        step: int | None = None,
        missing: tuple[str, ...] = (),
    ):
        self.step = step
        self.missing = missing
        super().__init__(message)


class NavigationError(BetterHeartError):
    """Raised when a move would leave the bounds of the wizard."""

    def __init__(self, message: str, step: int | None = None):
        self.step = step
        super().__init__(message)


class InvalidMeasurementError(BetterHeartError):
    """Raised when a body measurement is missing, non-numeric or not positive."""

    def __init__(self, message: str, field: str | None = None, value: object = None):
        self.field = field
        self.value = value
        super().__init__(message)


class PersistenceError(BetterHeartError):
    """Raised when an assessment record cannot be saved or loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
