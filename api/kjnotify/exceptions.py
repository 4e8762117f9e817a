class NotificationError(Exception):
    """Base exception for all notification related errors."""
    pass


class ValidationError(NotificationError):
    """Raised when a request body is missing required fields or cannot be read."""

    def __init__(self, message: str, fields: tuple[str, ...] = ()):
        self.message = message
        self.fields = fields
        super().__init__(message)


class ConfigurationError(NotificationError):
    """Raised when provider settings are unusable."""
    pass
