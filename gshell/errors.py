class GshellError(Exception):
    """Base class for errors that are reported to the user as a plain message."""


class ConfigurationError(GshellError):
    """Raised when a configuration value is missing or malformed."""


class StreamError(GshellError):
    """Raised when a completion stream terminates abnormally."""


class UserCancelled(GshellError):
    """Raised when the user interrupts a text prompt."""
