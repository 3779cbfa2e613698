class SchedulerError(Exception):
    """Base class for every error raised by the scheduling core."""


class InvalidArgument(SchedulerError, ValueError):
    """Caller supplied a value outside the accepted domain."""


class ConfigurationError(SchedulerError):
    """The scheduling policy is incomplete or inconsistent."""
