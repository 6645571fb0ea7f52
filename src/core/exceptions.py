"""Custom exceptions. Every layer raises a subclass of RotationError so callers can catch a single type."""


class RotationError(Exception):
    """Base class for all errors raised by this project."""


class InvalidRequestError(RotationError):
    """Incoming request data could not be interpreted."""


class RepositoryError(RotationError):
    """Record could not be found / stored."""


class SessionStateError(RotationError):
    """Operation refers to a player or court the session does not know about."""


class CourtStateError(SessionStateError):
    """Operation is not allowed given the current status of the court."""
