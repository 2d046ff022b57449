# central source for exceptions thrown by baseuri


class BaseUriError(Exception):
    """Base exception for baseuri."""


class NullInputError(BaseUriError, ValueError):
    """Raised when a required argument is None."""


class MalformedBaseError(BaseUriError, ValueError):
    """Raised when a base URI lacks a scheme or a host."""


class MissingConfigError(BaseUriError, LookupError):
    """Raised when a required configuration key has no value."""
