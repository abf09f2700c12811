"""Exceptions raised by netenomics routines."""


class NetenomicsError(ValueError):
    """Base class for all netenomics errors."""


class EmptyInputError(NetenomicsError):
    """Raised when a routine receives an empty series."""


class InvalidArgumentError(NetenomicsError):
    """Raised when an argument is outside its accepted range."""


class InsufficientDataError(NetenomicsError):
    """Raised when a series is too short for the computation."""
