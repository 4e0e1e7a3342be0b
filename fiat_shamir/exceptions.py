"""Errors raised by the identification library."""


class FiatShamirError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(FiatShamirError, ValueError):
    """A configuration value, a drawn commitment or a secret was rejected."""


class InvalidProtocolStateError(FiatShamirError, RuntimeError):
    """A protocol step was called out of the step1/step2 alternation."""


class BadEncodingError(FiatShamirError, ValueError):
    """A serialized key does not parse into a well-formed key."""
