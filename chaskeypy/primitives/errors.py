"""Errors raised by the Chaskey primitives and modes."""


class ChaskeyError(Exception):
    """Base class of the errors raised by chaskeypy."""


class KeyNotSet(ChaskeyError):
    """A keyed operation was called before ``set``."""


class InvalidKeyLength(ChaskeyError, ValueError):
    """The key is neither 16 bytes nor four 32-bit words."""


class InvalidInput(ChaskeyError, TypeError):
    """The input is neither a byte sequence nor text."""


class InvalidState(ChaskeyError):
    """A streaming session was driven out of order."""
