"""
Domain Exceptions
Errors raised while constructing address value objects.
"""


class InvalidAddress(ValueError):
    """
    Raised when input does not describe a valid IPv4 or IPv6 address.

    The message is the human-readable reason and is stable across releases,
    callers may match on it.
    """
