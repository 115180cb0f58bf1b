"""
inetaddr Domain Layer
Address value objects and the errors raised while building them.
"""

from inetaddr.domain.exceptions import InvalidAddress
from inetaddr.domain.value_objects import (
    IpAddress,
    IPVersion,
    Ipv4Address,
    Ipv6Address,
)

__all__ = [
    # Errors
    "InvalidAddress",
    # Value Objects
    "IpAddress",
    "IPVersion",
    "Ipv4Address",
    "Ipv6Address",
]
