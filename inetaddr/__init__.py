"""
inetaddr - Validated IPv4 and IPv6 address value objects.
"""

from inetaddr.domain import (
    InvalidAddress,
    IpAddress,
    IPVersion,
    Ipv4Address,
    Ipv6Address,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidAddress",
    "IpAddress",
    "IPVersion",
    "Ipv4Address",
    "Ipv6Address",
    "__version__",
]
