"""Domain Value Objects - Immutable address primitives."""

from inetaddr.domain.value_objects.ip_address import IpAddress, IPVersion
from inetaddr.domain.value_objects.ipv4_address import Ipv4Address
from inetaddr.domain.value_objects.ipv6_address import Ipv6Address

__all__ = [
    "IpAddress",
    "IPVersion",
    "Ipv4Address",
    "Ipv6Address",
]
