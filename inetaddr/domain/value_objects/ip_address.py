"""
IP Address Value Object
Immutable representation of a validated IPv4 or IPv6 address.

`IpAddress` is the shared contract of the two concrete variants,
`Ipv4Address` and `Ipv6Address`, and the entry point that routes raw input
to the right one. The set of variants is closed.
"""

import json
from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, Iterator, Optional, Sequence, Union

from inetaddr.domain.exceptions import InvalidAddress
from inetaddr.domain.value_objects import byte_codec


class IPVersion(str, Enum):
    """IP address version."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"


class IpAddress(ABC):
    """
    Capability set shared by every address.

    Instances only exist for values that passed validation, there is no
    way to observe a partially built or invalid address.
    """

    version: ClassVar[IPVersion]

    # Classification predicates exported by to_dict(), in display order
    PREDICATES: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def from_array(cls, values: Sequence[int]) -> "IpAddress":
        """
        Create an address from an array of bytes or segments.

        Args:
            values: Four bytes (IPv4), eight 16-bit segments (IPv6) or
                sixteen bytes (IPv6)

        Returns:
            Ipv4Address or Ipv6Address

        Raises:
            InvalidAddress: If the element count or any element is invalid
        """
        from inetaddr.domain.value_objects.ipv4_address import Ipv4Address
        from inetaddr.domain.value_objects.ipv6_address import Ipv6Address

        values = list(values)
        count = len(values)

        if count == 4:
            return Ipv4Address.from_array(values)
        if count in (8, 16):
            return Ipv6Address.from_array(values)

        raise InvalidAddress(
            f"Invalid array element count, expected 4, 8 or 16 got {count}."
        )

    @classmethod
    def from_binary(cls, in_addr: bytes) -> "IpAddress":
        """
        Create an address from a packed big-endian `in_addr` blob.

        Args:
            in_addr: 4 bytes for IPv4 or 16 bytes for IPv6

        Returns:
            Ipv4Address or Ipv6Address

        Raises:
            InvalidAddress: If the blob has any other length
        """
        from inetaddr.domain.value_objects.ipv4_address import Ipv4Address
        from inetaddr.domain.value_objects.ipv6_address import Ipv6Address

        in_addr = byte_codec.require_bytes(in_addr)
        count = len(in_addr)

        if count == byte_codec.IPV4_WIDTH:
            return Ipv4Address.from_binary(in_addr)
        if count == byte_codec.IPV6_WIDTH:
            return Ipv6Address.from_binary(in_addr)

        raise InvalidAddress(f"Invalid byte count, expected 4 or 16 got {count}.")

    @classmethod
    def from_string(cls, address: str) -> "IpAddress":
        """
        Create an address from dotted-decimal (IPv4) or colon-hex (IPv6) text.

        Both compressed and expanded IPv6 notations are accepted.

        Raises:
            InvalidAddress: If the text is not a valid address
        """
        from inetaddr.domain.value_objects.ipv4_address import Ipv4Address
        from inetaddr.domain.value_objects.ipv6_address import Ipv6Address

        if not isinstance(address, str):
            raise InvalidAddress(
                f"Address must be a string, got {type(address).__name__}."
            )

        if ":" in address:
            return Ipv6Address.from_string(address)
        if "." in address:
            return Ipv4Address.from_string(address)

        raise InvalidAddress(f"Unrecognized address '{address}'.")

    @classmethod
    def from_dict(cls, data: dict) -> "IpAddress":
        """Create from dictionary representation."""
        return cls.from_string(data["address"])

    @abstractmethod
    def __str__(self) -> str:
        """Human-readable presentation form."""

    @abstractmethod
    def __iter__(self) -> Iterator[int]:
        """Yield the bytes of this address in network order."""

    @abstractmethod
    def is_global(self) -> bool:
        """
        Whether this address is considered globally routable.

        This does not mean that the address *is* globally routed.
        """

    @abstractmethod
    def is_unspecified(self) -> bool:
        """Whether this is the all-zero unspecified address (RFC 6890)."""

    @abstractmethod
    def to_array(self) -> list[int]:
        """The octets (IPv4) or segments (IPv6) of this address."""

    def to_binary(self) -> bytes:
        """
        Packed big-endian `in_addr` form.

        Four bytes for IPv4 and sixteen for IPv6, which makes it the
        compact choice for fixed-width storage such as a BINARY(16) column.
        """
        return bytes(self)

    def to_integer(self) -> int:
        """The address as a single non-negative big-endian integer."""
        return byte_codec.big_endian_bytes_to_integer(self.to_binary())

    def to_json(self) -> str:
        """Presentation form quoted for embedding in a JSON document."""
        return json.dumps(str(self))

    def equals(self, other: Optional["IpAddress"]) -> bool:
        """Value equality, false for None and for the other variant."""
        return other is not None and self == other

    def __bytes__(self) -> bytes:
        return bytes(iter(self))

    def __int__(self) -> int:
        return self.to_integer()

    def to_dict(self) -> dict:
        """
        Convert to dictionary representation.

        The integer form is exported as a decimal string, 128-bit values do
        not survive JSON consumers that use doubles.
        """
        data: dict[str, Union[str, bool]] = {
            "address": str(self),
            "version": self.version.value,
            "integer": str(self.to_integer()),
            "is_global": self.is_global(),
            "is_unspecified": self.is_unspecified(),
        }
        for name in self.PREDICATES:
            data[name] = getattr(self, name)()
        return data

