"""
IPv4 Address Value Object
Immutable four-octet address with the IPv4 special-purpose registry checks.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Iterator, Sequence, Union, final

from inetaddr.domain.exceptions import InvalidAddress
from inetaddr.domain.value_objects import byte_codec
from inetaddr.domain.value_objects.ip_address import IpAddress, IPVersion

if TYPE_CHECKING:
    from inetaddr.domain.value_objects.ipv6_address import Ipv6Address


@final
@dataclass(frozen=True)
class Ipv4Address(IpAddress):
    """
    Value object representing the IPv4 address `a.b.c.d`.

    Attributes:
        a: First octet (0 - 255)
        b: Second octet (0 - 255)
        c: Third octet (0 - 255)
        d: Fourth octet (0 - 255)
    """

    a: int
    b: int
    c: int
    d: int

    version: ClassVar[IPVersion] = IPVersion.IPV4
    PREDICATES: ClassVar[tuple[str, ...]] = (
        "is_broadcast",
        "is_documentation",
        "is_link_local",
        "is_loopback",
        "is_private",
    )

    def __post_init__(self) -> None:
        """Validate octet types and ranges."""
        for octet in self.octets:
            byte_codec.check_component(octet, byte_codec.BYTE_MAX, "Byte")

    @classmethod
    def from_array(cls, values: Sequence[int]) -> "Ipv4Address":
        """
        Create from exactly four octets.

        Raises:
            InvalidAddress: If the element count is not 4 or an octet is invalid
        """
        values = list(values)
        if len(values) != 4:
            raise InvalidAddress(
                f"Invalid array element count, expected 4 got {len(values)}."
            )
        return cls(*values)

    @classmethod
    def from_binary(cls, in_addr: bytes) -> "Ipv4Address":
        """Create from a packed 4 byte `in_addr` blob."""
        in_addr = byte_codec.require_bytes(in_addr)
        if len(in_addr) != byte_codec.IPV4_WIDTH:
            raise InvalidAddress(
                f"Invalid byte count, expected 4 got {len(in_addr)}."
            )
        return cls.from_string(byte_codec.bytes_to_text(in_addr))

    @classmethod
    def from_integer(cls, integer: Union[int, str]) -> "Ipv4Address":
        """
        Create from an unsigned 32-bit integer.

        Args:
            integer: Native integer or unsigned decimal string

        Raises:
            InvalidAddress: If the value is not within 0 and 4294967295
        """
        value = byte_codec.parse_integer(integer)
        return cls.from_binary(
            byte_codec.integer_to_big_endian_bytes(value, byte_codec.IPV4_WIDTH)
        )

    @classmethod
    def from_string(cls, address: str) -> "Ipv4Address":
        """
        Create from strict dotted-decimal text.

        Raises:
            InvalidAddress: If the text is not a dotted-decimal IPv4 address
        """
        packed = byte_codec.text_to_bytes(address, byte_codec.IPV4_WIDTH)
        return cls(*packed)

    @property
    def octets(self) -> tuple[int, int, int, int]:
        """The four octets of this address."""
        return (self.a, self.b, self.c, self.d)

    def __str__(self) -> str:
        return ".".join(str(octet) for octet in self.octets)

    def __iter__(self) -> Iterator[int]:
        yield from self.octets

    def to_array(self) -> list[int]:
        return list(self.octets)

    def is_broadcast(self) -> bool:
        """Whether this is the limited broadcast address 255.255.255.255."""
        return self.octets == (255, 255, 255, 255)

    def is_documentation(self) -> bool:
        """
        Whether this is a documentation address.

        Documentation ranges are `192.0.2.0/24` (TEST-NET-1),
        `198.51.100.0/24` (TEST-NET-2) and `203.0.113.0/24` (TEST-NET-3),
        see RFC 5737.
        """
        return (self.a, self.b, self.c) in (
            (192, 0, 2),
            (198, 51, 100),
            (203, 0, 113),
        )

    def is_global(self) -> bool:
        return not (
            self.is_broadcast()
            or self.is_documentation()
            or self.is_link_local()
            or self.is_loopback()
            or self.is_private()
            or self.is_unspecified()
        )

    def is_link_local(self) -> bool:
        return self.a == 192 and self.b == 254

    def is_loopback(self) -> bool:
        return self.a == 127

    def is_private(self) -> bool:
        """
        Whether this is a private address.

        Private ranges are `10.0.0.0/8`, `172.16.0.0/12` and
        `192.168.0.0/16`, see RFC 1918.
        """
        if self.a == 10:
            return True
        if self.a == 172 and 16 <= self.b <= 31:
            return True
        return self.a == 192 and self.b == 168

    def is_unspecified(self) -> bool:
        return self.octets == (0, 0, 0, 0)

    def to_ipv6_compatible(self) -> "Ipv6Address":
        """Convert `a.b.c.d` to the IPv4-compatible IPv6 address `::a.b.c.d`."""
        from inetaddr.domain.value_objects.ipv6_address import Ipv6Address

        return Ipv6Address(0, 0, 0, 0, 0, 0, *self._low_segments())

    def to_ipv6_mapped(self) -> "Ipv6Address":
        """Convert `a.b.c.d` to the IPv4-mapped IPv6 address `::ffff:a.b.c.d`."""
        from inetaddr.domain.value_objects.ipv6_address import Ipv6Address

        return Ipv6Address(0, 0, 0, 0, 0, 0xFFFF, *self._low_segments())

    def _low_segments(self) -> list[int]:
        return byte_codec.groups_from_flat_bytes(self.octets, 2)
