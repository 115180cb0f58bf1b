"""
IPv6 Address Value Object
Immutable eight-segment address with the IPv6 special-purpose registry checks.
"""

from dataclasses import dataclass
from typing import ClassVar, Iterator, Optional, Sequence, Union, final

from inetaddr.domain.exceptions import InvalidAddress
from inetaddr.domain.value_objects import byte_codec
from inetaddr.domain.value_objects.ip_address import IpAddress, IPVersion
from inetaddr.domain.value_objects.ipv4_address import Ipv4Address


@final
@dataclass(frozen=True)
class Ipv6Address(IpAddress):
    """
    Value object representing an IPv6 address of eight 16-bit segments.

    Attributes:
        a..h: Segments in network order, each 0 - 65535
    """

    a: int
    b: int
    c: int
    d: int
    e: int
    f: int
    g: int
    h: int

    version: ClassVar[IPVersion] = IPVersion.IPV6
    PREDICATES: ClassVar[tuple[str, ...]] = (
        "is_documentation",
        "is_loopback",
        "is_multicast",
        "is_unicast_global",
        "is_unicast_link_local",
        "is_unicast_site_local",
        "is_unique_local",
    )

    def __post_init__(self) -> None:
        """Validate segment types and ranges."""
        for segment in self.segments:
            byte_codec.check_component(segment, byte_codec.SEGMENT_MAX, "Segment")

    @classmethod
    def from_array(cls, values: Sequence[int]) -> "Ipv6Address":
        """
        Create from eight 16-bit segments or sixteen bytes.

        Byte pairs are merged big-endian into segments.

        Raises:
            InvalidAddress: If the element count is not 8 or 16 or an
                element is out of range
        """
        values = list(values)
        count = len(values)

        if count == 8:
            return cls(*values)
        if count == 16:
            for byte in values:
                byte_codec.check_component(byte, byte_codec.BYTE_MAX, "Byte")
            return cls(*byte_codec.groups_from_flat_bytes(values, 2))

        raise InvalidAddress(
            f"Invalid array element count, expected 8 or 16 got {count}."
        )

    @classmethod
    def from_binary(cls, in_addr: bytes) -> "Ipv6Address":
        """Create from a packed 16 byte `in_addr` blob."""
        in_addr = byte_codec.require_bytes(in_addr)
        if len(in_addr) != byte_codec.IPV6_WIDTH:
            raise InvalidAddress(
                f"Invalid byte count, expected 16 got {len(in_addr)}."
            )
        return cls(*byte_codec.groups_from_flat_bytes(in_addr, 2))

    @classmethod
    def from_integer(cls, integer: Union[int, str]) -> "Ipv6Address":
        """
        Create from a 128-bit unsigned integer.

        Args:
            integer: Native integer or unsigned decimal string, at most 2**128 - 1

        Raises:
            InvalidAddress: If the value is negative, too large or not a number
        """
        value = byte_codec.parse_integer(integer)
        return cls.from_binary(
            byte_codec.integer_to_big_endian_bytes(value, byte_codec.IPV6_WIDTH)
        )

    @classmethod
    def from_string(cls, address: str) -> "Ipv6Address":
        """
        Create from compressed or expanded colon-hex text.

        A trailing dotted-quad (`::ffff:192.0.2.1`) is accepted.
        """
        return cls.from_binary(
            byte_codec.text_to_bytes(address, byte_codec.IPV6_WIDTH)
        )

    @property
    def segments(self) -> tuple[int, int, int, int, int, int, int, int]:
        """The eight 16-bit segments of this address."""
        return (self.a, self.b, self.c, self.d, self.e, self.f, self.g, self.h)

    def __str__(self) -> str:
        """
        Compressed colon-hex form.

        IPv4-mapped and IPv4-compatible addresses stay in pure hex
        (`::ffff:7f00:1`), they are not rendered with a dotted-quad tail
        the way `inet_ntop` does (`::ffff:127.0.0.1`).
        """
        return byte_codec.bytes_to_text(self.to_binary())

    def __iter__(self) -> Iterator[int]:
        for segment in self.segments:
            yield segment >> 8
            yield segment & 0xFF

    def to_array(self) -> list[int]:
        return list(self.segments)

    def expand(self) -> str:
        """Fully expanded form, e.g. `0000:0000:0000:0000:0000:0000:0000:0001`."""
        return byte_codec.bytes_to_expanded_text(self.to_binary())

    def is_documentation(self) -> bool:
        """Whether this is in the documentation prefix `2001:db8::/32` (RFC 3849)."""
        return self.a == 0x2001 and self.b == 0x0DB8

    def is_global(self) -> bool:
        """
        Whether this address lies outside every special-purpose range.

        Excludes the unspecified and loopback addresses, multicast,
        link-local, legacy site-local, unique local and documentation space.
        """
        return not (
            self.is_unspecified()
            or self.is_loopback()
            or self.is_multicast()
            or self.is_unicast_link_local()
            or self.is_unicast_site_local()
            or self.is_unique_local()
            or self.is_documentation()
        )

    def is_loopback(self) -> bool:
        return self.segments == (0, 0, 0, 0, 0, 0, 0, 1)

    def is_multicast(self) -> bool:
        """Whether this is a multicast address of the form `ff00::/8` (RFC 4291)."""
        return (self.a & 0xFF00) == 0xFF00

    def is_unicast_global(self) -> bool:
        """Whether this is in the global unicast allocation `2000::/3`."""
        return (self.a & 0xE000) == 0x2000 and not self.is_documentation()

    def is_unicast_link_local(self) -> bool:
        return (self.a & 0xFFC0) == 0xFE80

    def is_unicast_site_local(self) -> bool:
        # Deprecated by RFC 3879, still reserved
        return (self.a & 0xFFC0) == 0xFEC0

    def is_unique_local(self) -> bool:
        return (self.a & 0xFE00) == 0xFC00

    def is_unspecified(self) -> bool:
        return self.segments == (0, 0, 0, 0, 0, 0, 0, 0)

    def to_ipv4_address(self) -> Optional[Ipv4Address]:
        """
        Extract the embedded IPv4 address.

        Only the sixth segment decides: `0` marks the IPv4-compatible form
        and `0xffff` the IPv4-mapped form, the leading segments are not
        inspected.

        Returns:
            The Ipv4Address built from the last two segments, None when the
            sixth segment is neither `0` nor `0xffff`
        """
        if self.f not in (0, 0xFFFF):
            return None
        return Ipv4Address(self.g >> 8, self.g & 0xFF, self.h >> 8, self.h & 0xFF)
