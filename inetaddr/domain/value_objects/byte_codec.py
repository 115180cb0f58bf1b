"""
Byte Codec
Pure conversions between the raw encodings of a fixed-width address.

All functions are stateless and work on either an IPv4 (4 byte) or an
IPv6 (16 byte) width. Validation is limited to lengths and ranges, shape
rules of a specific address family live in the value objects.
"""

import ipaddress
from itertools import groupby
from typing import Iterable, Union

from inetaddr.domain.exceptions import InvalidAddress

IPV4_WIDTH = 4
IPV6_WIDTH = 16

BYTE_MAX = 0xFF
SEGMENT_MAX = 0xFFFF

_PARSERS = {
    IPV4_WIDTH: ipaddress.IPv4Address,
    IPV6_WIDTH: ipaddress.IPv6Address,
}


def check_component(value: int, maximum: int, kind: str) -> int:
    """
    Validate a single octet or segment.

    Args:
        value: Candidate component
        maximum: Largest allowed value (255 or 65535)
        kind: "Byte" or "Segment", used in the error message

    Raises:
        InvalidAddress: If value is not an integer or out of range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAddress(
            f"{kind} must be a valid integer, got {type(value).__name__}."
        )
    if not 0 <= value <= maximum:
        raise InvalidAddress(f"{kind} must be between 0 and {maximum}, got {value}.")
    return value


def require_bytes(in_addr) -> bytes:
    """Accept any bytes-like blob and return it as immutable bytes."""
    if not isinstance(in_addr, (bytes, bytearray, memoryview)):
        raise InvalidAddress(
            f"Binary address must be bytes, got {type(in_addr).__name__}."
        )
    return bytes(in_addr)


def groups_from_flat_bytes(data: Iterable[int], group_size: int) -> list[int]:
    """
    Pack a flat sequence of 8-bit values into big-endian groups.

    Args:
        data: Byte values, most significant first
        group_size: Bytes per group (1 for IPv4 octets, 2 for IPv6 segments)

    Returns:
        List of integers, one per group
    """
    flat = list(data)
    if len(flat) % group_size:
        raise InvalidAddress(
            f"Invalid byte count, expected a multiple of {group_size} got {len(flat)}."
        )

    groups = []
    for start in range(0, len(flat), group_size):
        value = 0
        for byte in flat[start:start + group_size]:
            value = (value << 8) | byte
        groups.append(value)
    return groups


def flat_bytes_from_groups(groups: Iterable[int], group_size: int) -> list[int]:
    """Unpack big-endian groups into a flat list of 8-bit values."""
    flat = []
    for group in groups:
        for shift in range((group_size - 1) * 8, -1, -8):
            flat.append((group >> shift) & BYTE_MAX)
    return flat


def big_endian_bytes_to_integer(data: bytes) -> int:
    """Combine big-endian bytes into a single non-negative integer."""
    return int.from_bytes(bytes(data), byteorder="big", signed=False)


def integer_to_big_endian_bytes(value: int, width: int) -> bytes:
    """
    Render a non-negative integer as exactly `width` big-endian bytes.

    The result is zero-padded on the left.

    Raises:
        InvalidAddress: If value is negative or needs more than `width` bytes
    """
    maximum = (1 << (width * 8)) - 1
    if not 0 <= value <= maximum:
        raise InvalidAddress(f"Integer must be between 0 and {maximum}, got {value}.")
    return value.to_bytes(width, byteorder="big", signed=False)


def parse_integer(value: Union[int, str]) -> int:
    """
    Normalise a native integer or an unsigned decimal string.

    Decimal strings are how integers wider than 64 bits travel through
    text-based storage, so both forms are accepted.
    """
    if isinstance(value, bool):
        raise InvalidAddress(
            f"Integer must be a valid integer or decimal string, got {value!r}."
        )
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise InvalidAddress(
        f"Integer must be a valid integer or decimal string, got {value!r}."
    )


def longest_zero_run(hextets: list[str]) -> tuple[int, int]:
    """
    Locate the longest run of "0" hextets.

    Returns:
        (start, length) of the first longest run, (0, 0) if there is none
    """
    best = (0, 0)
    index = 0
    for is_zero, run in groupby(hextets, key=lambda hextet: hextet == "0"):
        length = len(list(run))
        if is_zero and length > best[1]:
            best = (index, length)
        index += length
    return best


def compress_hextets(hextets: list[str]) -> list[str]:
    """
    Collapse the longest run of "0" hextets into an empty marker.

    The first run wins on a tie and a single zero hextet is left alone, so
    that ":".join() of the result is the compressed presentation form.
    """
    hextets = list(hextets)
    start, length = longest_zero_run(hextets)
    if length < 2:
        return hextets
    head = hextets[:start] or [""]
    tail = hextets[start + length:] or [""]
    return head + [""] + tail


def bytes_to_text(data: bytes) -> str:
    """
    Render a binary blob in its presentation form.

    Dotted-decimal for 4 bytes, compressed colon-hex for 16 bytes.
    """
    data = bytes(data)
    if len(data) == IPV4_WIDTH:
        return ".".join(str(byte) for byte in data)
    if len(data) == IPV6_WIDTH:
        segments = groups_from_flat_bytes(data, 2)
        return ":".join(compress_hextets([f"{segment:x}" for segment in segments]))
    raise InvalidAddress(f"Invalid byte count, expected 4 or 16 got {len(data)}.")


def bytes_to_expanded_text(data: bytes) -> str:
    """Render a 16 byte blob as eight zero-padded colon-separated hextets."""
    data = bytes(data)
    if len(data) != IPV6_WIDTH:
        raise InvalidAddress(f"Invalid byte count, expected 16 got {len(data)}.")
    return ":".join(f"{segment:04x}" for segment in groups_from_flat_bytes(data, 2))


def text_to_bytes(text: str, width: int) -> bytes:
    """
    Parse strict presentation syntax into a binary blob of `width` bytes.

    IPv4 text must be four decimal octets without leading zeros. IPv6 text
    may be compressed or expanded and may end in an embedded dotted-quad,
    zone identifiers are not part of an address and are rejected.

    Raises:
        InvalidAddress: If the text is not a valid address of that width
    """
    if not isinstance(text, str):
        raise InvalidAddress(f"Address must be a string, got {type(text).__name__}.")
    if "%" in text:
        raise InvalidAddress(f"Unrecognized address '{text}'.")

    try:
        return _PARSERS[width](text).packed
    except ValueError as e:
        raise InvalidAddress(f"Unrecognized address '{text}'.") from e
