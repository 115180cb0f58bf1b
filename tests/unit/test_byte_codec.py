import pytest

from inetaddr.domain.exceptions import InvalidAddress
from inetaddr.domain.value_objects import byte_codec


def test_groups_from_flat_bytes_pairs():
    assert byte_codec.groups_from_flat_bytes([0x20, 0x01, 0x0D, 0xB8], 2) == [0x2001, 0x0DB8]


def test_groups_from_flat_bytes_single():
    assert byte_codec.groups_from_flat_bytes(b"\x7f\x00\x00\x01", 1) == [127, 0, 0, 1]


def test_groups_from_flat_bytes_rejects_partial_group():
    with pytest.raises(InvalidAddress):
        byte_codec.groups_from_flat_bytes([1, 2, 3], 2)


def test_flat_bytes_from_groups():
    assert byte_codec.flat_bytes_from_groups([0xFFFF, 0x0102], 2) == [0xFF, 0xFF, 0x01, 0x02]


def test_integer_conversion_exceeds_64_bits():
    data = b"\xff" * 16
    assert byte_codec.big_endian_bytes_to_integer(data) == 2**128 - 1
    assert byte_codec.integer_to_big_endian_bytes(2**128 - 1, 16) == data


def test_integer_to_bytes_pads_left():
    assert byte_codec.integer_to_big_endian_bytes(1, 4) == b"\x00\x00\x00\x01"


@pytest.mark.parametrize("value", [-1, 2**32])
def test_integer_to_bytes_range(value):
    with pytest.raises(InvalidAddress) as excinfo:
        byte_codec.integer_to_big_endian_bytes(value, 4)
    assert str(excinfo.value) == f"Integer must be between 0 and 4294967295, got {value}."


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, 0),
        (42, 42),
        ("340282366920938463463374607431768211455", 2**128 - 1),
    ],
)
def test_parse_integer(value, expected):
    assert byte_codec.parse_integer(value) == expected


@pytest.mark.parametrize("value", ["-1", "0x10", "", "1.5", 1.5, None, True])
def test_parse_integer_rejects(value):
    with pytest.raises(InvalidAddress, match="Integer must be a valid integer or decimal string"):
        byte_codec.parse_integer(value)


@pytest.mark.parametrize(
    "hextets, expected",
    [
        (["0"] * 8, "::"),
        (["0", "0", "0", "0", "0", "0", "0", "1"], "::1"),
        (["1", "0", "0", "0", "0", "0", "0", "0"], "1::"),
        # First of two equal runs wins
        (["2001", "db8", "0", "0", "1", "0", "0", "1"], "2001:db8::1:0:0:1"),
        # Longest run wins over an earlier shorter one
        (["1", "0", "0", "2", "0", "0", "0", "3"], "1:0:0:2::3"),
        # A lone zero is never compressed
        (["2001", "db8", "0", "1", "1", "1", "1", "1"], "2001:db8:0:1:1:1:1:1"),
    ],
)
def test_compress_hextets(hextets, expected):
    assert ":".join(byte_codec.compress_hextets(hextets)) == expected


@pytest.mark.parametrize(
    "hextets, expected",
    [
        (["1", "0", "0", "2", "0", "0", "0", "3"], (4, 3)),
        (["0", "0", "1", "0", "0", "1", "1", "1"], (0, 2)),
        (["1", "2", "3", "4", "5", "6", "7", "8"], (0, 0)),
        (["0"] * 8, (0, 8)),
    ],
)
def test_longest_zero_run(hextets, expected):
    assert byte_codec.longest_zero_run(hextets) == expected


def test_bytes_to_text_ipv4():
    assert byte_codec.bytes_to_text(b"\xc0\xa8\x00\x01") == "192.168.0.1"


def test_bytes_to_text_ipv6():
    assert byte_codec.bytes_to_text(b"\x00" * 15 + b"\x01") == "::1"


def test_bytes_to_text_rejects_width():
    with pytest.raises(InvalidAddress) as excinfo:
        byte_codec.bytes_to_text(b"\x00" * 5)
    assert str(excinfo.value) == "Invalid byte count, expected 4 or 16 got 5."


def test_bytes_to_expanded_text():
    assert (
        byte_codec.bytes_to_expanded_text(b"\x00" * 15 + b"\x01")
        == "0000:0000:0000:0000:0000:0000:0000:0001"
    )


def test_text_to_bytes():
    assert byte_codec.text_to_bytes("127.0.0.1", 4) == b"\x7f\x00\x00\x01"
    assert byte_codec.text_to_bytes("::ffff:127.0.0.1", 16) == (
        b"\x00" * 10 + b"\xff\xff\x7f\x00\x00\x01"
    )


@pytest.mark.parametrize(
    "text, width",
    [
        ("01.2.3.4", 4),
        ("1.2.3", 4),
        ("::1", 4),
        ("fe80::1%eth0", 16),
        ("127.0.0.1", 16),
    ],
)
def test_text_to_bytes_rejects(text, width):
    with pytest.raises(InvalidAddress) as excinfo:
        byte_codec.text_to_bytes(text, width)
    assert str(excinfo.value) == f"Unrecognized address '{text}'."


@pytest.mark.parametrize("value, maximum, kind", [(256, 255, "Byte"), (65536, 65535, "Segment")])
def test_check_component_range(value, maximum, kind):
    with pytest.raises(InvalidAddress) as excinfo:
        byte_codec.check_component(value, maximum, kind)
    assert str(excinfo.value) == f"{kind} must be between 0 and {maximum}, got {value}."


def test_require_bytes():
    assert byte_codec.require_bytes(bytearray(b"\x01")) == b"\x01"
    with pytest.raises(InvalidAddress) as excinfo:
        byte_codec.require_bytes("127.0.0.1")
    assert str(excinfo.value) == "Binary address must be bytes, got str."
