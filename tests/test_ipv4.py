import pytest

from lazyco.ipv4 import IPv4Address, IPv4Endpoint


def test_default_address_is_unspecified():
    assert IPv4Address().to_string() == "0.0.0.0"
    assert IPv4Address().to_integer() == 0


def test_loopback_string():
    assert IPv4Address.loopback().to_string() == "127.0.0.1"
    assert IPv4Address.loopback().is_loopback()


def test_from_integer_matches_octets():
    assert IPv4Address.from_integer(0x7F000001) == IPv4Address.loopback()


@pytest.mark.parametrize("value", [0, 1, 0x7F000001, 0xC0A80001, 0xFFFFFFFF])
def test_integer_round_trip(value):
    assert IPv4Address.from_integer(value).to_integer() == value


def test_documented_dotted_form_round_trips():
    address = IPv4Address.from_string("12.67.190.23")
    assert address.octets == (12, 67, 190, 23)
    assert address.to_string() == "12.67.190.23"


def test_single_integer_form():
    value = 0x0C43BE17
    assert IPv4Address.from_string(str(value)) == IPv4Address.from_integer(value)


@pytest.mark.parametrize(
    "text",
    ["", "256.0.0.0", "1.2.3", "1.2.3.4.5", "a.b.c.d", "1..2.3", "4294967296", "-1", " 1.2.3.4"],
)
def test_invalid_strings(text):
    assert IPv4Address.from_string(text) is None


def test_bytes_round_trip():
    address = IPv4Address((10, 20, 30, 40))
    assert IPv4Address.from_bytes(address.packed) == address
    assert address.packed == bytes([10, 20, 30, 40])


def test_ordering_follows_integer_value():
    values = [0xFFFFFFFF, 0, 0x7F000001, 0x0A000001]
    addresses = sorted(IPv4Address.from_integer(v) for v in values)
    assert [a.to_integer() for a in addresses] == sorted(values)


def test_comparison_operators():
    low = IPv4Address((1, 2, 3, 4))
    high = IPv4Address((1, 2, 3, 5))
    assert low < high and high > low
    assert low <= low and low >= low
    assert low != high


def test_is_loopback_checks_first_octet_only():
    assert IPv4Address((127, 9, 9, 9)).is_loopback()
    assert not IPv4Address((128, 0, 0, 1)).is_loopback()


@pytest.mark.parametrize(
    "octets, expected",
    [
        ((10, 1, 2, 3), True),
        ((172, 16, 0, 1), True),
        ((172, 31, 255, 255), True),
        ((172, 32, 0, 1), False),
        ((8, 8, 8, 8), False),
    ],
)
def test_is_private_network(octets, expected):
    assert IPv4Address(octets).is_private_network() is expected


def test_invalid_octet_rejected():
    with pytest.raises(ValueError):
        IPv4Address((1, 2, 3, 256))
    with pytest.raises(ValueError):
        IPv4Address((1, 2, 3))


def test_invalid_integer_rejected():
    with pytest.raises(ValueError):
        IPv4Address.from_integer(1 << 32)


def test_endpoint_defaults():
    endpoint = IPv4Endpoint()
    assert endpoint.address == IPv4Address()
    assert endpoint.port == 0


def test_endpoint_string_round_trip():
    endpoint = IPv4Endpoint(IPv4Address.loopback(), 8080)
    text = endpoint.to_string()
    assert text.endswith(":8080")
    assert IPv4Endpoint.from_string(text) == endpoint


@pytest.mark.parametrize("text", ["1.2.3.4", "1.2.3.4:", ":80", "1.2.3.4:65536", "1.2.3.4:x", "1.2.3:80"])
def test_endpoint_invalid_strings(text):
    assert IPv4Endpoint.from_string(text) is None


def test_endpoint_ordering_address_then_port():
    a = IPv4Endpoint(IPv4Address((1, 0, 0, 0)), 9)
    b = IPv4Endpoint(IPv4Address((1, 0, 0, 0)), 10)
    c = IPv4Endpoint(IPv4Address((2, 0, 0, 0)), 1)
    assert sorted([c, b, a]) == [a, b, c]


def test_endpoint_port_out_of_range():
    with pytest.raises(ValueError):
        IPv4Endpoint(IPv4Address(), 65536)