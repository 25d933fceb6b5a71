"""IPv4 addresses and IPv4 end-points (address plus port)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

_MAX_PORT = 0xFFFF


def _parse_decimal(text: str, limit: int) -> Optional[int]:
    """Parse a non-empty run of ASCII decimal digits whose value is below ``limit``."""
    if not text or not text.isascii() or not text.isdigit():
        return None
    value = int(text)
    return value if value < limit else None


@dataclass(frozen=True, order=True)
class IPv4Address:
    """An IPv4 address held as four octets, most significant first.

    The default value is the unspecified address ``0.0.0.0``.  Addresses
    order by their 32-bit integer value.
    """

    octets: tuple[int, int, int, int] = (0, 0, 0, 0)

    def __post_init__(self) -> None:
        octets = tuple(self.octets)
        if len(octets) != 4:
            raise ValueError(f"an IPv4 address has 4 octets, got {len(octets)}")
        for octet in octets:
            if not isinstance(octet, int) or not 0 <= octet <= 0xFF:
                raise ValueError(f"octet out of range: {octet!r}")
        object.__setattr__(self, "octets", octets)

    @classmethod
    def from_integer(cls, value: int) -> IPv4Address:
        """Build an address from its 32-bit integer value."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"IPv4 integer out of range: {value!r}")
        return cls(tuple(value.to_bytes(4, "big")))

    @classmethod
    def from_bytes(cls, data: bytes) -> IPv4Address:
        """Build an address from four bytes in network order."""
        return cls(tuple(bytes(data)))

    @classmethod
    def loopback(cls) -> IPv4Address:
        """The loopback address ``127.0.0.1``."""
        return cls((127, 0, 0, 1))

    @classmethod
    def from_string(cls, text: str) -> Optional[IPv4Address]:
        """Parse ``"n.n.n.n"`` (each n in [0, 255]) or a single integer in [0, 2**32).

        Returns ``None`` if the text is not an IPv4 address.
        """
        if "." not in text:
            value = _parse_decimal(text, 1 << 32)
            return None if value is None else cls.from_integer(value)
        pieces = text.split(".")
        if len(pieces) != 4:
            return None
        octets = [_parse_decimal(piece, 256) for piece in pieces]
        if any(octet is None for octet in octets):
            return None
        return cls(tuple(octets))

    @property
    def packed(self) -> bytes:
        """The four address bytes in network order."""
        return bytes(self.octets)

    def to_integer(self) -> int:
        """The address as a 32-bit unsigned integer."""
        return int.from_bytes(self.packed, "big")

    def is_loopback(self) -> bool:
        """True for any address in ``127.0.0.0/8``."""
        return self.octets[0] == 127

    def is_private_network(self) -> bool:
        """True for addresses in the private ranges recognised by this library."""
        first, second, third, _ = self.octets
        return (
            first == 10
            or (first == 172 and (second & 0xF0) == 0x10)
            or (first == 192 and third == 168)
        )

    def to_string(self) -> str:
        """Dotted decimal notation, e.g. ``"12.67.190.23"``."""
        return ".".join(str(octet) for octet in self.octets)

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True, order=True)
class IPv4Endpoint:
    """An IPv4 address and port; ``0.0.0.0:0`` by default.

    End-points order by address, then by port.
    """

    address: IPv4Address = IPv4Address()
    port: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.address, IPv4Address):
            raise TypeError("address must be an IPv4Address")
        if not isinstance(self.port, int) or not 0 <= self.port <= _MAX_PORT:
            raise ValueError(f"port out of range: {self.port!r}")

    @classmethod
    def from_string(cls, text: str) -> Optional[IPv4Endpoint]:
        """Parse ``"address:port"``; returns ``None`` if the text is not valid."""
        host, separator, port_text = text.rpartition(":")
        if not separator:
            return None
        address = IPv4Address.from_string(host)
        port = _parse_decimal(port_text, _MAX_PORT + 1)
        if address is None or port is None:
            return None
        return cls(address, port)

    def to_string(self) -> str:
        """The end-point as ``"address:port"``."""
        return f"{self.address.to_string()}:{self.port}"

    def __str__(self) -> str:
        return self.to_string()