"""IPv6 addresses and IPv6 end-points (address plus port)."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from string import hexdigits
from typing import Optional, Sequence

from lazyco.ipv4 import IPv4Address

_MAX_PORT = 0xFFFF
_MASK64 = (1 << 64) - 1


def _parse_hex_groups(groups: Sequence[str], allow_ipv4_tail: bool) -> Optional[list[int]]:
    """Parse colon-separated hex groups; the last may be a dotted IPv4 address."""
    if not groups:
        return []
    *leading, last = groups
    parts: list[int] = []
    for group in leading:
        if not (1 <= len(group) <= 4 and all(c in hexdigits for c in group)):
            return None
        parts.append(int(group, 16))
    if allow_ipv4_tail and "." in last:
        embedded = IPv4Address.from_string(last)
        if embedded is None:
            return None
        value = embedded.to_integer()
        parts.extend((value >> 16, value & 0xFFFF))
    elif 1 <= len(last) <= 4 and all(c in hexdigits for c in last):
        parts.append(int(last, 16))
    else:
        return None
    return parts


@dataclass(frozen=True, order=True)
class IPv6Address:
    """An IPv6 address held as 16 bytes in network order.

    The default value is the unspecified address ``::``.  Addresses order
    lexicographically by their bytes.
    """

    packed: bytes = bytes(16)

    def __post_init__(self) -> None:
        data = bytes(self.packed)
        if len(data) != 16:
            raise ValueError(f"an IPv6 address has 16 bytes, got {len(data)}")
        object.__setattr__(self, "packed", data)

    @classmethod
    def from_prefix(cls, subnet_prefix: int, interface_identifier: int) -> IPv6Address:
        """Build an address from its 64-bit subnet prefix and interface identifier."""
        for value in (subnet_prefix, interface_identifier):
            if not 0 <= value <= _MASK64:
                raise ValueError(f"64-bit value out of range: {value!r}")
        return cls(subnet_prefix.to_bytes(8, "big") + interface_identifier.to_bytes(8, "big"))

    @classmethod
    def from_parts(cls, *args) -> IPv6Address:
        """Build an address from eight 16-bit parts, given separately or as one sequence."""
        parts = tuple(args[0]) if len(args) == 1 else args
        if len(parts) != 8:
            raise ValueError(f"an IPv6 address has 8 parts, got {len(parts)}")
        for part in parts:
            if not isinstance(part, int) or not 0 <= part <= 0xFFFF:
                raise ValueError(f"part out of range: {part!r}")
        return cls(b"".join(part.to_bytes(2, "big") for part in parts))

    @classmethod
    def from_bytes(cls, data: bytes) -> IPv6Address:
        """Build an address from 16 bytes in network order."""
        return cls(bytes(data))

    @classmethod
    def unspecified(cls) -> IPv6Address:
        """The unspecified address ``::``."""
        return cls()

    @classmethod
    def loopback(cls) -> IPv6Address:
        """The loopback address ``::1``."""
        return cls.from_parts(0, 0, 0, 0, 0, 0, 0, 1)

    @classmethod
    def from_string(cls, text: str) -> Optional[IPv6Address]:
        """Parse the textual form of an IPv6 address.

        Accepts hex groups separated by ``:``, at most one ``::`` standing for
        one or more zero groups, and an optional trailing dotted IPv4 address.
        Returns ``None`` if the text is not an IPv6 address.
        """
        if not text.isascii() or text.count("::") > 1 or ":::" in text:
            return None
        head, contracted, tail = text.partition("::")
        if contracted:
            head_parts = _parse_hex_groups(head.split(":") if head else [], False)
            tail_parts = _parse_hex_groups(tail.split(":") if tail else [], True)
            if head_parts is None or tail_parts is None:
                return None
            missing = 8 - len(head_parts) - len(tail_parts)
            if missing < 1:
                return None
            parts = head_parts + [0] * missing + tail_parts
        else:
            parts = _parse_hex_groups(text.split(":"), True)
            if parts is None or len(parts) != 8:
                return None
        return cls.from_parts(parts)

    @property
    def parts(self) -> tuple[int, ...]:
        """The eight 16-bit parts of the address."""
        data = self.packed
        return tuple(int.from_bytes(data[i : i + 2], "big") for i in range(0, 16, 2))

    def subnet_prefix(self) -> int:
        """The upper 64 bits of the address."""
        return int.from_bytes(self.packed[:8], "big")

    def interface_identifier(self) -> int:
        """The lower 64 bits of the address."""
        return int.from_bytes(self.packed[8:], "big")

    def to_string(self) -> str:
        """The contracted form: lower-case hex parts, longest zero run as ``::``."""
        parts = self.parts
        best_start, best_length = -1, 0
        position = 0
        for is_zero, run in groupby(parts, key=lambda part: part == 0):
            length = len(list(run))
            if is_zero and length > best_length:
                best_start, best_length = position, length
            position += length
        if best_length == 0:
            return ":".join(f"{part:x}" for part in parts)
        left = ":".join(f"{part:x}" for part in parts[:best_start])
        right = ":".join(f"{part:x}" for part in parts[best_start + best_length :])
        return f"{left}::{right}"

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True, order=True)
class IPv6Endpoint:
    """An IPv6 address and port; ``[::]:0`` by default.

    End-points order by address, then by port.
    """

    address: IPv6Address = IPv6Address()
    port: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.address, IPv6Address):
            raise TypeError("address must be an IPv6Address")
        if not isinstance(self.port, int) or not 0 <= self.port <= _MAX_PORT:
            raise ValueError(f"port out of range: {self.port!r}")

    @classmethod
    def from_string(cls, text: str) -> Optional[IPv6Endpoint]:
        """Parse ``"[address]:port"``; returns ``None`` if the text is not valid."""
        if not text.startswith("["):
            return None
        host, bracket, rest = text[1:].partition("]")
        if not bracket or not rest.startswith(":"):
            return None
        port_text = rest[1:]
        if not port_text or not port_text.isascii() or not port_text.isdigit():
            return None
        port = int(port_text)
        address = IPv6Address.from_string(host)
        if address is None or port > _MAX_PORT:
            return None
        return cls(address, port)

    def to_string(self) -> str:
        """The end-point as ``"[address]:port"``."""
        return f"[{self.address.to_string()}]:{self.port}"

    def __str__(self) -> str:
        return self.to_string()