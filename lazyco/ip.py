"""Family-agnostic IP addresses and end-points (either IPv4 or IPv6)."""

from __future__ import annotations

from functools import total_ordering
from typing import Optional, Union

from lazyco.ipv4 import IPv4Address, IPv4Endpoint
from lazyco.ipv6 import IPv6Address, IPv6Endpoint

AnyAddress = Union[IPv4Address, IPv6Address]
AnyEndpoint = Union[IPv4Endpoint, IPv6Endpoint]


@total_ordering
class IPAddress:
    """An IPv4 or IPv6 address.

    The default value is the IPv4 address ``0.0.0.0``.  IPv4 addresses sort
    before IPv6 addresses; addresses of different families are never equal.
    """

    __slots__ = ("_address",)

    def __init__(self, address: Optional[AnyAddress] = None) -> None:
        if address is None:
            address = IPv4Address()
        if not isinstance(address, (IPv4Address, IPv6Address)):
            raise TypeError("address must be an IPv4Address or an IPv6Address")
        self._address = address

    def is_ipv4(self) -> bool:
        """True if this holds an IPv4 address."""
        return isinstance(self._address, IPv4Address)

    def is_ipv6(self) -> bool:
        """True if this holds an IPv6 address."""
        return isinstance(self._address, IPv6Address)

    def to_ipv4(self) -> IPv4Address:
        """The IPv4 address held; raises ValueError for an IPv6 address."""
        if not self.is_ipv4():
            raise ValueError("not an IPv4 address")
        return self._address

    def to_ipv6(self) -> IPv6Address:
        """The IPv6 address held; raises ValueError for an IPv4 address."""
        if not self.is_ipv6():
            raise ValueError("not an IPv6 address")
        return self._address

    def bytes(self) -> bytes:
        """The address bytes in network order (4 or 16 of them)."""
        return self._address.packed

    def to_string(self) -> str:
        """The textual form of the address held."""
        return self._address.to_string()

    @classmethod
    def from_string(cls, text: str) -> Optional[IPAddress]:
        """Parse an IPv4 or IPv6 address; returns ``None`` if neither matches."""
        ipv4 = IPv4Address.from_string(text)
        if ipv4 is not None:
            return cls(ipv4)
        ipv6 = IPv6Address.from_string(text)
        if ipv6 is not None:
            return cls(ipv6)
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IPAddress):
            return NotImplemented
        return type(self._address) is type(other._address) and self._address == other._address

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IPAddress):
            return NotImplemented
        if self.is_ipv4():
            return not other.is_ipv4() or self._address < other._address
        return other.is_ipv6() and self._address < other._address

    def __hash__(self) -> int:
        return hash((type(self._address), self._address))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"IPAddress({self._address!r})"


@total_ordering
class IPEndpoint:
    """An IPv4 or IPv6 end-point.

    The default value is the IPv4 end-point ``0.0.0.0:0``.  IPv4 end-points
    sort before IPv6 end-points.
    """

    __slots__ = ("_endpoint",)

    def __init__(self, endpoint: Optional[AnyEndpoint] = None) -> None:
        if endpoint is None:
            endpoint = IPv4Endpoint()
        if not isinstance(endpoint, (IPv4Endpoint, IPv6Endpoint)):
            raise TypeError("endpoint must be an IPv4Endpoint or an IPv6Endpoint")
        self._endpoint = endpoint

    def is_ipv4(self) -> bool:
        """True if this holds an IPv4 end-point."""
        return isinstance(self._endpoint, IPv4Endpoint)

    def is_ipv6(self) -> bool:
        """True if this holds an IPv6 end-point."""
        return isinstance(self._endpoint, IPv6Endpoint)

    def to_ipv4(self) -> IPv4Endpoint:
        """The IPv4 end-point held; raises ValueError for an IPv6 end-point."""
        if not self.is_ipv4():
            raise ValueError("not an IPv4 end-point")
        return self._endpoint

    def to_ipv6(self) -> IPv6Endpoint:
        """The IPv6 end-point held; raises ValueError for an IPv4 end-point."""
        if not self.is_ipv6():
            raise ValueError("not an IPv6 end-point")
        return self._endpoint

    def address(self) -> IPAddress:
        """The address part of the end-point."""
        return IPAddress(self._endpoint.address)

    def port(self) -> int:
        """The port number of the end-point."""
        return self._endpoint.port

    def to_string(self) -> str:
        """The textual form of the end-point held."""
        return self._endpoint.to_string()

    @classmethod
    def from_string(cls, text: str) -> Optional[IPEndpoint]:
        """Parse an IPv4 or IPv6 end-point; returns ``None`` if neither matches."""
        ipv4 = IPv4Endpoint.from_string(text)
        if ipv4 is not None:
            return cls(ipv4)
        ipv6 = IPv6Endpoint.from_string(text)
        if ipv6 is not None:
            return cls(ipv6)
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IPEndpoint):
            return NotImplemented
        return type(self._endpoint) is type(other._endpoint) and self._endpoint == other._endpoint

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IPEndpoint):
            return NotImplemented
        if self.is_ipv4():
            return not other.is_ipv4() or self._endpoint < other._endpoint
        return other.is_ipv6() and self._endpoint < other._endpoint

    def __hash__(self) -> int:
        return hash((type(self._endpoint), self._endpoint))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"IPEndpoint({self._endpoint!r})"