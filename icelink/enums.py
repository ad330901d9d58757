"""Enumerations describing ICE candidates, networks, states and roles."""

from __future__ import annotations

import ipaddress
from enum import IntEnum
from typing import Iterable, Union

from icelink.errors import AddressParseError, NetworkTypeError, UnknownRoleError

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

UDP = "udp"
TCP = "tcp"
_UNKNOWN = "Unknown"


class CandidateType(IntEnum):
    """The type of an ICE candidate."""

    UNSPECIFIED = 0
    HOST = 1
    SERVER_REFLEXIVE = 2
    PEER_REFLEXIVE = 3
    RELAY = 4

    def __str__(self) -> str:
        return _CANDIDATE_TYPE_NAMES.get(self, "Unknown candidate type")

    def preference(self) -> int:
        """Type preference as recommended by RFC 5245 section 4.1.2.2."""
        return _CANDIDATE_TYPE_PREFERENCES.get(self, 0)


_CANDIDATE_TYPE_NAMES = {
    CandidateType.HOST: "host",
    CandidateType.SERVER_REFLEXIVE: "srflx",
    CandidateType.PEER_REFLEXIVE: "prflx",
    CandidateType.RELAY: "relay",
}

_CANDIDATE_TYPE_PREFERENCES = {
    CandidateType.HOST: 126,
    CandidateType.PEER_REFLEXIVE: 110,
    CandidateType.SERVER_REFLEXIVE: 100,
}


def contains_candidate_type(
    candidate_type: CandidateType, candidate_types: Iterable[CandidateType] | None
) -> bool:
    """Return True when candidate_type is among candidate_types."""
    if candidate_types is None:
        return False
    return candidate_type in candidate_types


class CandidatePairState(IntEnum):
    """State of a candidate pair's connectivity check."""

    WAITING = 1
    IN_PROGRESS = 2
    FAILED = 3
    SUCCEEDED = 4

    def __str__(self) -> str:
        return {
            CandidatePairState.WAITING: "waiting",
            CandidatePairState.IN_PROGRESS: "in-progress",
            CandidatePairState.FAILED: "failed",
            CandidatePairState.SUCCEEDED: "succeeded",
        }.get(self, "Unknown candidate pair state")


class ConnectionState(IntEnum):
    """State of an ICE connection."""

    UNKNOWN = 0
    NEW = 1
    CHECKING = 2
    CONNECTED = 3
    COMPLETED = 4
    FAILED = 5
    DISCONNECTED = 6
    CLOSED = 7

    def __str__(self) -> str:
        if self is ConnectionState.UNKNOWN:
            return "Invalid"
        return self.name.capitalize()


class GatheringState(IntEnum):
    """State of the candidate gathering process."""

    UNKNOWN = 0
    NEW = 1
    GATHERING = 2
    COMPLETE = 3

    def __str__(self) -> str:
        if self is GatheringState.UNKNOWN:
            return _UNKNOWN
        return self.name.lower()


class Role(IntEnum):
    """ICE agent role."""

    CONTROLLING = 0
    CONTROLLED = 1

    def __str__(self) -> str:
        return self.name.lower()


def parse_role(text: str | bytes) -> Role:
    """Parse "controlling" or "controlled" into a Role."""
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("utf-8", errors="replace")
    if text == "controlling":
        return Role.CONTROLLING
    if text == "controlled":
        return Role.CONTROLLED
    raise UnknownRoleError(f'unknown role "{text}"')


class NetworkType(IntEnum):
    """Transport and IP family of a candidate."""

    UDP4 = 1
    UDP6 = 2
    TCP4 = 3
    TCP6 = 4

    def __str__(self) -> str:
        return self.name.lower()

    def is_udp(self) -> bool:
        return self in (NetworkType.UDP4, NetworkType.UDP6)

    def is_tcp(self) -> bool:
        return self in (NetworkType.TCP4, NetworkType.TCP6)

    def network_short(self) -> str:
        """Return "udp" or "tcp"."""
        return UDP if self.is_udp() else TCP

    def is_reliable(self) -> bool:
        return self.is_tcp()

    def is_ipv4(self) -> bool:
        return self in (NetworkType.UDP4, NetworkType.TCP4)

    def is_ipv6(self) -> bool:
        return self in (NetworkType.UDP6, NetworkType.TCP6)


def supported_network_types() -> list[NetworkType]:
    """All network types, in preference order."""
    return [NetworkType.UDP4, NetworkType.UDP6, NetworkType.TCP4, NetworkType.TCP6]


def _ip_is_v4(ip: IPAddress | str | None) -> bool:
    if ip is None:
        return False
    if isinstance(ip, str):
        if "%" in ip:
            raise AddressParseError()
        try:
            ip = ipaddress.ip_address(ip)
        except ValueError:
            raise AddressParseError() from None
    if isinstance(ip, ipaddress.IPv6Address):
        return ip.ipv4_mapped is not None
    return True


def determine_network_type(network: str, ip: IPAddress | str | None) -> NetworkType:
    """Choose the network type from a short network name and an IP address."""
    ipv4 = _ip_is_v4(ip)
    lowered = network.lower()
    if lowered.startswith(UDP):
        return NetworkType.UDP4 if ipv4 else NetworkType.UDP6
    if lowered.startswith(TCP):
        return NetworkType.TCP4 if ipv4 else NetworkType.TCP6
    raise NetworkTypeError(f"{NetworkTypeError.default_message} from {network} {ip}")