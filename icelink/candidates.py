"""Candidates: the common fields and the server-reflexive and relay kinds."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from icelink.enums import CandidateType, NetworkType, determine_network_type
from icelink.errors import AddressParseError
from icelink.rand import CandidateIDGenerator

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

COMPONENT_RTP = 1
DEFAULT_LOCAL_PREFERENCE = 65535

_ID_GENERATOR = CandidateIDGenerator()


@dataclass
class CandidateRelatedAddress:
    """Transport address related to a candidate, for diagnostics."""

    address: str = ""
    port: int = 0

    def __str__(self) -> str:
        return f" related {self.address}:{self.port}"


@dataclass(eq=False)
class Candidate:
    """Fields shared by every kind of candidate."""

    candidate_type: CandidateType = CandidateType.UNSPECIFIED
    network_type: NetworkType = NetworkType.UDP4
    address: str = ""
    port: int = 0
    component: int = COMPONENT_RTP
    id: str = ""
    foundation_override: str = ""
    priority_override: int = 0
    related_address: Optional[CandidateRelatedAddress] = None
    resolved_addr: Optional[tuple[IPAddress, int]] = None

    def priority(self) -> int:
        """Candidate priority as defined by RFC 5245 section 4.1.2.1."""
        if self.priority_override:
            return self.priority_override
        return (
            (1 << 24) * self.candidate_type.preference()
            + (1 << 8) * DEFAULT_LOCAL_PREFERENCE
            + (256 - self.component)
        )

    def equal(self, other: Candidate | None) -> bool:
        """True when both candidates describe the same transport address."""
        return (
            other is not None
            and self.network_type == other.network_type
            and self.candidate_type == other.candidate_type
            and self.address == other.address
            and self.port == other.port
            and self.related_address == other.related_address
        )

    def __str__(self) -> str:
        host = f"[{self.address}]" if ":" in self.address else self.address
        related = str(self.related_address) if self.related_address is not None else ""
        return f"{self.network_type} {self.candidate_type} {host}:{self.port}{related}"


@dataclass(eq=False)
class CandidateServerReflexive(Candidate):
    """A candidate whose address was learned from a STUN server."""

    candidate_type: CandidateType = CandidateType.SERVER_REFLEXIVE


@dataclass(eq=False)
class CandidateRelay(Candidate):
    """A candidate allocated on a TURN relay."""

    candidate_type: CandidateType = CandidateType.RELAY
    relay_protocol: str = ""
    on_close: Optional[Callable[[], None]] = field(default=None, repr=False)

    def close(self) -> None:
        """Run the close callback once; its exception propagates."""
        on_close, self.on_close = self.on_close, None
        if on_close is not None:
            on_close()


@dataclass
class CandidateServerReflexiveConfig:
    """Settings for a new server reflexive candidate."""

    network: str = ""
    address: str = ""
    port: int = 0
    component: int = 0
    priority: int = 0
    foundation: str = ""
    rel_addr: str = ""
    rel_port: int = 0
    candidate_id: str = ""


@dataclass
class CandidateRelayConfig:
    """Settings for a new relay candidate."""

    network: str = ""
    address: str = ""
    port: int = 0
    component: int = 0
    priority: int = 0
    foundation: str = ""
    rel_addr: str = ""
    rel_port: int = 0
    relay_protocol: str = ""
    on_close: Optional[Callable[[], None]] = None
    candidate_id: str = ""


def _parse_ip(address: str) -> IPAddress:
    if "%" in address:
        raise AddressParseError()
    try:
        return ipaddress.ip_address(address)
    except ValueError:
        raise AddressParseError() from None


def _common_fields(config: CandidateServerReflexiveConfig | CandidateRelayConfig) -> dict:
    ip = _parse_ip(config.address)
    return {
        "id": config.candidate_id or _ID_GENERATOR.generate(),
        "network_type": determine_network_type(config.network, ip),
        "address": config.address,
        "port": config.port,
        "resolved_addr": (ip, config.port),
        "component": config.component,
        "foundation_override": config.foundation,
        "priority_override": config.priority,
        "related_address": CandidateRelatedAddress(config.rel_addr, config.rel_port),
    }


def new_candidate_server_reflexive(config: CandidateServerReflexiveConfig) -> CandidateServerReflexive:
    """Create a server reflexive candidate from its config."""
    return CandidateServerReflexive(**_common_fields(config))


def new_candidate_relay(config: CandidateRelayConfig) -> CandidateRelay:
    """Create a relay candidate from its config."""
    return CandidateRelay(
        **_common_fields(config),
        relay_protocol=config.relay_protocol,
        on_close=config.on_close,
    )