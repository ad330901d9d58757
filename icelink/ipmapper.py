"""1:1 NAT mapping from local IP addresses to external ones."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from typing import Iterable, Union

from icelink.enums import CandidateType
from icelink.errors import (
    ExternalMappedIPNotFoundError,
    InvalidNAT1To1IPMappingError,
    UnsupportedNAT1To1IPCandidateTypeError,
)

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def validate_ip_string(ip_str: str) -> tuple[IPAddress, bool]:
    """Parse an IP address, returning it and whether it is IPv4."""
    if "%" in ip_str:
        raise InvalidNAT1To1IPMappingError()
    try:
        ip = ipaddress.ip_address(ip_str)
    except ValueError:
        raise InvalidNAT1To1IPMappingError() from None
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        ip = ip.ipv4_mapped
    return ip, ip.version == 4


@dataclass
class IPMapping:
    """Local-to-external mapping for one IP family."""

    ip_sole: IPAddress | None = None
    ip_map: dict[str, IPAddress] = field(default_factory=dict)

    def set_sole_ip(self, ip: IPAddress) -> None:
        """Use ip as the external address for every local address."""
        if self.ip_sole is not None or self.ip_map:
            raise InvalidNAT1To1IPMappingError()
        self.ip_sole = ip

    def add_ip_mapping(self, loc_ip: IPAddress, ext_ip: IPAddress) -> None:
        """Map one local address to one external address."""
        if self.ip_sole is not None:
            raise InvalidNAT1To1IPMappingError()
        key = str(loc_ip)
        if key in self.ip_map:
            raise InvalidNAT1To1IPMappingError()
        self.ip_map[key] = ext_ip

    def find_external_ip(self, loc_ip: IPAddress) -> IPAddress:
        """Return the external address mapped for loc_ip."""
        if self.ip_sole is not None:
            return self.ip_sole
        try:
            return self.ip_map[str(loc_ip)]
        except KeyError:
            raise ExternalMappedIPNotFoundError() from None


@dataclass
class ExternalIPMapper:
    """External IP mappings for IPv4 and IPv6, applied to one candidate type."""

    candidate_type: CandidateType = CandidateType.HOST
    ipv4_mapping: IPMapping = field(default_factory=IPMapping)
    ipv6_mapping: IPMapping = field(default_factory=IPMapping)

    def find_external_ip(self, local_ip_str: str) -> IPAddress:
        """Return the external address for a local address given as text."""
        loc_ip, is_ipv4 = validate_ip_string(local_ip_str)
        mapping = self.ipv4_mapping if is_ipv4 else self.ipv6_mapping
        return mapping.find_external_ip(loc_ip)


def new_external_ip_mapper(
    candidate_type: CandidateType, ips: Iterable[str] | None
) -> ExternalIPMapper | None:
    """Build a mapper from "ext" or "ext/local" strings; None when ips is empty."""
    ips = list(ips or [])
    if not ips:
        return None
    if candidate_type == CandidateType.UNSPECIFIED:
        candidate_type = CandidateType.HOST
    elif candidate_type not in (CandidateType.HOST, CandidateType.SERVER_REFLEXIVE):
        raise UnsupportedNAT1To1IPCandidateTypeError()

    mapper = ExternalIPMapper(candidate_type=candidate_type)
    for entry in ips:
        parts = entry.split("/")
        if len(parts) > 2:
            raise InvalidNAT1To1IPMappingError()

        ext_ip, ext_is_v4 = validate_ip_string(parts[0])
        family = mapper.ipv4_mapping if ext_is_v4 else mapper.ipv6_mapping
        if len(parts) == 1:
            family.set_sole_ip(ext_ip)
            continue

        loc_ip, loc_is_v4 = validate_ip_string(parts[1])
        if ext_is_v4 != loc_is_v4:
            raise InvalidNAT1To1IPMappingError()
        family.add_ip_mapping(loc_ip, ext_ip)

    return mapper