"""1:1 NAT mapping of local IP addresses to external ones."""

from __future__ import annotations

import ipaddress
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union

from .candidatetype import CandidateType
from .errors import (
    ExternalMappedIPNotFoundError,
    InvalidNat1To1MappingError,
    UnsupportedNat1To1CandidateTypeError,
)

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def validate_ip_string(ip_str: str) -> tuple[IPAddress, bool]:
    """Parse an IP address; return it with a flag telling whether it is IPv4."""
    if "%" in ip_str:
        raise InvalidNat1To1MappingError()
    try:
        ip = ipaddress.ip_address(ip_str)
    except ValueError as exc:
        raise InvalidNat1To1MappingError() from exc
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        ip = ip.ipv4_mapped
    return ip, isinstance(ip, ipaddress.IPv4Address)


@dataclass
class IPMapping:
    """Local-to-external mapping for one IP family."""

    ip_sole: IPAddress | None = None
    ip_map: dict[str, IPAddress] = field(default_factory=dict)
    valid: bool = False

    def set_sole_ip(self, ip: IPAddress) -> None:
        """Use ip as the only external IP for any local IP of this family."""
        if self.ip_sole is not None or self.ip_map:
            raise InvalidNat1To1MappingError()
        self.ip_sole = ip
        self.valid = True

    def add_ip_mapping(self, local_ip: IPAddress, external_ip: IPAddress) -> None:
        """Map one local IP to one external IP."""
        if self.ip_sole is not None:
            raise InvalidNat1To1MappingError()
        key = str(local_ip)
        if key in self.ip_map:
            raise InvalidNat1To1MappingError()
        self.ip_map[key] = external_ip
        self.valid = True

    def find_external_ip(self, local_ip: IPAddress) -> IPAddress:
        """Return the external IP for local_ip; local_ip itself if unmapped family."""
        if not self.valid:
            return local_ip
        if self.ip_sole is not None:
            return self.ip_sole
        try:
            return self.ip_map[str(local_ip)]
        except KeyError:
            raise ExternalMappedIPNotFoundError() from None


@dataclass
class ExternalIPMapper:
    """Mappings for both IP families, applied to one candidate type."""

    ipv4_mapping: IPMapping = field(default_factory=IPMapping)
    ipv6_mapping: IPMapping = field(default_factory=IPMapping)
    candidate_type: CandidateType = CandidateType.HOST

    def find_external_ip(self, local_ip_str: str) -> IPAddress:
        """Return the external IP mapped for the given local IP string."""
        local_ip, is_ipv4 = validate_ip_string(local_ip_str)
        mapping = self.ipv4_mapping if is_ipv4 else self.ipv6_mapping
        return mapping.find_external_ip(local_ip)


def new_external_ip_mapper(
    candidate_type: CandidateType, ips: Iterable[str] | None
) -> ExternalIPMapper | None:
    """Build a mapper from "ext" or "ext/local" strings; None if ips is empty."""
    ips = list(ips or [])
    if not ips:
        return None
    if candidate_type is CandidateType.UNSPECIFIED:
        candidate_type = CandidateType.HOST
    elif candidate_type not in (CandidateType.HOST, CandidateType.SERVER_REFLEXIVE):
        raise UnsupportedNat1To1CandidateTypeError()

    mapper = ExternalIPMapper(candidate_type=candidate_type)
    for entry in ips:
        parts = entry.split("/")
        if len(parts) > 2:
            raise InvalidNat1To1MappingError()

        external_ip, external_is_ipv4 = validate_ip_string(parts[0])
        mapping = mapper.ipv4_mapping if external_is_ipv4 else mapper.ipv6_mapping
        if len(parts) == 1:
            mapping.set_sole_ip(external_ip)
            continue

        local_ip, local_is_ipv4 = validate_ip_string(parts[1])
        if local_is_ipv4 != external_is_ipv4:
            raise InvalidNat1To1MappingError()
        mapping.add_ip_mapping(local_ip, external_ip)

    return mapper