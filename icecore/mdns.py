"""Multicast DNS modes and host name helpers."""

from __future__ import annotations

import uuid
from enum import Enum

from .errors import InvalidMulticastDNSHostNameError

LOCAL_SUFFIX = ".local"


class MulticastDNSMode(Enum):
    """How an agent treats mDNS candidates."""

    DISABLED = 1
    """Remote mDNS candidates are discarded; local host candidates use IPs."""

    QUERY_ONLY = 2
    """Remote mDNS candidates are accepted; local host candidates use IPs."""

    QUERY_AND_GATHER = 3
    """Remote mDNS candidates are accepted; local host candidates use mDNS."""


def generate_multicast_dns_name() -> str:
    """Return a random version 4 UUID followed by ".local"."""
    return str(uuid.uuid4()) + LOCAL_SUFFIX


def validate_multicast_dns_host_name(name: str) -> str:
    """Check that name ends with ".local" and contains a single dot; return it."""
    if not name.endswith(LOCAL_SUFFIX) or name.count(".") != 1:
        raise InvalidMulticastDNSHostNameError()
    return name