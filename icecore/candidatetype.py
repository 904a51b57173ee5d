"""Candidate types and their type preferences."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class CandidateType(Enum):
    """Kind of an ICE candidate."""

    UNSPECIFIED = 0
    HOST = 1
    SERVER_REFLEXIVE = 2
    PEER_REFLEXIVE = 3
    RELAY = 4

    def __str__(self) -> str:
        return _NAMES.get(self, "Unknown candidate type")

    def preference(self) -> int:
        """Type preference recommended by RFC 8445 section 5.1.2.2."""
        return _PREFERENCES.get(self, 0)


_NAMES = {
    CandidateType.HOST: "host",
    CandidateType.SERVER_REFLEXIVE: "srflx",
    CandidateType.PEER_REFLEXIVE: "prflx",
    CandidateType.RELAY: "relay",
}

_PREFERENCES = {
    CandidateType.HOST: 126,
    CandidateType.PEER_REFLEXIVE: 110,
    CandidateType.SERVER_REFLEXIVE: 100,
}


def contains_candidate_type(
    candidate_type: CandidateType, candidate_types: Iterable[CandidateType] | None
) -> bool:
    """Return True if candidate_type is in candidate_types (None counts as empty)."""
    if candidate_types is None:
        return False
    return candidate_type in candidate_types