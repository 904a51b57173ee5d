"""Candidates as seen by a pair, and candidate pairs with their priority."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .candidatetype import CandidateType
from .errors import ClosedError
from .networktype import NetworkType
from .related_address import CandidateRelatedAddress, related_addresses_equal
from .states import CandidatePairState


@dataclass(eq=False)
class Candidate:
    """An ICE candidate: its type, priority, transport address and socket."""

    candidate_type: CandidateType
    priority: int
    network_type: NetworkType | None = None
    address: str = ""
    port: int = 0
    related_address: CandidateRelatedAddress | None = None
    conn: Any = field(default=None, repr=False)

    def __str__(self) -> str:
        related = str(self.related_address) if self.related_address else ""
        network = str(self.network_type) if self.network_type else ""
        return f"{network} {self.candidate_type} {self.address}:{self.port}{related}"

    def equal(self, other: Candidate | None) -> bool:
        """Whether both candidates describe the same transport address and type."""
        if other is None:
            return False
        return (
            self.network_type == other.network_type
            and self.candidate_type == other.candidate_type
            and self.address == other.address
            and self.port == other.port
            and related_addresses_equal(self.related_address, other.related_address)
        )

    def write_to(self, data: bytes, remote: Candidate) -> int:
        """Send data from this candidate's socket to the remote candidate."""
        if self.conn is None:
            raise ClosedError()
        return self.conn.sendto(data, (remote.address, remote.port))


@dataclass(eq=False)
class CandidatePair:
    """A local and a remote candidate, with check state."""

    local: Candidate
    remote: Candidate
    ice_role_controlling: bool
    state: CandidatePairState = CandidatePairState.WAITING
    nominated: bool = False
    nominate_on_binding_success: bool = False
    binding_request_count: int = 0

    def __str__(self) -> str:
        return (
            f"prio {self.priority()} (local, prio {self.local.priority}) {self.local} "
            f"<-> {self.remote} (remote, prio {self.remote.priority}), "
            f"state: {self.state}, nominated: {str(self.nominated).lower()}, "
            f"nominateOnBindingSuccess: {str(self.nominate_on_binding_success).lower()}"
        )

    def equal(self, other: CandidatePair | None) -> bool:
        """Whether both pairs join equal local and remote candidates."""
        if other is None:
            return False
        return self.local.equal(other.local) and self.remote.equal(other.remote)

    def priority(self) -> int:
        """Pair priority per RFC 5245 section 5.7.2 (2^32-1 keeps it within 64 bits)."""
        if self.ice_role_controlling:
            g, d = self.local.priority, self.remote.priority
        else:
            g, d = self.remote.priority, self.local.priority
        return ((1 << 32) - 1) * min(g, d) + 2 * max(g, d) + (1 if g > d else 0)

    def write(self, data: bytes) -> int:
        """Send data over the pair's local candidate to its remote candidate."""
        return self.local.write_to(data, self.remote)