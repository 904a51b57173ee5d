"""Statistics records for candidates and candidate pairs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .candidatetype import CandidateType
from .networktype import NetworkType
from .states import CandidatePairState


@dataclass
class CandidatePairStats:
    """ICE candidate pair statistics."""

    timestamp: Optional[datetime] = None
    local_candidate_id: str = ""
    remote_candidate_id: str = ""
    state: Optional[CandidatePairState] = None
    nominated: bool = False
    packets_sent: int = 0
    packets_received: int = 0
    bytes_sent: int = 0
    bytes_received: int = 0
    last_packet_sent_timestamp: Optional[datetime] = None
    last_packet_received_timestamp: Optional[datetime] = None
    first_request_timestamp: Optional[datetime] = None
    last_request_timestamp: Optional[datetime] = None
    last_response_timestamp: Optional[datetime] = None
    total_round_trip_time: float = 0.0
    current_round_trip_time: float = 0.0
    available_outgoing_bitrate: float = 0.0
    available_incoming_bitrate: float = 0.0
    circuit_breaker_trigger_count: int = 0
    requests_received: int = 0
    requests_sent: int = 0
    responses_received: int = 0
    responses_sent: int = 0
    retransmissions_received: int = 0
    retransmissions_sent: int = 0
    consent_requests_sent: int = 0
    consent_expired_timestamp: Optional[datetime] = None


@dataclass
class CandidateStats:
    """ICE candidate statistics."""

    timestamp: Optional[datetime] = None
    id: str = ""
    network_type: Optional[NetworkType] = None
    ip: str = ""
    port: int = 0
    candidate_type: CandidateType = CandidateType.UNSPECIFIED
    priority: int = 0
    url: str = ""
    relay_protocol: str = ""
    deleted: bool = False