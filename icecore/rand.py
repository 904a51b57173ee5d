"""Random identifiers and credentials for ICE agents."""

from __future__ import annotations

import random
import secrets
import threading

RUNES_ALPHA = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
RUNES_DIGIT = "0123456789"
RUNES_CANDIDATE_ID_FOUNDATION = RUNES_ALPHA + RUNES_DIGIT + "+/"

LEN_UFRAG = 16
LEN_PWD = 32
LEN_CANDIDATE_ID = 32
CANDIDATE_ID_PREFIX = "candidate:"


class CandidateIDGenerator:
    """Non-cryptographic generator of candidate IDs, seeded from a secure source."""

    def __init__(self) -> None:
        self._random = random.Random(secrets.randbits(64))
        self._lock = threading.Lock()

    def generate(self) -> str:
        """Return "candidate:" followed by 32 ice-chars (RFC 5245 section 15.1)."""
        with self._lock:
            body = "".join(
                self._random.choices(RUNES_CANDIDATE_ID_FOUNDATION, k=LEN_CANDIDATE_ID)
            )
        return CANDIDATE_ID_PREFIX + body


def _crypto_random_string(length: int, runes: str) -> str:
    return "".join(secrets.choice(runes) for _ in range(length))


def generate_pwd() -> str:
    """Generate an ICE password from a cryptographic source."""
    return _crypto_random_string(LEN_PWD, RUNES_ALPHA)


def generate_ufrag() -> str:
    """Generate an ICE username fragment from a cryptographic source."""
    return _crypto_random_string(LEN_UFRAG, RUNES_ALPHA)