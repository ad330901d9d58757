"""Random identifiers: candidate IDs, ICE credentials and mDNS host names."""

from __future__ import annotations

import random
import secrets
import threading
import uuid
from enum import IntEnum

RUNES_ALPHA = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
RUNES_DIGIT = "0123456789"
RUNES_CANDIDATE_ID_FOUNDATION = RUNES_ALPHA + RUNES_DIGIT + "+/"

LEN_UFRAG = 16
LEN_PWD = 32
LEN_CANDIDATE_FOUNDATION = 32


class CandidateIDGenerator:
    """Generates candidate IDs; they are shared with the peer and need not be secret."""

    def __init__(self, rng: random.Random | None = None) -> None:
        # random.Random() seeds itself from the operating system's entropy source.
        self._rng = rng if rng is not None else random.Random()
        self._lock = threading.Lock()

    def generate(self) -> str:
        """Return an ID of the form "candidate:" followed by 32 ice-chars."""
        with self._lock:
            chars = self._rng.choices(RUNES_CANDIDATE_ID_FOUNDATION, k=LEN_CANDIDATE_FOUNDATION)
        return "candidate:" + "".join(chars)


def _crypto_random_string(length: int, alphabet: str) -> str:
    return "".join(secrets.choice(alphabet) for _ in range(length))


def generate_pwd() -> str:
    """Generate an ICE password from a cryptographic source."""
    return _crypto_random_string(LEN_PWD, RUNES_ALPHA)


def generate_ufrag() -> str:
    """Generate an ICE username fragment from a cryptographic source."""
    return _crypto_random_string(LEN_UFRAG, RUNES_ALPHA)


class MulticastDNSMode(IntEnum):
    """How an agent treats mDNS candidates."""

    DISABLED = 1
    QUERY_ONLY = 2
    QUERY_AND_GATHER = 3


def generate_multicast_dns_name() -> str:
    """Return a version 4 UUID followed by ".local"."""
    return f"{uuid.uuid4()}.local"