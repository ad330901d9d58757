"""Socket-free ICE building blocks: enums, NAT IP mapping, STUN attributes, candidates and pairs."""

__version__ = "0.1.0"

__all__ = [
    "candidatepair",
    "candidates",
    "enums",
    "errors",
    "ipmapper",
    "rand",
    "stats",
    "stun",
]