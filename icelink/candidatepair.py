"""A local and a remote candidate checked together."""

from __future__ import annotations

from dataclasses import dataclass

from icelink.candidates import Candidate
from icelink.enums import CandidatePairState


@dataclass(eq=False)
class CandidatePair:
    """A combination of a local and a remote candidate."""

    local: Candidate
    remote: Candidate
    ice_role_controlling: bool = False
    state: CandidatePairState = CandidatePairState.WAITING
    binding_request_count: int = 0
    nominated: bool = False
    nominate_on_binding_success: bool = False

    def priority(self) -> int:
        """Pair priority per RFC 5245 section 5.7.2."""
        if self.ice_role_controlling:
            g, d = self.local.priority(), self.remote.priority()
        else:
            g, d = self.remote.priority(), self.local.priority()
        # (2**32 - 1) rather than 2**32 keeps the value within 64 bits.
        return (2**32 - 1) * min(g, d) + 2 * max(g, d) + (1 if g > d else 0)

    def equal(self, other: CandidatePair | None) -> bool:
        """True when both pairs join equal candidates."""
        return other is not None and self.local.equal(other.local) and self.remote.equal(other.remote)

    def __str__(self) -> str:
        return (
            f"prio {self.priority()} (local, prio {self.local.priority()}) "
            f"{self.local} <-> {self.remote} (remote, prio {self.remote.priority()})"
        )