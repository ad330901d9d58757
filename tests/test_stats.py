from dataclasses import asdict, replace
from datetime import datetime, timezone

from icelink.enums import CandidatePairState, CandidateType, NetworkType
from icelink.stats import CandidatePairStats, CandidateStats


def test_pair_stats_defaults_are_empty():
    stats = CandidatePairStats()
    assert stats.packets_sent == 0
    assert stats.bytes_received == 0
    assert stats.timestamp is None
    assert stats.state is None
    assert stats.nominated is False


def test_pair_stats_holds_values():
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    stats = CandidatePairStats(
        timestamp=now,
        local_candidate_id="candidate:local",
        remote_candidate_id="candidate:remote",
        state=CandidatePairState.SUCCEEDED,
        requests_sent=3,
    )
    data = asdict(stats)
    assert data["timestamp"] == now
    assert data["state"] is CandidatePairState.SUCCEEDED
    assert data["requests_sent"] == 3
    assert CandidatePairStats(**data) == stats


def test_pair_stats_replace_keeps_other_fields():
    stats = CandidatePairStats(local_candidate_id="candidate:local", bytes_sent=10)
    updated = replace(stats, bytes_sent=20)
    assert updated.bytes_sent == 20
    assert updated.local_candidate_id == "candidate:local"
    assert stats.bytes_sent == 10


def test_candidate_stats_round_trip():
    stats = CandidateStats(
        id="candidate:abc",
        network_type=NetworkType.UDP4,
        ip="10.0.0.1",
        port=5000,
        candidate_type=CandidateType.RELAY,
        relay_protocol="udp",
    )
    assert CandidateStats(**asdict(stats)) == stats
    assert stats.deleted is False
    assert str(stats.candidate_type) == "relay"