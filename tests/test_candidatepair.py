import pytest

from icelink.candidatepair import CandidatePair
from icelink.candidates import COMPONENT_RTP, Candidate, CandidateRelay, CandidateServerReflexive
from icelink.enums import CandidatePairState, CandidateType


def host_candidate():
    return Candidate(candidate_type=CandidateType.HOST, component=COMPONENT_RTP)


def prflx_candidate():
    return Candidate(candidate_type=CandidateType.PEER_REFLEXIVE, component=COMPONENT_RTP)


def srflx_candidate():
    return CandidateServerReflexive(component=COMPONENT_RTP)


def relay_candidate():
    return CandidateRelay(component=COMPONENT_RTP)


@pytest.mark.parametrize(
    "remote_factory, controlling, want",
    [
        (host_candidate, False, 9151314440652587007),
        (host_candidate, True, 9151314440652587007),
        (prflx_candidate, True, 7998392936314175488),
        (prflx_candidate, False, 7998392936314175487),
        (srflx_candidate, True, 7277816996102668288),
        (srflx_candidate, False, 7277816996102668287),
        (relay_candidate, True, 72057593987596288),
        (relay_candidate, False, 72057593987596287),
    ],
)
def test_candidate_pair_priority(remote_factory, controlling, want):
    pair = CandidatePair(host_candidate(), remote_factory(), controlling)
    assert pair.priority() == want


def test_candidate_pair_equality():
    pair_a = CandidatePair(host_candidate(), srflx_candidate(), True)
    pair_b = CandidatePair(host_candidate(), srflx_candidate(), False)
    assert pair_a.equal(pair_b)
    assert not pair_a.equal(CandidatePair(host_candidate(), relay_candidate(), True))
    assert not pair_a.equal(None)


def test_new_pair_starts_waiting():
    pair = CandidatePair(host_candidate(), host_candidate(), True)
    assert pair.state is CandidatePairState.WAITING
    assert pair.nominated is False


def test_pair_str_mentions_priorities():
    pair = CandidatePair(host_candidate(), host_candidate(), True)
    text = str(pair)
    assert text.startswith("prio 9151314440652587007 ")
    assert "<->" in text