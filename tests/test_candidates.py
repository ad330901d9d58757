import ipaddress

import pytest

from icelink.candidates import (
    COMPONENT_RTP,
    CandidateRelatedAddress,
    CandidateRelay,
    CandidateRelayConfig,
    CandidateServerReflexive,
    CandidateServerReflexiveConfig,
    new_candidate_relay,
    new_candidate_server_reflexive,
)
from icelink.enums import CandidateType, NetworkType
from icelink.errors import AddressParseError, NetworkTypeError


def _srflx_config(**overrides):
    values = dict(
        network="udp",
        address="1.2.3.4",
        port=5000,
        component=COMPONENT_RTP,
        rel_addr="10.0.0.1",
        rel_port=6000,
    )
    values.update(overrides)
    return CandidateServerReflexiveConfig(**values)


def test_server_reflexive_fields():
    candidate = new_candidate_server_reflexive(_srflx_config())
    assert isinstance(candidate, CandidateServerReflexive)
    assert candidate.candidate_type is CandidateType.SERVER_REFLEXIVE
    assert candidate.network_type is NetworkType.UDP4
    assert candidate.resolved_addr == (ipaddress.ip_address("1.2.3.4"), 5000)
    assert candidate.related_address == CandidateRelatedAddress("10.0.0.1", 6000)
    assert candidate.id.startswith("candidate:")


def test_server_reflexive_ipv6_and_explicit_id():
    candidate = new_candidate_server_reflexive(
        _srflx_config(address="2601:4567::5678", candidate_id="candidate:abc")
    )
    assert candidate.network_type is NetworkType.UDP6
    assert candidate.id == "candidate:abc"


@pytest.mark.parametrize("address", ["bad.6.6.6", "", "fe80::1%eth0"])
def test_bad_address_rejected(address):
    with pytest.raises(AddressParseError):
        new_candidate_server_reflexive(_srflx_config(address=address))
    with pytest.raises(AddressParseError):
        new_candidate_relay(CandidateRelayConfig(network="udp", address=address))


def test_bad_network_rejected():
    with pytest.raises(NetworkTypeError):
        new_candidate_server_reflexive(_srflx_config(network="junkNetwork"))


def test_priority_override_is_used():
    candidate = new_candidate_server_reflexive(_srflx_config(priority=5))
    assert candidate.priority() == 5


def test_relay_priority_below_srflx():
    srflx = new_candidate_server_reflexive(_srflx_config())
    relay = new_candidate_relay(CandidateRelayConfig(network="udp", address="1.2.3.4", component=COMPONENT_RTP))
    assert relay.priority() < srflx.priority()


def test_relay_fields_and_close_runs_once():
    calls = []
    relay = new_candidate_relay(
        CandidateRelayConfig(
            network="udp",
            address="127.0.0.1",
            port=7000,
            relay_protocol="tcp",
            on_close=lambda: calls.append(1),
        )
    )
    assert isinstance(relay, CandidateRelay)
    assert relay.candidate_type is CandidateType.RELAY
    assert relay.relay_protocol == "tcp"
    relay.close()
    relay.close()
    assert calls == [1]


def test_relay_close_propagates_error():
    def failing():
        raise OSError("close failed")

    relay = new_candidate_relay(CandidateRelayConfig(network="udp", address="127.0.0.1", on_close=failing))
    with pytest.raises(OSError, match="close failed"):
        relay.close()


def test_related_address_str_and_equality():
    related = CandidateRelatedAddress("10.0.0.1", 6000)
    assert str(related) == " related 10.0.0.1:6000"
    assert related == CandidateRelatedAddress("10.0.0.1", 6000)
    assert related != CandidateRelatedAddress("10.0.0.1", 6001)


def test_candidate_equality_ignores_id():
    a = new_candidate_server_reflexive(_srflx_config())
    b = new_candidate_server_reflexive(_srflx_config())
    assert a.id != b.id
    assert a.equal(b)
    assert not a.equal(new_candidate_server_reflexive(_srflx_config(port=5001)))
    assert not a.equal(None)