# icelink

Pure-Python building blocks for Interactive Connectivity Establishment
(ICE). Everything here is plain data and computation; nothing opens a
socket. It uses only the standard library.

## Modules

- `icelink.enums`: `CandidateType` (with `preference()`),
  `CandidatePairState`, `ConnectionState`, `GatheringState`, `Role` with
  `parse_role()`, and `NetworkType` with `is_udp()`, `is_tcp()`,
  `network_short()`, `is_reliable()`, `is_ipv4()` and `is_ipv6()`. Also
  `supported_network_types()`, `contains_candidate_type()` and
  `determine_network_type()`, which picks a `NetworkType` from a network
  name such as `"udp"` or `"TCP"` and an IP address.
- `icelink.ipmapper`: 1:1 NAT mapping. `new_external_ip_mapper()` builds an
  `ExternalIPMapper` from entries of the form `"external"` or
  `"external/local"`; `find_external_ip()` returns the mapped address.
  `validate_ip_string()` and `IPMapping` are the pieces it is built from.
- `icelink.rand`: `CandidateIDGenerator` (IDs of the form
  `candidate:` followed by 32 characters), `generate_ufrag()` (16 letters),
  `generate_pwd()` (32 letters), both from a cryptographic source,
  `MulticastDNSMode`, and `generate_multicast_dns_name()`, which returns a
  version 4 UUID followed by `.local`.
- `icelink.stun`: a small STUN message model. `Message` holds a type, a
  12-byte transaction ID and ordered attributes, with `add()`, `get()`,
  `contains()` and `encode()`; `parse_message()` decodes wire bytes.
  `AttrControlled`, `AttrControlling`, `AttrControl` and `PriorityAttr`
  write themselves with `add_to()` and read with `from_message()`.
  `add_message_integrity()` appends an HMAC-SHA1 MESSAGE-INTEGRITY
  attribute; `assert_inbound_username()` and
  `assert_inbound_message_integrity()` check inbound messages.
- `icelink.candidates`: `CandidateServerReflexive` and `CandidateRelay`,
  created with `new_candidate_server_reflexive()` and
  `new_candidate_relay()` from `CandidateServerReflexiveConfig` and
  `CandidateRelayConfig`. A relay candidate's `close()` runs its
  `on_close` callback at most once. `CandidateRelatedAddress` holds the
  related address and port.
- `icelink.candidatepair`: `CandidatePair` and its RFC 5245 pair
  `priority()`.
- `icelink.stats`: `CandidatePairStats` and `CandidateStats` records.

Errors are raised as subclasses of `icelink.errors.IceError`; each also
derives from `ValueError` or `LookupError` as fits.

## Examples

Map local addresses to external ones:

```python
from icelink.enums import CandidateType
from icelink.ipmapper import new_external_ip_mapper

mapper = new_external_ip_mapper(
    CandidateType.UNSPECIFIED, ["1.2.3.4/10.0.0.1", "2200::1/fe80::1"]
)
print(mapper.find_external_ip("10.0.0.1"))  # 1.2.3.4
```

Write and read ICE attributes on a STUN message:

```python
from icelink.enums import Role
from icelink.stun import AttrControl, Message, PriorityAttr, parse_message

message = Message()
AttrControl(Role.CONTROLLING, 4321).add_to(message)
PriorityAttr(2130706431).add_to(message)

decoded = parse_message(message.encode())
print(AttrControl.from_message(decoded))
print(PriorityAttr.from_message(decoded).value)  # 2130706431
```

Build a server reflexive candidate and pair it:

```python
from icelink.candidatepair import CandidatePair
from icelink.candidates import (
    CandidateServerReflexiveConfig,
    new_candidate_server_reflexive,
)

local = new_candidate_server_reflexive(
    CandidateServerReflexiveConfig(
        network="udp", address="203.0.113.5", port=3478, component=1,
        rel_addr="10.0.0.1", rel_port=50000,
    )
)
print(local)  # udp4 srflx 203.0.113.5:3478 related 10.0.0.1:50000

pair = CandidatePair(local=local, remote=local, ice_role_controlling=True)
print(pair.priority())
```

## What it does not do

There is no ICE agent here: nothing gathers candidates, listens on or
sends from sockets, runs connectivity checks, talks to STUN or TURN
servers, or answers mDNS queries. Host and peer reflexive candidate kinds
are not provided. The STUN model computes MESSAGE-INTEGRITY but not
FINGERPRINT, and does not decode address attributes such as
XOR-MAPPED-ADDRESS.

## Tests

Install the `test` extra and run pytest from the project directory.