# icecore

Building blocks for Interactive Connectivity Establishment (ICE) agents:
network and candidate types, candidate-pair priority, the STUN
attributes ICE adds (PRIORITY, ICE-CONTROLLED, ICE-CONTROLLING), a
minimal STUN message codec, 1:1 NAT address mapping, local interface
discovery and binding UDP sockets within a port range.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

The only runtime dependency is `psutil`, used by `icecore.net` to list
local network interfaces.

## Overview

| Module | What it holds |
| --- | --- |
| `icecore.errors` | exception hierarchy rooted at `IceError` |
| `icecore.networktype` | `NetworkType`, `supported_network_types()`, `determine_network_type()` |
| `icecore.candidatetype` | `CandidateType`, its `preference()`, `contains_candidate_type()` |
| `icecore.states` | `ConnectionState`, `GatheringState`, `CandidatePairState`, `Role` (with `Role.parse()`) |
| `icecore.related_address` | `CandidateRelatedAddress`, `related_addresses_equal()` |
| `icecore.rand` | `CandidateIDGenerator`, `generate_ufrag()`, `generate_pwd()` |
| `icecore.mdns` | `MulticastDNSMode`, `generate_multicast_dns_name()`, `validate_multicast_dns_host_name()` |
| `icecore.stats` | `CandidatePairStats`, `CandidateStats` records |
| `icecore.external_ip_mapper` | `new_external_ip_mapper()`, `ExternalIPMapper`, `IPMapping`, `validate_ip_string()` |
| `icecore.stun` | `StunMessage`, `AttrType`, `XorMappedAddress`, `check_size()`, `get_xor_mapped_address()`, `assert_username()` |
| `icecore.icecontrol` | `AttrControlled`, `AttrControlling`, `AttrControl` |
| `icecore.priority` | `PriorityAttr` |
| `icecore.net` | `is_supported_ipv6()`, `local_interfaces()`, `listen_udp_in_port_range()` |
| `icecore.candidatepair` | `Candidate`, `CandidatePair` and the pair priority |
| `icecore.fakenet` | `PacketConn`, a `read_from`/`write_to` wrapper over a connected socket |

## Examples

Determine a network type from a network name and an address:

```python
from icecore.networktype import NetworkType, determine_network_type

assert determine_network_type("UDP", "192.168.0.1") is NetworkType.UDP4
```

Map local addresses to external ones for 1:1 NAT:

```python
from icecore.candidatetype import CandidateType
from icecore.external_ip_mapper import new_external_ip_mapper

mapper = new_external_ip_mapper(
    CandidateType.UNSPECIFIED, ["1.2.3.4/10.0.0.1", "2200::1/fe80::1"]
)
print(mapper.find_external_ip("10.0.0.1"))  # 1.2.3.4
```

Add and read ICE attributes on a STUN message:

```python
from icecore.icecontrol import AttrControl
from icecore.priority import PriorityAttr
from icecore.states import Role
from icecore.stun import StunMessage

message = StunMessage()
AttrControl(Role.CONTROLLING, 4321).add_to(message)
PriorityAttr(2130706431).add_to(message)

decoded = StunMessage.decode(message.encode())
print(AttrControl.get_from(decoded), PriorityAttr.get_from(decoded))
```

Compute a candidate-pair priority:

```python
from icecore.candidatepair import Candidate, CandidatePair
from icecore.candidatetype import CandidateType

local = Candidate(CandidateType.HOST, priority=2130706431)
remote = Candidate(CandidateType.RELAY, priority=16777215)
pair = CandidatePair(local, remote, ice_role_controlling=True)
print(pair.priority())
```

Bind a UDP socket on a random free port between 5000 and 5009:

```python
from icecore.net import listen_udp_in_port_range

sock = listen_udp_in_port_range(5009, 5000, "udp4", "127.0.0.1")
print(sock.getsockname())
sock.close()
```

Parse a role name:

```python
from icecore.states import Role

assert Role.parse("controlled") is Role.CONTROLLED
```

Errors are raised as subclasses of `icecore.errors.IceError`, for example
`InvalidNat1To1MappingError` for a malformed NAT mapping,
`AttributeNotFoundError` and `AttributeSizeError` when reading STUN
attributes, or `PortError` when no port in the requested range can be
bound.

## What this package does not do

`icecore` provides the pieces an ICE agent is built from, not the agent
itself. It has no agent object, no candidate gathering, no connectivity
checks or nomination, no mDNS responder, no TURN client and no
command-line program. The STUN support covers building and parsing
messages, the attributes listed above, XOR-MAPPED-ADDRESS and a single
binding request; it does not compute MESSAGE-INTEGRITY or FINGERPRINT.