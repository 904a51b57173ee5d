"""Building blocks for ICE: network and candidate types, states, candidate pairs,
STUN attributes, 1:1 NAT mapping and local interface helpers."""

__version__ = "0.1.0"