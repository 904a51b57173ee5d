"""ICE-CONTROLLED and ICE-CONTROLLING STUN attributes."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import AttributeNotFoundError
from .states import Role
from .stun import AttrType, StunMessage, check_size

TIEBREAKER_SIZE = 8


def _add_tiebreaker(message: StunMessage, attr_type: AttrType, value: int) -> None:
    message.add(attr_type, value.to_bytes(TIEBREAKER_SIZE, "big"))


def _get_tiebreaker(message: StunMessage, attr_type: AttrType) -> int:
    value = message.get(attr_type)
    check_size(attr_type, len(value), TIEBREAKER_SIZE)
    return int.from_bytes(value, "big")


@dataclass(frozen=True)
class AttrControlled:
    """ICE-CONTROLLED attribute carrying a tiebreaker."""

    tiebreaker: int = 0

    def add_to(self, message: StunMessage) -> None:
        _add_tiebreaker(message, AttrType.ICE_CONTROLLED, self.tiebreaker)

    @classmethod
    def get_from(cls, message: StunMessage) -> AttrControlled:
        return cls(_get_tiebreaker(message, AttrType.ICE_CONTROLLED))


@dataclass(frozen=True)
class AttrControlling:
    """ICE-CONTROLLING attribute carrying a tiebreaker."""

    tiebreaker: int = 0

    def add_to(self, message: StunMessage) -> None:
        _add_tiebreaker(message, AttrType.ICE_CONTROLLING, self.tiebreaker)

    @classmethod
    def get_from(cls, message: StunMessage) -> AttrControlling:
        return cls(_get_tiebreaker(message, AttrType.ICE_CONTROLLING))


@dataclass(frozen=True)
class AttrControl:
    """Either ICE-CONTROLLED or ICE-CONTROLLING, chosen by role."""

    role: Role = Role.CONTROLLING
    tiebreaker: int = 0

    def add_to(self, message: StunMessage) -> None:
        attr = (
            AttrType.ICE_CONTROLLING
            if self.role is Role.CONTROLLING
            else AttrType.ICE_CONTROLLED
        )
        _add_tiebreaker(message, attr, self.tiebreaker)

    @classmethod
    def get_from(cls, message: StunMessage) -> AttrControl:
        if message.contains(AttrType.ICE_CONTROLLING):
            return cls(Role.CONTROLLING, _get_tiebreaker(message, AttrType.ICE_CONTROLLING))
        if message.contains(AttrType.ICE_CONTROLLED):
            return cls(Role.CONTROLLED, _get_tiebreaker(message, AttrType.ICE_CONTROLLED))
        raise AttributeNotFoundError(
            f"{AttributeNotFoundError.default_message}: ICE_CONTROLLING or ICE_CONTROLLED"
        )