"""The PRIORITY STUN attribute."""

from __future__ import annotations

from dataclasses import dataclass

from .stun import AttrType, StunMessage, check_size

PRIORITY_SIZE = 4


@dataclass(frozen=True)
class PriorityAttr:
    """PRIORITY attribute: a 32-bit candidate priority."""

    value: int = 0

    def add_to(self, message: StunMessage) -> None:
        message.add(AttrType.PRIORITY, self.value.to_bytes(PRIORITY_SIZE, "big"))

    @classmethod
    def get_from(cls, message: StunMessage) -> PriorityAttr:
        value = message.get(AttrType.PRIORITY)
        check_size(AttrType.PRIORITY, len(value), PRIORITY_SIZE)
        return cls(int.from_bytes(value, "big"))