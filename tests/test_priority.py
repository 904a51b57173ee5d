import pytest

from icecore.errors import AttributeNotFoundError, AttributeSizeError
from icecore.priority import PriorityAttr
from icecore.stun import BINDING_REQUEST, AttrType, StunMessage


def test_priority_missing():
    with pytest.raises(AttributeNotFoundError):
        PriorityAttr.get_from(StunMessage())


@pytest.mark.parametrize("value", [0, 2130706431, 0xFFFFFFFF])
def test_priority_round_trip(value):
    message = StunMessage(message_type=BINDING_REQUEST)
    PriorityAttr(value).add_to(message)
    decoded = StunMessage.decode(message.encode())
    assert PriorityAttr.get_from(decoded) == PriorityAttr(value)


def test_priority_incorrect_size():
    message = StunMessage()
    message.add(AttrType.PRIORITY, bytes(100))
    with pytest.raises(AttributeSizeError):
        PriorityAttr.get_from(message)