import dataclasses

import pytest

from icecore.related_address import CandidateRelatedAddress, related_addresses_equal


def test_str_format():
    related = CandidateRelatedAddress("10.0.0.1", 4000)
    assert str(related) == " related 10.0.0.1:4000"


def test_str_contains_address_and_port():
    related = CandidateRelatedAddress("2001:db8::1", 5555)
    text = str(related)
    assert text.startswith(" related ")
    assert text.endswith(f"{related.address}:{related.port}")


def test_both_none_are_equal():
    assert related_addresses_equal(None, None) is True


def test_one_none_is_not_equal():
    related = CandidateRelatedAddress("10.0.0.1", 4000)
    assert related_addresses_equal(related, None) is False
    assert related_addresses_equal(None, related) is False


def test_same_fields_are_equal():
    first = CandidateRelatedAddress("10.0.0.1", 4000)
    second = CandidateRelatedAddress("10.0.0.1", 4000)
    assert related_addresses_equal(first, second) is True
    assert first == second


@pytest.mark.parametrize(
    "other",
    [
        CandidateRelatedAddress("10.0.0.2", 4000),
        CandidateRelatedAddress("10.0.0.1", 4001),
    ],
)
def test_different_fields_are_not_equal(other):
    first = CandidateRelatedAddress("10.0.0.1", 4000)
    assert related_addresses_equal(first, other) is False


def test_is_immutable():
    related = CandidateRelatedAddress("10.0.0.1", 4000)
    with pytest.raises(dataclasses.FrozenInstanceError):
        related.port = 1  # type: ignore[misc]
    assert related.port == 4000
    assert str(related) == " related 10.0.0.1:4000"