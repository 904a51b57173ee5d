import pytest

from icecore.candidatetype import CandidateType, contains_candidate_type


@pytest.mark.parametrize(
    "ctype, text",
    [
        (CandidateType.HOST, "host"),
        (CandidateType.SERVER_REFLEXIVE, "srflx"),
        (CandidateType.PEER_REFLEXIVE, "prflx"),
        (CandidateType.RELAY, "relay"),
        (CandidateType.UNSPECIFIED, "Unknown candidate type"),
    ],
)
def test_string_forms(ctype, text):
    assert str(ctype) == text


@pytest.mark.parametrize(
    "ctype, pref",
    [
        (CandidateType.HOST, 126),
        (CandidateType.PEER_REFLEXIVE, 110),
        (CandidateType.SERVER_REFLEXIVE, 100),
        (CandidateType.RELAY, 0),
        (CandidateType.UNSPECIFIED, 0),
    ],
)
def test_preference(ctype, pref):
    assert ctype.preference() == pref


def test_preference_ordering():
    assert (
        CandidateType.HOST.preference()
        > CandidateType.PEER_REFLEXIVE.preference()
        > CandidateType.SERVER_REFLEXIVE.preference()
        > CandidateType.RELAY.preference()
    )


def test_contains_candidate_type():
    types = [CandidateType.HOST, CandidateType.RELAY]
    assert contains_candidate_type(CandidateType.HOST, types)
    assert not contains_candidate_type(CandidateType.SERVER_REFLEXIVE, types)
    assert not contains_candidate_type(CandidateType.HOST, None)
    assert not contains_candidate_type(CandidateType.HOST, [])