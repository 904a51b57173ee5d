from concurrent.futures import ThreadPoolExecutor

import pytest

from icecore.rand import (
    CANDIDATE_ID_PREFIX,
    LEN_CANDIDATE_ID,
    LEN_PWD,
    LEN_UFRAG,
    RUNES_ALPHA,
    RUNES_CANDIDATE_ID_FOUNDATION,
    CandidateIDGenerator,
    generate_pwd,
    generate_ufrag,
)

_ID_GENERATOR = CandidateIDGenerator()

GENERATORS = {
    "CandidateID": _ID_GENERATOR.generate,
    "PWD": generate_pwd,
    "Ufrag": generate_ufrag,
}

N = 100
ITERATIONS = 100


@pytest.mark.parametrize("name", sorted(GENERATORS))
def test_random_generator_collision(name):
    gen = GENERATORS[name]
    with ThreadPoolExecutor(max_workers=8) as pool:
        for _ in range(ITERATIONS):
            values = list(pool.map(lambda _i: gen(), range(N)))
            assert len(values) == N
            assert len(set(values)) == N


def test_candidate_id_shape():
    value = CandidateIDGenerator().generate()
    assert value.startswith(CANDIDATE_ID_PREFIX)
    body = value[len(CANDIDATE_ID_PREFIX):]
    assert len(body) == LEN_CANDIDATE_ID
    assert set(body) <= set(RUNES_CANDIDATE_ID_FOUNDATION)


def test_candidate_id_prefix_value():
    assert CandidateIDGenerator().generate().split(":")[0] == "candidate"


def test_pwd_shape():
    value = generate_pwd()
    assert len(value) == LEN_PWD
    assert set(value) <= set(RUNES_ALPHA)


def test_ufrag_shape():
    value = generate_ufrag()
    assert len(value) == LEN_UFRAG
    assert set(value) <= set(RUNES_ALPHA)


def test_pwd_is_at_least_128_bits_and_ufrag_24_bits():
    # Each alphabetic rune carries more than 5 bits of entropy.
    assert LEN_PWD * 5 >= 128
    assert LEN_UFRAG * 5 >= 24
    assert len(generate_pwd()) * 5 >= 128