import random

import pytest

from zkconv.field import MODULUS
from zkconv.transcript import (
    Transcript,
    append_serializable_element,
    get_and_append_challenge,
    rand_eval,
)


def _run(label, element):
    t = Transcript(label)
    append_serializable_element(t, b"prover msg", element)
    return [get_and_append_challenge(t, b"Internal round") for _ in range(3)]


def test_same_operations_same_challenges():
    first = Transcript(b"SumCheck")
    second = Transcript(b"SumCheck")
    append_serializable_element(first, b"prover msg", [1, 2, 3])
    append_serializable_element(second, b"prover msg", [1, 2, 3])
    first_challenges = [get_and_append_challenge(first, b"Internal round") for _ in range(3)]
    second_challenges = [get_and_append_challenge(second, b"Internal round") for _ in range(3)]
    assert first_challenges == second_challenges
    assert len(set(first_challenges)) == 3


def test_label_separates_transcripts():
    assert _run(b"SumCheck", [1, 2, 3]) != _run(b"ZeroCheck", [1, 2, 3])


def test_messages_change_challenges():
    assert _run(b"SumCheck", [1, 2, 3]) != _run(b"SumCheck", [1, 2, 4])


def test_successive_challenges_differ_and_are_in_field():
    challenges = _run(b"GrandProdCheck", [5])
    assert len(set(challenges)) == 3
    assert all(0 <= c < MODULUS for c in challenges)


def test_challenge_bytes_length():
    t = Transcript(b"test")
    assert len(t.challenge_bytes(b"c", 64)) == 64
    assert len(t.challenge_bytes(b"c", 7)) == 7
    with pytest.raises(ValueError):
        t.challenge_bytes(b"c", -1)


def test_append_message_matches_serializable_bytes():
    a = Transcript(b"t")
    b = Transcript(b"t")
    a.append_message(b"m", b"\x03" + b"\x00" * 7 + b"abc")
    append_serializable_element(b, b"m", b"abc")
    assert a.challenge_bytes(b"c", 16) == b.challenge_bytes(b"c", 16)


def test_rand_eval_size():
    evals = rand_eval(4, random.Random(3))
    assert len(evals) == 16
    assert all(0 <= e < MODULUS for e in evals)