import random

import pytest

from zkconv.field import (
    ELEMENT_SIZE,
    MODULUS,
    from_le_bytes_mod_order,
    inverse,
    random_element,
    random_elements,
    serialize,
    to_bytes,
)


class _OwnEncoding:
    def serialize(self):
        return b"own"


def test_to_bytes_of_one():
    assert to_bytes(1) == b"\x01" + b"\x00" * 31


def test_roundtrip_bytes():
    rng = random.Random(1)
    for value in random_elements(20, rng):
        encoded = to_bytes(value)
        assert len(encoded) == ELEMENT_SIZE
        assert from_le_bytes_mod_order(encoded) == value


def test_reduction_mod_order():
    assert from_le_bytes_mod_order(MODULUS.to_bytes(32, "little")) == 0
    assert from_le_bytes_mod_order((MODULUS + 5).to_bytes(64, "little")) == 5


def test_negative_values_wrap():
    assert to_bytes(-1) == to_bytes(MODULUS - 1)


def test_serialize_sequence_has_length_prefix():
    data = serialize([1, 2])
    assert data[:8] == (2).to_bytes(8, "little")
    assert data[8:] == to_bytes(1) + to_bytes(2)


def test_serialize_bytes_has_length_prefix():
    assert serialize(b"abc") == (3).to_bytes(8, "little") + b"abc"


def test_serialize_uses_own_method():
    single = serialize(_OwnEncoding())
    listed = serialize([_OwnEncoding()])
    assert single == b"own"
    assert listed == (1).to_bytes(8, "little") + b"own"


def test_serialize_rejects_unknown_type():
    with pytest.raises(TypeError):
        serialize(1.5)


def test_inverse():
    rng = random.Random(2)
    for value in random_elements(10, rng):
        if value:
            assert value * inverse(value) % MODULUS == 1


def test_inverse_of_zero():
    with pytest.raises(ZeroDivisionError):
        inverse(MODULUS)


def test_random_element_in_range_and_deterministic():
    a = random_element(random.Random(7))
    b = random_element(random.Random(7))
    assert a == b
    assert 0 <= a < MODULUS
    assert len(random_elements(5, random.Random(0))) == 5