"""Arithmetic in the BLS12-381 scalar field and canonical serialization.

Field elements are plain Python integers in the range ``[0, MODULUS)``.
"""

MODULUS = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001
ELEMENT_SIZE = 32
_LENGTH_SIZE = 8


def from_le_bytes_mod_order(data):
    """Interpret ``data`` as a little-endian integer and reduce it into the field."""
    return int.from_bytes(bytes(data), "little") % MODULUS


def to_bytes(value):
    """Serialize a field element as 32 little-endian bytes."""
    return (value % MODULUS).to_bytes(ELEMENT_SIZE, "little")


def _length_prefix(n):
    return n.to_bytes(_LENGTH_SIZE, "little")


def serialize(message):
    """Canonically serialize a message.

    Integers are field elements, byte strings and sequences carry an 8-byte
    little-endian length prefix, and any object with a ``serialize`` method
    serializes itself.
    """
    if isinstance(message, (bytes, bytearray, memoryview)):
        raw = bytes(message)
        return _length_prefix(len(raw)) + raw
    if isinstance(message, bool):
        raise TypeError("cannot serialize a bool as a field element")
    if isinstance(message, int):
        return to_bytes(message)
    if isinstance(message, (list, tuple)):
        return _length_prefix(len(message)) + b"".join(serialize(m) for m in message)
    own = getattr(message, "serialize", None)
    if callable(own):
        return own()
    raise TypeError(f"cannot serialize object of type {type(message).__name__}")


def inverse(value):
    """Return the multiplicative inverse of a non-zero field element."""
    value %= MODULUS
    if value == 0:
        raise ZeroDivisionError("zero has no inverse in the field")
    return pow(value, -1, MODULUS)


def random_element(rng):
    """Draw a field element from any source offering ``randbytes(n)``."""
    return from_le_bytes_mod_order(rng.randbytes(64))


def random_elements(count, rng):
    """Draw ``count`` field elements."""
    return [random_element(rng) for _ in range(count)]