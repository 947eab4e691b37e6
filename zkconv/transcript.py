"""Hash-based Fiat-Shamir transcript and helpers for field challenges."""

import hashlib

from zkconv.field import from_le_bytes_mod_order, random_elements, serialize, to_bytes

_PROTOCOL_LABEL = b"zkconv transcript v1"


class Transcript:
    """An append-only transcript from which challenges are squeezed."""

    def __init__(self, label):
        self._state = hashlib.sha3_256()
        self._absorb(b"dom-sep", _PROTOCOL_LABEL)
        self._absorb(b"dom-sep", bytes(label))

    def _absorb(self, label, message):
        label = bytes(label)
        message = bytes(message)
        self._state.update(len(label).to_bytes(4, "little"))
        self._state.update(label)
        self._state.update(len(message).to_bytes(4, "little"))
        self._state.update(message)

    def append_message(self, label, message):
        """Append a labelled message."""
        self._absorb(label, message)

    def challenge_bytes(self, label, n):
        """Squeeze ``n`` challenge bytes bound to everything appended so far."""
        if n < 0:
            raise ValueError("cannot squeeze a negative number of bytes")
        self._absorb(label, n.to_bytes(4, "little"))
        seed = self._state.copy().digest()
        output = hashlib.shake_256(seed).digest(n)
        self._absorb(b"challenge", output)
        return output


def append_serializable_element(transcript, label, element):
    """Append the canonical serialization of ``element``."""
    transcript.append_message(label, serialize(element))


def get_and_append_challenge(transcript, label):
    """Squeeze a field challenge and append it back to the transcript."""
    challenge = from_le_bytes_mod_order(transcript.challenge_bytes(label, 64))
    transcript.append_message(label, to_bytes(challenge))
    return challenge


def rand_eval(num_vars, rng):
    """Random evaluation table of a multilinear polynomial in ``num_vars`` variables."""
    return random_elements(1 << num_vars, rng)