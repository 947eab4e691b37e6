"""Fiat-Shamir random generator built on a running BLAKE2b-512 digest."""

import hashlib

from zkconv.field import serialize


class Blake2b512Rng:
    """Feedable pseudorandom generator.

    The same sequence of ``feed`` and draw calls always yields the same output.
    """

    OUTPUT_SIZE = 64

    def __init__(self):
        self._digest = hashlib.blake2b(digest_size=self.OUTPUT_SIZE)

    def feed(self, msg):
        """Absorb the canonical serialization of ``msg``."""
        self._digest.update(serialize(msg))

    def fill_bytes(self, n):
        """Return ``n`` pseudorandom bytes and advance the state."""
        if n < 0:
            raise ValueError("cannot draw a negative number of bytes")
        block = self._digest.copy().digest()
        chunks = []
        remaining = n
        while remaining:
            take = min(remaining, self.OUTPUT_SIZE)
            chunks.append(block[:take])
            remaining -= take
            if take == self.OUTPUT_SIZE:
                self._digest.update(block)
                block = self._digest.copy().digest()
        self._digest.update(block)
        return b"".join(chunks)

    def randbytes(self, n):
        """Return ``n`` pseudorandom bytes (same as :meth:`fill_bytes`)."""
        return self.fill_bytes(n)

    def next_u32(self):
        return int.from_bytes(self.fill_bytes(4), "little")

    def next_u64(self):
        return int.from_bytes(self.fill_bytes(8), "little")