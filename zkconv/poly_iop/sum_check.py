"""Sumcheck on a function of several multilinear polynomials, driven by a transcript.

The prover sends, in every round, the round polynomial evaluated at
``0, 1, ..., D`` where ``D`` is the number of multilinear polynomials.
Proofs are :class:`collections.deque` objects of such lists; the verifier
consumes them from the left.
"""

from collections import deque

from zkconv.errors import VerificationError
from zkconv.field import MODULUS
from zkconv.ml_sumcheck.verifier import interpolate_uni_poly
from zkconv.transcript import append_serializable_element, get_and_append_challenge

_PROVER_MSG = b"prover msg"
_INTERNAL_ROUND = b"Internal round"


def _num_vars(tables):
    if not tables:
        raise ValueError("at least one evaluation table is required")
    size = len(tables[0])
    if size == 0 or size & (size - 1):
        raise ValueError(f"table length {size} is not a power of two")
    if any(len(t) != size for t in tables):
        raise ValueError("evaluation tables differ in length")
    return size.bit_length() - 1


def _fold(table, challenge):
    return [(lo + (hi - lo) * challenge) % MODULUS for lo, hi in zip(table[0::2], table[1::2])]


def prove(evals, f, transcript):
    """Prove the sum over the hypercube of ``f(p_1(x), ..., p_D(x))``.

    ``evals`` holds the evaluation tables of ``p_1, ..., p_D``; ``f`` takes a
    list of ``D`` field elements and returns one.

    Returns the proof, the challenges ``r`` and ``[p_1(r), ..., p_D(r)]``.
    """
    tables = [[e % MODULUS for e in table] for table in evals]
    nv = _num_vars(tables)
    degree = len(tables)
    points = range(degree + 1)
    proof = deque()
    challenges = []

    for _ in range(nv):
        sums = [0] * (degree + 1)
        for row in zip(*(zip(t[0::2], t[1::2]) for t in tables)):
            columns = [[(lo + k * (hi - lo)) % MODULUS for k in points] for lo, hi in row]
            for k in points:
                sums[k] += f([column[k] for column in columns])
        sums = [s % MODULUS for s in sums]

        append_serializable_element(transcript, _PROVER_MSG, sums)
        proof.append(sums)

        challenge = get_and_append_challenge(transcript, _INTERNAL_ROUND)
        challenges.append(challenge)
        tables = [_fold(t, challenge) for t in tables]

    return proof, challenges, [t[0] for t in tables]


def verify(y, degree, num_var, transcript, proof):
    """Check ``num_var`` rounds of ``proof`` against the claimed sum ``y``.

    Consumes the rounds from the front of ``proof`` and returns the
    challenges together with the value the final polynomial must take there.
    """
    r = []
    value = y % MODULUS
    for _ in range(num_var):
        if not proof:
            raise VerificationError("proof is incomplete")
        evals = proof.popleft()
        if len(evals) > degree + 1:
            raise VerificationError("round polynomial has too many evaluations")
        if len(evals) < 2:
            raise VerificationError("round polynomial has too few evaluations")
        append_serializable_element(transcript, _PROVER_MSG, evals)
        if (evals[0] + evals[1]) % MODULUS != value:
            raise VerificationError("round polynomial is not consistent with the claim")

        challenge = get_and_append_challenge(transcript, _INTERNAL_ROUND)
        r.append(challenge)
        value = interpolate_uni_poly(evals, challenge)
    return r, value