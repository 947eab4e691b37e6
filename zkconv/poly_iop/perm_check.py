"""Permutation check: two tables hold the same multiset of values.

After shifting every entry by a random ``r``, the grand products of both
tables must agree.
"""

from collections import deque

from zkconv.errors import VerificationError
from zkconv.field import MODULUS
from zkconv.poly_iop import grand_prod_check
from zkconv.transcript import get_and_append_challenge

_INTERNAL_ROUND = b"Internal round"


def prove(evals_0, evals_1, transcript):
    """Prove that ``evals_1`` is a permutation of ``evals_0``.

    Returns the proof, the two random points and the values of the two
    tables' extensions at those points.
    """
    r = get_and_append_challenge(transcript, _INTERNAL_ROUND)
    shifted_0 = [(x + r) % MODULUS for x in evals_0]
    shifted_1 = [(x + r) % MODULUS for x in evals_1]

    proof = deque()
    proof_0, challenges_0, value_0 = grand_prod_check.prove(shifted_0, transcript)
    proof.extend(proof_0)
    proof_1, challenges_1, value_1 = grand_prod_check.prove(shifted_1, transcript)
    proof.extend(proof_1)

    return (
        proof,
        [challenges_0, challenges_1],
        [(value_0 - r) % MODULUS, (value_1 - r) % MODULUS],
    )


def verify(layer_num, transcript, proof):
    """Check a permutation proof for two tables of ``2 ** layer_num`` entries.

    Returns the two random points and the claimed values of the tables'
    extensions there.
    """
    r = get_and_append_challenge(transcript, _INTERNAL_ROUND)
    prod_0, challenges_0, value_0 = grand_prod_check.verify(layer_num, transcript, proof)
    prod_1, challenges_1, value_1 = grand_prod_check.verify(layer_num, transcript, proof)
    if prod_0 != prod_1:
        raise VerificationError("tables are not permutations of each other")
    return (
        [challenges_0, challenges_1],
        [(value_0 - r) % MODULUS, (value_1 - r) % MODULUS],
    )