"""Zero check: the product of several multilinear polynomials vanishes on the hypercube.

Reduced to a sumcheck of ``prod_i p_i(x) * eq(t, x)`` for a random ``t``.
"""

from functools import reduce

from zkconv.errors import VerificationError
from zkconv.field import MODULUS
from zkconv.multilinear import eq_eval, new_eq
from zkconv.poly_iop import sum_check
from zkconv.transcript import append_serializable_element, get_and_append_challenge

_PROVER_MSG = b"prover msg"
_INTERNAL_ROUND = b"Internal round"


def _product(values):
    return reduce(lambda acc, x: acc * x % MODULUS, values, 1)


def prove(evals, transcript):
    """Prove that the product of the tables in ``evals`` is zero everywhere.

    Returns the proof, the sumcheck challenges ``r`` and the values of every
    table at ``r`` followed by ``eq(t, r)``.
    """
    if not evals:
        raise ValueError("at least one evaluation table is required")
    size = len(evals[0])
    if size == 0 or size & (size - 1):
        raise ValueError(f"table length {size} is not a power of two")
    nv = size.bit_length() - 1
    challenges = [get_and_append_challenge(transcript, _INTERNAL_ROUND) for _ in range(nv)]
    tables = [list(t) for t in evals] + [new_eq(challenges)]

    proof, new_challenges, values = sum_check.prove(tables, _product, transcript)
    append_serializable_element(transcript, _PROVER_MSG, values)
    proof.append(list(values))
    return proof, new_challenges, values


def verify(num_var, transcript, proof):
    """Check a zero-check proof over ``num_var`` variables.

    Returns the sumcheck challenges ``r`` and the claimed values of the
    original tables at ``r``.
    """
    challenges = [get_and_append_challenge(transcript, _INTERNAL_ROUND) for _ in range(num_var)]
    new_challenges, value = sum_check.verify(0, 3, num_var, transcript, proof)

    if not proof:
        raise VerificationError("proof is incomplete")
    evals = list(proof.popleft())
    if not evals:
        raise VerificationError("final evaluations are missing")
    append_serializable_element(transcript, _PROVER_MSG, evals)

    if value != _product(evals):
        raise VerificationError("final evaluations do not match the sumcheck value")

    eq = evals.pop()
    if eq % MODULUS != eq_eval(challenges, new_challenges):
        raise VerificationError("eq evaluation is wrong")

    return new_challenges, evals