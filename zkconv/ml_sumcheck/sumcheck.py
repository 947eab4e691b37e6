"""Non-interactive sumcheck for sums of products of multilinear polynomials.

The verifier's challenges are derived with a feedable Fiat-Shamir generator.
"""

from zkconv.errors import VerificationError
from zkconv.field import MODULUS
from zkconv.ml_sumcheck.prover import prove_round, prover_init
from zkconv.ml_sumcheck.verifier import (
    check_and_generate_subclaim,
    sample_round,
    verifier_init,
    verify_round,
)
from zkconv.rng import Blake2b512Rng


def extract_sum(proof):
    """Return the sum claimed by ``proof`` (its first round at 0 plus at 1)."""
    first = proof[0].evaluations
    return (first[0] + first[1]) % MODULUS


def prove(polynomial):
    """Prove the sum of ``polynomial`` over the boolean hypercube.

    Returns the list of prover messages.
    """
    proof, _ = prove_as_subprotocol(Blake2b512Rng(), polynomial)
    return proof


def prove_as_subprotocol(fs_rng, polynomial):
    """Prove using ``fs_rng`` as the transcript.

    Returns the prover messages together with the final prover state, whose
    ``randomness`` holds every challenge including the last one.
    """
    fs_rng.feed(polynomial.info())
    prover_state = prover_init(polynomial)
    verifier_msg = None
    prover_msgs = []
    for _ in range(polynomial.num_variables):
        prover_msg = prove_round(prover_state, verifier_msg)
        fs_rng.feed(prover_msg)
        prover_msgs.append(prover_msg)
        verifier_msg = sample_round(fs_rng)
    prover_state.randomness.append(verifier_msg.randomness)
    return prover_msgs, prover_state


def verify(polynomial_info, claimed_sum, proof):
    """Verify ``claimed_sum`` against ``proof`` and return the resulting subclaim."""
    return verify_as_subprotocol(Blake2b512Rng(), polynomial_info, claimed_sum, proof)


def verify_as_subprotocol(fs_rng, polynomial_info, claimed_sum, proof):
    """Verify using ``fs_rng`` as the transcript and return the subclaim."""
    fs_rng.feed(polynomial_info)
    verifier_state = verifier_init(polynomial_info)
    for i in range(polynomial_info.num_variables):
        if i >= len(proof):
            raise VerificationError("proof is incomplete")
        prover_msg = proof[i]
        fs_rng.feed(prover_msg)
        verify_round(prover_msg, verifier_state, fs_rng)
    return check_and_generate_subclaim(verifier_state, claimed_sum)