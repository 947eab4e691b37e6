"""Verifier side of the interactive multilinear sumcheck protocol."""

from dataclasses import dataclass, field

from zkconv.errors import RejectError, VerificationError
from zkconv.field import MODULUS, inverse, random_element, to_bytes


@dataclass
class VerifierMsg:
    """Randomness sampled by the verifier."""

    randomness: int

    def serialize(self):
        return to_bytes(self.randomness)


@dataclass
class VerifierState:
    """Everything the verifier keeps between rounds."""

    round: int
    nv: int
    max_multiplicands: int
    finished: bool = False
    polynomials_received: list = field(default_factory=list)
    randomness: list = field(default_factory=list)


@dataclass
class SubClaim:
    """The claim left once the verifier is convinced."""

    point: list
    expected_evaluation: int


def verifier_init(index_info):
    """Start verifying a polynomial described by ``index_info``."""
    return VerifierState(
        round=1,
        nv=index_info.num_variables,
        max_multiplicands=index_info.max_multiplicands,
    )


def sample_round(rng):
    """Draw a verifier message without verifying anything."""
    return VerifierMsg(random_element(rng))


def verify_round(prover_msg, verifier_state, rng):
    """Record the prover's message and sample this round's randomness.

    The actual checks are deferred to :func:`check_and_generate_subclaim`.
    """
    if verifier_state.finished:
        raise RuntimeError("Incorrect verifier state: Verifier is already finished.")
    msg = sample_round(rng)
    verifier_state.randomness.append(msg.randomness)
    verifier_state.polynomials_received.append(list(prover_msg.evaluations))
    if verifier_state.round == verifier_state.nv:
        verifier_state.finished = True
    else:
        verifier_state.round += 1
    return msg


def check_and_generate_subclaim(verifier_state, asserted_sum):
    """Check every round against ``asserted_sum`` and return the final subclaim."""
    if not verifier_state.finished:
        raise RuntimeError("Verifier has not finished.")
    if len(verifier_state.polynomials_received) != verifier_state.nv:
        raise VerificationError("insufficient rounds")

    expected = asserted_sum % MODULUS
    for evaluations, r in zip(verifier_state.polynomials_received, verifier_state.randomness):
        if len(evaluations) != verifier_state.max_multiplicands + 1:
            raise VerificationError("incorrect number of evaluations")
        if (evaluations[0] + evaluations[1]) % MODULUS != expected:
            raise RejectError("Prover message is not consistent with the claim.")
        expected = interpolate_uni_poly(evaluations, r)

    return SubClaim(point=list(verifier_state.randomness), expected_evaluation=expected)


def interpolate_uni_poly(p_i, eval_at):
    """Evaluate at ``eval_at`` the polynomial of degree < len(p_i) through (k, p_i[k])."""
    length = len(p_i)
    if length == 0:
        raise ValueError("cannot interpolate through no points")
    eval_at %= MODULUS
    if eval_at < length:
        return p_i[eval_at] % MODULUS

    diffs = [(eval_at - k) % MODULUS for k in range(length)]
    prod = 1
    for d in diffs:
        prod = prod * d % MODULUS

    # denominator of term i is i! * (-1)^(len-1-i) * (len-1-i)!, built from the top down
    denom_up = 1
    for k in range(1, length):
        denom_up = denom_up * k % MODULUS
    denom_down = 1

    result = 0
    for i, value in reversed(list(enumerate(p_i))):
        numerator = value * prod % MODULUS * denom_down % MODULUS
        result = (result + numerator * inverse(denom_up * diffs[i])) % MODULUS
        if i:
            denom_up = denom_up * -(length - i) % MODULUS
            denom_down = denom_down * i % MODULUS
    return result