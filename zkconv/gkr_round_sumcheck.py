"""Sumcheck for the GKR round function ``f1(g, x, y) * f2(x) * f3(y)``.

The sum over ``x`` and ``y`` is proven in two phases, each an ordinary
multilinear sumcheck over ``dim`` variables.
"""

from dataclasses import dataclass

from zkconv.errors import VerificationError
from zkconv.field import MODULUS
from zkconv.ml_sumcheck.data_structures import ListOfProductsOfPolynomials, PolynomialInfo
from zkconv.ml_sumcheck.prover import prove_round, prover_init
from zkconv.ml_sumcheck.verifier import (
    check_and_generate_subclaim,
    sample_round,
    verifier_init,
    verify_round,
)
from zkconv.multilinear import DenseMultilinearExtension


@dataclass
class GKRProof:
    """Prover messages of both sumcheck phases."""

    phase1_sumcheck_msgs: list
    phase2_sumcheck_msgs: list

    def extract_sum(self):
        """Return the sum this proof claims."""
        first = self.phase1_sumcheck_msgs[0].evaluations
        return (first[0] + first[1]) % MODULUS


@dataclass
class GKRRoundSumcheckSubClaim:
    """The claim ``f1(g, u, v) * f2(u) * f3(v) == expected_evaluation``."""

    u: list
    v: list
    expected_evaluation: int

    def verify_subclaim(self, f1, f2, f3, g):
        """Check the subclaim by evaluating the round function directly."""
        dim = len(self.u)
        if len(self.v) != dim:
            raise ValueError("u and v differ in dimension")
        if f1.num_vars != 3 * dim:
            raise ValueError("f1 must have three times as many variables as u")
        if f2.num_vars != dim or f3.num_vars != dim:
            raise ValueError("f2 and f3 must have as many variables as u")
        if len(g) != dim:
            raise ValueError("g must have as many coordinates as u")
        guv = [*g, *self.u, *self.v]
        actual = f1.evaluate(guv) * f2.evaluate(self.u) % MODULUS * f3.evaluate(self.v) % MODULUS
        return actual == self.expected_evaluation % MODULUS


def initialize_phase_one(f1, f3, g):
    """Return ``h_g`` and ``f1`` with its first variables fixed at ``g``."""
    dim = f3.num_vars
    if f1.num_vars != 3 * dim:
        raise ValueError("f1 must have three times as many variables as f3")
    if len(g) != dim:
        raise ValueError("g must have as many coordinates as f3 has variables")
    mask = (1 << dim) - 1
    a_hg = [0] * (1 << dim)
    f1_at_g = f1.fix_variables(list(g))
    for xy, value in f1_at_g.evaluations.items():
        if value:
            x = xy & mask
            y = xy >> dim
            a_hg[x] = (a_hg[x] + value * f3[y]) % MODULUS
    return DenseMultilinearExtension(dim, a_hg), f1_at_g


def _product_prover(first, second):
    dim = first.num_vars
    if second.num_vars != dim:
        raise ValueError("multiplicands differ in number of variables")
    poly = ListOfProductsOfPolynomials(dim)
    poly.add_product(
        [
            DenseMultilinearExtension(first.num_vars, first.evaluations),
            DenseMultilinearExtension(second.num_vars, second.evaluations),
        ],
        1,
    )
    return prover_init(poly)


def start_phase1_sumcheck(h_g, f2):
    """Prover state for the sum of ``h_g(x) * f2(x)``."""
    return _product_prover(h_g, f2)


def initialize_phase_two(f1_g, u):
    """Fix ``f1(g, ...)`` further at ``u`` and return it densely."""
    if len(u) * 2 != f1_g.num_vars:
        raise ValueError("u must fix exactly half of the remaining variables")
    return f1_g.fix_variables(list(u)).to_dense_multilinear_extension()


def start_phase2_sumcheck(f1_gu, f3, f2_u):
    """Prover state for the sum of ``f1(g, u, y) * f2(u) * f3(y)``."""
    return _product_prover(f1_gu, f3.scale(f2_u))


def _run_prover_phase(rng, state, dim):
    msgs = []
    point = []
    verifier_msg = None
    for _ in range(dim):
        prover_msg = prove_round(state, verifier_msg)
        rng.feed(prover_msg)
        msgs.append(prover_msg)
        verifier_msg = sample_round(rng)
        point.append(verifier_msg.randomness)
    return msgs, point


def prove(rng, f1, f2, f3, g):
    """Prove the sum of the round function given by ``f1``, ``f2``, ``f3`` at ``g``."""
    if f1.num_vars != 3 * f2.num_vars or f1.num_vars != 3 * f3.num_vars:
        raise ValueError("f1 must have three times as many variables as f2 and f3")
    dim = f2.num_vars
    g = list(g)

    h_g, f1_g = initialize_phase_one(f1, f3, g)
    phase1_msgs, u = _run_prover_phase(rng, start_phase1_sumcheck(h_g, f2), dim)

    f1_gu = initialize_phase_two(f1_g, u)
    phase2_state = start_phase2_sumcheck(f1_gu, f3, f2.evaluate(u))
    phase2_msgs, _ = _run_prover_phase(rng, phase2_state, dim)

    return GKRProof(phase1_sumcheck_msgs=phase1_msgs, phase2_sumcheck_msgs=phase2_msgs)


def _run_verifier_phase(rng, msgs, dim, claimed):
    state = verifier_init(PolynomialInfo(max_multiplicands=2, num_variables=dim))
    if len(msgs) < dim:
        raise VerificationError("proof is incomplete")
    for prover_msg in msgs[:dim]:
        rng.feed(prover_msg)
        verify_round(prover_msg, state, rng)
    return check_and_generate_subclaim(state, claimed)


def verify(rng, f2_num_vars, proof, claimed_sum):
    """Check ``proof`` against ``claimed_sum`` and return the resulting subclaim.

    Raises :class:`~zkconv.errors.RejectError` when the proof is inconsistent.
    """
    dim = f2_num_vars
    phase1 = _run_verifier_phase(rng, proof.phase1_sumcheck_msgs, dim, claimed_sum)
    phase2 = _run_verifier_phase(
        rng, proof.phase2_sumcheck_msgs, dim, phase1.expected_evaluation
    )
    return GKRRoundSumcheckSubClaim(
        u=phase1.point, v=phase2.point, expected_evaluation=phase2.expected_evaluation
    )