"""Prover side of the interactive multilinear sumcheck protocol."""

from dataclasses import dataclass, field

from zkconv.field import MODULUS, serialize
from zkconv.multilinear import DenseMultilinearExtension


@dataclass
class ProverMsg:
    """Evaluations of the round polynomial at 0, 1, ..., degree."""

    evaluations: list

    def serialize(self):
        return serialize(self.evaluations)


@dataclass
class ProverState:
    """Everything the prover keeps between rounds."""

    randomness: list
    list_of_products: list
    flattened_ml_extensions: list
    num_vars: int
    max_multiplicands: int
    round: int = 0
    _unused: list = field(default_factory=list, repr=False, compare=False)


def prover_init(polynomial):
    """Start proving the sum of ``polynomial`` over the boolean hypercube."""
    if polynomial.num_variables == 0:
        raise ValueError("Attempt to prove a constant.")
    return ProverState(
        randomness=[],
        list_of_products=[(c, list(indices)) for c, indices in polynomial.products],
        flattened_ml_extensions=[
            DenseMultilinearExtension(m.num_vars, m.evaluations)
            for m in polynomial.flattened_ml_extensions
        ],
        num_vars=polynomial.num_variables,
        max_multiplicands=polynomial.max_multiplicands,
    )


def prove_round(prover_state, v_msg):
    """Take the verifier's message (``None`` in the first round) and answer the round."""
    if v_msg is not None:
        if prover_state.round == 0:
            raise RuntimeError("first round should be prover first.")
        r = v_msg.randomness % MODULUS
        prover_state.randomness.append(r)
        prover_state.flattened_ml_extensions = [
            m.fix_variables([r]) for m in prover_state.flattened_ml_extensions
        ]
    elif prover_state.round > 0:
        raise RuntimeError("verifier message is empty")

    prover_state.round += 1
    if prover_state.round > prover_state.num_vars:
        raise RuntimeError("Prover is not active")

    points = prover_state.max_multiplicands + 1
    tables = [m.evaluations for m in prover_state.flattened_ml_extensions]
    pairs = [list(zip(t[0::2], t[1::2])) for t in tables]

    sums = [0] * points
    for coefficient, indices in prover_state.list_of_products:
        for row in zip(*(pairs[j] for j in indices)):
            values = [coefficient] * points
            for lo, hi in row:
                step = hi - lo
                values = [v * (lo + t * step) % MODULUS for t, v in enumerate(values)]
            sums = [s + v for s, v in zip(sums, values)]

    return ProverMsg([s % MODULUS for s in sums])