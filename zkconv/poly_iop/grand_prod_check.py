"""Grand product check: prove the product of all entries of an evaluation table.

The table is multiplied pairwise, layer by layer, down to two values. Each
layer is then tied to the one below it by a sumcheck of
``V_{i+1}(r) = sum_p V_i(p, 0) * V_i(p, 1) * eq(r, p)``.
"""

from collections import deque

from zkconv.errors import VerificationError
from zkconv.field import MODULUS
from zkconv.multilinear import eq_eval, new_eq
from zkconv.poly_iop import sum_check
from zkconv.transcript import append_serializable_element, get_and_append_challenge

_PROVER_MSG = b"prover msg"
_INTERNAL_ROUND = b"Internal round"


def _triple_product(values):
    return values[0] * values[1] % MODULUS * values[2] % MODULUS


def _line(evals, challenge):
    return (evals[0] + (evals[1] - evals[0]) * challenge) % MODULUS


def _layers(evals):
    layer = [e % MODULUS for e in evals]
    size = len(layer)
    if size < 2 or size & (size - 1):
        raise ValueError(f"table length {size} is not a power of two of at least 2")
    layers = [layer]
    while len(layers[-1]) > 2:
        prev = layers[-1]
        layers.append([a * b % MODULUS for a, b in zip(prev[0::2], prev[1::2])])
    return layers


def prove(evals, transcript):
    """Prove the product of ``evals``.

    Returns the proof, the final random point ``r`` and the value of the
    multilinear extension of ``evals`` at ``r``.
    """
    layers = _layers(evals)
    top = layers[-1]

    append_serializable_element(transcript, _PROVER_MSG, top)
    proof = deque([list(top)])

    challenge = get_and_append_challenge(transcript, _INTERNAL_ROUND)
    point = [challenge]
    value = _line(top, challenge)

    for layer in reversed(layers[:-1]):
        eq = new_eq(point)
        layer_proof, layer_challenges, layer_values = sum_check.prove(
            [layer[0::2], layer[1::2], eq], _triple_product, transcript
        )
        proof.extend(layer_proof)

        # V_i(r', 0), V_i(r', 1) and eq(r, r'); the last the verifier recomputes.
        append_serializable_element(transcript, _PROVER_MSG, layer_values)
        proof.append(list(layer_values))

        challenge = get_and_append_challenge(transcript, _INTERNAL_ROUND)
        value = _line(layer_values, challenge)
        point = [challenge, *layer_challenges]

    return proof, point, value


def verify(layer_num, transcript, proof):
    """Check a grand product proof for a table of ``2 ** layer_num`` entries.

    Consumes the proof from the left and returns the claimed product, the
    random point ``r`` and the claimed value of the table's extension at ``r``.
    """
    if layer_num < 1:
        raise ValueError("layer_num must be at least 1")
    if not proof:
        raise VerificationError("proof is incomplete")
    evals = list(proof.popleft())
    if len(evals) != 2:
        raise VerificationError("top layer must hold exactly two values")
    append_serializable_element(transcript, _PROVER_MSG, evals)
    product = evals[0] * evals[1] % MODULUS

    challenge = get_and_append_challenge(transcript, _INTERNAL_ROUND)
    point = [challenge]
    value = _line(evals, challenge)

    for i in reversed(range(layer_num - 1)):
        layer_challenges, layer_value = sum_check.verify(
            value, 3, layer_num - i - 1, transcript, proof
        )

        if not proof:
            raise VerificationError("proof is incomplete")
        evals = list(proof.popleft())
        if len(evals) != 3:
            raise VerificationError("layer evaluations must hold exactly three values")
        append_serializable_element(transcript, _PROVER_MSG, evals)

        if layer_value != _triple_product(evals):
            raise VerificationError("layer evaluations do not match the sumcheck value")
        if evals[2] % MODULUS != eq_eval(point, layer_challenges):
            raise VerificationError("eq evaluation is wrong")

        challenge = get_and_append_challenge(transcript, _INTERNAL_ROUND)
        value = _line(evals, challenge)
        point = [challenge, *layer_challenges]

    return product, point, value