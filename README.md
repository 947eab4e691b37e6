# zkconv

Interactive-proof building blocks over the BLS12-381 scalar field, in pure
Python with no third-party dependencies:

- **Multilinear sumcheck** (`zkconv.ml_sumcheck`): prove the sum of a sum of
  products of multilinear polynomials over the boolean hypercube.
- **GKR round sumcheck** (`zkconv.gkr_round_sumcheck`): the two-phase sumcheck
  for `f1(g, x, y) * f2(x) * f3(y)`.
- **Polynomial IOPs** (`zkconv.poly_iop`): a transcript-driven sumcheck on
  products of bookkeeping tables, plus zero checks, grand-product checks and
  permutation checks.
- **Fiat–Shamir helpers**: a feedable BLAKE2b-512 generator
  (`zkconv.rng.Blake2b512Rng`) and a labelled hash transcript
  (`zkconv.transcript.Transcript`).

Field elements are plain Python `int`s reduced modulo the field order
(`zkconv.field.MODULUS`); bookkeeping tables are lists of them, indexed so that
bit `i` of an index is the value of variable `i`.

## Installation

```
pip install .
```

Run the tests with:

```
pip install .[test]
pytest
```

## Multilinear sumcheck

Anything with a `randbytes(n)` method, such as `random.Random`, can serve as
the randomness source for the random constructors.

```python
import random

from zkconv.multilinear import DenseMultilinearExtension
from zkconv.ml_sumcheck.data_structures import ListOfProductsOfPolynomials
from zkconv.ml_sumcheck import sumcheck

rng = random.Random(0)
a = DenseMultilinearExtension.rand(4, rng)
b = DenseMultilinearExtension.rand(4, rng)

poly = ListOfProductsOfPolynomials(4)
poly.add_product([a, b], 3)

proof = sumcheck.prove(poly)
claimed = sumcheck.extract_sum(proof)
subclaim = sumcheck.verify(poly.info(), claimed, proof)
assert poly.evaluate(subclaim.point) == subclaim.expected_evaluation
```

A wrong claimed sum makes `verify` raise `zkconv.errors.RejectError`.
`prove_as_subprotocol` and `verify_as_subprotocol` do the same with a
`Blake2b512Rng` you supply, so the sumcheck can sit inside a larger protocol.
The round-by-round functions live in `zkconv.ml_sumcheck.prover`
(`prover_init`, `prove_round`) and `zkconv.ml_sumcheck.verifier`
(`verifier_init`, `verify_round`, `check_and_generate_subclaim`,
`interpolate_uni_poly`).

## GKR round sumcheck

```python
import random

from zkconv import gkr_round_sumcheck
from zkconv.field import random_elements
from zkconv.multilinear import DenseMultilinearExtension, SparseMultilinearExtension
from zkconv.rng import Blake2b512Rng

rng = random.Random(1)
n = 3
f1 = SparseMultilinearExtension.rand_with_config(3 * n, 1 << n, rng)
f2 = DenseMultilinearExtension.rand(n, rng)
f3 = DenseMultilinearExtension.rand(n, rng)
g = random_elements(n, rng)

proof = gkr_round_sumcheck.prove(Blake2b512Rng(), f1, f2, f3, g)
subclaim = gkr_round_sumcheck.verify(Blake2b512Rng(), f2.num_vars, proof, proof.extract_sum())
assert subclaim.verify_subclaim(f1, f2, f3, g)
```

## Polynomial IOPs with a transcript

Prover and verifier each start from a `Transcript` with the same label. A
proof is a `collections.deque` of message lists that `verify` consumes from
the left.

```python
import random

from zkconv.field import random_elements
from zkconv.multilinear import evaluate_on_point
from zkconv.poly_iop import perm_check
from zkconv.transcript import Transcript

rng = random.Random(2)
evals_0 = random_elements(16, rng)
evals_1 = evals_0[:]
rng.shuffle(evals_1)

proof, _, _ = perm_check.prove(evals_0, evals_1, Transcript(b"PermCheck"))
points, values = perm_check.verify(4, Transcript(b"PermCheck"), proof)
assert values[0] == evaluate_on_point(evals_0, points[0])
```

`sum_check`, `zero_check` and `grand_prod_check` have `prove` and `verify`
functions used the same way. A failed check raises
`zkconv.errors.VerificationError`.

## Errors

All protocol failures derive from `zkconv.errors.SumcheckError`:
`RejectError` when a sumcheck claim is inconsistent, `VerificationError` when
another consistency check fails. Misuse, such as tables whose length is not a
power of two or calling a round function out of order, raises `ValueError` or
`RuntimeError`.

## What it does not do

The package is a library only: it has no command-line tool, and it provides no
polynomial commitment scheme, so the subclaims a verifier obtains must be
checked by evaluating the polynomials directly.