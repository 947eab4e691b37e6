import random

import pytest

from zkconv.field import MODULUS, random_elements
from zkconv.multilinear import (
    DenseMultilinearExtension,
    SparseMultilinearExtension,
    eq_eval,
    evaluate_on_point,
    new_eq,
)


def _bits(index, nv):
    return [(index >> i) & 1 for i in range(nv)]


def test_dense_evaluates_to_table_on_boolean_points():
    poly = DenseMultilinearExtension.rand(3, random.Random(1))
    for index in range(8):
        assert poly.evaluate(_bits(index, 3)) == poly[index]
    assert len(poly) == 8


def test_dense_wrong_size_rejected():
    with pytest.raises(ValueError):
        DenseMultilinearExtension(2, [1, 2, 3])


def test_dense_wrong_point_size_rejected():
    poly = DenseMultilinearExtension(2, [1, 2, 3, 4])
    with pytest.raises(ValueError):
        poly.evaluate([1])
    with pytest.raises(ValueError):
        poly.fix_variables([1, 2, 3])


def test_fix_variables_then_evaluate_matches_full_evaluation():
    rng = random.Random(2)
    poly = DenseMultilinearExtension.rand(5, rng)
    point = random_elements(5, rng)
    fixed = poly.fix_variables(point[:2])
    assert fixed.num_vars == 3
    assert fixed.evaluate(point[2:]) == poly.evaluate(point)


def test_scale_is_linear():
    rng = random.Random(3)
    poly = DenseMultilinearExtension.rand(3, rng)
    point = random_elements(3, rng)
    assert poly.scale(7).evaluate(point) == 7 * poly.evaluate(point) % MODULUS


def test_sparse_to_dense():
    sparse = SparseMultilinearExtension(3, {1: 5, 6: 7})
    dense = sparse.to_dense_multilinear_extension()
    assert dense.evaluations == [0, 5, 0, 0, 0, 0, 7, 0]


def test_sparse_evaluation_matches_dense():
    rng = random.Random(4)
    sparse = SparseMultilinearExtension.rand_with_config(6, 8, rng)
    assert len(sparse.evaluations) == 8
    point = random_elements(6, rng)
    dense = sparse.to_dense_multilinear_extension()
    assert sparse.evaluate(point) == dense.evaluate(point)
    assert (
        sparse.fix_variables(point[:4]).to_dense_multilinear_extension()
        == dense.fix_variables(point[:4])
    )


def test_sparse_rand_config_bounds():
    with pytest.raises(ValueError):
        SparseMultilinearExtension.rand_with_config(2, 5, random.Random(0))
    with pytest.raises(ValueError):
        SparseMultilinearExtension(2, {4: 1})


def test_eq_table_sums_to_one():
    point = random_elements(5, random.Random(5))
    assert sum(new_eq(point)) % MODULUS == 1


def test_eq_table_matches_eq_eval():
    point = random_elements(4, random.Random(6))
    table = new_eq(point)
    for index in range(16):
        assert table[index] == eq_eval(point, _bits(index, 4))


def test_eq_table_extension_matches_eq_eval():
    rng = random.Random(7)
    r = random_elements(4, rng)
    s = random_elements(4, rng)
    assert evaluate_on_point(new_eq(r), s) == eq_eval(r, s)


def test_eq_eval_dimension_mismatch():
    with pytest.raises(ValueError):
        eq_eval([1, 2], [1])