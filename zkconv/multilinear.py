"""Dense and sparse multilinear extensions over the scalar field.

Evaluation tables are indexed little-endian: bit ``i`` of an index is the
value of variable ``i``.
"""

from zkconv.field import MODULUS, random_element, random_elements


class DenseMultilinearExtension:
    """A multilinear polynomial given by its evaluations over the hypercube."""

    __slots__ = ("num_vars", "evaluations")

    def __init__(self, num_vars, evaluations):
        evals = [e % MODULUS for e in evaluations]
        if num_vars < 0 or len(evals) != 1 << num_vars:
            raise ValueError(
                f"expected {1 << max(num_vars, 0)} evaluations for {num_vars} variables, "
                f"got {len(evals)}"
            )
        self.num_vars = num_vars
        self.evaluations = evals

    @classmethod
    def rand(cls, num_vars, rng):
        return cls(num_vars, random_elements(1 << num_vars, rng))

    def __getitem__(self, index):
        return self.evaluations[index]

    def __len__(self):
        return len(self.evaluations)

    def __iter__(self):
        return iter(self.evaluations)

    def __eq__(self, other):
        if not isinstance(other, DenseMultilinearExtension):
            return NotImplemented
        return self.num_vars == other.num_vars and self.evaluations == other.evaluations

    __hash__ = None

    def __repr__(self):
        return f"DenseMultilinearExtension(num_vars={self.num_vars})"

    def evaluate(self, point):
        """Evaluate at a full point of ``num_vars`` coordinates."""
        if len(point) != self.num_vars:
            raise ValueError(f"point has {len(point)} coordinates, expected {self.num_vars}")
        return self.fix_variables(point).evaluations[0]

    def fix_variables(self, partial_point):
        """Bind the lowest variables to ``partial_point``."""
        if len(partial_point) > self.num_vars:
            raise ValueError("too many coordinates to fix")
        evals = self.evaluations
        for r in partial_point:
            evals = [(lo + r * (hi - lo)) % MODULUS for lo, hi in zip(evals[0::2], evals[1::2])]
        return DenseMultilinearExtension(self.num_vars - len(partial_point), evals)

    def scale(self, scalar):
        """Return this polynomial multiplied by ``scalar``."""
        return DenseMultilinearExtension(self.num_vars, [scalar * e for e in self.evaluations])


class SparseMultilinearExtension:
    """A multilinear polynomial given by its non-zero evaluations."""

    __slots__ = ("num_vars", "evaluations")

    def __init__(self, num_vars, evaluations):
        items = evaluations.items() if hasattr(evaluations, "items") else evaluations
        size = 1 << num_vars
        table = {}
        for index, value in items:
            if not 0 <= index < size:
                raise ValueError(f"index {index} out of range for {num_vars} variables")
            value %= MODULUS
            if value:
                table[index] = value
            else:
                table.pop(index, None)
        self.num_vars = num_vars
        self.evaluations = table

    @classmethod
    def rand_with_config(cls, num_vars, num_nonzero, rng):
        """Random polynomial with exactly ``num_nonzero`` non-zero evaluations."""
        if num_nonzero > 1 << num_vars:
            raise ValueError("more non-zero entries requested than the hypercube holds")
        mask = (1 << num_vars) - 1
        table = {}
        while len(table) < num_nonzero:
            index = int.from_bytes(rng.randbytes(8), "little") & mask
            value = random_element(rng)
            if value:
                table[index] = value
        return cls(num_vars, table)

    def __eq__(self, other):
        if not isinstance(other, SparseMultilinearExtension):
            return NotImplemented
        return self.num_vars == other.num_vars and self.evaluations == other.evaluations

    __hash__ = None

    def __repr__(self):
        return (
            f"SparseMultilinearExtension(num_vars={self.num_vars}, "
            f"nonzero={len(self.evaluations)})"
        )

    def evaluate(self, point):
        """Evaluate at a full point of ``num_vars`` coordinates."""
        if len(point) != self.num_vars:
            raise ValueError(f"point has {len(point)} coordinates, expected {self.num_vars}")
        return self.fix_variables(point).evaluations.get(0, 0)

    def fix_variables(self, partial_point):
        """Bind the lowest variables to ``partial_point``."""
        if len(partial_point) > self.num_vars:
            raise ValueError("too many coordinates to fix")
        table = dict(self.evaluations)
        for r in partial_point:
            weights = ((1 - r) % MODULUS, r % MODULUS)
            folded = {}
            for index, value in table.items():
                target = index >> 1
                folded[target] = (folded.get(target, 0) + value * weights[index & 1]) % MODULUS
            table = {k: v for k, v in folded.items() if v}
        return SparseMultilinearExtension(self.num_vars - len(partial_point), table)

    def to_dense_multilinear_extension(self):
        evals = [0] * (1 << self.num_vars)
        for index, value in self.evaluations.items():
            evals[index] = value
        return DenseMultilinearExtension(self.num_vars, evals)


def new_eq(point):
    """Evaluation table of ``eq(point, x)`` over the hypercube."""
    table = [1]
    for r in point:
        one_minus = (1 - r) % MODULUS
        table = [v * one_minus % MODULUS for v in table] + [v * r % MODULUS for v in table]
    return table


def eq_eval(x, y):
    """Evaluate ``eq(x, y)`` for two points of equal dimension."""
    if len(x) != len(y):
        raise ValueError("points differ in dimension")
    result = 1
    for a, b in zip(x, y):
        result = result * (a * b + (1 - a) * (1 - b)) % MODULUS
    return result


def evaluate_on_point(evals, point):
    """Evaluate the multilinear extension of ``evals`` at ``point``."""
    return DenseMultilinearExtension(len(point), evals).evaluate(point)