"""Sums of products of multilinear polynomials, the input of the sumcheck."""

from dataclasses import dataclass

from zkconv.field import MODULUS


@dataclass(frozen=True)
class PolynomialInfo:
    """Number of variables and maximum product size: the verifier key."""

    max_multiplicands: int
    num_variables: int

    def serialize(self):
        return self.max_multiplicands.to_bytes(8, "little") + self.num_variables.to_bytes(
            8, "little"
        )


class ListOfProductsOfPolynomials:
    """The polynomial ``sum_i c_i * prod_j P_ij``.

    Multiplicands are stored once each in ``flattened_ml_extensions``; the same
    object used several times is shared by index.
    """

    def __init__(self, num_variables):
        self.max_multiplicands = 0
        self.num_variables = num_variables
        self.products = []
        self.flattened_ml_extensions = []
        self._index_by_identity = {}

    def info(self):
        return PolynomialInfo(self.max_multiplicands, self.num_variables)

    def add_product(self, product, coefficient):
        """Add the product of ``product``'s multiplicands, scaled by ``coefficient``."""
        product = list(product)
        if not product:
            raise ValueError("a product needs at least one multiplicand")
        for m in product:
            if m.num_vars != self.num_variables:
                raise ValueError("product has a multiplicand with wrong number of variables")
        self.max_multiplicands = max(self.max_multiplicands, len(product))
        indices = []
        for m in product:
            index = self._index_by_identity.get(id(m))
            if index is None:
                index = len(self.flattened_ml_extensions)
                self.flattened_ml_extensions.append(m)
                self._index_by_identity[id(m)] = index
            indices.append(index)
        self.products.append((coefficient % MODULUS, indices))

    def evaluate(self, point):
        """Evaluate the polynomial at ``point``."""
        values = [m.evaluate(point) for m in self.flattened_ml_extensions]
        total = 0
        for coefficient, indices in self.products:
            term = coefficient
            for i in indices:
                term = term * values[i] % MODULUS
            total += term
        return total % MODULUS