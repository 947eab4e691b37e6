"""Sumcheck protocols, GKR round sumcheck and polynomial IOPs over the BLS12-381 scalar field."""

__version__ = "0.1.0"