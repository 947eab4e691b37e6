"""Sumcheck protocol for sums of products of multilinear polynomials."""