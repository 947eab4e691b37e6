"""Transcript-based polynomial IOPs: sum, zero, grand-product and permutation checks."""