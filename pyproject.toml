[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zkconv"
version = "0.1.0"
description = "Sumcheck, GKR round sumcheck and polynomial IOPs (zero, grand-product and permutation checks) over the BLS12-381 scalar field"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sumcheck",
    "gkr",
    "zero-knowledge",
    "multilinear",
    "interactive-proof",
    "fiat-shamir",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zkconv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
