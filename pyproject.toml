[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecprims"
version = "0.1.0"
description = "Elliptic-curve arithmetic over Edwards and short Weierstrass curves, field parameters, polynomials and precompile event records"
requires-python = ">=3.10"
dependencies = []
keywords = ["elliptic-curve", "ed25519", "secp256k1", "bn254", "bls12-381", "polynomial"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
packages = ["ecprims"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
