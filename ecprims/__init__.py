"""Elliptic-curve arithmetic on Ed25519, BN254, secp256k1 and BLS12-381, field parameters, polynomials and memory and precompile event records."""

__version__ = "0.1.0"