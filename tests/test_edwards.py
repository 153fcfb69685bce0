import random

import pytest

from ecprims.curve import AffinePoint, CurveType
from ecprims.edwards import (
    ED25519,
    ED25519_BASE_FIELD,
    WORDS_CURVE_POINT,
    compress,
    decompress,
    ed25519_sqrt,
)
from ecprims.utils import biguint_from_limbs

NUM_TEST_CASES = 100


def test_bigint_ed_add():
    neutral = ED25519.neutral()
    base = ED25519.ec_generator()

    assert base + neutral == base
    assert neutral + base == base
    assert neutral + neutral == neutral


def test_biguint_scalar_mul():
    base = ED25519.ec_generator()

    d = ED25519.d_biguint()
    p = ED25519_BASE_FIELD.modulus()
    assert (d * 121666) % p == (p - 121665) % p

    rng = random.Random(1234)
    for _ in range(10):
        x = rng.getrandbits(24)
        y = rng.getrandbits(25)

        x_base = base * x
        y_x_base = x_base * y
        xy_base = base * (x * y)
        assert y_x_base == xy_base

    order = 2**252 + 27742317777372353535851937790883648493
    assert base == base + base * order


def test_ed25519_decompress():
    point = ED25519.ec_generator()
    for _ in range(NUM_TEST_CASES):
        compressed = compress(point)
        assert point == decompress(compressed)
        point = point + point


def test_modulus_bytes_match_value():
    assert biguint_from_limbs(ED25519_BASE_FIELD.modulus_bytes) == 2**255 - 19
    assert ED25519_BASE_FIELD.modulus() == 2**255 - 19


def test_curve_type_and_order():
    assert ED25519.curve_type is CurveType.ED25519
    assert ED25519.prime_group_order == 2**252 + 27742317777372353535851937790883648493
    assert ED25519.ec_generator() * ED25519.prime_group_order == ED25519.neutral()
    assert ED25519.nb_scalar_bits() == 256


def test_generator_lies_on_curve():
    g = ED25519.ec_generator()
    p = ED25519_BASE_FIELD.modulus()
    d = ED25519.d_biguint()
    lhs = (-g.x * g.x + g.y * g.y) % p
    rhs = (1 + d * g.x * g.x * g.y * g.y) % p
    assert lhs == rhs


def test_point_plus_negation_is_neutral():
    g = ED25519.ec_generator()
    assert g + (-g) == ED25519.neutral()


def test_double_matches_add():
    g = ED25519.ec_generator()
    assert ED25519.ec_double(g) == g + g


def test_ec_neutral_is_neutral():
    assert ED25519.ec_neutral() == AffinePoint(0, 1, ED25519)


def test_words_round_trip():
    g = ED25519.ec_generator() * 12345
    words = g.to_words_le()
    assert len(words) == WORDS_CURVE_POINT
    assert AffinePoint.from_words_le(ED25519, words) == g


def test_sqrt_is_even_root():
    p = ED25519_BASE_FIELD.modulus()
    rng = random.Random(99)
    for _ in range(20):
        x = rng.getrandbits(255) % p
        square = x * x % p
        root = ed25519_sqrt(square)
        assert root * root % p == square
        assert root % 2 == 0


def test_sqrt_of_non_square_raises():
    with pytest.raises(ValueError):
        ed25519_sqrt(2)


def test_decompress_sign_bit_negates_x():
    g = ED25519.ec_generator()
    encoded = bytearray(compress(g))
    encoded[31] ^= 0x80
    flipped = decompress(bytes(encoded))
    assert flipped.y == g.y
    assert (flipped.x + g.x) % ED25519_BASE_FIELD.modulus() == 0


def test_decompress_wrong_length_raises():
    with pytest.raises(ValueError):
        decompress(bytes(31))