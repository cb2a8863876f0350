import os
import random

import pytest

import spliterati.gf as gf
import spliterati.gf_util
import spliterati.common_types as ct
from spliterati.gf_poly import Polynomial


def fixed_bytes(data: bytes):
    def randbytes(size: int) -> bytes:
        assert size == len(data)
        return data

    return randbytes


def alt_eval_at(coeffs, x):
    """An alternative implementation of eval for validation."""
    accu = 0
    for exp, coeff in enumerate(coeffs):
        accu ^= spliterati.gf_util.mul_slow(coeff, spliterati.gf_util.pow_slow(x, exp))
    return accu


def test_interpolate_fixture():
    result = Polynomial.interpolate([1, 2, 3, 4, 5], [146, 63, 42, 146, 130], 0)
    assert result == 63


def test_interpolate_length_mismatch():
    with pytest.raises(ct.DomainError):
        Polynomial.interpolate([1, 2, 3], [1, 2], 0)


def test_polynomial_init():
    poly = Polynomial(42, 3, randbytes=fixed_bytes(b"\x01\x02\x03"))
    assert poly.degree    == 3
    assert poly.intercept == 42
    assert poly.evaluate(0) == 42

    # coefficients must not show up in logs or tracebacks
    assert repr(poly) == "Polynomial(degree=3)"


def test_polynomial_degree_zero():
    poly = Polynomial(7, 0)
    assert poly.degree == 0
    for x in range(256):
        assert poly.evaluate(x) == 7


def test_polynomial_eval():
    coeffs = b"\x02\x03\x04"
    poly   = Polynomial(coeffs[0], 2, randbytes=fixed_bytes(coeffs[1:]))
    for x in range(256):
        assert poly.evaluate(x) == alt_eval_at(coeffs, x)


def test_polynomial_eval_fuzz():
    for _ in range(50):
        degree    = random.randint(1, 9)
        intercept = random.randrange(256)
        rest      = os.urandom(degree)
        poly      = Polynomial(intercept, degree, randbytes=fixed_bytes(rest))
        coeffs    = bytes([intercept]) + rest
        for _ in range(10):
            x = random.randrange(256)
            assert poly.evaluate(x) == alt_eval_at(coeffs, x)


def test_interpolate_recovers_points():
    for _ in range(20):
        degree = random.randint(1, 10)
        poly   = Polynomial(random.randrange(256), degree)
        xs     = random.sample(range(1, 256), degree + 1)
        ys     = [poly.evaluate(x) for x in xs]

        assert Polynomial.interpolate(xs, ys, 0) == poly.intercept
        for at_x in random.sample(range(256), 5):
            assert Polynomial.interpolate(xs, ys, at_x) == poly.evaluate(at_x)


def test_interpolate_duplicate_x():
    with pytest.raises(ct.DomainError):
        Polynomial.interpolate([3, 3], [1, 2], 0)
