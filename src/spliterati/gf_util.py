# This file is part of the spliterati project
#
# Copyright (c) 2022 spliterati authors - MIT License
# SPDX-License-Identifier: MIT

"""Reference implementations for GF(2**8) arithmetic.

These are slow and do not use lookup tables. They are only used to
validate the tables in gf_lut and the functions in gf.
"""

from typing import List
from typing import Tuple

# https://en.wikipedia.org/wiki/Finite_field_arithmetic#Rijndael's_finite_field
#
# x**8 + x**4 + x**3 + x + 1  (0b100011011 = 0x11B)

RIJNDAEL_REDUCING_POLYNOMIAL = 0x011B

GENERATOR = 0xE5


def mul_slow(a: int, b: int) -> int:
    """Carry-less (peasant) multiplication, reduced by the field polynomial."""
    assert 0 <= a < 256, a
    assert 0 <= b < 256, b

    res = 0
    while b > 0:
        if b & 1 != 0:
            res = res ^ a
        a = a << 1
        if a & 0x100:
            a = a ^ RIJNDAEL_REDUCING_POLYNOMIAL
        b = b >> 1

    assert 0 <= res < 256, res
    return res


def pow_slow(a: int, b: int) -> int:
    res = 1
    for _ in range(b):
        res = mul_slow(res, a)
    return res


def inverse_slow(val: int) -> int:
    """Calculate multiplicative inverse in GF(256).

    Since the nonzero elements of GF(p^n) form a finite group with
    respect to multiplication,

      a^((p^n)−1) = 1         (for a != 0)

      thus the inverse of a is

      a^((p^n)−2).
    """
    if val == 0:
        return 0

    return pow_slow(val, 2 ** 8 - 2)


def gen_luts(generator: int = GENERATOR) -> Tuple[List[int], List[int]]:
    """Generate the exp and log tables (as found in gf_lut)."""
    exp = [1] * 256
    for i in range(1, 256):
        exp[i] = mul_slow(exp[i - 1], generator)

    log = [0] * 256
    for i in range(1, 256):
        log[exp[i]] = i

    return exp, log
