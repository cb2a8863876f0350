# This file is part of the spliterati project
#
# Copyright (c) 2022 spliterati authors - MIT License
# SPDX-License-Identifier: MIT

"""Galois Field GF(2**8) arithmetic.

Elements are plain ints in the range 0..255. Addition and subtraction
are both xor. Multiplication and division use the log/exp tables from
gf_lut.

Values passing through these functions are usually secret (bytes of the
secret or of the random coefficients), so the zero case of mul/div is
handled with a bit mask rather than with a branch.
"""

from . import gf_lut
from . import common_types as ct

ORDER = 256

LOG_LUT = gf_lut.LOG_LUT
EXP_LUT = gf_lut.EXP_LUT


def zero_if_zero(cond: int, value: int) -> int:
    """Return 0 if cond == 0, else value.

    The bits of cond are folded onto each other until every bit of the
    mask holds the OR of all bits of cond.

        mask = 'abcdefgh'
        mask |= (mask << 4) | (mask >> 4)   # (ae)(bf)(cg)(dh)(ea)(fb)(gc)(hd)
        mask |= (mask << 2) | (mask >> 2)
        mask |= (mask << 1) | (mask >> 1)   # (abcdefgh) in every position

    So mask is 0x00 if cond == 0, otherwise 0xFF (plus some higher bits,
    which are discarded by the final and with value).
    """
    mask = cond
    mask |= (mask << 4) | (mask >> 4)
    mask |= (mask << 2) | (mask >> 2)
    mask |= (mask << 1) | (mask >> 1)
    return mask & value & 0xFF


def xor(a: int, b: int) -> int:
    return a ^ b


def mul(a: int, b: int) -> int:
    log_sum = (LOG_LUT[a] + LOG_LUT[b]) % (ORDER - 1)
    return zero_if_zero(b, zero_if_zero(a, EXP_LUT[log_sum]))


def div(a: int, b: int) -> int:
    if b == 0:
        raise ct.DomainError("division by zero in field")

    log_diff = (LOG_LUT[a] - LOG_LUT[b] + (ORDER - 1)) % (ORDER - 1)
    return zero_if_zero(a, EXP_LUT[log_diff])
