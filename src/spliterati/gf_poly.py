# This file is part of the spliterati project
#
# Copyright (c) 2022 spliterati authors - MIT License
# SPDX-License-Identifier: MIT

"""Polynomials over GF(2**8) and lagrange interpolation.

Helpful introduction: https://www.youtube.com/watch?v=kkMps3X_tEE
(Simple introduction to Shamir's Secret Sharing and Lagrange interpolation)

A helpful introduction to Galois Fields:
https://crypto.stackexchange.com/a/2718
"""

from typing import Tuple
from typing import Sequence

from . import gf
from . import rand
from . import common_types as ct

Coefficients = Tuple[int, ...]


class Polynomial:

    _coeffs: Coefficients

    def __init__(self, intercept: int, degree: int, randbytes: rand.RandBytes = rand.urandom) -> None:
        """Random polynomial of the given degree with f(0) == intercept.

        The coefficients are ordered in ascending powers of x, so
        coeffs = (2, 5, 3) represents 2x° + 5x¹ + 3x². The intercept is
        the 0th coefficient, which is the y value when we evaluate at x=0.
        """
        assert 0 <= intercept < gf.ORDER, intercept
        assert degree >= 0, degree
        self._coeffs = (intercept,) + tuple(randbytes(degree))

    @property
    def degree(self) -> int:
        return len(self._coeffs) - 1

    @property
    def intercept(self) -> int:
        return self._coeffs[0]

    def __repr__(self) -> str:
        # coefficients are as secret as the intercept
        return f"Polynomial(degree={self.degree})"

    def evaluate(self, x: int) -> int:
        """Evaluate polynomial at x (Horner's method)."""
        if x == 0:
            return self._coeffs[0]

        coeffs = self._coeffs
        out    = coeffs[-1]
        for coeff in reversed(coeffs[:-1]):
            out = gf.xor(gf.mul(out, x), coeff)
        return out

    @staticmethod
    def interpolate(xs: Sequence[int], ys: Sequence[int], x: int) -> int:
        r"""Interpolate y value at x for the polynomial through (xs, ys).

        # \delta_i(x) = \prod{ \frac{x - x_j}{x_i - x_j} }
        # \space
        # \text{for} \space j \not= i
        """
        if len(xs) != len(ys):
            raise ct.DomainError("xs and ys must have the same length")

        result = 0
        for i, (x_i, y_i) in enumerate(zip(xs, ys)):
            basis = 1
            for j, x_j in enumerate(xs):
                if i == j:
                    continue
                basis = gf.mul(basis, gf.div(gf.xor(x, x_j), gf.xor(x_i, x_j)))
            result = gf.xor(result, gf.mul(y_i, basis))

        return result
