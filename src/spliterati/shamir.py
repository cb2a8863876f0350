# This file is part of the spliterati project
#
# Copyright (c) 2022 spliterati authors - MIT License
# SPDX-License-Identifier: MIT

"""Shamir Share generation and recombination over GF(2**8).

Each byte of the secret is the intercept of its own random polynomial.
A share holds the y values of all these polynomials at one x
coordinate, with that x coordinate appended as the last byte.

#       i=  0   1   2   3   4    x
# share 1   y11 y12 y13 y14 y15  x1
# share 2   y21 y22 y23 y24 y25  x2
# share 3   y31 y32 y33 y34 y35  x3
"""

import logging
from typing import Set
from typing import List

from . import gf
from . import rand
from . import gf_poly
from . import common_types as ct

logger = logging.getLogger(__name__)

# x=0 is never used, since f(0) is the secret itself
MAX_SHARES = gf.ORDER - 2


def split(
    data     : bytes,
    n        : int,
    t        : int,
    randbytes: rand.RandBytes = rand.urandom,
    randrange: rand.RandRanger = rand.randrange,
) -> List[ct.Share]:
    """Split data into n shares, t or more of which are required to combine.

    Each share is one byte longer than data.
    """
    if t > n:
        raise ct.DomainError("threshold greater than shard count")
    if t < 2:
        raise ct.DomainError("threshold must be greater than 1")
    if len(data) == 0:
        raise ct.DomainError("data required for split")
    if n > MAX_SHARES:
        raise ct.DomainError("too many shares for this field")

    # pick distinct x coordinates in 1..255
    xs = [x + 1 for x in rand.take_n_random(n, range(gf.ORDER - 1), randrange=randrange)]

    outputs = [bytearray(len(data) + 1) for _ in range(n)]
    for i, x in enumerate(xs):
        outputs[i][len(data)] = x

    for idx, val in enumerate(data):
        poly = gf_poly.Polynomial(val, t - 1, randbytes=randbytes)
        for i, x in enumerate(xs):
            outputs[i][idx] = poly.evaluate(x)

    logger.debug(f"split {len(data)} bytes into {n} shares (threshold {t})")
    return [bytes(out) for out in outputs]


def combine(shares: ct.Shares) -> bytes:
    """Recombine data split by split, given t or more of its shares.

    NOTE: This does not know the original threshold. If fewer than t
      shares are provided, or shares from different splits are mixed,
      the result is a meaningless value of the expected length and no
      error is raised. Use signed.reconstruct if this must be detected.
    """
    if len(shares) < 2:
        raise ct.DomainError("need 2 or more shares")

    share_len = len(shares[0])
    if any(len(share) != share_len for share in shares[1:]):
        raise ct.DomainError("unequal share lengths")

    x_samples: List[int] = []
    unique_xs: Set[int] = set()
    for share in shares:
        x = share[share_len - 1]
        if x in unique_xs:
            raise ct.DomainError("duplicate x values for shares not allowed")
        unique_xs.add(x)
        x_samples.append(x)

    secret = bytearray(share_len - 1)
    for c in range(len(secret)):
        y_samples = [share[c] for share in shares]
        secret[c] = gf_poly.Polynomial.interpolate(x_samples, y_samples, 0)

    logger.debug(f"combined {len(shares)} shares into {len(secret)} bytes")
    return bytes(secret)
