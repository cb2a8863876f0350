# This file is part of the spliterati project
#
# Copyright (c) 2022 spliterati authors - MIT License
# SPDX-License-Identifier: MIT

"""Access to the CSPRNG and random sampling helpers.

Setting the environment variable SPLITERATI_DEBUG_RANDOM=DANGER replaces
the system random source with a deterministic generator. This must only
ever be used when debugging or testing.
"""

import os
import random
import warnings
from typing import List
from typing import TypeVar
from typing import Protocol
from typing import Sequence

from . import common_types as ct

DEBUG_RANDOM_ENVVAR = 'SPLITERATI_DEBUG_RANDOM'

DEBUG_WARN_MSG = "Warning, spliterati using debug random! This should only happen when debugging or testing."

DEBUG_RANDOM_SEED = 0x5EED_5EED_5EED

DEBUG_RANDOM_STEP = 0x9E37_79B9_7F4A_7C15


def is_debug_random() -> bool:
    return os.getenv(DEBUG_RANDOM_ENVVAR) == 'DANGER'


class DebugRandom:

    _state: int

    def __init__(self) -> None:
        self._state = DEBUG_RANDOM_SEED

    def randrange(self, stop: int) -> int:
        self._state = (self._state + DEBUG_RANDOM_STEP) % (2 ** 64)
        return self._state % stop


_debug_rand = DebugRandom()
_rand       = random.SystemRandom()


class RandRanger(Protocol):
    def __call__(self, stop: int) -> int:
        ...


class RandBytes(Protocol):
    def __call__(self, size: int) -> bytes:
        ...


def reset_debug_random() -> None:
    _debug_rand._state = DEBUG_RANDOM_SEED


def urandom(size: int) -> bytes:
    if is_debug_random():
        warnings.warn(DEBUG_WARN_MSG)
        return bytes(_debug_rand.randrange(256) for _ in range(size))
    else:
        return os.urandom(size)


def randrange(stop: int) -> int:
    """Uniformly distributed integer in the range 0 <= result < stop."""
    if is_debug_random():
        warnings.warn(DEBUG_WARN_MSG)
        result = _debug_rand.randrange(stop)
    else:
        result = _rand.randrange(stop)
    assert isinstance(result, int)
    return result


T = TypeVar('T')


def take_n_random(n: int, elements: Sequence[T], randrange: RandRanger = randrange) -> List[T]:
    """Take n distinct elements from a shuffled copy of elements.

    The shuffle is a Fisher-Yates shuffle, so every n-subset (and every
    ordering of it) is equally likely. There is no retry loop.
    """
    if n > len(elements):
        raise ct.DomainError("cannot take more elements than there are")
    elif n < 0:
        raise ct.DomainError("cannot return a negative number of elements")
    elif n == 0:
        return []
    elif n == 1:
        return [elements[randrange(len(elements))]]

    shuffled = list(elements)
    for i in range(len(shuffled) - 1, 0, -1):
        j = randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled[:n]
