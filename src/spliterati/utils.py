# This file is part of the spliterati project
#
# Copyright (c) 2022 spliterati authors - MIT License
# SPDX-License-Identifier: MIT

"""Byte helpers used by the shard format."""

import hmac


def bytes_equal(a: bytes, b: bytes) -> bool:
    """Compare two byte strings in constant time.

    Strings of different length are never equal.
    """
    return hmac.compare_digest(bytes(a), bytes(b))


class Slicer:
    """Cursor for sequential reads from a byte string.

    Say, for example, you have data that looks something like:

        aaaaaaaabbccccdeeee

    Rather than keeping track of offsets manually, it can be decomposed
    like this:

        slicer = Slicer(data)
        a_data = slicer.take(8)
        b_data = slicer.take(2)
        c_data = slicer.take(4)
        d_val  = slicer.take_one()      # int
        e_data = slicer.take_rest()
    """

    _data : bytes
    _index: int

    def __init__(self, data: bytes) -> None:
        self._data  = bytes(data)
        self._index = 0

    @property
    def remaining(self) -> int:
        return max(0, len(self._data) - self._index)

    def take_one(self) -> int:
        if self._index >= len(self._data):
            raise IndexError("Slicer exhausted")

        val = self._data[self._index]
        self._index += 1
        return val

    def take(self, amount: int) -> bytes:
        assert amount >= 0, amount
        end   = self._index + amount
        chunk = self._data[self._index : end]
        self._index = end
        return chunk

    def take_rest(self) -> bytes:
        chunk = self._data[self._index :]
        self._index = len(self._data)
        return chunk
