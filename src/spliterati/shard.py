# This file is part of the spliterati project
#
# Copyright (c) 2022 spliterati authors - MIT License
# SPDX-License-Identifier: MIT

"""Binary format for a share together with its threshold metadata.

    Shard: key_id (16 bytes) | t (1 byte) | n (1 byte) | share (2+ bytes)

The packed form is what gets signed in the signed module.
"""

from typing import Optional

from . import utils
from . import common_types as ct

KEYID_LENGTH = 16

MIN_SHARE_LENGTH = 2

HEADER_LENGTH = KEYID_LENGTH + 2


class Shard:

    key_id: ct.KeyID
    t     : int
    n     : int
    share : ct.Share

    def __init__(self, key_id: ct.KeyID, t: int, n: int, share: ct.Share) -> None:
        if len(key_id) != KEYID_LENGTH:
            raise ct.DomainError("invalid keyID size")
        if len(share) < MIN_SHARE_LENGTH:
            raise ct.DomainError("share length too short")
        if not (0 <= t < 256 and 0 <= n < 256):
            raise ct.DomainError(f"invalid threshold parameters t={t} n={n}, must fit in one byte")

        self.key_id = bytes(key_id)
        self.t      = t
        self.n      = n
        self.share  = bytes(share)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Shard):
            return self.metadata_equal(other) and utils.bytes_equal(self.share, other.share)
        else:
            return NotImplemented

    def __repr__(self) -> str:
        return f"Shard(key_id={self.key_id.hex()}, t={self.t}, n={self.n}, share=<{len(self.share)} bytes>)"

    def pack(self) -> bytes:
        return self.key_id + bytes([self.t, self.n]) + self.share

    @staticmethod
    def unpack(data: Optional[bytes]) -> Optional['Shard']:
        """Parse a packed shard.

        None is passed through, so the result of a failed signature
        check can be handed to unpack directly.
        """
        if data is None:
            return None
        slicer = utils.Slicer(data)
        if slicer.remaining < HEADER_LENGTH:
            raise ct.DomainError("share invalid -- too short")

        return Shard(
            key_id=slicer.take(KEYID_LENGTH),
            t=slicer.take_one(),
            n=slicer.take_one(),
            share=slicer.take_rest(),
        )

    def metadata_equal(self, other: 'Shard') -> bool:
        return self.n == other.n and self.t == other.t and utils.bytes_equal(self.key_id, other.key_id)
