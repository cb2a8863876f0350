# This file is part of the spliterati project
#
# Copyright (c) 2022 spliterati authors - MIT License
# SPDX-License-Identifier: MIT

"""Types and errors used across multiple modules."""

from typing import Any
from typing import List
from typing import Sequence

# from typing import TypeAlias
TypeAlias = Any

# y values of each secret byte, followed by the x coordinate
Share : TypeAlias = bytes
Shares: TypeAlias = Sequence[Share]

KeyID: TypeAlias = bytes

# Ed25519 signature + packed Shard
SignedShard : TypeAlias = bytes
SignedShards: TypeAlias = List[SignedShard]

SignedMessage: TypeAlias = bytes


class SpliteratiError(Exception):
    pass


class DomainError(SpliteratiError, ValueError):
    """Invalid input, e.g. bad threshold parameters or malformed shards."""


class CryptoError(SpliteratiError):
    """A signature could not be verified, possibly due to tampering."""
