# This file is part of the spliterati project
#
# Copyright (c) 2022 spliterati authors - MIT License
# SPDX-License-Identifier: MIT

"""Threshold protocol with signed shards.

generate creates an encryption (box) keypair, splits its private key via
t of n shamir secret sharing, and signs each share (together with its
metadata, as a Shard) using a freshly generated ed25519 signing key. The
signing private key is discarded, so no further shards can be forged.

reconstruct verifies each shard against the signing public key, checks
that all shards belong to the same split and recombines the private key.
"""

import logging
from typing import List
from typing import Optional
from typing import Sequence
from typing import NamedTuple

import nacl.utils
import nacl.bindings
import nacl.public
import nacl.signing
import nacl.exceptions

from . import shard
from . import shamir
from . import common_types as ct

logger = logging.getLogger(__name__)

PUBLIC_KEY_LENGTH = nacl.bindings.crypto_sign_PUBLICKEYBYTES


class BoxKeyPair(NamedTuple):

    public_key: bytes
    secret_key: bytes


class ThresholdBundle(NamedTuple):

    signing_public_key   : bytes
    encryption_public_key: bytes
    key_id               : ct.KeyID
    shards               : ct.SignedShards
    signed_message       : Optional[ct.SignedMessage]


class ReconstructedKey(NamedTuple):

    key_id             : ct.KeyID
    encryption_key_pair: BoxKeyPair


def _verify_key(signing_public_key: bytes) -> nacl.signing.VerifyKey:
    if len(signing_public_key) != PUBLIC_KEY_LENGTH:
        errmsg = f"signing public key must be {PUBLIC_KEY_LENGTH} bytes long, got {len(signing_public_key)}"
        raise ct.DomainError(errmsg)
    return nacl.signing.VerifyKey(bytes(signing_public_key))


def _open(signed: bytes, verify_key: nacl.signing.VerifyKey) -> Optional[bytes]:
    """Verify and strip the signature, None if verification failed."""
    try:
        return bytes(verify_key.verify(bytes(signed)))
    except nacl.exceptions.BadSignatureError:
        return None


def sign_shard(record: shard.Shard, signing_key: nacl.signing.SigningKey) -> ct.SignedShard:
    return bytes(signing_key.sign(record.pack()))


def box_key_pair(secret_key: bytes) -> BoxKeyPair:
    private_key = nacl.public.PrivateKey(secret_key)
    return BoxKeyPair(bytes(private_key.public_key), bytes(private_key))


def generate(
    t      : int,
    n      : int,
    message: Optional[bytes] = None,
    key_id : Optional[ct.KeyID] = None,
) -> ThresholdBundle:
    """Generate a keypair and split its private key into n signed shards.

    Args:
        t: The minimum number of shards required to reassemble the private key.
        n: The total number of shards generated for this key.
        message: An arbitrary message to sign with the generated signing key.
        key_id: Use this key id (of length KEYID_LENGTH) instead of a random one.
    """
    signing_key = nacl.signing.SigningKey.generate()
    private_key = nacl.public.PrivateKey.generate()

    if key_id is None:
        key_id = nacl.utils.random(shard.KEYID_LENGTH)
    elif len(key_id) != shard.KEYID_LENGTH:
        raise ct.DomainError(f"keyID must be {shard.KEYID_LENGTH} characters long")

    shares = shamir.split(bytes(private_key), n, t)
    shards = [sign_shard(shard.Shard(key_id, t, n, share), signing_key) for share in shares]

    if message is None:
        signed_message = None
    else:
        signed_message = bytes(signing_key.sign(bytes(message)))

    logger.info(f"generated {n} shards (threshold {t}) for key_id={bytes(key_id).hex()}")

    return ThresholdBundle(
        signing_public_key=bytes(signing_key.verify_key),
        encryption_public_key=bytes(private_key.public_key),
        key_id=bytes(key_id),
        shards=shards,
        signed_message=signed_message,
    )


def reconstruct(signing_public_key: bytes, shards: Sequence[ct.SignedShard]) -> ReconstructedKey:
    """Reconstruct the encryption keypair from t..n of the shards from generate."""
    if len(shards) < 2:
        raise ct.DomainError("2 or more shards are required for reassembly")

    verify_key = _verify_key(signing_public_key)

    # The metadata of the first shard is what all the others are compared to.
    first_shard = shard.Shard.unpack(_open(shards[0], verify_key))
    if first_shard is None:
        logger.warning("signature verification failed for shard[0]")
        raise ct.CryptoError("could not verify shard[0]")

    t = first_shard.t
    n = first_shard.n
    if len(shards) < t:
        raise ct.DomainError(f"insufficient shards for reassembly. {t}..{n} required.")
    if len(shards) > n:
        raise ct.DomainError(f"more shards than expected. wanted {t}..{n}, got {len(shards)}")

    shares: List[ct.Share] = [first_shard.share]
    for index, signed_shard in enumerate(shards[1:], start=1):
        cur_shard = shard.Shard.unpack(_open(signed_shard, verify_key))
        if cur_shard is None:
            logger.warning(f"signature verification failed for shard[{index}]")
            raise ct.CryptoError(f"could not verify shard[{index}]")
        if not first_shard.metadata_equal(cur_shard):
            raise ct.DomainError(f"metadata mismatch for shard[{index}]")
        shares.append(cur_shard.share)

    secret_key = shamir.combine(shares)
    logger.info(f"reconstructed key_id={first_shard.key_id.hex()} from {len(shares)} shards")
    return ReconstructedKey(first_shard.key_id, box_key_pair(secret_key))


def open_message(signed_message: ct.SignedMessage, signing_public_key: bytes) -> bytes:
    """Verify a message signed by generate and return its content."""
    message = _open(signed_message, _verify_key(signing_public_key))
    if message is None:
        logger.warning("signature verification failed for message")
        raise ct.CryptoError("could not verify message")
    return message
