import os
import random
import itertools

import pytest

import spliterati.rand
import spliterati.shamir
import spliterati.common_types as ct

KNOWN_SECRET = b"hello"

# 'hello', n=5, t=3, generated by an independent implementation
KNOWN_SHARES = [
    bytes([0xe7, 0xa3, 0xc6, 0xab, 0xde, 0x58]),
    bytes([0xc1, 0xf2, 0x5f, 0x83, 0x62, 0x7a]),
    bytes([0xd5, 0xf0, 0x58, 0x2a, 0xf1, 0x74]),
    bytes([0x71, 0x47, 0x25, 0x86, 0x35, 0x8b]),
    bytes([0x6b, 0xbe, 0x70, 0x7b, 0xf4, 0xc3]),
]


def test_split():
    shares = spliterati.shamir.split(KNOWN_SECRET, 5, 3)
    assert len(shares) == 5
    assert all(len(share) == 6 for share in shares)

    x_coords = [share[-1] for share in shares]
    assert len(set(x_coords)) == 5
    assert all(0 < x <= 255 for x in x_coords)


@pytest.mark.parametrize(
    "data, n, t, errmsg",
    [
        (KNOWN_SECRET, 1  , 1, "threshold must be greater than 1"),
        (KNOWN_SECRET, 3  , 5, "threshold greater than shard count"),
        (KNOWN_SECRET, 255, 5, "too many shares for this field"),
        (b""         , 5  , 3, "data required for split"),
    ],
)
def test_split_invalid(data, n, t, errmsg):
    with pytest.raises(ct.DomainError, match=errmsg):
        spliterati.shamir.split(data, n, t)


@pytest.mark.parametrize("indexes", list(itertools.permutations(range(5), 3)))
def test_combine_known_shares(indexes):
    shares = [KNOWN_SHARES[i] for i in indexes]
    assert spliterati.shamir.combine(shares) == KNOWN_SECRET


def test_combine_known_shares_all():
    assert spliterati.shamir.combine(KNOWN_SHARES) == KNOWN_SECRET
    assert spliterati.shamir.combine(KNOWN_SHARES[1:]) == KNOWN_SECRET


def test_combine_below_threshold():
    # no error, but the result is garbage
    secret = spliterati.shamir.combine(KNOWN_SHARES[:2])
    assert len(secret) == len(KNOWN_SECRET)
    assert secret != KNOWN_SECRET


@pytest.mark.parametrize(
    "shares, errmsg",
    [
        ([]                                  , "need 2 or more shares"),
        ([KNOWN_SHARES[0]]                   , "need 2 or more shares"),
        ([b"\x01\x02\x10", b"\x03\x04\x10"]  , "duplicate x values"),
        ([b"\x01\x02\x03", b"\x04\x05"]      , "unequal share lengths"),
        ([KNOWN_SHARES[0], KNOWN_SHARES[0]]  , "duplicate x values"),
    ],
)
def test_combine_invalid(shares, errmsg):
    with pytest.raises(ct.DomainError, match=errmsg):
        spliterati.shamir.combine(shares)


def test_combine_x_only_shares():
    # shares without y values carry no secret bytes
    assert spliterati.shamir.combine([b"\x01", b"\x02"]) == b""


def test_roundtrip_edgecases():
    for secret in [b"\x00", b"\xff", b"\x00" * 32, b"\xff" * 32]:
        shares = spliterati.shamir.split(secret, 3, 2)
        for subset in itertools.combinations(shares, 2):
            assert spliterati.shamir.combine(list(subset)) == secret


def test_roundtrip_max_shares():
    secret = os.urandom(4)
    shares = spliterati.shamir.split(secret, 254, 2)
    assert len({share[-1] for share in shares}) == 254
    assert spliterati.shamir.combine(random.sample(shares, 2)) == secret

    shares = spliterati.shamir.split(secret[:1], 254, 254)
    random.shuffle(shares)
    assert spliterati.shamir.combine(shares) == secret[:1]


def test_roundtrip_fuzz():
    for _ in range(30):
        t      = random.randint(2, 20)
        n      = random.randint(t, 40)
        k      = random.randint(t, n)
        secret = os.urandom(random.randint(1, 64))

        shares = spliterati.shamir.split(secret, n, t)
        subset = spliterati.rand.take_n_random(k, shares)
        assert spliterati.shamir.combine(subset) == secret


def test_shares_from_different_splits():
    shares_a = spliterati.shamir.split(b"secret a", 3, 2)
    shares_b = spliterati.shamir.split(b"secret b", 3, 2)

    mixed = [shares_a[0]] + [s for s in shares_b if s[-1] != shares_a[0][-1]][:1]
    # no error, just a wrong result
    assert spliterati.shamir.combine(mixed) not in (b"secret a", b"secret b")
