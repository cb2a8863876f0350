import collections

import pytest

import spliterati.rand
import spliterati.utils
import spliterati.enc_util
import spliterati.common_types as ct
from spliterati.utils import Slicer


def test_bytes_equal():
    data = bytes([1, 2, 3, 4, 5])
    assert spliterati.utils.bytes_equal(data, bytes([1, 2, 3, 4, 5]))
    assert not spliterati.utils.bytes_equal(data, bytes([1, 2, 3, 4, 6]))
    assert not spliterati.utils.bytes_equal(bytes([1]), data)
    assert not spliterati.utils.bytes_equal(data, bytes([1]))
    assert spliterati.utils.bytes_equal(b"", b"")


def test_slicer():
    slicer = Slicer(b"aaaabbcdeeeee")

    assert slicer.take(4) == b"aaaa"
    assert slicer.take(2) == b"bb"
    assert slicer.take(1) == b"c"
    assert slicer.take_one() == ord("d")
    assert slicer.remaining == 5
    assert slicer.take_rest() == b"eeeee"
    assert slicer.remaining == 0
    assert slicer.take_rest() == b""

    with pytest.raises(IndexError):
        slicer.take_one()


def test_slicer_numbers():
    slicer = Slicer(bytes([1, 2, 3, 4, 5, 6]))

    assert slicer.take(2) == bytes([1, 2])
    assert slicer.take(1) == bytes([3])
    assert slicer.take_one() == 4
    assert slicer.take_rest() == bytes([5, 6])


def test_take_n_random():
    elements = [1, 2, 3, 4, 5]

    result = spliterati.rand.take_n_random(5, elements)
    assert sorted(result) == elements

    result = spliterati.rand.take_n_random(3, elements)
    assert len(result) == 3
    assert len(set(result)) == 3
    assert set(result) <= set(elements)

    result = spliterati.rand.take_n_random(1, elements)
    assert len(result) == 1
    assert result[0] in elements

    assert spliterati.rand.take_n_random(0, elements) == []

    # input is not modified
    assert elements == [1, 2, 3, 4, 5]


def test_take_n_random_invalid():
    with pytest.raises(ct.DomainError):
        spliterati.rand.take_n_random(6, [1, 2, 3, 4, 5])
    with pytest.raises(ct.DomainError):
        spliterati.rand.take_n_random(-1, [1, 2, 3, 4, 5])


def test_take_n_random_distribution():
    counts: collections.Counter = collections.Counter()
    for _ in range(3000):
        counts.update(spliterati.rand.take_n_random(2, range(6)))

    # each element is picked with probability 1/3
    assert set(counts) == set(range(6))
    assert all(800 < count < 1200 for count in counts.values())


def test_debug_random(monkeypatch):
    monkeypatch.setenv(spliterati.rand.DEBUG_RANDOM_ENVVAR, 'DANGER')

    with pytest.warns(UserWarning):
        spliterati.rand.reset_debug_random()
        a = [spliterati.rand.randrange(256) for _ in range(10)] + list(spliterati.rand.urandom(4))
        spliterati.rand.reset_debug_random()
        b = [spliterati.rand.randrange(256) for _ in range(10)] + list(spliterati.rand.urandom(4))

    assert a == b
    assert len(set(a)) > 1


def test_hex():
    assert spliterati.enc_util.bytes2hex(b"\x00\xab\xff") == "00abff"
    assert spliterati.enc_util.hex2bytes("00abff") == b"\x00\xab\xff"
    assert spliterati.enc_util.hex2bytes("00AB FF\n") == b"\x00\xab\xff"

    with pytest.raises(ct.DomainError):
        spliterati.enc_util.hex2bytes("abc")
    with pytest.raises(ct.DomainError):
        spliterati.enc_util.hex2bytes("zz")
