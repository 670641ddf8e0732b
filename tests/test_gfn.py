import random

import pytest

from clefiacipher.functions import f0, f1
from clefiacipher.gfn import gfn4, gfn4_inverse, gfn8


def _words(rng, n):
    return [rng.getrandbits(32) for _ in range(n)]


@pytest.mark.parametrize("rounds", [0, 1, 2, 12, 18, 22, 26])
def test_gfn4_inverse_round_trip(rounds):
    rng = random.Random(rounds)
    rk = _words(rng, 2 * rounds)
    for _ in range(5):
        block = _words(rng, 4)
        assert gfn4_inverse(gfn4(rk, block, rounds), rk, rounds) == block
        assert gfn4(rk, gfn4_inverse(block, rk, rounds), rounds) == block


def test_gfn4_single_round_structure():
    block = [0x01234567, 0x89ABCDEF, 0xDEADBEEF, 0x0BADF00D]
    rk = [0x11111111, 0x22222222]
    out = gfn4(rk, block, 1)
    assert out[0] == block[0]
    assert out[2] == block[2]
    assert out[1] == block[1] ^ f0(block[0], rk[0])
    assert out[3] == block[3] ^ f1(block[2], rk[1])


def test_gfn8_zero_rounds_rotates():
    assert gfn8([], list(range(8)), 0) == [7, 0, 1, 2, 3, 4, 5, 6]


def test_gfn8_single_round_structure():
    rng = random.Random(42)
    block = _words(rng, 8)
    rk = _words(rng, 4)
    out = gfn8(rk, block, 1)
    assert out[0::2] == block[0::2]
    assert out[1] == block[1] ^ f0(block[0], rk[0])
    assert out[3] == block[3] ^ f1(block[2], rk[1])
    assert out[5] == block[5] ^ f0(block[4], rk[2])
    assert out[7] == block[7] ^ f1(block[6], rk[3])


def test_gfn8_is_injective_on_sample():
    rng = random.Random(9)
    rk = _words(rng, 40)
    blocks = {tuple(_words(rng, 8)) for _ in range(200)}
    outputs = {tuple(gfn8(rk, list(b), 10)) for b in blocks}
    assert len(outputs) == len(blocks)


def test_too_few_round_keys():
    with pytest.raises(ValueError):
        gfn4([1, 2, 3], [0, 0, 0, 0], 2)
    with pytest.raises(ValueError):
        gfn4_inverse([0, 0, 0, 0], [1], 1)
    with pytest.raises(ValueError):
        gfn8([1, 2, 3, 4, 5], [0] * 8, 2)


def test_wrong_block_width():
    with pytest.raises(ValueError):
        gfn4([0, 0], [0, 0, 0], 1)
    with pytest.raises(ValueError):
        gfn8([0] * 4, [0] * 4, 1)


def test_words_out_of_range():
    with pytest.raises(ValueError):
        gfn4([0, 0], [0, 0, 0, 1 << 32], 1)


def test_negative_rounds():
    with pytest.raises(ValueError):
        gfn4([], [0, 0, 0, 0], -1)