"""Generalised Feistel networks with four and eight branches."""

from .functions import WORD_MASK, f0, f1


def _state(words, branches):
    state = list(words)
    if len(state) != branches:
        raise ValueError(f"expected {branches} words, got {len(state)}")
    if any(not 0 <= w <= WORD_MASK for w in state):
        raise ValueError("words must be unsigned 32-bit integers")
    return state


def _check_keys(rk, rounds, per_round):
    if rounds < 0:
        raise ValueError("number of rounds must not be negative")
    needed = per_round * rounds
    if len(rk) < needed:
        raise ValueError(f"{rounds} rounds need {needed} round keys, got {len(rk)}")


def gfn4(rk, words, rounds):
    """Run the four-branch network forward and return the output words."""
    t = _state(words, 4)
    _check_keys(rk, rounds, 2)
    for i in range(rounds):
        t[1] ^= f0(rk[2 * i], t[0])
        t[3] ^= f1(rk[2 * i + 1], t[2])
        t = t[1:] + t[:1]
    return t[3:] + t[:3]


def gfn4_inverse(words, rk, rounds):
    """Undo gfn4 with the same round keys and round count."""
    t = _state(words, 4)
    _check_keys(rk, rounds, 2)
    for i in reversed(range(rounds)):
        t[1] ^= f0(rk[2 * i], t[0])
        t[3] ^= f1(rk[2 * i + 1], t[2])
        t = t[3:] + t[:3]
    return t[1:] + t[:1]


def gfn8(rk, words, rounds):
    """Run the eight-branch network forward and return the output words."""
    t = _state(words, 8)
    _check_keys(rk, rounds, 4)
    for r in range(rounds):
        k0, k1, k2, k3 = rk[4 * r:4 * r + 4]
        t[1] ^= f0(k0, t[0])
        t[3] ^= f1(k1, t[2])
        t[5] ^= f0(k2, t[4])
        t[7] ^= f1(k3, t[6])
        t = t[1:] + t[:1]
    return t[7:] + t[:7]