"""Block encryption and decryption with 128, 192 and 256-bit keys."""

from dataclasses import dataclass
from enum import IntEnum

from .gfn import gfn4, gfn4_inverse
from .hexutil import bytes_to_hex, hex_to_bytes
from .keyschedule import (
    generate_round_keys_128,
    generate_round_keys_192,
    generate_round_keys_256,
)

BLOCK_SIZE = 16
_HEX_BLOCK = 2 * BLOCK_SIZE


class KeyLength(IntEnum):
    """Supported key sizes, valued by their length in bytes."""

    BITS_128 = 16
    BITS_192 = 24
    BITS_256 = 32


@dataclass(frozen=True)
class CipherParameters:
    """Round count and round-key count that belong to a key length."""

    key_length: KeyLength
    rounds: int
    num_round_keys: int


_PARAMETERS = {
    KeyLength.BITS_128: CipherParameters(KeyLength.BITS_128, 18, 36),
    KeyLength.BITS_192: CipherParameters(KeyLength.BITS_192, 22, 44),
    KeyLength.BITS_256: CipherParameters(KeyLength.BITS_256, 26, 52),
}


def get_params(length):
    """Return the parameters for a key length given as KeyLength or byte count."""
    try:
        key_length = KeyLength(length)
    except ValueError:
        raise ValueError(f"unsupported key length {length!r}") from None
    return _PARAMETERS[key_length]


def expand_key(key):
    """Return (parameters, whitening keys, round keys) for a 16, 24 or 32-byte key."""
    key = bytes(key)
    params = get_params(len(key))
    if params.key_length is KeyLength.BITS_128:
        kw, rk = generate_round_keys_128(key, params.rounds)
    elif params.key_length is KeyLength.BITS_192:
        kw, rk = generate_round_keys_192(key)
    else:
        kw, rk = generate_round_keys_256(key)
    return params, kw, rk


def _to_words(block):
    block = bytes(block)
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")
    return [int.from_bytes(block[i:i + 4], "big") for i in range(0, BLOCK_SIZE, 4)]


def _from_words(words):
    return b"".join(w.to_bytes(4, "big") for w in words)


def _whitening(kw):
    kw = list(kw)
    if len(kw) != 4:
        raise ValueError(f"expected 4 whitening keys, got {len(kw)}")
    return kw


def encrypt_block(plaintext, kw, rk, rounds):
    """Encrypt one 16-byte block and return the ciphertext bytes."""
    kw = _whitening(kw)
    x = _to_words(plaintext)
    x[1] ^= kw[0]
    x[3] ^= kw[1]
    y = gfn4(rk, x, rounds)
    y[1] ^= kw[2]
    y[3] ^= kw[3]
    return _from_words(y)


def decrypt_block(ciphertext, kw, rk, rounds):
    """Decrypt one 16-byte block and return the plaintext bytes."""
    kw = _whitening(kw)
    x = _to_words(ciphertext)
    x[1] ^= kw[2]
    x[3] ^= kw[3]
    y = gfn4_inverse(x, rk, rounds)
    y[1] ^= kw[0]
    y[3] ^= kw[1]
    return _from_words(y)


def _hex_blocks(text):
    """Yield each whole 32-character block of hex text as bytes; a partial tail is dropped."""
    end = len(text) - len(text) % _HEX_BLOCK
    for start in range(0, end, _HEX_BLOCK):
        yield hex_to_bytes(text[start:start + _HEX_BLOCK])


def encrypt_text(hex_plain, kw, rk, rounds):
    """Encrypt hex text block by block and return the ciphertext as hex."""
    return "".join(
        bytes_to_hex(encrypt_block(block, kw, rk, rounds)) for block in _hex_blocks(hex_plain)
    )


def decrypt_text(hex_cipher, kw, rk, rounds):
    """Decrypt hex text block by block and return the plaintext as hex."""
    return "".join(
        bytes_to_hex(decrypt_block(block, kw, rk, rounds)) for block in _hex_blocks(hex_cipher)
    )