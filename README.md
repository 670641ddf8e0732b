# clefiacipher

A pure-Python implementation of the CLEFIA block cipher: 128-bit blocks,
keys of 128, 192 or 256 bits, and a small command that encrypts and then
decrypts hex-encoded text files.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library

The package is split into the layers of the cipher:

- `clefiacipher.functions` – the S-boxes `S0` and `S1`, the diffusion
  matrices `M0` and `M1`, the GF(2^8) multiplication `gf_mul` and the
  round functions `f0` and `f1`.
- `clefiacipher.gfn` – the generalised Feistel networks `gfn4`,
  `gfn4_inverse` and `gfn8`. They raise `ValueError` for the wrong number
  of words, words outside 32 bits, a negative round count or too few round
  keys.
- `clefiacipher.keyschedule` – the constants `CON128`, `CON192` and
  `CON256`, the `sigma` permutation and the key schedules
  `generate_round_keys_128(key, rounds=18)`, `generate_round_keys_192(key)`
  and `generate_round_keys_256(key)`. Each returns a pair of whitening keys
  (4 words) and round keys (36, 44 or 52 words).
- `clefiacipher.hexutil` – `hex_to_bytes` and `bytes_to_hex`.
- `clefiacipher.cipher` – `KeyLength`, `CipherParameters`, `get_params`,
  `expand_key`, the single-block operations `encrypt_block` and
  `decrypt_block`, and `encrypt_text` / `decrypt_text`, which work on a hex
  string block by block and return hex. A trailing partial block of hex
  text is ignored.

The number of rounds depends on the key length, as `get_params` reports:

| Key length | Rounds | Round keys |
|-----------:|-------:|-----------:|
| 128 bits   | 18     | 36         |
| 192 bits   | 22     | 44         |
| 256 bits   | 26     | 52         |

`get_params` accepts a `KeyLength` or a length in bytes (16, 24, 32) and
raises `ValueError` for anything else.

```python
from clefiacipher.cipher import decrypt_block, encrypt_block, expand_key

params, kw, rk = expand_key(bytes(range(16)))
block = bytes(16)
ct = encrypt_block(block, kw, rk, params.rounds)
assert decrypt_block(ct, kw, rk, params.rounds) == block
```

## Command

```
clefiacipher [-k {128,192,256}] [-d DIRECTORY]
```

Without `-k/--key-length` the command asks for the key length on standard
input. It works on files in `DIRECTORY` (the current directory by default):

- the key is read as hex from `Key128.txt`, `Key192.txt` or `Key256.txt`;
  a shorter key is padded with zero bytes, a longer one is rejected;
- the plaintext is read as hex from `Plaintext.txt`; if it is not a whole
  number of 16-byte blocks, `+00` and the left-zero-padded text are printed;
- the ciphertext is written as hex to `Ciphertext.txt`;
- that ciphertext is read back, decrypted and written as hex to
  `Decrypt.txt`.

It exits with status 1 if the key length is invalid, a file cannot be
opened, the hex is invalid, or the ciphertext read back is not a whole
number of blocks (printing `ERROR` in that case).

## Limitations

There is no graphical interface and no choice of input or output file names
beyond the directory; the command always runs the fixed encrypt-then-decrypt
pass over the files named above.

CLEFIA is a 128-bit block cipher. This package encrypts every block on its own
with no chaining mode, and it is not hardened against side channels. Use it
to learn how the cipher works or to check test vectors. Do not use it to
protect real data.