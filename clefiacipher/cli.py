"""Command line: encrypt Plaintext.txt and decrypt the result with a key from a file."""

import argparse
import sys
from pathlib import Path

from .cipher import decrypt_text, encrypt_text, expand_key
from .hexutil import hex_to_bytes

_KEY_BITS = (128, 192, 256)
_HEX_BLOCK = 32
PLAINTEXT_FILE = "Plaintext.txt"
CIPHERTEXT_FILE = "Ciphertext.txt"
DECRYPTED_FILE = "Decrypt.txt"


def _read_token(path):
    """Return the first whitespace-separated word of a file, or an empty string."""
    with open(path, encoding="utf-8") as handle:
        words = handle.read().split()
    return words[0] if words else ""


def _ask_key_bits():
    try:
        answer = input("Enter key length (128, 192, 256): ")
    except EOFError:
        return None
    print()
    try:
        return int(answer.strip())
    except ValueError:
        return None


def _fail(message):
    print(message, file=sys.stderr)
    return 1


def main(argv=None):
    """Run the encrypt-then-decrypt pass; return the exit status."""
    parser = argparse.ArgumentParser(
        description="Encrypt Plaintext.txt into Ciphertext.txt and decrypt it into Decrypt.txt."
    )
    parser.add_argument("-k", "--key-length", type=int, help="key length in bits (128, 192, 256)")
    parser.add_argument("-d", "--directory", default=".", help="directory holding the files")
    args = parser.parse_args(argv)

    bits = args.key_length if args.key_length is not None else _ask_key_bits()
    if bits not in _KEY_BITS:
        return _fail("invalid key length")

    directory = Path(args.directory)
    key_path = directory / f"Key{bits}.txt"
    try:
        hex_key = _read_token(key_path)
    except OSError:
        return _fail(f"cannot open {key_path}")

    size = bits // 8
    try:
        key = hex_to_bytes(hex_key)
    except ValueError as error:
        return _fail(f"invalid key: {error}")
    if len(key) > size:
        return _fail(f"key is longer than {size} bytes")
    params, kw, rk = expand_key(key.ljust(size, b"\0"))

    plain_path = directory / PLAINTEXT_FILE
    try:
        hex_plain = _read_token(plain_path)
    except OSError:
        return _fail(f"cannot open {plain_path}")

    remainder = len(hex_plain) % _HEX_BLOCK
    if remainder:
        print("+00")
        hex_plain = hex_plain.rjust(len(hex_plain) + _HEX_BLOCK - remainder, "0")
        print(hex_plain)

    try:
        hex_cipher = encrypt_text(hex_plain, kw, rk, params.rounds)
    except ValueError as error:
        return _fail(f"invalid plaintext: {error}")
    cipher_path = directory / CIPHERTEXT_FILE
    cipher_path.write_text(hex_cipher, encoding="utf-8")

    try:
        hex_cipher = _read_token(cipher_path)
    except OSError:
        return _fail(f"cannot open {cipher_path}")
    if len(hex_cipher) % _HEX_BLOCK:
        print("ERROR")
        return 1

    try:
        hex_decrypted = decrypt_text(hex_cipher, kw, rk, params.rounds)
    except ValueError as error:
        return _fail(f"invalid ciphertext: {error}")
    (directory / DECRYPTED_FILE).write_text(hex_decrypted, encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())