"""Conversion between hexadecimal text and bytes."""

import re

_BYTE_CHUNK = re.compile(r"\s*([+-]?)([0-9A-Fa-f]+)")


def hex_to_bytes(hex_string):
    """Decode hex text two characters at a time.

    Each pair is read like a base-16 integer: leading whitespace and a sign are
    allowed, parsing stops at the first non-hex character and the value is
    truncated to one byte. A trailing odd character forms its own byte.
    """
    out = bytearray()
    for start in range(0, len(hex_string), 2):
        chunk = hex_string[start:start + 2]
        match = _BYTE_CHUNK.match(chunk)
        if match is None:
            raise ValueError(f"invalid hex byte {chunk!r}")
        value = int(match.group(2), 16)
        if match.group(1) == "-":
            value = -value
        out.append(value & 0xFF)
    return bytes(out)


def bytes_to_hex(data):
    """Encode bytes as lower-case hex, two digits per byte."""
    return bytes(data).hex()