"""S-boxes, GF(2^8) arithmetic and the F0/F1 round functions."""

from functools import reduce
from operator import xor

WORD_MASK = 0xFFFFFFFF
_POLYNOMIAL = 0x11D

S0 = bytes((
    0x57, 0x49, 0xD1, 0xC6, 0x2F, 0x33, 0x74, 0xFB, 0x95, 0x6D, 0x82, 0xEA, 0x0E, 0xB0, 0xA8, 0x1C,
    0x28, 0xD0, 0x4B, 0x92, 0x5C, 0xEE, 0x85, 0xB1, 0xC4, 0x0A, 0x76, 0x3D, 0x63, 0xF9, 0x17, 0xAF,
    0xBF, 0xA1, 0x19, 0x65, 0xF7, 0x7A, 0x32, 0x20, 0x06, 0xCE, 0xE4, 0x83, 0x9D, 0x5B, 0x4C, 0xD8,
    0x42, 0x5D, 0x2E, 0xE8, 0xD4, 0x9B, 0x0F, 0x13, 0x3C, 0x89, 0x67, 0xC0, 0x71, 0xAA, 0xB6, 0xF5,
    0xA4, 0xBE, 0xFD, 0x8C, 0x12, 0x00, 0x97, 0xDA, 0x78, 0xE1, 0xCF, 0x6B, 0x39, 0x43, 0x55, 0x26,
    0x30, 0x98, 0xCC, 0xDD, 0xEB, 0x54, 0xB3, 0x8F, 0x4E, 0x16, 0xFA, 0x22, 0xA5, 0x77, 0x09, 0x61,
    0xD6, 0x2A, 0x53, 0x37, 0x45, 0xC1, 0x6C, 0xAE, 0xEF, 0x70, 0x08, 0x99, 0x8B, 0x1D, 0xF2, 0xB4,
    0xE9, 0xC7, 0x9F, 0x4A, 0x31, 0x25, 0xFE, 0x7C, 0xD3, 0xA2, 0xBD, 0x56, 0x14, 0x88, 0x60, 0x0B,
    0xCD, 0xE2, 0x34, 0x50, 0x9E, 0xDC, 0x11, 0x05, 0x2B, 0xB7, 0xA9, 0x48, 0xFF, 0x66, 0x8A, 0x73,
    0x03, 0x75, 0x86, 0xF1, 0x6A, 0xA7, 0x40, 0xC2, 0xB9, 0x2C, 0xDB, 0x1F, 0x58, 0x94, 0x3E, 0xED,
    0xFC, 0x1B, 0xA0, 0x04, 0xB8, 0x8D, 0xE6, 0x59, 0x62, 0x93, 0x35, 0x7E, 0xCA, 0x21, 0xDF, 0x47,
    0x15, 0xF3, 0xBA, 0x7F, 0xA6, 0x69, 0xC8, 0x4D, 0x87, 0x3B, 0x9C, 0x01, 0xE0, 0xDE, 0x24, 0x52,
    0x7B, 0x0C, 0x68, 0x1E, 0x80, 0xB2, 0x5A, 0xE7, 0xAD, 0xD5, 0x23, 0xF4, 0x46, 0x3F, 0x91, 0xC9,
    0x6E, 0x84, 0x72, 0xBB, 0x0D, 0x18, 0xD9, 0x96, 0xF0, 0x5F, 0x41, 0xAC, 0x27, 0xC5, 0xE3, 0x3A,
    0x81, 0x6F, 0x07, 0xA3, 0x79, 0xF6, 0x2D, 0x38, 0x1A, 0x44, 0x5E, 0xB5, 0xD2, 0xEC, 0xCB, 0x90,
    0x9A, 0x36, 0xE5, 0x29, 0xC3, 0x4F, 0xAB, 0x64, 0x51, 0xF8, 0x10, 0xD7, 0xBC, 0x02, 0x7D, 0x8E,
))

S1 = bytes((
    0x6C, 0xDA, 0xC3, 0xE9, 0x4E, 0x9D, 0x0A, 0x3D, 0xB8, 0x36, 0xB4, 0x38, 0x13, 0x34, 0x0C, 0xD9,
    0xBF, 0x74, 0x94, 0x8F, 0xB7, 0x9C, 0xE5, 0xDC, 0x9E, 0x07, 0x49, 0x4F, 0x98, 0x2C, 0xB0, 0x93,
    0x12, 0xEB, 0xCD, 0xB3, 0x92, 0xE7, 0x41, 0x60, 0xE3, 0x21, 0x27, 0x3B, 0xE6, 0x19, 0xD2, 0x0E,
    0x91, 0x11, 0xC7, 0x3F, 0x2A, 0x8E, 0xA1, 0xBC, 0x2B, 0xC8, 0xC5, 0x0F, 0x5B, 0xF3, 0x87, 0x8B,
    0xFB, 0xF5, 0xDE, 0x20, 0xC6, 0xA7, 0x84, 0xCE, 0xD8, 0x65, 0x51, 0xC9, 0xA4, 0xEF, 0x43, 0x53,
    0x25, 0x5D, 0x9B, 0x31, 0xE8, 0x3E, 0x0D, 0xD7, 0x80, 0xFF, 0x69, 0x8A, 0xBA, 0x0B, 0x73, 0x5C,
    0x6E, 0x54, 0x15, 0x62, 0xF6, 0x35, 0x30, 0x52, 0xA3, 0x16, 0xD3, 0x28, 0x32, 0xFA, 0xAA, 0x5E,
    0xCF, 0xEA, 0xED, 0x78, 0x33, 0x58, 0x09, 0x7B, 0x63, 0xC0, 0xC1, 0x46, 0x1E, 0xDF, 0xA9, 0x99,
    0x55, 0x04, 0xC4, 0x86, 0x39, 0x77, 0x82, 0xEC, 0x40, 0x18, 0x90, 0x97, 0x59, 0xDD, 0x83, 0x1F,
    0x9A, 0x37, 0x06, 0x24, 0x64, 0x7C, 0xA5, 0x56, 0x48, 0x08, 0x85, 0xD0, 0x61, 0x26, 0xCA, 0x6F,
    0x7E, 0x6A, 0xB6, 0x71, 0xA0, 0x70, 0x05, 0xD1, 0x45, 0x8C, 0x23, 0x1C, 0xF0, 0xEE, 0x89, 0xAD,
    0x7A, 0x4B, 0xC2, 0x2F, 0xDB, 0x5A, 0x4D, 0x76, 0x67, 0x17, 0x2D, 0xF4, 0xCB, 0xB1, 0x4A, 0xA8,
    0xB5, 0x22, 0x47, 0x3A, 0xD5, 0x10, 0x4C, 0x72, 0xCC, 0x00, 0xF9, 0xE0, 0xFD, 0xE2, 0xFE, 0xAE,
    0xF8, 0x5F, 0xAB, 0xF1, 0x1B, 0x42, 0x81, 0xD6, 0xBE, 0x44, 0x29, 0xA6, 0x57, 0xB9, 0xAF, 0xF2,
    0xD4, 0x75, 0x66, 0xBB, 0x68, 0x9F, 0x50, 0x02, 0x01, 0x3C, 0x7F, 0x8D, 0x1A, 0x88, 0xBD, 0xAC,
    0xF7, 0xE4, 0x79, 0x96, 0xA2, 0xFC, 0x6D, 0xB2, 0x6B, 0x03, 0xE1, 0x2E, 0x7D, 0x14, 0x95, 0x1D,
))

M0 = (
    (0x01, 0x02, 0x04, 0x06),
    (0x02, 0x01, 0x06, 0x04),
    (0x04, 0x06, 0x01, 0x02),
    (0x06, 0x04, 0x02, 0x01),
)

M1 = (
    (0x01, 0x08, 0x02, 0x0A),
    (0x08, 0x01, 0x0A, 0x02),
    (0x02, 0x0A, 0x01, 0x08),
    (0x0A, 0x02, 0x08, 0x01),
)


def gf_mul(a, b):
    """Multiply two bytes in GF(2^8) modulo x^8 + x^4 + x^3 + x^2 + 1."""
    a &= 0xFF
    b &= 0xFF
    result = 0
    for _ in range(8):
        if b & 1:
            result ^= a
        a <<= 1
        if a & 0x100:
            a ^= _POLYNOMIAL
        b >>= 1
    return result & 0xFF


_PRODUCTS = {
    coefficient: bytes(gf_mul(coefficient, value) for value in range(256))
    for coefficient in {c for matrix in (M0, M1) for row in matrix for c in row}
}


def _round_function(x, rk, boxes, matrix):
    t = ((x ^ rk) & WORD_MASK).to_bytes(4, "big")
    v = [box[byte] for box, byte in zip(boxes, t)]
    y = bytes(
        reduce(xor, (_PRODUCTS[coefficient][value] for coefficient, value in zip(row, v)))
        for row in matrix
    )
    return int.from_bytes(y, "big")


def f0(x, rk):
    """Round function F0: S-boxes S0, S1, S0, S1 followed by the M0 diffusion."""
    return _round_function(x, rk, (S0, S1, S0, S1), M0)


def f1(x, rk):
    """Round function F1: S-boxes S1, S0, S1, S0 followed by the M1 diffusion."""
    return _round_function(x, rk, (S1, S0, S1, S0), M1)