"""Round-key generation for 128, 192 and 256-bit keys."""

from .gfn import gfn4, gfn8

CON128 = (
    0xF56B7AEB, 0x994A8A42, 0x96A4BD75, 0xFA854521,
    0x735B768A, 0x1F7ABAC4, 0xD5BC3B45, 0xB99D5D62,
    0x52D73592, 0x3EF636E5, 0xC57A1AC9, 0xA95B9B72,
    0x5AB42554, 0x369555ED, 0x1553BA9A, 0x7972B2A2,
    0xE6B85D4D, 0x8A995951, 0x4B550696, 0x2774B4FC,
    0xC9BB034B, 0xA59A5A7E, 0x88CC81A5, 0xE4ED2D3F,
    0x7C6F68E2, 0x104E8ECB, 0xD2263471, 0xBE07C765,
    0x511A3208, 0x3D3BFBE6, 0x1084B134, 0x7CA565A7,
    0x304BF0AA, 0x5C6AAA87, 0xF4347855, 0x9815D543,
    0x4213141A, 0x2E32F2F5, 0xCD180A0D, 0xA139F97A,
    0x5E852D36, 0x32A464E9, 0xC353169B, 0xAF72B274,
    0x8DB88B4D, 0xE199593A, 0x7ED56D96, 0x12F434C9,
    0xD37B36CB, 0xBF5A9A64, 0x85AC9B65, 0xE98D4D32,
    0x7ADF6582, 0x16FE3ECD, 0xD17E32C1, 0xBD5F9F66,
    0x50B63150, 0x3C9757E7, 0x1052B098, 0x7C73B3A7,
)

CON192 = (
    0xC6D61D91, 0xAAF73771, 0x5B6226F8, 0x374383EC,
    0x15B8BB4C, 0x799959A2, 0x32D5F596, 0x5EF43485,
    0xF57B7ACB, 0x995A9A42, 0x96ACBD65, 0xFA8D4D21,
    0x735F7682, 0x1F7EBEC4, 0xD5BE3B41, 0xB99F5F62,
    0x52D63590, 0x3EF737E5, 0x1162B2F8, 0x7D4383A6,
    0x30B8F14C, 0x5C995987, 0x2055D096, 0x4C74B497,
    0xFC3B684B, 0x901ADA4B, 0x920CB425, 0xFE2DED25,
    0x710F7222, 0x1D2EEEC6, 0xD4963911, 0xB8B77763,
    0x524234B8, 0x3E63A3E5, 0x1128B26C, 0x7D09C9A6,
    0x309DF106, 0x5CBC7C87, 0xF45F7883, 0x987EBE43,
    0x963EBC41, 0xFA1FDF21, 0x73167610, 0x1F37F7C4,
    0x01829338, 0x6DA363B6, 0x38C8E1AC, 0x54E9298F,
    0x246DD8E6, 0x484C8C93, 0xFE276C73, 0x9206C649,
    0x9302B639, 0xFF23E324, 0x7188732C, 0x1DA969C6,
    0x00CD91A6, 0x6CEC2CB7, 0xEC7748D3, 0x8056965B,
    0x9A2AA469, 0xF60BCB2D, 0x751C7A04, 0x193DFDC2,
    0x02879532, 0x6EA666B5, 0xED524A99, 0x8173B35A,
    0x4EA00D7C, 0x228141F9, 0x1F59AE8E, 0x7378B8A8,
    0xE3BD5747, 0x8F9C5C54, 0x9DCFABA3, 0xF1EE2E2A,
    0xA2F6D5D1, 0xCED71715, 0x697242D8, 0x055393DE,
    0x0CB0895C, 0x609151BB, 0x3E51EC9E, 0x5270B089,
)

CON256 = (
    0x0221947E, 0x6E00C0B5, 0xED014A3F, 0x8120E05A,
    0x9A91A51F, 0xF6B0702D, 0xA159D28F, 0xCD78B816,
    0xBCBDE947, 0xD09C5C0B, 0xB24FF4A3, 0xDE6EAE05,
    0xB536FA51, 0xD917D702, 0x62925518, 0x0EB373D5,
    0x094082BC, 0x6561A1BE, 0x3CA9E96E, 0x5088488B,
    0xF24574B7, 0x9E64A445, 0x9533BA5B, 0xF912D222,
    0xA688DD2D, 0xCAA96911, 0x6B4D46A6, 0x076CACDC,
    0xD9B72353, 0xB596566E, 0x80CA91A9, 0xECEB2B37,
    0x786C60E4, 0x144D8DCF, 0x043F9842, 0x681EDEB3,
    0xEE0E4C21, 0x822FEF59, 0x4F0E0E20, 0x232FEFF8,
    0x1F8EAF20, 0x73AF6FA8, 0x37CEFFA0, 0x5BEF2F80,
    0x23EED7E0, 0x4FCF0F94, 0x29FEC3C0, 0x45DF1F9E,
    0x2CF6C9D0, 0x40D7179B, 0x2E72CCD8, 0x42539399,
    0x2F30CE5C, 0x4311D198, 0x2F91CF1E, 0x43B07098,
    0xFBD9678F, 0x97F8384C, 0x91FDB3C7, 0xFDDC1C26,
    0xA4EFD9E3, 0xC8CE0E13, 0xBE66ECF1, 0xD2478709,
    0x673A5E48, 0x0B1BDBD0, 0x0B948714, 0x67B575BC,
    0x3DC3EBBA, 0x51E2228A, 0xF2F075DD, 0x9ED11145,
    0x417112DE, 0x2D5090F6, 0xCCA9096F, 0xA088487B,
    0x8A4584B7, 0xE664A43D, 0xA933C25B, 0xC512D21E,
    0xB888E12D, 0xD4A9690F, 0x644D58A6, 0x086CACD3,
    0xDE372C53, 0xB216D669, 0x830A9629, 0xEF2BEB34,
    0x798C6324, 0x15AD6DCE, 0x04CF99A2, 0x68EE2EB3,
)

_MASK_7 = 0x7F
_MASK_57 = (1 << 57) - 1
_ALL_ONES = 0xFFFFFFFF
_ROUND_KEYS_128 = 36


def sigma(words):
    """Apply the 128-bit DoubleSwap permutation to four 32-bit words."""
    words = list(words)
    if len(words) != 4:
        raise ValueError(f"sigma takes 4 words, got {len(words)}")
    x = int.from_bytes(b"".join(w.to_bytes(4, "big") for w in words), "big")
    x_0_6 = (x >> 121) & _MASK_7
    x_7_63 = (x >> 64) & _MASK_57
    x_64_120 = (x >> 7) & _MASK_57
    x_121_127 = x & _MASK_7
    y = (x_7_63 << 71) | (x_121_127 << 64) | (x_0_6 << 57) | x_64_120
    data = y.to_bytes(16, "big")
    return [int.from_bytes(data[i:i + 4], "big") for i in range(0, 16, 4)]


def _key_words(key, length):
    key = bytes(key)
    if len(key) != length:
        raise ValueError(f"key must be {length} bytes, got {len(key)}")
    return [int.from_bytes(key[i:i + 4], "big") for i in range(0, length, 4)]


def _xor(a, b):
    return [x ^ y for x, y in zip(a, b)]


def generate_round_keys_128(key, rounds=18):
    """Return (whitening keys, round keys) for a 16-byte key.

    The schedule always yields 36 round keys; ``rounds`` may not ask for more.
    """
    k = _key_words(key, 16)
    if 2 * rounds > _ROUND_KEYS_128:
        raise ValueError(f"a 128-bit key supports at most {_ROUND_KEYS_128 // 2} rounds")
    state = gfn4(CON128, k, 12)
    kw = list(k)
    rk = []
    for i in range(9):
        t = _xor(state, CON128[24 + 4 * i:28 + 4 * i])
        state = sigma(state)
        if i % 2 == 1:
            t = _xor(t, k)
        rk.extend(t)
    return kw, rk


def _generate_from_halves(kl, kr, constants, iterations):
    state = gfn8(constants, kl + kr, 10)
    ll, lr = state[:4], state[4:]
    kw = _xor(kl, kr)
    rk = []
    for i in range(iterations):
        con = constants[40 + 4 * i:44 + 4 * i]
        if i % 4 in (0, 1):
            t = _xor(ll, con)
            if i % 2 == 1:
                t = _xor(t, kr)
            ll = sigma(ll)
        else:
            t = _xor(lr, con)
            if i % 2 == 1:
                t = _xor(t, kl)
            lr = sigma(lr)
        rk.extend(t)
    return kw, rk


def generate_round_keys_192(key):
    """Return (whitening keys, 44 round keys) for a 24-byte key."""
    k = _key_words(key, 24)
    kl = k[:4]
    kr = [k[4], k[5], k[0] ^ _ALL_ONES, k[1] ^ _ALL_ONES]
    return _generate_from_halves(kl, kr, CON192, 11)


def generate_round_keys_256(key):
    """Return (whitening keys, 52 round keys) for a 32-byte key."""
    k = _key_words(key, 32)
    return _generate_from_halves(k[:4], k[4:], CON256, 13)