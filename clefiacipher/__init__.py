"""The CLEFIA block cipher with 128, 192 and 256-bit keys, and a hex file command."""

__version__ = "0.1.0"

__all__ = ["cipher", "cli", "functions", "gfn", "hexutil", "keyschedule"]