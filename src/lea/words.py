"""
Word codec: 32-bit words, rotations and byte/hex conversions.

LEA works on 32-bit words packed little-endian:
  bytes [b0 b1 b2 b3] -> word b3b2b1b0

A 16-byte block maps to 4 words:
  byte[0..3]   -> x[0]
  byte[4..7]   -> x[1]
  byte[8..11]  -> x[2]
  byte[12..15] -> x[3]
"""

WORD_MASK = 0xFFFFFFFF


def bytes_to_word(b0: int, b1: int, b2: int, b3: int) -> int:
    """
    Compose a word from 4 bytes, b0 least significant.

    Args:
        b0..b3: byte values (0-255)

    Returns:
        32-bit word
    """
    return (b3 << 24) | (b2 << 16) | (b1 << 8) | b0


def word_to_bytes(w: int) -> bytes:
    """
    Split a word into 4 bytes, least significant first.
    """
    return bytes([w & 0xFF, (w >> 8) & 0xFF, (w >> 16) & 0xFF, (w >> 24) & 0xFF])


def rotate_left(w: int, r: int) -> int:
    """Circular left rotation by r mod 32 bits."""
    r %= 32
    return ((w << r) | (w >> (32 - r))) & WORD_MASK


def rotate_right(w: int, r: int) -> int:
    """Circular right rotation by r mod 32 bits."""
    r %= 32
    return ((w >> r) | (w << (32 - r))) & WORD_MASK


def bytes_to_words(data: bytes) -> list[int]:
    """
    Convert a byte string to little-endian words.

    Args:
        data: bytes, length a multiple of 4

    Returns:
        list of len(data) // 4 words
    """
    if len(data) % 4:
        raise ValueError(f"Expected a multiple of 4 bytes, got {len(data)}")
    return [
        bytes_to_word(data[i], data[i + 1], data[i + 2], data[i + 3])
        for i in range(0, len(data), 4)
    ]


def words_to_bytes(words) -> bytes:
    """
    Convert words back to bytes (inverse of bytes_to_words).
    """
    return b"".join(word_to_bytes(w) for w in words)


def format_word(w: int) -> str:
    """Format a word as 8 lowercase hex chars."""
    return f"{w:08x}"


def format_words(words) -> str:
    """
    Format words as space-separated hex, e.g. "003a0fd4 02497010".
    """
    return " ".join(format_word(w) for w in words)


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert hex string to bytes.
    """
    return bytes.fromhex(hex_str)


def bytes_to_hex(data: bytes) -> str:
    """
    Convert bytes to lowercase hex string.
    """
    return data.hex()
