"""Tests for the word codec."""

import random

import pytest

from lea.words import (
    bytes_to_word,
    word_to_bytes,
    rotate_left,
    rotate_right,
    bytes_to_words,
    words_to_bytes,
    format_word,
    format_words,
    hex_to_bytes,
    bytes_to_hex,
)


class TestPacking:
    """Little-endian packing of bytes into words."""

    def test_b0_is_least_significant(self) -> None:
        assert bytes_to_word(0x01, 0x02, 0x03, 0x04) == 0x04030201

    def test_word_to_bytes(self) -> None:
        assert word_to_bytes(0x04030201) == bytes([1, 2, 3, 4])

    @pytest.mark.parametrize("w", [0, 1, 0x80000000, 0xFFFFFFFF, 0xDEADBEEF])
    def test_round_trip(self, w: int) -> None:
        assert bytes_to_word(*word_to_bytes(w)) == w

    def test_block_to_words(self) -> None:
        """Plaintext of the published LEA-128 vector."""
        pt = bytes.fromhex("101112131415161718191a1b1c1d1e1f")
        assert bytes_to_words(pt) == [0x13121110, 0x17161514, 0x1B1A1918, 0x1F1E1D1C]

    def test_words_to_bytes_inverse(self) -> None:
        data = bytes(range(32))
        assert words_to_bytes(bytes_to_words(data)) == data

    def test_bytes_to_words_rejects_partial_word(self) -> None:
        with pytest.raises(ValueError, match="multiple of 4"):
            bytes_to_words(bytes(10))


class TestRotation:
    """Circular rotations."""

    def test_rotate_left(self) -> None:
        assert rotate_left(0x12345678, 4) == 0x23456781

    def test_rotate_right(self) -> None:
        assert rotate_right(0x12345678, 4) == 0x81234567

    def test_rotate_by_zero_and_32(self) -> None:
        assert rotate_left(0xDEADBEEF, 0) == 0xDEADBEEF
        assert rotate_left(0xDEADBEEF, 32) == 0xDEADBEEF
        assert rotate_right(0xDEADBEEF, 32) == 0xDEADBEEF

    def test_amount_taken_mod_32(self) -> None:
        assert rotate_left(0x80000001, 33) == 0x00000003
        assert rotate_right(0x12345678, 36) == rotate_right(0x12345678, 4)

    def test_result_fits_in_32_bits(self) -> None:
        assert rotate_left(0xFFFFFFFF, 7) == 0xFFFFFFFF
        assert rotate_left(0x80000000, 1) == 1

    @pytest.mark.parametrize("seed", range(5))
    def test_left_undoes_right(self, seed: int) -> None:
        rng = random.Random(seed)
        w = rng.getrandbits(32)
        for r in range(64):
            assert rotate_left(rotate_right(w, r), r) == w
            assert rotate_right(rotate_left(w, r), r) == w


class TestFormatting:
    """Hex formatting helpers."""

    def test_format_word_pads(self) -> None:
        assert format_word(0x3A0FD4) == "003a0fd4"

    def test_format_words(self) -> None:
        assert format_words([0x003A0FD4, 0x02497010]) == "003a0fd4 02497010"

    def test_hex_helpers(self) -> None:
        assert hex_to_bytes("00ff10") == b"\x00\xff\x10"
        assert bytes_to_hex(b"\x00\xff\x10") == "00ff10"
