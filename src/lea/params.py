"""LEA constants and per-key-size parameters."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidKeyLength

BLOCK_SIZE = 16
ROUND_KEY_WORDS = 6

# Key schedule round constants
DELTA = (
    0xC3EFE9DB, 0x44626B02, 0x79E27C8A, 0x78DF30EC,
    0x715EA49E, 0xC785DA0A, 0xE04EF22A, 0xE5C40957,
)

# Left rotation applied by the k-th state-word update of a round
SHIFTS = (1, 3, 6, 11, 13, 17)


@dataclass(frozen=True)
class LeaParams:
    """Parameters of one LEA variant, selected by key length."""

    # Master key length in bytes (16, 24 or 32)
    key_bytes: int

    # Number of rounds (Nr)
    rounds: int

    # DELTA index is (round % delta_modulus)
    delta_modulus: int

    # Words of key state (T) carried across rounds
    state_words: int

    # State-word updates per round: 4 for 128-bit keys, else 6
    updates_per_round: int

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.key_bytes not in (16, 24, 32):
            raise InvalidKeyLength(self.key_bytes)
        if self.state_words * 4 != self.key_bytes:
            raise ValueError(
                f"state_words must be key_bytes / 4, got {self.state_words}"
            )
        if not 1 <= self.delta_modulus <= len(DELTA):
            raise ValueError(f"delta_modulus must be 1..8, got {self.delta_modulus}")
        if self.updates_per_round not in (4, 6):
            raise ValueError(
                f"updates_per_round must be 4 or 6, got {self.updates_per_round}"
            )
        if self.rounds <= 0:
            raise ValueError(f"rounds must be positive, got {self.rounds}")

    @property
    def key_bits(self) -> int:
        """Key size in bits."""
        return self.key_bytes * 8

    @property
    def name(self) -> str:
        """Variant name, e.g. LEA-128."""
        return f"LEA-{self.key_bits}"


PARAMS: dict[int, LeaParams] = {
    16: LeaParams(key_bytes=16, rounds=24, delta_modulus=4, state_words=4, updates_per_round=4),
    24: LeaParams(key_bytes=24, rounds=28, delta_modulus=6, state_words=6, updates_per_round=6),
    32: LeaParams(key_bytes=32, rounds=32, delta_modulus=8, state_words=8, updates_per_round=6),
}


def get_params(key_len: int) -> LeaParams:
    """Get variant parameters for a key length.

    Args:
        key_len: Key length in bytes

    Returns:
        LeaParams for that key length

    Raises:
        InvalidKeyLength: If key_len is not 16, 24 or 32
    """
    if key_len not in PARAMS:
        raise InvalidKeyLength(key_len)
    return PARAMS[key_len]
