"""
LEA key schedule.

The master key is split into little-endian state words T. Each round
updates a key-size dependent subset of T in place:

  T[j] = ROL(T[j] + ROL(DELTA[i % m], i + k), SHIFTS[k])

and the updated words form that round's 6-word round key:

  128-bit:  4 updates on T0..T3      RK = (T0, T1, T2, T1, T3, T1)
  192-bit:  6 updates on T0..T5      RK = (T0, T1, T2, T3, T4, T5)
  256-bit:  6 updates on T[(6i+k)%8] RK = the six updated words

A decryption schedule holds the same round keys in reverse order.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from Crypto.Random import get_random_bytes

from .errors import InvalidDirection, InvalidKeyLength
from .params import DELTA, ROUND_KEY_WORDS, SHIFTS, LeaParams, get_params
from .rounds import decrypt_round, encrypt_round
from .words import WORD_MASK, bytes_to_words, rotate_left

if TYPE_CHECKING:
    from .trace import TraceRecorder


RoundKey = tuple[int, int, int, int, int, int]


class Direction(Enum):
    """Which way a schedule (and the block driver using it) runs."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


@dataclass(frozen=True)
class KeySchedule:
    """Ordered round keys for one key and direction.

    Built once by build_schedule() and never modified afterwards, so a
    single instance can be shared by any number of threads.
    """

    round_keys: tuple[RoundKey, ...]
    direction: Direction
    key_bits: int

    def __post_init__(self) -> None:
        """Validate direction and round key shape."""
        if not isinstance(self.direction, Direction):
            raise InvalidDirection(self.direction)
        if self.key_bits not in (128, 192, 256):
            raise ValueError(f"key_bits must be 128, 192 or 256, got {self.key_bits}")
        if not isinstance(self.round_keys, tuple):
            raise ValueError("round_keys must be a tuple")
        params = get_params(self.key_bits // 8)
        if len(self.round_keys) != params.rounds:
            raise ValueError(
                f"{params.name} needs {params.rounds} round keys, "
                f"got {len(self.round_keys)}"
            )
        for i, rk in enumerate(self.round_keys):
            if not isinstance(rk, tuple) or len(rk) != ROUND_KEY_WORDS:
                raise ValueError(f"Round key {i} must be a tuple of 6 words, got {rk!r}")

    def __len__(self) -> int:
        return len(self.round_keys)

    def __iter__(self):
        return iter(self.round_keys)

    def __getitem__(self, index: int) -> RoundKey:
        return self.round_keys[index]

    @property
    def rounds(self) -> int:
        """Number of rounds (Nr)."""
        return len(self.round_keys)

    @property
    def round_function(self) -> Callable[..., tuple[int, int, int, int]]:
        """Round transform matching this schedule's direction."""
        if self.direction is Direction.ENCRYPT:
            return encrypt_round
        if self.direction is Direction.DECRYPT:
            return decrypt_round
        raise InvalidDirection(self.direction)

    def __repr__(self) -> str:
        return (
            f"KeySchedule(key_bits={self.key_bits}, "
            f"direction={self.direction.value}, rounds={self.rounds})"
        )


def _expand(T: list[int], i: int, params: LeaParams) -> RoundKey:
    """Run round i of the recurrence on T and return its round key."""
    d = DELTA[i % params.delta_modulus]
    n = params.state_words

    if params.updates_per_round == 4:
        for k in range(4):
            T[k] = rotate_left((T[k] + rotate_left(d, i + k)) & WORD_MASK, SHIFTS[k])
        return (T[0], T[1], T[2], T[1], T[3], T[1])

    # 192-bit keys update all six words, 256-bit keys a sliding window of six
    idx = [(6 * i + k) % n for k in range(6)]
    for k, j in enumerate(idx):
        T[j] = rotate_left((T[j] + rotate_left(d, i + k)) & WORD_MASK, SHIFTS[k])
    return tuple(T[j] for j in idx)


def build_schedule(
    key: bytes,
    direction: Direction = Direction.ENCRYPT,
    tracer: TraceRecorder | None = None,
) -> KeySchedule:
    """Expand a master key into round keys.

    Args:
        key: 16, 24 or 32-byte master key
        direction: Direction.ENCRYPT or Direction.DECRYPT
        tracer: Optional trace recorder, gets one entry per round key

    Returns:
        KeySchedule with 24, 28 or 32 round keys

    Raises:
        InvalidKeyLength: If the key is not 16, 24 or 32 bytes
        InvalidDirection: If direction is not a Direction member
    """
    params = get_params(len(key))
    if not isinstance(direction, Direction):
        raise InvalidDirection(direction)

    T = bytes_to_words(bytes(key))
    nr = params.rounds
    round_keys: list[RoundKey | None] = [None] * nr

    for i in range(nr):
        rk = _expand(T, i, params)
        pos = i if direction is Direction.ENCRYPT else nr - 1 - i
        round_keys[pos] = rk

        if tracer:
            tracer.record(
                operation="key_schedule",
                round=i,
                position=pos,
                round_key=list(rk),
            )

    return KeySchedule(
        round_keys=tuple(round_keys),
        direction=direction,
        key_bits=params.key_bits,
    )


def generate_key(key_bits: int = 128) -> bytes:
    """Generate random key material of a supported size.

    Args:
        key_bits: 128, 192 or 256

    Returns:
        key_bits // 8 random bytes

    Raises:
        InvalidKeyLength: If key_bits is not a supported size
    """
    key_len, rem = divmod(key_bits, 8)
    if rem:
        raise ValueError(f"key_bits must be a multiple of 8, got {key_bits}")
    params = get_params(key_len)
    return get_random_bytes(params.key_bytes)
