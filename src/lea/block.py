"""
LEA block driver.

A block is unpacked into 4 little-endian words, the schedule's round
function is applied once per round key, and the words are packed back.
The round function comes from the schedule itself, so a block is always
processed in the direction its schedule was built for.
"""

from __future__ import annotations

from .errors import InvalidBlockLength, InvalidDirection
from .key_schedule import Direction, KeySchedule, build_schedule
from .params import BLOCK_SIZE, get_params
from .trace import TraceRecorder
from .words import bytes_to_words, words_to_bytes


def transform_block(
    block: bytes,
    schedule: KeySchedule,
    tracer: TraceRecorder | None = None,
) -> bytes:
    """
    Run every round of a schedule over one 16-byte block.

    Args:
        block: 16-byte input block
        schedule: KeySchedule from build_schedule()
        tracer: Optional trace recorder

    Returns:
        16-byte output block
    """
    if len(block) != BLOCK_SIZE:
        raise InvalidBlockLength(len(block))

    round_fn = schedule.round_function
    state = tuple(bytes_to_words(bytes(block)))

    if tracer:
        tracer.record(
            operation="input",
            direction=schedule.direction,
            block=bytes(block),
        )

    for i, rk in enumerate(schedule):
        state = round_fn(state, rk)
        if tracer:
            tracer.record(operation="round", round=i, state=list(state))

    out = words_to_bytes(state)

    if tracer:
        tracer.record(operation="output", direction=schedule.direction, block=out)

    return out


def _require(schedule: KeySchedule, direction: Direction) -> None:
    if schedule.direction is not direction:
        raise InvalidDirection(schedule.direction, expected=direction)


def encrypt_block(
    plaintext: bytes,
    schedule: KeySchedule,
    tracer: TraceRecorder | None = None,
) -> bytes:
    """
    Encrypt a single 16-byte block.

    Args:
        plaintext: 16-byte plaintext block
        schedule: Schedule built with Direction.ENCRYPT
        tracer: Optional trace recorder

    Returns:
        16-byte ciphertext block

    Raises:
        InvalidBlockLength: If plaintext is not 16 bytes
        InvalidDirection: If schedule was built for decryption
    """
    _require(schedule, Direction.ENCRYPT)
    return transform_block(plaintext, schedule, tracer)


def decrypt_block(
    ciphertext: bytes,
    schedule: KeySchedule,
    tracer: TraceRecorder | None = None,
) -> bytes:
    """
    Decrypt a single 16-byte block.

    Args:
        ciphertext: 16-byte ciphertext block
        schedule: Schedule built with Direction.DECRYPT
        tracer: Optional trace recorder

    Returns:
        16-byte plaintext block

    Raises:
        InvalidBlockLength: If ciphertext is not 16 bytes
        InvalidDirection: If schedule was built for encryption
    """
    _require(schedule, Direction.DECRYPT)
    return transform_block(ciphertext, schedule, tracer)


class LeaCipher:
    """
    LEA bound to one key.

    Both schedules are expanded once at construction and reused for
    every block.
    """

    def __init__(self, key: bytes):
        """
        Initialize the cipher.

        Args:
            key: 16, 24 or 32-byte master key
        """
        self._params = get_params(len(key))
        self._enc = build_schedule(key, Direction.ENCRYPT)
        self._dec = build_schedule(key, Direction.DECRYPT)

    def encrypt_block(self, plaintext: bytes, tracer: TraceRecorder | None = None) -> bytes:
        """Encrypt one 16-byte block."""
        return transform_block(plaintext, self._enc, tracer)

    def decrypt_block(self, ciphertext: bytes, tracer: TraceRecorder | None = None) -> bytes:
        """Decrypt one 16-byte block."""
        return transform_block(ciphertext, self._dec, tracer)

    @property
    def key_bits(self) -> int:
        return self._params.key_bits

    @property
    def rounds(self) -> int:
        return self._params.rounds

    def __repr__(self) -> str:
        return f"LeaCipher({self._params.name})"
