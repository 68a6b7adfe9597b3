"""
LEA block cipher core.

128-bit block, 128/192/256-bit keys, 24/28/32 rounds:
1. build_schedule() expands a key once per direction
2. encrypt_block() / decrypt_block() transform one 16-byte block
"""

__version__ = "0.1.0"

# Sequential-key reference values
DEFAULT_KEY_HEX = "000102030405060708090a0b0c0d0e0f"
DEFAULT_PT_HEX = "101112131415161718191a1b1c1d1e1f"
DEFAULT_CT_HEX = "44ab24c48c1eb0f6e28b2ddd66525d50"

from .errors import LeaError, InvalidKeyLength, InvalidDirection, InvalidBlockLength
from .key_schedule import Direction, KeySchedule, build_schedule, generate_key
from .rounds import encrypt_round, decrypt_round
from .block import encrypt_block, decrypt_block, transform_block, LeaCipher
from .trace import TraceRecorder

__all__ = [
    "LeaError",
    "InvalidKeyLength",
    "InvalidDirection",
    "InvalidBlockLength",
    "Direction",
    "KeySchedule",
    "build_schedule",
    "generate_key",
    "encrypt_round",
    "decrypt_round",
    "encrypt_block",
    "decrypt_block",
    "transform_block",
    "LeaCipher",
    "TraceRecorder",
]
