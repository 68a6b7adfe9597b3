"""
LEA round transform.

One round maps a 4-word state and a 6-word round key to a new state using
only XOR, addition mod 2^32 and fixed rotations:

  x0' = ROL9((x0 ^ rk0) + (x1 ^ rk1))
  x1' = ROR5((x1 ^ rk2) + (x2 ^ rk3))
  x2' = ROR3((x2 ^ rk4) + (x3 ^ rk5))
  x3' = x0

decrypt_round is the exact inverse, rebuilding the state from x3' forward.
Neither function branches on data.
"""

from .words import WORD_MASK, rotate_left, rotate_right


def encrypt_round(state: tuple[int, ...], rk: tuple[int, ...]) -> tuple[int, int, int, int]:
    """
    Apply one encryption round.

    Args:
        state: 4 words
        rk: 6-word round key

    Returns:
        New 4-word state
    """
    x0, x1, x2, x3 = state
    return (
        rotate_left(((x0 ^ rk[0]) + (x1 ^ rk[1])) & WORD_MASK, 9),
        rotate_right(((x1 ^ rk[2]) + (x2 ^ rk[3])) & WORD_MASK, 5),
        rotate_right(((x2 ^ rk[4]) + (x3 ^ rk[5])) & WORD_MASK, 3),
        x0,
    )


def decrypt_round(state: tuple[int, ...], rk: tuple[int, ...]) -> tuple[int, int, int, int]:
    """
    Undo one encryption round.

    Args:
        state: 4 words produced by encrypt_round
        rk: the same 6-word round key used to encrypt

    Returns:
        The 4-word state before that round
    """
    x0, x1, x2, x3 = state
    t0 = x3
    t1 = ((rotate_right(x0, 9) - (t0 ^ rk[0])) & WORD_MASK) ^ rk[1]
    t2 = ((rotate_left(x1, 5) - (t1 ^ rk[2])) & WORD_MASK) ^ rk[3]
    t3 = ((rotate_left(x2, 3) - (t2 ^ rk[4])) & WORD_MASK) ^ rk[5]
    return (t0, t1, t2, t3)
