"""Known-answer vectors and self-test for the LEA core."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any

from Crypto.Random import get_random_bytes

from .block import decrypt_block, encrypt_block
from .key_schedule import Direction, build_schedule
from .params import BLOCK_SIZE, PARAMS
from .trace import print_header, print_result


def check_ciphertext(
    key: bytes, plaintext: bytes, candidate_ciphertext: bytes
) -> tuple[bool, str]:
    """Compare a candidate ciphertext with what this implementation produces.

    Used to check published vectors against the cipher; it is not an
    independent oracle.

    Args:
        key: 16, 24 or 32-byte key
        plaintext: 16-byte plaintext block
        candidate_ciphertext: 16-byte ciphertext to validate

    Returns:
        Tuple of (is_correct, error_detail)
    """
    expected = encrypt_block(plaintext, build_schedule(key, Direction.ENCRYPT))
    if candidate_ciphertext == expected:
        return True, ""
    else:
        return False, (
            f"Ciphertext mismatch: expected {expected.hex()}, "
            f"got {candidate_ciphertext.hex()}"
        )


# Published LEA test vectors (KISA), plus a sequential-key vector
KISA_TEST_VECTORS = [
    {
        "name": "LEA-128",
        "key": bytes.fromhex("0f1e2d3c4b5a69788796a5b4c3d2e1f0"),
        "plaintext": bytes.fromhex("101112131415161718191a1b1c1d1e1f"),
        "ciphertext": bytes.fromhex("9fc84e3528c6c6185532c7a704648bfd"),
    },
    {
        "name": "LEA-192",
        "key": bytes.fromhex("0f1e2d3c4b5a69788796a5b4c3d2e1f0f0e1d2c3b4a59687"),
        "plaintext": bytes.fromhex("202122232425262728292a2b2c2d2e2f"),
        "ciphertext": bytes.fromhex("6fb95e325aad1b878cdcf5357674c6f2"),
    },
    {
        "name": "LEA-256",
        "key": bytes.fromhex(
            "0f1e2d3c4b5a69788796a5b4c3d2e1f0f0e1d2c3b4a5968778695a4b3c2d1e0f"
        ),
        "plaintext": bytes.fromhex("303132333435363738393a3b3c3d3e3f"),
        "ciphertext": bytes.fromhex("d651aff647b189c13a8900ca27f9e197"),
    },
    {
        "name": "LEA-128 sequential key",
        "key": bytes.fromhex("000102030405060708090a0b0c0d0e0f"),
        "plaintext": bytes.fromhex("101112131415161718191a1b1c1d1e1f"),
        "ciphertext": bytes.fromhex("44ab24c48c1eb0f6e28b2ddd66525d50"),
    },
]


@dataclass
class SelfTestReport:
    """Outcome of self_test()."""

    passed: int = 0
    failed: int = 0
    failures: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.passed + self.failed

    @property
    def ok(self) -> bool:
        """True when every check passed."""
        return self.failed == 0 and self.passed > 0

    def add(self, correct: bool, detail: str = "") -> None:
        if correct:
            self.passed += 1
        else:
            self.failed += 1
            self.failures.append(detail)

    def to_dict(self) -> dict[str, Any]:
        """Convert report to dictionary for serialization."""
        return {
            "passed": self.passed,
            "failed": self.failed,
            "total": self.total,
            "ok": self.ok,
            "failures": self.failures,
        }


def self_test(
    num_random: int = 16,
    seed: int | None = None,
    verbose: bool = False,
) -> SelfTestReport:
    """Check the cipher against the known-answer vectors and random round trips.

    Args:
        num_random: Number of random round trips, spread over all key sizes
        seed: Seed for reproducible random inputs (default: system randomness)
        verbose: Print each known-answer check

    Returns:
        SelfTestReport
    """
    report = SelfTestReport()

    for vec in KISA_TEST_VECTORS:
        dec = build_schedule(vec["key"], Direction.DECRYPT)

        correct, detail = check_ciphertext(
            vec["key"], vec["plaintext"], vec["ciphertext"]
        )
        report.add(correct, f"{vec['name']}: {detail}")

        pt = decrypt_block(vec["ciphertext"], dec)
        report.add(pt == vec["plaintext"], f"{vec['name']}: decryption gave {pt.hex()}")

        if verbose:
            enc = build_schedule(vec["key"], Direction.ENCRYPT)
            ct = encrypt_block(vec["plaintext"], enc)
            print_header(f"{vec['name']} encrypt")
            print(f"Key:       {vec['key'].hex()}")
            print(f"Plaintext: {vec['plaintext'].hex()}")
            print_result(ct.hex(), len(enc), correct)

    if seed is not None:
        rng = random.Random(seed)
        random_bytes = lambda n: bytes(rng.randint(0, 255) for _ in range(n))
    else:
        random_bytes = get_random_bytes

    key_sizes = sorted(PARAMS)
    for i in range(num_random):
        key = random_bytes(key_sizes[i % len(key_sizes)])
        pt = random_bytes(BLOCK_SIZE)

        ct = encrypt_block(pt, build_schedule(key, Direction.ENCRYPT))
        back = decrypt_block(ct, build_schedule(key, Direction.DECRYPT))
        report.add(
            back == pt,
            f"Round trip {i + 1} failed: key={key.hex()} pt={pt.hex()} got {back.hex()}",
        )

    return report


def format_report(report: SelfTestReport) -> str:
    """Format a self-test report for display."""
    lines = [f"Self-test: {report.passed}/{report.total} checks passed"]
    for failure in report.failures:
        lines.append(f"  FAIL - {failure}")
    lines.append("SELF-TEST PASSED" if report.ok else "SELF-TEST FAILED")
    return "\n".join(lines)
