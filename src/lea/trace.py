"""
Trace recording and pretty printing for LEA operations.

Contains:
- TraceRecorder: in-memory records, JSON Lines file output, compact verbose stdout
- print_header / print_result: banners used by the verbose self-test
"""

import json
from enum import Enum
from typing import Any, TextIO

from .words import format_words


class TraceRecorder:
    """
    Records traces of key expansion and block transforms.

    Supports:
    - JSON Lines file output  (when trace_file is set)
    - Compact verbose stdout  (when verbose is set)
    """

    def __init__(self, verbose: bool = False, trace_file: TextIO | None = None):
        self.verbose = verbose
        self.trace_file = trace_file
        self._records: list[dict[str, Any]] = []

    def record(self, **fields) -> None:
        """
        Record a trace entry.

        Entries carry an "operation" name plus whatever words or bytes
        the caller wants to keep (state, round_key, block, ...).
        """
        self._records.append(fields)

        if self.trace_file:
            self._write_jsonl(fields)

        if self.verbose:
            self._print_verbose(fields)

    def _write_jsonl(self, record: dict[str, Any]) -> None:
        serializable = self._make_serializable(record)
        self.trace_file.write(json.dumps(serializable) + "\n")
        self.trace_file.flush()

    def _make_serializable(self, obj: Any) -> Any:
        if isinstance(obj, dict):
            return {k: self._make_serializable(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [self._make_serializable(item) for item in obj]
        elif isinstance(obj, bytes):
            return obj.hex()
        elif isinstance(obj, Enum):
            return obj.value
        else:
            return obj

    def _print_verbose(self, record: dict[str, Any]) -> None:
        """One line per event."""
        operation = record.get("operation", "unknown")
        round_num = record.get("round")
        rs = f"R{round_num:02d}" if isinstance(round_num, int) else "---"

        if "state" in record:
            print(f"{rs} {operation:14s} STATE:{format_words(record['state'])}")
        elif "round_key" in record:
            print(f"{rs} {operation:14s} RK:{format_words(record['round_key'])}")
        elif "block" in record:
            print(f"{rs} {operation:14s} BLOCK:{record['block'].hex()}")
        else:
            print(f"{rs} {operation}")

    def get_records(self, operation: str | None = None) -> list[dict[str, Any]]:
        """Copy of the records, optionally only those of one operation."""
        if operation is None:
            return list(self._records)
        return [r for r in self._records if r.get("operation") == operation]

    def clear(self) -> None:
        self._records.clear()


# ------------------------------------------------------------------
# Self-test report output
# ------------------------------------------------------------------

def print_header(title: str, width: int = 70) -> None:
    """Print a banner naming the vector being checked."""
    rule = "#" * width
    print(f"\n{rule}\n# {title}\n{rule}")


def print_result(ciphertext_hex: str, rounds: int, passed: bool = True) -> None:
    """Print final block result."""
    print(f"\n{'='*70}")
    print("RESULT")
    print(f"{'='*70}")
    print(f"Output: {ciphertext_hex}")
    print(f"Rounds: {rounds}")

    status = "PASS" if passed else "FAIL"
    marker = "[OK]" if passed else "[ERROR]"
    print(f"Verification: {marker} {status}")
    print(f"{'='*70}")
