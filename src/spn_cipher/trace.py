"""
Trace recording and pretty printing for cipher runs.

TraceRecorder receives one record per primitive application from the
round pipeline and can
- print a compact line per record (verbose)
- write JSON Lines to a file (trace_file)
"""

import json
from typing import Any, Callable, TextIO

from .utils import format_state_line, symbol_hex


class TraceRecorder:
    """
    Records and outputs traces of one or more block operations.

    The formatter turns a state symbol into display text; the default
    renders bytes as hex, pass utils.symbol_letter for the text engine.
    """

    def __init__(
        self,
        verbose: bool = False,
        trace_file: TextIO | None = None,
        formatter: Callable[[int], str] = symbol_hex,
    ):
        self.verbose = verbose
        self.trace_file = trace_file
        self.formatter = formatter
        self._records: list[dict[str, Any]] = []

    def record(self, **kwargs) -> None:
        """
        Record a trace entry.
        """
        self._records.append(kwargs)

        if self.trace_file:
            self._write_jsonl(kwargs)

        if self.verbose:
            self._print_verbose(kwargs)

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
        else:
            return obj

    def _print_verbose(self, record: dict[str, Any]) -> None:
        round_num = record.get("round", "?")
        operation = record.get("operation", "unknown")

        if "state" in record:
            state_str = format_state_line(record["state"], self.formatter)
            print(f"R{str(round_num):>2}  {operation:20s} STATE:{state_str}")

    def get_records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()


# ------------------------------------------------------------------
# Shared formatting functions
# ------------------------------------------------------------------

def format_header(title: str) -> str:
    """Format a section header."""
    bar = "#" * 70
    return f"\n{bar}\n# {title}\n{bar}"


def format_result(label: str, value: str, passed: bool | None = None) -> str:
    """Format a single result line, optionally with a PASS/FAIL marker."""
    line = f"{label}: {value}"
    if passed is None:
        return line
    marker = "[OK] PASS" if passed else "[ERROR] FAIL"
    return f"{line}  {marker}"
