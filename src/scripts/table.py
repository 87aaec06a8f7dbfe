"""Table printing utilities for experiments."""

from typing import Any

COLUMNS: list[tuple[str, str]] = [
    ("run", "run"),
    ("n", "train"),
    ("leaves", "leaves"),
    ("pruned", "pruned"),
    ("val", "val_err"),
    ("val_pruned", "val_err'"),
    ("test", "test_err"),
    ("test_pruned", "test_err'"),
    ("cart", "CART_err"),
    ("time", "time"),
]


def compute_column_widths(max_samples: int, *, w_err: int = 9) -> dict[str, int]:
    """Compute column widths based on max values and header lengths."""
    widths = {key: len(header) for key, header in COLUMNS}
    widths["n"] = max(widths["n"], len(str(max_samples)))
    for key in ("val", "val_pruned", "test", "test_pruned", "cart"):
        widths[key] = max(widths[key], w_err)
    widths["time"] = max(widths["time"], 7)
    return widths


def print_header(widths: dict[str, int]) -> None:
    """Print table header."""
    print(" | ".join(f"{header:^{widths[key]}}" for key, header in COLUMNS))
    total_width = sum(widths.values()) + 3 * (len(COLUMNS) - 1)
    print("-" * total_width)


def _fmt(value: float | None, spec: str) -> str:
    return format(value, spec) if value is not None else "-"


def print_run_row(row: dict[str, Any], widths: dict[str, int]) -> None:
    """Print a single run row."""
    cells = {
        "run": str(row["run"]),
        "n": str(row["n_train"]),
        "leaves": str(row["leaves_before"]),
        "pruned": str(row["leaves_after"]),
        "val": _fmt(row["val_error_before"], ".4f"),
        "val_pruned": _fmt(row["val_error_after"], ".4f"),
        "test": _fmt(row["test_error_before"], ".4f"),
        "test_pruned": _fmt(row["test_error_after"], ".4f"),
        "cart": _fmt(row["cart_test_error"], ".4f"),
        "time": _fmt(row["time_s"], ".3f"),
    }
    print(" | ".join(f"{cells[key]:>{widths[key]}}" for key, _ in COLUMNS))
