"""Row-window estimation for the append-only price log sheet."""

from tracker.window.rows import (
    ROWS_PER_DAY,
    approximate_row_number,
    cutoff,
    from_row_number,
    rows_to_trim,
)

__all__ = [
    "ROWS_PER_DAY",
    "approximate_row_number",
    "cutoff",
    "from_row_number",
    "rows_to_trim",
]
