from __future__ import annotations

from typing import Any, List, Sequence

import numpy as np

from .preview import ELLIPSIS, PREVIEW_COUNT, format_element, format_scalar, preview

INDENT = "\t"


class Report:
    """
    Growable report text with tab-indented "- label: value" lines.

    A report is passed into every file reader and handed back, so the caller
    decides composition order; nothing is shared globally.
    """

    def __init__(self, preview_count: int = PREVIEW_COUNT):
        self.preview_count = int(preview_count)
        self._lines: List[str] = []

    # ---------- raw ----------

    def line(self, depth: int, text: str) -> "Report":
        self._lines.append(INDENT * depth + text)
        return self

    def text(self) -> str:
        return "".join(line + "\n" for line in self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __str__(self) -> str:
        return self.text()

    # ---------- typed helpers ----------

    def value(self, depth: int, label: str, value: Any) -> "Report":
        return self.line(depth, f"- {label}: {format_element(value)}")

    def array(self, depth: int, label: str, values: Sequence[Any]) -> "Report":
        """One line: label and a bounded preview of ``values``."""
        text = preview(values, self.preview_count)
        return self.line(depth, f"- {label}: {text}" if text else f"- {label}:")

    def rows(self, depth: int, label: str, values: Sequence[Any]) -> "Report":
        """One line per leading element of ``values``; a "- ..." line when truncated."""
        n = len(values)
        for i in range(min(n, self.preview_count)):
            self.line(depth, f"- {label}{i}: {format_element(values[i])}")
        if n > self.preview_count:
            self.line(depth, f"- {ELLIPSIS}")
        return self

    def series(self, depth: int, label: str, values: Sequence[Any]) -> "Report":
        """Like ``rows`` but every leading row is itself shown as a bounded preview."""
        n = len(values)
        for i in range(min(n, self.preview_count)):
            self.line(depth, f"- {label}{i}: {preview(values[i], self.preview_count)}".rstrip())
        if n > self.preview_count:
            self.line(depth, f"- {ELLIPSIS}")
        return self

    def matrix(self, depth: int, label: str, m: np.ndarray) -> "Report":
        """Full matrix, one row per line (transforms are small and fixed size)."""
        self.line(depth, f"- {label}:")
        for row in np.atleast_2d(m):
            self.line(depth + 1, " ".join(format_scalar(v) for v in row))
        return self

    def dims(self, depth: int, label: str, values: Sequence[Any], sep: str = " x ") -> "Report":
        return self.line(depth, f"- {label}: " + sep.join(format_scalar(v) for v in values))


__all__ = ["Report", "INDENT"]
