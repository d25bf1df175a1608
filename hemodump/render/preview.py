"""
Bounded textual previews of decoded values.

Numbers are fixed-point with 2 decimals (never exponential); integers print
as integers. An array of length N shows its first min(N, K) elements and an
ellipsis marker only when N > K. Rendering never touches the input.
"""
from __future__ import annotations

from typing import Any, List, Sequence

import numpy as np

PREVIEW_COUNT = 3
DECIMALS = 2
ELLIPSIS = "..."


def format_scalar(value: Any) -> str:
    if isinstance(value, (bool, np.bool_)):
        return str(int(value))
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    if isinstance(value, (float, np.floating)):
        return f"{float(value):.{DECIMALS}f}"
    return str(value)


def format_element(value: Any) -> str:
    """Scalar as-is; anything array-like as a bracketed, fully expanded list."""
    if isinstance(value, str):
        return value
    arr = np.asarray(value)
    if arr.ndim == 0:
        return format_scalar(arr.item())
    return "[" + ", ".join(format_element(v) for v in arr) + "]"


def preview_items(values: Sequence[Any], k: int = PREVIEW_COUNT) -> List[str]:
    """Formatted leading elements, plus ELLIPSIS as last item when truncated."""
    n = len(values)
    items = [format_element(values[i]) for i in range(min(n, k))]
    if n > k:
        items.append(ELLIPSIS)
    return items


def preview(values: Sequence[Any], k: int = PREVIEW_COUNT, sep: str = ", ") -> str:
    return sep.join(preview_items(values, k))


__all__ = ["preview", "preview_items", "format_scalar", "format_element", "PREVIEW_COUNT", "ELLIPSIS"]
