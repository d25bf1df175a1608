from .preview import preview, preview_items, format_element, format_scalar, PREVIEW_COUNT, ELLIPSIS
from .report import Report

__all__ = ["preview", "preview_items", "format_element", "format_scalar", "PREVIEW_COUNT", "ELLIPSIS", "Report"]
