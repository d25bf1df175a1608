"""Plain-text companions of the binary files."""
from __future__ import annotations

from typing import TextIO

from ..models import DatasetTags, TextLines

TAG_SEPARATOR = ";"


def decode_dataset_tags(stream: TextIO) -> DatasetTags:
    """Only the first line counts; tags are ';'-separated and empty tags are dropped."""
    first = stream.readline().rstrip("\r\n")
    return DatasetTags(tags=[t for t in first.split(TAG_SEPARATOR) if t])


def decode_text_lines(stream: TextIO) -> TextLines:
    lines = [line.rstrip("\r\n") for line in stream]
    return TextLines(lines=[line for line in lines if line])


__all__ = ["decode_dataset_tags", "decode_text_lines", "TAG_SEPARATOR"]
