"""
hemodump: readers for 4D flow MRI dataset exports.

This package exposes:
- Core dataclasses for every decoded record (SparseField, Mesh, Centerline, ...)
- The binary reading layer (ByteCursor, ShapeContext, ArrayDecoder)
- A format registry with per-file decoding (decode_file)
- Bounded text previews and whole-dataset reports (DatasetWalker, read_all)
"""

from .errors import DecodeError, MissingFile, OpenFailure, TruncatedStream, UnknownDimension
from .models import (
    SparseField,
    Mesh,
    Centerline,
    Pathline,
    FlowField,
    FlowImage2DT,
    LandmarkSemantic,
    MeasuringPlane,
    LandmarkPlane,
    MeasuringPlanes,
    FlowJet,
)
from .io import ByteCursor, ShapeContext, ArrayDecoder
from .formats import FORMATS, RecordFormat, decode_file
from .render import Report, preview
from .walker import DatasetWalker, read_record, read_all

__all__ = [
    "DecodeError",
    "MissingFile",
    "OpenFailure",
    "TruncatedStream",
    "UnknownDimension",
    "SparseField",
    "Mesh",
    "Centerline",
    "Pathline",
    "FlowField",
    "FlowImage2DT",
    "LandmarkSemantic",
    "MeasuringPlane",
    "LandmarkPlane",
    "MeasuringPlanes",
    "FlowJet",
    "ByteCursor",
    "ShapeContext",
    "ArrayDecoder",
    "FORMATS",
    "RecordFormat",
    "decode_file",
    "Report",
    "preview",
    "DatasetWalker",
    "read_record",
    "read_all",
]

__version__ = "0.1.0"
