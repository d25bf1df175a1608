"""
Registry of every file format in a dataset directory.

A RecordFormat ties a decoder to its renderer and to the wording used in
the report ("reading <label>", "<missing> <label>").
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict

from .errors import MissingFile, OpenFailure
from .io.arrays import ArrayDecoder
from .records import (
    decode_cardiac_cycle,
    decode_centerlines,
    decode_dataset_tags,
    decode_dicom_tags,
    decode_flow_image_2dt,
    decode_flow_jets,
    decode_flow_statistics,
    decode_flowfield,
    decode_graphcut_ids,
    decode_measuring_planes,
    decode_mesh,
    decode_pathlines,
    decode_phase_wraps,
    decode_section_segmentation,
    decode_seed_targets,
    decode_sparse_field,
    decode_static_tissue_thresholds,
    decode_text_lines,
    decode_velocity_offset_correction,
    decode_venc,
)
from .render import records as R

TEXT_ENCODING = "latin-1"


@dataclass(frozen=True)
class RecordFormat:
    key: str
    label: str
    decode: Callable[[Any], Any]
    render: Callable[..., Any]
    missing: str = "no"
    text: bool = False

    @property
    def missing_note(self) -> str:
        return f"{self.missing} {self.label}"


def _sparse(key: str, label: str, missing: str = "no") -> RecordFormat:
    return RecordFormat(key, label, decode_sparse_field, R.render_sparse_field, missing)


_VESSEL = "vessel has no"

FORMATS: Dict[str, RecordFormat] = {f.key: f for f in (
    # dataset level
    RecordFormat("dataset_tags", "filter tags", decode_dataset_tags, R.render_dataset_tags, text=True),
    RecordFormat("dicom_tags", "dicom tags", decode_dicom_tags, R.render_dicom_tags),
    RecordFormat("venc", "venc", decode_venc, R.render_venc),
    RecordFormat("cardiac_cycle", "cardiac cycle definition", decode_cardiac_cycle, R.render_cardiac_cycle),
    _sparse("static_tissue_mask", "static tissue mask"),
    RecordFormat("static_tissue_thresholds", "static tissue ivsd thresholds",
                 decode_static_tissue_thresholds, R.render_static_tissue_thresholds),
    RecordFormat("phase_wraps", "phase wraps", decode_phase_wraps, R.render_phase_wraps),
    RecordFormat("flowfield", "flow field", decode_flowfield, R.render_flowfield),
    RecordFormat("velocity_offset_correction", "3D+T flow images' velocity offset correction",
                 decode_velocity_offset_correction, R.render_velocity_offset_correction),
    RecordFormat("flow_image_2dt", "2D+T flow image", decode_flow_image_2dt, R.render_flow_image_2dt),
    _sparse("magnitude_tmip", "mag tmip"),
    _sparse("anatomical_image_3d", "3D anatomical image"),
    _sparse("anatomical_image_3dt", "3D+T anatomical image"),
    _sparse("pressure_map", "pressure map"),
    _sparse("rotation_direction", "rotation direction map"),
    _sparse("axial_velocity", "axial velocity map"),
    _sparse("cos_angle_to_centerline", "cos(angle) to centerline"),
    _sparse("tke", "turbulent kinetic energy map"),
    _sparse("ivsd", "ivsd"),
    RecordFormat("flow_statistics", "flow statistics", decode_flow_statistics, R.render_flow_statistics),
    # per vessel
    RecordFormat("mesh", "mesh", decode_mesh, R.render_mesh, _VESSEL),
    RecordFormat("seed_targets", "centerline start/end ids", decode_seed_targets, R.render_seed_targets),
    RecordFormat("centerlines", "centerlines", decode_centerlines, R.render_centerlines, _VESSEL),
    RecordFormat("flow_jets", "flow jet", decode_flow_jets, R.render_flow_jets),
    RecordFormat("pathlines", "pathlines", decode_pathlines, R.render_pathlines, _VESSEL),
    RecordFormat("measuring_planes", "land marks of measuring planes",
                 decode_measuring_planes, R.render_measuring_planes, _VESSEL),
    _sparse("segmentation", "segmentation"),
    RecordFormat("segmentation_info", "segmentation info", decode_text_lines, R.render_text_lines, text=True),
    RecordFormat("graphcut_ids", "segmentation graph cut inside/outside ids",
                 decode_graphcut_ids, R.render_graphcut_ids),
    _sparse("segmentation_in_flowfield", "segmentation in flow field size"),
    RecordFormat("section_segmentation", "vessel section segmentation in flow field size",
                 decode_section_segmentation, R.render_section_segmentation),
    RecordFormat("section_info", "vessel section segmentation semantics",
                 decode_text_lines, R.render_text_lines, text=True),
)}


def get_format(key: str) -> RecordFormat:
    try:
        return FORMATS[key]
    except KeyError:
        raise KeyError(f"Unknown record format '{key}'. Known: {', '.join(FORMATS)}") from None


def open_record(path: str | os.PathLike[str], fmt: RecordFormat):
    """Open ``path`` for ``fmt``; MissingFile / OpenFailure instead of OSError."""
    p = Path(path)
    if not p.is_file():
        raise MissingFile(str(p))
    try:
        if fmt.text:
            return p.open("r", encoding=TEXT_ENCODING)
        return p.open("rb")
    except OSError as exc:
        raise OpenFailure(str(p), str(exc)) from exc


def decode_stream(handle, fmt: RecordFormat):
    if fmt.text:
        return fmt.decode(handle)
    return fmt.decode(ArrayDecoder.over(handle))


def decode_file(path: str | os.PathLike[str], fmt: RecordFormat | str):
    """Decode one whole file into its record. The stream is closed on return or failure."""
    if isinstance(fmt, str):
        fmt = get_format(fmt)
    with open_record(path, fmt) as handle:
        return decode_stream(handle, fmt)


__all__ = ["RecordFormat", "FORMATS", "get_format", "open_record", "decode_stream", "decode_file"]
