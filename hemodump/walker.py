"""
Dataset directory traversal.

A dataset directory holds dataset-level files plus one subdirectory per
vessel. Everything is read in a fixed order into one report; a file that is
missing, unopenable or truncated leaves a note and does not stop the walk.
"""
from __future__ import annotations

import os
import warnings
from pathlib import Path
from typing import List, Tuple

from .errors import MissingFile, OpenFailure, TruncatedStream
from .formats import RecordFormat, decode_stream, get_format, open_record
from .render.preview import PREVIEW_COUNT
from .render.report import Report

# (format key, file name) in read order
DATASET_FILES_HEAD: Tuple[Tuple[str, str], ...] = (
    ("dataset_tags", "dataset_tags.txt"),
    ("dicom_tags", "dicom_tags_3dt_flow"),
    ("venc", "venc"),
    ("cardiac_cycle", "cardiac_cycle"),
    ("static_tissue_mask", "static_tissue_mask_in_flowfield_size"),
    ("static_tissue_thresholds", "static_tissue_ivsd_thresholds"),
    ("phase_wraps", "phase_wraps_3dt"),
    ("flowfield", "flowfield"),
    ("velocity_offset_correction", "velocity_offset_correction_3dt.voc"),
)
# read between head and tail: 2D+T flow images, magnitude TMIP, anatomical images
DATASET_FILES_TAIL: Tuple[Tuple[str, str], ...] = (
    ("pressure_map", "pressuremap"),
    ("rotation_direction", "rotationdirection"),
    ("axial_velocity", "axialvelocity"),
    ("cos_angle_to_centerline", "cosangletocenterline"),
    ("tke", "tke"),
    ("ivsd", "ivsd"),
    ("flow_statistics", "flow_stats"),
)
VESSEL_FILES: Tuple[Tuple[str, str], ...] = (
    ("mesh", "mesh"),
    ("seed_targets", "centerline_seed_target_ids_on_mesh"),
    ("centerlines", "centerlines"),
    ("flow_jets", "flowjets"),
    ("pathlines", "pathlines"),
    ("measuring_planes", "measuring_planes"),
    ("segmentation", "segmentation"),
    ("segmentation_info", "segmentation_info.txt"),
    ("graphcut_ids", "graphcut_segmentation_inside_outside_ids"),
    ("segmentation_in_flowfield", "segmentation_in_flowfield_size"),
    ("section_segmentation", "vessel_section_segmentation_in_flowfield_size"),
    ("section_info", "vessel_section_info.txt"),
)

FLOW_2DT_PATTERN = "flowfield_2dt"
ANATOMICAL_3D_PATTERN = "3d_anatomical_image"
ANATOMICAL_3DT_PATTERN = "3dt_anatomical_image"
MAGNITUDE_TMIP_FILE = "magnitude3dt_tmip"

SEPARATOR = "-" * 119


def read_record(
    path: str | os.PathLike[str],
    fmt: RecordFormat | str,
    report: Report,
    depth: int = 1,
) -> Tuple[bool, Report]:
    """
    Decode one file and append its section to ``report``.

    Returns (ok, report). Missing and unopenable files and truncated bodies
    give a note and ok=False; a failed file contributes no partial record.
    """
    if isinstance(fmt, str):
        fmt = get_format(fmt)
    p = Path(path)
    if not p.is_file():
        report.line(depth, f'- {fmt.missing_note} (path "{p}")')
        return False, report

    report.line(depth, f'- reading {fmt.label} (path "{p}")')
    try:
        with open_record(p, fmt) as handle:
            record = decode_stream(handle, fmt)
    except (MissingFile, OpenFailure):
        report.line(depth + 1, "FAILED! Could not open file!")
        return False, report
    except TruncatedStream as exc:
        warnings.warn(f"{p}: {exc}", RuntimeWarning, stacklevel=2)
        report.line(depth + 1, f"FAILED! {exc}")
        return False, report

    fmt.render(report, record, depth + 1)
    return True, report


class DatasetWalker:
    """
    Reads a whole dataset directory into one report.

    Parameters
    ----------
    directory : path of the dataset (backslashes and a trailing slash are normalized)
    preview   : number of leading elements shown per array
    """

    def __init__(self, directory: str | os.PathLike[str], preview: int = PREVIEW_COUNT):
        self.directory = Path(str(directory).replace("\\", "/"))
        self.preview = int(preview)
        self.outcomes: List[Tuple[str, bool]] = []

    # ---------- discovery ----------

    def vessel_names(self) -> List[str]:
        return sorted(p.name for p in self.directory.iterdir() if p.is_dir())

    def find(self, pattern: str) -> List[Path]:
        """Regular files whose name contains ``pattern`` (case-insensitive), sorted by name."""
        needle = pattern.lower()
        return sorted(
            (p for p in self.directory.iterdir() if p.is_file() and needle in p.name.lower()),
            key=lambda p: p.name,
        )

    # ---------- reading ----------

    def _read(self, path: Path, key: str, report: Report, depth: int = 1) -> bool:
        ok, _ = read_record(path, key, report, depth)
        self.outcomes.append((str(path), ok))
        return ok

    def _read_group(self, paths: List[Path], key: str, what: str, report: Report) -> None:
        names = ", ".join(p.name for p in paths)
        report.line(2, f"- found {len(paths)} {what}: {names}".rstrip())
        for p in paths:
            self._read(p, key, report, depth=2)

    def read_dataset(self, report: Report) -> Report:
        d = self.directory
        for key, name in DATASET_FILES_HEAD:
            self._read(d / name, key, report)

        report.line(1, f'- searching 2D+T flow images in "{d}"')
        self._read_group(self.find(FLOW_2DT_PATTERN), "flow_image_2dt", "2D+T flow images", report)

        self._read(d / MAGNITUDE_TMIP_FILE, "magnitude_tmip", report)

        report.line(1, f'- reading anatomical images (path "{d}")')
        self._read_group(self.find(ANATOMICAL_3D_PATTERN), "anatomical_image_3d", "3D anatomical images", report)
        self._read_group(self.find(ANATOMICAL_3DT_PATTERN), "anatomical_image_3dt", "3D+T anatomical images", report)

        for key, name in DATASET_FILES_TAIL:
            self._read(d / name, key, report)
        return report

    def read_vessel(self, name: str, report: Report) -> Report:
        vessel_dir = self.directory / name
        report.line(0, SEPARATOR)
        report.line(0, SEPARATOR)
        report.line(0, f'Reading vessel "{name}" (path "{vessel_dir}")')
        for key, file_name in VESSEL_FILES:
            self._read(vessel_dir / file_name, key, report)
        return report

    def read_all(self) -> str:
        if not self.directory.is_dir():
            raise MissingFile(str(self.directory))
        self.outcomes = []
        report = Report(self.preview)
        report.line(0, f'Reading directory "{self.directory}"')
        vessels = self.vessel_names()
        quoted = " ".join(f'"{v}"' for v in vessels)
        report.line(1, f"- found {len(vessels)} vessel(s): {quoted}".rstrip())

        self.read_dataset(report)
        for name in vessels:
            self.read_vessel(name, report)
        return report.text()


def read_all(directory: str | os.PathLike[str], preview: int = PREVIEW_COUNT) -> str:
    return DatasetWalker(directory, preview=preview).read_all()


__all__ = ["DatasetWalker", "read_record", "read_all"]
