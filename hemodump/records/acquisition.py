"""
Dataset-level acquisition metadata: DICOM tags, VENC, cardiac cycle,
phase wraps, velocity offset correction and static tissue thresholds.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

import numpy as np

from ..io.arrays import ArrayDecoder, F64, I8, U32
from ..models import (
    CardiacCycle,
    DicomImageTags,
    PhaseWraps,
    StaticTissueThresholds,
    VelocityOffsetCorrection,
    Venc,
)

# Number of 3D+T flow images (one per velocity component x/y/z).
NUM_FLOW_COMPONENTS = 3
FLOW_COMPONENT_LABELS = ("X (LR)", "Y (AP)", "Z (FH)")


# ---------- DICOM tags ----------

def _vec3(dec: ArrayDecoder, what: str) -> np.ndarray:
    return dec.read_fixed_array(F64, 3, what=what)


def _mat4(dec: ArrayDecoder, what: str) -> np.ndarray:
    return dec.read_matrix(F64, 4, 4, what=what)


_FIELD_READERS: Dict[str, Callable[[ArrayDecoder, str], Any]] = {
    "u8": lambda dec, what: dec.cursor.read_u8(what),
    "u16": lambda dec, what: dec.cursor.read_u16(what),
    "u32": lambda dec, what: dec.cursor.read_u32(what),
    "f64": lambda dec, what: dec.cursor.read_f64(what),
    "str": lambda dec, what: dec.cursor.read_length_prefixed_string(what),
    "vec3": _vec3,
    "mat4": _mat4,
}

# Per-image tag layout following the u16 image id, in file order.
DICOM_TAG_LAYOUT: Tuple[Tuple[str, str], ...] = (
    ("nDimensions", "u16"),
    ("Rows", "u16"),
    ("Columns", "u16"),
    ("Slices", "u16"),
    ("TemporalPositions", "u16"),
    ("NumberOfFrames", "u32"),
    ("RowSpacing", "f64"),
    ("ColSpacing", "f64"),
    ("SliceSpacing", "f64"),
    ("TemporalResolution", "f64"),
    ("PatientName", "str"),
    ("PatientID", "str"),
    ("PatientSex", "str"),
    ("PatientAge", "u8"),
    ("PatientWeight", "f64"),
    ("PatientBirthDate", "str"),
    ("SequenceName", "str"),
    ("SequenceName_Private", "str"),
    ("PatientPosition", "str"),
    ("StudyDescription", "str"),
    ("SeriesDescription", "str"),
    ("SeriesInstanceUID", "str"),
    ("StudyInstanceUID", "str"),
    ("ProtocolName", "str"),
    ("Modality", "str"),
    ("SamplesPerPixel", "u8"),
    ("LargestImagePixelValue", "u32"),
    ("BitsAllocated", "u8"),
    ("BitsStored", "u8"),
    ("HighBit", "u8"),
    ("AcquisitionDate", "str"),
    ("InstitutionName", "str"),
    ("ImageOrientationPatientX", "vec3"),
    ("ImageOrientationPatientY", "vec3"),
    ("WorldMatrix", "mat4"),
)


def decode_dicom_tags(dec: ArrayDecoder) -> List[DicomImageTags]:
    """[1] x [uint16] numImages, then per image a u16 id and DICOM_TAG_LAYOUT."""
    n = dec.read_dim("numImages", width=2)
    images = []
    for _ in range(n):
        image_id = dec.cursor.read_u16("DICOM image id")
        tags = {name: _FIELD_READERS[kind](dec, name) for name, kind in DICOM_TAG_LAYOUT}
        images.append(DicomImageTags(image_id=image_id, tags=tags))
    return images


# ---------- VENC ----------

def _id_venc_pair(dec: ArrayDecoder) -> Tuple[int, float]:
    image_id = dec.cursor.read_u16("DICOM image id")
    venc = dec.cursor.read_f64("venc")
    return image_id, venc


def decode_venc(dec: ArrayDecoder) -> Venc:
    """
    3 x ([uint16] dicom image id, [double] venc)  : 3D+T flow images X, Y, Z
    [1] x [uint8]                                 : num2DTFlowImages
    num2DTFlowImages x ([uint16], [double])       : 2D+T flow images
    """
    flow3dt = [_id_venc_pair(dec) for _ in range(NUM_FLOW_COMPONENTS)]
    n2dt = dec.read_dim("num2DTFlowImages", width=1)
    flow2dt = [_id_venc_pair(dec) for _ in range(n2dt)]
    return Venc(flow3dt=flow3dt, flow2dt=flow2dt)


# ---------- cardiac cycle ----------

def decode_cardiac_cycle(dec: ArrayDecoder) -> CardiacCycle:
    """
    [1] x [uint32] : numTimes
    [1] x [uint32] : idSystoleBegin,  [1] x [double] : msSystoleBegin
    [1] x [uint32] : idSystoleEnd,    [1] x [double] : msSystoleEnd
    [1] x [uint32] : numVessels
    [numVessels * numTimes] x [double] : mean axial velocity per time per vessel
    """
    cur = dec.cursor
    num_times = dec.read_dim("numTimes")
    begin_id = cur.read_u32("systole begin id")
    begin_ms = cur.read_f64("systole begin ms")
    end_id = cur.read_u32("systole end id")
    end_ms = cur.read_f64("systole end ms")
    dec.read_dim("numVessels")
    velocity = dec.read_matrix(F64, "numVessels", "numTimes", what="axial velocity per vessel")
    return CardiacCycle(
        num_times=num_times,
        systole_begin_id=begin_id,
        systole_begin_ms=begin_ms,
        systole_end_id=end_id,
        systole_end_ms=end_ms,
        axial_velocity=velocity,
    )


# ---------- phase wraps ----------

WRAPPED_VOXEL = np.dtype([("grid_pos", U32, (4,)), ("factor", I8)])


def decode_phase_wraps(dec: ArrayDecoder) -> PhaseWraps:
    """Per flow component: [uint32] numWrapped, then numWrapped x ([4] x [uint32] xyzt, [int8] factor)."""
    positions, factors = [], []
    for _ in range(NUM_FLOW_COMPONENTS):
        scope = dec.scoped()
        scope.read_dim("numWrappedVoxels")
        recs = scope.read_records(WRAPPED_VOXEL, "numWrappedVoxels", what="wrapped voxels")
        positions.append(np.ascontiguousarray(recs["grid_pos"]).reshape(len(recs), 4))
        factors.append(np.ascontiguousarray(recs["factor"]))
    return PhaseWraps(grid_positions=positions, factors=factors)


# ---------- velocity offset correction ----------

def decode_velocity_offset_correction(dec: ArrayDecoder) -> VelocityOffsetCorrection:
    """
    [1] x [uint32] : end diastolic time point id
    [1] x [double] : ivsd static tissue threshold
    per flow component: [uint32] numSlices, [numSlices * 3] x [double] plane coefficients
    """
    end_diastolic = dec.cursor.read_u32("end diastolic time id")
    threshold = dec.cursor.read_f64("ivsd static tissue threshold")
    coeffs = []
    for _ in range(NUM_FLOW_COMPONENTS):
        scope = dec.scoped()
        scope.read_dim("numSlices")
        coeffs.append(scope.read_matrix(F64, "numSlices", 3, what="plane coefficients"))
    return VelocityOffsetCorrection(
        end_diastolic_time_id=end_diastolic,
        ivsd_static_tissue_threshold=threshold,
        plane_coefficients=coeffs,
    )


# ---------- static tissue ----------

def decode_static_tissue_thresholds(dec: ArrayDecoder) -> StaticTissueThresholds:
    lower = dec.cursor.read_f64("lower threshold")
    upper = dec.cursor.read_f64("upper threshold")
    return StaticTissueThresholds(lower=lower, upper=upper)


__all__ = [
    "decode_dicom_tags",
    "decode_venc",
    "decode_cardiac_cycle",
    "decode_phase_wraps",
    "decode_velocity_offset_correction",
    "decode_static_tissue_thresholds",
    "DICOM_TAG_LAYOUT",
    "WRAPPED_VOXEL",
    "NUM_FLOW_COMPONENTS",
    "FLOW_COMPONENT_LABELS",
]
