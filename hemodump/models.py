from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

import numpy as np


@dataclass(frozen=True)
class SparseField:
    """
    N-dimensional scalar image stored as a list of non-zero voxels.
    - grid_size:   (numDims,) uint32
    - voxel_scale: (numDims,) float64
    - world / inv_world:           (4,4) spatial transform from DICOM
    - world_time / inv_world_time: (5,5) transform including time in 4th row/col
    - indices: (numNonZero, numDims) uint32 grid positions, in file order
    - values:  (numNonZero,) float64
    """
    num_dims: int
    grid_size: np.ndarray
    voxel_scale: np.ndarray
    world: np.ndarray
    inv_world: np.ndarray
    world_time: np.ndarray
    inv_world_time: np.ndarray
    indices: np.ndarray
    values: np.ndarray

    @property
    def num_non_zero(self) -> int:
        return int(self.values.shape[0])

    @property
    def entries(self) -> List[Tuple[Tuple[int, ...], float]]:
        return [
            (tuple(int(i) for i in idx), float(v))
            for idx, v in zip(self.indices, self.values)
        ]


# Component suffixes shared by the WSS / OSI blocks of a mesh, in file order.
WSS_COMPONENTS = ("total", "axial", "circumferential")


@dataclass(frozen=True)
class Mesh:
    """
    Vessel surface with wall shear stress attributes.
    - points, normals:            (N,3) float64
    - triangles:                  (M,3) uint32 point indices
    - triangle_normals:           (M,3) float64
    - wss[c]:                     (N,T) per point over time
    - wss_vectors[c]:             (N,T,3)
    - mean_wss[c], osi[c]:        (N,)
    - mean_wss_vectors[c]:        (N,3)
    with c in WSS_COMPONENTS.
    """
    points: np.ndarray
    normals: np.ndarray
    triangles: np.ndarray
    triangle_normals: np.ndarray
    num_times: int
    wss: Dict[str, np.ndarray]
    wss_vectors: Dict[str, np.ndarray]
    mean_wss: Dict[str, np.ndarray]
    osi: Dict[str, np.ndarray]
    mean_wss_vectors: Dict[str, np.ndarray]

    @property
    def num_points(self) -> int:
        return int(self.points.shape[0])

    @property
    def num_triangles(self) -> int:
        return int(self.triangles.shape[0])


@dataclass(frozen=True)
class Centerline:
    """
    - points: (P,3) float64
    - radii:  (P,) vessel radius estimation in mm
    - frames: (P,3,3) local coordinate system; rows are x, y (cross-section) and z (tangent)
    """
    points: np.ndarray
    radii: np.ndarray
    frames: np.ndarray


@dataclass(frozen=True)
class Pathline:
    """
    - points: (P,4) x, y, z, time
    - per-point attributes: (P,) each
    - length: spatial length in mm (time ignored)
    """
    points: np.ndarray
    relative_pressure: np.ndarray
    cos_angle_to_centerline: np.ndarray
    rotation_direction: np.ndarray
    velocity: np.ndarray
    axial_velocity: np.ndarray
    length: float


@dataclass(frozen=True)
class FlowField:
    """
    3D+T velocity field, vectors already rotated to world space and venc-scaled.
    - grid_size:   (4,) x, y, z, t
    - voxel_scale: (4,) mm, mm, mm, ms
    - rotation / inv_rotation: (3,3) rotational part of the world matrix
    - vectors: (X,Y,Z,T,3)
    """
    grid_size: np.ndarray
    voxel_scale: np.ndarray
    world: np.ndarray
    inv_world: np.ndarray
    world_time: np.ndarray
    inv_world_time: np.ndarray
    rotation: np.ndarray
    inv_rotation: np.ndarray
    vectors: np.ndarray


@dataclass(frozen=True)
class FlowImage2DT:
    """2D+T through-plane velocity image; velocities are (X,Y,T)."""
    grid_size: np.ndarray
    voxel_scale: np.ndarray
    world: np.ndarray
    inv_world: np.ndarray
    world_time: np.ndarray
    inv_world_time: np.ndarray
    velocities: np.ndarray


class LandmarkSemantic(enum.IntEnum):
    """Anatomical label of a landmark measuring plane. Unknown raw values map to NONE."""
    NONE = 0
    Aorta_AboveAorticValve = 1
    Aorta_MidAscendingAorta = 2
    Aorta_BeforeBrachiocephalicArtery = 3
    Aorta_BetweenLeftCommonCarotid_and_LeftSubclavianArtery = 4
    Aorta_DistalToLeftSubclavianArtery = 5
    Aorta_MidDescendingAorta = 6
    PulmonaryArtery_AbovePulmonaryValve = 7
    PulmonaryArtery_BeforeJunction = 8
    PulmonaryArtery_LeftPulmonaryArtery_Begin = 9
    PulmonaryArtery_RightPulmonaryArtery_Begin = 10

    @classmethod
    def from_raw(cls, value: int) -> "LandmarkSemantic":
        try:
            return cls(int(value))
        except ValueError:
            return cls.NONE

    @property
    def label(self) -> str:
        if self is LandmarkSemantic.NONE:
            return "None"
        return f"LandMarkSemantic_{self.name}"


@dataclass(frozen=True)
class MeasuringPlane:
    """
    2D+T cross-section through a vessel.
    - grid_size:   (3,) x, y, t
    - voxel_scale: (3,) mm, mm, ms
    - flow_vectors: (X,Y,T,3); segmentation: (X,Y) uint8
    - axial_velocity / circumferential_velocity: (X,Y,T)
    - statistics: scalar statistics in file order (flow, velocity, flow jet)
    - per_time: (T,) series in file order
    - flow_jet_positions: (T,3)
    - uncertainty_samples: (numSamples,) series in file order
    """
    vessel_id: int
    grid_size: np.ndarray
    voxel_scale: np.ndarray
    center: np.ndarray
    axis_x: np.ndarray
    axis_y: np.ndarray
    axis_z: np.ndarray
    diameter: float
    flow_vectors: np.ndarray
    segmentation: np.ndarray
    axial_velocity: np.ndarray
    circumferential_velocity: np.ndarray
    statistics: Dict[str, float]
    per_time: Dict[str, np.ndarray]
    flow_jet_positions: np.ndarray
    uncertainty_samples: Dict[str, np.ndarray]


@dataclass(frozen=True)
class LandmarkPlane:
    semantic: LandmarkSemantic
    raw_semantic: int
    plane: MeasuringPlane


@dataclass(frozen=True)
class MeasuringPlanes:
    planes: List[MeasuringPlane] = field(default_factory=list)
    landmarks: List[LandmarkPlane] = field(default_factory=list)


@dataclass(frozen=True)
class FlowJet:
    """
    Tracked flow jet along a vessel.
    Per (point, time), arrays shaped (P,T,...):
      peak_positions (3), peak_velocities, area_centers (3), area_dir0 (3),
      area_radius0, area_dir1 (3), area_radius1
    Per cross-section point, arrays shaped (P,...):
      vessel_centers (3), vessel_radii, lcs_x (3), lcs_y (3)
    """
    num_points: int
    num_times: int
    peak_positions: np.ndarray
    peak_velocities: np.ndarray
    area_centers: np.ndarray
    area_dir0: np.ndarray
    area_radius0: np.ndarray
    area_dir1: np.ndarray
    area_radius1: np.ndarray
    vessel_centers: np.ndarray
    vessel_radii: np.ndarray
    lcs_x: np.ndarray
    lcs_y: np.ndarray


@dataclass(frozen=True)
class DicomImageTags:
    image_id: int
    tags: Dict[str, Any]


@dataclass(frozen=True)
class Venc:
    """
    - flow3dt: [(dicom image id, venc m/s)] for X (LR), Y (AP), Z (FH)
    - flow2dt: [(dicom image id, venc m/s)] per 2D+T flow image
    """
    flow3dt: List[Tuple[int, float]]
    flow2dt: List[Tuple[int, float]]


@dataclass(frozen=True)
class CardiacCycle:
    """axial_velocity: (numVessels, numTimes) mean axial velocity in m/s."""
    num_times: int
    systole_begin_id: int
    systole_begin_ms: float
    systole_end_id: int
    systole_end_ms: float
    axial_velocity: np.ndarray

    @property
    def num_vessels(self) -> int:
        return int(self.axial_velocity.shape[0])


@dataclass(frozen=True)
class PhaseWraps:
    """
    One entry per 3D+T flow image (x, y, z).
    - grid_positions[i]: (W,4) uint32 x, y, z, t
    - factors[i]:        (W,) int8; corrected value = value + factor * 2 * venc
    """
    grid_positions: List[np.ndarray]
    factors: List[np.ndarray]


@dataclass(frozen=True)
class VelocityOffsetCorrection:
    """plane_coefficients[i]: (numSlices, 3) per 3D+T flow image."""
    end_diastolic_time_id: int
    ivsd_static_tissue_threshold: float
    plane_coefficients: List[np.ndarray]


@dataclass(frozen=True)
class StaticTissueThresholds:
    lower: float
    upper: float


@dataclass(frozen=True)
class GraphcutIds:
    """inside / outside: (n,3) uint32 grid positions."""
    inside: np.ndarray
    outside: np.ndarray


@dataclass(frozen=True)
class SectionSegmentation:
    sections: List[SparseField]


@dataclass(frozen=True)
class CenterlineSeedTargets:
    seed_id: int
    target_ids: np.ndarray


@dataclass(frozen=True)
class FlowStatistics:
    """values: scalars and (numTimes,) series keyed by name, in file order."""
    num_times: int
    values: Dict[str, Any]


@dataclass(frozen=True)
class TextLines:
    """Non-empty lines of a plain-text companion file."""
    lines: List[str]


@dataclass(frozen=True)
class DatasetTags:
    tags: List[str]
