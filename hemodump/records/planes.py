"""
Measuring planes (plain and landmark).

file:
    [1] x [uint32] : numPlanes
    [1] x [uint32] : numLandmarkPlanes
    numPlanes x [plane]
    numLandmarkPlanes x ([1] x [uint32] semantic, [plane])

plane:
    [1] x [uint8]  : vessel id
    [3] x [uint32] : grid size x y t
    [3] x [double] : scale x y t
    [3] x [double] : center, then LCS x, y, z axes (z == normal), 3 doubles each
    [1] x [double] : vessel diameter in mm
    [x*y*t*3] x [double] : flow vectors (world space)
    [x*y]     x [uint8]  : cross-section segmentation (static)
    [x*y*t]   x [double] : axial velocity
    [x*y*t]   x [double] : circumferential velocity
    PLANE_STATISTICS          x [double]
    PLANE_PER_TIME            x [t] x [double]
    PLANE_FLOW_JET_STATISTICS x [double]
    [t*3] x [double] : flow jet position per time
    [1] x [uint32]   : numSamples
    PLANE_UNCERTAINTY_SAMPLES x [numSamples] x [double]
"""
from __future__ import annotations

from ..io.arrays import ArrayDecoder, F64, U8
from ..models import LandmarkPlane, LandmarkSemantic, MeasuringPlane, MeasuringPlanes

PLANE_STATISTICS = (
    "min flow rate per time",
    "max flow rate per time",
    "mean flow rate per time",
    "median flow rate per time",
    "forward flow volume",
    "backward flow volume",
    "net flow volume",
    "percentaged back flow volume",
    "cardiac output",
    "max velocity",
    "min velocity",
    "mean velocity",
    "median velocity",
    "min velocity axial",
    "max velocity axial",
    "mean velocity axial",
    "median velocity axial",
    "min velocity circumferential",
    "max velocity circumferential",
    "mean velocity circumferential",
    "median velocity circumferential",
    "area mm2",
)

PLANE_PER_TIME = (
    "flow rate per time",
    "areal mean velocity per time",
    "areal mean velocity axial per time",
    "areal mean velocity circumferential per time",
    "flow jet angle per time",
    "flow jet displacement per time",
    "flow jet high velocity area percent per time",
)

PLANE_FLOW_JET_STATISTICS = (
    "max flow jet angle per time",
    "min flow jet angle per time",
    "mean flow jet angle per time",
    "median flow jet angle per time",
    "flow jet angle at fastest time",
    "mean flow jet angle velocity weighted",
    "min flow jet displacement per time",
    "max flow jet displacement per time",
    "mean flow jet displacement per time",
    "median flow jet displacement per time",
    "flow jet displacement at fastest time",
    "mean flow jet displacement velocity weighted",
    "min flow jet high velocity area percent per time",
    "max flow jet high velocity area percent per time",
    "mean flow jet high velocity area percent per time",
    "median flow jet high velocity area percent per time",
    "flow jet high velocity at fastest time",
    "mean flow jet high velocity velocity weighted",
)

PLANE_UNCERTAINTY_SAMPLES = (
    "net flow volume",
    "forward flow volume",
    "backward flow volume",
    "percentaged backward flow volume",
    "cardiac output",
)


def decode_measuring_plane(dec: ArrayDecoder) -> MeasuringPlane:
    """One plane; ``dec`` must be a fresh scope (plane dims are defined here)."""
    cur = dec.cursor
    vessel_id = cur.read_u8("vessel id")
    grid_size = dec.read_dims("gridSizeX", "gridSizeY", "numTimes")
    voxel_scale = dec.read_fixed_array(F64, 3, what="voxel scale")
    center = dec.read_fixed_array(F64, 3, what="center")
    axis_x = dec.read_fixed_array(F64, 3, what="LCS x")
    axis_y = dec.read_fixed_array(F64, 3, what="LCS y")
    axis_z = dec.read_fixed_array(F64, 3, what="LCS z")
    diameter = cur.read_f64("vessel diameter")

    flow_vectors = dec.read_shaped(F64, "gridSizeX", "gridSizeY", "numTimes", 3, what="flow vectors")
    segmentation = dec.read_shaped(U8, "gridSizeX", "gridSizeY", what="segmentation")
    axial = dec.read_shaped(F64, "gridSizeX", "gridSizeY", "numTimes", what="axial velocity")
    circumferential = dec.read_shaped(F64, "gridSizeX", "gridSizeY", "numTimes", what="circumferential velocity")

    statistics = {name: cur.read_f64(name) for name in PLANE_STATISTICS}
    per_time = {name: dec.read_fixed_array(F64, "numTimes", what=name) for name in PLANE_PER_TIME}
    statistics.update((name, cur.read_f64(name)) for name in PLANE_FLOW_JET_STATISTICS)
    jet_positions = dec.read_shaped(F64, "numTimes", 3, what="flow jet position per time")

    dec.read_dim("numSamples")
    samples = {
        name: dec.read_fixed_array(F64, "numSamples", what=f"samples {name}")
        for name in PLANE_UNCERTAINTY_SAMPLES
    }

    return MeasuringPlane(
        vessel_id=vessel_id,
        grid_size=grid_size,
        voxel_scale=voxel_scale,
        center=center,
        axis_x=axis_x,
        axis_y=axis_y,
        axis_z=axis_z,
        diameter=diameter,
        flow_vectors=flow_vectors,
        segmentation=segmentation,
        axial_velocity=axial,
        circumferential_velocity=circumferential,
        statistics=statistics,
        per_time=per_time,
        flow_jet_positions=jet_positions,
        uncertainty_samples=samples,
    )


def decode_landmark_plane(dec: ArrayDecoder) -> LandmarkPlane:
    raw = dec.cursor.read_u32("landmark semantic")
    plane = decode_measuring_plane(dec)
    return LandmarkPlane(semantic=LandmarkSemantic.from_raw(raw), raw_semantic=raw, plane=plane)


def decode_measuring_planes(dec: ArrayDecoder) -> MeasuringPlanes:
    n_planes = dec.read_dim("numPlanes")
    n_landmarks = dec.read_dim("numLandmarkPlanes")
    planes = [decode_measuring_plane(dec.scoped()) for _ in range(n_planes)]
    landmarks = [decode_landmark_plane(dec.scoped()) for _ in range(n_landmarks)]
    return MeasuringPlanes(planes=planes, landmarks=landmarks)


__all__ = [
    "decode_measuring_plane",
    "decode_landmark_plane",
    "decode_measuring_planes",
    "PLANE_STATISTICS",
    "PLANE_PER_TIME",
    "PLANE_FLOW_JET_STATISTICS",
    "PLANE_UNCERTAINTY_SAMPLES",
]
