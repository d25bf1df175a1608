"""
Report sections for every decoded record type.

Each ``render_*`` takes the report, the record and the base depth, appends
its lines and returns the report. Rendering reads the record only, so the
same record always yields the same text.
"""
from __future__ import annotations

from typing import List

from ..models import (
    CardiacCycle,
    Centerline,
    CenterlineSeedTargets,
    DatasetTags,
    DicomImageTags,
    FlowField,
    FlowImage2DT,
    FlowJet,
    FlowStatistics,
    GraphcutIds,
    MeasuringPlane,
    MeasuringPlanes,
    Mesh,
    Pathline,
    PhaseWraps,
    SectionSegmentation,
    SparseField,
    StaticTissueThresholds,
    TextLines,
    VelocityOffsetCorrection,
    Venc,
    WSS_COMPONENTS,
)
from ..records.acquisition import FLOW_COMPONENT_LABELS
from .preview import ELLIPSIS, format_element, format_scalar
from .report import Report

_WSS_PREFIX = {"total": "", "axial": "Axial ", "circumferential": "Circumferential "}


def _transforms(rep: Report, rec, depth: int) -> None:
    rep.matrix(depth, "world matrix", rec.world)
    rep.matrix(depth, "inverse world matrix", rec.inv_world)
    rep.matrix(depth, "world matrix with time", rec.world_time)
    rep.matrix(depth, "inverse world matrix with time", rec.inv_world_time)


# ---------- images ----------

def _first_voxel(values, spatial: int):
    """Time series of voxel (0, ..., 0) as a one-row list; empty for an empty grid."""
    if values.size == 0:
        return []
    return [values[(0,) * spatial]]


def render_sparse_field(rep: Report, rec: SparseField, depth: int = 2) -> Report:
    rep.value(depth, "num. dimensions", rec.num_dims)
    rep.dims(depth, "grid size", rec.grid_size)
    rep.dims(depth, "voxel scale", rec.voxel_scale)
    _transforms(rep, rec, depth)
    rep.value(depth, "num. non-zero values", rec.num_non_zero)
    shown = min(rec.num_non_zero, rep.preview_count)
    for i in range(shown):
        rep.line(depth + 1, f"- {i}: {format_element(rec.indices[i])} = {format_scalar(rec.values[i])}")
    if rec.num_non_zero > rep.preview_count:
        rep.line(depth + 1, f"- {ELLIPSIS}")
    return rep


def render_section_segmentation(rep: Report, rec: SectionSegmentation, depth: int = 2) -> Report:
    rep.value(depth, "num. sections", len(rec.sections))
    for i, section in enumerate(rec.sections):
        rep.line(depth, f"- section {i}:")
        render_sparse_field(rep, section, depth + 1)
    return rep


def render_flowfield(rep: Report, rec: FlowField, depth: int = 2) -> Report:
    rep.dims(depth, "grid size", rec.grid_size)
    rep.dims(depth, "voxel scale", rec.voxel_scale)
    _transforms(rep, rec, depth)
    rep.matrix(depth, "rotation matrix", rec.rotation)
    rep.matrix(depth, "inverse rotation matrix", rec.inv_rotation)
    rep.series(depth, "vectors of voxel", _first_voxel(rec.vectors, 3))
    return rep


def render_flow_image_2dt(rep: Report, rec: FlowImage2DT, depth: int = 2) -> Report:
    rep.dims(depth, "grid size", rec.grid_size)
    rep.dims(depth, "voxel scale", rec.voxel_scale)
    _transforms(rep, rec, depth)
    rep.series(depth, "velocities of voxel", _first_voxel(rec.velocities, 2))
    return rep


# ---------- vessel geometry ----------

def render_mesh(rep: Report, rec: Mesh, depth: int = 2) -> Report:
    rep.value(depth, "num. points", rec.num_points)
    rep.rows(depth + 1, "point", rec.points)
    rep.rows(depth + 1, "normal", rec.normals)
    rep.value(depth, "num. triangles", rec.num_triangles)
    rep.rows(depth + 1, "triangle", rec.triangles)
    rep.rows(depth + 1, "normal", rec.triangle_normals)
    rep.value(depth, "num. temporal positions", rec.num_times)

    for c in WSS_COMPONENTS:
        rep.line(depth, f"- {_WSS_PREFIX[c]}WSS per point per time:")
        rep.series(depth + 1, "point", rec.wss[c])
    for c in WSS_COMPONENTS:
        rep.line(depth, f"- {_WSS_PREFIX[c]}WSS vector per point per time:")
        rep.series(depth + 1, "point", rec.wss_vectors[c])
    for c in WSS_COMPONENTS:
        rep.array(depth, f"{_WSS_PREFIX[c]}mean WSS per point", rec.mean_wss[c])
    for c in WSS_COMPONENTS:
        rep.array(depth, f"{_WSS_PREFIX[c]}OSI per point", rec.osi[c])
    for c in WSS_COMPONENTS:
        rep.array(depth, f"{_WSS_PREFIX[c]}mean WSS vector per point", rec.mean_wss_vectors[c])
    return rep


def render_centerlines(rep: Report, recs: List[Centerline], depth: int = 2) -> Report:
    rep.value(depth, "num. centerlines", len(recs))
    for i, cl in enumerate(recs):
        rep.line(depth, f"- centerline {i}:")
        rep.value(depth + 1, "num. points", len(cl.points))
        rep.rows(depth + 2, "point", cl.points)
        rep.array(depth + 1, "radius", cl.radii)
        rep.rows(depth + 2, "lcs", cl.frames)
    return rep


def render_seed_targets(rep: Report, rec: CenterlineSeedTargets, depth: int = 2) -> Report:
    rep.value(depth, "seed point id", rec.seed_id)
    rep.value(depth, "num. target point ids", len(rec.target_ids))
    rep.array(depth, "target point ids", rec.target_ids)
    return rep


def render_pathlines(rep: Report, recs: List[Pathline], depth: int = 2) -> Report:
    rep.value(depth, "num. pathlines", len(recs))
    for i, pl in enumerate(recs[: rep.preview_count]):
        rep.line(depth, f"- pathline {i}:")
        rep.value(depth + 1, "num. points", len(pl.points))
        rep.rows(depth + 2, "point", pl.points)
        rep.array(depth + 1, "relative pressure", pl.relative_pressure)
        rep.array(depth + 1, "cos angle to centerline", pl.cos_angle_to_centerline)
        rep.array(depth + 1, "rotation direction", pl.rotation_direction)
        rep.array(depth + 1, "velocity", pl.velocity)
        rep.array(depth + 1, "axial velocity", pl.axial_velocity)
        rep.value(depth + 1, "length", pl.length)
    if len(recs) > rep.preview_count:
        rep.line(depth, f"- {ELLIPSIS}")
    return rep


def render_flow_jets(rep: Report, recs: List[FlowJet], depth: int = 2) -> Report:
    rep.value(depth, "num. flow jets", len(recs))
    for i, jet in enumerate(recs):
        rep.line(depth, f"- flow jet {i}:")
        rep.value(depth + 1, "num. points", jet.num_points)
        rep.value(depth + 1, "num. times", jet.num_times)
        rep.series(depth + 1, "peak position of point", jet.peak_positions)
        rep.series(depth + 1, "peak velocity of point", jet.peak_velocities)
        rep.series(depth + 1, "area center of point", jet.area_centers)
        rep.series(depth + 1, "area radius 0 of point", jet.area_radius0)
        rep.series(depth + 1, "area radius 1 of point", jet.area_radius1)
        rep.rows(depth + 1, "vessel center", jet.vessel_centers)
        rep.array(depth + 1, "vessel radius", jet.vessel_radii)
    return rep


# ---------- measuring planes ----------

def render_measuring_plane(rep: Report, plane: MeasuringPlane, depth: int = 3) -> Report:
    rep.value(depth, "vessel id", plane.vessel_id)
    rep.dims(depth, "grid size", plane.grid_size)
    rep.dims(depth, "voxel scale", plane.voxel_scale)
    rep.value(depth, "center", plane.center)
    rep.value(depth, "lcs x", plane.axis_x)
    rep.value(depth, "lcs y", plane.axis_y)
    rep.value(depth, "lcs z (normal)", plane.axis_z)
    rep.value(depth, "vessel diameter", plane.diameter)
    rep.value(depth, "num. segmented pixels", int((plane.segmentation != 0).sum()))
    for name, value in plane.statistics.items():
        rep.value(depth, name, value)
    for name, values in plane.per_time.items():
        rep.array(depth, name, values)
    rep.rows(depth + 1, "flow jet position at time ", plane.flow_jet_positions)
    for name, values in plane.uncertainty_samples.items():
        rep.array(depth, f"uncertainty samples {name}", values)
    return rep


def render_measuring_planes(rep: Report, rec: MeasuringPlanes, depth: int = 2) -> Report:
    rep.value(depth, "num. measuring planes", len(rec.planes))
    for i, plane in enumerate(rec.planes):
        rep.line(depth, f"- measuring plane {i}:")
        render_measuring_plane(rep, plane, depth + 1)
    rep.value(depth, "num. land mark measuring planes", len(rec.landmarks))
    for i, lm in enumerate(rec.landmarks):
        rep.line(depth, f"- land mark measuring plane {i}: {lm.semantic.label} ({lm.raw_semantic})")
        render_measuring_plane(rep, lm.plane, depth + 1)
    return rep


# ---------- segmentation ----------

def render_graphcut_ids(rep: Report, rec: GraphcutIds, depth: int = 2) -> Report:
    rep.value(depth, "num. inside ids", len(rec.inside))
    rep.rows(depth + 1, "inside", rec.inside)
    if len(rec.outside) == 0:
        rep.line(depth, "- no outside ids specified")
    else:
        rep.value(depth, "num. outside ids", len(rec.outside))
        rep.rows(depth + 1, "outside", rec.outside)
    return rep


def render_text_lines(rep: Report, rec: TextLines, depth: int = 2) -> Report:
    for line in rec.lines:
        rep.line(depth, f"- {line}")
    return rep


def render_dataset_tags(rep: Report, rec: DatasetTags, depth: int = 2) -> Report:
    rep.value(depth, "num. tags", len(rec.tags))
    for tag in rec.tags:
        rep.line(depth + 1, f"- {tag}")
    return rep


# ---------- acquisition ----------

def render_dicom_tags(rep: Report, recs: List[DicomImageTags], depth: int = 2) -> Report:
    rep.value(depth, "num. images", len(recs))
    for img in recs:
        rep.line(depth, f"- image {img.image_id}:")
        for name, value in img.tags.items():
            if getattr(value, "ndim", 0) == 2:
                rep.matrix(depth + 1, name, value)
            else:
                rep.value(depth + 1, name, value)
    return rep


def render_venc(rep: Report, rec: Venc, depth: int = 2) -> Report:
    rep.line(depth, "- 3D+T flow images:")
    for label, (image_id, venc) in zip(FLOW_COMPONENT_LABELS, rec.flow3dt):
        rep.line(depth + 1, f"- {label}: image {image_id}, venc {format_scalar(venc)} m/s")
    rep.value(depth, "num. 2D+T flow images", len(rec.flow2dt))
    for image_id, venc in rec.flow2dt:
        rep.line(depth + 1, f"- image {image_id}, venc {format_scalar(venc)} m/s")
    return rep


def render_cardiac_cycle(rep: Report, rec: CardiacCycle, depth: int = 2) -> Report:
    rep.value(depth, "num. times", rec.num_times)
    rep.line(depth, f"- systole begin: time id {rec.systole_begin_id} ({format_scalar(rec.systole_begin_ms)} ms)")
    rep.line(depth, f"- systole end: time id {rec.systole_end_id} ({format_scalar(rec.systole_end_ms)} ms)")
    rep.value(depth, "num. vessels", rec.num_vessels)
    rep.series(depth + 1, "mean axial velocity of vessel", rec.axial_velocity)
    return rep


def render_phase_wraps(rep: Report, rec: PhaseWraps, depth: int = 2) -> Report:
    for label, positions, factors in zip(FLOW_COMPONENT_LABELS, rec.grid_positions, rec.factors):
        rep.line(depth, f"- {label}: {len(factors)} wrapped voxels")
        shown = min(len(factors), rep.preview_count)
        for i in range(shown):
            rep.line(depth + 1, f"- {format_element(positions[i])}: factor {int(factors[i])}")
        if len(factors) > rep.preview_count:
            rep.line(depth + 1, f"- {ELLIPSIS}")
    return rep


def render_velocity_offset_correction(rep: Report, rec: VelocityOffsetCorrection, depth: int = 2) -> Report:
    rep.value(depth, "end-diastolic time id", rec.end_diastolic_time_id)
    rep.value(depth, "ivsd static tissue threshold", rec.ivsd_static_tissue_threshold)
    for label, coeffs in zip(FLOW_COMPONENT_LABELS, rec.plane_coefficients):
        rep.line(depth, f"- {label}: {len(coeffs)} slices")
        rep.rows(depth + 1, "plane coefficients of slice", coeffs)
    return rep


def render_static_tissue_thresholds(rep: Report, rec: StaticTissueThresholds, depth: int = 2) -> Report:
    rep.value(depth, "lower threshold", rec.lower)
    rep.value(depth, "upper threshold", rec.upper)
    return rep


def render_flow_statistics(rep: Report, rec: FlowStatistics, depth: int = 2) -> Report:
    rep.value(depth, "num. times", rec.num_times)
    for name, value in rec.values.items():
        if getattr(value, "ndim", 0) == 1:
            rep.array(depth, name, value)
        else:
            rep.value(depth, name, value)
    return rep


__all__ = [name for name in dir() if name.startswith("render_")]
