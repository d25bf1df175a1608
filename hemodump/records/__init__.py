from .sparse import decode_sparse_field, decode_section_segmentation, read_transforms
from .mesh import decode_mesh
from .centerlines import decode_centerline, decode_centerlines, decode_seed_targets
from .pathlines import decode_pathline, decode_pathlines
from .flow import decode_flowfield, decode_flow_image_2dt
from .planes import decode_measuring_plane, decode_landmark_plane, decode_measuring_planes
from .flowjet import decode_flow_jet, decode_flow_jets
from .acquisition import (
    decode_cardiac_cycle,
    decode_dicom_tags,
    decode_phase_wraps,
    decode_static_tissue_thresholds,
    decode_velocity_offset_correction,
    decode_venc,
)
from .segmentation import decode_graphcut_ids
from .statistics import decode_flow_statistics
from .text import decode_dataset_tags, decode_text_lines

__all__ = [
    "decode_sparse_field",
    "decode_section_segmentation",
    "read_transforms",
    "decode_mesh",
    "decode_centerline",
    "decode_centerlines",
    "decode_seed_targets",
    "decode_pathline",
    "decode_pathlines",
    "decode_flowfield",
    "decode_flow_image_2dt",
    "decode_measuring_plane",
    "decode_landmark_plane",
    "decode_measuring_planes",
    "decode_flow_jet",
    "decode_flow_jets",
    "decode_cardiac_cycle",
    "decode_dicom_tags",
    "decode_phase_wraps",
    "decode_static_tissue_thresholds",
    "decode_velocity_offset_correction",
    "decode_venc",
    "decode_graphcut_ids",
    "decode_flow_statistics",
    "decode_dataset_tags",
    "decode_text_lines",
]
