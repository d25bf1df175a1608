"""
Centerlines of a vessel and the mesh ids they were computed from.

centerlines:
    [1] x [uint32] : numCenterlines
    for numCenterlines:
                     [1] x [uint32] : numPoints
         [numPoints * 3] x [double] : points
             [numPoints] x [double] : vessel radius estimation per point
     [numPoints * 3 * 3] x [double] : local coordinate system (x, y, z axis) per point

centerline_seed_target_ids_on_mesh:
    [1] x [uint32]            : seedId
    [1] x [uint32]            : numTargetIds
    [numTargetIds] x [uint32] : targetIds
"""
from __future__ import annotations

from typing import List

from ..io.arrays import ArrayDecoder, F64, U32
from ..models import Centerline, CenterlineSeedTargets


def decode_centerline(dec: ArrayDecoder) -> Centerline:
    dec.read_dim("numPoints")
    points = dec.read_shaped(F64, "numPoints", 3, what="centerline points")
    radii = dec.read_fixed_array(F64, "numPoints", what="centerline radii")
    frames = dec.read_shaped(F64, "numPoints", 3, 3, what="centerline frames")
    return Centerline(points=points, radii=radii, frames=frames)


def decode_centerlines(dec: ArrayDecoder) -> List[Centerline]:
    n = dec.read_dim("numCenterlines")
    return [decode_centerline(dec.scoped()) for _ in range(n)]


def decode_seed_targets(dec: ArrayDecoder) -> CenterlineSeedTargets:
    seed_id = dec.cursor.read_u32("seed id")
    dec.read_dim("numTargetIds")
    targets = dec.read_fixed_array(U32, "numTargetIds", what="target ids")
    return CenterlineSeedTargets(seed_id=seed_id, target_ids=targets)


__all__ = ["decode_centerline", "decode_centerlines", "decode_seed_targets"]
