from __future__ import annotations

from typing import List

from ..io.arrays import ArrayDecoder, F64
from ..models import Pathline

# Per-point attributes following the point list, in file order.
PATHLINE_ATTRIBUTES = (
    "relative_pressure",
    "cos_angle_to_centerline",
    "rotation_direction",
    "velocity",
    "axial_velocity",
)


def decode_pathline(dec: ArrayDecoder) -> Pathline:
    """
    [1] x [uint32]             : numPoints
    [numPoints * 4] x [double] : points (x, y, z, time)
    [numPoints] x [double]     : one array per PATHLINE_ATTRIBUTES entry
    [1] x [double]             : spatial length
    """
    dec.read_dim("numPoints")
    points = dec.read_shaped(F64, "numPoints", 4, what="pathline points")
    attrs = {a: dec.read_fixed_array(F64, "numPoints", what=a) for a in PATHLINE_ATTRIBUTES}
    length = dec.cursor.read_f64("pathline length")
    return Pathline(points=points, length=length, **attrs)


def decode_pathlines(dec: ArrayDecoder) -> List[Pathline]:
    n = dec.read_dim("numPathlines")
    return [decode_pathline(dec.scoped()) for _ in range(n)]


__all__ = ["decode_pathline", "decode_pathlines", "PATHLINE_ATTRIBUTES"]
