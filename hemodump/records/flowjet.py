"""
Flow jets.

[1] x [uint32] : numFlowJets
for numFlowJets:
    [1] x [uint32] : numPoints
    [1] x [uint32] : numTimes
    for numPoints:
        for numTimes:  JET_SAMPLE
        CROSS_SECTION
"""
from __future__ import annotations

from typing import List

import numpy as np

from ..io.arrays import ArrayDecoder, F64
from ..models import FlowJet

# Per (point, time): peak velocity position/value and the high-velocity area ellipse.
JET_SAMPLE = np.dtype([
    ("peak_position", F64, (3,)),
    ("peak_velocity", F64),
    ("area_center", F64, (3,)),
    ("area_dir0", F64, (3,)),
    ("area_radius0", F64),
    ("area_dir1", F64, (3,)),
    ("area_radius1", F64),
])

# Per point: centerline position, radius and local frame of the cross-section.
CROSS_SECTION = np.dtype([
    ("vessel_center", F64, (3,)),
    ("vessel_radius", F64),
    ("lcs_x", F64, (3,)),
    ("lcs_y", F64, (3,)),
])


def decode_flow_jet(dec: ArrayDecoder) -> FlowJet:
    num_points = dec.read_dim("numPoints")
    num_times = dec.read_dim("numTimes")

    # one point at a time; no buffer is sized from the header
    per_point, per_section = [], []
    for _ in range(num_points):
        per_point.append(dec.read_records(JET_SAMPLE, "numTimes", what="flow jet samples"))
        per_section.append(dec.read_records(CROSS_SECTION, 1, what="flow jet cross-section"))
    if per_point:
        samples = np.stack(per_point)
        sections = np.concatenate(per_section)
    else:
        samples = np.empty((0, num_times), dtype=JET_SAMPLE)
        sections = np.empty(0, dtype=CROSS_SECTION)

    return FlowJet(
        num_points=num_points,
        num_times=num_times,
        peak_positions=samples["peak_position"].copy(),
        peak_velocities=samples["peak_velocity"].copy(),
        area_centers=samples["area_center"].copy(),
        area_dir0=samples["area_dir0"].copy(),
        area_radius0=samples["area_radius0"].copy(),
        area_dir1=samples["area_dir1"].copy(),
        area_radius1=samples["area_radius1"].copy(),
        vessel_centers=sections["vessel_center"].copy(),
        vessel_radii=sections["vessel_radius"].copy(),
        lcs_x=sections["lcs_x"].copy(),
        lcs_y=sections["lcs_y"].copy(),
    )


def decode_flow_jets(dec: ArrayDecoder) -> List[FlowJet]:
    n = dec.read_dim("numFlowJets")
    return [decode_flow_jet(dec.scoped()) for _ in range(n)]


__all__ = ["decode_flow_jet", "decode_flow_jets", "JET_SAMPLE", "CROSS_SECTION"]
