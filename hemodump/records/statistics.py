"""
Dataset-wide flow statistics.

[1] x [uint32] : numTimes
then FLOW_STATISTICS_LAYOUT in file order, each entry either
    "value"  : [1] x [double]
    "vector" : [numTimes] x [double]
"""
from __future__ import annotations

from typing import Any, Dict, Tuple

from ..io.arrays import ArrayDecoder, F64
from ..models import FlowStatistics

FLOW_STATISTICS_LAYOUT: Tuple[Tuple[str, str], ...] = (
    ("value", "vortex pressure threshold"),
    ("value", "volume total in ml"),
    ("value", "section volume in ml"),
    ("value", "section volume in percent"),
    ("value", "min diameter in mm"),
    ("value", "max diameter in mm"),
    ("value", "mean diameter in mm"),
    ("value", "median diameter in mm"),
    ("value", "min cross sectional area in mm2"),
    ("value", "max cross sectional area in mm2"),
    ("value", "mean cross sectional area in mm2"),
    ("value", "median cross sectional area in mm2"),
    ("vector", "vortex volume in ml per time"),
    ("vector", "vortex volume in percent per time"),
    ("value", "max vortex volume in ml"),
    ("value", "max vortex volume in percent"),
    ("value", "max vortex volume time in ms"),
    ("value", "mean vortex volume in ml"),
    ("value", "mean vortex volume in percent"),
    ("value", "median vortex volume in ml"),
    ("value", "median vortex volume in percent"),
    ("value", "systolic max vortex volume in ml"),
    ("value", "systolic max vortex volume in percent"),
    ("value", "systolic max vortex volume time in ms"),
    ("value", "systolic mean vortex volume in ml"),
    ("value", "systolic mean vortex volume in percent"),
    ("value", "systolic median vortex volume in ml"),
    ("value", "systolic median vortex volume in percent"),
    ("value", "diastolic max vortex volume in ml"),
    ("value", "diastolic max vortex volume in percent"),
    ("value", "diastolic max vortex volume time in ms"),
    ("value", "diastolic mean vortex volume in ml"),
    ("value", "diastolic mean vortex volume in percent"),
    ("value", "diastolic median vortex volume in ml"),
    ("value", "diastolic median vortex volume in percent"),
    ("value", "vortex coverage in ml"),
    ("value", "vortex coverage in percent"),
    ("value", "systolic vortex coverage in ml"),
    ("value", "systolic vortex coverage in percent"),
    ("value", "diastolic vortex coverage in ml"),
    ("value", "diastolic vortex coverage in percent"),
    ("vector", "max velocity per time"),
    ("vector", "max axial velocity per time"),
    ("vector", "max circumferential velocity per time"),
    ("vector", "mean velocity per time"),
    ("vector", "mean axial velocity per time"),
    ("vector", "mean circumferential velocity per time"),
    ("vector", "median velocity per time"),
    ("vector", "median axial velocity per time"),
    ("vector", "median circumferential velocity per time"),
    ("value", "max mean velocity"),
    ("value", "max mean velocity time in ms"),
    ("value", "max mean axial velocity"),
    ("value", "max mean axial velocity time in ms"),
    ("value", "max mean circumferential velocity"),
    ("value", "max mean circumferential velocity time in ms"),
    ("value", "mean mean velocity"),
    ("value", "mean mean axial velocity"),
    ("value", "mean mean circumferential velocity"),
    ("value", "median mean velocity"),
    ("value", "median mean axial velocity"),
    ("value", "median mean circumferential velocity"),
    ("value", "max overall velocity"),
    ("value", "max overall velocity time in ms"),
    ("value", "max overall velocity q99"),
    ("value", "max overall velocity q99 time in ms"),
    ("value", "max overall axial velocity"),
    ("value", "max overall axial velocity time in ms"),
    ("value", "max overall axial velocity q99"),
    ("value", "max overall axial velocity q99 time in ms"),
    ("value", "max overall circumferential velocity"),
    ("value", "max overall circumferential velocity time in ms"),
    ("value", "max overall circumferential velocity q99"),
    ("value", "max overall circumferential velocity q99 time in ms"),
    ("value", "systolic max mean velocity"),
    ("value", "systolic max mean velocity time in ms"),
    ("value", "systolic max mean axial velocity"),
    ("value", "systolic max mean axial velocity time in ms"),
    ("value", "systolic max mean circumferential velocity"),
    ("value", "systolic max mean circumferential velocity time in ms"),
    ("value", "systolic mean mean velocity"),
    ("value", "systolic mean mean axial velocity"),
    ("value", "systolic mean mean circumferential velocity"),
    ("value", "systolic median mean velocity"),
    ("value", "systolic median mean axial velocity"),
    ("value", "systolic median mean circumferential velocity"),
    ("value", "systolic max overall velocity"),
    ("value", "systolic max overall velocity time in ms"),
    ("value", "systolic max overall velocity q99"),
    ("value", "systolic max overall velocity q99 time in ms"),
    ("value", "systolic max overall axial velocity"),
    ("value", "systolic max overall axial velocity time in ms"),
    ("value", "systolic max overall axial velocity q99"),
    ("value", "systolic max overall axial velocity q99 time in ms"),
    ("value", "systolic max overall circumferential velocity"),
    ("value", "systolic max overall circumferential velocity time in ms"),
    ("value", "systolic max overall circumferential velocity q99"),
    ("value", "systolic max overall circumferential velocity q99 time in ms"),
    ("value", "diastolic max mean velocity"),
    ("value", "diastolic max mean velocity time in ms"),
    ("value", "diastolic max mean axial velocity"),
    ("value", "diastolic max mean axial velocity time in ms"),
    ("value", "diastolic max mean circumferential velocity"),
    ("value", "diastolic max mean circumferential velocity time in ms"),
    ("value", "diastolic mean mean velocity"),
    ("value", "diastolic mean mean axial velocity"),
    ("value", "diastolic mean mean circumferential velocity"),
    ("value", "diastolic median mean velocity"),
    ("value", "diastolic median mean axial velocity"),
    ("value", "diastolic median mean circumferential velocity"),
    ("value", "diastolic max overall velocity"),
    ("value", "diastolic max overall velocity time in ms"),
    ("value", "diastolic max overall velocity q99"),
    ("value", "diastolic max overall velocity q99 time in ms"),
    ("value", "diastolic max overall axial velocity"),
    ("value", "diastolic max overall axial velocity time in ms"),
    ("value", "diastolic max overall axial velocity q99"),
    ("value", "diastolic max overall axial velocity q99 time in ms"),
    ("value", "diastolic max overall circumferential velocity"),
    ("value", "diastolic max overall circumferential velocity time in ms"),
    ("value", "diastolic max overall circumferential velocity q99"),
    ("value", "diastolic max overall circumferential velocity q99 time in ms"),
    ("vector", "left rotation volume in ml per time"),
    ("vector", "left rotation volume in percent per time"),
    ("value", "max left rotation volume in ml"),
    ("value", "max left rotation volume in percent"),
    ("value", "max left rotation volume time in ms"),
    ("value", "mean left rotation volume in ml"),
    ("value", "mean left rotation volume in percent"),
    ("value", "median left rotation volume in ml"),
    ("value", "median left rotation volume in percent"),
    ("value", "systolic max left rotation volume in ml"),
    ("value", "systolic max left rotation volume in percent"),
    ("value", "systolic max left rotation volume time in ms"),
    ("value", "systolic mean left rotation volume in ml"),
    ("value", "systolic mean left rotation volume in percent"),
    ("value", "systolic median left rotation volume in ml"),
    ("value", "systolic median left rotation volume in percent"),
    ("value", "diastolic max left rotation volume in ml"),
    ("value", "diastolic max left rotation volume in percent"),
    ("value", "diastolic max left rotation volume time in ms"),
    ("value", "diastolic mean left rotation volume in ml"),
    ("value", "diastolic mean left rotation volume in percent"),
    ("value", "diastolic median left rotation volume in ml"),
    ("value", "diastolic median left rotation volume in percent"),
    ("vector", "right rotation volume in ml per time"),
    ("vector", "right rotation volume in percent per time"),
    ("value", "max right rotation volume in ml"),
    ("value", "max right rotation volume in percent"),
    ("value", "max right rotation volume time in ms"),
    ("value", "mean right rotation volume in ml"),
    ("value", "mean right rotation volume in percent"),
    ("value", "median right rotation volume in ml"),
    ("value", "median right rotation volume in percent"),
    ("value", "systolic max right rotation volume in ml"),
    ("value", "systolic max right rotation volume in percent"),
    ("value", "systolic max right rotation volume time in ms"),
    ("value", "systolic mean right rotation volume in ml"),
    ("value", "systolic mean right rotation volume in percent"),
    ("value", "systolic median right rotation volume in ml"),
    ("value", "systolic median right rotation volume in percent"),
    ("value", "diastolic max right rotation volume in ml"),
    ("value", "diastolic max right rotation volume in percent"),
    ("value", "diastolic max right rotation volume time in ms"),
    ("value", "diastolic mean right rotation volume in ml"),
    ("value", "diastolic mean right rotation volume in percent"),
    ("value", "diastolic median right rotation volume in ml"),
    ("value", "diastolic median right rotation volume in percent"),
    ("vector", "mean pressure per time"),
    ("value", "min mean pressure"),
    ("value", "min mean pressure time in ms"),
    ("value", "max mean pressure"),
    ("value", "max mean pressure time in ms"),
    ("value", "mean mean pressure"),
    ("value", "median mean pressure"),
    ("value", "systolic min mean pressure"),
    ("value", "systolic min mean pressure time in ms"),
    ("value", "systolic max mean pressure"),
    ("value", "systolic max mean pressure time in ms"),
    ("value", "systolic mean mean pressure"),
    ("value", "systolic median mean pressure"),
    ("value", "diastolic min mean pressure"),
    ("value", "diastolic min mean pressure time in ms"),
    ("value", "diastolic max mean pressure"),
    ("value", "diastolic max mean pressure time in ms"),
    ("value", "diastolic mean mean pressure"),
    ("value", "diastolic median mean pressure"),
    ("vector", "mean pressure in vortex region per time"),
    ("value", "min mean pressure in vortex region"),
    ("value", "min mean pressure in vortex region time in ms"),
    ("value", "max mean pressure in vortex region"),
    ("value", "max mean pressure in vortex region time in ms"),
    ("value", "mean mean pressure in vortex region"),
    ("value", "median mean pressure in vortex region"),
    ("value", "systolic min mean pressure in vortex region"),
    ("value", "systolic min mean pressure in vortex region time in ms"),
    ("value", "systolic max mean pressure in vortex region"),
    ("value", "systolic max mean pressure in vortex region time in ms"),
    ("value", "systolic mean mean pressure in vortex region"),
    ("value", "systolic median mean pressure in vortex region"),
    ("value", "diastolic min mean pressure in vortex region"),
    ("value", "diastolic min mean pressure in vortex region time in ms"),
    ("value", "diastolic max mean pressure in vortex region"),
    ("value", "diastolic max mean pressure in vortex region time in ms"),
    ("value", "diastolic mean mean pressure in vortex region"),
    ("value", "diastolic median mean pressure in vortex region"),
    ("value", "max flow jet displacement velocity weighted"),
    ("value", "min flow jet displacement velocity weighted"),
    ("value", "mean flow jet displacement velocity weighted"),
    ("value", "median flow jet displacement velocity weighted"),
    ("value", "max flow jet angle velocity weighted"),
    ("value", "min flow jet angle velocity weighted"),
    ("value", "mean flow jet angle velocity weighted"),
    ("value", "median flow jet angle velocity weighted"),
    ("value", "max flow jet high velocity area percent velocity weighted"),
    ("value", "min flow jet high velocity area percent velocity weighted"),
    ("value", "mean flow jet high velocity area percent velocity weighted"),
    ("value", "median flow jet high velocity area percent velocity weighted"),
)


def decode_flow_statistics(dec: ArrayDecoder) -> FlowStatistics:
    num_times = dec.read_dim("numTimes")
    values: Dict[str, Any] = {}
    for kind, name in FLOW_STATISTICS_LAYOUT:
        if kind == "vector":
            values[name] = dec.read_fixed_array(F64, "numTimes", what=name)
        else:
            values[name] = dec.cursor.read_f64(name)
    return FlowStatistics(num_times=num_times, values=values)


__all__ = ["decode_flow_statistics", "FLOW_STATISTICS_LAYOUT"]
