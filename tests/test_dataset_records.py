import numpy as np
import pytest

from hemodump.errors import TruncatedStream
from hemodump.records import (
    decode_cardiac_cycle,
    decode_dicom_tags,
    decode_flow_image_2dt,
    decode_flow_statistics,
    decode_flowfield,
    decode_phase_wraps,
    decode_static_tissue_thresholds,
    decode_velocity_offset_correction,
    decode_venc,
)
from hemodump.records.statistics import FLOW_STATISTICS_LAYOUT
from hemodump.render import records as R
from hemodump.render.report import Report

from builders import Bytes, decode_bytes, transforms


def _dicom_image(b: Bytes, image_id: int) -> None:
    b.u16(image_id)
    b.u16(3, 128, 96, 40, 20).u32(800)
    b.f64(1.5, 1.5, 2.0, 42.5)
    b.string("Doe^Jane").string("P-001").string("F").u8(54).f64(61.0).string("19700101")
    b.string("fl3d1").string("").string("HFS").string("Heart").string("4D flow")
    b.string("1.2.3").string("1.2").string("flow_4d").string("MR")
    b.u8(1).u32(4095).u8(16, 12, 11)
    b.string("20240131").string("Clinic")
    b.f64(1, 0, 0).f64(0, 1, 0)
    b.f64s(np.eye(4))


def test_dicom_tags():
    b = Bytes().u16(2)
    _dicom_image(b, 7)
    _dicom_image(b, 8)
    recs, dec = decode_bytes(decode_dicom_tags, b.data())
    assert dec.cursor.position == len(b.data())
    assert [r.image_id for r in recs] == [7, 8]
    tags = recs[0].tags
    assert tags["Rows"] == 128
    assert tags["NumberOfFrames"] == 800
    assert tags["TemporalResolution"] == 42.5
    assert tags["PatientName"] == "Doe^Jane"
    assert tags["PatientAge"] == 54
    assert tags["SequenceName_Private"] == ""
    assert tags["LargestImagePixelValue"] == 4095
    assert tags["HighBit"] == 11
    assert tags["InstitutionName"] == "Clinic"
    np.testing.assert_array_equal(tags["ImageOrientationPatientY"], [0, 1, 0])
    np.testing.assert_array_equal(tags["WorldMatrix"], np.eye(4))
    text = R.render_dicom_tags(Report(), recs, depth=0).text()
    assert "\t- PatientName: Doe^Jane\n" in text
    assert "\t- WorldMatrix:\n\t\t1.00 0.00 0.00 0.00\n" in text


def test_dicom_tags_truncated_string():
    b = Bytes().u16(1)
    _dicom_image(b, 1)
    with pytest.raises(TruncatedStream):
        decode_bytes(decode_dicom_tags, b.data()[:60])


def test_venc():
    data = Bytes().u16(1).f64(1.5).u16(2).f64(1.5).u16(3).f64(2.0).u8(1).u16(9).f64(0.8).data()
    rec, dec = decode_bytes(decode_venc, data)
    assert dec.cursor.position == len(data)
    assert rec.flow3dt == [(1, 1.5), (2, 1.5), (3, 2.0)]
    assert rec.flow2dt == [(9, 0.8)]
    text = R.render_venc(Report(), rec, depth=0).text()
    assert "\t- Z (FH): image 3, venc 2.00 m/s\n" in text


def test_cardiac_cycle():
    data = Bytes().u32(4).u32(1).f64(40.0).u32(3).f64(120.0).u32(2).f64s(np.arange(8)).data()
    rec, _ = decode_bytes(decode_cardiac_cycle, data)
    assert rec.num_times == 4
    assert (rec.systole_begin_id, rec.systole_end_id) == (1, 3)
    assert rec.num_vessels == 2
    np.testing.assert_array_equal(rec.axial_velocity[1], [4, 5, 6, 7])


def test_phase_wraps_per_component():
    b = Bytes()
    b.u32(2).u32(1, 2, 3, 4).i8(-1).u32(5, 6, 7, 8).i8(2)
    b.u32(0)
    b.u32(1).u32(0, 0, 0, 9).i8(1)
    rec, dec = decode_bytes(decode_phase_wraps, b.data())
    assert dec.cursor.position == len(b.data())
    assert [len(f) for f in rec.factors] == [2, 0, 1]
    np.testing.assert_array_equal(rec.grid_positions[0], [[1, 2, 3, 4], [5, 6, 7, 8]])
    np.testing.assert_array_equal(rec.factors[0], [-1, 2])
    assert rec.grid_positions[1].shape == (0, 4)
    text = R.render_phase_wraps(Report(), rec, depth=0).text()
    assert "- X (LR): 2 wrapped voxels\n\t- [1, 2, 3, 4]: factor -1\n" in text


def test_velocity_offset_correction():
    b = Bytes().u32(11).f64(0.2)
    for n in (2, 1, 0):
        b.u32(n).f64s(np.ones(n * 3))
    rec, dec = decode_bytes(decode_velocity_offset_correction, b.data())
    assert dec.cursor.position == len(b.data())
    assert rec.end_diastolic_time_id == 11
    assert [c.shape for c in rec.plane_coefficients] == [(2, 3), (1, 3), (0, 3)]


def test_static_tissue_thresholds():
    rec, _ = decode_bytes(decode_static_tissue_thresholds, Bytes().f64(0.1, 0.9).data())
    assert (rec.lower, rec.upper) == (0.1, 0.9)


def test_flowfield():
    x, y, z, t = 2, 1, 3, 4
    b = Bytes().u32(x, y, z, t).f64(1.0, 1.0, 1.0, 40.0)
    transforms(b, world=np.eye(4))
    b.f64s(np.eye(3)).f64s(np.eye(3))
    b.f64s(np.arange(x * y * z * t * 3))
    rec, dec = decode_bytes(decode_flowfield, b.data())
    assert dec.cursor.position == len(b.data())
    np.testing.assert_array_equal(rec.grid_size, [2, 1, 3, 4])
    np.testing.assert_array_equal(rec.world, np.eye(4))
    assert rec.vectors.shape == (2, 1, 3, 4, 3)
    np.testing.assert_array_equal(rec.vectors[0, 0, 0, 1], [3, 4, 5])
    text = R.render_flowfield(Report(), rec, depth=0).text()
    assert "- grid size: 2 x 1 x 3 x 4\n" in text
    assert "- vectors of voxel0: [0.00, 1.00, 2.00], [3.00, 4.00, 5.00], [6.00, 7.00, 8.00], ...\n" in text


def test_empty_flowfield():
    b = Bytes().u32(0, 0, 0, 0).f64(1.0, 1.0, 1.0, 1.0)
    transforms(b)
    b.f64s(np.zeros(18))
    rec, dec = decode_bytes(decode_flowfield, b.data())
    assert rec.vectors.shape == (0, 0, 0, 0, 3)
    assert "vectors of voxel" not in R.render_flowfield(Report(), rec, depth=0).text()


def test_flow_image_2dt():
    b = Bytes().u32(2, 2, 5).f64(1.0, 1.0, 30.0)
    transforms(b)
    b.f64s(np.arange(20))
    rec, dec = decode_bytes(decode_flow_image_2dt, b.data())
    assert dec.cursor.position == len(b.data())
    assert rec.velocities.shape == (2, 2, 5)
    np.testing.assert_array_equal(rec.velocities[0, 1], [5, 6, 7, 8, 9])


def test_flow_statistics_layout():
    assert len(FLOW_STATISTICS_LAYOUT) == 218
    assert sum(kind == "vector" for kind, _ in FLOW_STATISTICS_LAYOUT) == 17
    assert len({name for _, name in FLOW_STATISTICS_LAYOUT}) == 218


def test_flow_statistics():
    num_times = 3
    b = Bytes().u32(num_times)
    for i, (kind, _) in enumerate(FLOW_STATISTICS_LAYOUT):
        if kind == "vector":
            b.f64s(np.full(num_times, float(i)))
        else:
            b.f64(float(i))
    data = b.data()
    assert len(data) == 4 + 8 * (201 + 17 * num_times)
    rec, dec = decode_bytes(decode_flow_statistics, data)
    assert dec.cursor.position == len(data)
    assert rec.values["vortex pressure threshold"] == 0.0
    np.testing.assert_array_equal(rec.values["vortex volume in ml per time"], [12, 12, 12])
    text = R.render_flow_statistics(Report(), rec, depth=0).text()
    assert "- vortex volume in ml per time: 12.00, 12.00, 12.00\n" in text


def _flowfield_header_only(size: int) -> bytes:
    b = Bytes().u32(size, size, size, size).f64(1.0, 1.0, 1.0, 1.0)
    transforms(b)
    return b.f64s(np.zeros(18)).data()


def test_flowfield_oversized_grid_is_truncation():
    # 65536**4 * 3 does not fit in int64
    with pytest.raises(TruncatedStream) as info:
        decode_bytes(decode_flowfield, _flowfield_header_only(65536))
    assert info.value.available == 0
