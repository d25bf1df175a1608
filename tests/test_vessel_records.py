import io

import numpy as np
import pytest

from hemodump.errors import TruncatedStream, UnknownDimension
from hemodump.models import LandmarkSemantic
from hemodump.records import (
    decode_centerlines,
    decode_dataset_tags,
    decode_flow_jets,
    decode_graphcut_ids,
    decode_measuring_planes,
    decode_pathlines,
    decode_seed_targets,
    decode_text_lines,
)
from hemodump.records.planes import PLANE_FLOW_JET_STATISTICS, PLANE_PER_TIME, PLANE_STATISTICS
from hemodump.render import records as R
from hemodump.render.report import Report

from builders import Bytes, decode_bytes, measuring_plane


def test_centerlines_each_with_own_length():
    b = Bytes().u32(2)
    for n in (3, 1):
        b.u32(n).f64s(np.arange(n * 3)).f64s(np.full(n, 2.5)).f64s(np.tile(np.eye(3).ravel(), n))
    recs, dec = decode_bytes(decode_centerlines, b.data())
    assert dec.cursor.position == len(b.data())
    assert [len(c.points) for c in recs] == [3, 1]
    np.testing.assert_array_equal(recs[0].points[1], [3, 4, 5])
    np.testing.assert_array_equal(recs[1].frames[0], np.eye(3))
    text = R.render_centerlines(Report(), recs, depth=0).text()
    assert text.startswith("- num. centerlines: 2\n- centerline 0:\n\t- num. points: 3\n")
    assert "\t- radius: 2.50, 2.50, 2.50\n" in text


def test_seed_targets():
    data = Bytes().u32(17).u32(3).u32(4, 5, 6).data()
    rec, _ = decode_bytes(decode_seed_targets, data)
    assert rec.seed_id == 17
    np.testing.assert_array_equal(rec.target_ids, [4, 5, 6])
    text = R.render_seed_targets(Report(), rec, depth=0).text()
    assert "- target point ids: 4, 5, 6\n" in text


def test_pathlines():
    b = Bytes().u32(1).u32(2)
    b.f64s([[0, 0, 0, 0], [1, 0, 0, 40]])
    for i in range(5):
        b.f64s([float(i), float(i)])
    b.f64(1.0)
    recs, dec = decode_bytes(decode_pathlines, b.data())
    assert dec.cursor.position == len(b.data())
    pl = recs[0]
    assert pl.points.shape == (2, 4)
    np.testing.assert_array_equal(pl.relative_pressure, [0, 0])
    np.testing.assert_array_equal(pl.axial_velocity, [4, 4])
    assert pl.length == 1.0


def test_no_pathlines():
    recs, dec = decode_bytes(decode_pathlines, Bytes().u32(0).data())
    assert recs == []
    assert R.render_pathlines(Report(), recs, depth=0).text() == "- num. pathlines: 0\n"


def test_flow_jets_layout():
    num_points, num_times = 2, 3
    b = Bytes().u32(1).u32(num_points, num_times)
    for p in range(num_points):
        for t in range(num_times):
            b.f64(p, t, 0)            # peak position
            b.f64(10 * p + t)         # peak velocity
            b.f64(1, 1, 1).f64(1, 0, 0).f64(2.0).f64(0, 1, 0).f64(1.0)
        b.f64(p, p, p).f64(5.0).f64(1, 0, 0).f64(0, 1, 0)
    recs, dec = decode_bytes(decode_flow_jets, b.data())
    assert dec.cursor.position == len(b.data())
    jet = recs[0]
    assert jet.peak_positions.shape == (2, 3, 3)
    np.testing.assert_array_equal(jet.peak_velocities, [[0, 1, 2], [10, 11, 12]])
    np.testing.assert_array_equal(jet.area_radius0, np.full((2, 3), 2.0))
    np.testing.assert_array_equal(jet.vessel_centers[1], [1, 1, 1])
    np.testing.assert_array_equal(jet.vessel_radii, [5.0, 5.0])
    np.testing.assert_array_equal(jet.lcs_y[0], [0, 1, 0])


def test_measuring_planes_with_landmarks():
    b = Bytes().u32(1, 2)
    measuring_plane(b, vessel_id=3)
    b.u32(2)
    measuring_plane(b, gx=1, gy=3, nt=2, num_samples=0)
    b.u32(42)
    measuring_plane(b, nt=0)
    rec, dec = decode_bytes(decode_measuring_planes, b.data())
    assert dec.cursor.position == len(b.data())

    plane = rec.planes[0]
    assert plane.vessel_id == 3
    assert plane.flow_vectors.shape == (2, 2, 3, 3)
    assert plane.segmentation.shape == (2, 2)
    assert int(plane.segmentation.sum()) == 2
    assert plane.diameter == 25.0
    assert list(plane.statistics)[: len(PLANE_STATISTICS)] == list(PLANE_STATISTICS)
    assert plane.statistics["area mm2"] == 21.0
    assert plane.statistics[PLANE_FLOW_JET_STATISTICS[0]] == 100.0
    assert list(plane.per_time) == list(PLANE_PER_TIME)
    np.testing.assert_array_equal(plane.per_time["flow jet angle per time"], [4, 4, 4])
    assert plane.flow_jet_positions.shape == (3, 3)
    np.testing.assert_array_equal(plane.uncertainty_samples["cardiac output"], [4, 4])

    first, second = rec.landmarks
    assert first.semantic is LandmarkSemantic.Aorta_MidAscendingAorta
    assert first.plane.axial_velocity.shape == (1, 3, 2)
    assert second.semantic is LandmarkSemantic.NONE
    assert second.raw_semantic == 42
    assert second.plane.flow_vectors.shape == (2, 2, 0, 3)

    text = R.render_measuring_planes(Report(), rec, depth=0).text()
    assert "- land mark measuring plane 0: LandMarkSemantic_Aorta_MidAscendingAorta (2)\n" in text
    assert "- land mark measuring plane 1: None (42)\n" in text


@pytest.mark.parametrize("raw", [1, 5, 10])
def test_known_landmark_labels(raw):
    sem = LandmarkSemantic.from_raw(raw)
    assert int(sem) == raw
    assert sem.label.startswith("LandMarkSemantic_")


def test_truncated_plane():
    b = Bytes().u32(1, 0)
    measuring_plane(b)
    with pytest.raises(TruncatedStream):
        decode_bytes(decode_measuring_planes, b.data()[:-1])


def test_graphcut_ids():
    data = Bytes().u32(2, 0).u32(1, 2, 3, 4, 5, 6).data()
    rec, dec = decode_bytes(decode_graphcut_ids, data)
    assert dec.cursor.position == len(data)
    np.testing.assert_array_equal(rec.inside, [[1, 2, 3], [4, 5, 6]])
    assert rec.outside.shape == (0, 3)
    text = R.render_graphcut_ids(Report(), rec, depth=0).text()
    assert text.endswith("- no outside ids specified\n")


def test_dataset_tags_first_line_only():
    rec = decode_dataset_tags(io.StringIO("aorta;;bav;\nignored;line\n"))
    assert rec.tags == ["aorta", "bav"]


def test_text_lines_skip_empty():
    rec = decode_text_lines(io.StringIO("0 aorta\n\n1 arch\r\n"))
    assert rec.lines == ["0 aorta", "1 arch"]
    assert R.render_text_lines(Report(), rec, depth=1).text() == "\t- 0 aorta\n\t- 1 arch\n"


def test_dimension_order_violation_is_not_a_data_error():
    from hemodump.io.arrays import ArrayDecoder, F64

    def broken(dec: ArrayDecoder):
        return dec.read_fixed_array(F64, "numPoints")

    with pytest.raises(UnknownDimension):
        decode_bytes(broken, Bytes().u32(1).data())


@pytest.mark.parametrize("num_points,num_times", [(0xFFFFFFFF, 0xFFFFFFFF), (0xFFFFFFFF, 0), (1, 0xFFFFFFFF)])
def test_flow_jet_huge_header_is_truncation(num_points, num_times):
    data = Bytes().u32(1).u32(num_points, num_times).data()
    with pytest.raises(TruncatedStream):
        decode_bytes(decode_flow_jets, data)


def test_flow_jet_without_points():
    recs, _ = decode_bytes(decode_flow_jets, Bytes().u32(1).u32(0, 7).data())
    assert recs[0].peak_positions.shape == (0, 7, 3)
    assert recs[0].vessel_centers.shape == (0, 3)
