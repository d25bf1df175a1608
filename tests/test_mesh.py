import numpy as np
import pytest
import trimesh

from hemodump.errors import TruncatedStream
from hemodump.io.meshexport import save_stl, to_trimesh
from hemodump.models import WSS_COMPONENTS
from hemodump.records import decode_mesh
from hemodump.render.records import render_mesh
from hemodump.render.report import Report

from builders import decode_bytes, mesh

TETRA_POINTS = [[0, 0, 0], [1, 0, 0], [0, 1, 0], [0, 0, 1]]
TETRA_FACES = [[0, 2, 1], [0, 1, 3], [0, 3, 2], [1, 2, 3]]


def test_empty_mesh_with_times():
    data = mesh(np.zeros((0, 3)), np.zeros((0, 3)), num_times=20).data()
    assert len(data) == 12
    rec, dec = decode_bytes(decode_mesh, data)
    assert dec.cursor.position == 12
    assert rec.num_points == 0 and rec.num_triangles == 0
    assert rec.num_times == 20
    for c in WSS_COMPONENTS:
        assert rec.wss[c].shape == (0, 20)
        assert rec.wss_vectors[c].shape == (0, 20, 3)
        assert rec.mean_wss[c].size == 0
        assert rec.osi[c].size == 0
        assert rec.mean_wss_vectors[c].shape == (0, 3)
    text = render_mesh(Report(), rec, depth=0).text()
    assert "- num. points: 0\n" in text
    assert "..." not in text


def test_tetrahedron_mesh():
    data = mesh(TETRA_POINTS, TETRA_FACES, num_times=5).data()
    rec, dec = decode_bytes(decode_mesh, data)
    assert dec.cursor.position == len(data)
    np.testing.assert_array_equal(rec.points, TETRA_POINTS)
    np.testing.assert_array_equal(rec.triangles, TETRA_FACES)
    assert rec.triangles.dtype == np.uint32
    assert rec.wss["axial"].shape == (4, 5)
    assert rec.wss_vectors["circumferential"].shape == (4, 5, 3)
    np.testing.assert_allclose(rec.osi["total"], 0.5)

    lines = render_mesh(Report(), rec, depth=0).text().splitlines()
    assert lines[0] == "- num. points: 4"
    assert lines[1] == "\t- point0: [0.00, 0.00, 0.00]"
    assert lines[4] == "\t- ..."
    assert "- num. triangles: 4" in lines
    assert "\t- triangle0: [0, 2, 1]" in lines
    assert "\t- point0: 0.50, 0.50, 0.50, ..." in lines


def test_truncated_mesh():
    data = mesh(TETRA_POINTS, TETRA_FACES, num_times=5).data()
    with pytest.raises(TruncatedStream):
        decode_bytes(decode_mesh, data[:100])


def test_trimesh_export(tmp_path):
    rec, _ = decode_bytes(decode_mesh, mesh(TETRA_POINTS, TETRA_FACES, num_times=1).data())
    tm = to_trimesh(rec)
    assert tm.vertices.shape == (4, 3)
    assert tm.faces.shape == (4, 3)
    target = tmp_path / "vessel.stl"
    save_stl(rec, str(target))
    loaded = trimesh.load(str(target), force="mesh")
    assert len(loaded.faces) == 4


def test_export_without_triangles_rejected(tmp_path):
    rec, _ = decode_bytes(decode_mesh, mesh(np.zeros((0, 3)), np.zeros((0, 3)), num_times=0).data())
    with pytest.raises(ValueError):
        save_stl(rec, str(tmp_path / "empty.stl"))
