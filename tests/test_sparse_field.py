import numpy as np
import pytest

from hemodump.errors import TruncatedStream
from hemodump.records import decode_section_segmentation, decode_sparse_field
from hemodump.render.records import render_sparse_field
from hemodump.render.report import Report

from builders import Bytes, decode_bytes, sparse_field

ENTRIES = [([1, 2], 3.5), ([0, 0], -1.25)]


def test_two_entry_field_decodes_in_file_order():
    data = sparse_field([4, 4], ENTRIES, scale=[1.0, 1.0]).data()
    # 4 + 8 + 16 + (16+16+25+25)*8 + 4 + 2*16
    assert len(data) == 720
    rec, dec = decode_bytes(decode_sparse_field, data)
    assert dec.cursor.position == len(data)
    assert rec.num_dims == 2
    np.testing.assert_array_equal(rec.grid_size, [4, 4])
    np.testing.assert_array_equal(rec.voxel_scale, [1.0, 1.0])
    assert rec.world.shape == (4, 4) and rec.world_time.shape == (5, 5)
    assert rec.num_non_zero == 2
    assert rec.entries == [((1, 2), 3.5), ((0, 0), -1.25)]


def test_two_entry_field_report_shows_both_without_ellipsis():
    rec, _ = decode_bytes(decode_sparse_field, sparse_field([4, 4], ENTRIES).data())
    text = render_sparse_field(Report(), rec, depth=0).text()
    lines = text.splitlines()
    assert lines[0] == "- num. dimensions: 2"
    assert lines[1] == "- grid size: 4 x 4"
    assert lines[2] == "- voxel scale: 1.00 x 1.00"
    assert "- num. non-zero values: 2" in lines
    assert lines[-2:] == ["\t- 0: [1, 2] = 3.50", "\t- 1: [0, 0] = -1.25"]
    assert "..." not in text
    assert render_sparse_field(Report(), rec, depth=0).text() == text


def test_long_field_is_truncated_in_report():
    entries = [([i, 0, 0], float(i)) for i in range(5)]
    rec, _ = decode_bytes(decode_sparse_field, sparse_field([8, 8, 8], entries).data())
    assert rec.indices.shape == (5, 3)
    lines = render_sparse_field(Report(), rec, depth=0).text().splitlines()
    assert lines[-1] == "\t- ..."
    assert lines[-2] == "\t- 2: [2, 0, 0] = 2.00"


def test_no_non_zero_values():
    data = sparse_field([3, 3, 3, 10], []).data()
    rec, dec = decode_bytes(decode_sparse_field, data)
    assert dec.cursor.position == len(data)
    assert rec.indices.shape == (0, 4)
    assert rec.values.shape == (0,)
    assert rec.entries == []
    text = render_sparse_field(Report(), rec, depth=0).text()
    assert text.endswith("- num. non-zero values: 0\n")


def test_truncated_entries_raise():
    data = sparse_field([4, 4], ENTRIES).data()[:-5]
    with pytest.raises(TruncatedStream):
        decode_bytes(decode_sparse_field, data)


def test_trailing_bytes_ignored():
    data = sparse_field([4, 4], ENTRIES).data() + b"\xff\xff"
    rec, dec = decode_bytes(decode_sparse_field, data)
    assert rec.num_non_zero == 2
    assert dec.cursor.position == len(data) - 2


def test_section_segmentation_has_independent_dims():
    b = Bytes().u32(2)
    sparse_field([4, 4], ENTRIES, b=b)
    sparse_field([2, 2, 2], [([1, 1, 1], 1.0)], b=b)
    rec, dec = decode_bytes(decode_section_segmentation, b.data())
    assert dec.cursor.position == len(b.data())
    assert [s.num_dims for s in rec.sections] == [2, 3]
    assert rec.sections[1].entries == [((1, 1, 1), 1.0)]
