"""
Homogeneous and interleaved array reads sized by a ShapeContext.

Every length is given as a product of dimensions; each dimension is either a
literal int or the name of a count read earlier in the same decode pass.
Asking for a name that has not been read yet raises UnknownDimension before
any byte is consumed.
"""
from __future__ import annotations

from typing import BinaryIO, Tuple

import numpy as np

from .cursor import ByteCursor
from .shape import Dim, ShapeContext

U8 = np.dtype("<u1")
I8 = np.dtype("<i1")
U16 = np.dtype("<u2")
U32 = np.dtype("<u4")
F64 = np.dtype("<f8")

_COUNT_READERS = {1: "read_u8", 2: "read_u16", 4: "read_u32"}


class ArrayDecoder:
    """Cursor + shape bundle handed to every record decoder."""

    def __init__(self, cursor: ByteCursor, shape: ShapeContext | None = None):
        self.cursor = cursor
        self.shape = shape if shape is not None else ShapeContext()

    @classmethod
    def over(cls, stream: BinaryIO) -> "ArrayDecoder":
        return cls(ByteCursor(stream))

    def scoped(self) -> "ArrayDecoder":
        """Same stream position, fresh child scope for one repetition."""
        return ArrayDecoder(self.cursor, self.shape.child())

    # ---------- counts ----------

    def read_dim(self, name: str, width: int = 4) -> int:
        """Read an unsigned count of ``width`` bytes and define it as ``name``."""
        reader = getattr(self.cursor, _COUNT_READERS[width])
        return self.shape.define(name, reader(name))

    def read_dims(self, *names: str) -> np.ndarray:
        """Read one u32 per name (a grid size block) and define each; returns the block."""
        block = self.cursor.read_array(U32, len(names), what="grid size")
        for name, value in zip(names, block):
            self.shape.define(name, int(value))
        return block

    def count(self, *dims: Dim) -> int:
        return self.shape.product(*dims)

    # ---------- arrays ----------

    def read_fixed_array(self, dtype, *dims: Dim, what: str = "") -> np.ndarray:
        """``product(dims)`` contiguous primitives as a flat array."""
        n = self.count(*dims)
        return self.cursor.read_array(dtype, n, what)

    def read_matrix(self, dtype, rows: Dim, cols: Dim, what: str = "") -> np.ndarray:
        """Fixed array reinterpreted row-major as (rows, cols)."""
        r = self.shape.resolve(rows)
        c = self.shape.resolve(cols)
        return self.cursor.read_array(dtype, r * c, what).reshape(r, c)

    def read_shaped(self, dtype, *dims: Dim, what: str = "") -> np.ndarray:
        """Fixed array reshaped to the resolved dims (C order)."""
        shape = tuple(self.shape.resolve(d) for d in dims)
        # Python int product, exact for any u32 dims
        n = self.count(*shape)
        return self.cursor.read_array(dtype, n, what).reshape(shape)

    def read_records(self, dtype: np.dtype, *dims: Dim, what: str = "") -> np.ndarray:
        """Interleaved heterogeneous records described by a packed structured dtype."""
        n = self.count(*dims)
        return self.cursor.read_array(dtype, n, what)

    def read_indexed_sparse_list(
        self,
        num_entries: Dim,
        index_width: Dim,
        value_type=F64,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Read ``num_entries`` pairs of (index tuple of ``index_width`` u32, one value).

        Returns
        -------
        (indices, values) with shapes (n, index_width) uint32 and (n,).
        """
        width = self.shape.resolve(index_width)
        entry = sparse_entry_dtype(width, value_type)
        recs = self.read_records(entry, num_entries, what="sparse entries")
        indices = np.ascontiguousarray(recs["index"], dtype=U32).reshape(len(recs), width)
        values = np.ascontiguousarray(recs["value"])
        return indices, values


def sparse_entry_dtype(index_width: int, value_type=F64) -> np.dtype:
    return np.dtype([("index", U32, (int(index_width),)), ("value", np.dtype(value_type))])


__all__ = ["ArrayDecoder", "sparse_entry_dtype", "U8", "I8", "U16", "U32", "F64"]
