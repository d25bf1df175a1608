"""
ND scalar image in sparse-matrix style.

      [1] x [uint32] : numDims
[numDims] x [uint32] : size per dimension
[numDims] x [double] : scale per dimension
     [16] x [double] : world matrix (4x4 from dicom)
     [16] x [double] : inverse world matrix
     [25] x [double] : world matrix (5x5 including time in 4th row/col)
     [25] x [double] : inverse world matrix with time
      [1] x [uint32] : numNonZero
      for numNonZero:
              [numDims] x [uint32] : grid position
                    [1] x [double] : value

Shared by pressure map, rotation direction, axial velocity, cos angle to
centerline, TKE, IVSD, magnitude TMIP, anatomical images, static tissue mask
and all segmentation images.
"""
from __future__ import annotations

from typing import List

from ..io.arrays import ArrayDecoder, F64, U32
from ..models import SectionSegmentation, SparseField


def read_transforms(dec: ArrayDecoder):
    """4x4 world, its inverse, 5x5 world with time, its inverse."""
    world = dec.read_matrix(F64, 4, 4, what="world matrix")
    inv_world = dec.read_matrix(F64, 4, 4, what="inverse world matrix")
    world_time = dec.read_matrix(F64, 5, 5, what="world matrix with time")
    inv_world_time = dec.read_matrix(F64, 5, 5, what="inverse world matrix with time")
    return world, inv_world, world_time, inv_world_time


def decode_sparse_field(dec: ArrayDecoder) -> SparseField:
    dec.read_dim("numDims")
    grid_size = dec.read_fixed_array(U32, "numDims", what="grid size")
    voxel_scale = dec.read_fixed_array(F64, "numDims", what="voxel scale")
    world, inv_world, world_time, inv_world_time = read_transforms(dec)
    dec.read_dim("numNonZero")
    indices, values = dec.read_indexed_sparse_list("numNonZero", "numDims", F64)
    return SparseField(
        num_dims=dec.shape.get("numDims"),
        grid_size=grid_size,
        voxel_scale=voxel_scale,
        world=world,
        inv_world=inv_world,
        world_time=world_time,
        inv_world_time=inv_world_time,
        indices=indices,
        values=values,
    )


def decode_section_segmentation(dec: ArrayDecoder) -> SectionSegmentation:
    """[1] x [uint32] numSections, then numSections sparse fields back to back."""
    n = dec.read_dim("numSections")
    sections: List[SparseField] = [decode_sparse_field(dec.scoped()) for _ in range(n)]
    return SectionSegmentation(sections=sections)


__all__ = ["decode_sparse_field", "decode_section_segmentation", "read_transforms"]
