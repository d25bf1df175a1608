"""
Velocity images.

flowfield (3D+T):
                                [4] x [uint32] : size x y z t
                                [4] x [double] : scale x y z t
                               [16] x [double] : world matrix, then its inverse
                               [25] x [double] : world matrix with time, then its inverse
                                [9] x [double] : rotational part of world matrix (3x3)
                                [9] x [double] : inverse rotational part
[sizeX * sizeY * sizeZ * sizeT * 3] x [double] : flow vectors (world space, venc-scaled)

flowfield_2dt* (2D+T):
                    [3] x [uint32] : size x y t
                    [3] x [double] : scale x y t
              [16]/[25] x [double] : transforms as above
[sizeX * sizeY * sizeT] x [double] : velocities
"""
from __future__ import annotations

from ..io.arrays import ArrayDecoder, F64
from ..models import FlowField, FlowImage2DT
from .sparse import read_transforms


def decode_flowfield(dec: ArrayDecoder) -> FlowField:
    grid_size = dec.read_dims("sizeX", "sizeY", "sizeZ", "sizeT")
    voxel_scale = dec.read_fixed_array(F64, 4, what="voxel scale")
    world, inv_world, world_time, inv_world_time = read_transforms(dec)
    rotation = dec.read_matrix(F64, 3, 3, what="rotational part of world matrix")
    inv_rotation = dec.read_matrix(F64, 3, 3, what="inverse rotational part of world matrix")
    vectors = dec.read_shaped(F64, "sizeX", "sizeY", "sizeZ", "sizeT", 3, what="flow vectors")
    return FlowField(
        grid_size=grid_size,
        voxel_scale=voxel_scale,
        world=world,
        inv_world=inv_world,
        world_time=world_time,
        inv_world_time=inv_world_time,
        rotation=rotation,
        inv_rotation=inv_rotation,
        vectors=vectors,
    )


def decode_flow_image_2dt(dec: ArrayDecoder) -> FlowImage2DT:
    grid_size = dec.read_dims("sizeX", "sizeY", "sizeT")
    voxel_scale = dec.read_fixed_array(F64, 3, what="voxel scale")
    world, inv_world, world_time, inv_world_time = read_transforms(dec)
    velocities = dec.read_shaped(F64, "sizeX", "sizeY", "sizeT", what="velocities")
    return FlowImage2DT(
        grid_size=grid_size,
        voxel_scale=voxel_scale,
        world=world,
        inv_world=inv_world,
        world_time=world_time,
        inv_world_time=inv_world_time,
        velocities=velocities,
    )


__all__ = ["decode_flowfield", "decode_flow_image_2dt"]
