"""
Vessel mesh with wall shear stress (WSS) and oscillatory shear index (OSI).

                          [1] x [uint32] : numPoints
              [numPoints * 3] x [double] : points
              [numPoints * 3] x [double] : normals per point
                          [1] x [uint32] : numTriangles
           [numTriangles * 3] x [uint32] : triangles (point indices)
           [numTriangles * 3] x [double] : normals per triangle
                          [1] x [uint32] : numTimes
       [numPoints * numTimes] x [double] : WSS (total, axial, circumferential)
   [numPoints * numTimes * 3] x [double] : WSS vector (total, axial, circumferential)
                  [numPoints] x [double] : mean WSS (total, axial, circumferential)
                  [numPoints] x [double] : OSI (total, axial, circumferential)
              [numPoints * 3] x [double] : mean WSS vector (total, axial, circumferential)
"""
from __future__ import annotations

from typing import Dict

import numpy as np

from ..io.arrays import ArrayDecoder, F64, U32
from ..models import Mesh, WSS_COMPONENTS


def _per_component(dec: ArrayDecoder, what: str, *dims) -> Dict[str, np.ndarray]:
    return {c: dec.read_shaped(F64, *dims, what=f"{what} ({c})") for c in WSS_COMPONENTS}


def decode_mesh(dec: ArrayDecoder) -> Mesh:
    dec.read_dim("numPoints")
    points = dec.read_shaped(F64, "numPoints", 3, what="points")
    normals = dec.read_shaped(F64, "numPoints", 3, what="point normals")

    dec.read_dim("numTriangles")
    triangles = dec.read_shaped(U32, "numTriangles", 3, what="triangles")
    triangle_normals = dec.read_shaped(F64, "numTriangles", 3, what="triangle normals")

    num_times = dec.read_dim("numTimes")
    wss = _per_component(dec, "WSS", "numPoints", "numTimes")
    wss_vectors = _per_component(dec, "WSS vector", "numPoints", "numTimes", 3)
    mean_wss = _per_component(dec, "mean WSS", "numPoints")
    osi = _per_component(dec, "OSI", "numPoints")
    mean_wss_vectors = _per_component(dec, "mean WSS vector", "numPoints", 3)

    return Mesh(
        points=points,
        normals=normals,
        triangles=triangles,
        triangle_normals=triangle_normals,
        num_times=num_times,
        wss=wss,
        wss_vectors=wss_vectors,
        mean_wss=mean_wss,
        osi=osi,
        mean_wss_vectors=mean_wss_vectors,
    )


__all__ = ["decode_mesh"]
