from __future__ import annotations

import numpy as np
import trimesh
from trimesh import Trimesh

from ..models import Mesh


def to_trimesh(mesh: Mesh) -> Trimesh:
    """Convert a decoded vessel Mesh -> trimesh.Trimesh without additional processing."""
    v = np.asarray(mesh.points, dtype=np.float64)
    f = np.asarray(mesh.triangles, dtype=np.int64).reshape(-1, 3)
    return trimesh.Trimesh(vertices=v, faces=f, process=False)


def save_stl(mesh: Mesh, path: str) -> None:
    """
    Save the vessel surface as STL (binary). Wall shear stress attributes are
    not part of the STL and are dropped.
    """
    if mesh.num_triangles == 0:
        raise ValueError("Mesh has no triangles; nothing to export.")
    to_trimesh(mesh).export(path, file_type="stl")


__all__ = ["to_trimesh", "save_stl"]
