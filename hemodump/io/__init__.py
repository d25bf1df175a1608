from .cursor import ByteCursor
from .shape import ShapeContext
from .arrays import ArrayDecoder, sparse_entry_dtype
from .meshexport import to_trimesh, save_stl

__all__ = ["ByteCursor", "ShapeContext", "ArrayDecoder", "sparse_entry_dtype", "to_trimesh", "save_stl"]
