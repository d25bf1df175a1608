from __future__ import annotations

from ..io.arrays import ArrayDecoder, U32
from ..models import GraphcutIds


def decode_graphcut_ids(dec: ArrayDecoder) -> GraphcutIds:
    """
    [1] x [uint32]              : numInsideIds
    [1] x [uint32]              : numOutsideIds
    [numInsideIds * 3] x [uint32]  : inside grid positions (xyz)
    [numOutsideIds * 3] x [uint32] : outside grid positions (xyz)
    """
    dec.read_dim("numInsideIds")
    dec.read_dim("numOutsideIds")
    inside = dec.read_shaped(U32, "numInsideIds", 3, what="inside ids")
    outside = dec.read_shaped(U32, "numOutsideIds", 3, what="outside ids")
    return GraphcutIds(inside=inside, outside=outside)


__all__ = ["decode_graphcut_ids"]
