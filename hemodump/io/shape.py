from __future__ import annotations

from typing import Dict, Iterator, Optional, Union

from ..errors import UnknownDimension

Dim = Union[str, int]


class ShapeContext:
    """
    Dimension values read earlier in one decode pass.

    Names map to unsigned counts (``numDims``, ``numPoints``, ``numTimes`` ...).
    A repetition loop opens a child scope per iteration so that per-item counts
    never shadow each other; lookups fall back to the enclosing scope.
    """

    def __init__(self, parent: Optional["ShapeContext"] = None):
        self._dims: Dict[str, int] = {}
        self._parent = parent

    def define(self, name: str, value: int) -> int:
        if name in self._dims:
            raise ValueError(f"Dimension '{name}' already defined in this scope.")
        value = int(value)
        if value < 0:
            raise ValueError(f"Dimension '{name}' must be non-negative, got {value}.")
        self._dims[name] = value
        return value

    def get(self, name: str) -> int:
        scope: Optional[ShapeContext] = self
        while scope is not None:
            if name in scope._dims:
                return scope._dims[name]
            scope = scope._parent
        raise UnknownDimension(name)

    def resolve(self, dim: Dim) -> int:
        if isinstance(dim, str):
            return self.get(dim)
        return int(dim)

    def product(self, *dims: Dim) -> int:
        n = 1
        for d in dims:
            n *= self.resolve(d)
        return n

    def child(self) -> "ShapeContext":
        return ShapeContext(parent=self)

    def __contains__(self, name: str) -> bool:
        try:
            self.get(name)
        except UnknownDimension:
            return False
        return True

    def __iter__(self) -> Iterator[str]:
        return iter(self._dims)

    def items(self):
        return self._dims.items()

    def __repr__(self) -> str:
        return f"ShapeContext({self._dims!r})"


__all__ = ["ShapeContext", "Dim"]
