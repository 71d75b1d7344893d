# model/variables.py

"""
Injective mapping between variable names and 1-based indices.
"""

from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from expression.exceptions import UnknownVariableError


class VariableMap:
    """
    Names keep their declaration order; index ``i`` belongs to the i-th name.
    """

    __slots__ = ("_names", "_indices")

    def __init__(self, names: Iterable[str] = ()):
        self._names: List[str] = []
        self._indices: Dict[str, int] = {}
        for name in names:
            self.add(name)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> VariableMap:
        return cls(names)

    def add(self, name: str) -> int:
        """
        Register a name, returning its index. Known names keep their index.
        """
        index = self._indices.get(name)
        if index is None:
            self._names.append(name)
            index = len(self._names)
            self._indices[name] = index
        return index

    def get_index(self, name: str) -> Optional[int]:
        return self._indices.get(name)

    def index_of(self, name: str) -> int:
        """
        Like get_index, but a missing name is an error.
        """
        index = self._indices.get(name)
        if index is None:
            raise UnknownVariableError(name)
        return index

    def get_name(self, literal: int) -> str:
        return self._names[abs(literal) - 1]

    def literal(self, name: str, positive: bool = True) -> int:
        index = self.index_of(name)
        return index if positive else -index

    def literals(self, names: Optional[Iterable[str]] = None) -> List[Tuple[int, int]]:
        """
        ``(positive, negative)`` literal pairs for the given names (all names
        if None), in index order. Unknown names are skipped.
        """
        if names is None:
            indices = range(1, len(self._names) + 1)
        else:
            indices = sorted({self._indices[n] for n in names if n in self._indices})
        return [(index, -index) for index in indices]

    @property
    def names(self) -> List[str]:
        return list(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._indices

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VariableMap):
            return NotImplemented
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(tuple(self._names))

    def __repr__(self) -> str:
        return f"VariableMap({self._names!r})"
