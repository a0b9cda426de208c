"""Generation-checked handles into a slot list."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PointerRef:
    """A handle: slot index plus the generation it was issued with."""

    index: int = -1
    generation: int = 0


_EMPTY_REF = PointerRef(-1, 0)


class PointersList(Generic[T]):
    """Stores values in reusable slots addressed by generation-checked handles."""

    def __init__(self) -> None:
        self._values: List[Optional[T]] = []
        self._refs: List[PointerRef] = []
        self._free_indices: Deque[int] = deque()
        self._generation = 0

    def is_valid(self, ref: PointerRef) -> bool:
        if not 0 <= ref.index < len(self._values):
            return False
        return self._refs[ref.index].generation == ref.generation

    def reserve(self) -> PointerRef:
        """Claim a slot holding no value and return its handle."""
        self._generation += 1
        if not self._free_indices:
            ref = PointerRef(len(self._values), self._generation)
            self._values.append(None)
            self._refs.append(ref)
            return ref

        index = self._free_indices.popleft()
        ref = PointerRef(index, self._generation)
        self._values[index] = None
        self._refs[index] = ref
        return ref

    def set(self, ref: PointerRef, value: Optional[T]) -> None:
        if self.is_valid(ref):
            self._values[ref.index] = value

    def add(self, value: T) -> PointerRef:
        ref = self.reserve()
        self.set(ref, value)
        return ref

    def remove(self, ref: PointerRef) -> None:
        if not self.is_valid(ref):
            return
        self._values[ref.index] = None
        self._refs[ref.index] = _EMPTY_REF
        self._free_indices.append(ref.index)

    def get(self, ref: PointerRef) -> Optional[T]:
        if not self.is_valid(ref):
            return None
        return self._values[ref.index]