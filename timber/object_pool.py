"""A pool of reusable game objects."""

from __future__ import annotations

from collections import deque
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class ObjectPool(Generic[T]):
    """Hands out pre-initialised objects and takes them back for reuse."""

    def __init__(self, factory: Callable[[], T], init_size: int = 10) -> None:
        self._factory = factory
        self._unused: deque[T] = deque()
        self._used: dict[int, T] = {}
        for _ in range(init_size):
            obj = factory()
            obj.init()
            self._unused.append(obj)

    def take(self) -> T:
        """Return an active, freshly reset object."""
        if self._unused:
            obj = self._unused.popleft()
            obj.active = True
        else:
            obj = self._factory()
            obj.init()
        obj.reset()
        self._used[id(obj)] = obj
        return obj

    def release(self, obj: T) -> None:
        """Give an object back; it is deactivated until taken again."""
        if self._used.get(id(obj)) is not obj:
            raise ValueError("object was not taken from this pool")
        del self._used[id(obj)]
        obj.active = False
        self._unused.append(obj)