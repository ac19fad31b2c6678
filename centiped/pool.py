"""A recycling pool for game objects that are reused rather than rebuilt."""

from __future__ import annotations

from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")


class Pool(Generic[T]):
    """Keeps released objects on a stack and hands them out again before making new ones.

    ``create`` builds a fresh object when nothing is recycled; ``on_reuse``, when
    given, is called with an object taken back out of the pool (the game uses it
    to register the object with the current scene again).
    """

    def __init__(
        self,
        create: Callable[[], T],
        on_reuse: Optional[Callable[[T], None]] = None,
    ) -> None:
        self._create = create
        self._on_reuse = on_reuse
        self._recycled: List[T] = []
        self._current: Optional[T] = None

    def acquire(self) -> T:
        """Return a recycled object if there is one, otherwise a new one."""
        if self._recycled:
            item = self._recycled.pop()
            if self._on_reuse is not None:
                self._on_reuse(item)
        else:
            item = self._create()
        self._current = item
        return item

    def release(self, item: T) -> None:
        """Put an object back so that the next ``acquire`` can reuse it."""
        self._recycled.append(item)

    @property
    def current(self) -> T:
        """The object handed out most recently."""
        if self._current is None:
            raise LookupError("nothing has been acquired from this pool yet")
        return self._current

    def __len__(self) -> int:
        return len(self._recycled)