"""TweenPool - arena of reusable PathTween slots."""

from __future__ import annotations

from waypath import log
from waypath.errors import InvalidParametersError
from waypath.tween.tween import PathTween


class TweenPool:
    """
    Fixed-index storage for PathTween instances.

    Slots are addressed by a small integer and recycled through a free list.
    The arena grows when acquire() finds the free list empty; it never
    shrinks.
    """

    def __init__(self, capacity: int = 0):
        self._slots: list[PathTween] = []
        self._in_use: list[bool] = []
        self._free: list[int] = []
        self.preallocate(capacity)

    def preallocate(self, capacity: int) -> None:
        """Grow the arena to at least `capacity` slots."""
        while len(self._slots) < capacity:
            slot = len(self._slots)
            self._slots.append(PathTween(slot))
            self._in_use.append(False)
            self._free.append(slot)
        # lowest slot index is handed out first
        self._free.sort(reverse=True)

    def acquire(self) -> PathTween:
        """Take a free slot, allocating one if none is left."""
        if self._free:
            slot = self._free.pop()
            self._in_use[slot] = True
            return self._slots[slot]

        tween = PathTween(len(self._slots))
        self._slots.append(tween)
        self._in_use.append(True)
        log.debug(f"[TweenPool] Grew to {len(self._slots)} slots")
        return tween

    def release(self, tween: PathTween) -> None:
        """Reset the slot and put it back on the free list."""
        slot = tween.slot
        if slot < 0 or slot >= len(self._slots) or self._slots[slot] is not tween:
            raise InvalidParametersError(f"Tween slot {slot} does not belong to this pool")
        if not self._in_use[slot]:
            log.error(f"[TweenPool] Slot {slot} released twice")
            raise InvalidParametersError(f"Tween slot {slot} is already released")

        tween.reset()
        self._in_use[slot] = False
        self._free.append(slot)

    def slot(self, index: int) -> PathTween:
        return self._slots[index]

    def in_use(self, index: int) -> bool:
        return self._in_use[index]

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def free_count(self) -> int:
        return len(self._free)

    @property
    def used_count(self) -> int:
        return len(self._slots) - len(self._free)
