"""PathTweenManager - owns, advances and recycles path tweens."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable

import numpy as np

from waypath import log
from waypath.config import TweenSettings
from waypath.errors import InvalidParametersError, InvalidTargetError, TweenNotFoundError
from waypath.path import PathType, PathwayType, as_waypoints
from waypath.tween.pool import TweenPool
from waypath.tween.tween import PathTween, TweenState

if TYPE_CHECKING:
    from waypath.kinematic import TweenTarget


class PathTweenManager:
    """
    Manages active path tweens.

    One manager is created by the host and passed to whoever needs to start
    or stop tweens; update() is called once per frame from the host loop.

    Usage:
        tweens = PathTweenManager()

        uid = tweens.move_by_points(
            transform, [(0, 0, 0), (10, 0, 0), (10, 10, 0)], 3.0,
            pathway_type=PathwayType.CURVE,
            on_complete=lambda: print("Done!"),
        )

        # In game loop
        tweens.update(dt)

        tweens.cancel(uid)
    """

    def __init__(self, settings: TweenSettings | None = None):
        self._settings = settings if settings is not None else TweenSettings()
        self._pool = TweenPool(self._settings.pool_capacity)
        self._tweens: list[PathTween] = []
        self._next_uid: int = 1

    @property
    def settings(self) -> TweenSettings:
        return self._settings

    @property
    def pool(self) -> TweenPool:
        return self._pool

    @property
    def count(self) -> int:
        """Number of active tweens."""
        return len(self._tweens)

    @property
    def tweens(self) -> tuple[PathTween, ...]:
        """Active tweens in registration order."""
        return tuple(self._tweens)

    # -- Creation --

    def create(
        self,
        target: "TweenTarget",
        points: Iterable,
        duration: float,
        pathway_type: PathwayType = PathwayType.LINE,
        is_loop: bool = False,
        on_complete: Callable[[], None] | None = None,
        update_forward: bool = False,
        path_type: PathType = PathType.NORMAL,
        segment: int | None = None,
    ) -> int:
        """
        Start moving target along points over duration seconds.

        The target is not touched until the next update().

        Returns:
            uid of the new tween.

        Raises:
            InvalidTargetError: target is None.
            InvalidParametersError: non-positive duration, empty or malformed
                waypoints, segment < 1 for a curve.
        """
        if target is None:
            raise InvalidTargetError("Path tween target must not be None")
        if not duration > 0:
            raise InvalidParametersError(f"Path tween duration must be positive, got {duration}")
        if segment is None:
            segment = self._settings.default_segment
        if pathway_type == PathwayType.CURVE and segment < 1:
            raise InvalidParametersError(f"Curve subdivision must be >= 1, got {segment}")
        waypoints = as_waypoints(points)

        uid = self._next_uid
        tween = self._pool.acquire()
        try:
            tween.init(
                uid,
                target,
                waypoints,
                duration,
                pathway_type=pathway_type,
                is_loop=is_loop,
                on_complete=on_complete,
                update_forward=update_forward,
                path_type=path_type,
                segment=int(segment),
                up_axis=self._settings.up_axis,
                forward_epsilon=self._settings.forward_epsilon,
            )
        except Exception:
            self._pool.release(tween)
            raise

        self._next_uid += 1
        self._tweens.append(tween.start())
        log.debug(
            f"[PathTweenManager] Created tween {uid} (slot {tween.slot}, "
            f"{len(waypoints)} points, {pathway_type.name}, loop={is_loop})"
        )
        return uid

    def move_by_points(
        self,
        target: "TweenTarget",
        points: Iterable,
        duration: float,
        pathway_type: PathwayType = PathwayType.LINE,
        is_loop: bool = False,
        on_complete: Callable[[], None] | None = None,
        update_forward: bool = False,
        path_type: PathType = PathType.NORMAL,
        segment: int | None = None,
    ) -> int:
        """Create a tween through a fixed list of positions."""
        return self.create(
            target, points, duration, pathway_type, is_loop,
            on_complete, update_forward, path_type, segment,
        )

    def move_by_transforms(
        self,
        target: "TweenTarget",
        transforms: Iterable["TweenTarget"],
        duration: float,
        pathway_type: PathwayType = PathwayType.LINE,
        is_loop: bool = False,
        on_complete: Callable[[], None] | None = None,
        update_forward: bool = False,
        path_type: PathType = PathType.NORMAL,
        segment: int | None = None,
    ) -> int:
        """
        Create a tween through the current positions of other transforms.

        Positions are sampled once here; later movement of the transforms
        does not affect the running tween.
        """
        if target is None:
            raise InvalidTargetError("Path tween target must not be None")
        points = []
        for transform in transforms:
            if transform is None:
                raise InvalidParametersError("Waypoint transform must not be None")
            points.append(np.array(transform.local_pose().lin, dtype=np.float64))
        return self.create(
            target, points, duration, pathway_type, is_loop,
            on_complete, update_forward, path_type, segment,
        )

    # -- Update --

    def update(self, dt: float) -> None:
        """
        Advance all active tweens by dt seconds.

        Completed tweens are removed and recycled before their completion
        callback runs. Callbacks may create or cancel tweens: the tick walks
        a snapshot and skips entries that were cancelled or recycled in the
        meantime; tweens created during the tick start on the next one.
        """
        snapshot = [(tween, tween.uid) for tween in self._tweens]
        for tween, uid in snapshot:
            if tween.uid != uid or tween.state != TweenState.RUNNING:
                continue
            if tween.update(dt):
                continue
            if tween.state == TweenState.COMPLETED:
                self._complete(tween)

    def tick(self, dt: float) -> None:
        """Alias for update()."""
        self.update(dt)

    def _complete(self, tween: PathTween) -> None:
        callback = tween.take_complete_callback()
        uid = tween.uid
        self._remove(tween)
        log.debug(f"[PathTweenManager] Tween {uid} completed")
        if callback is not None:
            callback()

    def _remove(self, tween: PathTween) -> None:
        self._tweens.remove(tween)
        self._pool.release(tween)

    # -- Lookup --

    def index_of(self, uid: int) -> int:
        """Index of the tween in the active list. Raises TweenNotFoundError."""
        for index, tween in enumerate(self._tweens):
            if tween.uid == uid:
                return index
        raise TweenNotFoundError(uid)

    def exists_by_id(self, uid: int) -> bool:
        try:
            self.index_of(uid)
        except TweenNotFoundError:
            return False
        return True

    def get(self, uid: int) -> PathTween:
        """Active tween with this uid. Raises TweenNotFoundError."""
        return self._tweens[self.index_of(uid)]

    # -- Cancellation --

    def cancel(self, uid: int) -> bool:
        """
        Stop and recycle a tween without calling its completion callback.

        Tweens are pooled, so a PathTween object may already carry a later
        run's uid; keep the uid returned by create() and cancel through it.

        Returns:
            False if no active tween has this uid (already completed,
            cancelled or never created).
        """
        try:
            index = self.index_of(uid)
        except TweenNotFoundError:
            log.warn(f"[PathTweenManager] Cannot cancel tween {uid}: not found")
            return False

        tween = self._tweens.pop(index)
        tween.kill()
        self._pool.release(tween)
        log.debug(f"[PathTweenManager] Cancelled tween {uid}")
        return True

    def cancel_all(self, target: "TweenTarget | None" = None) -> int:
        """
        Cancel all tweens, optionally filtered by target.

        Args:
            target: If provided, only cancel tweens driving this target.

        Returns:
            Number of cancelled tweens.
        """
        keep: list[PathTween] = []
        cancelled: list[PathTween] = []
        for tween in self._tweens:
            if target is None or tween.target is target:
                cancelled.append(tween)
            else:
                keep.append(tween)

        self._tweens = keep
        for tween in cancelled:
            tween.kill()
            self._pool.release(tween)
        return len(cancelled)

    def clear(self) -> None:
        """Remove all tweens without calling callbacks."""
        self.cancel_all()

    # -- Pause / resume --

    def pause(self, uid: int) -> None:
        """Pause a tween. Raises TweenNotFoundError."""
        self.get(uid).pause()

    def resume(self, uid: int) -> None:
        """Resume a paused tween. Raises TweenNotFoundError."""
        self.get(uid).resume()

    def pause_all(self, target: "TweenTarget | None" = None) -> int:
        """Pause all tweens, optionally filtered by target."""
        paused = 0
        for tween in self._tweens:
            if target is None or tween.target is target:
                if tween.state == TweenState.RUNNING:
                    tween.pause()
                    paused += 1
        return paused

    def resume_all(self, target: "TweenTarget | None" = None) -> int:
        """Resume all paused tweens, optionally filtered by target."""
        resumed = 0
        for tween in self._tweens:
            if target is None or tween.target is target:
                if tween.state == TweenState.PAUSED:
                    tween.resume()
                    resumed += 1
        return resumed
