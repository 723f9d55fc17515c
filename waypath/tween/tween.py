"""PathTween - one pooled motion of a target along waypoints."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Callable, TYPE_CHECKING

import numpy as np

from waypath.geombase import look_rotation
from waypath.path import PathSampler, PathType, PathwayType, path_style_progress

if TYPE_CHECKING:
    from waypath.kinematic import TweenTarget


class TweenState(Enum):
    """Tween lifecycle state."""

    CREATED = auto()
    RUNNING = auto()
    PAUSED = auto()
    COMPLETED = auto()
    KILLED = auto()
    RELEASED = auto()


class PathTween:
    """
    Moves a target along a waypoint path over a fixed duration.

    Instances live in a TweenPool slot and are reinitialized for every run;
    use the manager to create them. `uid` identifies the current run, `slot`
    the storage it occupies.
    """

    def __init__(self, slot: int):
        self.slot = slot
        self.uid: int = 0
        self.target: "TweenTarget | None" = None
        self.points: np.ndarray | None = None
        self.duration: float = 0.0
        self.pathway_type: PathwayType = PathwayType.LINE
        self.path_type: PathType = PathType.NORMAL
        self.segment: int = 1
        self.is_loop: bool = False
        self.update_forward: bool = False
        self.up_axis: np.ndarray = np.array([0.0, 0.0, 1.0])

        self._elapsed: float = 0.0
        self._sampler: PathSampler | None = None
        self._state: TweenState = TweenState.RELEASED
        self._on_complete: Callable[[], None] | None = None

    def init(
        self,
        uid: int,
        target: "TweenTarget",
        points: np.ndarray,
        duration: float,
        pathway_type: PathwayType = PathwayType.LINE,
        is_loop: bool = False,
        on_complete: Callable[[], None] | None = None,
        update_forward: bool = False,
        path_type: PathType = PathType.NORMAL,
        segment: int = 10,
        up_axis=(0.0, 0.0, 1.0),
        forward_epsilon: float = 1e-9,
    ) -> "PathTween":
        """Fill the slot for a new run. Builds the arc-length table."""
        span_segment = segment if pathway_type == PathwayType.CURVE else 1
        self._sampler = PathSampler(points, pathway_type, span_segment, forward_epsilon)

        self.uid = uid
        self.target = target
        self.points = points
        self.duration = float(duration)
        self.pathway_type = pathway_type
        self.path_type = path_type
        self.segment = span_segment
        self.is_loop = is_loop
        self.update_forward = update_forward
        self.up_axis = np.asarray(up_axis, dtype=np.float64)

        self._elapsed = 0.0
        self._state = TweenState.CREATED
        self._on_complete = on_complete
        return self

    def reset(self) -> None:
        """Drop every reference held for the previous run."""
        self.uid = 0
        self.target = None
        self.points = None
        self.duration = 0.0
        self.pathway_type = PathwayType.LINE
        self.path_type = PathType.NORMAL
        self.segment = 1
        self.is_loop = False
        self.update_forward = False

        self._elapsed = 0.0
        self._sampler = None
        self._state = TweenState.RELEASED
        self._on_complete = None

    # -- State --

    @property
    def state(self) -> TweenState:
        return self._state

    @property
    def is_alive(self) -> bool:
        """True if tween is running or paused."""
        return self._state in (TweenState.RUNNING, TweenState.PAUSED)

    @property
    def is_complete(self) -> bool:
        return self._state == TweenState.COMPLETED

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def progress(self) -> float:
        """Raw progress 0..1 of the current run."""
        if self.duration <= 0.0:
            return 0.0
        return min(1.0, self._elapsed / self.duration)

    # -- Path data, read-only for renderers --

    @property
    def samples(self) -> np.ndarray | None:
        return self._sampler.samples if self._sampler is not None else None

    @property
    def arc_length_table(self) -> np.ndarray | None:
        return self._sampler.table if self._sampler is not None else None

    @property
    def total_length(self) -> float:
        return self._sampler.total_length if self._sampler is not None else 0.0

    @property
    def cursor(self) -> int:
        return self._sampler.cursor if self._sampler is not None else 0

    @property
    def has_complete_callback(self) -> bool:
        return self._on_complete is not None

    # -- Control --

    def start(self) -> "PathTween":
        if self._state == TweenState.CREATED:
            self._state = TweenState.RUNNING
        return self

    def pause(self) -> "PathTween":
        """Pause the tween."""
        if self._state == TweenState.RUNNING:
            self._state = TweenState.PAUSED
        return self

    def resume(self) -> "PathTween":
        """Resume paused tween."""
        if self._state == TweenState.PAUSED:
            self._state = TweenState.RUNNING
        return self

    def kill(self) -> "PathTween":
        """Stop the tween without completing."""
        if self.is_alive or self._state == TweenState.CREATED:
            self._state = TweenState.KILLED
        return self

    def take_complete_callback(self) -> Callable[[], None] | None:
        """Hand the completion callback over and forget it, so it cannot fire twice."""
        callback = self._on_complete
        self._on_complete = None
        return callback

    def update(self, dt: float) -> bool:
        """
        Advance tween by dt seconds and relocate the target.

        Non-positive dt re-applies the current position without advancing.

        Returns:
            True if tween is still alive, False if completed or not running.
        """
        if self._state != TweenState.RUNNING:
            return self._state == TweenState.PAUSED

        if dt > 0.0:
            self._elapsed += dt

        finished = False
        if self.is_loop:
            if self._elapsed >= self.duration:
                self._elapsed = math.fmod(self._elapsed, self.duration)
        elif self._elapsed >= self.duration:
            self._elapsed = self.duration
            finished = True

        raw_t = 1.0 if finished else self._elapsed / self.duration
        self._apply(path_style_progress(self.path_type, raw_t))

        if finished:
            self._state = TweenState.COMPLETED
            return False
        return True

    def _apply(self, t: float) -> None:
        sample = self._sampler.sample(t)

        pose = self.target.local_pose()
        pose.lin = sample.position
        if self.update_forward and sample.forward is not None:
            pose.ang = look_rotation(sample.forward, self.up_axis)
        self.target.relocate(pose)

    def __repr__(self) -> str:
        return (
            f"PathTween(uid={self.uid}, slot={self.slot}, state={self._state.name}, "
            f"elapsed={self._elapsed:.3f}/{self.duration:.3f}, loop={self.is_loop})"
        )
