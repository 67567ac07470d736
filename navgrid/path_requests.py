"""
Path request queue: defers searches to the caller's update loop.
"""

from __future__ import annotations
import logging
from collections import deque
from typing import TYPE_CHECKING, Callable, Deque, List, NamedTuple

from pygame.math import Vector2

from .pathfinding import compute_path

if TYPE_CHECKING:
    from .grid import GridPlane

logger = logging.getLogger(__name__)

PathCallback = Callable[[List[Vector2], bool], None]


class PathRequest(NamedTuple):
    start: Vector2
    target: Vector2
    callback: PathCallback


class PathRequestManager:
    """
    FIFO of path requests served one per update() call.
    Callers get their result through callback(waypoints, success) instead of
    a return value, so a frame loop can spread searches over several ticks.
    """

    def __init__(self, grid: GridPlane) -> None:
        self.grid = grid
        self._queue: Deque[PathRequest] = deque()
        self.is_processing = False

    @property
    def pending(self) -> int:
        return len(self._queue)

    def request_path(self, start, target, callback: PathCallback) -> None:
        """Queue a search from start to target (world positions)."""
        self._queue.append(
            PathRequest(Vector2(start), Vector2(target), callback)
        )

    def update(self) -> bool:
        """Serve the oldest queued request. Returns True if one was processed."""
        if self.is_processing or not self._queue:
            return False
        request = self._queue.popleft()
        try:
            success, waypoints = compute_path(
                request.start, request.target, self.grid
            )
        except Exception:
            logger.exception(
                "Path request %s -> %s failed", request.start, request.target
            )
            raise
        self.is_processing = True
        try:
            request.callback(waypoints, success)
        finally:
            self.is_processing = False
        return True
