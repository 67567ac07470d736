"""
Seeker module: an agent that requests a path and walks its waypoints.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Tuple

from pygame.math import Vector2

from .config import SEEKER_SPEED, WAYPOINT_REACHED_DISTANCE

if TYPE_CHECKING:
    from .path_requests import PathRequestManager


class Seeker:
    """Moves towards a target along waypoints delivered by a PathRequestManager."""

    def __init__(self, x: float, y: float, speed: float = SEEKER_SPEED) -> None:
        # Position in world coordinates
        self.x = float(x)
        self.y = float(y)
        # Movement speed in world units per second
        self.speed = float(speed)
        self.path: List[Vector2] = []
        # Index of the waypoint currently being walked towards
        self.target_index = 0

    def __repr__(self):
        return (
            f"<Seeker x={self.x:.2f} y={self.y:.2f} "
            f"waypoint={self.target_index}/{len(self.path)}>"
        )

    @property
    def has_path(self) -> bool:
        """True while there are waypoints left to walk."""
        return self.target_index < len(self.path)

    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def request_path(self, manager: PathRequestManager, target) -> None:
        """Ask manager for a path from the current position to target."""
        manager.request_path(self.position(), target, self.on_path_found)

    def on_path_found(self, waypoints: List[Vector2], success: bool) -> None:
        if success:
            self.path = [Vector2(w) for w in waypoints]
        else:
            self.path = []
        self.target_index = 0

    def update(self, dt: float) -> None:
        """Advance along the path by speed * dt, carrying leftover distance over."""
        budget = self.speed * dt
        while budget > 0 and self.has_path:
            current = Vector2(self.x, self.y)
            waypoint = self.path[self.target_index]
            offset = waypoint - current
            distance = offset.length()
            if distance <= budget or distance <= WAYPOINT_REACHED_DISTANCE:
                self.x, self.y = waypoint.x, waypoint.y
                self.target_index += 1
                budget -= distance
            else:
                step = offset * (budget / distance)
                self.x += step.x
                self.y += step.y
                budget = 0
