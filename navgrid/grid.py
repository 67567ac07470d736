from __future__ import annotations
import os
import json
import math
import logging
from typing import List, Optional

from pygame.math import Vector2

from .config import GRID_FILE, NODE_RADIUS, TILE_EMPTY, TILE_WALL
from .node import Node

logger = logging.getLogger(__name__)


class GridPlane:
    """Walkability grid loaded from an external file (default) or provided map."""

    def __init__(
        self,
        map_grid: Optional[List[List[int]]] = None,
        node_radius: float = NODE_RADIUS,
        origin=(0.0, 0.0),
    ) -> None:
        if map_grid is None:
            grid_path = os.path.join(os.path.dirname(__file__), GRID_FILE)
            map_grid, node_radius = _read_grid_file(grid_path)
        self.map = [list(row) for row in map_grid]
        self.grid_size_y = len(self.map)
        self.grid_size_x = len(self.map[0]) if self.grid_size_y > 0 else 0
        if self.grid_size_x == 0 or any(
            len(row) != self.grid_size_x for row in self.map
        ):
            raise ValueError("Grid map must be a non-empty rectangular list of rows")
        self.node_radius = float(node_radius)
        self.node_diameter = self.node_radius * 2
        self.origin = Vector2(origin)
        self.world_size = Vector2(
            self.grid_size_x * self.node_diameter,
            self.grid_size_y * self.node_diameter,
        )
        self.bottom_left = self.origin - self.world_size / 2
        self.nodes: List[List[Node]] = [
            [self._build_node(x, y) for x in range(self.grid_size_x)]
            for y in range(self.grid_size_y)
        ]

    @classmethod
    def load(cls, path: str, origin=(0.0, 0.0)) -> GridPlane:
        """Build a grid from a JSON file with 'map' and optional 'node_radius'."""
        map_grid, node_radius = _read_grid_file(path)
        return cls(map_grid, node_radius=node_radius, origin=origin)

    @property
    def max_size(self) -> int:
        """Total number of cells; bounds the size of the search open set."""
        return self.grid_size_x * self.grid_size_y

    def _build_node(self, x: int, y: int) -> Node:
        world_point = self.bottom_left + Vector2(
            x * self.node_diameter + self.node_radius,
            y * self.node_diameter + self.node_radius,
        )
        return Node(x, y, world_point, walkable=self.map[y][x] != TILE_WALL)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.grid_size_x and 0 <= y < self.grid_size_y

    def node_at(self, x: int, y: int) -> Node:
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside the grid")
        return self.nodes[y][x]

    def is_walkable(self, x: int, y: int) -> bool:
        """Return True if (x, y) is an open cell; out of bounds is never walkable."""
        if not self.in_bounds(x, y):
            return False
        return self.nodes[y][x].walkable

    def set_walkable(self, x: int, y: int, walkable: bool) -> None:
        """Open or block a single cell. Must not be called during a search."""
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside the grid")
        self.map[y][x] = TILE_EMPTY if walkable else TILE_WALL
        self.nodes[y][x] = self._build_node(x, y)

    def node_from_world_point(self, world_position) -> Node:
        """Return the cell containing world_position, clamped to the grid edge."""
        pos = Vector2(world_position)
        x = math.floor((pos.x - self.bottom_left.x) / self.node_diameter)
        y = math.floor((pos.y - self.bottom_left.y) / self.node_diameter)
        x = max(0, min(self.grid_size_x - 1, x))
        y = max(0, min(self.grid_size_y - 1, y))
        return self.nodes[y][x]

    def get_neighbours(self, node: Node) -> List[Node]:
        """Return the up to 8 in-bounds cells surrounding node."""
        neighbours = []
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx, ny = node.grid_x + dx, node.grid_y + dy
                if self.in_bounds(nx, ny):
                    neighbours.append(self.nodes[ny][nx])
        return neighbours


def _read_grid_file(path: str):
    try:
        with open(path, "r") as f:
            data = json.load(f)
        map_grid = data["map"]
        node_radius = float(data.get("node_radius", NODE_RADIUS))
        if not isinstance(map_grid, list) or not map_grid:
            raise ValueError("'map' must be a non-empty list of rows")
        width = len(map_grid[0])
        if width == 0 or any(
            not isinstance(row, list) or len(row) != width for row in map_grid
        ):
            raise ValueError("'map' rows must be non-empty and equally long")
    except Exception as e:
        raise RuntimeError(f"Failed to load grid from {path}: {e}")
    logger.info(
        "Loaded %dx%d grid from %s", width, len(map_grid), path
    )
    return map_grid, node_radius
