"""
Grid cells and the per-search state attached to them.
"""

from __future__ import annotations
from typing import Optional

from pygame.math import Vector2


class Node:
    """
    A single grid cell.
    Attributes:
        grid_x, grid_y: Integer cell coordinates within the grid.
        world_position: Centre of the cell in world space.
        walkable: Whether agents may enter the cell.
    """

    def __init__(
        self, grid_x: int, grid_y: int, world_position, walkable: bool = True
    ) -> None:
        self.grid_x = int(grid_x)
        self.grid_y = int(grid_y)
        self.world_position = Vector2(world_position)
        self.walkable = bool(walkable)

    def __repr__(self):
        return (
            f"<Node ({self.grid_x}, {self.grid_y}) "
            f"walkable={self.walkable}>"
        )


class SearchNode:
    """Costs, parent link and heap slot of one cell during one search run."""

    def __init__(self, node: Node) -> None:
        self.node = node
        # Cost of the best known path from the start
        self.g_cost = 0
        # Octile estimate of the remaining cost to the target
        self.h_cost = 0
        self.parent: Optional[SearchNode] = None
        # -1 until the open-set heap assigns a slot
        self.heap_index = -1

    @property
    def f_cost(self) -> int:
        return self.g_cost + self.h_cost

    def __lt__(self, other: SearchNode) -> bool:
        # Lower total cost first; on ties prefer the node nearer the target
        if self.f_cost == other.f_cost:
            return self.h_cost < other.h_cost
        return self.f_cost < other.f_cost

    def __repr__(self):
        return (
            f"<SearchNode ({self.node.grid_x}, {self.node.grid_y}) "
            f"g={self.g_cost} h={self.h_cost}>"
        )
