"""
Pathfinding: grid-based A* search, path retracing and waypoint simplification.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Dict, List, NamedTuple, Optional, Set

from pygame.math import Vector2

from .config import DIAGONAL_COST, STRAIGHT_COST
from .heap import IndexedMinHeap
from .node import Node, SearchNode

if TYPE_CHECKING:
    from .grid import GridPlane

logger = logging.getLogger(__name__)


class SearchResult(NamedTuple):
    success: bool
    # Cells from start to target inclusive; empty on failure
    path: List[Node]
    # g cost of the target when it was reached; None on failure
    cost: Optional[int]


class PathResult(NamedTuple):
    success: bool
    waypoints: List[Vector2]


def get_distance(node_a: Node, node_b: Node) -> int:
    """
    Octile distance between two cells in fixed-point movement cost.
    Serves both as the step cost between neighbours and as the A* heuristic.
    """
    dist_x = abs(node_a.grid_x - node_b.grid_x)
    dist_y = abs(node_a.grid_y - node_b.grid_y)
    if dist_x > dist_y:
        return DIAGONAL_COST * dist_y + STRAIGHT_COST * (dist_x - dist_y)
    return DIAGONAL_COST * dist_x + STRAIGHT_COST * (dist_y - dist_x)


def find_path(start_node: Node, target_node: Node, grid: GridPlane) -> SearchResult:
    """
    Find the cheapest walkable path from start_node to target_node using A*.
    grid: object with get_neighbours(node) and max_size.
    Returns SearchResult(success, path, cost); a blocked endpoint or an
    unreachable target gives SearchResult(False, [], None).
    """
    if not (start_node.walkable and target_node.walkable):
        logger.debug(
            "Rejected search %r -> %r: endpoint not walkable",
            start_node,
            target_node,
        )
        return SearchResult(False, [], None)

    # Per-run costs and parents; cells themselves are never touched
    states: Dict[Node, SearchNode] = {}
    start = states[start_node] = SearchNode(start_node)
    start.h_cost = get_distance(start_node, target_node)

    open_set: IndexedMinHeap[SearchNode] = IndexedMinHeap(grid.max_size)
    closed_set: Set[Node] = set()
    open_set.add(start)

    while open_set:
        current = open_set.remove_first()
        closed_set.add(current.node)

        if current.node is target_node:
            path = retrace_path(start, current)
            logger.debug(
                "Found path %r -> %r: cost=%d cells=%d expanded=%d",
                start_node,
                target_node,
                current.g_cost,
                len(path),
                len(closed_set),
            )
            return SearchResult(True, path, current.g_cost)

        for neighbour in grid.get_neighbours(current.node):
            if not neighbour.walkable or neighbour in closed_set:
                continue

            state = states.get(neighbour)
            if state is None:
                state = states[neighbour] = SearchNode(neighbour)

            new_cost = current.g_cost + get_distance(current.node, neighbour)
            in_open = state in open_set
            if new_cost < state.g_cost or not in_open:
                state.g_cost = new_cost
                state.h_cost = get_distance(neighbour, target_node)
                state.parent = current
                if in_open:
                    open_set.update_item(state)
                else:
                    open_set.add(state)

    logger.debug(
        "No path %r -> %r after expanding %d cells",
        start_node,
        target_node,
        len(closed_set),
    )
    return SearchResult(False, [], None)


def retrace_path(start: SearchNode, end: SearchNode) -> List[Node]:
    """Follow parent links from end back to start; returns cells start -> end."""
    path = []
    current = end
    while current is not start:
        path.append(current.node)
        current = current.parent
    path.append(start.node)
    path.reverse()
    return path


def _direction(a: Node, b: Node):
    dx = b.grid_x - a.grid_x
    dy = b.grid_y - a.grid_y
    return ((dx > 0) - (dx < 0), (dy > 0) - (dy < 0))


def simplify_path(path: List[Node]) -> List[Node]:
    """
    Keep only the cells where the direction of travel changes.
    path runs start -> target; each straight run collapses to its last cell,
    the target is always kept and the start never is.
    """
    waypoints = []
    direction_old = (0, 0)
    # Walk target -> start so every run is first seen at its far end
    for i in range(len(path) - 1, 0, -1):
        direction_new = _direction(path[i - 1], path[i])
        if direction_new != direction_old:
            waypoints.append(path[i])
        direction_old = direction_new
    waypoints.reverse()
    return waypoints


def compute_path(start_pos, target_pos, grid: GridPlane) -> PathResult:
    """
    Compute simplified waypoints between two world positions.
    Returns PathResult(success, waypoints) with waypoints as world positions;
    waypoints is empty when no path exists.
    """
    start_node = grid.node_from_world_point(start_pos)
    target_node = grid.node_from_world_point(target_pos)
    result = find_path(start_node, target_node, grid)
    if not result.success:
        return PathResult(False, [])
    waypoints = [
        Vector2(node.world_position) for node in simplify_path(result.path)
    ]
    return PathResult(True, waypoints)
