import pytest

from navgrid.grid import GridPlane
from navgrid.path_requests import PathRequestManager
from navgrid.seeker import Seeker


class DummyManager:
    def __init__(self):
        self.calls = []

    def request_path(self, start, target, callback):
        self.calls.append((start, target, callback))


def test_seeker_repr():
    s = Seeker(1.2345, 2.3456)
    r = repr(s)
    # repr should include rounded position and waypoint progress
    assert 'x=1.23' in r and 'y=2.35' in r
    assert 'waypoint=0/0' in r


def test_request_path_delegation():
    s = Seeker(0, 1)
    manager = DummyManager()
    s.request_path(manager, (3, 4))
    assert len(manager.calls) == 1
    start, target, callback = manager.calls[0]
    assert start == (0.0, 1.0)
    assert target == (3, 4)
    assert callback == s.on_path_found


def test_follows_waypoints_at_speed():
    s = Seeker(0, 0, speed=1.0)
    s.on_path_found([(1, 0), (1, 1)], True)
    assert s.has_path
    s.update(0.5)
    assert s.x == pytest.approx(0.5) and s.y == pytest.approx(0.0)
    s.update(0.5)
    assert s.position() == pytest.approx((1.0, 0.0))
    assert s.target_index == 1
    s.update(1.0)
    assert s.position() == pytest.approx((1.0, 1.0))
    assert not s.has_path
    # Finished: further updates keep it in place
    s.update(1.0)
    assert s.position() == pytest.approx((1.0, 1.0))


def test_leftover_distance_carries_past_waypoint():
    s = Seeker(0, 0, speed=1.5)
    s.on_path_found([(1, 0), (1, 1)], True)
    s.update(1.0)
    assert s.position() == pytest.approx((1.0, 0.5))
    assert s.target_index == 1


def test_failed_path_clears_previous_path():
    s = Seeker(0, 0)
    s.on_path_found([(1, 0)], True)
    s.on_path_found([], False)
    assert not s.has_path
    assert s.path == []


def test_seeker_reaches_target_around_wall():
    grid = [[0] * 5 for _ in range(5)]
    for y in range(4):
        grid[y][2] = 1
    plane = GridPlane(grid)
    manager = PathRequestManager(plane)
    start = plane.node_at(0, 0).world_position
    target = plane.node_at(4, 4).world_position
    s = Seeker(start.x, start.y, speed=2.0)
    s.request_path(manager, target)
    assert manager.update()
    assert s.has_path
    assert s.path[-1] == target
    for _ in range(100):
        s.update(0.1)
    assert not s.has_path
    assert s.position() == pytest.approx((target.x, target.y))
