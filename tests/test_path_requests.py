import logging

import pytest

import navgrid.path_requests
from navgrid.grid import GridPlane
from navgrid.heap import HeapCapacityError
from navgrid.path_requests import PathRequestManager


def make_manager():
    return PathRequestManager(GridPlane([[0] * 5 for _ in range(5)]))


def test_request_is_deferred_until_update():
    manager = make_manager()
    results = []
    manager.request_path((-2, -2), (2, 2), lambda w, ok: results.append((w, ok)))
    assert manager.pending == 1
    assert results == []

    assert manager.update()
    assert manager.pending == 0
    assert len(results) == 1
    waypoints, success = results[0]
    assert success
    assert waypoints == [(2, 2)]


def test_update_with_empty_queue_does_nothing():
    manager = make_manager()
    assert not manager.update()


def test_requests_served_in_order_one_per_update():
    manager = make_manager()
    served = []
    manager.request_path((-2, -2), (2, -2), lambda w, ok: served.append("first"))
    manager.request_path((-2, -2), (-2, 2), lambda w, ok: served.append("second"))
    manager.update()
    assert served == ["first"]
    manager.update()
    assert served == ["first", "second"]


def test_failed_search_reports_through_callback():
    grid = GridPlane([[0, 1, 0]])
    manager = PathRequestManager(grid)
    results = []
    manager.request_path((-1, 0), (1, 0), lambda w, ok: results.append((w, ok)))
    manager.update()
    assert results == [([], False)]


def test_callback_may_queue_followup_request():
    manager = make_manager()
    calls = []

    def on_first(waypoints, success):
        assert manager.is_processing
        calls.append("first")
        manager.request_path((2, 2), (-2, -2), lambda w, ok: calls.append("second"))

    manager.request_path((-2, -2), (2, 2), on_first)
    manager.update()
    assert calls == ["first"]
    assert not manager.is_processing
    assert manager.pending == 1
    manager.update()
    assert calls == ["first", "second"]


def test_search_error_is_logged_and_propagated(monkeypatch, caplog):
    def exploding_compute_path(start, target, grid):
        raise HeapCapacityError("too small")

    monkeypatch.setattr(navgrid.path_requests, "compute_path", exploding_compute_path)
    manager = make_manager()
    manager.request_path((0, 0), (1, 1), lambda w, ok: None)
    with caplog.at_level(logging.ERROR, logger="navgrid.path_requests"):
        with pytest.raises(HeapCapacityError):
            manager.update()
    assert "Path request" in caplog.text
    # The queue keeps working afterwards
    assert not manager.is_processing
    assert manager.pending == 0
