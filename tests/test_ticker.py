import pytest

from gridpath.core.grid import Grid
from gridpath.core.ticker import TickOrchestrator, ToggleQueue
from gridpath.core.types import DONE, NO_PATH, CLEAR_ALL


def test_queue_is_fifo_and_drains_fully():
    q = ToggleQueue(capacity=8)
    for c in [(1, 1), (2, 2), (3, 3)]:
        assert q.push(c)
    assert len(q) == 3
    assert q.drain() == [(1, 1), (2, 2), (3, 3)]
    assert len(q) == 0
    assert q.drain() == []


def test_queue_refuses_when_full():
    q = ToggleQueue(capacity=2)
    assert q.push((1, 1))
    assert q.push((1, 2))
    assert not q.push((1, 3))
    assert q.drain() == [(1, 1), (1, 2)]
    assert q.push((1, 3))


def test_queue_capacity_must_be_positive():
    with pytest.raises(ValueError):
        ToggleQueue(capacity=0)


def test_tick_without_requests_still_publishes_path():
    frames = []
    orch = TickOrchestrator(Grid.square(10), publish=frames.append)
    frame = orch.tick()
    assert frames == [frame]
    assert frame.tick == 1
    assert frame.result.status == DONE
    assert len(frame.path) == 19
    assert frame.blocked == frozenset()
    assert frame.start == (0, 0) and frame.goal == (9, 9)
    assert frame.size == 10


def test_requests_applied_before_search_in_same_tick():
    orch = TickOrchestrator(Grid.square(10))
    orch.request_toggle((9, 8))
    orch.request_toggle((8, 9))
    frame = orch.tick()
    assert frame.is_blocked((9, 8)) and frame.is_blocked((8, 9))
    assert frame.result.status == NO_PATH
    assert frame.path is None

    # unblock one side: route comes back next tick
    orch.request_toggle((8, 9))
    frame = orch.tick()
    assert frame.result.status == DONE
    assert frame.path[-2] == (8, 9)


def test_request_during_publish_waits_for_next_tick():
    orch = None
    seen = []

    def publish(frame):
        seen.append(frame)
        if frame.tick == 1:
            orch.request_toggle((0, 1))

    orch = TickOrchestrator(Grid.square(5), publish=publish)
    first = orch.tick()
    assert not first.is_blocked((0, 1))
    assert first.path[1] == (0, 1)

    second = orch.tick()
    assert second.is_blocked((0, 1))
    assert second.path[1] == (1, 0)
    assert [f.tick for f in seen] == [1, 2]


def test_even_toggles_in_one_tick_leave_grid_unchanged():
    orch = TickOrchestrator(Grid.square(6))
    before = orch.tick()
    for _ in range(4):
        orch.request_toggle((2, 3))
    after = orch.tick()
    assert after.blocked == before.blocked
    assert after.path == before.path


def test_protected_and_out_of_range_requests_have_no_effect():
    orch = TickOrchestrator(Grid.square(6))
    for c in [(0, 0), (5, 5), (-1, 2), (6, 0)]:
        orch.request_toggle(c)
    frame = orch.tick()
    assert frame.blocked == frozenset()
    assert orch.handler.dropped == 4
    assert orch.handler.accepted == 0


def test_frame_snapshot_not_affected_by_later_ticks():
    orch = TickOrchestrator(Grid.square(6))
    orch.request_toggle((3, 3))
    first = orch.tick()
    orch.request_toggle((3, 3))
    second = orch.tick()
    assert first.blocked == frozenset({(3, 3)})
    assert second.blocked == frozenset()
    assert orch.frame is second
    assert orch.world.tick == 2


def test_overflowing_queue_drops_newest():
    orch = TickOrchestrator(Grid.square(6), capacity=1)
    assert orch.request_toggle((1, 1))
    assert not orch.request_toggle((2, 2))
    frame = orch.tick()
    assert frame.blocked == frozenset({(1, 1)})


def test_clear_replaces_pending_items_and_ignores_capacity():
    q = ToggleQueue(capacity=2)
    q.push((1, 1))
    q.push((1, 2))
    q.push_clear()
    assert q.drain() == [CLEAR_ALL]
    q.push_clear()
    q.push_clear()
    assert len(q) == 1


def test_clear_with_pending_click_in_same_tick():
    orch = TickOrchestrator(Grid.square(5))
    orch.request_toggle((2, 2))
    orch.tick()
    orch.request_toggle((2, 2))
    orch.request_clear()
    orch.request_toggle((3, 3))
    frame = orch.tick()
    assert frame.blocked == frozenset({(3, 3)})
