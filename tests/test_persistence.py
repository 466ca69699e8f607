import threading

import pytest

from neurofocus.core.config import MIN_TRACKED_READINGS
from neurofocus.detection.persistence import LowBetaPersistenceTracker


@pytest.fixture
def tracker(clock):
    return LowBetaPersistenceTracker(clock=clock)


def test_default_minimum_is_derived_from_config():
    assert MIN_TRACKED_READINGS == 1
    assert LowBetaPersistenceTracker().min_readings == MIN_TRACKED_READINGS


def test_low_readings_raise_warning(tracker, clock):
    assert tracker.update("alice", 0.1) is True
    for _ in range(5):
        clock.advance(2)
        assert tracker.update("alice", 0.2) is True


def test_high_readings_never_warn(tracker, clock):
    for _ in range(50):
        assert tracker.update("alice", 0.9) is False
        clock.advance(2)


def test_warning_waits_for_minimum_readings(clock):
    tracker = LowBetaPersistenceTracker(min_readings=3, clock=clock)
    assert tracker.update("alice", 0.0) is False
    assert tracker.update("alice", 0.0) is False
    assert tracker.update("alice", 0.0) is True


def test_alert_threshold_is_inclusive(tracker):
    for _ in range(4):
        tracker.update("alice", 0.1)
    # 4 of 5 low = 80%
    assert tracker.update("alice", 0.5) is True


def test_below_alert_threshold(tracker):
    for _ in range(3):
        tracker.update("alice", 0.1)
    # 3 of 4 low = 75%
    assert tracker.update("alice", 0.5) is False


def test_threshold_value_itself_is_not_low(tracker):
    assert tracker.update("alice", 0.34) is False


def test_old_readings_are_pruned(tracker, clock):
    for _ in range(10):
        tracker.update("alice", 0.1)
        clock.advance(1)

    clock.advance(400)
    assert tracker.update("alice", 0.8) is False
    assert tracker.reading_count("alice") == 1


def test_reading_on_window_edge_is_kept(tracker, clock):
    tracker.update("alice", 0.1)
    clock.advance(300)
    tracker.update("alice", 0.8)
    assert tracker.reading_count("alice") == 2

    clock.advance(0.5)
    tracker.update("alice", 0.8)
    assert tracker.reading_count("alice") == 2


def test_subjects_are_independent(tracker):
    tracker.update("alice", 0.1)
    assert tracker.update("bob", 0.9) is False
    assert tracker.update("alice", 0.1) is True
    assert tracker.reading_count("alice") == 2
    assert tracker.reading_count("bob") == 1


def test_clear_single_subject(tracker):
    tracker.update("alice", 0.1)
    tracker.update("bob", 0.1)
    tracker.clear("alice")
    assert tracker.reading_count("alice") == 0
    assert tracker.reading_count("bob") == 1


def test_clear_all_subjects(tracker):
    tracker.update("alice", 0.1)
    tracker.update("bob", 0.1)
    tracker.clear()
    assert tracker.reading_count("alice") == 0
    assert tracker.reading_count("bob") == 0


def test_concurrent_updates_are_not_lost(tracker):
    n_threads, n_updates = 8, 200

    def worker():
        for _ in range(n_updates):
            tracker.update("alice", 0.2)

    threads = [threading.Thread(target=worker) for _ in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert tracker.reading_count("alice") == n_threads * n_updates


def test_clear_releases_subject_locks(tracker):
    tracker.update("alice", 0.1)
    tracker.update("bob", 0.1)

    tracker.clear("alice")
    assert "alice" not in tracker._locks
    assert "bob" in tracker._locks

    tracker.clear()
    assert tracker._locks == {}


def test_reading_count_does_not_register_subject(tracker):
    assert tracker.reading_count("nobody") == 0
    assert "nobody" not in tracker._locks


def test_update_after_clear_starts_fresh(tracker):
    tracker.update("alice", 0.1)
    tracker.clear("alice")
    assert tracker.update("alice", 0.9) is False
    assert tracker.reading_count("alice") == 1
