"""Tests for background-mode synchronization."""

import threading

import pytest

from copylist_view.core import (
    BackgroundTaskPool,
    FetchError,
    InMemoryRowContainer,
    MutationError,
    ViewSynchronizer,
)
from copylist_view.protocols import ViewConfig

from fakes import FakeListStore, rejected_mutation, unreachable_fetch


def drain(qapp, sync: ViewSynchronizer, rounds: int = 5):
    """Wait for in-flight tasks and deliver their queued results."""
    for _ in range(rounds):
        sync.tasks.wait_all(2000)
        qapp.processEvents()
        if sync.tasks.pending_count == 0:
            break


@pytest.fixture
def bg_sync(qapp, store):
    container = InMemoryRowContainer()
    synchronizer = ViewSynchronizer(store, container, ViewConfig(run_in_background=True))
    errors = []
    synchronizer.error_occurred.connect(errors.append)
    synchronizer.errors = errors
    synchronizer.container = container
    synchronizer.start()
    drain(qapp, synchronizer)
    yield synchronizer
    synchronizer.shutdown()


def test_task_pool_delivers_result_on_calling_thread(qapp):
    pool = BackgroundTaskPool()
    results = []
    threads = []

    def on_success(result):
        results.append(result)
        threads.append(threading.current_thread())

    pool.run(target=lambda: 42, on_success=on_success)
    pool.wait_all(2000)
    qapp.processEvents()

    assert results == [42]
    assert threads == [threading.main_thread()]


def test_initial_load_in_background(bg_sync):
    assert bg_sync.container.paths() == ["/data/a.txt", "/data/b.txt", "/data/c.txt"]


def test_overlapping_refreshes_converge(qapp, bg_sync, store):
    store.paths = ["/data/b.txt"]
    for _ in range(3):
        bg_sync.refresh()
    drain(qapp, bg_sync)

    assert bg_sync.container.paths() == ["/data/b.txt"]


def test_background_delete_then_refresh(qapp, bg_sync, store):
    bg_sync.delete_entry("/data/b.txt")
    drain(qapp, bg_sync)

    assert ("remove_from_copy_list", "/data/b.txt") in store.calls
    assert bg_sync.container.paths() == ["/data/a.txt", "/data/c.txt"]


def test_background_fetch_failure_keeps_rows(qapp, bg_sync, store):
    rendered = list(bg_sync.container.rows)
    store.fail_fetch = unreachable_fetch()

    bg_sync.refresh()
    drain(qapp, bg_sync)

    assert bg_sync.container.rows == rendered
    assert isinstance(bg_sync.errors[-1], FetchError)


def test_background_mutation_failure_reported(qapp, bg_sync, store):
    store.fail_mutation = rejected_mutation()

    bg_sync.clear_all()
    drain(qapp, bg_sync)

    assert isinstance(bg_sync.errors[-1], MutationError)
    assert bg_sync.container.paths() == ["/data/a.txt", "/data/b.txt", "/data/c.txt"]


def test_failure_delivered_after_shutdown_is_dropped(qapp, store):
    synchronizer = ViewSynchronizer(store, InMemoryRowContainer(), ViewConfig(run_in_background=True))
    errors = []
    synchronizer.error_occurred.connect(errors.append)
    synchronizer.start()
    drain(qapp, synchronizer)

    store.fail_fetch = unreachable_fetch()
    synchronizer.refresh()
    synchronizer.tasks.wait_all(2000)
    synchronizer.shutdown()
    qapp.processEvents()

    assert errors == []
