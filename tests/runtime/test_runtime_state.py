from __future__ import annotations

import threading

import pytest

from lib_log_fanout.runtime import LogRuntime, current_runtime, is_initialised, reset_runtime, set_runtime


def test_current_runtime_is_created_lazily_and_reused() -> None:
    assert is_initialised() is False
    first = current_runtime()
    assert is_initialised() is True
    assert current_runtime() is first


def test_set_runtime_installs_given_instance() -> None:
    runtime = LogRuntime(debug_enabled=True)
    set_runtime(runtime)
    assert current_runtime() is runtime
    assert current_runtime().is_debug_enabled() is True


def test_set_runtime_rejects_none() -> None:
    with pytest.raises(ValueError):
        set_runtime(None)  # type: ignore[arg-type]


def test_reset_runtime_drops_state() -> None:
    first = current_runtime()
    reset_runtime()
    assert current_runtime() is not first


def test_concurrent_first_access_yields_single_runtime() -> None:
    seen: list[LogRuntime] = []
    lock = threading.Lock()
    barrier = threading.Barrier(8)

    def grab() -> None:
        barrier.wait()
        runtime = current_runtime()
        with lock:
            seen.append(runtime)

    threads = [threading.Thread(target=grab) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert len(seen) == 8
    assert all(runtime is seen[0] for runtime in seen)
