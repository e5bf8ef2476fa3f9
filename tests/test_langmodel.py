"""Tests for the construct-once language model handle."""

import threading
from pathlib import Path

import pytest

from prooftag.langmodel import LanguageModelHandle


class _CountingFactory:
    def __init__(self, fail_first: bool = False):
        self.calls = 0
        self.fail_first = fail_first
        self._lock = threading.Lock()

    def __call__(self, index_dir: Path):
        with self._lock:
            self.calls += 1
            if self.fail_first and self.calls == 1:
                raise OSError(f"no index in {index_dir}")
        return {"index_dir": index_dir}


def test_lazy_construction(tmp_path):
    factory = _CountingFactory()
    handle = LanguageModelHandle(factory, tmp_path)
    assert not handle.loaded
    assert factory.calls == 0

    model = handle.get()
    assert handle.loaded
    assert model == {"index_dir": tmp_path}
    assert handle.get() is model
    assert factory.calls == 1


def test_concurrent_first_requests_construct_once(tmp_path):
    factory = _CountingFactory()
    handle = LanguageModelHandle(factory, tmp_path)
    barrier = threading.Barrier(16)
    results = []

    def worker():
        barrier.wait()
        results.append(handle.get())

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert factory.calls == 1
    assert len(results) == 16
    assert all(r is results[0] for r in results)


def test_failed_construction_can_be_retried(tmp_path):
    factory = _CountingFactory(fail_first=True)
    handle = LanguageModelHandle(factory, tmp_path)
    with pytest.raises(OSError):
        handle.get()
    assert not handle.loaded
    assert handle.get() == {"index_dir": tmp_path}
    assert factory.calls == 2
