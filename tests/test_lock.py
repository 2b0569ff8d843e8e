# tests/test_lock.py

from __future__ import annotations

import pytest

from arenta.lock import LockError, acquire_lock, release_lock


def test_second_acquire_fails(tmp_path):
    lock_path = tmp_path / "arenta.lock"

    acquire_lock(lock_path)

    with pytest.raises(LockError, match="acquired by another process"):
        acquire_lock(lock_path)


def test_release_allows_reacquire(tmp_path):
    lock_path = tmp_path / "arenta.lock"

    acquire_lock(lock_path)
    release_lock(lock_path)

    assert not lock_path.exists()
    acquire_lock(lock_path)
    assert lock_path.exists()


def test_release_without_lock_is_harmless(tmp_path):
    release_lock(tmp_path / "arenta.lock")
