import os

import pytest

from commitstat.core.errors import RepositoryError
from commitstat.core.handles import RepositoryHandleCache, normalize_path


def test_normalize_path_uses_forward_slashes(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert normalize_path("work\\repo") == normalize_path("work/repo")
    assert normalize_path("work/repo") == str(tmp_path / "work" / "repo").replace(os.sep, "/")


def test_normalize_path_collapses_dots(tmp_path):
    assert normalize_path(f"{tmp_path}/a/../b/.") == normalize_path(tmp_path / "b")


def test_get_handle_is_cached_across_separator_styles(history_repo, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    cache = RepositoryHandleCache()

    first = cache.get_handle("work\\repo")
    second = cache.get_handle(history_repo.path)

    assert first is second
    assert len(cache) == 1
    cache.reset_all()


def test_reset_all_recreates_handles(history_repo):
    cache = RepositoryHandleCache()
    before = cache.get_handle(history_repo.path)

    cache.reset_all()

    assert len(cache) == 0
    assert history_repo.path not in cache
    after = cache.get_handle(history_repo.path)
    assert after is not before
    cache.reset_all()


def test_not_a_repository(tmp_path):
    plain = tmp_path / "plain"
    plain.mkdir()
    cache = RepositoryHandleCache()

    with pytest.raises(RepositoryError):
        cache.get_handle(str(plain))
    assert len(cache) == 0


def test_missing_path(tmp_path):
    cache = RepositoryHandleCache()

    with pytest.raises(RepositoryError):
        cache.get_handle(str(tmp_path / "missing"))
