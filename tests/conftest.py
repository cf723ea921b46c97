import os
from pathlib import Path

import pytest

from hookstage import paths


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """A fresh repository: a directory holding an empty .git directory."""
    root = tmp_path / "repo"
    (root / ".git").mkdir(parents=True)
    return root


@pytest.fixture
def no_outer_repo(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Hide any .git directory that happens to sit above tmp_path."""
    real_is_dir = paths.is_dir

    def is_dir(path) -> bool:
        return Path(path).is_relative_to(tmp_path) and real_is_dir(path)

    monkeypatch.setattr(paths, "is_dir", is_dir)


@pytest.fixture
def umask() -> int:
    current = os.umask(0)
    os.umask(current)
    return current
