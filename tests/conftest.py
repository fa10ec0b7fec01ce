"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small tree to search.

    Layout::

        root/
            a.txt
            link -> sub
            sub/
                b.csv
                deep/
                    c.txt
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("a")
    sub = root / "sub"
    sub.mkdir()
    (sub / "b.csv").write_text("b")
    deep = sub / "deep"
    deep.mkdir()
    (deep / "c.txt").write_text("c")
    (root / "link").symlink_to(sub, target_is_directory=True)
    return root


@pytest.fixture
def in_tmp_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with tmp_path as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def denied_dir(sample_tree: Path) -> Iterator[Path]:
    """Make listing root/sub/deep fail with EACCES, even when running as root.

    Also adds root/sub/zzz.txt as a sibling visited after the denied directory.
    """
    denied = sample_tree / "sub" / "deep"
    (sample_tree / "sub" / "zzz.txt").write_text("z")
    real_scandir = os.scandir

    def _scandir(path: str) -> object:
        if os.fspath(path) == str(denied):
            raise PermissionError(13, "Permission denied")
        return real_scandir(path)

    with patch("findr.search.walker.os.scandir", side_effect=_scandir):
        yield denied
