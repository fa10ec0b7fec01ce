"""Tests for the search runner."""

import os
from pathlib import Path

import pytest
from findr.search.config import build_config
from findr.search.finder import find
from findr.search.models import EntryType, WalkEntry, WalkError


def _found(root: Path, **kwargs: object) -> list[str]:
    """Relative paths reported for a search of root."""
    config = build_config([str(root)], **kwargs)  # type: ignore[arg-type]
    return [
        os.path.relpath(o.path, root) for o in find(config) if isinstance(o, WalkEntry)
    ]


class TestFindFilters:
    """End-to-end filter scenarios over a real tree."""

    def test_no_filters_reports_everything(self, sample_tree: Path) -> None:
        assert _found(sample_tree) == [
            ".",
            "a.txt",
            "link",
            "sub",
            "sub/b.csv",
            "sub/deep",
            "sub/deep/c.txt",
        ]

    def test_files_only(self, sample_tree: Path) -> None:
        assert _found(sample_tree, entry_types=[EntryType.FILE]) == [
            "a.txt",
            "sub/b.csv",
            "sub/deep/c.txt",
        ]

    def test_name_only(self, sample_tree: Path) -> None:
        assert _found(sample_tree, names=[r"\.csv$"]) == ["sub/b.csv"]

    def test_directory_and_name(self, sample_tree: Path) -> None:
        assert _found(sample_tree, names=["sub"], entry_types=[EntryType.DIRECTORY]) == ["sub"]

    def test_symlinks_only(self, sample_tree: Path) -> None:
        assert _found(sample_tree, entry_types=[EntryType.SYMLINK]) == ["link"]

    def test_type_union(self, sample_tree: Path) -> None:
        found = _found(sample_tree, entry_types=[EntryType.SYMLINK, EntryType.DIRECTORY])
        assert found == [".", "link", "sub", "sub/deep"]

    def test_filters_do_not_prune_descent(self, sample_tree: Path) -> None:
        """Files under a non-matching directory are still found."""
        assert _found(sample_tree, names=[r"^c\.txt$"]) == ["sub/deep/c.txt"]


class TestFindDepth:
    """Tests for depth limits."""

    def test_min_depth_hides_shallow_entries(self, sample_tree: Path) -> None:
        assert _found(sample_tree, min_depth=2) == ["sub/b.csv", "sub/deep", "sub/deep/c.txt"]

    def test_max_depth_limits_descent(self, sample_tree: Path) -> None:
        assert _found(sample_tree, max_depth=1) == [".", "a.txt", "link", "sub"]

    def test_min_and_max_depth(self, sample_tree: Path) -> None:
        assert _found(sample_tree, min_depth=2, max_depth=2) == ["sub/b.csv", "sub/deep"]


class TestFindRoots:
    """Tests for multiple roots and root errors."""

    def test_roots_in_given_order(self, sample_tree: Path) -> None:
        sub = str(sample_tree / "sub")
        a = str(sample_tree / "a.txt")
        config = build_config([a, sub], entry_types=[EntryType.FILE])

        paths = [o.path for o in find(config)]

        assert paths == [a, os.path.join(sub, "b.csv"), os.path.join(sub, "deep", "c.txt")]

    def test_missing_root_does_not_stop_search(self, sample_tree: Path, tmp_path: Path) -> None:
        missing = str(tmp_path / "blargh")
        a = str(sample_tree / "a.txt")
        config = build_config([missing, a])

        observations = list(find(config))

        assert observations[0] == WalkError(
            path=missing, message=f"{missing}: No such file or directory"
        )
        assert observations[1] == WalkEntry(path=a, entry_type=EntryType.FILE)

    def test_errors_pass_through_filters(self, tmp_path: Path) -> None:
        """Walk errors are reported even when no entry could match."""
        missing = str(tmp_path / "blargh")
        config = build_config([missing], names=["nothing-matches"], min_depth=5)

        observations = list(find(config))

        assert len(observations) == 1
        assert isinstance(observations[0], WalkError)

    @pytest.mark.skipif(os.geteuid() == 0, reason="root bypasses directory permissions")
    def test_unreadable_subdirectory_keeps_siblings(self, sample_tree: Path) -> None:
        locked = sample_tree / "sub" / "deep"
        (sample_tree / "sub" / "zzz.txt").write_text("z")
        locked.chmod(0o000)
        try:
            observations = list(find(build_config([str(sample_tree)], names=["txt"])))
        finally:
            locked.chmod(0o755)

        errors = [o for o in observations if isinstance(o, WalkError)]
        found = [
            os.path.relpath(o.path, sample_tree) for o in observations if isinstance(o, WalkEntry)
        ]
        assert [e.path for e in errors] == [str(locked)]
        assert found == ["a.txt", "sub/zzz.txt"]

    def test_listing_error_keeps_siblings_and_later_roots(
        self, sample_tree: Path, denied_dir: Path
    ) -> None:
        later_root = str(sample_tree / "a.txt")
        config = build_config([str(sample_tree), later_root], names=["txt"])

        observations = list(find(config))

        assert observations == [
            WalkEntry(path=str(sample_tree / "a.txt"), entry_type=EntryType.FILE, depth=1),
            WalkError(path=str(denied_dir), message=f"{denied_dir}: Permission denied"),
            WalkEntry(
                path=str(sample_tree / "sub" / "zzz.txt"), entry_type=EntryType.FILE, depth=2
            ),
            WalkEntry(path=later_root, entry_type=EntryType.FILE),
        ]

    def test_repeatable(self, sample_tree: Path) -> None:
        config = build_config([str(sample_tree)], names=["t"])
        assert list(find(config)) == list(find(config))
