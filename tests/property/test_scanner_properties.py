"""
Property-based tests for Scanner report partitioning.

For any tree, every regular file lands in exactly one of passed, failed or
file_errors unless it was skipped; non-regular entries only appear in
non_regular; rescanning yields the same Report.
"""

import sys
import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from digestlint.core.digest import DigestAlgorithm
from digestlint.core.scanner import Report, Scanner, merge_reports
from tests.digest_strategies import digest_of

pytestmark = pytest.mark.skipif(
    sys.platform == "win32",
    reason="Symlink tests require admin privileges on Windows"
)

SKIP_PATTERNS = [r"skipme-\d+\.txt"]

KINDS = ["pass", "mismatch", "no_digest", "skip", "symlink"]


@st.composite
def tree_strategy(draw):
    """
    Generate a list of entries to create.

    Returns:
        list of (relative_path, contents, kind) tuples with unique paths
    """
    n = draw(st.integers(min_value=1, max_value=12))
    entries = []
    for i in range(n):
        kind = draw(st.sampled_from(KINDS))
        algorithm = draw(st.sampled_from(list(DigestAlgorithm)))
        contents = draw(st.binary(max_size=256))
        subdir = draw(st.sampled_from(["", "a/", "a/b/", "c/"]))
        upper = draw(st.booleans())

        if kind == "pass":
            digest = digest_of(contents, algorithm)
            name = f"p{i}-{digest.upper() if upper else digest}.bin"
        elif kind == "mismatch":
            digest = digest_of(contents + b"!", algorithm)
            name = f"m{i}-{digest.upper() if upper else digest}.bin"
        elif kind == "no_digest":
            name = f"n{i}.txt"
        elif kind == "skip":
            name = f"skipme-{i}.txt"
        else:
            name = f"l{i}"

        entries.append((subdir + name, contents, kind))
    return entries


def build_tree(root: Path, entries) -> None:
    for rel_path, contents, kind in entries:
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if kind == "symlink":
            path.symlink_to("nowhere")
        else:
            path.write_bytes(contents)


def expected_category(kind: str) -> str:
    return {
        "pass": "passed",
        "mismatch": "failed",
        "no_digest": "failed",
        "skip": "skipped",
        "symlink": "non_regular",
    }[kind]


@given(entries=tree_strategy())
@settings(max_examples=50, deadline=None)
def test_report_partitions_entries(entries):
    """Every created entry lands in exactly one category, the expected one."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        build_tree(root, entries)

        report = Scanner(SKIP_PATTERNS).scan_directory(root)

        categories = {
            "passed": report.passed,
            "failed": report.failed,
            "skipped": report.skipped,
            "non_regular": report.non_regular,
            "file_errors": list(report.file_errors),
        }

        all_paths = [p for paths in categories.values() for p in paths]
        assert len(all_paths) == len(set(all_paths)) == len(entries)

        for rel_path, _, kind in entries:
            path = str(root / rel_path)
            assert path in categories[expected_category(kind)], (
                f"{path} ({kind}) not in {expected_category(kind)}"
            )

        for paths in categories.values():
            assert paths == sorted(paths)


@given(entries=tree_strategy())
@settings(max_examples=25, deadline=None)
def test_rescan_is_idempotent(entries):
    """Scanning an unchanged tree twice yields identical Reports."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        build_tree(root, entries)

        scanner = Scanner(SKIP_PATTERNS)
        assert scanner.scan_directory(root) == scanner.scan_directory(root)


@given(entries=tree_strategy())
@settings(max_examples=25, deadline=None)
def test_merging_split_roots_matches_whole_categories(entries):
    """Reports for sibling roots merge into the union of their categories."""
    with tempfile.TemporaryDirectory() as tmpdir:
        base = Path(tmpdir)
        left, right = base / "left", base / "right"
        left.mkdir()
        right.mkdir()
        build_tree(left, entries[::2])
        build_tree(right, entries[1::2])

        scanner = Scanner(SKIP_PATTERNS)
        reports = [scanner.scan_directory(left), scanner.scan_directory(right)]
        merged = merge_reports(reports)

        assert merged.passed == sorted(reports[0].passed + reports[1].passed)
        assert merged.failed == sorted(reports[0].failed + reports[1].failed)
        assert merged.skipped == sorted(reports[0].skipped + reports[1].skipped)
        assert merged.non_regular == sorted(reports[0].non_regular + reports[1].non_regular)
        assert merged.total_files == len(entries)


@given(contents=st.binary(min_size=1, max_size=512), index=st.integers(min_value=0), upper=st.booleans())
@settings(max_examples=50, deadline=None)
def test_sha256_round_trip_and_mutation(contents, index, upper):
    """A sha256-named file passes; flipping one byte makes it fail."""
    digest = digest_of(contents, DigestAlgorithm.SHA256)
    name = f"bundle-{digest.upper() if upper else digest}.js"

    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        path = root / name
        path.write_bytes(contents)

        scanner = Scanner()
        assert scanner.scan_directory(root) == Report(passed=[str(path)])

        mutated = bytearray(contents)
        position = index % len(mutated)
        mutated[position] ^= 0xFF
        path.write_bytes(bytes(mutated))

        assert scanner.scan_directory(root) == Report(failed=[str(path)])
