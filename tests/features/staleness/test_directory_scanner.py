import os
from contextlib import contextmanager
import pytest
from datetime import timedelta
from pathlib import Path

from stalewatch.core.common.enums import ScanStatus, TimestampSource
from stalewatch.features.staleness.domain.models import STALE_COUNT_SENTINEL
from stalewatch.features.staleness.data.directory_lister import LocalDirectoryLister
from stalewatch.features.staleness.service.scanner import DirectoryScanner


def _age_file(path: Path, created):
    ts = created.timestamp()
    os.utime(path, (ts, ts))


@pytest.fixture
def mtime_scanner():
    # Creation time cannot be back-dated portably; modification time can
    return DirectoryScanner(LocalDirectoryLister(TimestampSource.MODIFIED))


@pytest.fixture
def backlog_folder(tmp_path, now):
    """
    Five files created 10, 8, 6, 2 and 1 days before `now`.
    """
    folder = tmp_path / "inbound"
    folder.mkdir()
    for days in (10, 8, 6, 2, 1):
        f = folder / f"batch_{days}d.csv"
        f.write_text("id,amount\n")
        _age_file(f, now - timedelta(days=days))
    return folder


def test_counts_files_older_than_cutoff(backlog_folder, mtime_scanner, now):
    outcome = mtime_scanner.scan(str(backlog_folder), now - timedelta(days=3))

    assert outcome.status == ScanStatus.OK
    assert outcome.stale_count == 3


def test_scan_is_idempotent(backlog_folder, mtime_scanner, now):
    cutoff = now - timedelta(days=3)
    first = mtime_scanner.scan(str(backlog_folder), cutoff)
    second = mtime_scanner.scan(str(backlog_folder), cutoff)

    assert first == second
    assert len(list(backlog_folder.iterdir())) == 5


def test_subdirectories_are_not_entered(backlog_folder, mtime_scanner, now):
    nested = backlog_folder / "archive"
    nested.mkdir()
    old = nested / "ancient.csv"
    old.write_text("x")
    _age_file(old, now - timedelta(days=400))
    _age_file(nested, now - timedelta(days=400))

    outcome = mtime_scanner.scan(str(backlog_folder), now - timedelta(days=3))

    assert outcome.stale_count == 3


def test_empty_directory_reports_zero(tmp_path, mtime_scanner, now):
    empty = tmp_path / "empty"
    empty.mkdir()

    outcome = mtime_scanner.scan(str(empty), now)

    assert outcome.status == ScanStatus.OK
    assert outcome.stale_count == 0


def test_regular_file_is_path_invalid(tmp_path, mtime_scanner, now):
    not_a_dir = tmp_path / "report.txt"
    not_a_dir.write_text("hello")

    outcome = mtime_scanner.scan(str(not_a_dir), now)

    assert outcome.status == ScanStatus.PATH_INVALID
    assert outcome.stale_count == STALE_COUNT_SENTINEL
    assert "not a directory" in outcome.detail


def test_missing_path_is_path_invalid(tmp_path, mtime_scanner, now):
    outcome = mtime_scanner.scan(str(tmp_path / "nope"), now)

    assert outcome.status == ScanStatus.PATH_INVALID
    assert outcome.stale_count == STALE_COUNT_SENTINEL
    assert "does not exist" in outcome.detail


def test_file_at_cutoff_is_fresh(tmp_path, now, fake_lister_factory):
    cutoff = now - timedelta(days=3)
    lister = fake_lister_factory({
        "exact.csv": cutoff,
        "just_before.csv": cutoff - timedelta(microseconds=1),
        "just_after.csv": cutoff + timedelta(microseconds=1),
    })

    outcome = DirectoryScanner(lister).scan(str(tmp_path), cutoff)

    assert outcome.status == ScanStatus.OK
    assert outcome.stale_count == 1


def test_listing_error_becomes_scan_error(tmp_path, now, fake_lister_factory):
    lister = fake_lister_factory(error=PermissionError(13, "Permission denied"))

    outcome = DirectoryScanner(lister).scan(str(tmp_path), now)

    assert outcome.status == ScanStatus.SCAN_ERROR
    assert outcome.stale_count == STALE_COUNT_SENTINEL
    assert "Permission denied" in outcome.detail


def test_path_is_checked_before_listing(tmp_path, now, fake_lister_factory):
    lister = fake_lister_factory()

    DirectoryScanner(lister).scan(str(tmp_path / "missing"), now)

    assert lister.listed == []


def test_naive_cutoff_is_treated_as_utc(backlog_folder, mtime_scanner, now):
    naive_cutoff = (now - timedelta(days=3)).replace(tzinfo=None)

    outcome = mtime_scanner.scan(str(backlog_folder), naive_cutoff)

    assert outcome.stale_count == 3


def test_lister_yields_only_regular_files(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "sub").mkdir()

    observations = list(LocalDirectoryLister(TimestampSource.CREATED).list_files(tmp_path))

    assert [o.path.name for o in observations] == ["a.txt"]
    assert observations[0].creation_time.tzinfo is not None


class _VanishingEntry:
    """DirEntry whose file is removed before it can be stat'ed."""

    def __init__(self, entry, vanished):
        self._entry = entry
        self._vanished = vanished
        self.name = entry.name
        self.path = entry.path

    def is_file(self):
        return self._entry.is_file()

    def stat(self):
        if self.name in self._vanished:
            raise FileNotFoundError(2, "No such file or directory", self.path)
        return self._entry.stat()


def test_file_removed_mid_scan_is_skipped(backlog_folder, mtime_scanner, now, monkeypatch):
    real_scandir = os.scandir

    @contextmanager
    def racing_scandir(path):
        with real_scandir(path) as entries:
            yield [_VanishingEntry(e, {"batch_10d.csv"}) for e in entries]

    monkeypatch.setattr(os, "scandir", racing_scandir)

    outcome = mtime_scanner.scan(str(backlog_folder), now - timedelta(days=3))

    assert outcome.status == ScanStatus.OK
    assert outcome.stale_count == 2


def test_unreadable_path_becomes_scan_error(tmp_path, now, fake_lister_factory, monkeypatch):
    def denied(self):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "is_dir", denied)
    lister = fake_lister_factory()

    outcome = DirectoryScanner(lister).scan(str(tmp_path / "locked" / "inbound"), now)

    assert outcome.status == ScanStatus.SCAN_ERROR
    assert outcome.stale_count == STALE_COUNT_SENTINEL
    assert "Permission denied" in outcome.detail
    assert lister.listed == []
