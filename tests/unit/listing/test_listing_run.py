"""End-to-end listing orchestration tests.

Covers target ordering, per-path diagnostics, singleton file listings,
headers for multiple targets, and the long-format total line.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from datetime import datetime
from pathlib import Path

from lazyls.entry_model import EntryMetadata, EntrySource, IdentityResolver, RawEntry
from lazyls.errors import IdentityLookupFailure, NotADirectory, PathNotFound, PermissionDenied
from lazyls.listing import DEFAULT_TARGET, ListingReport, order_targets, run_listing, select_raw_entries
from lazyls.options import ListingOptions


def _fixed_identities() -> IdentityResolver:
    return IdentityResolver(user_lookup=lambda uid: "alice", group_lookup=lambda gid: "staff")


def _record(name: str, block_count: int, size_bytes: int = 0, type_char: str = "-") -> EntryMetadata:
    return EntryMetadata(
        type_char=type_char,
        permission_bits=0o644,
        link_count=1,
        owner_name="alice",
        group_name="staff",
        size_bytes=size_bytes,
        mod_time=datetime(2024, 1, 2, 3, 4),
        display_name=name,
        block_count=block_count,
    )


class FakeEntrySource(EntrySource):
    """In-memory entry source keyed by directory path."""

    def __init__(self, directories: dict[str, dict[str, EntryMetadata]], denied: tuple[str, ...] = ()) -> None:
        super().__init__(_fixed_identities())
        self.directories = directories
        self.denied = denied
        self.files = {
            os.path.join(directory, name): record
            for directory, members in directories.items()
            for name, record in members.items()
        }

    def list_names(self, path: str) -> list[RawEntry]:
        if path in self.denied:
            raise PermissionDenied(path)
        if path in self.directories:
            return [RawEntry(name=name, directory=path) for name in self.directories[path]]
        if path in self.files:
            raise NotADirectory(path)
        raise PathNotFound(path)

    def is_directory(self, path: str) -> bool:
        return path in self.directories

    def read_metadata(
        self,
        path: str,
        display_name: str | None = None,
        diagnostics: list[str] | None = None,
    ) -> EntryMetadata:
        record = self.files.get(path)
        if record is None:
            raise PathNotFound(path)
        if display_name is None:
            return record
        return EntryMetadata(**{**record.__dict__, "display_name": display_name})


class RunListingTests(unittest.TestCase):
    def test_compact_listing_hides_dotfiles_and_sorts_by_codepoint(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            for name in ("apple", ".hidden", "Banana"):
                (Path(tmp) / name).write_text("", encoding="utf-8")

            report = run_listing([tmp], ListingOptions(), EntrySource(_fixed_identities()))

        self.assertEqual(report, ListingReport(output="Banana apple \n"))

    def test_show_hidden_includes_self_and_parent(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            for name in ("apple", ".hidden", "Banana"):
                (Path(tmp) / name).write_text("", encoding="utf-8")

            report = run_listing([tmp], ListingOptions(show_hidden=True), EntrySource(_fixed_identities()))

        self.assertEqual(report.output, ".       .hidden apple  \n..      Banana \n")

    def test_reverse_order(self) -> None:
        source = FakeEntrySource({"d": {name: _record(name, 0) for name in ("a", "b", "c", "d")}})
        report = run_listing(["d"], ListingOptions(reverse_order=True), source)
        self.assertEqual(report.output, "d b\nc a\n")

    def test_missing_path_reports_one_diagnostic_and_continues(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / "kept.txt").write_text("", encoding="utf-8")

            report = run_listing([tmp, "/no/such/dir"], ListingOptions(), EntrySource(_fixed_identities()))

        self.assertEqual(report.diagnostics, ("cannot access '/no/such/dir': No such file or directory",))
        self.assertEqual(report.exit_status, 0)
        self.assertEqual(report.output, f"{tmp}:\nkept.txt\n")

    def test_permission_denied_reports_and_continues(self) -> None:
        source = FakeEntrySource(
            {"open": {"x": _record("x", 0)}, "locked": {}},
            denied=("locked",),
        )
        report = run_listing(["open", "locked"], ListingOptions(), source)

        self.assertEqual(report.diagnostics, ("cannot open 'locked': Permission denied",))
        self.assertEqual(report.output, "open:\nx\n")
        self.assertEqual(report.exit_status, 0)

    def test_file_target_is_listed_as_single_entry(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = os.path.join(tmp, ".dotfile")
            Path(target).write_text("", encoding="utf-8")

            report = run_listing([target], ListingOptions(), EntrySource(_fixed_identities()))

        self.assertEqual(report.output, f"{target}\n")
        self.assertEqual(report.diagnostics, ())

    def test_long_format_file_target_uses_given_path_as_name(self) -> None:
        source = FakeEntrySource({"dir": {"f.txt": _record("f.txt", 3, size_bytes=9)}})
        report = run_listing([os.path.join("dir", "f.txt")], ListingOptions(long_format=True), source)
        path = os.path.join("dir", "f.txt")
        self.assertEqual(report.output, f"total 1\n-rw-r--r-- 1 alice staff 9 Jan 02 03:04 {path}\n")

    def test_long_format_total_floors_each_entry(self) -> None:
        source = FakeEntrySource({"d": {"a": _record("a", 3, size_bytes=1), "b": _record("b", 5, size_bytes=1500)}})
        report = run_listing(["d"], ListingOptions(long_format=True), source)

        self.assertEqual(
            report.output.splitlines(),
            [
                "total 3",
                "-rw-r--r-- 1 alice staff    1 Jan 02 03:04 a",
                "-rw-r--r-- 1 alice staff 1500 Jan 02 03:04 b",
            ],
        )

    def test_long_format_symlink_shows_target(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / "real").write_text("", encoding="utf-8")
            os.symlink("real", Path(tmp) / "link")

            report = run_listing([tmp], ListingOptions(long_format=True), EntrySource(_fixed_identities()))

        lines = report.output.splitlines()
        self.assertTrue(lines[0].startswith("total "))
        self.assertEqual(len(lines), 3)
        self.assertTrue(lines[1].startswith("lrwxrwxrwx"))
        self.assertTrue(lines[1].endswith("link -> real"))
        self.assertTrue(lines[2].startswith("-"))
        self.assertTrue(lines[2].rstrip().endswith(" real"))

    def test_empty_directory_prints_nothing_in_compact_mode(self) -> None:
        source = FakeEntrySource({"empty": {}})
        self.assertEqual(run_listing(["empty"], ListingOptions(), source).output, "")
        self.assertEqual(run_listing(["empty"], ListingOptions(long_format=True), source).output, "total 0\n")

    def test_multiple_targets_get_headers_and_blank_line_separators(self) -> None:
        source = FakeEntrySource(
            {
                "beta": {"b1": _record("b1", 0)},
                "Alpha": {"a1": _record("a1", 0)},
                "empty": {},
            }
        )
        report = run_listing(["beta", "empty", "Alpha"], ListingOptions(), source)
        self.assertEqual(report.output, "Alpha:\na1\n\nbeta:\nb1\n\nempty:\n")

    def test_file_targets_are_listed_before_directories(self) -> None:
        source = FakeEntrySource(
            {
                "adir": {"f": _record("f", 0)},
                "Bdir": {"g": _record("g", 0)},
            }
        )
        file_target = os.path.join("adir", "f")
        report = run_listing(["adir", "Bdir", file_target], ListingOptions(), source)

        self.assertEqual(report.output, f"{file_target}:\n{file_target}\n\nadir:\nf\n\nBdir:\ng\n")
        self.assertEqual(report.diagnostics, ())

    def test_long_format_reads_metadata_from_selected_raw_entries(self) -> None:
        source = FakeEntrySource({"d": {"b": _record("b", 2), ".h": _record(".h", 2), "a": _record("a", 4)}})
        report = run_listing(["d"], ListingOptions(long_format=True, reverse_order=True), source)

        self.assertEqual(
            report.output.splitlines(),
            [
                "total 3",
                "-rw-r--r-- 1 alice staff 0 Jan 02 03:04 b",
                "-rw-r--r-- 1 alice staff 0 Jan 02 03:04 a",
            ],
        )

    def test_identity_lookup_failure_propagates(self) -> None:
        def missing(numeric_id: int) -> str:
            raise KeyError(numeric_id)

        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / "file").write_text("", encoding="utf-8")
            source = EntrySource(IdentityResolver(user_lookup=missing, group_lookup=missing))
            with self.assertRaises(IdentityLookupFailure):
                run_listing([tmp], ListingOptions(long_format=True), source)

    def test_no_paths_lists_current_directory(self) -> None:
        self.assertEqual(DEFAULT_TARGET, ".")
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / "here.txt").write_text("", encoding="utf-8")
            previous_cwd = Path.cwd()
            try:
                os.chdir(tmp)
                report = run_listing([], ListingOptions(), EntrySource(_fixed_identities()))
            finally:
                os.chdir(previous_cwd)

        self.assertEqual(report.output, "here.txt\n")


class OrderTargetsTests(unittest.TestCase):
    def test_files_before_directories_case_insensitive(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("zdir", "adir"):
                (root / name).mkdir()
            for name in ("Bfile", "afile"):
                (root / name).write_text("", encoding="utf-8")

            previous_cwd = Path.cwd()
            try:
                os.chdir(tmp)
                ordered = order_targets(["zdir", "Bfile", "adir", "afile"], EntrySource(_fixed_identities()))
            finally:
                os.chdir(previous_cwd)

        self.assertEqual(ordered, ["afile", "Bfile", "adir", "zdir"])

    def test_missing_paths_sort_with_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            ordered = order_targets([tmp, os.path.join(tmp, "missing")], EntrySource(_fixed_identities()))
        self.assertEqual(ordered, [os.path.join(tmp, "missing"), tmp])

    def test_directory_check_goes_through_the_source(self) -> None:
        source = FakeEntrySource({"zeta": {"x": _record("x", 0)}})
        ordered = order_targets(["zeta", os.path.join("zeta", "x"), "Alpha"], source)
        self.assertEqual(ordered, ["Alpha", os.path.join("zeta", "x"), "zeta"])


class SelectRawEntriesTests(unittest.TestCase):
    def test_keeps_directory_of_each_selected_entry(self) -> None:
        entries = [RawEntry(name=name, directory="top") for name in (".", "..", "b", ".env", "A")]

        selected = select_raw_entries(entries, ListingOptions(reverse_order=True))

        self.assertEqual(selected, [RawEntry(name="b", directory="top"), RawEntry(name="A", directory="top")])
        self.assertEqual([entry.path for entry in selected], [os.path.join("top", "b"), os.path.join("top", "A")])


if __name__ == "__main__":
    unittest.main()
