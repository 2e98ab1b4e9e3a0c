"""Tests for listing-model filesystem scanning and path helpers."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lsview.listing_model import base_name, is_hidden_path, read_metadata, scan_directory
from lsview.listing_model import fs as listing_fs


class ScanDirectoryTests(unittest.TestCase):
    def test_directories_are_recorded_in_both_groups(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "b.txt").write_text("b\n", encoding="utf-8")
            (root / "a.txt").write_text("a\n", encoding="utf-8")
            (root / "sub").mkdir()

            group, open_error = scan_directory(str(root))

            self.assertIsNone(open_error)
            assert group is not None
            self.assertEqual([entry.name for entry in group.files], ["a.txt", "b.txt", "sub"])
            self.assertEqual([entry.name for entry in group.subdirectories], ["sub"])
            self.assertEqual(group.subdirectories[0].path, os.path.join(str(root), "sub"))

    def test_symlink_to_directory_is_not_a_subdirectory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "real").mkdir()
            os.symlink(root / "real", root / "link")

            group, _open_error = scan_directory(str(root))

            assert group is not None
            self.assertEqual([entry.name for entry in group.files], ["link", "real"])
            self.assertEqual([entry.name for entry in group.subdirectories], ["real"])
            link_entry = group.files[0]
            self.assertTrue(link_entry.metadata.is_symlink)
            self.assertEqual(link_entry.metadata.link_target, str(root / "real"))

    def test_hidden_entries_are_kept_during_enumeration(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".cache").mkdir()
            (root / "visible").write_text("", encoding="utf-8")

            group, _open_error = scan_directory(str(root))

            assert group is not None
            self.assertEqual([entry.name for entry in group.files], ["visible", ".cache"])
            self.assertEqual([entry.name for entry in group.subdirectories], [".cache"])

    def test_empty_directory_yields_empty_group(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            group, open_error = scan_directory(tmp)

            self.assertIsNone(open_error)
            assert group is not None
            self.assertTrue(group.is_empty())

    def test_missing_directory_reports_open_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            group, open_error = scan_directory(os.path.join(tmp, "missing"))

        self.assertIsNone(group)
        self.assertIsInstance(open_error, FileNotFoundError)

    def test_regular_file_reports_open_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "plain.txt"
            target.write_text("x\n", encoding="utf-8")

            group, open_error = scan_directory(str(target))

        self.assertIsNone(group)
        self.assertIsInstance(open_error, NotADirectoryError)

    def test_metadata_failure_skips_only_that_entry(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "good.txt").write_text("", encoding="utf-8")
            (root / "bad.txt").write_text("", encoding="utf-8")
            real_metadata_from_stat = listing_fs.metadata_from_stat

            def flaky(path: str, st: os.stat_result):
                if path.endswith("bad.txt"):
                    raise PermissionError(13, "Permission denied")
                return real_metadata_from_stat(path, st)

            with mock.patch("lsview.listing_model.fs.metadata_from_stat", side_effect=flaky):
                with self.assertLogs("lsview.listing_model.fs", level="ERROR") as logs:
                    group, open_error = scan_directory(str(root))

            self.assertIsNone(open_error)
            assert group is not None
            self.assertEqual([entry.name for entry in group.files], ["good.txt"])
            self.assertEqual(len(logs.records), 1)
            self.assertIn("bad.txt: Permission denied", logs.records[0].getMessage())


class ReadMetadataTests(unittest.TestCase):
    def test_read_metadata_does_not_follow_symlinks(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            target = root / "target.txt"
            target.write_text("hello\n", encoding="utf-8")
            os.symlink("target.txt", root / "alias")

            link_metadata = read_metadata(str(root / "alias"))
            file_metadata = read_metadata(str(target))

        self.assertTrue(link_metadata.is_symlink)
        self.assertEqual(link_metadata.link_target, "target.txt")
        self.assertFalse(file_metadata.is_symlink)
        self.assertIsNone(file_metadata.link_target)
        self.assertEqual(file_metadata.size, 6)

    def test_read_metadata_raises_for_missing_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FileNotFoundError):
                read_metadata(os.path.join(tmp, "missing"))


class PathHelperTests(unittest.TestCase):
    def test_base_name_uses_last_separator(self) -> None:
        self.assertEqual(base_name("/tmp/x/a.txt"), "a.txt")
        self.assertEqual(base_name("a.txt"), "a.txt")
        self.assertEqual(base_name("dir/"), "")

    def test_hidden_only_when_last_segment_starts_with_dot(self) -> None:
        self.assertTrue(is_hidden_path("/tmp/x/.env"))
        self.assertTrue(is_hidden_path("./.git"))
        self.assertFalse(is_hidden_path("./visible"))
        self.assertFalse(is_hidden_path("/tmp/.cache/visible"))

    def test_bare_argument_is_never_hidden(self) -> None:
        self.assertFalse(is_hidden_path(".bashrc"))
        self.assertFalse(is_hidden_path("."))


if __name__ == "__main__":
    unittest.main()
