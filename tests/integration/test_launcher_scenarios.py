"""End-to-end launcher scenarios across apps, files and commands."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from keylaunch.entries import AppIndex, build_app_index
from keylaunch.search import Launcher, search_apps, search_commands, search_files


def _desktop(directory: Path, stem: str, name: str) -> None:
    (directory / f"{stem}.desktop").write_text(
        f"[Desktop Entry]\nType=Application\nName={name}\nExec={stem}\n",
        encoding="utf-8",
    )


class LauncherScenarioTests(unittest.TestCase):
    def test_files_precedes_firefox_for_fi(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            apps = Path(tmp)
            _desktop(apps, "firefox", "Firefox")
            _desktop(apps, "nautilus", "Files")
            index = AppIndex(build_app_index([apps]))

        results = search_apps("fi", index.snapshot())
        self.assertEqual([entry.label.text for entry in results], ["Files", "Firefox"])

    def test_home_directory_query_lists_contents_without_command(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            home = Path(tmp).resolve()
            documents = home / "Documents"
            documents.mkdir()
            (documents / "report.odt").write_text("", encoding="utf-8")
            (documents / "taxes").mkdir()

            with mock.patch.dict(os.environ, {"HOME": str(home)}):
                results = Launcher(index=AppIndex()).search("~/Documents")

        opened, *listing = results.files
        self.assertEqual(opened.completion_text, "~/Documents")
        self.assertEqual([entry.completion_text for entry in listing], ["~/Documents/report.odt", "~/Documents/taxes/"])
        self.assertEqual(results.commands, [])
        self.assertEqual(results.apps, [])

    @unittest.skipUnless(Path("/usr/bin/ls").is_file() and os.access("/usr/bin/ls", os.X_OK), "needs /usr/bin/ls")
    def test_executable_path_lists_siblings_and_offers_command(self) -> None:
        files = search_files("/usr/bin/ls")
        commands = search_commands("/usr/bin/ls")

        self.assertTrue(all(entry.label.text != "/usr/bin/ls" for entry in files))
        self.assertTrue(all(entry.label.text.startswith(".../ls") for entry in files))
        self.assertTrue(all(entry.completion_text != "/usr/bin/ls" for entry in files))
        names = [entry.label.text for entry in files]
        self.assertEqual(names, sorted(names))
        self.assertEqual([entry.command for entry in commands], ["/usr/bin/ls"])

    def test_plain_text_query_only_offers_command(self) -> None:
        launcher = Launcher(index=AppIndex())
        results = launcher.search("echo hi")

        self.assertEqual(results.apps, [])
        self.assertEqual(results.files, [])
        self.assertEqual([entry.command for entry in results.commands], ["echo hi"])

    def test_completion_of_directory_listing_feeds_next_query(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "projects" / "keylaunch").mkdir(parents=True)

            (first,) = search_files(f"{root}/pro")
            second = search_files(first.completion_text)

        self.assertEqual(first.completion_text, f"{root}/projects/")
        self.assertEqual([entry.completion_text for entry in second], [f"{root}/projects/", f"{root}/projects/keylaunch/"])


if __name__ == "__main__":
    unittest.main()
