#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Functional tests for the batch runner and the `piranhito` command line.

Every test builds a fresh fixture tree (see tools/build_fixtures.py) in a
temporary directory, runs one mode over it and inspects the files on disk.
"""
from __future__ import annotations

import contextlib
import io
import json
import random
import tempfile
import unittest
from pathlib import Path
from typing import List

from piranhito import cli
from piranhito.constants import MODE_CHECK, MODE_COPYRIGHT, MODE_TRANSFORM
from piranhito.core.errors import UnknownProfileError
from piranhito.core.report import STATUS_CHANGED, STATUS_FAILED, STATUS_UNCHANGED
from piranhito.io.text_files import TextFileService
from piranhito.io.walker import SourceWalker
from piranhito.profiles.registry import ProfileRegistry
from piranhito.runtime.runner import ProjectRunner

from tools.build_fixtures import build

LOGGER_START = "/*Piranhito?@-Logger-S@85Lbt3@*/"


# --------------------------------------------------------------------------- #
#  Base class                                                                 #
# --------------------------------------------------------------------------- #
class FixtureTest(unittest.TestCase):
    """Builds the fixture tree into a per-test temporary directory."""

    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.root = build(Path(self._td.name) / "project")
        self.snapshot = {p: p.read_bytes() for p in self.root.rglob("*") if p.is_file()}

    def tearDown(self) -> None:
        self._td.cleanup()

    def read(self, name: str) -> str:
        return (self.root / name).read_text(encoding="utf-8")

    def assertUntouched(self, name: str) -> None:
        path = self.root / name
        self.assertEqual(path.read_bytes(), self.snapshot[path], f"{name} was modified")

    def run_cli(self, args: List[str]) -> int:
        return cli.run(args)


# --------------------------------------------------------------------------- #
#  1. Walker                                                                  #
# --------------------------------------------------------------------------- #
class WalkerTests(FixtureTest):
    def test_top_level_only_by_default(self) -> None:
        files = SourceWalker().gather_files(self.root, [".swift", ".js"])
        self.assertEqual([p.name for p in files], ["Sample.swift", "helper.js"])

    def test_recursive_includes_nested(self) -> None:
        files = SourceWalker().gather_files(self.root, ["swift"], recursive=True)
        self.assertEqual(sorted(p.name for p in files), ["Deep.swift", "Sample.swift"])

    def test_suffix_match_is_case_insensitive(self) -> None:
        (self.root / "Upper.SWIFT").write_text("x\n", encoding="utf-8")
        names = [p.name for p in SourceWalker().gather_files(self.root, [".swift"])]
        self.assertIn("Upper.SWIFT", names)
        self.assertNotIn(".Hidden.swift", names)


# --------------------------------------------------------------------------- #
#  2. Text file service                                                       #
# --------------------------------------------------------------------------- #
class TextFileTests(FixtureTest):
    def test_write_is_atomic_and_preserves_crlf(self) -> None:
        svc = TextFileService()
        path = self.root / "crlf.js"
        svc.write_text(path, "a\r\nb\r\n")
        self.assertEqual(path.read_bytes(), b"a\r\nb\r\n")
        self.assertEqual(svc.read_text(path), "a\r\nb\r\n")
        leftovers = [p.name for p in self.root.iterdir() if p.name.endswith(".tmp")]
        self.assertEqual(leftovers, [])


# --------------------------------------------------------------------------- #
#  3. Runner                                                                  #
# --------------------------------------------------------------------------- #
class RunnerTests(FixtureTest):
    def _runner(self, mode: str, **kw) -> ProjectRunner:
        return ProjectRunner(ProfileRegistry.default(), mode, rng=random.Random(0), **kw)

    def test_transform_rewrites_sources_only(self) -> None:
        report = self._runner(MODE_TRANSFORM).run("Orientamento", self.root)
        self.assertEqual(report.files_total, 2)
        self.assertEqual(report.files_changed, 2)
        self.assertFalse(report.has_failures)

        swift = self.read("Sample.swift")
        self.assertNotIn(LOGGER_START, swift)
        self.assertNotIn("debugDump", swift)
        self.assertNotIn("Tracer.trace", swift)
        self.assertIn("if (!_CE_) /*Piranhito?@*/ ", swift)
        self.assertIn("func compute(to value: Int)", swift)
        self.assertNotIn("\n\n", swift)

        js = self.read("helper.js")
        self.assertIn("/*?@-@FuncBegin@*/", js)
        self.assertIn("return 0", js)
        self.assertNotIn("return 1", js)

        for name in ("Localizable.strings", "config.json", "notes.txt", ".Hidden.swift", "nested/Deep.swift"):
            self.assertUntouched(name)

    def test_copyright_touches_data_files(self) -> None:
        report = self._runner(MODE_COPYRIGHT).run("Orientamento", self.root)
        self.assertEqual(report.files_total, 4)

        strings = self.read("Localizable.strings")
        self.assertNotIn('"internal"', strings)
        self.assertIn('"title" = "Created by xxx yyy zzz";', strings)

        swift = self.read("Sample.swift")
        self.assertIn("Created by xxx yyy zzz on 01/01/21.", swift)
        self.assertNotIn("All rights reserved", swift)
        # Feature markers are left for the transform mode.
        self.assertIn(LOGGER_START, swift)

        by_name = {Path(f.path).name: f.status for f in report.files}
        self.assertEqual(by_name["config.json"], STATUS_UNCHANGED)
        self.assertEqual(by_name["helper.js"], STATUS_UNCHANGED)
        self.assertEqual(by_name["Sample.swift"], STATUS_CHANGED)

    def test_recursive_reaches_nested(self) -> None:
        self._runner(MODE_TRANSFORM, recursive=True).run("Orientamento", self.root)
        self.assertNotIn(LOGGER_START, self.read("nested/Deep.swift"))
        self.assertUntouched(".Hidden.swift")

    def test_dry_run_writes_nothing(self) -> None:
        report = self._runner(MODE_TRANSFORM, dry_run=True).run("Orientamento", self.root)
        self.assertEqual(report.files_changed, 2)
        for path in self.snapshot:
            self.assertEqual(path.read_bytes(), self.snapshot[path])

    def test_invalid_utf8_is_recorded_and_batch_continues(self) -> None:
        (self.root / "Broken.swift").write_bytes(b'let a = "\xff"\n')
        report = self._runner(MODE_TRANSFORM).run("Orientamento", self.root)
        by_name = {Path(f.path).name: f for f in report.files}
        self.assertEqual(by_name["Broken.swift"].status, STATUS_FAILED)
        self.assertIn("UTF-8", by_name["Broken.swift"].error)
        self.assertEqual(by_name["Sample.swift"].status, STATUS_CHANGED)
        self.assertTrue(report.has_failures)
        self.assertEqual((self.root / "Broken.swift").read_bytes(), b'let a = "\xff"\n')

    def test_unknown_profile_touches_nothing(self) -> None:
        with self.assertRaises(UnknownProfileError):
            self._runner(MODE_TRANSFORM).run("Unknown", self.root)
        for path in self.snapshot:
            self.assertEqual(path.read_bytes(), self.snapshot[path])

    def test_unbalanced_marker_is_reported(self) -> None:
        (self.root / "Open.js").write_text(f"a\n{LOGGER_START}\nb\n", encoding="utf-8")
        report = self._runner(MODE_TRANSFORM).run("Orientamento", self.root)
        by_name = {Path(f.path).name: f for f in report.files}
        self.assertEqual(by_name["Open.js"].unbalanced, ["Logger"])
        # Left in place, then rewritten by the token replacement pass.
        self.assertIn("/*?@-Logger-S@85Lbt3@*/", self.read("Open.js"))

    def test_unbalanced_marker_warns_once(self) -> None:
        (self.root / "Open.js").write_text(f"a\n{LOGGER_START}\nb\n", encoding="utf-8")
        with self.assertLogs("piranhito", level="WARNING") as cm:
            self._runner(MODE_TRANSFORM).run("Orientamento", self.root)
        warnings = [line for line in cm.output if "unbalanced" in line]
        self.assertEqual(len(warnings), 1)
        self.assertIn("Logger", warnings[0])

    def test_check_mode_never_writes(self) -> None:
        (self.root / "Open.js").write_text(f"{LOGGER_START}\n", encoding="utf-8")
        report = self._runner(MODE_CHECK).run("Orientamento", self.root)
        by_name = {Path(f.path).name: f for f in report.files}
        self.assertEqual(by_name["Open.js"].unbalanced, ["Logger"])
        self.assertEqual(by_name["Sample.swift"].unbalanced, [])
        self.assertTrue(report.has_unbalanced)
        for path in self.snapshot:
            self.assertEqual(path.read_bytes(), self.snapshot[path])

    def test_missing_directory_is_an_error(self) -> None:
        report = self._runner(MODE_TRANSFORM).run("Orientamento", self.root / "missing")
        self.assertEqual(report.files_total, 0)
        self.assertTrue(report.errors)


# --------------------------------------------------------------------------- #
#  4. Command line                                                            #
# --------------------------------------------------------------------------- #
class CliTests(FixtureTest):
    def test_transform_flag(self) -> None:
        self.assertEqual(self.run_cli(["-x", "Orientamento", str(self.root), "--seed", "1"]), 0)
        self.assertNotIn(LOGGER_START, self.read("Sample.swift"))

    def test_copyright_flag(self) -> None:
        self.assertEqual(self.run_cli(["--copyright", "SnifferUtil", str(self.root)]), 0)
        self.assertIn("All rights reserved", self.read("Sample.swift"))
        self.assertIn("THIS SOFTWARE IS PROVIDED", self.read("Sample.swift"))

    def test_report_file(self) -> None:
        report_path = Path(self._td.name) / "report.json"
        code = self.run_cli(["-x", "Orientamento", str(self.root), "-n", "--report", str(report_path)])
        self.assertEqual(code, 0)
        data = json.loads(report_path.read_text(encoding="utf-8"))
        self.assertEqual(data["profile_id"], "Orientamento")
        self.assertTrue(data["dry_run"])
        self.assertEqual(data["files_changed"], 2)
        self.assertUntouched("Sample.swift")

    def test_unknown_profile_exit_code(self) -> None:
        self.assertEqual(self.run_cli(["-x", "orientamento", str(self.root)]), 2)

    def test_failed_file_exit_code(self) -> None:
        (self.root / "Broken.js").write_bytes(b"\xfe\xff")
        self.assertEqual(self.run_cli(["-x", "Orientamento", str(self.root)]), 1)

    def test_check_exit_codes(self) -> None:
        self.assertEqual(self.run_cli(["--check", "Orientamento", str(self.root)]), 0)
        (self.root / "Open.swift").write_text(f"{LOGGER_START}\n", encoding="utf-8")
        self.assertEqual(self.run_cli(["--check", "Orientamento", str(self.root)]), 1)

    def test_missing_mode_is_usage_error(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as cm:
                self.run_cli(["Orientamento", str(self.root)])
        self.assertEqual(cm.exception.code, 2)

    def test_modes_are_exclusive(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as cm:
                self.run_cli(["-x", "-c", "Orientamento", str(self.root)])
        self.assertEqual(cm.exception.code, 2)

    def test_list_profiles_with_extra_json(self) -> None:
        extra = Path(self._td.name) / "extra.json"
        extra.write_text(json.dumps({"profiles": [{"id": "Extra"}]}), encoding="utf-8")
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            code = self.run_cli(["--list-profiles", "--profiles", str(extra)])
        self.assertEqual(code, 0)
        self.assertEqual(buf.getvalue().split(), ["Orientamento", "SnifferUtil", "Extra"])

    def test_bad_profile_source_exit_code(self) -> None:
        self.assertEqual(self.run_cli(["--list-profiles", "--profiles", "no.such.module:X"]), 2)

    def test_main_raises_system_exit(self) -> None:
        with contextlib.redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit) as cm:
                cli.main(["--list-profiles"])
        self.assertEqual(cm.exception.code, 0)
