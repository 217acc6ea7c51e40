from __future__ import annotations

import io
import json
import logging
import unittest

from piranhito.constants import MODE_CHECK, MODE_COPYRIGHT, MODE_TRANSFORM
from piranhito.core.report import ExecutionReport, FileOutcome, StageTimer
from piranhito.logging.helpers import JsonLogFormatter, get_logger
from piranhito.processing.pipeline_registry import PipelineRegistry
from piranhito.processing.pipelines import CopyrightPipeline, TransformPipeline
from piranhito.utils.suffixes import is_suffix_allowed, normalize_suffixes


class PipelineRegistryTests(unittest.TestCase):
    def test_default_tables(self) -> None:
        reg = PipelineRegistry.default()
        self.assertEqual(reg.suffixes(MODE_TRANSFORM), (".js", ".swift"))
        self.assertEqual(reg.suffixes(MODE_COPYRIGHT), (".js", ".json", ".strings", ".swift"))
        self.assertEqual(reg.suffixes(MODE_CHECK), ())

    def test_lookup_builds_one_pipeline_per_mode(self) -> None:
        reg = PipelineRegistry.default()
        swift = reg.for_suffix(MODE_TRANSFORM, ".SWIFT")
        self.assertIsInstance(swift, TransformPipeline)
        self.assertIs(reg.for_suffix(MODE_TRANSFORM, ".js"), swift)
        self.assertIsInstance(reg.for_suffix(MODE_COPYRIGHT, ".strings"), CopyrightPipeline)
        self.assertIsNone(reg.for_suffix(MODE_TRANSFORM, ".json"))

    def test_register_overrides(self) -> None:
        reg = PipelineRegistry.default()
        custom = CopyrightPipeline()
        reg.register(MODE_TRANSFORM, "swift", custom)
        self.assertIs(reg.for_suffix(MODE_TRANSFORM, ".swift"), custom)


class ReportTests(unittest.TestCase):
    def test_counts_and_json(self) -> None:
        rep = ExecutionReport(profile_id="Orientamento", mode=MODE_TRANSFORM, directory="/tmp/x")
        rep.add_outcome(FileOutcome(path="a.swift", status="changed", removed=["Logger"]))
        rep.add_outcome(FileOutcome(path="b.js", status="unchanged"))
        rep.add_outcome(FileOutcome(path="c.js", status="failed", error="boom"))
        with StageTimer(rep, "process"):
            pass
        rep.finish()

        self.assertEqual((rep.files_changed, rep.files_unchanged, rep.files_failed), (1, 1, 1))
        self.assertTrue(rep.has_failures)
        self.assertEqual(rep.errors, ["c.js: boom"])
        data = json.loads(rep.to_json())
        self.assertEqual(data["files"][0]["removed"], ["Logger"])
        self.assertGreaterEqual(data["time_by_stage"]["process"], 0.0)
        self.assertIsNotNone(data["duration_s"])


class LoggingTests(unittest.TestCase):
    def test_namespaced_loggers(self) -> None:
        self.assertEqual(get_logger("runner").name, "piranhito.runner")
        self.assertEqual(get_logger("piranhito.cli").name, "piranhito.cli")
        self.assertEqual(get_logger().name, "piranhito")

    def test_json_formatter_fields(self) -> None:
        buf = io.StringIO()
        handler = logging.StreamHandler(buf)
        handler.setFormatter(JsonLogFormatter())
        lg = logging.getLogger("piranhito.test.json")
        lg.addHandler(handler)
        lg.setLevel(logging.INFO)
        try:
            lg.info("hello %s", "world", extra={"context": {"file": "a.swift"}})
        finally:
            lg.removeHandler(handler)
        payload = json.loads(buf.getvalue())
        self.assertEqual(payload["msg"], "hello world")
        self.assertEqual(payload["module"], "piranhito.test.json")
        self.assertEqual(payload["ctx"], {"file": "a.swift"})
        self.assertIn("version", payload)


def test_suffix_normalization():
    assert normalize_suffixes(["swift", ".js", "", " js ", ".js"]) == [".swift", ".js"]
    assert is_suffix_allowed("main.swift", {".swift"})
    assert not is_suffix_allowed("main.swiftx", {".swift"})
    assert not is_suffix_allowed("Main.SWIFT", {".swift"})


def test_base_logger_switches_format_in_place():
    import sys

    from piranhito.logging.helpers import setup_base_logger

    json_buf, text_buf = io.StringIO(), io.StringIO()
    try:
        base = setup_base_logger(json_logs=True, stream=json_buf)
        get_logger("switch").info("first")
        setup_base_logger(json_logs=False, stream=text_buf)
        get_logger("switch").info("second")
        owned = [h for h in base.handlers if getattr(h, "_piranhito_handler", False)]
        assert len(owned) == 1
    finally:
        setup_base_logger(stream=sys.stderr)
    assert json.loads(json_buf.getvalue())["msg"] == "first"
    assert text_buf.getvalue() == "INFO: second\n"
