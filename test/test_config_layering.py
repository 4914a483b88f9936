"""Tests for layered config parsing and validation."""

import os
import sys
import unittest
from copy import deepcopy
from pathlib import Path
from unittest.mock import patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PaperQuery.config import parse_config_dict
from PaperQuery.config.runtime import LOG_LEVEL_ENV
from PaperQuery.core.query import QuerySource


def _base_raw_config() -> dict:
    return {
        "log": {"level": "INFO", "to_file": False, "dir": "log"},
        "query": {"default_source": "ads"},
        "output": {"format": "text"},
        "saved": [
            {"NAME": "relativity", "QUERY": 'author:Einstein AND title:"special relativity"'},
            {"NAME": "ml", "SOURCE": "arXiv", "QUERY": "cat:cs.LG"},
        ],
    }


class TestConfigLayering(unittest.TestCase):
    def setUp(self) -> None:
        patcher = patch.dict(os.environ, {}, clear=False)
        patcher.start()
        self.addCleanup(patcher.stop)
        os.environ.pop(LOG_LEVEL_ENV, None)

    def test_empty_mapping_uses_defaults(self) -> None:
        cfg = parse_config_dict({})
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertFalse(cfg.runtime.to_file)
        self.assertIs(cfg.query.default_source, QuerySource.ADS)
        self.assertEqual(cfg.query.saved, ())
        self.assertEqual(cfg.output.format, "text")

    def test_parse_saved_searches(self) -> None:
        cfg = parse_config_dict(_base_raw_config())
        first, second = cfg.query.saved
        self.assertEqual(first.name, "relativity")
        self.assertIs(first.source, QuerySource.ADS)
        self.assertIs(second.source, QuerySource.ARXIV)
        self.assertEqual(second.query, "cat:cs.LG")

    def test_saved_source_defaults_to_query_default_source(self) -> None:
        raw = _base_raw_config()
        raw["query"]["default_source"] = "arxiv"
        cfg = parse_config_dict(raw)
        self.assertIs(cfg.query.saved[0].source, QuerySource.ARXIV)

    def test_unknown_default_source_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["query"]["default_source"] = "inspire"
        with self.assertRaisesRegex(ValueError, "query\\.default_source"):
            parse_config_dict(raw)

    def test_unknown_saved_source_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["saved"][1]["SOURCE"] = "pubmed"
        with self.assertRaisesRegex(ValueError, "saved\\[1\\]\\.SOURCE"):
            parse_config_dict(raw)

    def test_saved_missing_query(self) -> None:
        raw = _base_raw_config()
        del raw["saved"][0]["QUERY"]
        with self.assertRaisesRegex(ValueError, "saved\\[0\\]\\.QUERY"):
            parse_config_dict(raw)

    def test_saved_unknown_key(self) -> None:
        raw = _base_raw_config()
        raw["saved"][0]["OR"] = ["x"]
        with self.assertRaisesRegex(ValueError, "unknown keys"):
            parse_config_dict(raw)

    def test_saved_duplicate_names(self) -> None:
        raw = deepcopy(_base_raw_config())
        raw["saved"][1]["NAME"] = "relativity"
        with self.assertRaisesRegex(ValueError, "duplicate NAME"):
            parse_config_dict(raw)

    def test_saved_empty_name(self) -> None:
        raw = _base_raw_config()
        raw["saved"][0]["NAME"] = "  "
        with self.assertRaisesRegex(ValueError, "saved\\[0\\]\\.NAME"):
            parse_config_dict(raw)

    def test_saved_must_be_list_of_objects(self) -> None:
        raw = _base_raw_config()
        raw["saved"] = {"NAME": "x", "QUERY": "y"}
        with self.assertRaisesRegex(TypeError, "saved"):
            parse_config_dict(raw)
        raw["saved"] = ["author:x"]
        with self.assertRaisesRegex(TypeError, "saved\\[0\\]"):
            parse_config_dict(raw)

    def test_log_level_validated(self) -> None:
        raw = _base_raw_config()
        raw["log"]["level"] = "verbose"
        with self.assertRaisesRegex(ValueError, "log\\.level"):
            parse_config_dict(raw)

    def test_log_to_file_type_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["log"]["to_file"] = "yes"
        with self.assertRaisesRegex(TypeError, "log\\.to_file"):
            parse_config_dict(raw)

    def test_section_must_be_mapping(self) -> None:
        raw = _base_raw_config()
        raw["output"] = "json"
        with self.assertRaisesRegex(TypeError, "output"):
            parse_config_dict(raw)

    def test_output_format_normalized_and_validated(self) -> None:
        raw = _base_raw_config()
        raw["output"]["format"] = " JSON "
        self.assertEqual(parse_config_dict(raw).output.format, "json")
        raw["output"]["format"] = "markdown"
        with self.assertRaisesRegex(ValueError, "output\\.format"):
            parse_config_dict(raw)

    def test_log_level_env_override(self) -> None:
        with patch.dict(os.environ, {LOG_LEVEL_ENV: "debug"}):
            cfg = parse_config_dict(_base_raw_config())
        self.assertEqual(cfg.runtime.level, "DEBUG")


if __name__ == "__main__":
    unittest.main()
