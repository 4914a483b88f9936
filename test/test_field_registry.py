"""Tests for the per-source field registry."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PaperQuery.core.query import QuerySource, SearchField
from PaperQuery.sources.registry import (
    default_field,
    field_for,
    field_spec,
    fields_for,
    prefix_for,
    resolve_source,
    source_of,
    supported_source_names,
)


class TestPrefixFor(unittest.TestCase):
    def test_ads_prefixes(self) -> None:
        self.assertEqual(prefix_for(QuerySource.ADS, SearchField.ADS_AUTHOR), "author")
        self.assertEqual(prefix_for(QuerySource.ADS, SearchField.ADS_ARXIV_ID), "arxiv")
        self.assertEqual(prefix_for(QuerySource.ADS, SearchField.ADS_DATABASE), "database")

    def test_arxiv_prefixes(self) -> None:
        self.assertEqual(prefix_for(QuerySource.ARXIV, SearchField.ARXIV_AUTHOR), "au")
        self.assertEqual(prefix_for(QuerySource.ARXIV, SearchField.ARXIV_ABSTRACT), "abs")
        self.assertEqual(prefix_for(QuerySource.ARXIV, SearchField.ARXIV_CATEGORY), "cat")

    def test_default_field_has_empty_prefix(self) -> None:
        self.assertEqual(prefix_for(QuerySource.ADS, SearchField.ADS_ALL), "")
        self.assertEqual(prefix_for(QuerySource.ARXIV, SearchField.ARXIV_ALL), "")

    def test_foreign_field_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            prefix_for(QuerySource.ADS, SearchField.ARXIV_AUTHOR)


class TestFieldFor(unittest.TestCase):
    def test_lookup_is_case_insensitive(self) -> None:
        self.assertIs(field_for(QuerySource.ADS, "AUTHOR"), SearchField.ADS_AUTHOR)
        self.assertIs(field_for(QuerySource.ADS, "arXiv"), SearchField.ADS_ARXIV_ID)
        self.assertIs(field_for(QuerySource.ARXIV, "Ti"), SearchField.ARXIV_TITLE)

    def test_surrounding_whitespace_is_not_ignored(self) -> None:
        self.assertIs(field_for(QuerySource.ARXIV, " au "), SearchField.ARXIV_ALL)
        self.assertIs(field_for(QuerySource.ADS, "author "), SearchField.ADS_ALL)

    def test_unknown_token_returns_default(self) -> None:
        self.assertIs(field_for(QuerySource.ADS, "doi"), SearchField.ADS_ALL)
        self.assertIs(field_for(QuerySource.ADS, ""), SearchField.ADS_ALL)

    def test_vocabularies_are_not_shared(self) -> None:
        self.assertIs(field_for(QuerySource.ARXIV, "author"), SearchField.ARXIV_ALL)
        self.assertIs(field_for(QuerySource.ADS, "au"), SearchField.ADS_ALL)


class TestRegistryMetadata(unittest.TestCase):
    def test_default_field_is_first(self) -> None:
        for source in QuerySource:
            self.assertIs(fields_for(source)[0].field, default_field(source))

    def test_every_field_belongs_to_one_source(self) -> None:
        for field in SearchField:
            source = source_of(field)
            self.assertIn(field, [spec.field for spec in fields_for(source)])

    def test_field_spec(self) -> None:
        spec = field_spec(SearchField.ARXIV_ID)
        self.assertEqual(spec.display_name, "arXiv ID")
        self.assertEqual(spec.placeholder, "2301.12345")
        self.assertEqual(spec.kind, "arxiv_id")

    def test_category_picker_flag(self) -> None:
        self.assertTrue(SearchField.ARXIV_CATEGORY.requires_category_picker)
        self.assertFalse(SearchField.ADS_DATABASE.requires_category_picker)

    def test_source_names(self) -> None:
        self.assertEqual(supported_source_names(), ("arxiv", "ads"))
        self.assertIs(resolve_source("ArXiv"), QuerySource.ARXIV)
        self.assertIs(resolve_source(QuerySource.ADS), QuerySource.ADS)
        with self.assertRaises(ValueError):
            resolve_source("crossref")


if __name__ == "__main__":
    unittest.main()
