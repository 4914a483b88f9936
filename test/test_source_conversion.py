"""Tests for mapping query terms between sources."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PaperQuery.core.query import QuerySource, QueryTerm, SearchField
from PaperQuery.querybuilder import convert_terms, map_field


class TestMapField(unittest.TestCase):
    def test_same_kind_fields_are_equivalent(self) -> None:
        self.assertIs(map_field(SearchField.ARXIV_AUTHOR, QuerySource.ADS), SearchField.ADS_AUTHOR)
        self.assertIs(map_field(SearchField.ARXIV_TITLE, QuerySource.ADS), SearchField.ADS_TITLE)
        self.assertIs(map_field(SearchField.ADS_ABSTRACT, QuerySource.ARXIV), SearchField.ARXIV_ABSTRACT)
        self.assertIs(map_field(SearchField.ADS_ALL, QuerySource.ARXIV), SearchField.ARXIV_ALL)

    def test_arxiv_identifier_maps_both_ways(self) -> None:
        self.assertIs(map_field(SearchField.ADS_ARXIV_ID, QuerySource.ARXIV), SearchField.ARXIV_ID)
        self.assertIs(map_field(SearchField.ARXIV_ID, QuerySource.ADS), SearchField.ADS_ARXIV_ID)

    def test_fields_without_counterpart_use_default(self) -> None:
        self.assertIs(map_field(SearchField.ARXIV_CATEGORY, QuerySource.ADS), SearchField.ADS_ALL)
        self.assertIs(map_field(SearchField.ADS_YEAR, QuerySource.ARXIV), SearchField.ARXIV_ALL)
        self.assertIs(map_field(SearchField.ADS_BIBCODE, QuerySource.ARXIV), SearchField.ARXIV_ALL)
        self.assertIs(map_field(SearchField.ADS_DATABASE, QuerySource.ARXIV), SearchField.ARXIV_ALL)

    def test_same_source_is_identity(self) -> None:
        self.assertIs(map_field(SearchField.ADS_YEAR, QuerySource.ADS), SearchField.ADS_YEAR)
        self.assertIs(map_field(SearchField.ARXIV_CATEGORY, QuerySource.ARXIV), SearchField.ARXIV_CATEGORY)


class TestConvertTerms(unittest.TestCase):
    def test_values_and_order_are_kept(self) -> None:
        terms = [
            QueryTerm(SearchField.ARXIV_CATEGORY, "astro-ph.GA"),
            QueryTerm(SearchField.ARXIV_AUTHOR, "Rubin"),
            QueryTerm(SearchField.ARXIV_ID, "2301.12345"),
        ]
        self.assertEqual(
            convert_terms(terms, QuerySource.ADS),
            (
                QueryTerm(SearchField.ADS_ALL, "astro-ph.GA"),
                QueryTerm(SearchField.ADS_AUTHOR, "Rubin"),
                QueryTerm(SearchField.ADS_ARXIV_ID, "2301.12345"),
            ),
        )

    def test_empty_input(self) -> None:
        self.assertEqual(convert_terms([], QuerySource.ARXIV), ())


if __name__ == "__main__":
    unittest.main()
