"""NASA ADS field vocabulary.

Only the fields offered by the query builder are listed here. ADS accepts many
more prefixes (doi, object, property, collection, ...); those are left inside
the value of the default field untouched.
"""

from __future__ import annotations

from typing import Final

from PaperQuery.core.query import FieldSpec, SearchField


ADS_FIELDS: Final[tuple[FieldSpec, ...]] = (
    FieldSpec(SearchField.ADS_ALL, "", "All Fields", "search terms", "all"),
    FieldSpec(SearchField.ADS_AUTHOR, "author", "Author", "Rubin", "author"),
    FieldSpec(SearchField.ADS_TITLE, "title", "Title", "galaxy rotation", "title"),
    FieldSpec(SearchField.ADS_ABSTRACT, "abstract", "Abstract", "dark matter", "abstract"),
    FieldSpec(SearchField.ADS_YEAR, "year", "Year", "2024", "year"),
    FieldSpec(SearchField.ADS_BIBCODE, "bibcode", "Bibcode", "2024ApJ...", "bibcode"),
    FieldSpec(SearchField.ADS_ARXIV_ID, "arxiv", "arXiv ID", "2301.12345", "arxiv_id"),
    FieldSpec(SearchField.ADS_DATABASE, "database", "Database", "astronomy", "database"),
)
