"""Bidirectional query builder.

Parses field-qualified boolean query text into a `QueryBuilderState` and
renders the state back into canonical text for the arXiv and ADS search APIs.
"""

from __future__ import annotations

from PaperQuery.core.query import QuerySource
from PaperQuery.querybuilder.convert import convert_terms, map_field
from PaperQuery.querybuilder.generator import generate_query
from PaperQuery.querybuilder.splitter import split_clauses
from PaperQuery.querybuilder.state import QueryBuilderState
from PaperQuery.querybuilder.terms import parse_term


def canonicalize(text: str, source: QuerySource) -> str:
    """Parse ``text`` and render it back in canonical form."""
    return QueryBuilderState.parse(text, source).generate_query()


__all__ = [
    "QueryBuilderState",
    "canonicalize",
    "convert_terms",
    "generate_query",
    "map_field",
    "parse_term",
    "split_clauses",
]
