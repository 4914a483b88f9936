"""Query builder state: the value object behind the query-building form."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence

from PaperQuery.core.query import MatchType, QuerySource, QueryTerm
from PaperQuery.querybuilder.convert import convert_terms
from PaperQuery.querybuilder.generator import generate_query
from PaperQuery.querybuilder.splitter import split_clauses
from PaperQuery.querybuilder.terms import parse_term
from PaperQuery.sources.registry import source_of
from PaperQuery.utils.log import log


@dataclass(frozen=True, slots=True)
class QueryBuilderState:
    """Structured form of a search query.

    Attributes:
        source: Source whose field vocabulary the terms use.
        match_type: Combinator between terms; only emitted for two or more
            terms.
        terms: Terms in the order they appeared in the query (or were added
            by the UI).
    """

    source: QuerySource = QuerySource.ARXIV
    match_type: MatchType = MatchType.ALL
    terms: Sequence[QueryTerm] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "terms", tuple(self.terms))
        for term in self.terms:
            if source_of(term.field) is not self.source:
                raise ValueError(
                    f"Field {term.field.value} does not belong to source {self.source.value}"
                )

    @classmethod
    def parse(cls, text: str, source: QuerySource) -> QueryBuilderState:
        """Parse raw query text into a state.

        Never fails: unknown prefixes, unbalanced quotes and mixed combinators
        all fall back to a best-effort reading.

        Args:
            text: Raw query text, typed by a user or read back from storage.
            source: Source whose field vocabulary applies.

        Returns:
            Parsed state; no terms for blank input.
        """
        match_type, clauses = split_clauses(text)
        terms = tuple(parse_term(clause, source) for clause in clauses)
        log.debug("Parsed %r (%s) into %d terms match=%s", text, source.value, len(terms), match_type.value)
        return cls(source=source, match_type=match_type, terms=terms)

    def generate_query(self) -> str:
        """Render the canonical query string."""
        return generate_query(self.source, self.match_type, self.terms)

    def with_source(self, source: QuerySource) -> QueryBuilderState:
        """Return a copy whose terms are mapped onto ``source`` fields."""
        if source is self.source:
            return self
        return replace(self, source=source, terms=convert_terms(self.terms, source))
