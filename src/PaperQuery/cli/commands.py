"""Command implementations for PaperQuery CLI.

Each command turns its inputs into the text printed on stdout, separated from
CLI parameter handling and logging setup.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from PaperQuery.config import SavedSearch
from PaperQuery.core.query import QuerySource
from PaperQuery.querybuilder import QueryBuilderState
from PaperQuery.renderers import render_json, render_text
from PaperQuery.sources.ads.forms import (
    AdsDatabase,
    QueryLogic,
    build_classic_query,
    build_paper_query,
    is_classic_form_empty,
    is_paper_form_empty,
)
from PaperQuery.utils.log import log


class Command(Protocol):
    def execute(self) -> str: ...


@dataclass(slots=True)
class ParseCommand:
    """Parse one query and render the resulting state."""

    text: str
    source: QuerySource
    output_format: str = "text"

    def execute(self) -> str:
        state = QueryBuilderState.parse(self.text, self.source)
        log.info("Parsed %d terms (%s)", len(state.terms), state.match_type.display_name)
        if self.output_format == "json":
            return render_json([state])
        return render_text(state)


@dataclass(slots=True)
class CanonicalizeCommand:
    """Print the canonical form of one query."""

    text: str
    source: QuerySource

    def execute(self) -> str:
        canonical = QueryBuilderState.parse(self.text, self.source).generate_query()
        if canonical != self.text.strip():
            log.info("Query rewritten: %r -> %r", self.text, canonical)
        return canonical


@dataclass(slots=True)
class SavedCommand:
    """Parse and canonicalize every saved search from the config."""

    saved: Sequence[SavedSearch]
    output_format: str = "text"

    def execute(self) -> str:
        if not self.saved:
            log.warning("No saved searches configured")
            return ""

        states: list[QueryBuilderState] = []
        multiple = len(self.saved) > 1
        for idx, item in enumerate(self.saved, start=1):
            if multiple:
                log.debug("=== Saved search %d/%d: %s ===", idx, len(self.saved), item.name)
            state = QueryBuilderState.parse(item.query, item.source)
            if state.generate_query() != item.query.strip():
                log.info("Saved search %s is not canonical", item.name)
            states.append(state)

        names = [item.name for item in self.saved]
        if self.output_format == "json":
            return render_json(states, names=names)
        return "\n\n".join(render_text(s, name=n) for s, n in zip(states, names))


@dataclass(slots=True)
class ClassicQueryCommand:
    """Build an ADS query from classic form inputs."""

    authors: Sequence[str] = ()
    objects: str = ""
    title_words: str = ""
    title_logic: QueryLogic = QueryLogic.AND
    abstract_words: str = ""
    abstract_logic: QueryLogic = QueryLogic.AND
    year_from: int | None = None
    year_to: int | None = None
    database: AdsDatabase = AdsDatabase.ALL
    refereed_only: bool = False
    articles_only: bool = False

    def execute(self) -> str:
        authors = "\n".join(self.authors)
        if is_classic_form_empty(
            authors=authors,
            objects=self.objects,
            title_words=self.title_words,
            abstract_words=self.abstract_words,
            year_from=self.year_from,
            year_to=self.year_to,
        ):
            raise ValueError("classic form needs at least one search criterion")
        log.info("Search sources: %s", ", ".join(self.database.source_ids))
        return build_classic_query(
            authors=authors,
            objects=self.objects,
            title_words=self.title_words,
            title_logic=self.title_logic,
            abstract_words=self.abstract_words,
            abstract_logic=self.abstract_logic,
            year_from=self.year_from,
            year_to=self.year_to,
            database=self.database,
            refereed_only=self.refereed_only,
            articles_only=self.articles_only,
        )


@dataclass(slots=True)
class PaperQueryCommand:
    """Build an ADS query from paper identifiers."""

    bibcode: str = ""
    doi: str = ""
    arxiv_id: str = ""

    def execute(self) -> str:
        if is_paper_form_empty(bibcode=self.bibcode, doi=self.doi, arxiv_id=self.arxiv_id):
            raise ValueError("paper form needs a bibcode, DOI or arXiv ID")
        return build_paper_query(bibcode=self.bibcode, doi=self.doi, arxiv_id=self.arxiv_id)
