"""ADS query builders for the search forms.

Two forms are supported:

- classic: authors / objects / title words / abstract words / year range plus
  collection and property filters;
- paper: lookup by bibcode, DOI or arXiv identifier.
"""

from __future__ import annotations

from enum import Enum


class QueryLogic(str, Enum):
    """Boolean operator between words of one form field."""

    AND = "AND"
    OR = "OR"

    @property
    def display_name(self) -> str:
        return self.value


class AdsDatabase(str, Enum):
    """ADS collection selector."""

    ASTRONOMY = "astronomy"
    PHYSICS = "physics"
    ARXIV = "arxiv"
    ALL = "all"

    @property
    def display_name(self) -> str:
        return {
            AdsDatabase.ASTRONOMY: "Astronomy",
            AdsDatabase.PHYSICS: "Physics",
            AdsDatabase.ARXIV: "arXiv Preprints",
            AdsDatabase.ALL: "All Databases",
        }[self]

    @property
    def source_ids(self) -> tuple[str, ...]:
        """Sources to query for this selection.

        Collection filtering happens inside the ADS query; arXiv preprints are
        also fetched from arXiv directly.
        """
        if self is AdsDatabase.ARXIV:
            return ("arxiv", "ads")
        return ("ads",)


_DATABASE_FILTERS: dict[AdsDatabase, str] = {
    AdsDatabase.ASTRONOMY: "collection:astronomy",
    AdsDatabase.PHYSICS: "collection:physics",
    AdsDatabase.ARXIV: "property:eprint",
}


def _words_clause(prefix: str, text: str, logic: QueryLogic) -> str:
    words = text.split()
    if not words:
        return ""
    if len(words) == 1:
        return f"{prefix}:{words[0]}"
    joined = f" {logic.value} ".join(words)
    return f"{prefix}:({joined})"


def _year_clause(year_from: int | None, year_to: int | None) -> str:
    if year_from is not None and year_to is not None:
        if year_from == year_to:
            return f"year:{year_from}"
        return f"year:{year_from}-{year_to}"
    if year_from is not None:
        return f"year:{year_from}-"
    if year_to is not None:
        return f"year:-{year_to}"
    return ""


def build_classic_query(
    *,
    authors: str = "",
    objects: str = "",
    title_words: str = "",
    title_logic: QueryLogic = QueryLogic.AND,
    abstract_words: str = "",
    abstract_logic: QueryLogic = QueryLogic.AND,
    year_from: int | None = None,
    year_to: int | None = None,
    database: AdsDatabase = AdsDatabase.ALL,
    refereed_only: bool = False,
    articles_only: bool = False,
) -> str:
    """Build an ADS query from classic form inputs.

    Args:
        authors: One author per line; each becomes ``author:"..."``.
        objects: SIMBAD/NED object names.
        title_words: Whitespace-separated title words.
        title_logic: Operator between title words.
        abstract_words: Whitespace-separated abstract/keyword words.
        abstract_logic: Operator between abstract words.
        year_from: First publication year, inclusive.
        year_to: Last publication year, inclusive.
        database: Collection filter.
        refereed_only: Restrict to refereed papers.
        articles_only: Restrict to journal articles.

    Returns:
        ADS query; parts are separated by a single space (implicit AND).
    """
    parts: list[str] = []

    author_lines = [line.strip() for line in authors.split("\n") if line.strip()]
    if author_lines:
        parts.append(" AND ".join(f'author:"{name}"' for name in author_lines))

    if objects.strip():
        parts.append(f'object:"{objects.strip()}"')

    for clause in (
        _words_clause("title", title_words, title_logic),
        _words_clause("abs", abstract_words, abstract_logic),
        _year_clause(year_from, year_to),
        _DATABASE_FILTERS.get(database, ""),
    ):
        if clause:
            parts.append(clause)

    if refereed_only:
        parts.append("property:refereed")
    if articles_only:
        parts.append("doctype:article")

    return " ".join(parts)


def build_paper_query(*, bibcode: str = "", doi: str = "", arxiv_id: str = "") -> str:
    """Build an ADS query matching any of the given identifiers.

    Both old (``astro-ph/0702089``) and new (``1108.0669``) arXiv identifiers
    are passed through as typed.
    """
    parts: list[str] = []
    if bibcode.strip():
        parts.append(f"bibcode:{bibcode.strip()}")
    if doi.strip():
        parts.append(f"doi:{doi.strip()}")
    if arxiv_id.strip():
        parts.append(f"arXiv:{arxiv_id.strip()}")
    return " OR ".join(parts)


def is_classic_form_empty(
    *,
    authors: str = "",
    objects: str = "",
    title_words: str = "",
    abstract_words: str = "",
    year_from: int | None = None,
    year_to: int | None = None,
) -> bool:
    """Return True when the classic form has no search criteria."""
    return not (
        authors.strip()
        or objects.strip()
        or title_words.strip()
        or abstract_words.strip()
        or year_from is not None
        or year_to is not None
    )


def is_paper_form_empty(*, bibcode: str = "", doi: str = "", arxiv_id: str = "") -> bool:
    """Return True when the paper form has no identifier."""
    return not (bibcode.strip() or doi.strip() or arxiv_id.strip())
