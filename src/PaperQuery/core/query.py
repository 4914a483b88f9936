from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class QuerySource(str, Enum):
    """Search provider whose field vocabulary a query targets."""

    ARXIV = "arxiv"
    ADS = "ads"

    @property
    def display_name(self) -> str:
        return {QuerySource.ARXIV: "arXiv", QuerySource.ADS: "ADS"}[self]


class SearchField(str, Enum):
    """Queryable field tags.

    Every tag belongs to exactly one `QuerySource`. The `*_ALL` tags mean
    "no field restriction" and carry an empty prefix. Prefix, display name and
    the owning source are looked up through `PaperQuery.sources.registry`.
    """

    ARXIV_ALL = "arxiv_all"
    ARXIV_AUTHOR = "arxiv_author"
    ARXIV_TITLE = "arxiv_title"
    ARXIV_ABSTRACT = "arxiv_abstract"
    ARXIV_CATEGORY = "arxiv_category"
    ARXIV_ID = "arxiv_id"

    ADS_ALL = "ads_all"
    ADS_AUTHOR = "ads_author"
    ADS_TITLE = "ads_title"
    ADS_ABSTRACT = "ads_abstract"
    ADS_YEAR = "ads_year"
    ADS_BIBCODE = "ads_bibcode"
    ADS_ARXIV_ID = "ads_arxiv_id"
    ADS_DATABASE = "ads_database"

    @property
    def requires_category_picker(self) -> bool:
        """Whether UIs should offer a category picker instead of free text."""
        return self is SearchField.ARXIV_CATEGORY


class MatchType(str, Enum):
    """How multiple query terms are combined."""

    ALL = "all"
    ANY = "any"

    @property
    def operator(self) -> str:
        return "AND" if self is MatchType.ALL else "OR"

    @property
    def display_name(self) -> str:
        return "Match All" if self is MatchType.ALL else "Match Any"

    @classmethod
    def from_operator(cls, operator: str) -> MatchType:
        return cls.ANY if operator == "OR" else cls.ALL


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Static description of one searchable field.

    Attributes:
        field: Field tag.
        prefix: Query prefix without the trailing colon; empty for the
            default (all fields) field.
        display_name: Label for field pickers.
        placeholder: Example value for the value text box.
        kind: Source-independent meaning of the field (e.g. "author"). Fields
            of the same kind are equivalent across sources.
    """

    field: SearchField
    prefix: str
    display_name: str
    placeholder: str
    kind: str


@dataclass(frozen=True, slots=True)
class QueryTerm:
    """A single `(field, value)` pair.

    `value` is stored unquoted: the delimiting quotes of the query syntax are
    never part of it.
    """

    field: SearchField
    value: str = ""
