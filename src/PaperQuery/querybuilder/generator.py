"""Query generator.

Serializes a match type and an ordered list of terms into canonical query
text:

- a term is emitted as ``prefix:value``, or just ``value`` for the default
  field;
- values containing a space or a comma are wrapped in double quotes, and
  so are values the parser would trim (edge tabs, newlines) and the empty
  default-field value (``""``);
- values that already contain a double quote are emitted verbatim, since the
  syntax has no escape for quotes inside quotes;
- a default-field value that would read back as field-qualified
  (``author:x``) is quoted so it stays in the default field;
- every term is emitted, an empty qualified value as ``prefix:``;
- terms are joined with `` AND `` / `` OR ``.
"""

from __future__ import annotations

from typing import Iterable

from PaperQuery.core.query import MatchType, QuerySource, QueryTerm
from PaperQuery.querybuilder.splitter import QUOTE
from PaperQuery.sources.registry import default_field, field_for, prefix_for


def _needs_quotes(value: str, *, qualified: bool) -> bool:
    if " " in value or "," in value:
        return True
    # clauses and post-colon text are trimmed on parse
    if value != value.strip():
        return True
    return not value and not qualified


def _reads_as_field(value: str, source: QuerySource) -> bool:
    colon = value.find(":")
    if colon < 0:
        return False
    return field_for(source, value[:colon]) is not default_field(source)


def format_value(value: str, *, source: QuerySource, qualified: bool) -> str:
    """Return ``value`` quoted or bare, as it should appear in a query.

    Args:
        value: Unquoted term value.
        source: Active source.
        qualified: Whether the value follows a field prefix.

    Returns:
        Value ready to be emitted.
    """
    if QUOTE in value:
        return value
    if _needs_quotes(value, qualified=qualified) or (not qualified and _reads_as_field(value, source)):
        return f"{QUOTE}{value}{QUOTE}"
    return value


def format_term(term: QueryTerm, source: QuerySource) -> str:
    """Render a single term."""
    prefix = prefix_for(source, term.field)
    formatted = format_value(term.value, source=source, qualified=bool(prefix))
    if prefix:
        return f"{prefix}:{formatted}"
    return formatted


def generate_query(source: QuerySource, match_type: MatchType, terms: Iterable[QueryTerm]) -> str:
    """Render terms into canonical query text.

    Args:
        source: Source whose prefixes are used.
        match_type: Combinator used between terms.
        terms: Terms in emission order.

    Returns:
        Canonical query string; empty for no terms.
    """
    parts = [format_term(t, source) for t in terms]
    if not parts:
        return ""
    if len(parts) == 1:
        return parts[0]
    return f" {match_type.operator} ".join(parts)
