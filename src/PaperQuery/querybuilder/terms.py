"""Clause -> `QueryTerm` conversion."""

from __future__ import annotations

from PaperQuery.core.query import QuerySource, QueryTerm
from PaperQuery.querybuilder.splitter import QUOTE
from PaperQuery.sources.registry import default_field, field_for


def find_unquoted(text: str, target: str) -> int:
    """Return the index of the first ``target`` char outside quotes, or -1."""
    in_quote = False
    for idx, ch in enumerate(text):
        if ch == QUOTE:
            in_quote = not in_quote
        elif ch == target and not in_quote:
            return idx
    return -1


def unwrap_quotes(value: str) -> str:
    """Strip one matching pair of quotes spanning the whole value.

    The pair only counts as matching when no other quote sits between them;
    anything else is returned unchanged.
    """
    if len(value) >= 2 and value.startswith(QUOTE) and value.endswith(QUOTE) and QUOTE not in value[1:-1]:
        return value[1:-1]
    return value


def parse_term(clause: str, source: QuerySource) -> QueryTerm:
    """Parse one clause into a term.

    ``author: Einstein`` becomes ``(author, "Einstein")``. A clause without an
    unquoted colon, or whose prefix is not registered for ``source``, becomes
    the value of the default field as a whole.

    Args:
        clause: Trimmed clause text.
        source: Active source.

    Returns:
        Parsed term with an unquoted value.
    """
    field = default_field(source)
    value = clause

    colon = find_unquoted(clause, ":")
    if colon >= 0:
        candidate = field_for(source, clause[:colon])
        if candidate is not field:
            field = candidate
            value = clause[colon + 1 :].lstrip()

    return QueryTerm(field=field, value=unwrap_quotes(value))
