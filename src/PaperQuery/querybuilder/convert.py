"""Field mapping between sources.

Fields of the same kind (author, title, ...) are equivalent across sources.
A field with no counterpart in the target source falls back to the target's
default field.
"""

from __future__ import annotations

from typing import Iterable

from PaperQuery.core.query import QuerySource, QueryTerm, SearchField
from PaperQuery.sources.registry import default_field, field_spec, fields_for, source_of


def map_field(field: SearchField, target: QuerySource) -> SearchField:
    """Return the field of ``target`` equivalent to ``field``.

    Args:
        field: Field of any source.
        target: Source to map into.

    Returns:
        SearchField: Equivalent field, or the default field of ``target``.
    """
    if source_of(field) is target:
        return field
    kind = field_spec(field).kind
    for spec in fields_for(target):
        if spec.kind == kind:
            return spec.field
    return default_field(target)


def convert_terms(terms: Iterable[QueryTerm], target: QuerySource) -> tuple[QueryTerm, ...]:
    """Map every term onto ``target`` keeping values and order."""
    return tuple(QueryTerm(field=map_field(t.field, target), value=t.value) for t in terms)
