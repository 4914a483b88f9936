"""Field registry: per-source field tables and prefix lookups."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from PaperQuery.core.query import FieldSpec, QuerySource, SearchField
from PaperQuery.sources.ads.fields import ADS_FIELDS
from PaperQuery.sources.arxiv.fields import ARXIV_FIELDS


_FIELDS_BY_SOURCE: Mapping[QuerySource, tuple[FieldSpec, ...]] = MappingProxyType(
    {
        QuerySource.ARXIV: ARXIV_FIELDS,
        QuerySource.ADS: ADS_FIELDS,
    }
)

_SPEC_BY_FIELD: Mapping[SearchField, FieldSpec] = MappingProxyType(
    {spec.field: spec for specs in _FIELDS_BY_SOURCE.values() for spec in specs}
)

_SOURCE_BY_FIELD: Mapping[SearchField, QuerySource] = MappingProxyType(
    {spec.field: source for source, specs in _FIELDS_BY_SOURCE.items() for spec in specs}
)

# Lower-cased prefix -> field, per source. The default field has no prefix and
# is never reachable through this table.
_FIELD_BY_PREFIX: Mapping[QuerySource, Mapping[str, SearchField]] = MappingProxyType(
    {
        source: MappingProxyType({spec.prefix.lower(): spec.field for spec in specs if spec.prefix})
        for source, specs in _FIELDS_BY_SOURCE.items()
    }
)


def supported_source_names() -> tuple[str, ...]:
    """Return all source names known to the registry.

    Returns:
        tuple[str, ...]: Source names in registry order.
    """
    return tuple(source.value for source in _FIELDS_BY_SOURCE)


def resolve_source(name: str | QuerySource) -> QuerySource:
    """Resolve a source name (case-insensitive) to a `QuerySource`.

    Args:
        name: Source identifier such as ``"ads"`` or ``"arXiv"``.

    Returns:
        QuerySource: Matching source.

    Raises:
        ValueError: If ``name`` is not registered.
    """
    if isinstance(name, QuerySource):
        return name
    key = str(name).strip().lower()
    for source in _FIELDS_BY_SOURCE:
        if source.value == key:
            return source
    raise ValueError(f"Unsupported query source: {name}")


def fields_for(source: QuerySource) -> tuple[FieldSpec, ...]:
    """Return the field table of ``source`` in presentation order."""
    return _FIELDS_BY_SOURCE[source]


def default_field(source: QuerySource) -> SearchField:
    """Return the "all fields" tag of ``source``."""
    return _FIELDS_BY_SOURCE[source][0].field


def field_spec(field: SearchField) -> FieldSpec:
    """Return static metadata for ``field``."""
    return _SPEC_BY_FIELD[field]


def source_of(field: SearchField) -> QuerySource:
    """Return the source that owns ``field``."""
    return _SOURCE_BY_FIELD[field]


def prefix_for(source: QuerySource, field: SearchField) -> str:
    """Return the query prefix (without colon) of ``field``.

    Args:
        source: Active source.
        field: Field tag; must belong to ``source``.

    Returns:
        str: Prefix, or an empty string for the default field.

    Raises:
        ValueError: If ``field`` belongs to another source.
    """
    if _SOURCE_BY_FIELD[field] is not source:
        raise ValueError(f"Field {field.value} does not belong to source {source.value}")
    return _SPEC_BY_FIELD[field].prefix


def field_for(source: QuerySource, token: str) -> SearchField:
    """Look up the field named by a prefix token.

    Matching is case-insensitive; the token must equal the prefix exactly
    otherwise (``"author "`` does not name the author field).

    Args:
        source: Active source.
        token: Candidate prefix, without the colon.

    Returns:
        SearchField: Matching field, or the default field when nothing matches.
    """
    return _FIELD_BY_PREFIX[source].get(token.lower(), default_field(source))
