"""Query domain configuration: default source and saved searches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from PaperQuery.config.common import (
    expect_list,
    expect_str,
    get_optional_value,
    get_required_value,
    get_section,
)
from PaperQuery.core.query import QuerySource
from PaperQuery.sources.registry import resolve_source

_ALLOWED_SAVED_KEYS = {"NAME", "SOURCE", "QUERY"}


@dataclass(frozen=True, slots=True)
class SavedSearch:
    """A stored query string and the source it targets."""

    name: str
    source: QuerySource
    query: str


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """Store validated query-builder settings."""

    default_source: QuerySource = QuerySource.ADS
    saved: tuple[SavedSearch, ...] = ()


def load_query(raw: Mapping[str, Any]) -> QueryConfig:
    """Load query domain config from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed query configuration.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If sources are unknown or saved entries are incomplete.
    """
    section = get_section(raw, "query")
    default_source = _parse_source(
        get_optional_value(section, "default_source", QuerySource.ADS.value),
        "query.default_source",
    )

    saved_obj = raw.get("saved")
    saved: tuple[SavedSearch, ...] = ()
    if saved_obj is not None:
        items = expect_list(saved_obj, "saved")
        saved = tuple(
            parse_saved_search(item, f"saved[{idx}]", default_source=default_source)
            for idx, item in enumerate(items)
        )
    return QueryConfig(default_source=default_source, saved=saved)


def check_query(config: QueryConfig) -> None:
    """Validate query domain constraints.

    Raises:
        ValueError: If saved search names are empty or duplicated.
    """
    seen: set[str] = set()
    for idx, item in enumerate(config.saved):
        if not item.name:
            raise ValueError(f"saved[{idx}].NAME must not be empty")
        if item.name in seen:
            raise ValueError(f"saved has duplicate NAME: {item.name}")
        seen.add(item.name)


def parse_saved_search(value: Any, config_key: str, *, default_source: QuerySource) -> SavedSearch:
    """Parse one ``{NAME, SOURCE?, QUERY}`` mapping.

    Args:
        value: Saved search mapping.
        config_key: Full key path used in error messages.
        default_source: Source used when ``SOURCE`` is omitted.

    Returns:
        Parsed saved search.

    Raises:
        TypeError: If the entry shape/types are invalid.
        ValueError: If keys are unknown or required keys are missing.
    """
    if not isinstance(value, Mapping):
        raise TypeError(f"{config_key} must be an object")

    unknown = {str(k) for k in value.keys()} - _ALLOWED_SAVED_KEYS
    if unknown:
        raise ValueError(f"{config_key} has unknown keys: {sorted(unknown)}")

    name = expect_str(get_required_value(value, "NAME", f"{config_key}.NAME"), f"{config_key}.NAME").strip()
    query = expect_str(get_required_value(value, "QUERY", f"{config_key}.QUERY"), f"{config_key}.QUERY")
    source = default_source
    if "SOURCE" in value:
        source = _parse_source(value["SOURCE"], f"{config_key}.SOURCE")
    return SavedSearch(name=name, source=source, query=query)


def _parse_source(value: Any, config_key: str) -> QuerySource:
    name = expect_str(value, config_key)
    try:
        return resolve_source(name)
    except ValueError as e:
        raise ValueError(f"{config_key} has unknown source: {name}") from e
