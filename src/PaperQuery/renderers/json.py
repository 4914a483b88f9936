"""JSON renderers for query builder states."""

from __future__ import annotations

import json
from typing import Any, Sequence

from PaperQuery.querybuilder.state import QueryBuilderState
from PaperQuery.sources.registry import field_spec


def state_to_dict(state: QueryBuilderState, *, name: str | None = None) -> dict[str, Any]:
    """Convert a state into a JSON-serializable dict."""
    payload: dict[str, Any] = {
        "source": state.source.value,
        "match_type": state.match_type.value,
        "terms": [
            {
                "field": term.field.value,
                "prefix": field_spec(term.field).prefix,
                "value": term.value,
            }
            for term in state.terms
        ],
        "query": state.generate_query(),
    }
    if name is not None:
        payload = {"name": name, **payload}
    return payload


def render_json(states: Sequence[QueryBuilderState], *, names: Sequence[str] | None = None) -> str:
    """Render states as a pretty-printed JSON array.

    Args:
        states: States to render.
        names: Optional names, parallel to ``states``.

    Returns:
        JSON text.
    """
    labels = list(names) if names is not None else [None] * len(states)
    payload = [state_to_dict(s, name=n) for s, n in zip(states, labels)]
    return json.dumps(payload, ensure_ascii=False, indent=2)
