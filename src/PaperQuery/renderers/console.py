"""Console text renderers for query builder states."""

from __future__ import annotations

from PaperQuery.querybuilder.state import QueryBuilderState
from PaperQuery.sources.registry import field_spec


def render_text(state: QueryBuilderState, *, name: str | None = None) -> str:
    """Render a state into a human-readable text block.

    Args:
        state: Parsed or constructed state.
        name: Optional saved-search name shown in the header.

    Returns:
        A formatted string ready to be printed.
    """
    header = f"[{state.source.display_name}] {state.match_type.display_name}"
    if name:
        header = f"{name} {header}"
    lines = [header]
    for idx, term in enumerate(state.terms, start=1):
        spec = field_spec(term.field)
        lines.append(f"{idx}. {spec.display_name}: {term.value}")
    lines.append(f"Query: {state.generate_query()}")
    return "\n".join(lines)
