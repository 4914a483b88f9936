"""Output renderers for command results (console text, JSON)."""

from __future__ import annotations

from PaperQuery.renderers.console import render_text
from PaperQuery.renderers.json import render_json, state_to_dict

__all__ = [
    "render_json",
    "render_text",
    "state_to_dict",
]
