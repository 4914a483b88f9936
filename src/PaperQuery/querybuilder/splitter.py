"""Quote-aware clause splitter.

Divides a raw query string into clauses joined by the `AND` / `OR`
combinators. Double quotes toggle an in-quote flag; combinators inside a
quoted span are literal text. The grammar has no escape sequence for quotes.
"""

from __future__ import annotations

import re

from PaperQuery.core.query import MatchType


QUOTE = '"'
_COMBINATORS = (" AND ", " OR ")
_RE_FIELD_PATTERN = re.compile(r"\w+:")


def repair_outer_quotes(text: str) -> str:
    """Strip one layer of quotes wrapped around a whole field-qualified query.

    Repairs stored queries of the shape ``"author: Clark, Susan"`` into
    ``author: Clark, Susan``. Only a matching pair is removed: when the
    interior holds further quotes (``"author:x" AND "y z"``) the outer
    characters belong to separate spans and the text is returned unchanged.

    Args:
        text: Trimmed query text.

    Returns:
        Repaired text.
    """
    if len(text) >= 2 and text.startswith(QUOTE) and text.endswith(QUOTE):
        interior = text[1:-1]
        if QUOTE not in interior and _RE_FIELD_PATTERN.search(interior):
            return interior.strip()
    return text


def split_clauses(text: str) -> tuple[MatchType, list[str]]:
    """Split query text into trimmed clauses.

    The first combinator found decides the match type of the whole query;
    later combinators of the other kind still separate clauses.

    Args:
        text: Raw query text.

    Returns:
        ``(match_type, clauses)``. Empty clauses are dropped; match type
        defaults to `MatchType.ALL` when no combinator occurs.
    """
    remaining = repair_outer_quotes(text.strip())

    match_type: MatchType | None = None
    clauses: list[str] = []
    start = 0
    i = 0
    in_quote = False
    n = len(remaining)

    while i < n:
        ch = remaining[i]
        if ch == QUOTE:
            in_quote = not in_quote
            i += 1
            continue
        if not in_quote and ch == " ":
            combinator = _combinator_at(remaining, i)
            if combinator:
                clauses.append(remaining[start:i])
                if match_type is None:
                    match_type = MatchType.from_operator(combinator.strip())
                i += len(combinator)
                start = i
                continue
        i += 1
    clauses.append(remaining[start:])

    trimmed = [c.strip() for c in clauses]
    return match_type or MatchType.ALL, [c for c in trimmed if c]


def _combinator_at(text: str, index: int) -> str:
    """Return the combinator starting at ``index``, or an empty string."""
    for combinator in _COMBINATORS:
        if text.startswith(combinator, index):
            return combinator
    return ""
