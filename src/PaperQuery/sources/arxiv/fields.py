"""arXiv field vocabulary.

Prefixes follow the arXiv API `search_query` syntax:

- (none) -> all fields
- au     -> author
- ti     -> title
- abs    -> abstract
- cat    -> category (e.g. cs.LG, astro-ph.CO)
- id     -> arXiv identifier
"""

from __future__ import annotations

from typing import Final

from PaperQuery.core.query import FieldSpec, SearchField


ARXIV_FIELDS: Final[tuple[FieldSpec, ...]] = (
    FieldSpec(SearchField.ARXIV_ALL, "", "All Fields", "search terms", "all"),
    FieldSpec(SearchField.ARXIV_AUTHOR, "au", "Author", "Einstein", "author"),
    FieldSpec(SearchField.ARXIV_TITLE, "ti", "Title", "relativity", "title"),
    FieldSpec(SearchField.ARXIV_ABSTRACT, "abs", "Abstract", "quantum mechanics", "abstract"),
    FieldSpec(SearchField.ARXIV_CATEGORY, "cat", "Category", "cs.LG", "category"),
    FieldSpec(SearchField.ARXIV_ID, "id", "arXiv ID", "2301.12345", "arxiv_id"),
)
