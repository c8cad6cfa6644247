"""
In-memory lexical store.

Same interface as PostgresLexicalStore. Relevance is a plain term-frequency
score: the number of query-word occurrences in the text divided by the
text's word count. Only texts sharing at least one word with the query match.

Dependencies: re (stdlib)
System role: Local/dev lexical store and test double
"""

import re

from chunk_search.boundary.db.lexical_schemas import LexicalHit, StoredText

_WORD_RE = re.compile(r"\w+", re.UNICODE)


def _words(text: str) -> list[str]:
    return _WORD_RE.findall(text.lower())


class InMemoryLexicalStore:
    """List-backed lexical store keyed by exact text."""

    def __init__(self) -> None:
        self._rows: list[StoredText] = []
        self._texts: set[str] = set()

    async def start(self) -> None:
        return None

    async def stop(self) -> None:
        return None

    async def insert_if_absent(
        self,
        text: str,
        url: str | None = None,
        index: int | None = None,
    ) -> bool:
        if text in self._texts:
            return False
        self._texts.add(text)
        self._rows.append(StoredText(text=text, url=url, index=index))
        return True

    async def ranked_search(self, query: str, top_k: int) -> list[LexicalHit]:
        terms = set(_words(query))
        if not terms:
            return []

        hits = []
        for row in self._rows:
            words = _words(row.text)
            matches = sum(1 for word in words if word in terms)
            if matches:
                hits.append(LexicalHit(text=row.text, score=matches / len(words)))
        hits.sort(key=lambda hit: hit.score, reverse=True)
        return hits[:top_k]

    async def fetch_range(self, url: str, index: int, window: int) -> list[StoredText]:
        rows = [
            row for row in self._rows
            if row.url == url
            and row.index is not None
            and index - window <= row.index <= index + window
        ]
        return sorted(rows, key=lambda row: row.index)

    async def count(self) -> int:
        return len(self._rows)
