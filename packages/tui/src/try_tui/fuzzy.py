"""
Fuzzy matching — ranks entries against a typed query.

Matches if all query characters appear in order (not necessarily consecutive).
Higher score = better match: word-boundary hits, tight gaps, matches near the
start and short candidates all score higher.
"""
from __future__ import annotations

import heapq
import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Mapping, NamedTuple, TypeVar

T = TypeVar("T")

# 2 / sqrt(gap + 1) for the common small gaps
_PROXIMITY_TABLE_SIZE = 65
_PROXIMITY = tuple(2.0 / math.sqrt(gap + 1) for gap in range(_PROXIMITY_TABLE_SIZE))

_BOUNDARY_RE = re.compile(r"[^a-z0-9]")


def proximity_bonus(gap: int) -> float:
    """Bonus for a match that follows the previous one after `gap` skipped chars."""
    if gap < _PROXIMITY_TABLE_SIZE:
        return _PROXIMITY[gap]
    return 2.0 / math.sqrt(gap + 1)


@dataclass(frozen=True)
class Entry(Generic[T]):
    data: T
    text: str
    text_lower: str
    base_score: float = 0.0


class Match(NamedTuple):
    data: Any
    positions: tuple[int, ...]
    score: float


def score_entry(entry: Entry, query: str) -> tuple[float, tuple[int, ...]] | None:
    """
    Score one entry against an already-lowercased query.

    Returns (score, positions) or None when the query is not a subsequence
    of the entry's text.
    """
    if not query:
        return entry.base_score, ()

    text = entry.text_lower
    score = entry.base_score
    positions: list[int] = []
    last = -1

    for ch in query:
        pos = text.find(ch, last + 1)
        if pos == -1:
            return None
        positions.append(pos)
        score += 1.0
        if pos == 0 or _BOUNDARY_RE.match(text[pos - 1]):
            score += 1.0
        if last >= 0:
            score += proximity_bonus(pos - last - 1)
        last = pos

    # Density: reward queries that finish early in the text
    score *= len(query) / (last + 1)
    # Length penalty
    score *= 10.0 / (len(entry.text) + 10.0)
    return score, tuple(positions)


def _score_key(match: Match) -> float:
    return match.score


class MatchResult:
    """
    Lazy ranked view of one query over a Fuzzy corpus.

    Nothing is scored until iteration, and iterating again rescans.
    """

    def __init__(self, entries: list[Entry], query: str, limit: int | None = None) -> None:
        self._entries = entries
        self._query = query
        self._limit = limit

    @property
    def query(self) -> str:
        return self._query

    def limit(self, n: int | None) -> "MatchResult":
        """Keep only the n best matches."""
        if n is not None:
            n = max(n, 0)
        return MatchResult(self._entries, self._query, n)

    def _matches(self) -> list[Match]:
        query = self._query.lower()
        found: list[Match] = []
        for entry in self._entries:
            scored = score_entry(entry, query)
            if scored is not None:
                score, positions = scored
                found.append(Match(entry.data, positions, score))
        return found

    def __iter__(self) -> Iterator[Match]:
        found = self._matches()
        if self._limit is not None and self._limit < len(found):
            # nlargest breaks ties by input order, like the stable sort below
            ranked = heapq.nlargest(self._limit, found, key=_score_key)
        else:
            ranked = sorted(found, key=_score_key, reverse=True)
        return iter(ranked)


def _default_text(item: Any) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, Mapping):
        return str(item.get("text") or "")
    raise TypeError(f"cannot get match text from {type(item).__name__}; pass get_text")


def _default_base_score(item: Any) -> float:
    if isinstance(item, Mapping):
        return float(item.get("base_score") or 0.0)
    return 0.0


class Fuzzy(Generic[T]):
    """
    Reusable matcher over a fixed corpus.

    Entries are plain strings or mappings with "text" and optional
    "base_score" keys unless get_text / get_base_score say otherwise.
    Lowercased text is computed once here, not per query.
    """

    def __init__(
        self,
        entries: Iterable[T],
        get_text: Callable[[T], str] | None = None,
        get_base_score: Callable[[T], float] | None = None,
    ) -> None:
        text_of = get_text or _default_text
        base_of = get_base_score or _default_base_score
        self._entries: list[Entry[T]] = []
        for item in entries:
            text = text_of(item)
            self._entries.append(Entry(item, text, text.lower(), float(base_of(item))))

    @property
    def entries(self) -> tuple[Entry[T], ...]:
        return tuple(self._entries)

    def match(self, query: str | None) -> MatchResult:
        return MatchResult(self._entries, query or "")

    def __len__(self) -> int:
        return len(self._entries)
