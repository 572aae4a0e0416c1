"""Smart-case fuzzy subsequence matching and ranking.

A query matches when all of its characters appear in order in the candidate.
Lowercase-only queries ignore case; any uppercase character makes the match
case-sensitive.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .desktop_entry import DesktopEntry

WORD_BOUNDARY_CHARS = " |/_-."


@dataclass(frozen=True)
class RankedMatch:
    score: int
    key: str
    entry: DesktopEntry


def is_case_sensitive(query: str) -> bool:
    return any(ch.isupper() for ch in query)


def _fold_case(text: str) -> str:
    """Lowercase ``text`` one character at a time, keeping its length."""
    out: list[str] = []
    for ch in text:
        lowered = ch.lower()
        out.append(lowered if len(lowered) == 1 else ch)
    return "".join(out)


def _score_from(query: str, candidate: str, first_idx: int) -> int | None:
    score = 0
    prev_idx = -1
    run = 0
    idx = first_idx
    for pos, needle in enumerate(query):
        if pos > 0:
            idx = candidate.find(needle, prev_idx + 1)
            if idx < 0:
                return None
        if idx == prev_idx + 1:
            run += 1
            score += 20 + min(16, run * 4)
        else:
            gap = idx - prev_idx - 1
            run = 0
            score -= min(40, gap * 2)
        if idx == 0 or candidate[idx - 1] in WORD_BOUNDARY_CHARS:
            score += 35
        prev_idx = idx
    return score


def fuzzy_score(query: str, candidate: str, case_sensitive: bool | None = None) -> int | None:
    """Score ``candidate`` against ``query``; ``None`` means no match.

    Consecutive hits, hits at word starts and an early first hit score higher;
    gaps and long candidates score lower. Every occurrence of the first query
    character is tried as an anchor and the best alignment wins.
    """
    if not query:
        return 0
    if case_sensitive is None:
        case_sensitive = is_case_sensitive(query)
    if not case_sensitive:
        query = _fold_case(query)
        candidate = _fold_case(candidate)

    best: int | None = None
    first_idx = candidate.find(query[0])
    while first_idx >= 0:
        score = _score_from(query, candidate, first_idx)
        if score is None:
            # Later anchors leave even less text for the remaining characters.
            break
        if best is None or score > best:
            best = score
        first_idx = candidate.find(query[0], first_idx + 1)

    if best is None:
        return None
    return best - len(candidate) // 5


def rank(query: str, items: Iterable[tuple[str, DesktopEntry]]) -> list[RankedMatch]:
    """Return matching items best-first.

    ``items`` must already be in key order; equal scores keep that order.
    """
    case_sensitive = is_case_sensitive(query)
    matches: list[RankedMatch] = []
    for key, entry in items:
        score = fuzzy_score(query, key, case_sensitive=case_sensitive)
        if score is None:
            continue
        matches.append(RankedMatch(score=score, key=key, entry=entry))
    matches.sort(key=lambda match: -match.score)
    return matches


def top_match(matches: list[RankedMatch]) -> RankedMatch | None:
    """Return the only match eligible for launching, the best one."""
    return matches[0] if matches else None


__all__ = ["RankedMatch", "fuzzy_score", "is_case_sensitive", "rank", "top_match"]
