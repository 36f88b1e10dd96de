from __future__ import annotations
import locale
import logging
import math
from typing import Callable, List, Sequence

from . import config as CFG
from .errors import InvalidArgument
from .models import Candidate, ScoredCandidate
from .normalize import normalize

log = logging.getLogger(__name__)


def get_difference_score(term: str, candidate: str) -> int:
    """
    Count the positions where two equal-length strings differ.
    Raises InvalidArgument when the lengths are not the same.
    """
    if len(term) != len(candidate):
        raise InvalidArgument(
            f"strings must have the same length (got {len(term)} and {len(candidate)})"
        )
    return sum(1 for a, b in zip(term, candidate) if a != b)


def min_alignment_score(term: str, candidate: str) -> int | float:
    """
    /* ~~~ Lowest difference score of `term` against every window of `candidate`
       with the same length. Returns math.inf if candidate is shorter. ~~~ */
    """
    tn, cn = len(term), len(candidate)
    if cn < tn:
        return math.inf
    if cn == tn:
        return get_difference_score(term, candidate)

    best: int | float = math.inf
    for i in range(0, cn - tn + 1):
        score = get_difference_score(term, candidate[i:i + tn])
        if score < best:
            best = score
            if best == 0:
                break
    return best


def _collation(mode: str | None = None) -> Callable[[str], object]:
    mode = (mode or CFG.COLLATION).lower()
    if mode == "codepoint":
        return str
    if mode == "locale":
        return locale.strxfrm
    raise ValueError(f"Unsupported collation: {mode!r}")


def score_candidates(term: str, choices: Sequence[str]) -> List[ScoredCandidate]:
    """Score every eligible choice against `term`, keeping input order."""
    term_norm = normalize(term)
    if not term_norm:
        return []

    key_of = _collation()
    tn = len(term_norm)
    scored: List[ScoredCandidate] = []
    for pos, choice in enumerate(choices):
        cand_norm = normalize(choice)
        if len(cand_norm) < tn:
            continue
        scored.append(ScoredCandidate(
            candidate=Candidate(original=choice, normalized=cand_norm, position=pos),
            difference_score=min_alignment_score(term_norm, cand_norm),
            length_diff=abs(len(cand_norm) - tn),
            collation_key=key_of(cand_norm),
        ))
    log.debug("scored %d/%d choices for %r", len(scored), len(choices), term_norm)
    return scored


def rank_candidates(term: str, choices: Sequence[str], number_of_suggestions: int) -> List[ScoredCandidate]:
    """
    Rank choices by (difference score, length diff, normalized form).
    The sort is stable: entries tied on every key keep their input order.
    """
    if number_of_suggestions <= 0:
        return []
    scored = score_candidates(term, choices)
    scored.sort(key=lambda c: c.sort_key)
    return scored[:number_of_suggestions]


def get_suggestions(term: str, choices: Sequence[str], number_of_suggestions: int) -> List[str]:
    """Return up to `number_of_suggestions` original strings from `choices`, best match first."""
    return [c.original for c in rank_candidates(term, choices, number_of_suggestions)]
