"""Ranked "did you mean" suggestions using substitution-only matching."""
from __future__ import annotations
from .config import TOP_K
from .errors import InvalidArgument, SuggestionError
from .normalize import normalize
from .search import (
    get_difference_score,
    get_suggestions,
    min_alignment_score,
    rank_candidates,
    score_candidates,
)
from .api import SuggestionProvider, make_provider
from .engine import SuggestionEngine

__all__ = [
    "TOP_K",
    "InvalidArgument",
    "SuggestionError",
    "normalize",
    "get_difference_score",
    "get_suggestions",
    "min_alignment_score",
    "rank_candidates",
    "score_candidates",
    "SuggestionProvider",
    "make_provider",
    "SuggestionEngine",
]
