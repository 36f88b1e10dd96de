# suggestions/engine.py
from __future__ import annotations

import os
import logging
from typing import Iterable, List, Optional, Sequence

from . import config as CFG
from .loader import load_choices
from .search import get_suggestions, rank_candidates

log = logging.getLogger(__name__)


class SuggestionEngine:
    """
    Thin orchestration layer that glues together:
      - choice loading (loader.load_choices) from files/folders,
      - the pure ranking pipeline (search.rank_candidates).

    Public API (used by CLI/Flask/GUI):
      * build(roots, choices=...): load choices -> keep them for queries
      * suggest(term, top_k):     ranked original strings from loaded choices
      * explain(term, top_k):     ranked rows with their scores
      * get_suggestions(...):     stateless ranking against explicit choices
      * shutdown():               drop loaded state
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self._choices: Optional[tuple[str, ...]] = None

    @property
    def choices(self) -> tuple[str, ...]:
        return self._choices or ()

    # /* ~~~ Load choices from source files and/or an explicit list ~~~ */
    def build(
        self,
        roots: Optional[Iterable[str]] = None,
        *,
        choices: Optional[Iterable[str]] = None,
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["SUGGESTIONS_VERBOSE"] = "1"

        roots = list(roots or [])
        if not roots and choices is None:
            raise ValueError("build(): roots or choices are required")

        loaded: List[str] = []
        if roots:
            log.info("Loading choices from %s", roots)
            loaded.extend(load_choices(roots))
        if choices is not None:
            loaded.extend(choices)

        self._choices = tuple(loaded)
        log.info("Engine build() complete: choices=%d", len(self._choices))

    # ------------- query -------------

    # /* ~~~ Rank the loaded choices for a user term ~~~ */
    def suggest(self, term: str, *, top_k: Optional[int] = None) -> List[str]:
        return get_suggestions(term, self._require_choices(), CFG.TOP_K if top_k is None else top_k)

    def explain(self, term: str, *, top_k: Optional[int] = None) -> List[dict]:
        k = CFG.TOP_K if top_k is None else top_k
        return [c.as_row() for c in rank_candidates(term, self._require_choices(), k)]

    def get_suggestions(self, term: str, choices: Sequence[str], number_of_suggestions: int) -> List[str]:
        return get_suggestions(term, choices, number_of_suggestions)

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self._choices = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require_choices(self) -> tuple[str, ...]:
        if self._choices is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return self._choices
