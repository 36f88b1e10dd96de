# suggestions/api.py
from __future__ import annotations
from typing import Protocol, Sequence, List

from .search import get_suggestions


class SuggestionProvider(Protocol):
    def get_suggestions(
        self,
        term: str,
        choices: Sequence[str],
        number_of_suggestions: int,
    ) -> List[str]: ...


class SubstitutionProvider:
    """Substitution-only ranking (see search.get_suggestions)."""

    def get_suggestions(self, term: str, choices: Sequence[str], number_of_suggestions: int) -> List[str]:
        return get_suggestions(term, choices, number_of_suggestions)


_PROVIDERS = {
    "substitution": SubstitutionProvider,
}


def make_provider(name: str = "substitution") -> SuggestionProvider:
    """
    Factory:
      - "substitution" -> SubstitutionProvider
    """
    try:
        return _PROVIDERS[name]()
    except KeyError:
        raise ValueError(f"Unsupported suggestion provider: {name}") from None
