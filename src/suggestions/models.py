from __future__ import annotations
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Candidate:
    original: str             # exact string from the choices list
    normalized: str           # normalized form for matching
    position: int             # index in the choices list


@dataclass(frozen=True)
class ScoredCandidate:
    candidate: Candidate
    difference_score: int | float   # math.inf when ineligible
    length_diff: int
    collation_key: Any = None        # tie-break key derived from candidate.normalized

    @property
    def original(self) -> str:
        return self.candidate.original

    @property
    def normalized(self) -> str:
        return self.candidate.normalized

    @property
    def sort_key(self) -> tuple:
        key = self.normalized if self.collation_key is None else self.collation_key
        return (self.difference_score, self.length_diff, key)

    def as_row(self) -> dict:
        return {
            "suggestion": self.original,
            "normalized": self.normalized,
            "difference_score": self.difference_score,
            "length_diff": self.length_diff,
        }
