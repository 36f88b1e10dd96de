"""Exceptions raised by the suggestion engine."""
from __future__ import annotations


class SuggestionError(Exception):
    """Base exception for the suggestions package."""


class InvalidArgument(SuggestionError, ValueError):
    """A low-level scorer was called outside its preconditions."""
