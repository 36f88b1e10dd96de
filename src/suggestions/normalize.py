from __future__ import annotations
import re

# /* ~~~ everything outside ASCII lowercase letters and digits is dropped ~~~ */
_DROP = re.compile(r"[^a-z0-9]")


def normalize(text: str) -> str:
    """Lower-case `text` and strip every character that is not a-z or 0-9."""
    return _DROP.sub("", text.lower())
