from __future__ import annotations
import logging
import os
from typing import Iterable, List

from . import config as CFG

log = logging.getLogger(__name__)


def _iter_choice_files(roots: Iterable[str]) -> Iterable[str]:
    """Yield choice files: a root file as-is, or matching files under a root folder (sorted)."""
    for root in roots:
        if not os.path.exists(root):
            raise FileNotFoundError(root)
        if os.path.isfile(root):
            yield root
            continue
        found: List[str] = []
        for dirpath, _, filenames in os.walk(root):
            for fn in filenames:
                if fn.lower().endswith(tuple(CFG.CHOICE_FILE_EXTS)):
                    found.append(os.path.join(dirpath, fn))
        yield from sorted(found)


def _parse_lines(lines: Iterable[str]) -> Iterable[str]:
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith(CFG.COMMENT_PREFIX):
            continue
        yield line


def load_choices(roots: Iterable[str]) -> List[str]:
    """
    Read one choice per non-blank line from every file found under `roots`.
    Lines starting with COMMENT_PREFIX are skipped.
    """
    choices: List[str] = []
    file_count = 0
    for path in _iter_choice_files(roots):
        try:
            with open(path, "r", encoding="utf-8", errors="ignore") as f:
                choices.extend(_parse_lines(f))
        except OSError as exc:
            log.warning("Skipping unreadable choice file %s: %s", path, exc)
            continue
        file_count += 1
    log.info("Loaded %d choices from %d files", len(choices), file_count)
    return choices
