"""
Shared clean-ups: header normalisation, bullet stripping, list de-duplication.
"""
from __future__ import annotations
import re
from typing import Iterable, List

BULLETS = ("•", "-", "*")

_NON_ALNUM = re.compile(r"[^a-z0-9 ]")
_SPACES    = re.compile(r"\s+")


# ───────────────────────────────────────── helpers ──
def normalize_header(s: str) -> str:
    """Lower-case, '&' → 'and', drop punctuation, collapse whitespace.

    Idempotent, so already-normalised names can be passed back in.
    """
    s = s.lower().replace("&", "and")
    # whitespace first so tabs/newlines survive as separators
    s = _SPACES.sub(" ", s)
    s = _NON_ALNUM.sub("", s)
    return _SPACES.sub(" ", s).strip()


def is_bullet(line: str) -> bool:
    return line.startswith(BULLETS)


def strip_bullet(line: str) -> str:
    """Drop a single leading bullet glyph and surrounding whitespace."""
    line = line.strip()
    if is_bullet(line):
        line = line[1:]
    return line.strip()


def clean_list(items: Iterable[str] | None) -> List[str]:
    """Trim, drop empties, de-duplicate keeping first occurrence."""
    if not items:
        return []
    return list(dict.fromkeys(x.strip() for x in items if x and x.strip()))
