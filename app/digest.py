"""
Bounded digest of section text for the structuring prompt.

Longer sections tend to carry the dense material, so sections are taken
longest first until the character budget runs out.
"""

from __future__ import annotations
from typing import Dict, List, Tuple

from config import DIGEST_MAX_CHARS

MIN_PARTIAL_CHARS = 200


def select_sections(sections: Dict[str, str],
                    max_total_length: int = DIGEST_MAX_CHARS) -> List[Tuple[str, str]]:
    """Greedy longest-first pick of ``(name, text)`` pairs within the budget.

    Empty sections and exact duplicates (after trimming) are dropped.  A
    section that does not fit is cut to the remaining budget when at
    least ``MIN_PARTIAL_CHARS`` remain; either way nothing after it is
    considered.
    """
    seen = set()
    unique: List[Tuple[str, str]] = []
    for name, content in sections.items():
        key = (content or "").strip()
        if not key or key in seen:
            continue
        seen.add(key)
        unique.append((name, content))

    # stable: equal lengths keep section order
    unique.sort(key=lambda pair: len(pair[1]), reverse=True)

    total = 0
    included: List[Tuple[str, str]] = []
    for name, content in unique:
        if total + len(content) > max_total_length:
            allowed = max_total_length - total
            if allowed >= MIN_PARTIAL_CHARS:
                included.append((name, content[:allowed]))
            break
        included.append((name, content))
        total += len(content)
    return included


def render_digest(pairs: List[Tuple[str, str]]) -> str:
    return "\n\n".join(f"=== {name} ===\n{content}" for name, content in pairs)


def build_digest(sections: Dict[str, str], max_total_length: int = DIGEST_MAX_CHARS) -> str:
    return render_digest(select_sections(sections, max_total_length))
