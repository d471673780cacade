"""
Line-based section segmentation.

Headers in PDF-extracted résumés vary in wording and case, so a line is
treated as a header when its normalised form equals, contains or is
contained in a normalised candidate name.  Order of the candidate list
matters: the first line matching a candidate wins, and a section ends
at the next candidate *in list order* that starts further down.
"""

from __future__ import annotations
import re
from typing import Dict, Iterable, List, Sequence

from cleaner import normalize_header

SECTION_GROUPS: Dict[str, List[str]] = {
    "experience": [
        "Work Experience",
        "Professional Experience",
        "Founder & Product Experience",
        "Research Experience",
        "Experience",
        "Employment",
        "Positions",
        "Appointments",
    ],
    "education": [
        "Education",
        "Academic Background",
        "Academic Experience",
    ],
    "skills": [
        "Skills",
        "Skills & Interests",
        "Technical Skills",
        "Core Competencies",
        "Laboratory & Fields",
        "Programming Languages",
        "Technologies",
        "Tools",
        "Frameworks",
        "Interests",
    ],
}

SECTION_CANDIDATES: List[str] = [name for names in SECTION_GROUPS.values() for name in names]

_HEADER_LIKE = re.compile(r"^[A-Z][A-Za-z &]+$")


def _matches(line: str, section: str) -> bool:
    return line == section or section in line or line in section


def find_section_starts(lines: Sequence[str], names: Iterable[str]) -> Dict[str, int]:
    """Map each normalised candidate to the index of its first header line."""
    normalized_lines = [normalize_header(ln) for ln in lines]
    starts: Dict[str, int] = {}
    for section in (normalize_header(n) for n in names):
        if section in starts or not section:
            continue
        for idx, line in enumerate(normalized_lines):
            # a blank/punctuation-only line would be "contained" in every name
            if line and _matches(line, section):
                starts[section] = idx
                break
    return starts


def extract_sections(text: str, names: Sequence[str]) -> Dict[str, str]:
    """Split *text* into sections keyed by normalised candidate name.

    Every candidate gets a key; candidates never found map to "".
    """
    lines = [ln.strip() for ln in text.split("\n")]
    keys = [normalize_header(n) for n in names]
    starts = find_section_starts(lines, keys)

    result: Dict[str, str] = {}
    for i, section in enumerate(keys):
        if section in result:
            continue
        start = starts.get(section)
        if start is None:
            result[section] = ""
            continue
        end = len(lines)
        for nxt in keys[i + 1:]:
            nxt_start = starts.get(nxt)
            if nxt_start is not None and nxt_start > start:
                end = nxt_start
                break
        result[section] = "\n".join(lines[start + 1:end]).strip()
    return result


def pick_section(sections: Dict[str, str], names: Iterable[str]) -> str:
    """First non-empty section among synonyms, in the order given."""
    for name in names:
        if content := sections.get(normalize_header(name)):
            return content
    return ""


def header_like_lines(text: str) -> List[str]:
    """Lines that look like section headers; for debugging unmatched layouts."""
    return [ln.strip() for ln in text.split("\n") if _HEADER_LIKE.match(ln.strip())]
