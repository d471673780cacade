"""
Rule-based résumé parser.
Splits the text into sections, then reads work experience, education,
skills and contact details with line-level patterns.  Output is a
best-effort hint for the LLM structuring pass, never authoritative.
"""

from __future__ import annotations
import re
from enum import Enum
from typing import Dict, List, Tuple

from cleaner import clean_list, is_bullet, strip_bullet
from sections import SECTION_CANDIDATES, SECTION_GROUPS, extract_sections, pick_section

ROLE_NOUNS = (
    "Engineer|Developer|Manager|Director|Lead|Analyst|"
    "Consultant|Specialist|Coordinator|Assistant|Intern"
)
TITLE     = re.compile(rf"^[A-Z][a-zA-Z\s&]+(?:{ROLE_NOUNS})\s*$")
PAREN     = re.compile(r"\(([^)]+)\)")
YEAR      = re.compile(r"\d{4}")
STATE_END = re.compile(r"[A-Z]{2}$")
DATE_HINTS = ("Present", "Current", "-", "to")

DEGREE      = re.compile(r"Bachelor|Master|PhD|Doctorate|Associate|Certificate|Diploma", re.I)
INSTITUTION = re.compile(r"University|College|Institute|School", re.I)
HONORS      = re.compile(r"GPA|Honors|Magna|Summa|Cum|Dean", re.I)

CATEGORY = re.compile(r"^[A-Z][a-zA-Z\s]+:$")
DEFAULT_CATEGORY = "Other"
MAX_SINGLE_SKILL = 50
MIN_SUMMARY = 20

NAME     = re.compile(r"^([A-Z][a-z]+ [A-Z][a-z]+)", re.M)
EMAIL    = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE    = re.compile(r"(\+\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
LOCATION = re.compile(r"([A-Z][a-z]+(?:[, \t]+[A-Z][a-z]+){0,5},[ \t]*[A-Z]{2})\b")


class LineKind(Enum):
    TITLE = "title"
    ORGANIZATION = "organization"
    DATES = "dates"
    LOCATION = "location"
    BULLET = "bullet"
    SUMMARY = "summary"
    UNCLASSIFIED = "unclassified"


def _is_location(line: str) -> bool:
    return "," in line and bool(STATE_END.search(line))


def classify_work_line(line: str, has_summary: bool = False) -> LineKind:
    """Kind of a trimmed work-experience line; first rule that fits wins."""
    if TITLE.match(line):
        return LineKind.TITLE
    if "(" in line and ")" in line:
        return LineKind.ORGANIZATION
    if YEAR.search(line) and any(h in line for h in DATE_HINTS):
        return LineKind.DATES
    if _is_location(line):
        return LineKind.LOCATION
    if is_bullet(line):
        return LineKind.BULLET
    if len(line) > MIN_SUMMARY and not has_summary:
        return LineKind.SUMMARY
    return LineKind.UNCLASSIFIED


def parse_work_experience(text: str) -> List[Dict]:
    if not text:
        return []

    jobs: List[Dict] = []
    cur: Dict = {}
    for ln in _lines(text):
        kind = classify_work_line(ln, has_summary="summary" in cur)
        if kind is LineKind.TITLE:
            if cur:
                jobs.append(cur)
            cur = {"title": ln}
        elif kind is LineKind.ORGANIZATION:
            if m := PAREN.search(ln):
                cur["organization"] = m.group(1)
        elif kind is LineKind.DATES:
            cur["dates"] = ln
        elif kind is LineKind.LOCATION:
            cur["location"] = ln
        elif kind is LineKind.BULLET:
            cur.setdefault("highlights", []).append(ln[1:].strip())
        elif kind is LineKind.SUMMARY:
            cur["summary"] = ln
    if cur:
        jobs.append(cur)

    return [{**j, "highlights": clean_list(j.get("highlights"))} for j in jobs]


def parse_education(text: str) -> List[Dict]:
    if not text:
        return []

    entries: List[Dict] = []
    cur: Dict = {}
    for ln in _lines(text):
        if DEGREE.search(ln):
            if cur:
                entries.append(cur)
            cur = {"degree": ln}
        elif INSTITUTION.search(ln) and "institution" not in cur:
            cur["institution"] = ln
        elif YEAR.search(ln):
            cur["dates"] = ln
        elif _is_location(ln):
            cur["location"] = ln
        elif HONORS.search(ln):
            cur["honors"] = ln
    if cur:
        entries.append(cur)
    return entries


def parse_skills(text: str) -> Dict[str, List[str]]:
    if not text:
        return {}

    skills: Dict[str, List[str]] = {}
    category = DEFAULT_CATEGORY
    for ln in _lines(text):
        if CATEGORY.match(ln):
            category = ln[:-1]
            skills.setdefault(category, [])
        elif "," in ln or is_bullet(ln):
            toks = [t.strip() for t in strip_bullet(ln).split(",")]
            skills.setdefault(category, []).extend(t for t in toks if t)
        elif len(ln) < MAX_SINGLE_SKILL:
            skills.setdefault(category, []).append(ln)

    return {cat: clean_list(lst) for cat, lst in skills.items()}


def extract_contact_info(text: str) -> Dict[str, str]:
    """Name, email, phone and location: first match anywhere in the document."""
    name = NAME.search(text)
    email = EMAIL.search(text)
    phone = PHONE.search(text)
    location = LOCATION.search(text)
    return {
        "name": name.group(1) if name else "",
        "email": email.group() if email else "",
        "phone": phone.group() if phone else "",
        "location": location.group(1) if location else "",
    }


def parse_resume_rule(raw: str) -> Tuple[Dict, Dict[str, str]]:
    """Heuristic record plus the section map it was read from."""
    sections = extract_sections(raw, SECTION_CANDIDATES)
    record = {
        **extract_contact_info(raw),
        "work_experience": parse_work_experience(
            pick_section(sections, SECTION_GROUPS["experience"])
        ),
        "education": parse_education(pick_section(sections, SECTION_GROUPS["education"])),
        "skills": parse_skills(pick_section(sections, SECTION_GROUPS["skills"])),
    }
    return record, sections


# ───────────────────────────────────────── helpers ──
def _lines(text: str) -> List[str]:
    return [ln.strip() for ln in text.split("\n") if ln.strip()]
