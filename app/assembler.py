"""
Reconcile the LLM's record with the rule-based one.

The LLM reply is untrusted JSON of any shape.  Each required key is
checked on its own: missing, null, empty or wrong-typed values are
replaced by what the rule-based parser found, so the final record
always carries every key.
"""

from __future__ import annotations
import copy
import logging
from typing import Any, Dict, List

from schema_resume import PROFILE_SCHEMA, RECORD_TYPES, REQUIRED_KEYS

logger = logging.getLogger(__name__)


def build_fallback(heuristic: Dict[str, Any]) -> Dict[str, Any]:
    """Final record built from rule-based output alone."""
    return {
        "profile": {
            "name": heuristic.get("name") or "",
            "email": heuristic.get("email") or "",
            "phone": heuristic.get("phone") or "",
            "location": heuristic.get("location") or "",
            "summary": "",
            "social": [],
        },
        "education": copy.deepcopy(heuristic.get("education") or []),
        "positions": copy.deepcopy(heuristic.get("work_experience") or []),
        "publications": [],
        "projects": [],
        "skills": copy.deepcopy(heuristic.get("skills") or {}),
        "awards": [],
    }


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, (list, dict)) and not value)


def _coerce(key: str, value: Any) -> Any:
    """Fit *value* to the container type of *key*; None when it cannot."""
    if key == "skills" and isinstance(value, list):
        value = {"Other": value}
    if not isinstance(value, RECORD_TYPES[key]):
        return None
    return value


def _fill_profile(profile: Dict[str, Any], fallback: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(profile)
    for field in PROFILE_SCHEMA:
        if _is_blank(out.get(field)) or out.get(field) == "":
            out[field] = copy.deepcopy(fallback[field])
    if not isinstance(out["social"], list):
        out["social"] = []
    return out


def assemble_record(heuristic: Dict[str, Any], external: Any) -> Dict[str, Any]:
    """Merge the structuring reply over the rule-based fallback."""
    fallback = build_fallback(heuristic)

    if not isinstance(external, dict) or not external:
        logger.info("Structuring reply empty or not an object; using rule-based record")
        return fallback

    record = copy.deepcopy(external)
    for key in REQUIRED_KEYS:
        value = _coerce(key, record.get(key))
        if _is_blank(value):
            logger.debug("Key %r missing from structuring reply; using fallback", key)
            value = fallback[key]
        record[key] = value

    record["profile"] = _fill_profile(record["profile"], fallback["profile"])

    work: List[Dict[str, Any]] = heuristic.get("work_experience") or []
    if not record["positions"] and work:
        record["positions"] = copy.deepcopy(work)
    return record
