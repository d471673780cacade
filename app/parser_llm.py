"""
LLM-based structuring pass.

• Sends the section digest plus the rule-based hints in one request.
• Expects a single ```json fenced object back with the seven record keys.
• Caches parsed responses in .cache/<sha256>.json so the model is
  queried only once per unique prompt.  Malformed replies are not cached.
"""

from __future__ import annotations
import json
import logging
import re
import textwrap
from pathlib import Path
from typing import Any, Dict

import config
from errors import MalformedStructuringOutput
from llm_client import LLMClient, chat
from schema_resume import REQUIRED_KEYS, RECORD_SCHEMA
from utils import _sha, to_pretty_json

logger = logging.getLogger(__name__)

_FENCED_JSON = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.S | re.I)

_KEY_LIST = ", ".join(REQUIRED_KEYS)

_INSTRUCTIONS = textwrap.dedent(
    f"""
You are an expert academic CV parser. You receive the sections extracted
from a résumé and the fields a rule-based parser already found.

Produce one JSON object with exactly these top-level keys:
{_KEY_LIST}.
Shape reference (empty values shown):

{json.dumps(RECORD_SCHEMA, indent=2)}

Rules:
1. Section headers vary between résumés. Read every extracted section
   directly, even when the rule-based parser missed it.
2. Treat the parsed fields as hints. When they hold more structured
   information for a section, merge it in so nothing useful is lost,
   without duplicating entries.
3. positions covers work, research and teaching roles; skills is an
   object of category → list of strings.
4. Use an empty array or object for any section that is not present.

Return ONLY the JSON, inside a ```json fenced block, and nothing else.
"""
).strip()


def build_structuring_prompt(digest: str, heuristic: Dict[str, Any]) -> str:
    return (
        f"{_INSTRUCTIONS}\n\n"
        f"Extracted Sections:\n{digest}\n\n"
        f"Parsed Fields:\n{to_pretty_json(heuristic)}\n\n"
        "Output:\n"
    )


def extract_fenced_json(raw: str) -> Any:
    """Decode the first fenced block of *raw*.

    Raises:
        MalformedStructuringOutput: no fenced block, or it is not JSON.
    """
    m = _FENCED_JSON.search(raw or "")
    if not m:
        raise MalformedStructuringOutput("Failed to extract JSON from LLM output")
    try:
        return json.loads(m.group(1))
    except json.JSONDecodeError as exc:
        raise MalformedStructuringOutput(f"LLM output was not valid JSON: {exc}") from exc


def structure_resume(
    digest: str,
    heuristic: Dict[str, Any],
    client: LLMClient | None = None,
    model: str | None = None,
    cache_dir: str | Path | None = config.CACHE_DIR,
) -> Any:
    """Ask the LLM to organise the résumé; returns the decoded JSON value."""
    prompt = build_structuring_prompt(digest, heuristic)
    cache_path = None
    if cache_dir:
        cache_path = Path(cache_dir) / f"{_sha(prompt)}.json"
        if (cached := _read_cache(cache_path)) is not _MISS:
            return cached

    model = model or config.get_model_for_provider()
    messages = [{"role": "user", "content": prompt}]
    rsp = client.chat(model, messages) if client else chat(model=model, messages=messages)
    data = extract_fenced_json(rsp.message.content)

    if cache_path:
        _write_cache(cache_path, data)
    return data


# ───────────────────────────────────────── cache ──
_MISS = object()


def _read_cache(path: Path) -> Any:
    if not path.exists():
        return _MISS
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Discarding unreadable cache entry %s", path.name)
        path.unlink(missing_ok=True)
        return _MISS
    logger.debug("Structuring cache hit: %s", path.name)
    return data


def _write_cache(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(".json.tmp")
    tmp.write_text(to_pretty_json(data), encoding="utf-8")
    tmp.replace(path)
