"""
Résumé text ➜ final structured record.

segment sections → rule-based parsing → digest → LLM structuring →
reconcile.  Every stage except the LLM call is a pure function of the
text; if the LLM call fails the whole request fails.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Any, BinaryIO, Callable, Dict

import config
from assembler import assemble_record
from cleaner import normalize_header
from digest import build_digest
from errors import StructuringError
from extractor import pdf_to_text
from llm_client import LLMClient
from parser_llm import structure_resume
from parser_rule import parse_resume_rule
from sections import SECTION_CANDIDATES, header_like_lines
from store import JsonResultStore
from utils import to_pretty_json

logger = logging.getLogger(__name__)

_PREVIEW_CHARS = 500


def _log_layout(raw_text: str, sections: Dict[str, str]) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug("Raw text preview: %s...", raw_text[:_PREVIEW_CHARS])
    for line in header_like_lines(raw_text):
        logger.debug("Possible section header: %s", line)
    for name in SECTION_CANDIDATES:
        found = "Found" if sections.get(normalize_header(name)) else "Not found"
        logger.debug("%s: %s", name, found)


def process_resume_text(
    raw_text: str,
    client: LLMClient | None = None,
    model: str | None = None,
    store: JsonResultStore | None = None,
    cache_dir: str | Path | None = config.CACHE_DIR,
    max_digest_chars: int = config.DIGEST_MAX_CHARS,
    status_callback: Callable[[str], None] | None = None,
) -> Dict[str, Any]:
    """
    Build the final record for one résumé.

    Args:
        raw_text: Text already extracted from the résumé.
        client: LLM client; defaults to the configured provider.
        store: Optional results store; the record is appended on success.
        status_callback: An optional function to call with status updates.

    Raises:
        StructuringError: the LLM could not be reached or its reply parsed.
    """
    if status_callback:
        status_callback("🔎 Splitting résumé into sections...")
    heuristic, sections = parse_resume_rule(raw_text)
    _log_layout(raw_text, sections)
    logger.info(
        "Rule-based parse: %d position(s), %d education entr(ies), %d skill categories",
        len(heuristic["work_experience"]),
        len(heuristic["education"]),
        len(heuristic["skills"]),
    )

    digest = build_digest(sections, max_digest_chars)

    if status_callback:
        status_callback("🧠 Organising résumé with the LLM...")
    try:
        external = structure_resume(digest, heuristic, client=client, model=model, cache_dir=cache_dir)
    except StructuringError:
        logger.exception("Structuring failed")
        if status_callback:
            status_callback("❌ Could not reach or parse the structuring service.")
        raise

    record = assemble_record(heuristic, external)

    if store is not None:
        store.append(record)
    if status_callback:
        status_callback("✅ Résumé structured.")
    return record


def process_resume_pdf(source: str | Path | BinaryIO, **kwargs: Any) -> Dict[str, Any]:
    return process_resume_text(pdf_to_text(source), **kwargs)


def default_store() -> JsonResultStore | None:
    """Store at ``RESULTS_PATH``, or None when it is disabled."""
    return JsonResultStore(config.RESULTS_PATH) if config.RESULTS_PATH else None


def main(argv: list[str] | None = None) -> int:
    """``resume2record <resume.pdf|resume.txt>``: print the final record as JSON."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("usage: resume2record <resume.pdf|resume.txt>", file=sys.stderr)
        return 2

    config.configure_logging()
    path = Path(args[0])
    try:
        if path.suffix.lower() == ".pdf":
            record = process_resume_pdf(path, store=default_store())
        else:
            record = process_resume_text(path.read_text(encoding="utf-8"), store=default_store())
    except StructuringError as exc:
        print(f"Failed to organise résumé: {exc}", file=sys.stderr)
        return 1

    print(to_pretty_json(record))
    return 0


if __name__ == "__main__":
    sys.exit(main())
