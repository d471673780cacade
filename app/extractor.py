"""
PDF ➜ raw text
– accepts a path or an open binary file (e.g. an upload)
– strips `(cid:N)` glyph artifacts
– suppresses verbose CropBox warnings from pdfplumber/pdfminer
"""
from __future__ import annotations
import logging
import re
import warnings
from pathlib import Path
from typing import BinaryIO

import pdfplumber

# silence noisy PDF logging
logging.getLogger("pdfplumber").setLevel(logging.ERROR)
logging.getLogger("pdfminer").setLevel(logging.ERROR)
warnings.filterwarnings("ignore", category=UserWarning, module="pdfminer")

logger = logging.getLogger(__name__)

_CID_RE = re.compile(r"\(cid:\d+\)")


def pdf_to_text(source: str | Path | BinaryIO) -> str:
    with pdfplumber.open(source) as pdf:
        pages = [p.extract_text() or "" for p in pdf.pages]
    logger.debug("Extracted %d page(s)", len(pages))
    return _CID_RE.sub("", "\n".join(pages))
