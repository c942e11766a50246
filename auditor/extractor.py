"""Structural extraction of raw HTML into a bounded text budget.

The structured passes surface the elements that matter for security and UX
findings. When a page yields too little through them (sparse or unusual
markup), the stripped raw document is sent instead.
"""

import logging

from bs4 import BeautifulSoup

from auditor.config import FALLBACK_TRIGGER_LENGTH, MAX_CONTENT_LENGTH
from auditor.extractors import (
    build_fallback,
    extract_forms,
    extract_inputs,
    extract_links,
    extract_meta,
    extract_scripts,
    extract_text,
)

logger = logging.getLogger(__name__)

PASSES = [
    (extract_scripts, "scripts"),
    (extract_meta, "meta"),
    (extract_links, "links"),
    (extract_forms, "forms"),
    (extract_inputs, "inputs"),
    (extract_text, "text"),
]


def extract_structure(html: str) -> list[str]:
    soup = BeautifulSoup(html, "lxml")
    segments: list[str] = []
    for fn, name in PASSES:
        found = fn(soup)
        logger.debug("Extraction pass %s produced %d segments", name, len(found))
        segments.extend(found)
    return segments


def extract_content(html: str) -> str:
    structured = "\n\n".join(extract_structure(html))
    if len(structured) < FALLBACK_TRIGGER_LENGTH:
        logger.info("Structured extraction too sparse (%d chars), using raw HTML fallback", len(structured))
        content = build_fallback(html)
    else:
        content = structured
    return content[:MAX_CONTENT_LENGTH]
