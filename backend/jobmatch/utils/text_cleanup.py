"""
Text cleanup for extracted resume text and prompt inputs.
"""

from __future__ import annotations

import re
import unicodedata

# Typographic characters PDF exporters like to emit
_REPLACEMENTS = {
    "\u2019": "'",   # right single quote
    "\u2018": "'",   # left single quote
    "\u201c": '"',   # left double quote
    "\u201d": '"',   # right double quote
    "\u2013": "-",   # en-dash
    "\u2014": "-",   # em-dash
    "\u2026": "...", # ellipsis
    "\u00a0": " ",   # non-breaking space
    "\u200b": "",    # zero-width space
    "\ufeff": "",    # BOM
}


def normalize_text(text: str) -> str:
    """Normalize unicode and whitespace in raw extracted text."""
    text = unicodedata.normalize("NFKC", text)
    for old, new in _REPLACEMENTS.items():
        text = text.replace(old, new)

    text = re.sub(r"[ \t]+", " ", text)
    text = "\n".join(line.strip() for line in text.splitlines())
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def normalize_skills(skills: list[str]) -> list[str]:
    """Lowercase, trim, dedupe and sort skill names for cache keys."""
    return sorted({s.strip().lower() for s in skills if s and s.strip()})


def join_or_na(items: list[str], empty: str = "N/A") -> str:
    """Render items as a comma-separated list for prompts."""
    cleaned = [i.strip() for i in items if i and i.strip()]
    return ", ".join(cleaned) if cleaned else empty
