"""Output file names derived from source file stems"""

import re


UNSAFE_RE = re.compile(r"[^\w\s-]")
SEPARATOR_RE = re.compile(r"[\s_-]+")


def slugify(text: str, fallback: str = "") -> str:
    """Lowercase, hyphen-separated slug of text; fallback when nothing word-like remains."""
    slug = SEPARATOR_RE.sub("-", UNSAFE_RE.sub("", text.lower())).strip("-")
    return slug or fallback
