"""Markdown engine boundary: extension preprocessing then markdown-it rendering"""

import logging
import re
from functools import lru_cache

from markdown_it import MarkdownIt

from netral.core.extensions import preprocess

logger = logging.getLogger(__name__)


ERROR_PLACEHOLDER = '<p class="netral-error">Error rendering markdown</p>'
TAG_RE = re.compile(r"<[^>]+>")


@lru_cache(maxsize=8)
def _make_parser(preset: str, breaks: bool) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False, "breaks": breaks})


def render_markdown(markdown: str, preset: str = "gfm-like", breaks: bool = True) -> str:
    """Render a prose span to HTML; engine failures give ERROR_PLACEHOLDER.

    The output is not sanitized.
    """
    if not markdown or not markdown.strip():
        return ""
    try:
        return _make_parser(preset, breaks).render(preprocess(markdown))
    except Exception as e:
        logger.warning("Error rendering markdown: %s", e)
        return ERROR_PLACEHOLDER


def extract_text(markdown: str) -> str:
    """Plain text of the rendered markdown, tags removed."""
    return TAG_RE.sub(" ", render_markdown(markdown))


def word_count(markdown: str) -> int:
    return len(extract_text(markdown).split())


def char_count(markdown: str) -> int:
    return len(markdown)
