"""Depth-counted bracket and brace extraction shared by all parsers"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional


# Tags that never belong inside prose-only columns.
COLUMN_DENYLIST = (
    "Image", "Video", "Embed", "Warn", "Def", "quote", "Bigtitle", "Divider",
    "CTA", "Badge", "Progress", "Metric", "Countdown", "Gallery", "Feature",
    "Stats", "Timeline", "Element", "Testimonial", "Pricing", "FAQ", "Team",
    "Steps", "List", "Code", "Graph", "Column",
)


@dataclass(frozen=True)
class BracketSpan:
    """Text strictly inside the outermost [...] and the line index it ended on."""
    content: str
    end:     int
    closed:  bool = True


def extract_bracket_content(
    lines: list[str],
    start: int,
    limit: Optional[int] = None,
    ) -> BracketSpan:
    """Scan lines from start, returning the balanced content of the first '['.

    Each fully scanned line after the opening bracket contributes a trailing
    newline. Reaching end of input, or lines[limit] when limit is given,
    before the bracket closes returns what was accumulated.
    """
    content: list[str] = []
    depth = 0
    started = False
    end = start

    for i in range(start, len(lines) if limit is None else min(limit, len(lines))):
        for char in lines[i]:
            if char == "[":
                if started:
                    content.append(char)
                depth += 1
                started = True
            elif char == "]" and started:
                depth -= 1
                if depth == 0:
                    return BracketSpan("".join(content), i)
                content.append(char)
            elif started:
                content.append(char)
        if started:
            content.append("\n")
        end = i

    return BracketSpan("".join(content), end, closed=False)


def find_closing_bracket(text: str, open_index: int) -> Optional[int]:
    """Return the index just past the ']' matching text[open_index], or None."""
    depth = 0
    for i in range(open_index, len(text)):
        if text[i] == "[":
            depth += 1
        elif text[i] == "]":
            depth -= 1
            if depth == 0:
                return i + 1
    return None


def bracket_pairs(text: str) -> dict[int, int]:
    """Map each balanced '[' index to the index just past its ']' in one pass.

    Same pairing as find_closing_bracket; unclosed '[' are absent and
    stray ']' are ignored.
    """
    pairs: dict[int, int] = {}
    open_at: list[int] = []
    for i, char in enumerate(text):
        if char == "[":
            open_at.append(i)
        elif char == "]" and open_at:
            pairs[open_at.pop()] = i + 1
    return pairs


def split_columns(content: str) -> list[str]:
    """Split '{left}{right}...' into top-level brace groups, nested braces kept."""
    parts: list[str] = []
    current: list[str] = []
    depth = 0

    for char in content:
        if char == "{":
            if depth > 0:
                current.append(char)
            depth += 1
        elif char == "}" and depth > 0:
            depth -= 1
            if depth == 0:
                parts.append("".join(current).strip())
                current = []
            else:
                current.append(char)
        elif depth > 0:
            current.append(char)

    leftover = "".join(current).strip()
    if depth > 0 and leftover:
        parts.append(leftover)
    return parts


def tag_pattern(names: Iterable[str]) -> re.Pattern:
    """Case-insensitive pattern matching 'Name[' for any of names, not mid-word."""
    alternatives = "|".join(re.escape(n) for n in sorted(names, key=len, reverse=True))
    return re.compile(rf"(?<![\w])(?P<tag>{alternatives})\[", re.IGNORECASE)


_DENYLIST_RE = tag_pattern(COLUMN_DENYLIST)


def strip_element_tags(text: str) -> str:
    """Remove balanced element directives from column prose; unclosed tags stay literal."""
    pieces: list[str] = []
    pos = 0
    for m in _DENYLIST_RE.finditer(text):
        if m.start() < pos:
            continue
        close = find_closing_bracket(text, m.end() - 1)
        if close is None:
            continue
        pieces.append(text[pos:m.start()])
        pos = close
    pieces.append(text[pos:])
    return "".join(pieces).strip()
