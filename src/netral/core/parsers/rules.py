"""Ordered first-match-wins line dispatch shared by the flavor parsers"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

logger = logging.getLogger(__name__)


URL_RE = re.compile(r"^https?://", re.IGNORECASE)
SECTION_RE = re.compile(r"^--(?!-)\s*(?P<text>.*)$")


@dataclass(frozen=True)
class Rule:
    """One directive: a pattern tried against the trimmed line and its handler."""
    name:    str
    pattern: re.Pattern
    apply:   Callable[..., Any]


def single(tag: str, allow_empty: bool = False) -> re.Pattern:
    """Pattern for a one-line 'Tag[payload]' directive at the start of a line."""
    body = r"[^\]]*" if allow_empty else r"[^\]]+"
    return re.compile(rf"^{re.escape(tag)}\[(?P<value>{body})\]", re.IGNORECASE)


def opener(tag: str) -> re.Pattern:
    """Pattern for a bracketed directive whose body may span lines."""
    return re.compile(rf"^{re.escape(tag)}\[", re.IGNORECASE)


def first_match(rules: Sequence[Rule], line: str) -> tuple[Optional[Rule], Optional[re.Match]]:
    """Return the first rule whose pattern matches line, in table order."""
    for rule in rules:
        m = rule.pattern.match(line)
        if m:
            return rule, m
    return None, None


def is_section_marker(line: str) -> bool:
    return SECTION_RE.match(line.strip()) is not None


class SkipLog:
    """Collects fragments dropped by a lenient parse and forwards them to a hook."""

    def __init__(self, on_skip: Optional[Callable[[str], None]] = None):
        self.on_skip = on_skip
        self.fragments: list[str] = []

    def __call__(self, fragment: str) -> None:
        self.fragments.append(fragment)
        logger.debug("skipped fragment: %r", fragment)
        if self.on_skip:
            self.on_skip(fragment)


def split_lines(text: str) -> list[str]:
    """Split on newlines, treating CRLF as LF."""
    return text.replace("\r\n", "\n").split("\n")
