"""Doc parser: two heading levels into flat sections with extracted callouts"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Optional

from netral.core.models import CalloutKind, DocCallout, DocDocument, DocSection
from netral.core.parsers.rules import split_lines
from netral.core.themes import resolve_theme

logger = logging.getLogger(__name__)


LEVEL_ONE_RE = re.compile(r"^---\s+(?P<text>.+)$")
LEVEL_TWO_RE = re.compile(r"^--\s+(?P<text>.+)$")
THEME_RE = re.compile(r"^Theme\[(?P<value>.+)\]$", re.IGNORECASE)
CALLOUT_RE = re.compile(r"Callout\[(info|warning|success|error);([^\]]+)\]", re.IGNORECASE)


def extract_callouts(content: str) -> tuple[str, list[DocCallout]]:
    """Pull Callout[kind;message] directives out of content, in source order.

    Returns (content with the directives removed and ends trimmed, callouts).
    Unknown kinds are not callouts and stay in the prose.
    """
    callouts = [
        DocCallout(kind=CalloutKind(m.group(1).lower()), message=m.group(2).strip())
        for m in CALLOUT_RE.finditer(content)
    ]
    return CALLOUT_RE.sub("", content).strip(), callouts


@dataclass
class _DocScan:
    doc:     DocDocument = field(default_factory=DocDocument)
    section: Optional[DocSection] = None
    buffer:  list[str] = field(default_factory=list)

    def flush(self) -> None:
        """Close the open section; with none open, the buffer carries over into the first one."""
        if self.section is None:
            return
        raw = "\n".join(self.buffer).strip()
        self.buffer = []
        content, callouts = extract_callouts(raw)
        self.section.content = content
        self.section.callouts = callouts
        self.doc.sections.append(self.section)

    def open(self, title: str, level: int) -> None:
        self.flush()
        self.section = DocSection(title=title.strip(), level=level)


def parse_doc_document(text: str, on_skip: Optional[Callable[[str], None]] = None) -> DocDocument:
    """Parse Doc syntax into level-1 ('---') and level-2 ('--') sections.

    The first '--- ' line seen before any section is the document title;
    every later one opens a level-1 section. Prose before the first heading
    leads that heading's content, and input with no headings at all becomes
    a single untitled section. Nothing is ever dropped here, so
    on_skip is never called; it is accepted to match the other parsers.
    """
    scan = _DocScan()
    title_open = True

    for line in split_lines(text):
        level_one = LEVEL_ONE_RE.match(line)
        if level_one and title_open:
            scan.doc.title = level_one.group("text").strip()
            title_open = False
            continue

        theme = THEME_RE.match(line)
        if theme:
            scan.doc.theme = resolve_theme(theme.group("value"))
            continue

        if level_one:
            title_open = False
            scan.open(level_one.group("text"), 1)
            continue

        level_two = LEVEL_TWO_RE.match(line)
        if level_two:
            title_open = False
            scan.open(level_two.group("text"), 2)
            continue

        scan.buffer.append(line)

    if scan.section is None:
        if scan.buffer:
            content, callouts = extract_callouts("\n".join(scan.buffer).strip())
            scan.doc.sections.append(DocSection(title="", level=1, content=content, callouts=callouts))
    else:
        scan.flush()

    logger.debug("parsed doc %r: %d section(s)", scan.doc.title, len(scan.doc.sections))
    return scan.doc
