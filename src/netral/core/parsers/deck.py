"""Deck parser: slide boundaries first, then per-slide element scanning

Document directives and '--' slide boundaries are dispatched line by line.
Each slide's raw body is parsed in a second pass: every element type is
located independently across the whole body, the matches are sorted by
source offset, and the prose between them becomes markdown blocks.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Optional

from netral.core.extract import items as it
from netral.core.extract.brackets import (
    bracket_pairs,
    split_columns,
    strip_element_tags,
    tag_pattern,
)
from netral.core.models import (
    BadgeBlock,
    BigtitleBlock,
    CodeBlock,
    DeckDocument,
    DefBlock,
    FeatureBlock,
    GalleryBlock,
    GraphBlock,
    ImageBlock,
    ListBlock,
    MarkdownBlock,
    ProgressBlock,
    QuoteBlock,
    Slide,
    SlideColumnBlock,
    StatsBlock,
    TimelineBlock,
    VideoBlock,
    WarnBlock,
)
from netral.core.parsers.rules import (
    SECTION_RE,
    Rule,
    SkipLog,
    first_match,
    single,
    split_lines,
)
from netral.core.parsers.site import make_logo
from netral.core.themes import resolve_theme

logger = logging.getLogger(__name__)


# --- slide body elements ---

def _text(build: Callable[[str], object]):
    """Builder for single-value elements; an empty payload is not an element."""
    def wrap(body: str, skip: SkipLog):
        value = body.strip()
        return build(value) if value else None
    return wrap


def _code(body: str, skip: SkipLog) -> Optional[CodeBlock]:
    if ";" not in body:
        return None
    lang, code = body.split(";", 1)
    return CodeBlock(lang=lang.strip(), code=code.strip("\n"))


def _progress(body: str, skip: SkipLog) -> Optional[ProgressBlock]:
    if not body.strip():
        return None
    amount, label = it.split_payload(body, 2)[:2]
    return ProgressBlock(value=it.clamp_percent(amount), label=label)


def _listing(block: Callable[[list], object], build_items: Callable[[str, SkipLog], list]):
    """Builder for item elements; one without any items is not an element."""
    def wrap(body: str, skip: SkipLog):
        items = build_items(body, skip)
        return block(items) if items else None
    return wrap


def _column(body: str, skip: SkipLog) -> Optional[SlideColumnBlock]:
    columns = split_columns(body)
    if not columns:
        return None
    return SlideColumnBlock(columns=[strip_element_tags(c) for c in columns])


SLIDE_ELEMENTS: dict[str, Callable[[str, SkipLog], object]] = {
    "Column":   _column,
    "Feature":  _listing(lambda items: FeatureBlock(items=items), it.feature_items),
    "Stats":    _listing(lambda items: StatsBlock(items=items), it.stat_items),
    "Image":    _text(lambda v: ImageBlock(url=v)),
    "Warn":     _text(lambda v: WarnBlock(text=v)),
    "Def":      _text(lambda v: DefBlock(text=v)),
    "quote":    _text(lambda v: QuoteBlock(text=v)),
    "Bigtitle": _text(lambda v: BigtitleBlock(text=v)),
    "Timeline": _listing(lambda items: TimelineBlock(items=items), it.timeline_items),
    "List":     _listing(lambda items: ListBlock(items=items), it.list_items),
    "Video":    _text(lambda v: VideoBlock(url=v)),
    "Code":     _code,
    "Badge":    _text(lambda v: BadgeBlock(text=v)),
    "Gallery":  _listing(lambda items: GalleryBlock(items=items), it.gallery_items),
    "Progress": _progress,
    "Graph":    _listing(lambda nodes: GraphBlock(nodes=nodes), it.graph_nodes),
}

_PATTERNS = {name: tag_pattern([name]) for name in SLIDE_ELEMENTS}


@dataclass(frozen=True)
class _Found:
    start: int
    end:   int
    block: object


def _find_elements(content: str, skip: SkipLog) -> list[_Found]:
    found: list[_Found] = []
    pairs = bracket_pairs(content)
    for name, build in SLIDE_ELEMENTS.items():
        for m in _PATTERNS[name].finditer(content):
            close = pairs.get(m.end() - 1)
            if close is None:
                skip(f"unclosed {name}[ at offset {m.start()}")
                continue
            block = build(content[m.end():close - 1], skip)
            if block is not None:
                found.append(_Found(m.start(), close, block))
    return found


def parse_slide_content(content: str, on_skip: Optional[Callable[[str], None]] = None) -> list:
    """Split a slide body into element blocks interleaved with markdown, in source order."""
    skip = on_skip if isinstance(on_skip, SkipLog) else SkipLog(on_skip)
    found = sorted(_find_elements(content, skip), key=lambda f: (f.start, -f.end))

    blocks: list = []
    last_end = 0
    for match in found:
        if match.start < last_end:
            continue  # nested inside an earlier element
        prose = content[last_end:match.start].strip()
        if prose:
            blocks.append(MarkdownBlock(content=prose))
        blocks.append(match.block)
        last_end = match.end

    prose = content[last_end:].strip()
    if prose:
        blocks.append(MarkdownBlock(content=prose))
    return blocks


# --- document level ---

@dataclass
class _DeckScan:
    skip:       SkipLog
    doc:        DeckDocument = field(default_factory=DeckDocument)
    slide:      Optional[Slide] = None
    buffer:     list[str] = field(default_factory=list)
    title_seen: bool = False

    def flush(self) -> None:
        if self.slide is None:
            return
        raw = "\n".join(self.buffer).strip()
        if raw:
            self.slide.content.extend(parse_slide_content(raw, self.skip))
        self.doc.slides.append(self.slide)
        self.buffer = []


def _title(scan: _DeckScan, line: str, m: re.Match) -> None:
    if scan.title_seen:
        scan.skip(line.strip())
        return
    scan.doc.title = m.group("text").strip()
    scan.title_seen = True


def _logo(scan: _DeckScan, line: str, m: re.Match) -> None:
    if scan.slide is not None:
        scan.buffer.append(line)  # logo is a document directive only before the first slide
        return
    scan.doc.logo = make_logo(m.group("value"))


def _theme(scan: _DeckScan, line: str, m: re.Match) -> None:
    scan.doc.theme = resolve_theme(m.group("value"))


def _slide(scan: _DeckScan, line: str, m: re.Match) -> None:
    scan.flush()
    scan.slide = Slide(title=m.group("text").strip())


DECK_RULES: list[Rule] = [
    Rule("title", re.compile(r"^---\s*(?P<text>.*)$"), _title),
    Rule("logo",  single("Logo"), _logo),
    Rule("theme", single("Theme"), _theme),
    Rule("slide", SECTION_RE, _slide),
]


def parse_deck_document(text: str, on_skip: Optional[Callable[[str], None]] = None) -> DeckDocument:
    """Parse Deck syntax into slides; prose outside any slide is dropped."""
    scan = _DeckScan(skip=SkipLog(on_skip))

    for line in split_lines(text):
        rule, m = first_match(DECK_RULES, line.strip())
        if rule is not None:
            rule.apply(scan, line, m)
        elif scan.slide is not None:
            scan.buffer.append(line)
        elif line.strip():
            scan.skip(line.strip())

    scan.flush()
    logger.debug("parsed deck %r: %d slide(s)", scan.doc.title, len(scan.doc.slides))
    return scan.doc
