"""Block-site parser: element syntax into a SiteDocument

The input is scanned line by line. Each line is tried against SITE_RULES in
order; the first match wins, and a line that matches nothing is buffered as
markdown. Content is threaded through an immutable Accumulator so every flush
is a plain function of the previous state.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Optional

from netral.core.extract import items as it
from netral.core.extract.brackets import (
    extract_bracket_content,
    split_columns,
    strip_element_tags,
)
from netral.core.models import (
    BadgeBlock,
    BigtitleBlock,
    ColumnBlock,
    CountdownBlock,
    CTABlock,
    DefBlock,
    DividerBlock,
    ElementBlock,
    EmbedBlock,
    FAQBlock,
    FeatureBlock,
    GalleryBlock,
    HeaderConfig,
    ImageBlock,
    Logo,
    LogoKind,
    MarkdownBlock,
    MetricBlock,
    PricingBlock,
    ProgressBlock,
    QuoteBlock,
    Section,
    SiteDocument,
    StatsBlock,
    StepsBlock,
    TeamBlock,
    TestimonialBlock,
    TimelineBlock,
    VideoBlock,
    WarnBlock,
)
from netral.core.parsers.rules import (
    SECTION_RE,
    URL_RE,
    Rule,
    SkipLog,
    first_match,
    is_section_marker,
    opener,
    single,
    split_lines,
)
from netral.core.themes import resolve_header_type, resolve_theme

logger = logging.getLogger(__name__)


# --- accumulator ---

# Persistent cons chain, newest first: None or (item, rest).
Chain = Optional[tuple]


def _push(chain: Chain, item) -> Chain:
    return (item, chain)


def _items(chain: Chain) -> list:
    """Chain contents in insertion order."""
    out = []
    while chain is not None:
        item, chain = chain
        out.append(item)
    out.reverse()
    return out


@dataclass(frozen=True)
class Accumulator:
    """The open section (None until content appears), its emitted blocks and pending markdown lines.

    Blocks and lines are persistent chains so each step is O(1) and earlier
    accumulators stay valid; they are materialized once at flush and close.
    """
    section: Optional[Section] = None
    blocks:  Chain = None
    buffer:  Chain = None

    def push_line(self, line: str) -> "Accumulator":
        return Accumulator(section=self.section, blocks=self.blocks, buffer=_push(self.buffer, line))


def flush_markdown(acc: Accumulator) -> Accumulator:
    """Emit buffered lines as one markdown block if they hold any text."""
    text = "".join(_items(acc.buffer)).strip()
    if not text:
        return Accumulator(section=acc.section, blocks=acc.blocks)
    return Accumulator(
        section=acc.section or Section(),
        blocks=_push(acc.blocks, MarkdownBlock(content=text)),
    )


def emit(acc: Accumulator, block) -> Accumulator:
    """Flush pending markdown, then append block after it."""
    flushed = flush_markdown(acc)
    return Accumulator(section=flushed.section or Section(), blocks=_push(flushed.blocks, block))


def close_section(acc: Accumulator) -> tuple[Optional[Section], Accumulator]:
    """Finalize the open section; a lazily created implicit one counts too."""
    flushed = flush_markdown(acc)
    if flushed.section is None:
        return None, Accumulator()
    content = [*flushed.section.content, *_items(flushed.blocks)]
    return flushed.section.model_copy(update={"content": content}), Accumulator()


# --- scan state ---

def _brace_depth(text: str, depth: int) -> int:
    for char in text:
        if char == "{":
            depth += 1
        elif char == "}":
            depth = max(depth - 1, 0)
    return depth


def group_limit(lines: list[str], start: int) -> int:
    """Index of the first line an unclosed bracket at start cannot own.

    Only blank lines and lines inside or opening a '{...}' group belong to
    the body; prose, another directive or a section marker ends it.
    """
    opening = lines[start]
    depth = _brace_depth(opening[opening.find("[") + 1:], 0)
    for i in range(start + 1, len(lines)):
        text = lines[i].strip()
        if is_section_marker(text) or (depth == 0 and text and not text.startswith("{")):
            return i
        depth = _brace_depth(text, depth)
    return len(lines)


@dataclass
class _Scan:
    lines:      list[str]
    skip:       SkipLog
    doc:        SiteDocument = field(default_factory=SiteDocument)
    title_seen: bool = False

    def bracket(self, i: int) -> tuple[str, int]:
        """Extract a multi-line body made of '{...}' groups, closed by a ']'.

        The body never reaches past group_limit, except onto a line that
        starts with the closing ']', so a stray ']' in later prose or a later
        section cannot close it. An unclosed body keeps what it has, and the
        following lines are dispatched as usual.
        """
        limit = group_limit(self.lines, i)
        if limit < len(self.lines) and self.lines[limit].strip().startswith("]"):
            limit += 1
        span = extract_bracket_content(self.lines, i, limit=limit)
        if not span.closed:
            self.skip(f"unclosed bracket at line {i + 1}: {self.lines[i].strip()}")
        return span.content, span.end


# --- document-level handlers ---

def _title(scan: _Scan, acc: Accumulator, i: int, m: re.Match):
    if scan.title_seen:
        scan.skip(scan.lines[i].strip())
    else:
        scan.doc.title = m.group("text").strip()
        scan.title_seen = True
    return acc, i + 1


def _theme(scan: _Scan, acc: Accumulator, i: int, m: re.Match):
    scan.doc.theme = resolve_theme(m.group("value"))
    return acc, i + 1


def _logo(scan: _Scan, acc: Accumulator, i: int, m: re.Match):
    scan.doc.logo = make_logo(m.group("value"))
    return acc, i + 1


def _navbar(scan: _Scan, acc: Accumulator, i: int, m: re.Match):
    content, end = scan.bracket(i)
    scan.doc.navbar = it.navbar_items(content, scan.skip)
    return acc, end + 1


def _header(scan: _Scan, acc: Accumulator, i: int, m: re.Match):
    if m.group("value").count(";") < 2:
        scan.skip(scan.lines[i].strip())
        return acc, i + 1
    parts = it.split_payload(m.group("value"), 5)
    scan.doc.header = HeaderConfig(
        type=resolve_header_type(parts[0]),
        title=parts[1],
        description=parts[2],
        image_url=parts[3],
        link=parts[4],
    )
    return acc, i + 1


def _section(scan: _Scan, acc: Accumulator, i: int, m: re.Match):
    closed, _ = close_section(acc)
    if closed is not None:
        scan.doc.sections.append(closed)
    return Accumulator(section=Section(title=m.group("text").strip())), i + 1


# --- content handlers ---

def _one_line(build: Callable[[str], object]):
    """Handler for a single-line directive whose block is built from its payload."""
    def handle(scan: _Scan, acc: Accumulator, i: int, m: re.Match):
        return emit(acc, build(m.group("value").strip())), i + 1
    return handle


def _bracketed(build: Callable[[str, SkipLog], object]):
    """Handler for a multi-line directive built from its balanced bracket body."""
    def handle(scan: _Scan, acc: Accumulator, i: int, m: re.Match):
        content, end = scan.bracket(i)
        return emit(acc, build(content, scan.skip)), end + 1
    return handle


def make_logo(value: str) -> Logo:
    value = value.strip()
    kind = LogoKind.url if URL_RE.match(value) else LogoKind.text
    return Logo(kind=kind, value=value)


def _cta(value: str) -> CTABlock:
    title, description, button_text, button_url = it.split_payload(value, 4)[:4]
    return CTABlock(
        title=title,
        description=description,
        button_text=button_text or "Learn More",
        button_url=button_url or "#",
    )


def _countdown(value: str) -> CountdownBlock:
    label, date, description = it.split_payload(value, 3)[:3]
    return CountdownBlock(label=label, date=date, description=description)


def _progress(value: str) -> ProgressBlock:
    amount, label = it.split_payload(value, 2)[:2]
    return ProgressBlock(value=it.clamp_percent(amount), label=label)


def _metric(value: str) -> MetricBlock:
    number, label, trend = it.split_payload(value, 3)[:3]
    return MetricBlock(value=number, label=label, trend=trend)


def _column(content: str, skip: SkipLog) -> ColumnBlock:
    parts = split_columns(content) + ["", ""]
    return ColumnBlock(left=strip_element_tags(parts[0]), right=strip_element_tags(parts[1]))


SITE_RULES: list[Rule] = [
    Rule("title",   re.compile(r"^---(?P<text>.*)$"), _title),
    Rule("theme",   single("Theme"), _theme),
    Rule("logo",    single("Logo"), _logo),
    Rule("navbar",  opener("Navbar"), _navbar),
    Rule("header",  single("Header"), _header),
    Rule("section", SECTION_RE, _section),

    Rule("image",     single("Image"), _one_line(lambda v: ImageBlock(url=v))),
    Rule("bigtitle",  single("Bigtitle"), _one_line(lambda v: BigtitleBlock(text=v))),
    Rule("warn",      single("Warn"), _one_line(lambda v: WarnBlock(text=v))),
    Rule("def",       single("Def"), _one_line(lambda v: DefBlock(text=v))),
    Rule("quote",     single("quote"), _one_line(lambda v: QuoteBlock(text=v))),
    Rule("embed",     single("Embed"), _one_line(lambda v: EmbedBlock(url=v))),
    Rule("video",     single("Video"), _one_line(lambda v: VideoBlock(url=v))),
    Rule("divider",   single("Divider", allow_empty=True), _one_line(lambda v: DividerBlock(style=v))),
    Rule("cta",       single("CTA"), _one_line(_cta)),
    Rule("countdown", single("Countdown"), _one_line(_countdown)),
    Rule("badge",     single("Badge"), _one_line(lambda v: BadgeBlock(text=v))),
    Rule("progress",  single("Progress"), _one_line(_progress)),
    Rule("metric",    single("Metric"), _one_line(_metric)),

    Rule("element",     opener("Element"), _bracketed(lambda c, s: ElementBlock(items=it.element_items(c, s)))),
    Rule("column",      opener("Column"), _bracketed(_column)),
    Rule("feature",     opener("Feature"), _bracketed(lambda c, s: FeatureBlock(items=it.feature_items(c, s)))),
    Rule("testimonial", opener("Testimonial"), _bracketed(lambda c, s: TestimonialBlock(items=it.testimonial_items(c, s)))),
    Rule("pricing",     opener("Pricing"), _bracketed(lambda c, s: PricingBlock(items=it.pricing_items(c, s)))),
    Rule("stats",       opener("Stats"), _bracketed(lambda c, s: StatsBlock(items=it.stat_items(c, s)))),
    Rule("faq",         opener("FAQ"), _bracketed(lambda c, s: FAQBlock(items=it.faq_items(c, s)))),
    Rule("gallery",     opener("Gallery"), _bracketed(lambda c, s: GalleryBlock(items=it.gallery_items(c, s)))),
    Rule("timeline",    opener("Timeline"), _bracketed(lambda c, s: TimelineBlock(items=it.timeline_items(c, s)))),
    Rule("team",        opener("Team"), _bracketed(lambda c, s: TeamBlock(items=it.team_members(c, s)))),
    Rule("steps",       opener("Steps"), _bracketed(lambda c, s: StepsBlock(items=it.step_items(c, s)))),
]


def parse_site_document(text: str, on_skip: Optional[Callable[[str], None]] = None) -> SiteDocument:
    """Parse Block-site element syntax into a SiteDocument.

    Never raises for malformed directives: unrecognized or broken tag lines
    fall through to markdown, and dropped fragments go to on_skip.
    """
    scan = _Scan(lines=split_lines(text), skip=SkipLog(on_skip))
    acc = Accumulator()
    i = 0

    while i < len(scan.lines):
        line = scan.lines[i]
        stripped = line.strip()
        # every rule needs a '[' or a leading '--'
        if "[" in stripped or stripped.startswith("--"):
            rule, m = first_match(SITE_RULES, stripped)
        else:
            rule, m = None, None
        if rule is None:
            acc = acc.push_line(line + "\n")
            i += 1
            continue
        acc, i = rule.apply(scan, acc, i, m)

    closed, _ = close_section(acc)
    if closed is not None:
        scan.doc.sections.append(closed)

    logger.debug(
        "parsed site %r: %d section(s), %d skipped",
        scan.doc.title, len(scan.doc.sections), len(scan.skip.fragments),
    )
    return scan.doc
