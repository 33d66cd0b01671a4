"""Unit tests for core/parsers/site.py"""

import time

import pytest

from netral.core.models import HeaderType, LogoKind, MarkdownBlock, Section, WarnBlock
from netral.core.parsers.site import (
    Accumulator,
    close_section,
    emit,
    flush_markdown,
    group_limit,
    parse_site_document,
)
from netral.core.themes import ThemeName


def _types(section):
    return [b.type for b in section.content]


# --- defaults ---

def test_empty_input_defaults():
    """Empty input yields an empty document with the default theme."""
    doc = parse_site_document("")
    assert doc.title == ""
    assert doc.theme == ThemeName.modern
    assert doc.logo is None
    assert doc.navbar == []
    assert doc.header is None
    assert doc.sections == []


@pytest.mark.parametrize("text,expected", [
    ("Hello", ThemeName.modern),
    ("Theme[Purple Rain]", ThemeName.modern),
    ("Theme[Ocean]", ThemeName.ocean),
    ("theme[dark mode]", ThemeName.dark_mode),
])
def test_theme_resolution(text, expected):
    """Missing or unknown themes fall back to the default."""
    assert parse_site_document(text).theme == expected


def test_sample_document(sample_site):
    """A full site parses chrome and sections in order."""
    doc = parse_site_document(sample_site)
    assert doc.title == "Acme"
    assert doc.theme == ThemeName.ocean
    assert doc.logo.kind == LogoKind.url
    assert [(n.label, n.url) for n in doc.navbar] == [("Home", "#home"), ("About", "#about")]
    assert doc.header.type == HeaderType.split_image
    assert doc.header.link == "#about"
    assert [s.title for s in doc.sections] == ["About", "Contact"]
    assert _types(doc.sections[0]) == ["markdown", "feature", "markdown"]
    assert doc.sections[0].content[0].content == "Some **intro** text."
    assert doc.sections[0].content[2].content == "Closing words."
    cta = doc.sections[1].content[0]
    assert (cta.title, cta.button_text, cta.button_url) == ("Talk to us", "Write", "mailto:hi@acme.test")


# --- document directives ---

def test_navbar_round_trip():
    doc = parse_site_document("Navbar[\n{Home;#home}\n{About;#about}\n]")
    assert [n.model_dump() for n in doc.navbar] == [
        {"label": "Home", "url": "#home"},
        {"label": "About", "url": "#about"},
    ]


def test_title_first_occurrence_wins():
    """Only the first '---' line sets the title; later ones are reported as skipped."""
    skipped = []
    doc = parse_site_document("--- First\n--- Second", on_skip=skipped.append)
    assert doc.title == "First"
    assert skipped == ["--- Second"]


def test_logo_text_vs_url():
    assert parse_site_document("Logo[Acme]").logo.kind == LogoKind.text
    assert parse_site_document("Logo[http://x.test/l.png]").logo.kind == LogoKind.url


def test_header_optional_fields_default_empty():
    """Fields beyond the third are optional; unknown types resolve to Classic."""
    doc = parse_site_document("Header[Fancy;Title;Desc]")
    assert doc.header.type == HeaderType.classic
    assert doc.header.title == "Title"
    assert doc.header.description == "Desc"
    assert doc.header.image_url == ""
    assert doc.header.link == ""


def test_header_with_too_few_fields_is_skipped():
    skipped = []
    doc = parse_site_document("Header[BigText;Only]", on_skip=skipped.append)
    assert doc.header is None
    assert skipped == ["Header[BigText;Only]"]
    assert doc.sections == []


# --- sections and ordering ---

def test_content_before_section_gets_implicit_section():
    doc = parse_site_document("Warn[early]\n-- Named\nDef[later]")
    assert [s.title for s in doc.sections] == ["", "Named"]
    assert _types(doc.sections[0]) == ["warn"]


def test_blank_lines_do_not_create_implicit_section():
    doc = parse_site_document("\n\n-- A\ntext")
    assert [s.title for s in doc.sections] == ["A"]


def test_empty_named_section_is_kept():
    doc = parse_site_document("-- A\n-- B\nx")
    assert [s.title for s in doc.sections] == ["A", "B"]
    assert doc.sections[0].content == []


def test_block_order_is_source_order():
    """Different block kinds keep the order they were written in."""
    doc = parse_site_document("Warn[a]\nFeature[\n{🚀;T;D}\n]\nDef[b]")
    assert _types(doc.sections[0]) == ["warn", "feature", "def"]


def test_markdown_between_elements_is_its_own_block():
    doc = parse_site_document("-- S\nintro\nWarn[x]\nmiddle\nImage[u]\nend")
    section = doc.sections[0]
    assert _types(section) == ["markdown", "warn", "markdown", "image", "markdown"]
    assert [b.content for b in section.content if b.type == "markdown"] == ["intro", "middle", "end"]


# --- leniency ---

def test_unclosed_bracket_at_end_of_input():
    """A missing ']' does not raise; the accumulated item is still parsed."""
    doc = parse_site_document("-- S\nFeature[\n{a;b;c}\n")
    (block,) = doc.sections[0].content
    assert block.type == "feature"
    assert [(i.icon, i.title, i.description) for i in block.items] == [("a", "b", "c")]


def test_unclosed_bracket_does_not_swallow_next_section():
    skipped = []
    doc = parse_site_document("Feature[\n{a;b;c}\n-- Next\nWarn[later]", on_skip=skipped.append)
    assert [s.title for s in doc.sections] == ["", "Next"]
    assert _types(doc.sections[0]) == ["feature"]
    assert _types(doc.sections[1]) == ["warn"]
    assert any("unclosed" in s for s in skipped)


def test_short_tuple_dropped_siblings_kept():
    doc = parse_site_document("Stats[\n{OnlyOneField}\n{100+;Users}\n]")
    (block,) = doc.sections[0].content
    assert [(i.value, i.label) for i in block.items] == [("100+", "Users")]


def test_malformed_single_line_directive_is_markdown():
    """A tag that does not close on its line degrades to literal text."""
    doc = parse_site_document("Warn[unclosed")
    (block,) = doc.sections[0].content
    assert block.type == "markdown"
    assert block.content == "Warn[unclosed"


def test_tags_are_case_insensitive():
    doc = parse_site_document("warn[x]\nFEATURE[{a;b;c}]\nnavbar[{H;#}]")
    assert _types(doc.sections[0]) == ["warn", "feature"]
    assert doc.navbar[0].label == "H"


# --- block payloads ---

def test_cta_defaults():
    (cta,) = parse_site_document("CTA[Join us]").sections[0].content
    assert cta.button_text == "Learn More"
    assert cta.button_url == "#"


def test_column_strips_nested_elements():
    doc = parse_site_document("Column[\n{Left text Image[http://x] more}\n{Right}\n]")
    (col,) = doc.sections[0].content
    assert col.left == "Left text  more"
    assert col.right == "Right"


def test_column_with_one_side():
    (col,) = parse_site_document("Column[{Only left}]").sections[0].content
    assert (col.left, col.right) == ("Only left", "")


def test_divider_allows_empty_style():
    (div,) = parse_site_document("Divider[]").sections[0].content
    assert div.type == "divider"
    assert div.style == ""


def test_progress_is_clamped():
    (bar,) = parse_site_document("Progress[150;Done]").sections[0].content
    assert (bar.value, bar.label) == (100, "Done")


def test_supplemented_blocks():
    text = "\n".join([
        "Timeline[{2020;Launch;Born}]",
        "Team[{Ada;CTO;http://a.png;Writes compilers}]",
        "Steps[{Install}{Run;Use the CLI}]",
        "Countdown[Launch;2025-01-01]",
        "Metric[98%;Uptime;+1%]",
        "Badge[NEW]",
        "Gallery[{http://a.png;A}]",
        "FAQ[{Why?;Because.}]",
        "Pricing[{Pro;$9;A, B}]",
        "Testimonial[{Bo;CEO;Great;http://b.png}]",
        "Element[{T;D;http://c.png}]",
        "Embed[http://site.test]",
        "Video[http://v.test/a.mp4]",
        "Bigtitle[Big]",
        "quote[Wise words]",
    ])
    section = parse_site_document(text).sections[0]
    assert _types(section) == [
        "timeline", "team", "steps", "countdown", "metric", "badge", "gallery",
        "faq", "pricing", "testimonial", "element", "embed", "video", "bigtitle", "quote",
    ]
    steps = section.content[2]
    assert [(s.title, s.description) for s in steps.items] == [("Install", ""), ("Run", "Use the CLI")]
    countdown = section.content[3]
    assert (countdown.label, countdown.date, countdown.description) == ("Launch", "2025-01-01", "")


def test_unclosed_bracket_keeps_following_directives_and_prose():
    """An unclosed body owns only its '{...}' groups; what follows is parsed normally."""
    skipped = []
    doc = parse_site_document("Feature[\n{a;b;c}\nWarn[x]\nmore prose\n", on_skip=skipped.append)
    section = doc.sections[0]
    assert _types(section) == ["feature", "warn", "markdown"]
    assert len(section.content[0].items) == 1
    assert section.content[2].content == "more prose"
    assert skipped == ["unclosed bracket at line 1: Feature["]


def test_unclosed_multiline_group_is_kept():
    doc = parse_site_document("Column[\n{\nleft side\n}\n{right}\nafter")
    section = doc.sections[0]
    assert _types(section) == ["column", "markdown"]
    assert (section.content[0].left, section.content[0].right) == ("left side", "right")
    assert section.content[1].content == "after"


def test_stray_close_bracket_in_later_section():
    """A ']' past a section marker never closes an earlier bracket."""
    doc = parse_site_document("-- A\nFeature[\n{a;b;c}\n-- B\ntext ] here\nWarn[x]\n")
    assert [(s.title, _types(s)) for s in doc.sections] == [
        ("A", ["feature"]),
        ("B", ["markdown", "warn"]),
    ]
    assert doc.sections[1].content[0].content == "text ] here"


def test_stray_close_bracket_in_later_prose():
    doc = parse_site_document("-- S\nFeature[\n{a;b;c}\nWarn[x]\nmore ] prose\n")
    section = doc.sections[0]
    assert _types(section) == ["feature", "warn", "markdown"]
    assert section.content[2].content == "more ] prose"


def test_closing_bracket_line_after_groups():
    doc = parse_site_document("Stats[\n{1;a}\n\n{2;b}\n  ] \nafter")
    section = doc.sections[0]
    assert _types(section) == ["stats", "markdown"]
    assert [i.value for i in section.content[0].items] == ["1", "2"]


def test_group_limit():
    lines = ["Stats[", "{1;a}", "", "{2;", "b}", "prose", "{3;c}"]
    assert group_limit(lines, 0) == 5
    assert group_limit(["Stats[{1;a}", "-- Next"], 0) == 1
    assert group_limit(["Stats["], 0) == 1


def test_large_document_parses_in_linear_time():
    """Long inputs stay fast: prose and blocks accumulate without re-copying."""
    text = "-- S\n" + "\n".join("Warn[w]" if i % 2 else f"line {i}" for i in range(20_000))
    started = time.perf_counter()
    doc = parse_site_document(text)
    elapsed = time.perf_counter() - started
    assert len(doc.sections[0].content) == 20_000
    assert elapsed < 1.0


# --- accumulator ---

def test_flush_markdown_is_pure():
    """flush_markdown returns a new accumulator and leaves the input untouched."""
    acc = Accumulator(section=Section(title="S")).push_line("hello\n")
    flushed = flush_markdown(acc)
    assert flushed.buffer is None
    assert acc.buffer is not None
    for state in (acc, flushed):
        section, _ = close_section(state)
        assert section.content == [MarkdownBlock(content="hello")]


def test_emit_creates_implicit_section():
    section, fresh = close_section(emit(Accumulator(), WarnBlock(text="x")))
    assert section.title == ""
    assert _types(section) == ["warn"]
    assert fresh == Accumulator()


def test_accumulator_states_are_persistent():
    """Extending one state never changes another built from the same base."""
    base = emit(Accumulator(), WarnBlock(text="a"))
    left = emit(base, WarnBlock(text="b"))
    right = base.push_line("tail\n")
    assert [b.text for b in close_section(left)[0].content] == ["a", "b"]
    assert _types(close_section(right)[0]) == ["warn", "markdown"]
    assert _types(close_section(base)[0]) == ["warn"]


def test_close_section_whitespace_only():
    section, fresh = close_section(Accumulator().push_line("  \n").push_line("\n"))
    assert section is None
    assert fresh == Accumulator()
