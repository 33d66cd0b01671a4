"""Document trees produced by the Block, Deck and Doc parsers"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from netral.core.themes import DEFAULT_THEME, HeaderType, ThemeName


class Flavor(str, Enum):
    """The three document kinds, keyed by their export file extension"""
    block = "block"
    deck = "deck"
    doc = "doc"

    @property
    def extension(self) -> str:
        return f".net{self.value}"


class LogoKind(str, Enum):
    url = "url"
    text = "text"


class CalloutKind(str, Enum):
    info = "info"
    warning = "warning"
    success = "success"
    error = "error"


# --- item records (one per {field;field;...} group) ---

class NavbarItem(BaseModel):
    label: str
    url:   str


class ElementItem(BaseModel):
    title:       str
    description: str
    image:       str


class FeatureItem(BaseModel):
    icon:        str
    title:       str
    description: str


class TestimonialItem(BaseModel):
    name:  str
    role:  str
    text:  str
    photo: str


class PricingItem(BaseModel):
    title:    str
    price:    str
    benefits: list[str] = Field(default_factory=list)


class StatItem(BaseModel):
    value: str
    label: str


class FAQItem(BaseModel):
    question: str
    answer:   str


class GalleryItem(BaseModel):
    url:     str
    caption: str


class TimelineItem(BaseModel):
    year:        str
    title:       str
    description: str


class TeamMember(BaseModel):
    name:  str
    role:  str
    photo: str
    bio:   str


class StepItem(BaseModel):
    title:       str
    description: str


class ListItem(BaseModel):
    icon: str
    text: str


class GraphNode(BaseModel):
    id:          str
    label:       str
    connections: list[str] = Field(default_factory=list)


# --- content blocks ---

class MarkdownBlock(BaseModel):
    """Free prose between element directives, handed to the markdown engine."""
    type: Literal["markdown"] = "markdown"
    content: str


class ImageBlock(BaseModel):
    type: Literal["image"] = "image"
    url: str


class VideoBlock(BaseModel):
    type: Literal["video"] = "video"
    url: str


class EmbedBlock(BaseModel):
    type: Literal["embed"] = "embed"
    url: str


class BigtitleBlock(BaseModel):
    type: Literal["bigtitle"] = "bigtitle"
    text: str


class WarnBlock(BaseModel):
    type: Literal["warn"] = "warn"
    text: str


class DefBlock(BaseModel):
    type: Literal["def"] = "def"
    text: str


class QuoteBlock(BaseModel):
    type: Literal["quote"] = "quote"
    text: str


class BadgeBlock(BaseModel):
    type: Literal["badge"] = "badge"
    text: str


class DividerBlock(BaseModel):
    type: Literal["divider"] = "divider"
    style: str = ""


class CTABlock(BaseModel):
    type: Literal["cta"] = "cta"
    title:       str
    description: str = ""
    button_text: str = "Learn More"
    button_url:  str = "#"


class CountdownBlock(BaseModel):
    type: Literal["countdown"] = "countdown"
    label:       str
    date:        str = ""
    description: str = ""


class ProgressBlock(BaseModel):
    type: Literal["progress"] = "progress"
    value: int = Field(default=0, ge=0, le=100)
    label: str = ""


class MetricBlock(BaseModel):
    type: Literal["metric"] = "metric"
    value: str
    label: str = ""
    trend: str = ""


class ColumnBlock(BaseModel):
    """Two prose columns; nested element tags are stripped from each side."""
    type: Literal["column"] = "column"
    left:  str = ""
    right: str = ""


class ElementBlock(BaseModel):
    type: Literal["element"] = "element"
    items: list[ElementItem] = Field(default_factory=list)


class FeatureBlock(BaseModel):
    type: Literal["feature"] = "feature"
    items: list[FeatureItem] = Field(default_factory=list)


class TestimonialBlock(BaseModel):
    type: Literal["testimonial"] = "testimonial"
    items: list[TestimonialItem] = Field(default_factory=list)


class PricingBlock(BaseModel):
    type: Literal["pricing"] = "pricing"
    items: list[PricingItem] = Field(default_factory=list)


class StatsBlock(BaseModel):
    type: Literal["stats"] = "stats"
    items: list[StatItem] = Field(default_factory=list)


class FAQBlock(BaseModel):
    type: Literal["faq"] = "faq"
    items: list[FAQItem] = Field(default_factory=list)


class GalleryBlock(BaseModel):
    type: Literal["gallery"] = "gallery"
    items: list[GalleryItem] = Field(default_factory=list)


class TimelineBlock(BaseModel):
    type: Literal["timeline"] = "timeline"
    items: list[TimelineItem] = Field(default_factory=list)


class TeamBlock(BaseModel):
    type: Literal["team"] = "team"
    items: list[TeamMember] = Field(default_factory=list)


class StepsBlock(BaseModel):
    type: Literal["steps"] = "steps"
    items: list[StepItem] = Field(default_factory=list)


class SlideColumnBlock(BaseModel):
    """Any number of prose columns inside a slide."""
    type: Literal["column"] = "column"
    columns: list[str] = Field(default_factory=list)


class ListBlock(BaseModel):
    type: Literal["list"] = "list"
    items: list[ListItem] = Field(default_factory=list)


class CodeBlock(BaseModel):
    type: Literal["code"] = "code"
    lang: str = ""
    code: str = ""


class GraphBlock(BaseModel):
    type: Literal["graph"] = "graph"
    nodes: list[GraphNode] = Field(default_factory=list)


ContentBlock = Annotated[
    Union[
        MarkdownBlock, ImageBlock, VideoBlock, EmbedBlock, BigtitleBlock,
        WarnBlock, DefBlock, QuoteBlock, BadgeBlock, DividerBlock, CTABlock,
        CountdownBlock, ProgressBlock, MetricBlock, ColumnBlock, ElementBlock,
        FeatureBlock, TestimonialBlock, PricingBlock, StatsBlock, FAQBlock,
        GalleryBlock, TimelineBlock, TeamBlock, StepsBlock,
    ],
    Field(discriminator="type"),
]

SlideContentBlock = Annotated[
    Union[
        MarkdownBlock, SlideColumnBlock, FeatureBlock, StatsBlock, ImageBlock,
        WarnBlock, DefBlock, QuoteBlock, BigtitleBlock, TimelineBlock,
        ListBlock, VideoBlock, CodeBlock, BadgeBlock, GalleryBlock,
        ProgressBlock, GraphBlock,
    ],
    Field(discriminator="type"),
]


# --- documents ---

class Logo(BaseModel):
    kind:  LogoKind
    value: str


class HeaderConfig(BaseModel):
    type:        HeaderType = HeaderType.classic
    title:       str
    description: str
    image_url:   str = ""
    link:        str = ""


class Section(BaseModel):
    title:   str = ""
    content: list[ContentBlock] = Field(default_factory=list)


class SiteDocument(BaseModel):
    """A single-page Block site: chrome (navbar, header) plus ordered sections."""
    title:    str = ""
    theme:    ThemeName = DEFAULT_THEME
    logo:     Optional[Logo] = None
    navbar:   list[NavbarItem] = Field(default_factory=list)
    header:   Optional[HeaderConfig] = None
    sections: list[Section] = Field(default_factory=list)


class Slide(BaseModel):
    title:   str = ""
    content: list[SlideContentBlock] = Field(default_factory=list)


class DeckDocument(BaseModel):
    title:  str = ""
    theme:  ThemeName = DEFAULT_THEME
    logo:   Optional[Logo] = None
    slides: list[Slide] = Field(default_factory=list)


class DocCallout(BaseModel):
    kind:    CalloutKind
    message: str


class DocSection(BaseModel):
    title:    str = ""
    level:    Literal[1, 2] = 1        # 1 for '---', 2 for '--'
    content:  str = ""                 # markdown with callouts removed
    callouts: list[DocCallout] = Field(default_factory=list)


class DocDocument(BaseModel):
    title:    str = ""
    theme:    ThemeName = DEFAULT_THEME
    sections: list[DocSection] = Field(default_factory=list)


class ParseStatus(str, Enum):
    complete = "complete"
    partial = "partial"


class ParseResult(BaseModel):
    """A parsed document plus every fragment the lenient parser dropped."""
    flavor:   Flavor
    status:   ParseStatus = ParseStatus.complete
    skipped:  list[str] = Field(default_factory=list)
    document: Union[SiteDocument, DeckDocument, DocDocument]
