"""Item-list tokenization: '{a;b;c}' groups into fixed-arity tuples and item records"""

import re
from typing import Callable, Optional

from netral.core.models import (
    ElementItem,
    FAQItem,
    FeatureItem,
    GalleryItem,
    GraphNode,
    ListItem,
    NavbarItem,
    PricingItem,
    StatItem,
    StepItem,
    TeamMember,
    TestimonialItem,
    TimelineItem,
)


GROUP_RE = re.compile(r"\{([^{}]*)\}")

SkipHook = Optional[Callable[[str], None]]


def tokenize_items(
    content: str,
    arity: int,
    min_fields: int | None = None,
    on_skip: SkipHook = None,
    ) -> list[tuple[str, ...]]:
    """Split bracket content into ordered, trimmed arity-tuples.

    The last field absorbs any extra ';'. Groups with fewer than min_fields
    (default: arity) fields are dropped; optional trailing fields become ''.
    """
    required = arity if min_fields is None else min_fields
    items: list[tuple[str, ...]] = []
    for m in GROUP_RE.finditer(content):
        fields = [f.strip() for f in m.group(1).split(";", arity - 1)]
        if len(fields) < required:
            if on_skip:
                on_skip(m.group(0))
            continue
        fields += [""] * (arity - len(fields))
        items.append(tuple(fields))
    return items


def split_list(value: str, sep: str = ",") -> list[str]:
    """Split on sep, trimming entries and dropping blanks."""
    return [part.strip() for part in value.split(sep) if part.strip()]


def split_payload(payload: str, count: int) -> list[str]:
    """Positional ';' payload for single-line directives, padded with ''."""
    parts = [p.strip() for p in payload.split(";")]
    return parts + [""] * (count - len(parts))


def clamp_percent(value: str) -> int:
    """Leading integer of value clamped to 0..100; non-numeric gives 0."""
    m = re.match(r"\s*([+-]?\d+)", value)
    number = int(m.group(1)) if m else 0
    return min(100, max(0, number))


def navbar_items(content: str, on_skip: SkipHook = None) -> list[NavbarItem]:
    return [NavbarItem(label=a, url=b) for a, b in tokenize_items(content, 2, on_skip=on_skip)]


def element_items(content: str, on_skip: SkipHook = None) -> list[ElementItem]:
    return [
        ElementItem(title=a, description=b, image=c)
        for a, b, c in tokenize_items(content, 3, on_skip=on_skip)
    ]


def feature_items(content: str, on_skip: SkipHook = None) -> list[FeatureItem]:
    return [
        FeatureItem(icon=a, title=b, description=c)
        for a, b, c in tokenize_items(content, 3, on_skip=on_skip)
    ]


def testimonial_items(content: str, on_skip: SkipHook = None) -> list[TestimonialItem]:
    return [
        TestimonialItem(name=a, role=b, text=c, photo=d)
        for a, b, c, d in tokenize_items(content, 4, on_skip=on_skip)
    ]


def pricing_items(content: str, on_skip: SkipHook = None) -> list[PricingItem]:
    return [
        PricingItem(title=a, price=b, benefits=split_list(c))
        for a, b, c in tokenize_items(content, 3, on_skip=on_skip)
    ]


def stat_items(content: str, on_skip: SkipHook = None) -> list[StatItem]:
    return [StatItem(value=a, label=b) for a, b in tokenize_items(content, 2, on_skip=on_skip)]


def faq_items(content: str, on_skip: SkipHook = None) -> list[FAQItem]:
    return [FAQItem(question=a, answer=b) for a, b in tokenize_items(content, 2, on_skip=on_skip)]


def gallery_items(content: str, on_skip: SkipHook = None) -> list[GalleryItem]:
    return [GalleryItem(url=a, caption=b) for a, b in tokenize_items(content, 2, on_skip=on_skip)]


def timeline_items(content: str, on_skip: SkipHook = None) -> list[TimelineItem]:
    return [
        TimelineItem(year=a, title=b, description=c)
        for a, b, c in tokenize_items(content, 3, on_skip=on_skip)
    ]


def team_members(content: str, on_skip: SkipHook = None) -> list[TeamMember]:
    # photo and bio are optional
    return [
        TeamMember(name=a, role=b, photo=c, bio=d)
        for a, b, c, d in tokenize_items(content, 4, min_fields=2, on_skip=on_skip)
    ]


def step_items(content: str, on_skip: SkipHook = None) -> list[StepItem]:
    return [
        StepItem(title=a, description=b)
        for a, b in tokenize_items(content, 2, min_fields=1, on_skip=on_skip)
    ]


def list_items(content: str, on_skip: SkipHook = None) -> list[ListItem]:
    return [ListItem(icon=a, text=b) for a, b in tokenize_items(content, 2, on_skip=on_skip)]


def graph_nodes(content: str, on_skip: SkipHook = None) -> list[GraphNode]:
    """Nodes written as {id;label} or {id;label;->target1,target2}."""
    nodes = []
    for node_id, label, edges in tokenize_items(content, 3, min_fields=2, on_skip=on_skip):
        targets = edges[2:] if edges.startswith("->") else edges
        nodes.append(GraphNode(id=node_id, label=label, connections=split_list(targets)))
    return nodes
