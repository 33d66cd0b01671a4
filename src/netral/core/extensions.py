"""Inline markup extensions rewritten to HTML before markdown conversion"""

import html
import re


BUTTON_RE = re.compile(r'\{button\s+label:"([^"]+)"\s+url:"([^"]+)"\}')
# Non-greedy to the nearest {/block}; nested blocks are not supported.
BLOCK_RE = re.compile(r'\{block\s+type:"([^"]+)"\}([\s\S]*?)\{/block\}')
GALLERY_RE = re.compile(r"\{gallery\s+([^}]+)\}")

EXTENSIONS = [
    {
        "name": "Button",
        "syntax": '{button label:"Text" url:"https://..."}',
        "description": "Creates a clickable button that links to a URL",
    },
    {
        "name": "Block",
        "syntax": '{block type:"warning"} content {/block}',
        "description": "Creates a styled content block. Types: warning, info, success, error",
    },
    {
        "name": "Gallery",
        "syntax": "{gallery url1,url2,url3}",
        "description": "Creates an image gallery from comma-separated URLs",
    },
]


def _attr(value: str) -> str:
    return html.escape(value, quote=True)


def _button(m: re.Match) -> str:
    return (
        f'<a href="{_attr(m.group(2))}" class="netral-button" '
        f'target="_blank" rel="noopener noreferrer">{html.escape(m.group(1))}</a>'
    )


def _block(m: re.Match) -> str:
    return f'<div class="netral-block {_attr(m.group(1))}">{m.group(2)}</div>'


def _gallery(m: re.Match) -> str:
    urls = [url.strip() for url in m.group(1).split(",")]
    images = "\n".join(
        f'<img src="{_attr(url)}" alt="Gallery image" loading="lazy" />' for url in urls
    )
    return f'<div class="netral-gallery">{images}</div>'


def preprocess(markdown: str) -> str:
    """Apply button, block and gallery substitutions, in that order."""
    result = BUTTON_RE.sub(_button, markdown)
    result = BLOCK_RE.sub(_block, result)
    return GALLERY_RE.sub(_gallery, result)


def extension_info() -> list[dict[str, str]]:
    return [dict(ext) for ext in EXTENSIONS]
