"""Starter documents for each flavor"""

from netral.core.models import Flavor


BLOCK_TEMPLATE = """\
--- My Site
Theme[Modern]
Logo[My Site]
Navbar[
{Home;#home}
{Features;#features}
{Pricing;#pricing}
]
Header[BigText;Build pages from plain text;Write element syntax, get a finished site]

-- Features

Feature[
{🚀;Fast;Create pages in minutes}
{🎨;Themes;Eleven themes to choose from}
{📱;Responsive;Adapts to all screens}
]

Stats[
{100+;Users}
{50K;Pages}
{99%;Satisfaction}
]

-- Pricing

Pricing[
{Free;$0;1 site, Community support}
{Pro;$9/mo;Unlimited sites, Custom themes, Priority support}
]

FAQ[
{Can I export my site?;Yes, as a standalone HTML file.}
{Do I need to code?;No, the element syntax is all you need.}
]

CTA[Ready to start?;Write your first page today;Get Started;#home]
"""

DECK_TEMPLATE = """\
--- My Presentation
Theme[Modern]
-- Introduction
Bigtitle[Welcome to my presentation]

This presentation was created with **Netral Deck**.

-- Features

Feature[
{🚀;Fast;Create slides in minutes}
{🎨;Themes;Eleven professional themes}
{📱;Responsive;Adapts to all screens}
]

-- Statistics

Stats[
{100+;Users}
{50K;Presentations}
{99%;Satisfaction}
]

-- Columns

Column[
{
## Left side
Some text with **bold**
- Point 1
- Point 2
}
{
## Right side
Complementary content
}
]

-- Timeline

Timeline[
{2020;Launch;Netral Deck was born}
{2022;Growth;Over 10K users}
{2024;Today;Global adoption}
]

-- Checklist

List[
{✅;Easy to use syntax}
{✅;Beautiful themes}
{🔜;More features coming}
]

-- Conclusion

quote[Simplicity is the ultimate sophistication. - Leonardo da Vinci]

Thank you for your attention!
"""

DOC_TEMPLATE = """\
--- My Document
Theme[Modern]

--- Introduction

Welcome to **Netral Doc**, for simple and elegant documents.

Callout[info;Sections use --- for level one and -- for level two headings.]

--- Features

-- Text formatting

Standard Markdown formatting is supported:

- **Bold** with `**text**`
- *Italic* with `*text*`
- [Links](https://example.com) with `[text](url)`

-- Code

```python
def greet(name):
    return f"Hello, {name}!"
```

--- Conclusion

Callout[success;Export your document to share it.]
"""

TEMPLATES: dict[Flavor, str] = {
    Flavor.block: BLOCK_TEMPLATE,
    Flavor.deck: DECK_TEMPLATE,
    Flavor.doc: DOC_TEMPLATE,
}


def default_content(flavor: Flavor) -> str:
    return TEMPLATES[Flavor(flavor)]
