"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_SITE = """\
--- Acme
Theme[Ocean]
Logo[https://acme.test/logo.png]
Navbar[
{Home;#home}
{About;#about}
]
Header[SplitImage;Welcome;We build things;https://acme.test/hero.png;#about]

-- About
Some **intro** text.

Feature[
{🚀;Fast;Really fast}
{🎨;Pretty;Really pretty}
]

Closing words.
-- Contact
CTA[Talk to us;We reply quickly;Write;mailto:hi@acme.test]
"""

SAMPLE_DECK = """\
--- Quarterly Review
Theme[Midnight]
Logo[ACME]
-- Intro
Bigtitle[Q3 in numbers]
Welcome everyone.
-- Numbers
Stats[
{$12M;Revenue}
{45%;Growth}
]
-- Plan
Column[
{**Challenges** Warn[ignored here]}
{**Solutions**}
]
"""

SAMPLE_DOC = """\
--- Handbook
Theme[Minimal]

--- Getting started

Read this first.
Callout[info;Ask questions early.]

-- Tools

We use git.

--- Wrap up

Callout[success;You are ready.]
"""


@pytest.fixture(name="sample_site")
def sample_site_fixture():
    return SAMPLE_SITE


@pytest.fixture(name="sample_deck")
def sample_deck_fixture():
    return SAMPLE_DECK


@pytest.fixture(name="sample_doc")
def sample_doc_fixture():
    return SAMPLE_DOC
