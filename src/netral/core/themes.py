"""Theme and header-type enumerations with total fallback resolvers"""

from enum import Enum


class ThemeName(str, Enum):
    """Restrict themes to the fixed set the renderers know tokens for"""
    modern = "Modern"
    natural = "Natural"
    latte = "Latte"
    dark_mode = "Dark Mode"
    terminal = "Terminal"
    ocean = "Ocean"
    solarized = "Solarized"
    midnight = "Midnight"
    minimal = "Minimal"
    sunset = "Sunset"
    neon = "Neon"


class HeaderType(str, Enum):
    classic = "Classic"
    big_text = "BigText"
    split_image = "SplitImage"


DEFAULT_THEME = ThemeName.modern
DEFAULT_HEADER_TYPE = HeaderType.classic


def _lookup(enum_cls, name: str | None, default):
    """Exact value match, then case-insensitive match, else default."""
    if not name:
        return default
    value = name.strip()
    try:
        return enum_cls(value)
    except ValueError:
        pass
    folded = value.casefold()
    for member in enum_cls:
        if member.value.casefold() == folded:
            return member
    return default


def resolve_theme(name: str | None) -> ThemeName:
    """Map free text onto a ThemeName; unknown or empty names give DEFAULT_THEME."""
    return _lookup(ThemeName, name, DEFAULT_THEME)


def resolve_header_type(name: str | None) -> HeaderType:
    """Map free text onto a HeaderType; unknown names give Classic."""
    return _lookup(HeaderType, name, DEFAULT_HEADER_TYPE)


def theme_names() -> list[str]:
    return [t.value for t in ThemeName]
