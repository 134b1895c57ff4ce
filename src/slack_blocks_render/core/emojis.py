"""Emoji shortcode lookup, including Slack skin tone suffixes.

Shortcodes are resolved against the ``emoji`` package data, using both the
CLDR names (``waving_hand``) and the GitHub/Slack style aliases (``wave``).
"""

import re
from functools import lru_cache
from typing import Optional

import emoji

SKIN_TONE_SEPARATOR = "::skin-tone-"

# Fitzpatrick modifiers, light to dark
SKIN_TONE_MODIFIERS = (
    "\U0001F3FB",
    "\U0001F3FC",
    "\U0001F3FD",
    "\U0001F3FE",
    "\U0001F3FF",
)

_VARIATION_SELECTOR = "\ufe0f"
_SKIN_TONE_PATTERN = re.compile(r"\+?[0-9]+")


@lru_cache(maxsize=1)
def _shortcode_index() -> dict[str, str]:
    index: dict[str, str] = {}
    for glyph, data in emoji.EMOJI_DATA.items():
        names = [data.get("en", "")]
        names.extend(data.get("alias", []))
        for name in names:
            if name:
                index.setdefault(name.strip(":"), glyph)
    return index


def lookup_shortcode(shortcode: str) -> Optional[str]:
    """Return the glyph for a shortcode, or None when it's unknown."""
    return _shortcode_index().get(shortcode)


def _with_modifier(glyph: str, modifier: str) -> Optional[str]:
    bare = glyph.replace(_VARIATION_SELECTOR, "")
    candidate = bare[:1] + modifier + bare[1:]
    for variant in (candidate, candidate + _VARIATION_SELECTOR):
        if variant in emoji.EMOJI_DATA:
            return variant
    return None


@lru_cache(maxsize=1024)
def skin_tone_variants(glyph: str) -> tuple[str, ...]:
    """All skin tone variants of ``glyph``, the unmodified glyph first.

    Returns an empty tuple when the emoji doesn't support skin tones.
    """
    if not glyph:
        return ()
    variants = [_with_modifier(glyph, modifier) for modifier in SKIN_TONE_MODIFIERS]
    if any(variant is None for variant in variants):
        return ()
    return (glyph, *variants)


def _parse_skin_tone(value: str) -> Optional[int]:
    if not _SKIN_TONE_PATTERN.fullmatch(value):
        return None
    return int(value)


def resolve_emoji(name: str) -> Optional[str]:
    """Resolve an emoji name such as ``wave`` or ``wave::skin-tone-3``.

    Skin tone ``n`` selects the ``n``-th entry of ``skin_tone_variants``,
    so ``skin-tone-1`` is the unmodified glyph. An unparsable or out of
    range skin tone falls back to the unmodified glyph.

    Returns:
        The glyph, or None when the shortcode is unknown
    """
    parts = name.split(SKIN_TONE_SEPARATOR)
    glyph = lookup_shortcode(parts[0])
    if glyph is None:
        return None

    skin_tone = _parse_skin_tone(parts[1]) if len(parts) > 1 else None
    if not skin_tone:
        return glyph

    variants = skin_tone_variants(glyph)
    if skin_tone > len(variants):
        return glyph
    return variants[skin_tone - 1]
