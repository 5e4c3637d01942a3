"""
Content sanitization for Steam news posts.

Steam news bodies are BBCode with Steam-specific tags. The overlay renders
plain text, so markup artifacts are stripped here and a couple of known
broken posts are patched by id. Steps run in a fixed order and each works on
the output of the previous one.
"""

from __future__ import annotations

import re

from ..config import SanitizeConfig

# Tokens removed together with everything up to and including the next whitespace.
MARKUP_TOKENS = ("previewyoutube=", "url=", "/url")
RUB_MARKER = "/Ru"
RUB_REPLACEMENT = "/RubRub"

_TOKEN_PATTERNS = [(token, re.compile(re.escape(token) + r"\S*\s?")) for token in MARKUP_TOKENS]


def sanitize(text: str, gid: str, rules: SanitizeConfig | None = None) -> str:
    """Clean a news body for display.

    Args:
        text: Raw ``contents`` field from the feed
        gid: Id of the post, used for per-post patches
        rules: Per-post patch settings (defaults when None)

    Returns:
        Text with markup removed and whitespace collapsed to single spaces.
        Applying it twice is not guaranteed to be a no-op.
    """
    rules = rules or SanitizeConfig()
    result = text

    for token, pattern in _TOKEN_PATTERNS:
        # Removing a run can join characters into a new occurrence.
        while token in result:
            result = pattern.sub("", result)

    result = result.replace("[", "").replace("]", "")
    # TODO: confirm with product whether "/list" removal is wanted; it only
    # ever shipped in one revision of the overlay.
    result = result.replace("/list", "")

    if rules.slash_strip_gid is not None and gid == rules.slash_strip_gid:
        result = result.replace("/", "")

    if rules.image_gid is not None and gid == rules.image_gid and rules.image_markup:
        result = result.replace(rules.image_markup, "")

    return " ".join(_rub_token(word) for word in result.split())


def _rub_token(word: str) -> str:
    if RUB_MARKER in word:
        return RUB_REPLACEMENT
    return word
