"""Tests for news content sanitization."""

from steam_feed.config import SanitizeConfig
from steam_feed.core.sanitizer import sanitize

SLASH_GID = "5218041989051270041"
IMAGE_GID = "5124585319850001325"


def test_url_token_removed_through_next_space():
    assert sanitize("Fixed url=http://x bug", "1") == "Fixed bug"


def test_url_bbcode_link_collapses():
    result = sanitize("See [url=https://a.b]here[/url] today", "1")

    assert result == "See today"
    assert "url=" not in result


def test_previewyoutube_removed():
    text = "Watch [previewyoutube=abc;full][/previewyoutube] now"

    result = sanitize(text, "1")

    assert result == "Watch now"
    assert "previewyoutube=" not in result


def test_closing_url_token_removed():
    assert sanitize("a [/url] b", "1") == "a b"


def test_token_at_end_of_text_removes_the_tail():
    assert sanitize("Link url=http://x", "1") == "Link"


def test_removal_repeats_when_a_new_occurrence_forms():
    # Removing "url=x " from "uurl=x rl=y" leaves "url=y".
    assert sanitize("uurl=x rl=y z", "1") == "z"


def test_square_brackets_stripped():
    result = sanitize("[h1]Patch [Notes][/h1]", "1")

    assert "[" not in result
    assert "]" not in result
    assert result == "h1Patch Notes/h1"


def test_list_substring_removed():
    assert sanitize("[list][*]one[/list]", "1") == "list*one"


def test_slashes_stripped_only_for_patched_article():
    assert sanitize("a/b c/d", SLASH_GID) == "ab cd"
    assert sanitize("a/b c/d", "1") == "a/b c/d"


def test_image_markup_removed_only_for_patched_article():
    image = "[img]{STEAM_CLAN_IMAGE}/7432088/4fcada2e76dd5b2839d84e420a53315d8e078f98.png[/img]"
    text = f"Hi {image} there"

    assert sanitize(text, IMAGE_GID) == "Hi /img there"
    assert "STEAM_CLAN_IMAGE" in sanitize(text, "1")


def test_patches_follow_configured_ids():
    rules = SanitizeConfig(slash_strip_gid="42", image_gid=None)

    assert sanitize("a/b", "42", rules) == "ab"
    assert sanitize("a/b", SLASH_GID, rules) == "a/b"


def test_rub_tokens_replaced_whole():
    result = sanitize("Visit /Ruins and a/Rubble here", "1")

    assert result == "Visit /RubRub and /RubRub here"


def test_whitespace_collapsed_to_single_spaces():
    assert sanitize("  first \n\n second\tthird  ", "1") == "first second third"


def test_empty_text():
    assert sanitize("", "1") == ""
