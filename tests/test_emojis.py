"""Tests for emoji shortcode resolution."""

import pytest

from slack_blocks_render.core.emojis import (
    lookup_shortcode,
    resolve_emoji,
    skin_tone_variants,
)


class TestLookupShortcode:
    """Tests for plain shortcode lookup."""

    def test_slack_alias(self):
        """Test Slack/GitHub style aliases."""
        assert lookup_shortcode("wave") == "👋"
        assert lookup_shortcode("thumbsup") == "👍"

    def test_cldr_name(self):
        """Test Unicode CLDR names."""
        assert lookup_shortcode("waving_hand") == "👋"

    def test_unknown(self):
        """Test unknown."""
        assert lookup_shortcode("bbb") is None
        assert lookup_shortcode("") is None


class TestSkinToneVariants:
    """Tests for skin tone variant discovery."""

    def test_supported(self):
        """Test that the unmodified glyph comes first."""
        variants = skin_tone_variants("👋")

        assert variants == ("👋", "👋🏻", "👋🏼", "👋🏽", "👋🏾", "👋🏿")

    def test_unsupported(self):
        """Test unsupported."""
        assert skin_tone_variants("🚀") == ()

    def test_empty(self):
        """Test an empty shortcode."""
        assert skin_tone_variants("") == ()


class TestResolveEmoji:
    """Tests for full emoji name resolution."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("wave", "👋"),
            ("wave::skin-tone-1", "👋"),
            ("wave::skin-tone-2", "👋🏻"),
            ("wave::skin-tone-6", "👋🏿"),
        ],
    )
    def test_skin_tones(self, name, expected):
        """Test skin tones."""
        assert resolve_emoji(name) == expected

    @pytest.mark.parametrize(
        "name",
        [
            "wave::skin-tone-42",
            "wave::skin-tone-7",
            "wave::skin-tone-0",
            "wave::skin-tone-abc",
            "wave::skin-tone--2",
            "wave::skin-tone-",
        ],
    )
    def test_invalid_skin_tone_falls_back(self, name):
        """Test that a bad skin tone never fails."""
        assert resolve_emoji(name) == "👋"

    def test_skin_tone_on_unsupported_emoji(self):
        """Test that emoji without variants ignore the skin tone."""
        assert resolve_emoji("rocket::skin-tone-3") == "🚀"

    def test_unknown(self):
        """Test unknown."""
        assert resolve_emoji("bbb") is None
        assert resolve_emoji("bbb::skin-tone-2") is None
