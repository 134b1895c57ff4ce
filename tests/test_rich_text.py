"""Tests for decoding rich text payloads."""

import pytest

from slack_blocks_render.model.rich_text import (
    ChannelElement,
    EmojiElement,
    LinkElement,
    ListOrdering,
    RichTextList,
    RichTextPreformatted,
    RichTextQuote,
    RichTextSection,
    Style,
    TextElement,
    UnsupportedElement,
    UnsupportedNode,
    UserElement,
    UserGroupElement,
    decode_inline_element,
    decode_rich_text,
    decode_rich_text_node,
)


class TestStyle:
    """Tests for Style.from_json."""

    def test_flags(self):
        """Test that only true flags are set."""
        style = Style.from_json({"bold": True, "italic": False, "code": True})

        assert style == Style(bold=True, code=True)

    @pytest.mark.parametrize("value", [None, "bold", ["bold"], {"bold": "true"}, {"bold": 1}])
    def test_invalid_values(self, value):
        """Test that malformed styles give no flags."""
        assert Style.from_json(value) == Style()


class TestDecodeInlineElement:
    """Tests for decode_inline_element."""

    def test_text(self):
        """Test text."""
        element = decode_inline_element(
            {"type": "text", "text": "Hi", "style": {"italic": True}}
        )

        assert element == TextElement("Hi", Style(italic=True))

    def test_mentions(self):
        """Test mentions."""
        assert decode_inline_element({"type": "channel", "channel_id": "C1"}) == ChannelElement("C1")
        assert decode_inline_element({"type": "user", "user_id": "U1"}) == UserElement("U1")
        assert decode_inline_element(
            {"type": "usergroup", "usergroup_id": "G1"}
        ) == UserGroupElement("G1")

    def test_emoji(self):
        """Test emoji."""
        element = decode_inline_element({"type": "emoji", "name": "wave", "unicode": "1f44b"})

        assert element == EmojiElement("wave")

    def test_link(self):
        """Test link."""
        element = decode_inline_element({"type": "link", "text": "x", "url": "https://x.org"})

        assert element == LinkElement("x", "https://x.org")

    def test_link_with_bad_url(self):
        """Test that a non-string URL is dropped."""
        assert decode_inline_element({"type": "link", "text": "x", "url": 5}) == LinkElement("x")

    @pytest.mark.parametrize(
        "value",
        [
            {"type": "text"},
            {"type": "text", "text": None},
            {"type": "user", "user_id": 1},
            {"type": "link", "url": "https://x.org"},
            {"type": "broadcast", "range": "here"},
            {},
            "text",
            None,
        ],
    )
    def test_unsupported(self, value):
        """Test malformed input becomes a placeholder."""
        assert isinstance(decode_inline_element(value), UnsupportedElement)


class TestDecodeRichTextNode:
    """Tests for decode_rich_text_node."""

    def test_section(self):
        """Test section."""
        node = decode_rich_text_node(
            {"type": "rich_text_section", "elements": [{"type": "text", "text": "a"}]}
        )

        assert node == RichTextSection([TextElement("a")])

    def test_preformatted_and_quote(self):
        """Test preformatted and quote."""
        elements = [{"type": "text", "text": "a"}]

        assert decode_rich_text_node(
            {"type": "rich_text_preformatted", "elements": elements, "border": 0}
        ) == RichTextPreformatted([TextElement("a")])
        assert decode_rich_text_node(
            {"type": "rich_text_quote", "elements": elements}
        ) == RichTextQuote([TextElement("a")])

    def test_list(self):
        """Test that list items without elements are skipped."""
        node = decode_rich_text_node({
            "type": "rich_text_list",
            "style": "ordered",
            "indent": 0,
            "elements": [
                {"type": "rich_text_section", "elements": [{"type": "text", "text": "a"}]},
                {"type": "rich_text_section"},
                "junk",
                {"type": "rich_text_section", "elements": []},
            ],
        })

        assert node == RichTextList(ListOrdering.ORDERED, [[TextElement("a")], []])

    def test_list_with_unknown_style_is_bullet(self):
        """Test list with unknown style is bullet."""
        node = decode_rich_text_node({"type": "rich_text_list", "style": "dashed", "elements": []})

        assert node == RichTextList(ListOrdering.BULLET, [])

    @pytest.mark.parametrize(
        "value",
        [
            {"type": "rich_text_section", "style": None, "elements": []},
            {"type": "rich_text_quote", "style": {"bold": True}, "elements": []},
            {"type": "rich_text_section", "elements": "abc"},
            {"type": "rich_text_list", "elements": []},
            {"type": "rich_text_list", "style": 1, "elements": []},
            {"type": "rich_text_table", "elements": []},
            [],
        ],
    )
    def test_unsupported(self, value):
        """Test malformed input becomes a placeholder."""
        assert isinstance(decode_rich_text_node(value), UnsupportedNode)


class TestDecodeRichText:
    """Tests for decode_rich_text."""

    @pytest.mark.parametrize("data", [{}, {"elements": None}, {"elements": {}}, None, []])
    def test_without_elements(self, data):
        """Test payloads without an elements list."""
        assert decode_rich_text(data) == []

    def test_keeps_one_node_per_element(self):
        """Test keeps one node per element."""
        nodes = decode_rich_text({
            "type": "rich_text",
            "elements": [
                {"type": "rich_text_section", "elements": []},
                {"type": "mystery"},
            ],
        })

        assert len(nodes) == 2
        assert isinstance(nodes[1], UnsupportedNode)
