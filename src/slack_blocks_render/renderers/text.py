"""Render blocks as plain text.

Style flags are ignored and images are dropped. Links keep their label
only, and emoji with an unknown shortcode disappear instead of falling
back to ``:name:``. List and quote prefixes are kept since they carry
structure rather than style.
"""

from typing import Iterable, Optional

from slack_blocks_render.core.emojis import resolve_emoji
from slack_blocks_render.core.references import ReferenceStore
from slack_blocks_render.model.blocks import (
    Block,
    ContextBlock,
    DividerBlock,
    HeaderBlock,
    MarkdownBlock,
    MarkdownText,
    PlainText,
    RichTextBlock,
    SectionBlock,
    VideoBlock,
)
from slack_blocks_render.model.rich_text import (
    ChannelElement,
    EmojiElement,
    InlineElement,
    LinkElement,
    ListOrdering,
    RichTextList,
    RichTextNode,
    RichTextPreformatted,
    RichTextQuote,
    RichTextSection,
    TextElement,
    UserElement,
    UserGroupElement,
    decode_rich_text,
)
from slack_blocks_render.renderers.base import BlockRenderer


class TextRenderer(BlockRenderer):
    """Render a document as unstyled text, blocks concatenated."""

    block_separator = ""

    @property
    def output_format(self) -> str:
        return "text"

    def visit_section_block(self, block: SectionBlock) -> None:
        self.emit("".join(self.render_children(super().visit_section_block, block)))

    def visit_header_block(self, block: HeaderBlock) -> None:
        self.emit("".join(self.render_children(super().visit_header_block, block)))

    def visit_divider_block(self, block: DividerBlock) -> None:
        self.emit("---\n")

    def visit_context_block(self, block: ContextBlock) -> None:
        self.emit("".join(self.render_children(super().visit_context_block, block)))

    def visit_rich_text_block(self, block: RichTextBlock) -> None:
        nodes = decode_rich_text(block.data)
        self.emit("".join(self.render_rich_text_node(node) for node in nodes))

    def visit_video_block(self, block: VideoBlock) -> None:
        video = self.span_text(block.title)
        if block.description is not None:
            video += f"\n{self.span_text(block.description)}"
        self.emit(video)

    def visit_markdown_block(self, block: MarkdownBlock) -> None:
        self.emit(block.text)

    def visit_plain_text(self, text: PlainText) -> None:
        self.emit(text.text)

    def visit_markdown_text(self, text: MarkdownText) -> None:
        self.emit(text.text)

    def render_rich_text_node(self, node: RichTextNode) -> str:
        if isinstance(node, (RichTextSection, RichTextPreformatted)):
            return self.render_inline_elements(node.elements)
        if isinstance(node, RichTextList):
            prefix = "1." if node.ordering is ListOrdering.ORDERED else "-"
            return "\n".join(
                f"{prefix} {self.render_inline_elements(item)}" for item in node.items
            )
        if isinstance(node, RichTextQuote):
            return f"> {self.render_inline_elements(node.elements)}"
        return ""

    def render_inline_elements(self, elements: Iterable[InlineElement]) -> str:
        return "".join(self.render_inline_element(e) for e in elements)

    def render_inline_element(self, element: InlineElement) -> str:
        if isinstance(element, TextElement):
            return element.text
        if isinstance(element, ChannelElement):
            return f"#{self.references.channel_name(element.channel_id)}"
        if isinstance(element, UserElement):
            return f"@{self.references.user_name(element.user_id)}"
        if isinstance(element, UserGroupElement):
            return f"@{self.references.usergroup_name(element.usergroup_id)}"
        if isinstance(element, EmojiElement):
            return resolve_emoji(element.name) or ""
        if isinstance(element, LinkElement):
            return element.text
        return ""


def render_as_text(
    blocks: Iterable[Block],
    references: Optional[ReferenceStore] = None,
) -> str:
    """Render a document as plain text.

    Args:
        blocks: The blocks of the message, in order
        references: Resolved names for channels, users and user groups

    Returns:
        The text content, without any Markdown markers
    """
    return TextRenderer(references).render(blocks)
