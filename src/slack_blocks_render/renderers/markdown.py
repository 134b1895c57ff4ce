"""Render blocks as Markdown."""

import logging
from typing import Iterable, Optional

from slack_blocks_render.core.emojis import resolve_emoji
from slack_blocks_render.core.references import ReferenceStore
from slack_blocks_render.model.blocks import (
    Block,
    ContextBlock,
    DividerBlock,
    HeaderBlock,
    ImageBlock,
    ImageElement,
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
    Style,
    TextElement,
    UserElement,
    UserGroupElement,
    decode_rich_text,
)
from slack_blocks_render.renderers.base import BlockRenderer

logger = logging.getLogger(__name__)

# Checked in this order on every pair of adjacent runs
STYLE_MARKERS = ("`", "~", "_", "*")


def apply_style(text: str, style: Style) -> str:
    """Wrap ``text`` in the markers of ``style``.

    Bold is applied first and code last: bold, italic and strike together
    give ``~_*text*_~``.
    """
    if style.bold:
        text = f"*{text}*"
    if style.italic:
        text = f"_{text}_"
    if style.strike:
        text = f"~{text}~"
    if style.code:
        text = f"`{text}`"
    return text


def merge_adjacent_runs(texts: list[str]) -> str:
    """Concatenate styled runs, collapsing markers shared at their boundary.

    Two bold runs ``*Hello*`` and ``*World*`` become ``*HelloWorld*``.
    Pairs are handled once, left to right; the trimmed right-hand run is
    the left-hand run of the next pair.
    """
    texts = list(texts)
    for i in range(len(texts) - 1):
        for marker in STYLE_MARKERS:
            if texts[i].endswith(marker) and texts[i + 1].startswith(marker):
                texts[i] = texts[i][:-1]
                texts[i + 1] = texts[i + 1][1:]
    return "".join(texts)


def render_link(url: str, text: str) -> str:
    return f"[{text}]({url})"


def render_image(url: str, alt_text: str) -> str:
    return f"![{alt_text}]({url})"


class MarkdownRenderer(BlockRenderer):
    """Render a document as Markdown.

    Blocks are separated by newlines. User and user group mentions can be
    wrapped in a ``handle_delimiter`` on both sides (e.g. ``@`` gives
    ``@@John Doe@``).
    """

    block_separator = "\n"

    @property
    def output_format(self) -> str:
        return "markdown"

    # Blocks

    def visit_section_block(self, block: SectionBlock) -> None:
        self.emit(merge_adjacent_runs(self.render_children(super().visit_section_block, block)))

    def visit_header_block(self, block: HeaderBlock) -> None:
        header = merge_adjacent_runs(self.render_children(super().visit_header_block, block))
        self.emit(f"## {header}")

    def visit_divider_block(self, block: DividerBlock) -> None:
        self.emit("---\n")

    def visit_image_block(self, block: ImageBlock) -> None:
        self.emit(render_image(block.url, block.alt_text))

    def visit_context_block(self, block: ContextBlock) -> None:
        self.emit("".join(self.render_children(super().visit_context_block, block)))

    def visit_rich_text_block(self, block: RichTextBlock) -> None:
        nodes = decode_rich_text(block.data)
        self.emit("\n".join(self.render_rich_text_node(node) for node in nodes))

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

    def visit_image_element(self, element: ImageElement) -> None:
        self.emit(render_image(element.url, element.alt_text))

    # Rich text

    def render_rich_text_node(self, node: RichTextNode) -> str:
        if isinstance(node, RichTextSection):
            return self.render_inline_elements(node.elements)
        if isinstance(node, RichTextList):
            prefix = "1." if node.ordering is ListOrdering.ORDERED else "-"
            return "\n".join(
                f"{prefix} {self.render_inline_elements(item)}" for item in node.items
            )
        if isinstance(node, RichTextPreformatted):
            return f"```{self.render_inline_elements(node.elements)}```"
        if isinstance(node, RichTextQuote):
            return f"> {self.render_inline_elements(node.elements)}"
        return ""

    def render_inline_elements(self, elements: Iterable[InlineElement]) -> str:
        return merge_adjacent_runs([self.render_inline_element(e) for e in elements])

    def render_inline_element(self, element: InlineElement) -> str:
        if isinstance(element, TextElement):
            return apply_style(element.text, element.style)

        if isinstance(element, ChannelElement):
            channel = self.references.channel_name(element.channel_id)
            return apply_style(f"#{channel}", element.style)

        if isinstance(element, (UserElement, UserGroupElement)):
            if isinstance(element, UserElement):
                name = self.references.user_name(element.user_id)
            else:
                name = self.references.usergroup_name(element.usergroup_id)
            delimiter = self.handle_delimiter
            return apply_style(f"{delimiter}@{name}{delimiter}", element.style)

        if isinstance(element, EmojiElement):
            glyph = resolve_emoji(element.name)
            return glyph if glyph is not None else f":{element.name}:"

        if isinstance(element, LinkElement):
            if element.url is None:
                logger.debug("Dropping link %r without a URL", element.text)
                return ""
            return apply_style(render_link(element.url, element.text), element.style)

        return ""


def render_as_markdown(
    blocks: Iterable[Block],
    references: Optional[ReferenceStore] = None,
    handle_delimiter: Optional[str] = None,
) -> str:
    """Render a document as Markdown.

    Args:
        blocks: The blocks of the message, in order
        references: Resolved names for channels, users and user groups;
            unresolved IDs are rendered as-is
        handle_delimiter: String placed on both sides of user and user
            group mentions (none by default)

    Returns:
        The Markdown text
    """
    return MarkdownRenderer(references, handle_delimiter).render(blocks)
