"""Traversal framework for block documents.

``Visitor`` walks a document in order and dispatches every block and text
object to a ``visit_*`` method. Each default implementation only recurses
into the node's children, so subclasses override just the node kinds they
produce output for and call ``super()`` to keep the default walk.

Rich text blocks are not decomposed here: their nested payload is left to
``visit_rich_text_block``.
"""

from typing import Iterable

from slack_blocks_render.model.blocks import (
    ActionsBlock,
    Block,
    ContextBlock,
    ContextElement,
    DividerBlock,
    EventBlock,
    FileBlock,
    HeaderBlock,
    ImageBlock,
    ImageElement,
    InputBlock,
    MarkdownBlock,
    MarkdownText,
    PlainText,
    RichTextBlock,
    SectionBlock,
    TextSpan,
    UnknownBlock,
    VideoBlock,
)


class Visitor:
    """Base visitor with no-op defaults for every node kind."""

    _BLOCK_METHODS: dict[type, str] = {
        SectionBlock: "visit_section_block",
        HeaderBlock: "visit_header_block",
        DividerBlock: "visit_divider_block",
        ImageBlock: "visit_image_block",
        ContextBlock: "visit_context_block",
        RichTextBlock: "visit_rich_text_block",
        VideoBlock: "visit_video_block",
        MarkdownBlock: "visit_markdown_block",
        ActionsBlock: "visit_actions_block",
        InputBlock: "visit_input_block",
        FileBlock: "visit_file_block",
        EventBlock: "visit_event_block",
        UnknownBlock: "visit_unknown_block",
    }

    def visit_document(self, blocks: Iterable[Block]) -> None:
        """Visit every block in document order."""
        for block in blocks:
            self.visit_block(block)

    def visit_block(self, block: Block) -> None:
        """Dispatch a block to its ``visit_*`` method."""
        method = self._BLOCK_METHODS.get(type(block), "visit_unknown_block")
        getattr(self, method)(block)

    def visit_text(self, text: TextSpan) -> None:
        """Dispatch a text object by kind."""
        if isinstance(text, MarkdownText):
            self.visit_markdown_text(text)
        elif isinstance(text, PlainText):
            self.visit_plain_text(text)

    def visit_context_element(self, element: ContextElement) -> None:
        if isinstance(element, ImageElement):
            self.visit_image_element(element)
        else:
            self.visit_text(element)

    # Blocks

    def visit_section_block(self, block: SectionBlock) -> None:
        if block.text is not None:
            self.visit_text(block.text)
        for field in block.fields or []:
            self.visit_text(field)

    def visit_header_block(self, block: HeaderBlock) -> None:
        self.visit_text(block.text)

    def visit_divider_block(self, block: DividerBlock) -> None:
        pass

    def visit_image_block(self, block: ImageBlock) -> None:
        pass

    def visit_context_block(self, block: ContextBlock) -> None:
        for element in block.elements:
            self.visit_context_element(element)

    def visit_rich_text_block(self, block: RichTextBlock) -> None:
        pass

    def visit_video_block(self, block: VideoBlock) -> None:
        self.visit_text(block.title)
        if block.description is not None:
            self.visit_text(block.description)

    def visit_markdown_block(self, block: MarkdownBlock) -> None:
        pass

    def visit_actions_block(self, block: ActionsBlock) -> None:
        pass

    def visit_input_block(self, block: InputBlock) -> None:
        pass

    def visit_file_block(self, block: FileBlock) -> None:
        pass

    def visit_event_block(self, block: EventBlock) -> None:
        pass

    def visit_unknown_block(self, block: object) -> None:
        pass

    # Leaves

    def visit_plain_text(self, text: PlainText) -> None:
        pass

    def visit_markdown_text(self, text: MarkdownText) -> None:
        pass

    def visit_image_element(self, element: ImageElement) -> None:
        pass
