"""Data model for Slack blocks and rich text."""

from slack_blocks_render.model.blocks import (
    ActionsBlock,
    Block,
    ContextBlock,
    DividerBlock,
    Document,
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
from slack_blocks_render.model.loader import (
    BlockParseError,
    parse_block,
    parse_blocks,
    parse_message,
)

__all__ = [
    "ActionsBlock",
    "Block",
    "ContextBlock",
    "DividerBlock",
    "Document",
    "EventBlock",
    "FileBlock",
    "HeaderBlock",
    "ImageBlock",
    "ImageElement",
    "InputBlock",
    "MarkdownBlock",
    "MarkdownText",
    "PlainText",
    "RichTextBlock",
    "SectionBlock",
    "TextSpan",
    "UnknownBlock",
    "VideoBlock",
    "BlockParseError",
    "parse_block",
    "parse_blocks",
    "parse_message",
]
