"""Lenient decoder from Block Kit JSON to the block data model."""

import logging
from typing import Any, Optional

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

logger = logging.getLogger(__name__)


class BlockParseError(Exception):
    """Payload can't be interpreted as a list of blocks."""

    pass


def _string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def parse_text(value: Any) -> Optional[TextSpan]:
    """Decode a text object. Returns None when ``value`` isn't one."""
    if isinstance(value, str):
        return PlainText(value)
    if not isinstance(value, dict):
        return None
    text = _string(value.get("text"))
    if value.get("type") == "mrkdwn":
        return MarkdownText(text)
    return PlainText(text)


def _parse_context_element(value: Any) -> Optional[ContextElement]:
    if isinstance(value, dict) and value.get("type") == "image":
        return ImageElement(
            url=_string(value.get("image_url")),
            alt_text=_string(value.get("alt_text")),
        )
    return parse_text(value)


def _parse_section(data: dict) -> SectionBlock:
    fields = data.get("fields")
    parsed_fields = None
    if isinstance(fields, list):
        parsed_fields = [span for span in map(parse_text, fields) if span is not None]
    return SectionBlock(text=parse_text(data.get("text")), fields=parsed_fields)


def _parse_header(data: dict) -> HeaderBlock:
    return HeaderBlock(text=parse_text(data.get("text")) or PlainText(""))


def _parse_image(data: dict) -> ImageBlock:
    return ImageBlock(
        url=_string(data.get("image_url")),
        alt_text=_string(data.get("alt_text")),
    )


def _parse_context(data: dict) -> ContextBlock:
    elements = data.get("elements")
    if not isinstance(elements, list):
        return ContextBlock()
    parsed = [_parse_context_element(element) for element in elements]
    return ContextBlock(elements=[element for element in parsed if element is not None])


def _parse_video(data: dict) -> VideoBlock:
    return VideoBlock(
        title=parse_text(data.get("title")) or PlainText(""),
        description=parse_text(data.get("description")),
    )


# Map block type tags to their decoders
BLOCK_PARSERS = {
    "section": _parse_section,
    "header": _parse_header,
    "divider": lambda data: DividerBlock(),
    "image": _parse_image,
    "context": _parse_context,
    "rich_text": lambda data: RichTextBlock(data=data),
    "video": _parse_video,
    "markdown": lambda data: MarkdownBlock(text=_string(data.get("text"))),
    "actions": lambda data: ActionsBlock(data=data),
    "input": lambda data: InputBlock(data=data),
    "file": lambda data: FileBlock(data=data),
    "event": lambda data: EventBlock(data=data),
}


def parse_block(data: Any) -> Block:
    """Decode one block object.

    Args:
        data: A JSON object with a ``type`` tag

    Returns:
        The matching block, or an UnknownBlock for unrecognized types

    Raises:
        BlockParseError: If ``data`` isn't a JSON object
    """
    if not isinstance(data, dict):
        raise BlockParseError(f"Expected a block object, got {type(data).__name__}")

    block_type = data.get("type")
    parser = BLOCK_PARSERS.get(block_type) if isinstance(block_type, str) else None
    if parser is None:
        logger.debug("Unknown block type %r", block_type)
        return UnknownBlock(
            type=block_type if isinstance(block_type, str) else None,
            data=data,
        )
    return parser(data)


def parse_blocks(data: Any) -> list[Block]:
    """Decode a list of block objects, keeping their order."""
    if not isinstance(data, list):
        raise BlockParseError(f"Expected a list of blocks, got {type(data).__name__}")
    return [parse_block(item) for item in data]


def parse_message(data: Any) -> list[Block]:
    """Decode either a bare block list or a message object with ``blocks``."""
    if isinstance(data, dict):
        if "blocks" not in data:
            raise BlockParseError("Message object has no 'blocks' field")
        return parse_blocks(data["blocks"])
    return parse_blocks(data)
