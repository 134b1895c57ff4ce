"""Block data model for Slack messages.

This module defines the closed set of top-level blocks a message is made
of. Blocks are immutable: they are built once (usually by the loader) and
then only read by visitors and renderers.

The rich text block is the exception to the fixed schema: it keeps its raw
JSON-like payload, which is decoded on demand by
``slack_blocks_render.model.rich_text``.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union


# =============================================================================
# Text objects
# =============================================================================

@dataclass(frozen=True)
class PlainText:
    """A ``plain_text`` text object.

    Attributes:
        text: The raw text content
    """

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class MarkdownText:
    """A ``mrkdwn`` text object, already formatted by the sender.

    Attributes:
        text: The markdown-formatted content
    """

    text: str

    def __str__(self) -> str:
        return self.text


TextSpan = Union[PlainText, MarkdownText]


@dataclass(frozen=True)
class ImageElement:
    """An image used inside a context block.

    Attributes:
        url: Location of the image
        alt_text: Alternative text shown when the image can't be displayed
    """

    url: str
    alt_text: str = ""


ContextElement = Union[ImageElement, PlainText, MarkdownText]


# =============================================================================
# Blocks
# =============================================================================

@dataclass(frozen=True)
class SectionBlock:
    """A section with an optional main text and optional fields.

    Attributes:
        text: Main text of the section
        fields: Secondary texts, rendered after the main text
    """

    text: Optional[TextSpan] = None
    fields: Optional[list[TextSpan]] = None


@dataclass(frozen=True)
class HeaderBlock:
    """A header block (only plain text is allowed by Slack)."""

    text: TextSpan


@dataclass(frozen=True)
class DividerBlock:
    """A horizontal rule."""


@dataclass(frozen=True)
class ImageBlock:
    """A standalone image block.

    Attributes:
        url: Location of the image
        alt_text: Alternative text for the image
    """

    url: str
    alt_text: str = ""


@dataclass(frozen=True)
class ContextBlock:
    """A context block made of small images and texts."""

    elements: list[ContextElement] = field(default_factory=list)


@dataclass(frozen=True)
class RichTextBlock:
    """A rich text block.

    Attributes:
        data: The raw ``rich_text`` payload, with its nested ``elements``
    """

    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class VideoBlock:
    """An embedded video.

    Attributes:
        title: Video title
        description: Optional video description
    """

    title: TextSpan
    description: Optional[TextSpan] = None


@dataclass(frozen=True)
class MarkdownBlock:
    """A ``markdown`` block whose text is passed through verbatim."""

    text: str


@dataclass(frozen=True)
class ActionsBlock:
    """Interactive elements. Carries nothing renderable."""

    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class InputBlock:
    """An input control. Carries nothing renderable."""

    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class FileBlock:
    """A remote file reference. Carries nothing renderable."""

    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class EventBlock:
    """An event payload. Carries nothing renderable."""

    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class UnknownBlock:
    """A block whose type isn't recognized. Rendered as nothing.

    Attributes:
        type: The ``type`` tag found in the payload, if any
        data: The raw payload
    """

    type: Optional[str] = None
    data: dict[str, Any] = field(default_factory=dict)


Block = Union[
    SectionBlock,
    HeaderBlock,
    DividerBlock,
    ImageBlock,
    ContextBlock,
    RichTextBlock,
    VideoBlock,
    MarkdownBlock,
    ActionsBlock,
    InputBlock,
    FileBlock,
    EventBlock,
    UnknownBlock,
]

Document = list[Block]
