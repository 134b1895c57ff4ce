"""Typed view over the nested payload of a rich text block.

Slack sends rich text as free-form JSON. The decoder below turns it into a
small closed set of node and element types, checking every field it reads.
Anything that doesn't have the expected shape becomes an ``Unsupported*``
placeholder: it keeps its slot in the tree but renders as nothing.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


class ListOrdering(str, Enum):
    """Ordering of a rich text list."""

    ORDERED = "ordered"
    BULLET = "bullet"


@dataclass(frozen=True)
class Style:
    """Inline style flags of a rich text element."""

    bold: bool = False
    italic: bool = False
    strike: bool = False
    code: bool = False

    @classmethod
    def from_json(cls, value: Any) -> "Style":
        """Build a style from a raw ``style`` value.

        A flag is set only when ``value`` is a mapping and the flag is
        the boolean ``true``.
        """
        if not isinstance(value, dict):
            return cls()
        return cls(
            bold=value.get("bold") is True,
            italic=value.get("italic") is True,
            strike=value.get("strike") is True,
            code=value.get("code") is True,
        )


# =============================================================================
# Inline elements
# =============================================================================

@dataclass(frozen=True)
class TextElement:
    text: str
    style: Style = field(default_factory=Style)


@dataclass(frozen=True)
class ChannelElement:
    channel_id: str
    style: Style = field(default_factory=Style)


@dataclass(frozen=True)
class UserElement:
    user_id: str
    style: Style = field(default_factory=Style)


@dataclass(frozen=True)
class UserGroupElement:
    usergroup_id: str
    style: Style = field(default_factory=Style)


@dataclass(frozen=True)
class EmojiElement:
    """An emoji, named by shortcode.

    Attributes:
        name: Shortcode, optionally followed by ``::skin-tone-<n>``
    """

    name: str


@dataclass(frozen=True)
class LinkElement:
    """A hyperlink.

    Attributes:
        text: Link label
        url: Link target; ``None`` when the payload has no usable URL
        style: Inline style flags
    """

    text: str
    url: Optional[str] = None
    style: Style = field(default_factory=Style)


@dataclass(frozen=True)
class UnsupportedElement:
    """An inline element of unknown kind or malformed shape."""

    data: Any = None


InlineElement = Union[
    TextElement,
    ChannelElement,
    UserElement,
    UserGroupElement,
    EmojiElement,
    LinkElement,
    UnsupportedElement,
]


# =============================================================================
# Rich text nodes
# =============================================================================

@dataclass(frozen=True)
class RichTextSection:
    elements: list[InlineElement] = field(default_factory=list)


@dataclass(frozen=True)
class RichTextList:
    """A list of items, each item being a group of inline elements.

    Attributes:
        ordering: Ordered or bullet list
        items: Inline elements of every item, in order
    """

    ordering: ListOrdering
    items: list[list[InlineElement]] = field(default_factory=list)


@dataclass(frozen=True)
class RichTextPreformatted:
    elements: list[InlineElement] = field(default_factory=list)


@dataclass(frozen=True)
class RichTextQuote:
    elements: list[InlineElement] = field(default_factory=list)


@dataclass(frozen=True)
class UnsupportedNode:
    """A rich text node of unknown kind or malformed shape."""

    data: Any = None


RichTextNode = Union[
    RichTextSection,
    RichTextList,
    RichTextPreformatted,
    RichTextQuote,
    UnsupportedNode,
]


# =============================================================================
# Decoding
# =============================================================================

def decode_inline_element(value: Any) -> InlineElement:
    """Decode a single element of a rich text section."""
    if not isinstance(value, dict):
        logger.debug("Ignoring non-object inline element: %r", value)
        return UnsupportedElement(value)

    kind = value.get("type")
    style = Style.from_json(value.get("style"))

    if kind == "text" and isinstance(value.get("text"), str):
        return TextElement(value["text"], style)
    if kind == "channel" and isinstance(value.get("channel_id"), str):
        return ChannelElement(value["channel_id"], style)
    if kind == "user" and isinstance(value.get("user_id"), str):
        return UserElement(value["user_id"], style)
    if kind == "usergroup" and isinstance(value.get("usergroup_id"), str):
        return UserGroupElement(value["usergroup_id"], style)
    if kind == "emoji" and isinstance(value.get("name"), str):
        return EmojiElement(value["name"])
    if kind == "link" and isinstance(value.get("text"), str):
        url = value.get("url")
        return LinkElement(value["text"], url if isinstance(url, str) else None, style)

    logger.debug("Ignoring unsupported inline element of type %r", kind)
    return UnsupportedElement(value)


def decode_inline_elements(values: list[Any]) -> list[InlineElement]:
    """Decode a list of inline elements, keeping one entry per input."""
    return [decode_inline_element(value) for value in values]


def decode_rich_text_node(value: Any) -> RichTextNode:
    """Decode one top-level node of a rich text block.

    Sections, preformatted blocks and quotes must not carry a ``style``
    key. Lists must carry a string ``style``. All of them need an
    ``elements`` list.
    """
    if not isinstance(value, dict):
        logger.debug("Ignoring non-object rich text node: %r", value)
        return UnsupportedNode(value)

    kind = value.get("type")
    elements = value.get("elements")
    if not isinstance(elements, list):
        logger.debug("Ignoring rich text node %r without an elements list", kind)
        return UnsupportedNode(value)

    has_style = "style" in value
    if kind == "rich_text_section" and not has_style:
        return RichTextSection(decode_inline_elements(elements))
    if kind == "rich_text_preformatted" and not has_style:
        return RichTextPreformatted(decode_inline_elements(elements))
    if kind == "rich_text_quote" and not has_style:
        return RichTextQuote(decode_inline_elements(elements))
    if kind == "rich_text_list" and isinstance(value.get("style"), str):
        ordering = (
            ListOrdering.ORDERED
            if value["style"] == ListOrdering.ORDERED.value
            else ListOrdering.BULLET
        )
        items = [
            decode_inline_elements(item["elements"])
            for item in elements
            if isinstance(item, dict) and isinstance(item.get("elements"), list)
        ]
        return RichTextList(ordering, items)

    logger.debug("Ignoring unsupported rich text node of type %r", kind)
    return UnsupportedNode(value)


def decode_rich_text(data: Any) -> list[RichTextNode]:
    """Decode the payload of a rich text block into its top-level nodes.

    Returns an empty list when the payload has no ``elements`` list.
    """
    if not isinstance(data, dict) or not isinstance(data.get("elements"), list):
        return []
    return [decode_rich_text_node(node) for node in data["elements"]]
