"""Render Slack blocks as Markdown or plain text.

Typical use::

    from slack_blocks_render import collect_references, parse_message, render_as_markdown

    blocks = parse_message(payload)
    references = collect_references(blocks)
    # Fill in names, e.g. from users.info / conversations.info
    references.users["U123"] = "John Doe"
    markdown = render_as_markdown(blocks, references)
"""

__version__ = "0.1.0"

from slack_blocks_render.core.references import ReferenceStore, collect_references
from slack_blocks_render.model.loader import (
    BlockParseError,
    parse_block,
    parse_blocks,
    parse_message,
)
from slack_blocks_render.renderers import render, render_as_markdown, render_as_text

__all__ = [
    "__version__",
    "ReferenceStore",
    "collect_references",
    "render_as_markdown",
    "render_as_text",
    "render",
    "BlockParseError",
    "parse_block",
    "parse_blocks",
    "parse_message",
]
