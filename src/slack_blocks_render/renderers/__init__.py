"""Markdown and plain text renderers."""

from typing import Iterable, Optional

from slack_blocks_render.core.references import ReferenceStore
from slack_blocks_render.model.blocks import Block
from slack_blocks_render.renderers.base import BlockRenderer
from slack_blocks_render.renderers.markdown import MarkdownRenderer, render_as_markdown
from slack_blocks_render.renderers.text import TextRenderer, render_as_text

__all__ = [
    "BlockRenderer",
    "MarkdownRenderer",
    "TextRenderer",
    "render_as_markdown",
    "render_as_text",
    "render",
    "get_renderer",
]

# Map output format names to renderers
RENDERER_MAP: dict[str, type[BlockRenderer]] = {
    "markdown": MarkdownRenderer,
    "text": TextRenderer,
}

SUPPORTED_FORMATS = tuple(RENDERER_MAP.keys())


def get_renderer(output_format: str) -> type[BlockRenderer]:
    """Get the renderer class for an output format."""
    name = output_format.lower()
    if name not in RENDERER_MAP:
        raise ValueError(
            f"Unsupported output format: {name}. "
            f"Supported formats: {', '.join(SUPPORTED_FORMATS)}"
        )
    return RENDERER_MAP[name]


def render(
    blocks: Iterable[Block],
    references: Optional[ReferenceStore] = None,
    output_format: str = "markdown",
    handle_delimiter: Optional[str] = None,
) -> str:
    """Render ``blocks`` in the given output format.

    ``handle_delimiter`` only applies to Markdown output.
    """
    renderer = get_renderer(output_format)(references, handle_delimiter)
    return renderer.render(blocks)
