"""Shared plumbing for block renderers."""

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional, TypeVar

from slack_blocks_render.core.references import ReferenceStore
from slack_blocks_render.core.visitor import Visitor
from slack_blocks_render.model.blocks import Block, TextSpan

NodeT = TypeVar("NodeT")


class BlockRenderer(Visitor, ABC):
    """Visitor that accumulates rendered pieces of text.

    Every block contributes its pieces to ``sub_texts``; ``render`` joins
    them with ``block_separator``. Blocks with nested content (sections,
    headers, context) collect their children in a scope of their own with
    ``render_children`` and then emit one combined piece.

    ``handle_delimiter`` is accepted by every renderer; formats without
    mention markup ignore it.
    """

    block_separator: str = ""

    def __init__(
        self,
        references: Optional[ReferenceStore] = None,
        handle_delimiter: Optional[str] = None,
    ) -> None:
        self.references = references if references is not None else ReferenceStore()
        self.handle_delimiter = handle_delimiter or ""
        self.sub_texts: list[str] = []

    @property
    @abstractmethod
    def output_format(self) -> str:
        """Name of the produced format (e.g. 'markdown')."""
        ...

    def render(self, blocks: Iterable[Block]) -> str:
        """Render a whole document to a single string."""
        self.sub_texts = []
        self.visit_document(blocks)
        return self.block_separator.join(self.sub_texts)

    def emit(self, text: str) -> None:
        self.sub_texts.append(text)

    def render_children(self, visit: Callable[[NodeT], None], node: NodeT) -> list[str]:
        """Run ``visit(node)`` against an empty accumulator and return it."""
        saved = self.sub_texts
        self.sub_texts = []
        try:
            visit(node)
            return self.sub_texts
        finally:
            self.sub_texts = saved

    @staticmethod
    def span_text(span: TextSpan) -> str:
        """Raw text of a span, whatever its kind."""
        return span.text
