"""Traversal, reference resolution and emoji lookup."""

from slack_blocks_render.core.emojis import resolve_emoji
from slack_blocks_render.core.references import (
    ReferenceCollector,
    ReferenceStore,
    collect_references,
)
from slack_blocks_render.core.visitor import Visitor

__all__ = [
    "Visitor",
    "ReferenceStore",
    "ReferenceCollector",
    "collect_references",
    "resolve_emoji",
]
