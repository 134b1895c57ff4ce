"""Channel, user and user group references found in a document.

Resolving identifiers to names is a two-phase process owned by the caller:

1. ``collect_references`` walks a document and returns a ``ReferenceStore``
   listing every identifier it mentions, each still unresolved (``None``).
2. The caller fills in names (e.g. from the Slack Web API) and hands the
   store to a renderer, which falls back to the raw identifier for any
   entry that is missing or unresolved.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from slack_blocks_render.core.visitor import Visitor
from slack_blocks_render.model.blocks import Block, RichTextBlock
from slack_blocks_render.model.rich_text import (
    ChannelElement,
    InlineElement,
    RichTextList,
    RichTextPreformatted,
    RichTextQuote,
    RichTextSection,
    UserElement,
    UserGroupElement,
    decode_rich_text,
)

REFERENCE_KINDS = ("channels", "users", "usergroups")


@dataclass
class ReferenceStore:
    """Identifier to name mappings for every kind of reference.

    A key that is absent was never collected; a key mapped to ``None`` was
    collected but not resolved; a key mapped to a string is resolved.

    Attributes:
        channels: Channel ID -> channel name
        users: User ID -> display name
        usergroups: User group ID -> handle or name
    """

    channels: dict[str, Optional[str]] = field(default_factory=dict)
    users: dict[str, Optional[str]] = field(default_factory=dict)
    usergroups: dict[str, Optional[str]] = field(default_factory=dict)

    @staticmethod
    def _lookup(mapping: dict[str, Optional[str]], identifier: str) -> str:
        name = mapping.get(identifier)
        return identifier if name is None else name

    def channel_name(self, channel_id: str) -> str:
        """Resolved channel name, or the raw ID when unknown."""
        return self._lookup(self.channels, channel_id)

    def user_name(self, user_id: str) -> str:
        """Resolved user name, or the raw ID when unknown."""
        return self._lookup(self.users, user_id)

    def usergroup_name(self, usergroup_id: str) -> str:
        """Resolved user group name, or the raw ID when unknown."""
        return self._lookup(self.usergroups, usergroup_id)

    def unresolved(self) -> dict[str, list[str]]:
        """IDs that are still waiting for a name, grouped by kind."""
        return {
            kind: sorted(key for key, name in getattr(self, kind).items() if name is None)
            for kind in REFERENCE_KINDS
        }

    def update(self, other: "ReferenceStore") -> None:
        """Fold the entries of ``other`` into this store.

        Resolved names in ``other`` win; unresolved entries only add keys
        that aren't present yet.
        """
        for kind in REFERENCE_KINDS:
            target = getattr(self, kind)
            for key, name in getattr(other, kind).items():
                if name is not None or key not in target:
                    target[key] = name

    def to_dict(self) -> dict[str, dict[str, Optional[str]]]:
        return {kind: dict(getattr(self, kind)) for kind in REFERENCE_KINDS}

    @classmethod
    def from_dict(cls, data: Any) -> "ReferenceStore":
        """Build a store from ``{"users": {...}, "channels": {...}, ...}``.

        Entries that aren't string keys with string or null values are
        ignored.
        """
        store = cls()
        if not isinstance(data, dict):
            return store
        for kind in REFERENCE_KINDS:
            mapping = data.get(kind)
            if not isinstance(mapping, dict):
                continue
            getattr(store, kind).update(
                (key, name)
                for key, name in mapping.items()
                if isinstance(key, str) and (name is None or isinstance(name, str))
            )
        return store


class ReferenceCollector(Visitor):
    """Visitor that records every mention found in rich text blocks."""

    def __init__(self) -> None:
        self.references = ReferenceStore()

    def visit_rich_text_block(self, block: RichTextBlock) -> None:
        for node in decode_rich_text(block.data):
            if isinstance(node, (RichTextSection, RichTextPreformatted, RichTextQuote)):
                self._collect_elements(node.elements)
            elif isinstance(node, RichTextList):
                for item in node.items:
                    self._collect_elements(item)

    def _collect_elements(self, elements: Iterable[InlineElement]) -> None:
        for element in elements:
            if isinstance(element, ChannelElement):
                self.references.channels.setdefault(element.channel_id, None)
            elif isinstance(element, UserElement):
                self.references.users.setdefault(element.user_id, None)
            elif isinstance(element, UserGroupElement):
                self.references.usergroups.setdefault(element.usergroup_id, None)


def collect_references(blocks: Iterable[Block]) -> ReferenceStore:
    """Find every channel, user and user group mentioned in ``blocks``.

    Args:
        blocks: The document to scan

    Returns:
        A fresh ReferenceStore whose entries are all unresolved
    """
    collector = ReferenceCollector()
    collector.visit_document(blocks)
    return collector.references
