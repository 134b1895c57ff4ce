"""Pytest fixtures for slack-blocks-render tests."""

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from slack_blocks_render.core.references import ReferenceStore
from slack_blocks_render.model.blocks import RichTextBlock


@pytest.fixture
def rich_text() -> Callable[..., RichTextBlock]:
    """Build a rich text block from top-level nodes."""

    def build(*nodes: Any) -> RichTextBlock:
        return RichTextBlock({"type": "rich_text", "elements": list(nodes)})

    return build


@pytest.fixture
def section() -> Callable[..., dict]:
    """Build a rich_text_section node from inline elements."""

    def build(*elements: Any) -> dict:
        return {"type": "rich_text_section", "elements": list(elements)}

    return build


@pytest.fixture
def sample_message() -> dict:
    """A message mixing plain blocks and rich text with mentions."""
    return {
        "type": "message",
        "blocks": [
            {"type": "header", "text": {"type": "plain_text", "text": "Release notes"}},
            {
                "type": "rich_text",
                "elements": [
                    {
                        "type": "rich_text_section",
                        "elements": [
                            {"type": "text", "text": "Hi "},
                            {"type": "user", "user_id": "U1"},
                            {"type": "text", "text": ", see "},
                            {"type": "channel", "channel_id": "C1"},
                            {"type": "text", "text": " "},
                            {"type": "emoji", "name": "wave"},
                        ],
                    },
                    {
                        "type": "rich_text_list",
                        "style": "bullet",
                        "elements": [
                            {
                                "type": "rich_text_section",
                                "elements": [
                                    {"type": "usergroup", "usergroup_id": "G1"},
                                    {"type": "text", "text": " "},
                                    {"type": "text", "text": "ships", "style": {"bold": True}},
                                ],
                            }
                        ],
                    },
                ],
            },
            {"type": "divider"},
            {"type": "actions", "elements": []},
        ],
    }


@pytest.fixture
def resolved_references() -> ReferenceStore:
    """Names for every ID used in sample_message."""
    return ReferenceStore(
        channels={"C1": "general"},
        users={"U1": "John Doe"},
        usergroups={"G1": "devs"},
    )


@pytest.fixture
def message_file(tmp_path: Path, sample_message: dict) -> Path:
    """Write sample_message to a temporary JSON file."""
    file_path = tmp_path / "message.json"
    file_path.write_text(json.dumps(sample_message), encoding="utf-8")
    return file_path


@pytest.fixture
def references_file(tmp_path: Path, resolved_references: ReferenceStore) -> Path:
    """Write resolved_references to a temporary JSON file."""
    file_path = tmp_path / "references.json"
    file_path.write_text(json.dumps(resolved_references.to_dict()), encoding="utf-8")
    return file_path
