#!/usr/bin/env python3
"""
slack-blocks-render - Slack Block Kit to Markdown / plain text

Simple usage:
    python render_blocks.py render message.json                 # Markdown on stdout
    python render_blocks.py render message.json --format text   # Plain text
    python render_blocks.py references message.json             # IDs to resolve
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from slack_blocks_render.cli import app

if __name__ == "__main__":
    app()
