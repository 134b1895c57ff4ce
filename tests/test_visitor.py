"""Tests for the traversal framework."""

from slack_blocks_render.core.visitor import Visitor
from slack_blocks_render.model.blocks import (
    ContextBlock,
    DividerBlock,
    HeaderBlock,
    ImageElement,
    MarkdownText,
    PlainText,
    SectionBlock,
    UnknownBlock,
    VideoBlock,
)


class RecordingVisitor(Visitor):
    """Record the leaves reached by the default traversal."""

    def __init__(self) -> None:
        self.seen: list[str] = []

    def visit_plain_text(self, text: PlainText) -> None:
        self.seen.append(f"plain:{text.text}")

    def visit_markdown_text(self, text: MarkdownText) -> None:
        self.seen.append(f"mrkdwn:{text.text}")

    def visit_image_element(self, element: ImageElement) -> None:
        self.seen.append(f"image:{element.alt_text}")

    def visit_divider_block(self, block: DividerBlock) -> None:
        self.seen.append("divider")


class TestVisitor:
    """Tests for Visitor dispatch and default recursion."""

    def test_base_visitor_is_a_no_op(self):
        """Test that the base visitor walks every block without failing."""
        Visitor().visit_document([
            SectionBlock(text=PlainText("a")),
            DividerBlock(),
            UnknownBlock("x"),
            object(),
        ])

    def test_document_order(self):
        """Test that blocks and their children are visited in order."""
        visitor = RecordingVisitor()

        visitor.visit_document([
            HeaderBlock(PlainText("title")),
            SectionBlock(text=MarkdownText("main"), fields=[PlainText("f1"), PlainText("f2")]),
            DividerBlock(),
            ContextBlock([ImageElement("https://x/i.png", "img"), MarkdownText("ctx")]),
            VideoBlock(PlainText("video"), MarkdownText("desc")),
        ])

        assert visitor.seen == [
            "plain:title",
            "mrkdwn:main",
            "plain:f1",
            "plain:f2",
            "divider",
            "image:img",
            "mrkdwn:ctx",
            "plain:video",
            "mrkdwn:desc",
        ]

    def test_override_can_skip_children(self):
        """Test that an override without super() stops the recursion."""

        class SkipSections(RecordingVisitor):
            def visit_section_block(self, block: SectionBlock) -> None:
                self.seen.append("section")

        visitor = SkipSections()
        visitor.visit_document([SectionBlock(text=PlainText("hidden"))])

        assert visitor.seen == ["section"]

    def test_unknown_objects_go_to_unknown_block(self):
        """Test that unknown objects go to visit_unknown_block."""
        class CountUnknown(Visitor):
            count = 0

            def visit_unknown_block(self, block: object) -> None:
                self.count += 1

        visitor = CountUnknown()
        visitor.visit_document([UnknownBlock("table"), "not a block", DividerBlock()])

        assert visitor.count == 2
