"""
Compiles a parsed markdown tree into slides.

The tree comes from :class:`~slide_presenter.markdown_parser.MarkdownParser`.
Top-level thematic breaks split the document into slides; every other
top-level block must be a heading or a paragraph, and their inline content
may only contain plain text, strong emphasis and emphasis. Anything else
aborts the compile with an error naming the construct.
"""
import logging
from typing import List, Optional

from markdown_it.tree import SyntaxTreeNode

from .exceptions import UnsupportedElementError, UnsupportedStructureError
from .markdown_parser import SLIDE_BREAK, MarkdownParser
from .models import Element, Heading, Paragraph, Slide, Text, TextChunk, TextFormat

logger = logging.getLogger(__name__)

# Diagnostic names for markdown-it node types. Keep these stable, they end up
# in user-facing error messages.
NODE_KIND_NAMES = {
    "root": "document",
    "blockquote": "block quote",
    "bullet_list": "list",
    "ordered_list": "list",
    "list_item": "item",
    "dl": "description list",
    "dt": "description term",
    "dd": "description details",
    "code_block": "code block",
    "fence": "code block",
    "html_block": "html block",
    "paragraph": "paragraph",
    "heading": "heading",
    "hr": "thematic break",
    "footnote_block": "footnote definition",
    "footnote": "footnote definition",
    "table": "table",
    "tr": "table row",
    "th": "table cell",
    "td": "table cell",
    "text": "text",
    "softbreak": "soft break",
    "hardbreak": "line break",
    "code_inline": "code",
    "html_inline": "inline html",
    "em": "emph",
    "strong": "strong",
    "s": "strikethrough",
    "link": "link",
    "image": "image",
    "footnote_ref": "footnote reference",
}


def node_kind(node: SyntaxTreeNode) -> str:
    """Return the diagnostic name for a node's type."""
    return NODE_KIND_NAMES.get(node.type, node.type.replace("_", " "))


class SlideCompiler:
    """
    Turns a markdown syntax tree into a list of :class:`Slide`.
    """

    def compile(self, tree: SyntaxTreeNode) -> List[Slide]:
        """
        Compile the document rooted at *tree* into slides.

        Args:
            tree: Root node; its children are the top-level blocks

        Returns:
            Slides in document order

        Raises:
            UnsupportedElementError: A top-level block isn't a heading or paragraph
            UnsupportedStructureError: Inline content other than text/strong/em
        """
        slides: List[Slide] = []
        elements: List[Element] = []

        for node in tree.children:
            if node.type == SLIDE_BREAK:
                # A break always closes the current slide, even an empty one.
                slides.append(Slide(tuple(elements)))
                elements = []
                continue

            elements.append(self.compile_element(node))

        if elements:
            slides.append(Slide(tuple(elements)))

        logger.debug("Compiled %d slides", len(slides))
        return slides

    def compile_element(self, node: SyntaxTreeNode) -> Element:
        """Convert one top-level block into an element."""
        if node.type == "heading":
            return self._compile_heading(node)
        if node.type == "paragraph":
            return self._compile_paragraph(node)
        raise UnsupportedElementError(node_kind(node))

    def _compile_heading(self, node: SyntaxTreeNode) -> Heading:
        level = int(node.tag[1:])  # "h1" .. "h6"
        return Heading(text=self._compile_block_text(node), level=level)

    def _compile_paragraph(self, node: SyntaxTreeNode) -> Paragraph:
        return Paragraph(text=self._compile_block_text(node))

    def _compile_block_text(self, node: SyntaxTreeNode) -> Text:
        return Text(tuple(self.compile_text(node)))

    def compile_text(self, node: SyntaxTreeNode, format: TextFormat = TextFormat.NONE) -> List[TextChunk]:
        """
        Flatten the inline children of *node* into chunks.

        The format is passed down by value: nested strong/emphasis add to it
        for their own subtree only.
        """
        chunks: List[TextChunk] = []
        for child in node.children:
            if child.type == "inline":
                chunks.extend(self.compile_text(child, format))
            elif child.type == "text":
                # markdown-it leaves empty text tokens beside emphasis delimiters
                if child.content:
                    chunks.append(TextChunk.formatted(child.content, format))
            elif child.type == "strong":
                chunks.extend(self.compile_text(child, format.add_bold()))
            elif child.type == "em":
                chunks.extend(self.compile_text(child, format.add_italics()))
            else:
                raise UnsupportedStructureError("text", node_kind(child))
        return chunks


def parse_slides(markdown_text: str, extensions: Optional[List[str]] = None) -> List[Slide]:
    """
    Convenience function to parse markdown text and compile it into slides.

    Args:
        markdown_text: Raw markdown content
        extensions: Extra markdown-it rules to enable

    Returns:
        List of slides
    """
    parser = MarkdownParser(extensions)
    return SlideCompiler().compile(parser.parse(markdown_text))
