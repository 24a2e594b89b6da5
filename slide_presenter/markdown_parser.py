"""
Markdown front end: turns raw markdown into a syntax tree for the compiler.
"""
import logging
from typing import List, Optional

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.deflist import deflist_plugin
from mdit_py_plugins.footnote import footnote_plugin

logger = logging.getLogger(__name__)

SLIDE_BREAK = "hr"


class MarkdownParser:
    """
    Markdown parser producing a syntax tree, built on markdown-it-py.
    """

    def __init__(self, extensions: Optional[List[str]] = None):
        """
        Initialize the markdown parser.

        Args:
            extensions: Extra markdown-it rule names to enable on top of the
                CommonMark preset (e.g. ``["replacements"]``)
        """
        self.extensions = list(extensions or [])

        self.markdown_processor = MarkdownIt('commonmark')

        # Tables and strikethrough are not part of CommonMark. Enabling them
        # lets the compiler reject them by name instead of seeing a paragraph
        # full of pipes and tildes.
        self.markdown_processor.enable(['table', 'strikethrough'])

        # ---------------------------------------------------------
        # PLUGINS
        # ---------------------------------------------------------
        # deflist_plugin  : `Term\n: definition` blocks
        # footnote_plugin : `[^1]` references and their definitions
        #
        # NOTE  front_matter_plugin stays off: a deck opening with `---`
        #       would have its first slide swallowed as YAML.
        self.markdown_processor = (
            self.markdown_processor
                .use(deflist_plugin)
                .use(footnote_plugin)
        )

        if self.extensions:
            self.markdown_processor.enable(self.extensions)

    def parse(self, markdown_text: str) -> SyntaxTreeNode:
        """
        Parse markdown text into a syntax tree.

        Args:
            markdown_text: Raw markdown content

        Returns:
            Root node of the document; its children are the top-level blocks
        """
        tokens = self.markdown_processor.parse(markdown_text)
        root = SyntaxTreeNode(tokens)
        logger.debug("Parsed %d tokens into %d top-level blocks", len(tokens), len(root.children))
        return root

    def count_slide_breaks(self, markdown_text: str) -> int:
        """
        Count the top-level thematic breaks (``---``, ``***``, ``___``).

        Breaks nested inside other blocks (e.g. a list item) don't count.
        """
        root = self.parse(markdown_text)
        return sum(1 for node in root.children if node.type == SLIDE_BREAK)

    def estimate_slide_count(self, markdown_text: str) -> int:
        """
        Number of slides the compiler will produce for this document.

        Every break closes a slide, even an empty one. Content after the
        last break adds one more; a trailing break does not.
        """
        root = self.parse(markdown_text)

        slides = 0
        pending = False
        for node in root.children:
            if node.type == SLIDE_BREAK:
                slides += 1
                pending = False
            else:
                pending = True

        return slides + 1 if pending else slides
