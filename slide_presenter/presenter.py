#!/usr/bin/env python3
"""
Main presenter module that ties together the markdown compiler and the slide drawer.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from .compiler import SlideCompiler
from .drawer import SlideDrawer
from .exceptions import CompileError, RenderError
from .markdown_parser import MarkdownParser
from .models import Slide
from .terminal import Terminal

logger = logging.getLogger(__name__)


class SlidePresenter:
    """
    Main class for showing markdown slides in a terminal.
    """

    def __init__(
        self,
        *,
        extensions: Optional[List[str]] = None,
        terminal: Optional[Terminal] = None,
    ):
        """Create a new :class:`SlidePresenter`.

        Parameters
        ----------
        extensions
            Extra markdown-it rules to enable when parsing.
        terminal
            Output sink for drawing. A :class:`Terminal` on ``sys.stdout``
            is created when omitted.
        """
        self.parser = MarkdownParser(extensions)
        self.compiler = SlideCompiler()
        self.terminal = terminal

    def load(self, markdown_text: str) -> List[Slide]:
        """
        Compile markdown text into slides.

        Raises:
            CompileError: The document uses an unsupported construct
        """
        tree = self.parser.parse(markdown_text)
        return self.compiler.compile(tree)

    def present(self, markdown_text: str) -> List[Slide]:
        """
        Compile *markdown_text* and draw its first slide.

        The cursor is hidden while drawing and shown again afterwards, also
        when drawing fails.

        Returns:
            All compiled slides

        Raises:
            CompileError: The document uses an unsupported construct
            RenderError: The terminal could not be written to
        """
        slides = self.load(markdown_text)
        if not slides:
            logger.warning("Document has no slides, nothing to draw")
            return slides

        with SlideDrawer(self.terminal) as drawer:
            drawer.draw(slides)

        logger.debug("Drew slide 1 of %d", len(slides))
        return slides


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point for the slide presenter."""
    import argparse

    def _build_parser() -> argparse.ArgumentParser:
        p = argparse.ArgumentParser(prog="slide-presenter", description="Show a Markdown slide deck in the terminal.")
        p.add_argument("markdown", type=Path, help="Markdown file to present")
        p.add_argument("--extension", "-e", action="append", default=[], metavar="RULE", help="Extra markdown-it rule to enable (repeatable)")
        p.add_argument("--check", action="store_true", help="Only compile the deck and report the slide count")
        p.add_argument("--debug", action="store_true", help="Enable verbose logging")
        return p

    args = _build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO, format="%(levelname)s  %(message)s")

    md_path: Path = args.markdown
    if not md_path.exists():
        logger.error(f"Markdown file '{md_path}' not found")
        return 1

    try:
        markdown_text = md_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error(f"Cannot read markdown file '{md_path}': {exc}")
        return 1

    try:
        presenter = SlidePresenter(extensions=args.extension)
    except ValueError as exc:
        logger.error(f"Invalid extension: {exc}")
        return 1

    try:
        if args.check:
            slides = presenter.load(markdown_text)
            logger.info("%s: %d slides", md_path, len(slides))
        else:
            presenter.present(markdown_text)
    except CompileError as exc:
        logger.error(f"{md_path}: {exc}")
        return 1
    except RenderError as exc:
        logger.error(str(exc))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
