"""
Slide drawer: paints a slide onto a terminal.
"""
import logging
from typing import Optional, Sequence

from .exceptions import RenderError
from .models import Element, Heading, Paragraph, Slide, Text
from .terminal import Attribute, Terminal

logger = logging.getLogger(__name__)

# Rows the cursor advances after each element
ELEMENT_SPACING = 2


class SlideDrawer:
    """
    Draws slides onto a :class:`Terminal`.

    The cursor is hidden as soon as the drawer is created. Use the drawer as
    a context manager (or call :meth:`close`) to show it again::

        with SlideDrawer() as drawer:
            drawer.draw(slides)
    """

    def __init__(self, terminal: Optional[Terminal] = None):
        self.terminal = terminal if terminal is not None else Terminal()
        self.terminal.hide_cursor()

    def __enter__(self) -> "SlideDrawer":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if exc_type is not None and issubclass(exc_type, RenderError):
            # The stream is broken; queue the cursor reset but don't flush
            # again, so the original error propagates.
            self.terminal.show_cursor()
            return
        self.close()

    def close(self) -> None:
        """Show the cursor again and flush."""
        self.terminal.show_cursor()
        self.terminal.flush()

    def draw(self, slides: Sequence[Slide]) -> None:
        """
        Clear the screen and draw the first of *slides*.

        The remaining slides are ignored. *slides* must not be empty.

        Raises:
            IndexError: *slides* is empty
            RenderError: The terminal could not be written to
        """
        self.terminal.clear()
        self.terminal.move_to(0, 0)

        self.draw_slide(slides[0])

    def draw_slide(self, slide: Slide) -> None:
        logger.debug("Drawing slide with %d elements", len(slide.elements))
        for element in slide.elements:
            self.draw_element(element)
        self.terminal.flush()

    def draw_element(self, element: Element) -> None:
        self.terminal.move_to_column(0)
        if isinstance(element, Heading):
            # TODO: style headings by level once there is a design for it
            self.terminal.set_attribute(Attribute.BOLD)
            self.draw_text(element.text)
            self.terminal.move_down(ELEMENT_SPACING)
            self.terminal.reset_attributes()
        elif isinstance(element, Paragraph):
            self.draw_text(element.text)
            self.terminal.move_down(ELEMENT_SPACING)
        else:
            raise TypeError(f"Cannot draw {type(element).__name__}")

    def draw_text(self, text: Text) -> None:
        for chunk in text.chunks:
            self.terminal.write_styled(chunk.content, chunk.format)
