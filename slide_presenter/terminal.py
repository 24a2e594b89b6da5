"""
Terminal output sink used by the slide drawer.

Commands are queued in memory and only reach the real stream on
:meth:`Terminal.flush`. Escape sequences are produced by rich.
"""
import io
import logging
import sys
from enum import Enum
from typing import Optional, TextIO

from rich.control import Control
from rich.style import Style

from .exceptions import RenderError
from .models import TextFormat

logger = logging.getLogger(__name__)


class Attribute(Enum):
    BOLD = "bold"
    ITALIC = "italic"


def format_style(format: TextFormat) -> Style:
    """Map a chunk format onto a rich style."""
    return Style(
        bold=True if format.has_bold() else None,
        italic=True if format.has_italics() else None,
    )


class Terminal:
    """
    Buffered terminal with cursor and text attribute control.

    The current attribute mode lives here: attributes set with
    :meth:`set_attribute` apply to every styled write until
    :meth:`reset_attributes`.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Args:
            stream: Where flushed output goes. Defaults to ``sys.stdout``.
        """
        self.stream = stream if stream is not None else sys.stdout
        self._queue = io.StringIO()
        self._mode = Style.null()

    def _queue_control(self, control: Control) -> None:
        self._queue.write(str(control))

    def hide_cursor(self) -> None:
        self._queue_control(Control.show_cursor(False))

    def show_cursor(self) -> None:
        self._queue_control(Control.show_cursor(True))

    def clear(self) -> None:
        """Clear the whole screen. The cursor does not move."""
        self._queue_control(Control.clear())

    def move_to(self, x: int, y: int) -> None:
        """Move the cursor to an absolute, zero-based position."""
        self._queue_control(Control.move_to(x, y))

    def move_to_column(self, x: int) -> None:
        self._queue_control(Control.move_to_column(x))

    def move_down(self, rows: int) -> None:
        self._queue_control(Control.move(0, rows))

    def set_attribute(self, attribute: Attribute) -> None:
        self._mode += Style(**{attribute.value: True})

    def reset_attributes(self) -> None:
        self._mode = Style.null()

    def write_styled(self, content: str, format: TextFormat = TextFormat.NONE) -> None:
        """
        Queue *content* styled with the current mode plus *format*.

        The style is closed after the content, so it never leaks into the
        next write.
        """
        style = self._mode + format_style(format)
        self._queue.write(style.render(content))

    def pending(self) -> str:
        """Return output queued since the last flush."""
        return self._queue.getvalue()

    def flush(self) -> None:
        """
        Write all queued output to the stream and flush it.

        Raises:
            RenderError: The stream could not be written or flushed
        """
        data = self._queue.getvalue()
        self._queue = io.StringIO()
        try:
            self.stream.write(data)
            self.stream.flush()
        except OSError as exc:
            raise RenderError(f"Failed to write to terminal: {exc}", original_error=exc) from exc
        logger.debug("Flushed %d characters to terminal", len(data))
