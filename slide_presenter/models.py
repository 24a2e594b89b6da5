"""
Data models for the slide presenter.
"""
from dataclasses import dataclass, field
from enum import Flag
from typing import Tuple


class TextFormat(Flag):
    """
    Set of inline attributes applied to a run of text.
    """
    NONE = 0
    BOLD = 1
    ITALIC = 2

    def add_bold(self) -> "TextFormat":
        return self | TextFormat.BOLD

    def add_italics(self) -> "TextFormat":
        return self | TextFormat.ITALIC

    def has_bold(self) -> bool:
        return bool(self & TextFormat.BOLD)

    def has_italics(self) -> bool:
        return bool(self & TextFormat.ITALIC)


@dataclass(frozen=True)
class TextChunk:
    """
    A run of text sharing one format.
    """
    content: str
    format: TextFormat = TextFormat.NONE

    @classmethod
    def unformatted(cls, content: str) -> "TextChunk":
        return cls(content)

    @classmethod
    def formatted(cls, content: str, format: TextFormat) -> "TextChunk":
        return cls(content, format)


@dataclass(frozen=True)
class Text:
    """
    Styled chunks in reading order. Adjacent chunks are never merged.
    """
    chunks: Tuple[TextChunk, ...] = ()

    def plain(self) -> str:
        """Return the text content with all formatting dropped."""
        return "".join(chunk.content for chunk in self.chunks)


@dataclass(frozen=True)
class Element:
    """
    A block on a slide. Only headings and paragraphs exist.
    """
    text: Text

    def is_heading(self):
        """Check if this element is a heading."""
        return False

    def is_paragraph(self):
        """Check if this element is a paragraph."""
        return False


@dataclass(frozen=True)
class Heading(Element):
    level: int = 1  # not rendered yet

    def is_heading(self):
        return True


@dataclass(frozen=True)
class Paragraph(Element):

    def is_paragraph(self):
        return True


@dataclass(frozen=True)
class Slide:
    """
    One screen's worth of elements, in document order.
    """
    elements: Tuple[Element, ...] = field(default_factory=tuple)
