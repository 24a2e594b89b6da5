"""
Slide Presenter Package

A package for turning Markdown into slides and drawing them in a terminal.
"""

from .compiler import SlideCompiler, parse_slides
from .drawer import SlideDrawer
from .exceptions import (
    CompileError,
    RenderError,
    SlidePresenterError,
    UnsupportedElementError,
    UnsupportedStructureError,
)
from .markdown_parser import MarkdownParser
from .models import Element, Heading, Paragraph, Slide, Text, TextChunk, TextFormat
from .presenter import SlidePresenter
from .terminal import Attribute, Terminal

__version__ = "0.1.0"

__all__ = [
    'SlidePresenter', 'SlideCompiler', 'SlideDrawer', 'MarkdownParser', 'Terminal', 'Attribute',
    'parse_slides', 'Slide', 'Element', 'Heading', 'Paragraph', 'Text', 'TextChunk', 'TextFormat',
    'SlidePresenterError', 'CompileError', 'UnsupportedElementError', 'UnsupportedStructureError',
    'RenderError',
]
