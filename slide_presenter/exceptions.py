"""
Exceptions raised by the slide presenter.

Exception Hierarchy
-------------------
- SlidePresenterError

  - CompileError (document tree cannot become slides)
    - UnsupportedElementError (top-level block with no element mapping)
    - UnsupportedStructureError (inline node with no chunk mapping)

  - RenderError (terminal output failed)
"""
from typing import Optional


class SlidePresenterError(Exception):
    """Base class for all slide presenter errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CompileError(SlidePresenterError):
    """Raised when a document tree cannot be compiled into slides."""


class UnsupportedElementError(CompileError):
    """
    A top-level block has no slide element counterpart.

    Args:
        kind: Diagnostic name of the offending block (e.g. ``"table"``)
    """

    def __init__(self, kind: str):
        super().__init__(f"unsupported element: {kind}")
        self.kind = kind


class UnsupportedStructureError(CompileError):
    """
    An inline node cannot be turned into text chunks.

    Args:
        container: Context the node was found in (``"text"``)
        kind: Diagnostic name of the offending node (e.g. ``"link"``)
    """

    def __init__(self, container: str, kind: str):
        super().__init__(f"unsupported structure in {container}: {kind}")
        self.container = container
        self.kind = kind


class RenderError(SlidePresenterError):
    """Raised when writing to or flushing the terminal fails."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.original_error = original_error
