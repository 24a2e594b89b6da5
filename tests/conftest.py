import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `import slide_presenter` works
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from slide_presenter.terminal import Terminal  # noqa: E402


class RecordingTerminal(Terminal):
    """Terminal that records every operation instead of emitting escape codes."""

    def __init__(self):
        super().__init__(stream=None)
        self.calls = []

    def hide_cursor(self):
        self.calls.append(("hide_cursor",))

    def show_cursor(self):
        self.calls.append(("show_cursor",))

    def clear(self):
        self.calls.append(("clear",))

    def move_to(self, x, y):
        self.calls.append(("move_to", x, y))

    def move_to_column(self, x):
        self.calls.append(("move_to_column", x))

    def move_down(self, rows):
        self.calls.append(("move_down", rows))

    def set_attribute(self, attribute):
        self.calls.append(("set_attribute", attribute))

    def reset_attributes(self):
        self.calls.append(("reset_attributes",))

    def write_styled(self, content, format):
        self.calls.append(("write_styled", content, format))

    def flush(self):
        self.calls.append(("flush",))


@pytest.fixture
def recording_terminal():
    return RecordingTerminal()
