"""Test drawing slides onto a terminal."""

import io

import pytest

from slide_presenter.compiler import parse_slides
from slide_presenter.drawer import SlideDrawer
from slide_presenter.exceptions import RenderError
from slide_presenter.models import Element, Heading, Paragraph, Slide, Text, TextChunk, TextFormat
from slide_presenter.terminal import Attribute, Terminal

BOLD = TextFormat.BOLD
ITALIC = TextFormat.ITALIC
NONE = TextFormat.NONE


def test_construction_hides_cursor(recording_terminal):
    SlideDrawer(recording_terminal)
    assert recording_terminal.calls == [("hide_cursor",)]


def test_draw_operation_sequence(recording_terminal):
    slides = parse_slides("# Title **bold**\n\nSome *text*")
    drawer = SlideDrawer(recording_terminal)
    recording_terminal.calls.clear()

    drawer.draw(slides)

    assert recording_terminal.calls == [
        ("clear",),
        ("move_to", 0, 0),
        ("move_to_column", 0),
        ("set_attribute", Attribute.BOLD),
        ("write_styled", "Title ", NONE),
        ("write_styled", "bold", BOLD),
        ("move_down", 2),
        ("reset_attributes",),
        ("move_to_column", 0),
        ("write_styled", "Some ", NONE),
        ("write_styled", "text", ITALIC),
        ("move_down", 2),
        ("flush",),
    ]


def test_only_first_slide_is_drawn(recording_terminal):
    slides = parse_slides("First\n\n---\n\nSecond")
    drawer = SlideDrawer(recording_terminal)

    drawer.draw(slides)

    written = [call[1] for call in recording_terminal.calls if call[0] == "write_styled"]
    assert written == ["First"]


def test_flushes_once_per_slide(recording_terminal):
    slides = parse_slides("A\n\nB\n\nC")
    drawer = SlideDrawer(recording_terminal)

    drawer.draw(slides)

    assert recording_terminal.calls.count(("flush",)) == 1
    assert recording_terminal.calls[-1] == ("flush",)


def test_heading_level_has_no_visual_effect(recording_terminal):
    text = Text((TextChunk.unformatted("Title"),))

    SlideDrawer(recording_terminal).draw([Slide((Heading(text, level=1),))])
    level_one = list(recording_terminal.calls)
    recording_terminal.calls.clear()
    SlideDrawer(recording_terminal).draw([Slide((Heading(text, level=4),))])

    assert recording_terminal.calls == level_one


def test_empty_slide_only_clears(recording_terminal):
    drawer = SlideDrawer(recording_terminal)
    recording_terminal.calls.clear()

    drawer.draw([Slide()])

    assert recording_terminal.calls == [("clear",), ("move_to", 0, 0), ("flush",)]


def test_empty_sequence_is_a_precondition_violation(recording_terminal):
    with pytest.raises(IndexError):
        SlideDrawer(recording_terminal).draw([])


def test_unknown_element_rejected(recording_terminal):
    with pytest.raises(TypeError):
        SlideDrawer(recording_terminal).draw_element(Element(Text()))


def test_context_manager_shows_cursor(recording_terminal):
    with SlideDrawer(recording_terminal) as drawer:
        drawer.draw([Slide((Paragraph(Text((TextChunk.unformatted("x"),))),))])

    assert recording_terminal.calls[0] == ("hide_cursor",)
    assert recording_terminal.calls[-2:] == [("show_cursor",), ("flush",)]


def test_context_manager_shows_cursor_on_error(recording_terminal):
    with pytest.raises(IndexError):
        with SlideDrawer(recording_terminal) as drawer:
            drawer.draw([])

    assert ("show_cursor",) in recording_terminal.calls


def test_drawn_output():
    stream = io.StringIO()
    slides = parse_slides("# Hi *there*\n\nplain **bold**")

    SlideDrawer(Terminal(stream)).draw(slides)

    assert stream.getvalue() == (
        "\x1b[?25l"
        "\x1b[2J"
        "\x1b[1;1H"
        "\x1b[1G"
        "\x1b[1mHi \x1b[0m"
        "\x1b[1;3mthere\x1b[0m"
        "\x1b[2B"
        "\x1b[1G"
        "plain "
        "\x1b[1mbold\x1b[0m"
        "\x1b[2B"
    )


def test_render_error_propagates():
    class ClosedStream(io.StringIO):
        def write(self, data):
            raise BrokenPipeError("closed")

    drawer = SlideDrawer(Terminal(ClosedStream()))

    with pytest.raises(RenderError):
        drawer.draw(parse_slides("Hello"))


def test_render_error_is_not_masked_on_exit():
    class ClosedStream(io.StringIO):
        def write(self, data):
            raise BrokenPipeError("closed")

    terminal = Terminal(ClosedStream())

    with pytest.raises(RenderError) as excinfo:
        with SlideDrawer(terminal) as drawer:
            drawer.draw(parse_slides("Hello"))

    assert isinstance(excinfo.value.__cause__, BrokenPipeError)
    assert excinfo.value.__context__ is excinfo.value.__cause__
    assert terminal.pending() == "\x1b[?25h"
