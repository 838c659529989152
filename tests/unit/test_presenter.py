"""Tests for markup formatting and rendering."""

import io

import pytest
from rich.console import Console

from rollthetech.formatter import format_category, format_description, format_lead
from rollthetech.presenter import present, render


@pytest.mark.unit
def test_lead_and_description_markup():
    assert format_lead("Foo") == "[bold blue]Foo[/]: "
    assert format_description("bar") == "[italic white]bar[/]"
    assert format_category("Git") == " → [bold italic]Git[/]"


@pytest.mark.unit
def test_brackets_in_text_are_not_markup():
    template = format_description("[red]not a style[/red]")

    assert render(template).plain == "[red]not a style[/red]"


@pytest.mark.unit
def test_render_applies_styles():
    text = render(format_lead("Foo") + format_description("bar"))

    assert text.plain == "Foo: bar"
    styles = {str(span.style) for span in text.spans}
    assert "bold blue" in styles
    assert "italic white" in styles


@pytest.mark.unit
def test_present_plain_console():
    out = io.StringIO()
    console = Console(file=out, force_terminal=False, width=20)

    present(console, format_lead("Language") + format_description("a rather long description"))
    present(console)

    assert out.getvalue() == "Language: a rather long description\n\n"


@pytest.mark.unit
def test_present_terminal_console_emits_ansi():
    out = io.StringIO()
    console = Console(file=out, force_terminal=True, color_system="standard")

    present(console, format_lead("Foo"))

    assert "\x1b[" in out.getvalue()
    assert "Foo" in out.getvalue()


@pytest.mark.unit
def test_emoji_codes_are_left_as_written():
    text = render(format_lead("Go") + format_description("Roll a :smile: parser"))

    assert text.plain == "Go: Roll a :smile: parser"
