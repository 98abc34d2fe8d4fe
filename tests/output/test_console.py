"""Tests for Rich Console factory and theme."""

from io import StringIO

from condperiod.output.console import CP_THEME, create_console, get_output, style_for_kind


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        assert isinstance(create_console().file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120

    def test_theme_styles_resolve(self) -> None:
        console = create_console()
        for name in CP_THEME.styles:
            console.get_style(name)


class TestStyleForKind:
    def test_known_kinds(self) -> None:
        assert style_for_kind("category") == "cp.kind.category"
        assert style_for_kind("duration") == "cp.kind.duration"

    def test_unknown_kind(self) -> None:
        assert style_for_kind("other") == ""
