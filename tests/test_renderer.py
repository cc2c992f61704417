"""Tests for the staff manager and the tab renderer."""

import pytest

from tab_interpreter.errors import OptionsError, RenderError
from tab_interpreter.lexer import NumberLiteral, OptionsLiteral, Token, TokenKind, tokenize
from tab_interpreter.renderer import Parser, StaffManager, render


def note(name: str, line: int = 1) -> Token:
    return Token(TokenKind.NOTE, name, None, line)


def number(value: int, line: int = 1) -> Token:
    return Token(TokenKind.NUMBER, str(value), NumberLiteral(value), line)


def options(text: str, line: int = 1) -> Token:
    return Token(TokenKind.OPTIONS, f"[{text}]", OptionsLiteral(text), line)


def end(line: int = 1) -> Token:
    return Token(TokenKind.END_OF_FILE, "", None, line)


class TestStaffManager:
    """Staff creation and forwarding."""

    def test_notes_share_a_staff_until_tabs(self) -> None:
        """Consecutive notes go into one staff."""
        manager = StaffManager()
        manager.add_note("E")
        manager.add_note("A")
        assert len(manager.staffs) == 1
        assert manager.staffs[0].notes == ["E", "A"]

    def test_note_after_tabs_starts_new_staff(self) -> None:
        """A note after tab data opens a new staff."""
        manager = StaffManager()
        manager.add_note("E")
        manager.add_tab("0")
        manager.add_note("D")
        assert len(manager.staffs) == 2
        assert manager.current.notes == ["D"]

    def test_tab_operations_without_staff_do_nothing(self) -> None:
        """Tab operations before any note are ignored."""
        manager = StaffManager()
        manager.add_tab("1")
        manager.add_empty()
        manager.add_next()
        manager.add_spread_empty(2)
        manager.add_spread_next(2)
        assert manager.staffs == ()
        assert str(manager) == ""

    def test_options_apply_to_new_staffs_only(self) -> None:
        """New staffs are seeded from the current options."""
        manager = StaffManager()
        manager.add_note("E")
        manager.add_tab("0")
        manager.set_options("time=3/4; fidelity=8")
        manager.add_note("E")
        first, second = manager.staffs
        assert first.time.signature == (4, 4)
        assert first.time.fidelity == 16
        assert second.time.signature == (3, 4)
        assert second.time.fidelity == 8

    def test_options_before_tabs_do_not_touch_existing_staff(self) -> None:
        """Options never change a staff that already exists."""
        manager = StaffManager()
        manager.add_note("E")
        manager.set_options("fidelity=4")
        assert manager.current.time.fidelity == 16

    def test_invalid_options_raise(self) -> None:
        """Invalid options propagate from the manager."""
        with pytest.raises(OptionsError):
            StaffManager().set_options("bogus=1")

    def test_staffs_separated_by_blank_line(self) -> None:
        """Each staff block ends with a blank line."""
        manager = StaffManager()
        for name in ("E", "A"):
            manager.add_note(name)
            manager.add_next()
        assert str(manager) == "E  |---\n\n     1 \n\nA  |---\n\n     1 \n\n"


class TestParser:
    """Token-driven rendering."""

    def test_standard_tuning_chord(self) -> None:
        """A chord in standard tuning renders with one beat."""
        tokens = [
            note("E"), note("A"), note("D"), note("G"), note("B"), note("E"),
            number(0, 2), number(3, 2), number(5, 2),
            Token(TokenKind.NEXT, ",", None, 2),
            end(2),
        ]
        expected = "E  |---\nB  |---\nG  |---\nD  |-5-\nA  |-3-\nE  |-0-\n\n     1 \n\n"
        assert Parser(tokens).generate_tabs() == expected

    def test_spread_tokens_use_literal(self) -> None:
        """Spread tokens repeat by their literal amount."""
        tokens = [
            note("E"),
            Token(TokenKind.SPREAD_EMPTY, ":2", NumberLiteral(2), 1),
            Token(TokenKind.SPREAD_NEXT, ";1", NumberLiteral(1), 1),
            end(),
        ]
        assert render(tokens).splitlines()[0] == "E  |---------"

    def test_options_token_sets_time(self) -> None:
        """Options before notes set the staff's time."""
        tokens = [options("time=2/4; fidelity=4"), note("E"), number(1), number(2), number(3), end()]
        assert render(tokens) == "E  |-1--2-|-3-\n\n     1  2   1 \n\n"

    def test_empty_token_stream(self) -> None:
        """Only an end marker renders nothing."""
        assert render([end()]) == ""

    def test_invalid_options_are_collected(self) -> None:
        """Each failing options block is logged at its line."""
        tokens = [options("time=x/4", 1), note("E", 2), options("bogus=1", 3), end(3)]
        parser = Parser(tokens)
        with pytest.raises(RenderError) as exc_info:
            parser.generate_tabs()
        messages = exc_info.value.messages
        assert len(messages) == 2
        assert messages[0].startswith("[1] Error: \n\tCould not parse beats per measure")
        assert messages[1] == '[3] Error: \n\tOption "bogus" does not exist.\n'

    def test_combined_invalid_options_in_one_block(self) -> None:
        """One block with two bad options is one entry listing both."""
        with pytest.raises(RenderError) as exc_info:
            render([options("time=x/4; bogus=1"), end()])
        assert len(exc_info.value.messages) == 1
        assert str(exc_info.value).count("\t") == 2

    def test_result_is_cached(self) -> None:
        """A second call returns the first result."""
        tokens = [note("E"), number(7), end()]
        parser = Parser(tokens)
        first = parser.generate_tabs()
        parser.source = [note("A"), end()]
        assert parser.generate_tabs() == first

    def test_render_from_source(self) -> None:
        """Notes after tab data render as a second staff."""
        tabs = render(tokenize("E A D G B E\n0 3 5,\nE A\n. 7"))
        assert tabs.split("\n\n")[2:4] == ["A  |-7-\nE  |---", "     1 "]
