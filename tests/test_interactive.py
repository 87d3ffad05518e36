"""Tests for the confirm prompt."""

from unittest.mock import Mock

import pytest

from adaptive.interactive import confirm


def _console(answer=None, error=None) -> Mock:
    console = Mock()
    if error is not None:
        console.input.side_effect = error
    else:
        console.input.return_value = answer
    return console


@pytest.mark.unit
class TestConfirmDefaultYes:
    @pytest.mark.parametrize("answer", ["", "y", "yes", "Y", "sure", "nope"])
    def test_anything_but_no_is_yes(self, answer):
        assert confirm("Continue?", "y", console=_console(answer)) is True

    @pytest.mark.parametrize("answer", ["n", "no", "N", "NO", "  no  "])
    def test_no_answers(self, answer):
        assert confirm("Continue?", "y", console=_console(answer)) is False

    def test_prompt_hint(self):
        console = _console("")
        confirm("Continue?", console=console)
        prompt = console.input.call_args[0][0]
        assert prompt.plain == "Continue? (Y/n) "


@pytest.mark.unit
class TestConfirmDefaultNo:
    @pytest.mark.parametrize("answer", ["y", "yes", "Yes", " y "])
    def test_yes_answers(self, answer):
        assert confirm("Delete?", "n", console=_console(answer)) is True

    @pytest.mark.parametrize("answer", ["", "n", "yep", "maybe"])
    def test_anything_but_yes_is_no(self, answer):
        assert confirm("Delete?", "n", console=_console(answer)) is False

    def test_prompt_hint(self):
        console = _console("")
        confirm("Delete?", "N", console=console)
        assert console.input.call_args[0][0].plain == "Delete? (y/N) "


@pytest.mark.unit
class TestConfirmEndOfInput:
    def test_eof_takes_default(self):
        assert confirm("Go?", "y", console=_console(error=EOFError())) is True
        assert confirm("Go?", "n", console=_console(error=EOFError())) is False
