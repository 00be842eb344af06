import pytest

from qstools.check import ConfirmCheck, InputCheck


class _Failure(Exception):
    pass


def _answers(*replies):
    asked = []
    replies_iter = iter(replies)

    def prompt(message):
        asked.append(message)
        return next(replies_iter)

    return prompt, asked


def _failing(message):
    raise _Failure("temp error")


@pytest.mark.parametrize(
    "expect, reply, wanted",
    [
        ("abc", "abc", True),
        ("abcd", "abc", False),
    ],
)
def test_double_check_string(expect, reply, wanted):
    prompt, asked = _answers(reply)
    check = InputCheck(msg="test msg", expect=expect, prompt=prompt)
    assert check.double_check_string() is wanted
    assert len(asked) == 1
    assert "test msg" in asked[0]


def test_double_check_string_ask_error():
    check = InputCheck(msg="test msg", expect="abc", prompt=_failing)
    with pytest.raises(_Failure):
        check.double_check_string()


@pytest.mark.parametrize(
    "reply, wanted",
    [
        ("y", True),
        ("yes", True),
        ("YES", True),
        ("n", False),
        ("No", False),
        ("", False),
    ],
)
def test_check_confirm(reply, wanted):
    prompt, asked = _answers(reply)
    check = ConfirmCheck(msg="test msg", prompt=prompt)
    assert check.check_confirm() is wanted
    assert len(asked) == 1


def test_check_confirm_other_answer_asks_again():
    prompt, asked = _answers("a", "")
    check = ConfirmCheck(msg="test msg", prompt=prompt)
    assert check.check_confirm() is False
    assert len(asked) == 2


def test_check_confirm_ask_error():
    check = ConfirmCheck(msg="test msg", prompt=_failing)
    with pytest.raises(_Failure):
        check.check_confirm()