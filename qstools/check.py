"""Interactive confirmation prompts."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from dataclasses import dataclass, field

__all__ = ["InputCheck", "ConfirmCheck", "double_check_string", "check_confirm"]

_YES = re.compile(r"^(?i:y(?:es)?)$")
_NO = re.compile(r"^(?i:n(?:o)?)$")


def _ask(message: str) -> str:
    return input(message)


@dataclass(frozen=True)
class InputCheck:
    """Asks for a string and compares it with the expected one."""

    msg: str
    expect: str
    prompt: Callable[[str], str] = field(default=_ask, repr=False, compare=False)

    def double_check_string(self) -> bool:
        """Return whether the typed answer equals the expected string."""
        return self.prompt(f"{self.msg} ") == self.expect


@dataclass(frozen=True)
class ConfirmCheck:
    """Asks a yes/no question; an empty answer means no."""

    msg: str
    prompt: Callable[[str], str] = field(default=_ask, repr=False, compare=False)

    def check_confirm(self) -> bool:
        """Return True on 'y'/'yes', False on 'n'/'no' or empty; ask again otherwise."""
        while True:
            answer = self.prompt(f"{self.msg} (y/N) ")
            if answer == "":
                return False
            if _YES.match(answer):
                return True
            if _NO.match(answer):
                return False
            print(
                f"Sorry, your reply was invalid: {answer!r} is not a valid answer, please try again.",
                file=sys.stderr,
            )


def double_check_string(expect: str, msg: str) -> bool:
    """Prompt with ``msg`` and return whether the answer equals ``expect``."""
    return InputCheck(msg=msg, expect=expect).double_check_string()


def check_confirm(msg: str) -> bool:
    """Prompt with ``msg`` and return whether the user confirmed."""
    return ConfirmCheck(msg=msg).check_confirm()