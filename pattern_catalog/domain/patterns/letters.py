"""A chain of letters, each wrapping an optional inner letter."""
from typing import Optional


class Letter:
    char = ""

    def __init__(self, letter: Optional["Letter"] = None) -> None:
        self.letter = letter

    def value(self) -> "Letter":
        """The wrapped letter; the innermost letter returns itself."""
        if self.letter is None:
            return self
        return self.letter

    def spell(self) -> str:
        """Characters from this letter inwards."""
        if self.letter is None:
            return self.char
        return self.char + self.letter.spell()

    def __str__(self) -> str:
        return self.char

    def __repr__(self) -> str:
        if self.letter is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self.letter!r})"


class T(Letter):
    char = "T"


class O(Letter):  # noqa: E742
    char = "O"
