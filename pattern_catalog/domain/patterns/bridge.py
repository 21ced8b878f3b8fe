"""Bridge: a page rendered through an interchangeable language."""
from abc import ABC, abstractmethod
from typing import Optional


class Language(ABC):
    """Implementation side of the bridge."""

    @abstractmethod
    def greet(self) -> str:
        """Greeting word in this language."""


class English(Language):
    """English greetings."""

    def greet(self) -> str:
        """Return ``Hello``."""
        return "Hello"


class French(Language):
    """French greetings."""

    def greet(self) -> str:
        """Return ``Bonjour``."""
        return "Bonjour"


class Page:
    """Abstraction side of the bridge: renders through its language."""

    def __init__(self, lang: Optional[Language] = None) -> None:
        self.lang = lang

    def render(self) -> str:
        """Greeting with an exclamation mark, or a neutral fallback."""
        if self.lang is not None:
            return f"{self.lang.greet()}!"
        return "Greetings!"
