"""Playwright pattern: a director casting an actor and handing over a prop."""
from abc import ABC, abstractmethod
from typing import Optional


class Sword(ABC):
    """Stage prop an actor can wield."""

    @abstractmethod
    def what(self) -> str:
        """Describe the prop."""


class FlamingSword(Sword):
    """The flaming sword from the props department."""

    def what(self) -> str:
        """Describe the flaming sword."""
        return "a flaming sword"


class Actor:
    """Performer cast by the director."""

    def __init__(self, name: str = "") -> None:
        self.name = name

    def sing(self) -> str:
        """The actor's one song."""
        return "Oooh la la, snow in a sunny day!"


class Director:
    """Sets up the scene and lets the actor perform."""

    def __init__(self) -> None:
        self.actor: Optional[Actor] = None
        self.sword: Optional[Sword] = None

    def action(self) -> None:
        """Cast Phil, hand over the sword and print the scene."""
        self.actor = Actor()
        self.sword = FlamingSword()
        self.actor.name = "Phil"
        print("Our hero,", self.actor.name, "wields", self.sword.what())
        print('And sings,"', self.actor.sing(), '"')
