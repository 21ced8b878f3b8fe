"""Factory method: heroes sharing a default run() behaviour."""
from abc import ABC, abstractmethod
from typing import Optional


class Drone(ABC):
    """Companion that can follow a hero around."""

    @abstractmethod
    def action(self) -> None:
        """Perform the drone's signature move."""

    @abstractmethod
    def tag_along(self) -> None:
        """Follow the hero."""


class FlameDrone(Drone):
    """Drone that breathes fire."""

    def action(self) -> None:
        """Shout the flame drone's battle cry."""
        print("Flambeau!!!")

    def tag_along(self) -> None:
        """Announce that the flame drone follows."""
        print("Flamedrone is tagging along!")


class Hero:
    """Creator giving every hero the same ``run`` behaviour."""

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name
        self.drone: Optional[Drone] = self.make_drone()

    def make_drone(self) -> Optional[Drone]:
        """Factory method; plain heroes get no drone."""
        return None

    def run(self) -> None:
        """Run, with the drone tagging along when there is one."""
        print(self.name or "", "is running!")
        if self.drone is not None:
            self.drone.tag_along()


class ClassicalHero(Hero):
    """Hero accompanied by a flame drone."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)

    def make_drone(self) -> Optional[Drone]:
        """Classical heroes fly with a ``FlameDrone``."""
        return FlameDrone()
