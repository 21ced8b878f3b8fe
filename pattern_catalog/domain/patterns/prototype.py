"""Prototype: a value object that can produce copies of itself."""
import copy


class Person:
    def __init__(self, name: str) -> None:
        self.name = name

    def __copy__(self) -> "Person":
        return type(self)(self.name)

    def copy(self) -> "Person":
        return copy.copy(self)

    def __str__(self) -> str:
        return self.name
