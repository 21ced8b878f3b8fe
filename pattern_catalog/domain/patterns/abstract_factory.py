"""Abstract factory: matched computer and storage families."""
from abc import ABC, abstractmethod


class Product:
    """Anything a system factory builds; prints as its class name."""

    def __str__(self) -> str:
        return type(self).__name__


class Computer(Product):
    """Computing half of a system."""


class Storage(Product):
    """Storage half of a system."""


class DesktopComputer(Computer):
    """Desktop tower."""


class HardDisk(Storage):
    """Spinning disk for desktops."""


class MobilePhone(Computer):
    """Handheld phone."""


class NandFlashMemory(Storage):
    """Flash storage for phones."""


class SystemFactory(ABC):
    """Builds a computer together with the storage that belongs to it."""

    @classmethod
    @abstractmethod
    def make_computer(cls) -> Computer:
        """Build the family's computer."""

    @classmethod
    @abstractmethod
    def make_storage(cls) -> Storage:
        """Build the family's storage."""


class DesktopComputerSystemFactory(SystemFactory):
    """Desktop family: desktop computer with a hard disk."""

    @classmethod
    def make_computer(cls) -> Computer:
        """Build a desktop computer."""
        return DesktopComputer()

    @classmethod
    def make_storage(cls) -> Storage:
        """Build a hard disk."""
        return HardDisk()


class MobilePhoneSystemFactory(SystemFactory):
    """Mobile family: phone with NAND flash memory."""

    @classmethod
    def make_computer(cls) -> Computer:
        """Build a mobile phone."""
        return MobilePhone()

    @classmethod
    def make_storage(cls) -> Storage:
        """Build NAND flash memory."""
        return NandFlashMemory()
