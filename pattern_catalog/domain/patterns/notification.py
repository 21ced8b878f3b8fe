"""Notification center: a string-keyed callback registry."""
from typing import Callable, Dict, List, Optional

Observer = Callable[[int], None]


class NotificationCenter:
    """Observers keyed by name, triggered in the order their keys were added.

    Re-adding an existing key replaces its callback in place; adding ``None``
    removes the key.
    """

    def __init__(self) -> None:
        self.observers: Dict[str, Observer] = {}

    def add_observer(self, key: str, fn: Optional[Observer]) -> None:
        if fn is None:
            self.remove_observer(key)
            return
        self.observers[key] = fn

    def trigger(self, value: int) -> None:
        for fn in list(self.observers.values()):
            fn(value)

    def remove_observer(self, key: str) -> None:
        self.observers.pop(key, None)

    @property
    def keys(self) -> List[str]:
        return list(self.observers)
