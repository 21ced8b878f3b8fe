"""Observer pattern: a publisher notifying a list of callbacks."""
from typing import Callable, List

Subscriber = Callable[[int], None]


class Publisher:
    """Announces published numbers and notifies subscribers in order."""

    def __init__(self) -> None:
        self.on_publish: List[Subscriber] = []

    def subscribe(self, fn: Subscriber) -> None:
        self.on_publish.append(fn)

    def publish(self, num: int) -> None:
        print(f"ANNOUNCEMENT: We are publishing {num}...")
        for fn in self.on_publish:
            fn(num)
