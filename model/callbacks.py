"""Synchronous multi-subscriber notification channel."""
from typing import Callable


class Callbacks:
    """Ordered list of callbacks fired synchronously, in subscription order.

    Adding the same callable twice registers it twice. A fire works on a
    snapshot, so subscribers added or removed while firing take effect on
    the next fire. Exceptions from a subscriber propagate to the caller.
    """

    def __init__(self):
        self._subscribers: list[Callable[..., object]] = []

    def add(self, fn: Callable[..., object]) -> Callable[..., object]:
        self._subscribers.append(fn)
        return fn

    def remove(self, fn: Callable[..., object]) -> None:
        """Drop every registration of fn. Unknown callables are ignored."""
        self._subscribers = [s for s in self._subscribers if s != fn]

    def has(self, fn: Callable[..., object]) -> bool:
        return fn in self._subscribers

    def clear(self) -> None:
        self._subscribers = []

    def fire(self, *args) -> None:
        for fn in list(self._subscribers):
            fn(*args)

    def __len__(self) -> int:
        return len(self._subscribers)
