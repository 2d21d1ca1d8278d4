"""
Selector Module
===============
Circular selection over a fixed, ordered set of panels.

Features:
- Wraparound arithmetic in both directions
- Panel enumeration for the demo panels A-E
- Name-based selector for any ordered list of panels
"""

from enum import IntEnum
from typing import List, Sequence


def advance(current: int, steps: int, count: int) -> int:
    """
    Move an index by `steps` over `count` slots with wraparound.

    The result is always in [0, count), whatever the sign of steps.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    # Python's modulo takes the sign of the divisor
    return (current + steps) % count


class Panel(IntEnum):
    """The demo panels, in swipe order."""
    VIEW_A = 0
    VIEW_B = 1
    VIEW_C = 2
    VIEW_D = 3
    VIEW_E = 4

    def offset(self, n: int) -> 'Panel':
        return Panel(advance(self.value, n, len(Panel)))

    def next(self) -> 'Panel':
        return self.offset(1)

    def prev(self) -> 'Panel':
        return self.offset(-1)

    @property
    def letter(self) -> str:
        return self.name[-1]


class CircularSelector:
    """
    Holds the current position in a fixed list of panel names.

    next() and prev() wrap around at both ends.
    """

    def __init__(self, items: Sequence[str], start: int = 0):
        if not items:
            raise ValueError("CircularSelector needs at least one item")
        self.items: List[str] = list(items)
        self.index = advance(start, 0, len(self.items))

    def __len__(self) -> int:
        return len(self.items)

    @property
    def current(self) -> str:
        return self.items[self.index]

    def step(self, steps: int) -> str:
        self.index = advance(self.index, steps, len(self.items))
        return self.current

    def next(self) -> str:
        return self.step(1)

    def prev(self) -> str:
        return self.step(-1)

    def select(self, name: str) -> str:
        """Jump straight to a named item."""
        if name not in self.items:
            raise ValueError(f"Panel '{name}' not found")
        self.index = self.items.index(name)
        return self.current
