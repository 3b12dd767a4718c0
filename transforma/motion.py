"""Labels and a fish that bounce back and forth across a box.

Each tick moves the object by ten pixels along its axis.  When it passes
the far limit it turns round; when its position comes back to zero it
turns round again.  Labels show their text reversed while travelling back;
the fish swaps its picture.
"""

from __future__ import annotations

from enum import Enum

STEP = 10


class Axis(Enum):
    """Direction of travel."""

    X = "x"
    Y = "y"


def reverse_text(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


class BouncingLabel:
    """A text label that moves along one axis and bounces between 0 and a limit.

    ``position`` is where the travel counter starts, ``other`` the fixed
    coordinate on the other axis and ``limit`` the largest position at which
    the label still moves forward.  The text is reversed on reaching the far
    end and, if ``flip_on_return`` is set, reversed back on returning to 0.
    """

    def __init__(
        self,
        text: str,
        position: int = 0,
        other: int = 0,
        limit: int = 0,
        axis: Axis | str = Axis.X,
        flip_on_return: bool = True,
    ) -> None:
        self.text = text
        self.counter = int(position)
        self.other = int(other)
        self.limit = int(limit)
        self.axis = Axis(axis)
        self.flip_on_return = flip_on_return
        self.forward = True
        self.placed = int(position)

    @property
    def geometry(self) -> tuple[int, int]:
        """Current ``(x, y)`` of the label."""
        if self.axis is Axis.X:
            return self.placed, self.other
        return self.other, self.placed

    def step(self) -> tuple[int, int]:
        """Advance one tick and return the new ``(x, y)``."""
        if self.forward:
            self.placed = self.counter
            self.counter += STEP
            if self.placed > self.limit:
                self.forward = False
                self.text = reverse_text(self.text)
        if not self.forward:
            self.counter -= STEP
            self.placed = self.counter
            if self.counter == 0:
                self.forward = True
                if self.flip_on_return:
                    self.text = reverse_text(self.text)
        return self.geometry


class Aquarium:
    """A fish swimming left and right across a tank."""

    RIGHT_IMAGE = "pez.png"
    LEFT_IMAGE = "pezInv.png"

    def __init__(self, tank_width: int, fish_width: int, y: int) -> None:
        if fish_width <= 0 or tank_width < fish_width:
            raise ValueError("the fish must fit in the tank")
        self._motion = BouncingLabel(
            "", 0, y, tank_width - fish_width, Axis.X, flip_on_return=False
        )
        self.image = self.RIGHT_IMAGE

    @property
    def position(self) -> tuple[int, int]:
        """Current ``(x, y)`` of the fish."""
        return self._motion.geometry

    @property
    def facing_right(self) -> bool:
        return self._motion.forward

    def step(self) -> tuple[int, int]:
        """Advance one tick, update the picture and return the new position."""
        pos = self._motion.step()
        self.image = self.RIGHT_IMAGE if self._motion.forward else self.LEFT_IMAGE
        return pos