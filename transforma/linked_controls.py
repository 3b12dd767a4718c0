"""A spin box, a slider and a label kept in step with one another.

Moving the slider updates both the label and the spin box; changing the
spin box updates only the label.  Values are clamped to the range, and a
control that already holds a value does not announce it again.
"""

from __future__ import annotations

from collections.abc import Callable


class LinkedControls:
    """A label showing the value chosen with a spin box or a slider."""

    def __init__(self, minimum: int = 0, maximum: int = 255) -> None:
        if minimum > maximum:
            raise ValueError("minimum must not exceed maximum")
        self.minimum = int(minimum)
        self.maximum = int(maximum)
        self.spin = self.minimum
        self.slider = self.minimum
        self.label = "0"
        self._listeners: list[Callable[[str], None]] = []

    def _clamp(self, value: int) -> int:
        return max(self.minimum, min(self.maximum, int(value)))

    def _show(self, value: int) -> None:
        text = str(value)
        if text != self.label:
            self.label = text
            for callback in list(self._listeners):
                callback(text)

    def set_spin(self, value: int) -> None:
        """Set the spin box; the label follows."""
        value = self._clamp(value)
        if value != self.spin:
            self.spin = value
            self._show(value)

    def set_slider(self, value: int) -> None:
        """Set the slider; the label and the spin box follow."""
        value = self._clamp(value)
        if value != self.slider:
            self.slider = value
            self._show(value)
            self.set_spin(value)

    def subscribe(self, callback: Callable[[str], None]) -> None:
        """Call ``callback`` with the label's new text whenever it changes."""
        self._listeners.append(callback)