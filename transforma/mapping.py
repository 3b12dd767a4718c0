"""Window-to-viewport mapping for 2D drawing surfaces."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class _Rect:
    x1: float
    y1: float
    x2: float
    y2: float


class Mapper:
    """Maps world-window coordinates onto a device viewport.

    The world y axis points up; the device y axis points down, so world
    y values are mirrored around the ``top`` offset given to :meth:`map_point`.
    """

    def __init__(self) -> None:
        self._window: _Rect | None = None
        self._viewport: _Rect | None = None

    def set_window(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Set the world window corners."""
        self._window = _Rect(float(x1), float(y1), float(x2), float(y2))

    def set_viewport(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Set the device viewport corners (integer pixels)."""
        self._viewport = _Rect(int(x1), int(y1), int(x2), int(y2))

    def _scales(self) -> tuple[float, float]:
        if self._window is None:
            raise ValueError("window has not been set")
        if self._viewport is None:
            raise ValueError("viewport has not been set")
        w, v = self._window, self._viewport
        width = w.x2 - w.x1
        height = w.y2 - w.y1
        if width == 0 or height == 0:
            raise ValueError("window has zero width or height")
        return (v.x2 - v.x1) / width, (v.y2 - v.y1) / height

    def map_point(self, x: float, y: float, left: int, top: int) -> tuple[int, int]:
        """Return the device pixel for world point ``(x, y)``.

        World coordinates are truncated to integers first and the result is
        truncated toward zero, as pixel positions are whole numbers.
        """
        sx, sy = self._scales()
        w, v = self._window, self._viewport
        xw, yw = int(x), int(y)
        xpv = sx * (xw - w.x1) + v.x1 + left
        ypv = sy * (w.y1 - yw) - v.y1 + top
        return int(xpv), int(ypv)