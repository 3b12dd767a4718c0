"""Window-to-viewport mapping of fixed figures with a zoomable viewport.

A figure is a fixed-size table of homogeneous rows ``(x, y, w)``.  It can be
drawn as stored, in device coordinates, or mapped through a
:class:`~transforma.mapping.Mapper` whose viewport grows with the zoom
factor.  A "machine sheet" rectangle scales with the zoom as well.
"""

from __future__ import annotations

from enum import Enum

from .mapping import Mapper

MAX_ROWS = 72

Segment = tuple[tuple[int, int], tuple[int, int]]


class FigureKind(Enum):
    """The figures the view can load."""

    TRIANGLE = "triangle"
    STAR = "star"
    DINOSAUR = "dinosaur"


_TRIANGLE = ((0, 0), (30, 0), (0, 30), (0, 0))

_STAR = ((0, 0), (5, 10), (10, 0), (0, 6), (10, 6), (0, 0))

_DINOSAUR = (
    (0, 8), (0, 8), (1, 8), (1, 10), (2, 10), (2, 11), (3, 11), (3, 12),
    (5, 12), (5, 11), (6, 11), (6, 10), (7, 10), (7, 9), (8, 9), (8, 8),
    (9, 8), (9, 3), (12, 3), (12, 2), (11, 2), (11, 3), (9, 3), (9, 1),
    (10, 1), (10, 0), (18, 0), (18, 1), (19, 1), (19, 6), (14, 6), (14, 7),
    (17, 7), (17, 8), (13, 8), (13, 9), (15, 9), (15, 11), (14, 11), (14, 10),
    (13, 10), (13, 15), (12, 15), (12, 16), (11, 16), (11, 17), (10, 17), (10, 21),
    (11, 21), (11, 22), (9, 22), (9, 19), (8, 19), (8, 18), (7, 18), (7, 19),
    (6, 19), (6, 20), (5, 20), (5, 21), (6, 21), (6, 22), (4, 22), (4, 17),
    (3, 17), (3, 16), (2, 16), (2, 15), (1, 15), (1, 14), (0, 14), (0, 8),
)

# (points, first padded row, last padded row (exclusive), scale factor,
#  rows scaled (exclusive end), origin offsets (dx, dy))
_LAYOUTS = {
    FigureKind.TRIANGLE: (_TRIANGLE, 4, MAX_ROWS - 1, 5, MAX_ROWS - 1, (75, 75)),
    FigureKind.STAR: (_STAR, 6, MAX_ROWS, 10, MAX_ROWS - 1, (50, 50)),
    FigureKind.DINOSAUR: (_DINOSAUR, MAX_ROWS, MAX_ROWS, 10, MAX_ROWS, (100, 110)),
}


class MappingView:
    """A figure drawn either as stored or mapped onto a zoomable viewport."""

    def __init__(self, width: int, height: int, panel_width: int) -> None:
        if int(height) <= 0:
            raise ValueError("height must be positive")
        if int(width) - int(panel_width) <= 0:
            raise ValueError("the control panel leaves no room to draw")
        self.width = int(width)
        self.height = int(height)
        self.panel_width = int(panel_width)
        self.viewport = (0, 0, self.drawing_width, self.height)
        self.zoom = 1.0
        self.kind: FigureKind | None = None
        self._figure = [[0.0, 0.0, 0.0] for _ in range(MAX_ROWS)]
        self.original: list[tuple[float, float, float]] = self.figure
        self.center = (self.drawing_width // 2, self.height // 2)

    @property
    def drawing_width(self) -> int:
        """Width of the drawing area left of the control panel."""
        return self.width - self.panel_width

    @property
    def figure(self) -> list[tuple[float, float, float]]:
        """The current rows of the figure table."""
        return [tuple(row) for row in self._figure]  # type: ignore[misc]

    def assign_figure(self, kind: FigureKind | str) -> None:
        """Load ``kind`` into the table and scale it up.

        Rows the figure does not define are padded with ``(0, 0, 1)`` as far as
        the figure's layout reaches; any row beyond keeps its previous value.
        """
        kind = FigureKind(kind)
        points, pad_start, pad_end, factor, scaled_end, _ = _LAYOUTS[kind]
        for row, (x, y) in zip(self._figure, points):
            row[:] = [float(x), float(y), 1.0]
        for row in self._figure[pad_start:pad_end]:
            row[:] = [0.0, 0.0, 1.0]
        for row in self._figure[:scaled_end]:
            row[:] = [v * factor for v in row]
        self.kind = kind
        self.original = self.figure
        self.center = (self.drawing_width // 2, self.height // 2)

    def set_zoom(self, factor: float) -> None:
        """Grow or shrink the viewport by ``factor``."""
        self.zoom = float(factor)
        x1, y1, _, _ = self.viewport
        self.viewport = (
            x1,
            y1,
            int(self.drawing_width * self.zoom),
            int(self.height * self.zoom),
        )

    def sheet_rect(self) -> tuple[int, int, int, int]:
        """The machine-sheet rectangle as ``(x, y, width, height)``."""
        z = self.zoom
        return int(140 * z), int(110 * z), int(220 * z), int(280 * z)

    def origin(self) -> tuple[int, int]:
        """Device offsets at which the world origin of the figure is drawn."""
        if self.kind is None:
            return self.center
        dx, dy = _LAYOUTS[self.kind][5]
        _, _, x2, y2 = self.viewport
        return int(x2 // 2 - dx * self.zoom), int(y2 // 2 + dy * self.zoom)

    def segments(self, mapped: bool) -> list[Segment]:
        """Line segments between consecutive rows, mapped or as stored."""
        if mapped:
            mapper = Mapper()
            mapper.set_window(0, 0, self.drawing_width, self.height)
            mapper.set_viewport(*self.viewport)
            left, top = self.origin()
            pts = [mapper.map_point(x, y, left, top) for x, y, _ in self._figure]
        else:
            pts = [(int(x), int(y)) for x, y, _ in self._figure]
        return list(zip(pts, pts[1:]))