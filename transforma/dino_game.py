"""A small dinosaur-and-cactus scene driven by 2D transformations.

The dinosaur is a closed poly-line of 72 points.  It is scaled up, turned
upside down and lifted into place, because the world y axis points up
while the figure was drawn with y pointing down.  Three cacti share one
figure that grows in two steps and then snaps back on a timer.
"""

from __future__ import annotations

from . import matrix as _m
from .mapping import Mapper

Point = tuple[float, float, float]
Segment = tuple[tuple[int, int], tuple[int, int]]

DINOSAUR: tuple[tuple[int, int], ...] = (
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

CACTUS: tuple[tuple[int, int], ...] = (
    (0, 5), (0, 5), (1, 5), (1, 4), (2, 4), (2, 5), (3, 5), (3, 9),
    (4, 9), (4, 1), (5, 1), (5, 0), (6, 0), (6, 1), (7, 1), (7, 9),
    (8, 9), (8, 5), (9, 5), (9, 4), (10, 4), (10, 5), (11, 5), (11, 11),
    (10, 11), (10, 12), (7, 12), (7, 17), (4, 17), (4, 12), (1, 12), (1, 11),
    (0, 11), (0, 5),
)

DINOSAUR_SCALE = 1.7
DINOSAUR_ORIGIN = (210, 50)
CACTUS_ORIGINS = ((510, 150), (650, 450), (310, 600))
CACTUS_GROWTH = 1.5
CACTUS_GROWTH_STEPS = 2
DEFAULT_COLOR = "yellow"
LOST_MESSAGE = "Has perdido"
WON_MESSAGE = "Has ganado"


class DinoGame:
    """The dinosaur, the cacti and the keyboard controls of the scene."""

    def __init__(self, width: int = 800, height: int = 700) -> None:
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError("width and height must be positive")
        self.width = int(width)
        self.height = int(height)
        self.tx = 0
        self.ty = 0
        self.color: object = DEFAULT_COLOR
        self._growing = True
        self._growth_count = 0
        self.dinosaur: list[Point] = []
        self.cactus: list[Point] = []
        self.reset()
        self.reset_cactus()

    @staticmethod
    def _as_points(points: list[tuple[float, ...]]) -> list[Point]:
        return [tuple(p) for p in points]  # type: ignore[misc]

    def reset(self) -> None:
        """Put the dinosaur back in its starting position."""
        self.dinosaur = [
            (x * DINOSAUR_SCALE, y * DINOSAUR_SCALE, 1.0) for x, y in DINOSAUR
        ]
        self.rotate(180)
        self.translate(0, 22)

    def reset_cactus(self) -> None:
        """Restore the cactus figure, turned upright about ``(1, 1)``."""
        self.cactus = [(float(x), float(y), 1.0) for x, y in CACTUS]
        self.rotate_cactus_about(180, 1, 1)

    def translate(self, tx: int, ty: int) -> None:
        """Shift the dinosaur by whole-number offsets."""
        self.dinosaur = self._as_points(_m.translate(self.dinosaur, int(tx), int(ty)))

    def scale_cactus(self, sx: float, sy: float) -> None:
        """Scale the cactus about the origin."""
        self.cactus = self._as_points(_m.scale(self.cactus, sx, sy))

    def scale_about(self, sx: float, sy: float, px: float, py: float) -> None:
        """Scale the dinosaur about the fixed point ``(px, py)``."""
        self.dinosaur = self._as_points(
            _m.scale_about(self.dinosaur, sx, sy, int(px), int(py))
        )

    def rotate(self, angle: float) -> None:
        """Rotate the dinosaur by ``angle`` degrees about the origin."""
        self.dinosaur = self._as_points(_m.rotate(self.dinosaur, angle))

    def rotate_cactus_about(self, angle: float, px: float, py: float) -> None:
        """Rotate the cactus by ``angle`` degrees about ``(px, py)``."""
        self.cactus = self._as_points(_m.rotate_about(self.cactus, angle, px, py))

    def cactus_tick(self) -> None:
        """One timer tick: grow the cactus twice, pause once, then restore it."""
        if self._growing:
            if self._growth_count < CACTUS_GROWTH_STEPS:
                self.scale_cactus(CACTUS_GROWTH, CACTUS_GROWTH)
                self._growth_count += 1
            else:
                self._growing = False
        else:
            self.reset_cactus()
            self._growing = True
            self._growth_count = 0

    def handle_key(self, key: str) -> str | None:
        """React to a key press; return a message to show, if any.

        ``P`` and ``G`` end the round (lost or won) and reset the dinosaur;
        ``W``/``A``/``S``/``D`` move it by five units; ``+`` and ``-`` grow
        or shrink it about the origin.  Other keys are ignored.
        """
        key = key.upper()
        if key == "P":
            self.reset()
            return LOST_MESSAGE
        if key == "G":
            self.reset()
            return WON_MESSAGE
        if key == "D":
            self.translate(self.ty + 5, 0)
        elif key == "A":
            self.translate(self.ty - 5, 0)
        elif key == "S":
            self.translate(0, self.tx - 5)
        elif key == "W":
            self.translate(0, self.tx + 5)
        elif key == "+":
            self.scale_about(1.1, 1.1, 0, 0)
        elif key == "-":
            self.scale_about(0.9, 0.9, 0, 0)
        return None

    def set_color(self, color: object) -> None:
        """Set the dinosaur colour; ``None`` (a cancelled choice) means the default."""
        self.color = DEFAULT_COLOR if color is None else color

    def _mapper(self) -> Mapper:
        mapper = Mapper()
        mapper.set_window(0, 0, self.width, self.height)
        mapper.set_viewport(0, 0, self.width, self.height)
        return mapper

    @staticmethod
    def _polyline(mapper: Mapper, points: list[Point], left: int, top: int) -> list[Segment]:
        pts = [mapper.map_point(x, y, left, top) for x, y, _ in points]
        return list(zip(pts, pts[1:]))

    def dinosaur_segments(self) -> list[Segment]:
        """Device line segments of the dinosaur."""
        left, top = DINOSAUR_ORIGIN
        return self._polyline(self._mapper(), self.dinosaur, left, top)

    def cactus_segments(self) -> list[Segment]:
        """Device line segments of the three cacti, one after another."""
        mapper = self._mapper()
        segments: list[Segment] = []
        for left, top in CACTUS_ORIGINS:
            segments.extend(self._polyline(mapper, self.cactus, left, top))
        return segments