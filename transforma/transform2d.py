"""Interactive 2D transformations of a small figure drawn about the centre.

The scene holds a closed triangle in homogeneous row-vector form and
applies translation, scaling, rotation and their fixed-point variants to
it.  The values that the on-screen controls would supply live in
:attr:`TransformScene.controls` and are used by the keyboard handler.
"""

from __future__ import annotations

from dataclasses import dataclass

from . import matrix as _m
from .mapping import Mapper

_TRIANGLE: tuple[tuple[float, float, float], ...] = (
    (10.0, 10.0, 1.0),
    (30.0, 10.0, 1.0),
    (20.0, 30.0, 1.0),
    (10.0, 10.0, 1.0),
)

Point = tuple[float, float, float]
Segment = tuple[tuple[int, int], tuple[int, int]]


@dataclass
class _Controls:
    """Values of the input boxes beside the drawing area."""

    step_x: float = 0
    step_y: float = 0
    scale_x: float = 1.0
    scale_y: float = 1.0
    fixed_x: float = 0
    fixed_y: float = 0
    angle: float = 0
    pivot_x: float = 0
    pivot_y: float = 0


class TransformScene:
    """A triangle transformed in place and drawn with its origin centred."""

    def __init__(self, width: int, height: int, panel_width: int) -> None:
        if height <= 0:
            raise ValueError("height must be positive")
        if int(width) - int(panel_width) <= 0:
            raise ValueError("the control panel leaves no room to draw")
        self.width = int(width)
        self.height = int(height)
        self.panel_width = int(panel_width)
        self.controls = _Controls()
        self.key_mode: str | None = None
        self.tx = 0
        self.ty = 0
        self.figure: list[Point] = list(_TRIANGLE)
        self._original: list[Point] = list(_TRIANGLE)
        self.center = (self.drawing_width // 2, self.height // 2)
        self._anim1_count = 0
        self._anim2_count = 0
        self._anim2_forward = True

    @property
    def drawing_width(self) -> int:
        """Width of the drawing area left of the control panel."""
        return self.width - self.panel_width

    def _replace(self, points: list[tuple[float, ...]]) -> None:
        self.figure = [tuple(p) for p in points]  # type: ignore[misc]

    def translate(self, tx: int, ty: int) -> None:
        """Shift the figure by whole-number offsets."""
        self._replace(_m.translate(self.figure, int(tx), int(ty)))

    def scale(self, sx: float, sy: float) -> None:
        """Scale the figure about the origin."""
        self._replace(_m.scale(self.figure, sx, sy))

    def scale_about(self, sx: float, sy: float, px: float, py: float) -> None:
        """Scale the figure about the fixed point ``(px, py)``."""
        self._replace(_m.scale_about(self.figure, sx, sy, int(px), int(py)))

    def rotate(self, angle: float) -> None:
        """Rotate the figure by ``angle`` degrees about the origin."""
        self._replace(_m.rotate(self.figure, angle))

    def rotate_about(self, angle: float, px: float, py: float) -> None:
        """Rotate the figure by ``angle`` degrees about ``(px, py)``."""
        self._replace(_m.rotate_about(self.figure, angle, px, py))

    def reset(self) -> None:
        """Restore the original figure and clear the offsets."""
        self.figure = list(self._original)
        self.tx = self.ty = 0

    def move_up(self, step: float) -> None:
        self.translate(0, int(self.tx + step))

    def move_down(self, step: float) -> None:
        self.translate(0, int(self.tx - step))

    def move_left(self, step: float) -> None:
        self.translate(int(self.ty - step), 0)

    def move_right(self, step: float) -> None:
        self.translate(int(self.ty + step), 0)

    def _scale_from_controls(self) -> None:
        c = self.controls
        self.scale(c.scale_x, c.scale_y)

    def _scale_about_from_controls(self) -> None:
        c = self.controls
        self.scale_about(c.scale_x, c.scale_y, c.fixed_x, c.fixed_y)

    def _rotate_about_from_controls(self) -> None:
        c = self.controls
        self.rotate_about(c.angle, c.fixed_x, c.fixed_y)

    def handle_key(self, key: str) -> None:
        """React to a key press; keys without a meaning are ignored.

        ``W``/``A``/``S``/``D`` move the figure; ``E``, ``P`` and ``R`` pick
        scaling, fixed-point scaling or pivot rotation for the ``X`` and
        ``Y`` keys.  As on screen, ``X`` and ``Y`` always write the new value
        into the horizontal scale box.
        """
        key = key.upper()
        c = self.controls
        if key == "D":
            self.move_right(c.step_y)
        if key == "A":
            self.move_left(c.step_y)
        if key == "W":
            self.move_up(c.step_x)
        if key == "S":
            self.move_down(c.step_x)
        if key in ("E", "P", "R"):
            self.key_mode = key
        if key not in ("X", "Y"):
            return
        if self.key_mode == "E":
            c.scale_x = (c.scale_x if key == "X" else c.scale_y) + 1
            self._scale_from_controls()
        elif self.key_mode == "P":
            c.scale_x = (c.fixed_x if key == "X" else c.fixed_y) + 1
            self._scale_about_from_controls()
        elif self.key_mode == "R":
            c.scale_x = (c.pivot_x if key == "X" else c.pivot_y) + 1
            self._rotate_about_from_controls()

    def animation_one_step(self) -> None:
        """One tick of the spin about ``(20, 30)``: eight turns of 45 degrees, then a pause."""
        if self._anim1_count <= 8:
            angle = 45
            if self._anim1_count == 8:
                angle = 0
                self._anim1_count = 0
            self.rotate_about(angle, 20, 30)
            self._anim1_count += 1

    def animation_two_step(self) -> None:
        """One tick of the swing: forward about ``(10, 10)``, back about ``(50, 50)``."""
        if self._anim2_count <= 9 and self._anim2_forward:
            self.rotate_about(45, 10, 10)
            self._anim2_count += 1
            if self._anim2_count == 9:
                self._anim2_count = 0
                self._anim2_forward = False
        if not self._anim2_forward:
            self.rotate_about(-45, 50, 50)
            self._anim2_count += 1
            if self._anim2_count == 9:
                self._anim2_count = 0
                self._anim2_forward = True
                self.reset()

    def axes(self) -> tuple[Segment, Segment]:
        """The vertical and horizontal lines that split the area into quadrants."""
        width = self.drawing_width
        return (
            ((width // 2, 0), (width // 2, self.height)),
            ((0, self.height // 2), (width, self.height // 2)),
        )

    def segments(self) -> list[Segment]:
        """Device line segments of the figure with the origin at the centre."""
        mapper = Mapper()
        mapper.set_window(0, 0, self.drawing_width, self.height)
        mapper.set_viewport(0, 0, self.drawing_width, self.height)
        left, top = self.center
        pts = [mapper.map_point(p[0], p[1], left, top) for p in self.figure]
        return list(zip(pts, pts[1:]))