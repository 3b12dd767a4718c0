"""Oblique projection of wire-frame shapes onto a 2D drawing surface.

A shape is a list of 3D points drawn as one poly-line.  Each point is
projected with an oblique (cavalier-style) projection controlled by two
angles, ``alpha`` (the depth foreshortening angle) and ``phi`` (the
direction of the receding z axis), and then mapped onto the device
viewport with the y axis pointing up.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .mapping import Mapper
from .matrix import radians

MAX_POINTS = 131

_KEY_TRANSLATIONS = {
    "D": (5, 0, 0),
    "A": (-5, 0, 0),
    "W": (0, 5, 0),
    "S": (0, -5, 0),
    "Q": (0, 0, 5),
    "E": (0, 0, -5),
}

_KEY_SCALINGS = {
    "M": (0, 0.1),
    "N": (0, -0.1),
    "K": (1, 0.1),
    "L": (1, -0.1),
    "P": (2, 0.1),
    "O": (2, -0.1),
}

_MODES = ("translate", "scale", "rotate")
_AXES = ("x", "y", "z")


@dataclass(frozen=True)
class Point3D:
    """A vertex of a wire-frame shape; ``draw`` marks a line-to vertex."""

    x: int
    y: int
    z: int
    draw: bool


class Shape(Enum):
    """The shapes the scene can show."""

    CUBE = "cube"
    ITL = "itl"


def _points(raw: list[tuple[int, int, int, int]]) -> list[Point3D]:
    return [Point3D(x, y, z, bool(d)) for x, y, z, d in raw]


_CUBE = _points([
    (100, 50, 0, 0), (200, 50, 0, 1), (200, 150, 0, 1), (100, 150, 0, 1),
    (100, 50, 0, 1), (100, 50, 100, 1), (200, 50, 100, 1), (200, 150, 100, 1),
    (200, 150, 0, 1), (200, 50, 0, 0), (200, 50, 100, 1), (100, 50, 100, 0),
    (100, 150, 100, 1), (100, 150, 0, 1), (100, 150, 100, 0), (200, 150, 100, 1),
])

_ITL = _points([
    # letter I
    (30, 30, 0, 1), (30, 60, 0, 1), (30, 30, 0, 0), (50, 30, 0, 1), (50, 60, 0, 1),
    (50, 30, 0, 0), (50, 30, 10, 1), (50, 60, 10, 1), (50, 30, 10, 0), (30, 30, 10, 1),
    (30, 30, 0, 1), (30, 30, 10, 0), (30, 60, 10, 1), (50, 60, 10, 1), (50, 60, 0, 1),
    (30, 60, 0, 1), (30, 60, 10, 1),
    (30, 60, 0, 0), (10, 60, 0, 1), (10, 60, 10, 1),
    (10, 60, 0, 0), (10, 80, 0, 1), (10, 80, 10, 1), (10, 80, 0, 0), (70, 80, 0, 1),
    (70, 60, 0, 1), (10, 60, 0, 1), (70, 60, 0, 0), (70, 60, 10, 1), (10, 60, 10, 1),
    (10, 80, 10, 1), (70, 80, 10, 1), (70, 80, 0, 1), (70, 80, 10, 0), (70, 60, 10, 1),
    (10, 60, 10, 0), (10, 60, 0, 0), (30, 60, 0, 0), (30, 30, 0, 0), (10, 30, 0, 1),
    (10, 10, 0, 1), (70, 10, 0, 1), (70, 30, 0, 1), (10, 30, 0, 1), (10, 30, 10, 1),
    (10, 10, 10, 1), (10, 10, 0, 1), (10, 10, 10, 0), (70, 10, 10, 1), (70, 30, 10, 1),
    (10, 30, 10, 1), (70, 30, 10, 0), (70, 30, 0, 1), (70, 10, 0, 0), (70, 10, 10, 1),
    (110, 10, 10, 0),
    # letter T
    (110, 10, 0, 1), (110, 60, 0, 1), (110, 10, 0, 0), (130, 10, 0, 1), (130, 60, 0, 1),
    (130, 10, 0, 0), (130, 10, 10, 1), (130, 60, 10, 1), (130, 10, 10, 0), (110, 10, 10, 1),
    (110, 10, 0, 1), (110, 10, 10, 0), (110, 60, 10, 1), (130, 60, 10, 1), (130, 60, 0, 1),
    (110, 60, 0, 1), (110, 60, 10, 1), (110, 60, 0, 0), (90, 60, 0, 1), (90, 60, 10, 1),
    (90, 60, 0, 0), (90, 80, 0, 1), (90, 80, 10, 1), (90, 80, 0, 0), (150, 80, 0, 1),
    (150, 60, 0, 1), (90, 60, 0, 1), (150, 60, 0, 0), (150, 60, 10, 1), (90, 60, 10, 1),
    (90, 80, 10, 1), (150, 80, 10, 1), (150, 80, 0, 1), (150, 80, 10, 0), (150, 60, 10, 1),
    (90, 60, 10, 0), (90, 60, 0, 1), (170, 60, 0, 0),
    # letter L
    (170, 30, 0, 1), (170, 80, 0, 1), (170, 30, 0, 0), (190, 30, 0, 1), (190, 80, 0, 1),
    (190, 30, 0, 0), (190, 30, 10, 1), (190, 80, 10, 1), (190, 30, 10, 0), (170, 30, 10, 1),
    (170, 30, 0, 1), (170, 30, 10, 0), (170, 80, 10, 1), (190, 80, 10, 1), (190, 80, 0, 1),
    (170, 80, 0, 1), (170, 80, 10, 1),
    (170, 80, 10, 0), (170, 80, 0, 0), (190, 80, 0, 0), (190, 30, 0, 0), (170, 30, 0, 1),
    (170, 10, 0, 1), (210, 10, 0, 1), (210, 30, 0, 1), (170, 30, 0, 1), (170, 30, 10, 1),
    (170, 10, 10, 1), (170, 10, 0, 1), (170, 10, 10, 0), (210, 10, 10, 1), (210, 30, 10, 1),
    (170, 30, 10, 1), (210, 30, 10, 0), (210, 30, 0, 1), (210, 10, 0, 0), (210, 10, 10, 1),
])

_SHAPES = {Shape.CUBE: _CUBE, Shape.ITL: _ITL}


def _round(value: float) -> int:
    return math.floor(value + 0.5)


def oblique_offset(x: int, y: int, z: int, alpha: float, phi: float) -> tuple[int, int]:
    """Project ``(x, y, z)`` onto the plane; ``alpha`` and ``phi`` are in radians.

    The depth ``z`` is foreshortened to ``z / tan(alpha)`` (zero when the
    tangent is zero) and laid out along the direction ``phi``.
    """
    tan_alpha = math.tan(alpha)
    length = int(z / tan_alpha) if tan_alpha != 0 else 0
    return int(x + length * math.cos(phi)), int(y + length * math.sin(phi))


class Scene3D:
    """A shape projected obliquely, with translation, scaling and rotation.

    ``mode`` is one of ``"translate"``, ``"scale"`` or ``"rotate"`` and
    ``rotation_axis`` one of ``"x"``, ``"y"`` or ``"z"``; they stand for the
    option buttons that choose how the shape is drawn and which angle the
    ``+`` and ``-`` keys change.
    """

    def __init__(self, width: int, height: int, panel_width: int) -> None:
        if height <= 0:
            raise ValueError("height must be positive")
        if panel_width <= 0:
            raise ValueError("panel width must be positive")
        self.width = int(width)
        self.height = int(height)
        self.panel_width = int(panel_width)
        self.alpha = 63.4
        self.phi = 30.0
        self.tx = self.ty = self.tz = 0
        self.center = (120, 50, 50)
        self.scale_factors = [1.0, 1.0, 1.0]
        self.angles = {"x": 0, "y": 0, "z": 0}
        self.active_axis: str | None = None
        self.mode = "translate"
        self.rotation_axis = "x"
        self._mapper = Mapper()
        self._init_viewport()
        self.shape = Shape.CUBE
        self._shape_points: list[Point3D] = []
        self.select_shape(Shape.CUBE)

    @property
    def drawing_width(self) -> int:
        """Width of the drawing area left of the control panel."""
        return self.width - self.panel_width

    def _init_viewport(self) -> None:
        span = self.width - self.drawing_width
        self._mapper.set_window(0, 0, span, self.height)
        self._mapper.set_viewport(0, 0, span, self.height)

    def select_shape(self, shape: Shape | str) -> None:
        """Load the vertices of ``shape``, padded to the fixed point count."""
        shape = Shape(shape)
        points = list(_SHAPES[shape][:MAX_POINTS])
        points.extend(Point3D(0, 0, 0, False) for _ in range(MAX_POINTS - len(points)))
        self.shape = shape
        self._shape_points = points
        self._init_viewport()

    @property
    def points(self) -> list[Point3D]:
        """The vertices of the current shape."""
        return list(self._shape_points)

    def set_alpha(self, value: float) -> None:
        """Set the foreshortening angle in degrees."""
        self.alpha = value
        self._init_viewport()

    def set_phi(self, value: float) -> None:
        """Set the direction of the receding axis in degrees."""
        self.phi = value
        self._init_viewport()

    def handle_key(self, key: str) -> None:
        """React to a key: move, scale or rotate; unknown keys are ignored."""
        key = key.upper()
        if key in _KEY_TRANSLATIONS:
            dx, dy, dz = _KEY_TRANSLATIONS[key]
            self.tx += dx
            self.ty += dy
            self.tz += dz
        elif key in _KEY_SCALINGS:
            axis, delta = _KEY_SCALINGS[key]
            self.scale_factors[axis] += delta
        elif key in ("+", "-"):
            if self.rotation_axis not in _AXES:
                raise ValueError(f"unknown rotation axis: {self.rotation_axis!r}")
            self.angles[self.rotation_axis] += 5 if key == "+" else -5
            self.active_axis = self.rotation_axis

    def _project(self, x: float, y: float, z: float) -> tuple[int, int]:
        xp, yp = oblique_offset(
            int(x), int(y), int(z), radians(self.alpha), radians(self.phi)
        )
        return self._mapper.map_point(xp, yp, 0, self.height)

    def z_axis(self) -> tuple[tuple[int, int], tuple[int, int]]:
        """Device end points of the receding z axis."""
        width = self.drawing_width
        end_x = int(width * math.cos(radians(self.phi)))
        end_y = int(width * math.sin(radians(self.phi)))
        return (
            self._mapper.map_point(0, 0, 0, self.height),
            self._mapper.map_point(end_x, end_y, 0, self.height),
        )

    def _scaled(self, p: Point3D) -> tuple[int, int, int]:
        (cx, cy, cz), (fx, fy, fz) = self.center, self.scale_factors
        return (
            int(cx + (p.x - cx) * fx),
            int(cy + (p.y - cy) * fy),
            int(cz + (p.z - cz) * fz),
        )

    def _rotated(self, p: Point3D) -> tuple[int, int, int]:
        cx, cy, cz = self.center
        x, y, z = p.x, p.y, p.z
        ax = radians(self.angles["x"])
        ay = radians(self.angles["y"])
        az = radians(self.angles["z"])
        if self.active_axis == "x":
            y = _round(cy + (p.y - cy) * math.cos(ax) + (p.z - cz) * math.sin(ax))
            z = _round(cz - (p.y - cy) * math.sin(ax) + (p.z - cz) * math.cos(ax))
        if self.active_axis == "y":
            x = _round(cx + (p.x - cx) * math.cos(ay) - (p.z - cz) * math.sin(ay))
            z = _round(cz + (p.x - cx) * math.sin(ay) + (p.z - cz) * math.cos(ay))
        if self.active_axis == "z":
            # The z rotation mixes in the y angle and the z centre as drawn.
            x = _round(cx + (p.x - cx) * math.cos(ay) - (p.y - cy) * math.sin(az))
            y = _round(cz + (p.x - cx) * math.sin(ay) + (p.y - cy) * math.cos(az))
        return x, y, z

    def projected_points(self) -> list[tuple[int, int]]:
        """Device positions of every vertex after the current transformation."""
        if self.mode not in _MODES:
            raise ValueError(f"unknown mode: {self.mode!r}")
        if self.mode == "scale":
            transform = self._scaled
        elif self.mode == "rotate":
            transform = self._rotated
        else:
            transform = lambda p: (p.x, p.y, p.z)  # noqa: E731
        result = []
        for p in self._shape_points:
            x, y, z = transform(p)
            result.append(self._project(x + self.tx, y + self.ty, z + self.tz))
        return result

    def segments(self) -> list[tuple[tuple[int, int], tuple[int, int]]]:
        """Consecutive vertex pairs, each drawn as one line."""
        pts = self.projected_points()
        return list(zip(pts, pts[1:]))