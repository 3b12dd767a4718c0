"""Homogeneous 2D transformations, window-to-viewport mapping, oblique 3D projection and small animation models."""

__version__ = "0.1.0"

__all__ = [
    "mapping",
    "matrix",
    "projection3d",
    "transform2d",
    "mapping2d",
    "motion",
    "dino_game",
    "random_fill",
    "linked_controls",
]