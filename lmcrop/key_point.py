"""
Keypoint class for landmarks attached to a box.
"""
from dataclasses import dataclass

@dataclass
class KeyPoint:
    """Landmark with x, y coordinates, in the coordinate space of its box."""

    x: float
    y: float
