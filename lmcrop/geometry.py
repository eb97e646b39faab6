"""
Host-side box geometry.
"""
from typing import Tuple


def size(box) -> Tuple[float, float]:
    """(width, height) of a host box such as CpuBox."""
    return (
        abs(box.end_point[0] - box.start_point[0]),
        abs(box.end_point[1] - box.start_point[1]),
    )


def center(box) -> Tuple[float, float]:
    """(x, y) center of a host box such as CpuBox."""
    return (
        box.start_point[0] + (box.end_point[0] - box.start_point[0]) / 2,
        box.start_point[1] + (box.end_point[1] - box.start_point[1]) / 2,
    )
