"""
Configuration for region extraction.
"""
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Optional, Tuple


@dataclass
class CropConfig:
    """Configuration for extracting a box region for a downstream model."""

    crop_size: Tuple[int, int] = (192, 192)  # (height, width)
    enlarge_factor: float = 1.5
    scale_factor: Optional[Tuple[float, float]] = None  # (sx, sy) to pixel space
    clip_to_image: bool = False

    def __post_init__(self):
        if (
            not isinstance(self.crop_size, (list, tuple))
            or len(self.crop_size) != 2
            or not all(isinstance(dim, Integral) for dim in self.crop_size)
        ):
            raise ValueError(
                f"crop_size must be two integers (height, width), got {self.crop_size!r}"
            )
        self.crop_size = tuple(int(dim) for dim in self.crop_size)
        if any(dim <= 0 for dim in self.crop_size):
            raise ValueError(f"crop_size must be positive, got {self.crop_size}")
        if self.enlarge_factor <= 0:
            raise ValueError(
                f"enlarge_factor must be positive, got {self.enlarge_factor}"
            )
        if self.scale_factor is not None:
            if (
                not isinstance(self.scale_factor, (list, tuple))
                or len(self.scale_factor) != 2
                or not all(isinstance(s, Real) for s in self.scale_factor)
            ):
                raise ValueError(
                    f"scale_factor must be two numbers (sx, sy), got {self.scale_factor!r}"
                )
            self.scale_factor = tuple(float(s) for s in self.scale_factor)
