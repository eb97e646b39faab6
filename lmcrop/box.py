"""
Bounding box types and construction.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

import torch

from lmcrop.key_point import KeyPoint


@dataclass
class CpuBox:
    """Host-side box with (x, y) corners."""

    start_point: Tuple[float, float]  # upper left
    end_point: Tuple[float, float]  # lower right
    landmarks: Optional[List[KeyPoint]] = None


@dataclass
class Box:
    """
    Axis-aligned box backed by tensors.

    start_point and end_point are [N, 2] tensors in (x, y) order, normally
    with N = 1. The combined [x0, y0, x1, y1] buffer is derived from them on
    demand.

    A box can be used as a context manager, which disposes it on exit:

        with enlarge_box(box) as enlarged:
            crop = cut_box_from_image_and_resize(enlarged, image, (64, 64))
    """

    start_point: Optional[torch.Tensor]
    end_point: Optional[torch.Tensor]
    landmarks: Optional[List[KeyPoint]] = None

    @property
    def start_end_tensor(self) -> torch.Tensor:
        return torch.cat([self.start_point, self.end_point], dim=1)

    @property
    def is_disposed(self) -> bool:
        return self.start_point is None

    def to_cpu(self) -> CpuBox:
        """Synchronize the first row of the box to host memory."""
        start = self.start_point.detach().cpu()[0].tolist()
        end = self.end_point.detach().cpu()[0].tolist()
        return CpuBox(
            start_point=(start[0], start[1]),
            end_point=(end[0], end[1]),
            landmarks=self.landmarks,
        )

    def dispose(self):
        self.start_point = None
        self.end_point = None
        self.landmarks = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        dispose_box(self)
        return False


def create_box(
    start_end_tensor: Optional[torch.Tensor] = None,
    start_point: Optional[torch.Tensor] = None,
    end_point: Optional[torch.Tensor] = None,
    landmarks: Optional[List[KeyPoint]] = None,
) -> Box:
    """
    Build a box from a combined [N, 4] buffer.

    Args:
        start_end_tensor: [x0, y0, x1, y1] rows (a flat [4] buffer is one row),
            unused when both points are given
        start_point: Optional [N, 2] upper left corners, used as-is
        end_point: Optional [N, 2] lower right corners, used as-is
        landmarks: Optional landmarks carried by the box

    Returns:
        Box whose corners are the given points, or the first and last two
        coordinates of each row of the combined buffer
    """
    if start_point is None or end_point is None:
        # reshape raises for anything that is not a multiple of 4 values
        corners = start_end_tensor.reshape(-1, 2, 2)
        if start_point is None:
            start_point = corners[:, 0].clone()
        if end_point is None:
            end_point = corners[:, 1].clone()

    return Box(start_point=start_point, end_point=end_point, landmarks=landmarks)


def dispose_box(box: Optional[Box]) -> None:
    """Release the buffers of a box. Boxes already released are ignored."""
    if box is not None and box.start_point is not None:
        box.dispose()
