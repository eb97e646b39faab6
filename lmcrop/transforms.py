"""
Transforms producing new boxes from existing ones.
"""

from typing import Sequence, Tuple, Union

import torch
from torchvision.ops import clip_boxes_to_image

from lmcrop.box import Box, create_box
from lmcrop.geometry import center, size


def scale_box_coordinates(
    box: Box, factor: Union[torch.Tensor, Sequence[float], float]
) -> Box:
    """
    Multiply both corners of a box by a per-axis factor.

    Used to move a box between model space and image pixel space. The
    factor broadcasts against the [N, 2] corners, so (sx, sy) or a scalar
    both work. Integer boxes are promoted to float32. Landmarks are not
    carried over.
    """
    dtype = box.start_point.dtype
    if not dtype.is_floating_point:
        dtype = torch.float32
    factor = torch.as_tensor(factor, dtype=dtype, device=box.start_point.device)
    new_start = box.start_point * factor
    new_end = box.end_point * factor

    return create_box(torch.cat([new_start, new_end], dim=1))


def enlarge_box(box: Box, factor: float = 1.5) -> Box:
    """
    Grow a box around its center.

    Args:
        box: Box to enlarge
        factor: Ratio between the new and the old side lengths

    Returns:
        New box with the same center and sides scaled by factor
    """
    dtype = box.start_point.dtype
    if not dtype.is_floating_point:
        dtype = torch.float32
    device = box.start_point.device

    with torch.no_grad():
        box_cpu = box.to_cpu()
        box_center = torch.tensor([center(box_cpu)], dtype=dtype, device=device)
        box_size = torch.tensor([size(box_cpu)], dtype=dtype, device=device)

        new_half_size = box_size / 2 * factor
        new_start = box_center - new_half_size
        new_end = box_center + new_half_size

        return create_box(
            start_point=new_start, end_point=new_end, landmarks=box.landmarks
        )


def clip_box(box: Box, image_size: Tuple[int, int]) -> Box:
    """Clamp a box to the bounds of a (height, width) image."""
    clipped = clip_boxes_to_image(box.start_end_tensor, image_size)
    return create_box(clipped, landmarks=box.landmarks)
