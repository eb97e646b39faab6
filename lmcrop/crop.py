"""
Crop-and-resize of a box region from an image.
"""

import logging
from typing import Tuple

import torch
import torch.nn.functional as F

from lmcrop.box import Box


def normalize_box_coordinates(
    box: Box, image_size: Tuple[int, int]
) -> torch.Tensor:
    """
    Normalize pixel coordinates to the [0, 1] range.

    Args:
        box: Box in pixel coordinates
        image_size: Image size (height, width)

    Returns:
        [N, 4] tensor of [x0 / W, y0 / H, x1 / W, y1 / H]
    """
    height, width = image_size
    start_end = box.start_end_tensor.to(torch.float32)
    scale = torch.tensor(
        [width, height, width, height], dtype=torch.float32, device=start_end.device
    )
    return start_end / scale


def _sample_positions(start, end, num_samples, device):
    # Grid positions in [-1, 1] for align_corners=True, where -1 and 1 are
    # the centers of the first and last pixels.
    if num_samples > 1:
        steps = torch.linspace(0.0, 1.0, num_samples, device=device)
    else:
        steps = torch.full((1,), 0.5, device=device)
    return 2.0 * (start + steps * (end - start)) - 1.0


def cut_box_from_image_and_resize(
    box: Box, image: torch.Tensor, crop_size: Tuple[int, int]
) -> torch.Tensor:
    """
    Extract the region covered by a box and resize it with bilinear sampling.

    Sample points follow crop-and-resize semantics: the normalized corners map
    onto the first and last pixel centers, so a box covering the whole image
    samples every pixel when crop_size equals the image size. Points that fall
    outside the image read as zero.

    Args:
        box: Box in pixel coordinates, [x0, y0, x1, y1]
        image: Image tensor [1, height, width, channels]
        crop_size: Output size (crop_height, crop_width)

    Returns:
        Crop tensor [1, crop_height, crop_width, channels]
    """
    _, height, width, _ = image.shape
    crop_height, crop_width = crop_size

    logging.debug(
        "Cropping box %s-%s from %ix%i image to %ix%i",
        box.start_point,
        box.end_point,
        height,
        width,
        crop_height,
        crop_width,
    )

    with torch.no_grad():
        x0, y0, x1, y1 = normalize_box_coordinates(box, (height, width))[0].to(
            image.device
        )

        dtype = image.dtype if image.is_floating_point() else torch.float32
        grid_x = _sample_positions(x0, x1, crop_width, image.device)
        grid_y = _sample_positions(y0, y1, crop_height, image.device)
        grid_y, grid_x = torch.meshgrid(grid_y, grid_x, indexing="ij")
        grid = torch.stack([grid_x, grid_y], dim=-1).unsqueeze(0).to(dtype)

        # NHWC -> NCHW and back
        source = image.permute(0, 3, 1, 2).to(dtype)
        crop = F.grid_sample(
            source, grid, mode="bilinear", padding_mode="zeros", align_corners=True
        )
        return crop.permute(0, 2, 3, 1).contiguous()
