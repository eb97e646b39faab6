"""
Region extraction step combining the box transforms with cropping.
"""

import logging
from contextlib import ExitStack

import torch

from lmcrop.box import Box
from lmcrop.crop import cut_box_from_image_and_resize
from lmcrop.crop_config import CropConfig
from lmcrop.transforms import clip_box, enlarge_box, scale_box_coordinates


def extract_region(box: Box, image: torch.Tensor, config: CropConfig) -> torch.Tensor:
    """
    Crop the context region around a detection for a downstream model.

    The box is scaled to pixel space when config.scale_factor is set, enlarged
    by config.enlarge_factor, optionally clipped to the image and then cut out
    at config.crop_size. Intermediate boxes are disposed before returning; the
    caller keeps ownership of box.

    Args:
        box: Detection box
        image: Image tensor [1, height, width, channels]
        config: Extraction settings

    Returns:
        Crop tensor [1, crop_height, crop_width, channels]
    """
    _, height, width, _ = image.shape

    with ExitStack() as stack:
        if config.scale_factor is not None:
            box = stack.enter_context(scale_box_coordinates(box, config.scale_factor))
        box = stack.enter_context(enlarge_box(box, config.enlarge_factor))
        if config.clip_to_image:
            box = stack.enter_context(clip_box(box, (height, width)))

        logging.debug("Extracting region %s-%s", box.start_point, box.end_point)
        return cut_box_from_image_and_resize(box, image, config.crop_size)
