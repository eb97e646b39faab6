"""
Box geometry and region extraction for landmark detection pipelines.
"""

# Import dataclasses
from lmcrop.key_point import KeyPoint
from lmcrop.box import Box, CpuBox, create_box, dispose_box

# Import config classes
from lmcrop.crop_config import CropConfig

# Import main module functions
from lmcrop.geometry import size, center
from lmcrop.transforms import scale_box_coordinates, enlarge_box, clip_box
from lmcrop.crop import normalize_box_coordinates, cut_box_from_image_and_resize
from lmcrop.extract import extract_region
