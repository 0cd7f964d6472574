"""Binary mask builder — pixel data to opacity grid.

A pixel is opaque iff its alpha (or luminance, for single-band formats) is
strictly greater than zero. There is no tunable threshold: anti-aliased
fringes count as solid.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from collider_gen.engine.context import PixelMask

logger = logging.getLogger(__name__)

# Pillow modes carrying an alpha band
_ALPHA_MODES = {"RGBA", "LA", "PA", "RGBa", "La"}
# Single-band modes read as luminance
_LUMINANCE_MODES = {"1", "L", "I", "F", "I;16", "I;16L", "I;16B", "I;16N"}
# numpy channel counts: 1 → luminance, 2 → luminance + alpha, 4 → RGBA
_ARRAY_CHANNELS_WITH_OPACITY = {1, 2, 4}


class UnsupportedFormat(ValueError):
    """The image carries no alpha or luminance channel to read opacity from."""


def load_image(path: str | Path) -> Image.Image:
    """Open an image file and decode it fully."""
    with Image.open(path) as img:
        img.load()
        return img.copy()


def build_mask(image: Image.Image | NDArray | PixelMask) -> PixelMask:
    """Build the opacity mask of an image.

    Args:
        image: Pillow image, numpy array (H×W, H×W×1, H×W×2 or H×W×4) or an
            existing PixelMask (returned unchanged).

    Raises:
        UnsupportedFormat: the pixel layout has no opacity data.
    """
    if isinstance(image, PixelMask):
        return image
    if isinstance(image, Image.Image):
        opacity = _opacity_from_pil(image)
    elif isinstance(image, np.ndarray):
        opacity = _opacity_from_array(image)
    else:
        raise UnsupportedFormat(f"Cannot read pixels from {type(image).__name__}")

    mask = PixelMask(opacity > 0)
    logger.debug(
        "Mask %dx%d: %d opaque pixels", mask.width, mask.height, mask.opaque_count
    )
    return mask


def _opacity_from_pil(image: Image.Image) -> NDArray:
    mode = image.mode
    if mode == "P" and "transparency" in image.info:
        image = image.convert("RGBA")
        mode = image.mode
    if mode in _ALPHA_MODES:
        return np.asarray(image.getchannel("A"))
    if mode in _LUMINANCE_MODES:
        return np.asarray(image)
    raise UnsupportedFormat(f"Pixel format {mode!r} has no alpha or luminance channel")


def _opacity_from_array(array: NDArray) -> NDArray:
    if array.ndim == 2:
        return array
    if array.ndim == 3 and array.shape[2] in _ARRAY_CHANNELS_WITH_OPACITY:
        # Single channel is luminance; otherwise alpha is the last channel.
        return array[:, :, -1]
    raise UnsupportedFormat(
        f"Array of shape {array.shape} has no alpha or luminance channel"
    )
