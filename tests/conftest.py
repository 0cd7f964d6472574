"""Shared test fixtures."""

from __future__ import annotations

import base64
import io

import numpy as np
import pytest
from PIL import Image

from collider_gen.engine.context import PixelMask


def make_mask(rows: list[str]) -> PixelMask:
    """Build a mask from ASCII art: '#' = opaque, anything else = transparent."""
    return PixelMask(np.array([[c == "#" for c in row] for row in rows], dtype=bool))


def mask_to_rgba(mask: PixelMask, alpha: int = 255) -> Image.Image:
    """RGBA sprite whose alpha is ``alpha`` where the mask is opaque, 0 elsewhere."""
    arr = np.zeros((mask.height, mask.width, 4), dtype=np.uint8)
    arr[..., :3] = 200
    arr[..., 3] = np.where(mask.data, alpha, 0)
    return Image.fromarray(arr)


def image_to_base64(image: Image.Image, fmt: str = "PNG") -> str:
    buf = io.BytesIO()
    image.save(buf, format=fmt)
    return base64.b64encode(buf.getvalue()).decode("ascii")


SQUARE_4X4 = [
    "####",
    "####",
    "####",
    "####",
]

TWO_SQUARES = [
    "......",
    ".##...",
    ".##...",
    "......",
    "...##.",
    "...##.",
]

# Opaque ground with a bump, like a terrain strip
TERRAIN = [
    "......",
    "..##..",
    ".####.",
    "######",
    "######",
]

# Blobs touching only at a corner: one 8-connected region
DIAGONAL = [
    "##..",
    "##..",
    "..##",
    "..##",
]

L_SHAPE = [
    "#...",
    "#...",
    "#...",
    "####",
]


@pytest.fixture
def square_mask() -> PixelMask:
    return make_mask(SQUARE_4X4)


@pytest.fixture
def two_squares_mask() -> PixelMask:
    return make_mask(TWO_SQUARES)


@pytest.fixture
def terrain_mask() -> PixelMask:
    return make_mask(TERRAIN)


@pytest.fixture
def empty_mask() -> PixelMask:
    return PixelMask(np.zeros((5, 7), dtype=bool))


@pytest.fixture
def two_squares_image() -> Image.Image:
    return mask_to_rgba(make_mask(TWO_SQUARES))
