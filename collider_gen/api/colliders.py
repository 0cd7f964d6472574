"""POST /api/colliders — image to collider descriptors."""

from __future__ import annotations

import base64
import binascii
import io
import logging

from fastapi import APIRouter, Depends, HTTPException
from PIL import Image, UnidentifiedImageError

from collider_gen.dependencies import get_pipeline
from collider_gen.engine.mask import UnsupportedFormat
from collider_gen.engine.pipeline import Pipeline
from collider_gen.models.requests import ColliderRequest
from collider_gen.models.responses import ColliderResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def decode_image(image_base64: str) -> Image.Image:
    """Decode a base64 image payload, raising ValueError on garbage."""
    try:
        raw = base64.b64decode(image_base64, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"image_base64 is not valid base64: {e}") from e
    try:
        with Image.open(io.BytesIO(raw)) as img:
            img.load()
            return img.copy()
    except UnidentifiedImageError as e:
        raise ValueError("image_base64 is not a recognised image file") from e
    except (OSError, Image.DecompressionBombError) as e:
        raise ValueError(f"image_base64 could not be decoded: {e}") from e


@router.post("/colliders", response_model=ColliderResponse)
def colliders(
    req: ColliderRequest,
    pipeline: Pipeline = Depends(get_pipeline),
) -> ColliderResponse:
    try:
        image = decode_image(req.image_base64)
        ctx = pipeline.run(image, req.kind, multi=req.multi, translated=req.translated)
    except UnsupportedFormat as e:
        logger.info("Rejected image: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    return ColliderResponse.from_context(ctx)
