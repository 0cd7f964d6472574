"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from collider_gen.engine.shapes import ShapeKind


class ColliderRequest(BaseModel):
    image_base64: str = Field(..., description="Base64-encoded image file (PNG, WebP, GIF...)")
    kind: ShapeKind = Field(default=ShapeKind.POLYLINE, description="Shape kind to build")
    multi: bool = Field(
        default=False,
        description="One collider per connected region instead of one merged outline",
    )
    translated: bool = Field(
        default=True,
        description="Center each outline on its own bounding box instead of image coordinates",
    )
