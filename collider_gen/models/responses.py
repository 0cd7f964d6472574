"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from collider_gen.engine.context import PipelineContext
from collider_gen.engine.shapes import (
    Heightfield,
    ShapeDescriptor,
    ShapeKind,
)


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    builders_registered: int = 0


class ColliderModel(BaseModel):
    kind: ShapeKind
    points: list[tuple[float, float]] | None = None
    heights: list[float] | None = None
    x_scale: float | None = None
    y_scale: float | None = None
    # Bounding-box center subtracted from the points (translated frame only)
    offset: tuple[float, float] | None = None

    @classmethod
    def from_descriptor(
        cls,
        descriptor: ShapeDescriptor,
        offset: tuple[float, float] | None = None,
    ) -> ColliderModel:
        if isinstance(descriptor, Heightfield):
            return cls(
                kind=descriptor.kind,
                heights=list(descriptor.heights),
                x_scale=descriptor.x_scale,
                y_scale=descriptor.y_scale,
                offset=offset,
            )
        return cls(kind=descriptor.kind, points=list(descriptor.points), offset=offset)


class ColliderResponse(BaseModel):
    width: int = 0
    height: int = 0
    regions: int = 0
    colliders: list[ColliderModel | None] = Field(default_factory=list)
    processing_time_ms: float = 0.0
    timings: dict[str, float] = Field(default_factory=dict)

    @classmethod
    def from_context(cls, ctx: PipelineContext) -> ColliderResponse:
        colliders = [
            None if d is None else ColliderModel.from_descriptor(d, loop.offset)
            for d, loop in zip(ctx.descriptors, ctx.loops)
        ]
        return cls(
            width=ctx.width,
            height=ctx.height,
            regions=ctx.num_regions,
            colliders=colliders,
            processing_time_ms=ctx.processing_time_ms,
            timings=dict(ctx.timings),
        )
