"""Pipeline orchestrator — image → mask → trace → frame → shapes, with stage timings."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import numpy as np
from PIL import Image

from collider_gen.engine.config import PipelineConfig
from collider_gen.engine.context import (
    BoundaryLoop,
    CoordinateFrame,
    PipelineContext,
    PixelMask,
    RegionSet,
)
from collider_gen.engine.frames import regions_to_frame, to_frame
from collider_gen.engine.mask import build_mask, load_image
from collider_gen.engine.registry import ShapeBuilderRegistry, get_registry
from collider_gen.engine.shapes import ShapeDescriptor, ShapeKind
from collider_gen.engine.synthesizer import synthesize_many
from collider_gen.engine.tracing import trace_multi, trace_single

logger = logging.getLogger(__name__)

ImageSource = str | Path | Image.Image | np.ndarray | PixelMask


class Pipeline:
    """Runs the stages for one image and records what happened on a PipelineContext."""

    def __init__(
        self,
        registry: ShapeBuilderRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def run(
        self,
        image: ImageSource,
        kind: ShapeKind,
        *,
        multi: bool = False,
        translated: bool = True,
    ) -> PipelineContext:
        """Run every stage. Format errors propagate; impossible shapes become None slots."""
        ctx = PipelineContext(
            kind=ShapeKind(kind),
            frame=CoordinateFrame.TRANSLATED if translated else CoordinateFrame.RAW,
            multi=multi,
        )

        self.trace(ctx, image)

        with _timed(ctx, "synthesize"):
            ctx.descriptors = synthesize_many(
                ctx.loops,
                ctx.kind,
                max_workers=self.config.max_workers,
                registry=self.registry,
                parallel_min_regions=self.config.parallel_min_regions,
            )

        logger.info(
            "Pipeline complete: %d %s shape(s) from %dx%d image (%d absent) in %.1fms",
            len(ctx.descriptors) - ctx.num_absent,
            ctx.kind.value,
            ctx.width,
            ctx.height,
            ctx.num_absent,
            ctx.processing_time_ms,
        )
        return ctx

    def trace(self, ctx: PipelineContext, image: ImageSource) -> PipelineContext:
        """Mask, trace and frame stages only; fills ``ctx.mask`` and ``ctx.loops``."""
        with _timed(ctx, "mask"):
            if isinstance(image, (str, Path)):
                image = load_image(image)
            ctx.mask = build_mask(image)
            ctx.width, ctx.height = ctx.mask.width, ctx.mask.height

        with _timed(ctx, "trace"):
            if ctx.multi:
                loops: RegionSet = trace_multi(ctx.mask)
            else:
                single = trace_single(ctx.mask)
                # An empty image still gets one (empty) slot in single mode.
                loops = [single]

        with _timed(ctx, "frame"):
            ctx.loops = regions_to_frame(loops, ctx.frame)

        return ctx


@contextmanager
def _timed(ctx: PipelineContext, stage: str) -> Iterator[None]:
    t0 = time.perf_counter()
    try:
        yield
    finally:
        elapsed = (time.perf_counter() - t0) * 1000
        ctx.timings[stage] = round(elapsed, 3)
        logger.debug("  %s completed in %.1fms", stage, elapsed)


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(config=config)


def generate_collider(
    image: ImageSource,
    kind: ShapeKind,
    translated: bool = True,
) -> ShapeDescriptor | None:
    """One shape for the whole image (all opaque regions merged)."""
    ctx = create_pipeline().run(image, kind, multi=False, translated=translated)
    return ctx.descriptors[0]


def generate_colliders(
    image: ImageSource,
    kind: ShapeKind,
    translated: bool = True,
) -> list[ShapeDescriptor | None]:
    """One shape per connected region, in scan order."""
    ctx = create_pipeline().run(image, kind, multi=True, translated=translated)
    return ctx.descriptors


def single_image_edge(image: ImageSource, translated: bool = True) -> BoundaryLoop:
    """The merged outline itself, e.g. for drawing the sprite's silhouette."""
    if isinstance(image, (str, Path)):
        image = load_image(image)
    frame = CoordinateFrame.TRANSLATED if translated else CoordinateFrame.RAW
    return to_frame(trace_single(build_mask(image)), frame)


def multi_image_edges(image: ImageSource, translated: bool = True) -> RegionSet:
    """Per-region outlines, each centered on itself when ``translated``."""
    if isinstance(image, (str, Path)):
        image = load_image(image)
    frame = CoordinateFrame.TRANSLATED if translated else CoordinateFrame.RAW
    return regions_to_frame(trace_multi(build_mask(image)), frame)
