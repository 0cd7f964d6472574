"""collider-gen image-to-geometry engine."""

from collider_gen.engine.context import (
    BoundaryLoop,
    CoordinateFrame,
    PipelineContext,
    PixelMask,
    RegionSet,
)
from collider_gen.engine.frames import to_raw, to_translated
from collider_gen.engine.heightfield import build_heightfield
from collider_gen.engine.mask import UnsupportedFormat, build_mask, load_image
from collider_gen.engine.pipeline import (
    Pipeline,
    generate_collider,
    generate_colliders,
    multi_image_edges,
    single_image_edge,
)
from collider_gen.engine.registry import get_registry, shape_builder
from collider_gen.engine.shapes import (
    ConvexHull,
    ConvexPolygon,
    Heightfield,
    Polyline,
    ShapeDescriptor,
    ShapeKind,
)
from collider_gen.engine.synthesizer import synthesize
from collider_gen.engine.tracing import trace_multi, trace_single

__all__ = [
    "BoundaryLoop",
    "CoordinateFrame",
    "PipelineContext",
    "PixelMask",
    "RegionSet",
    "to_raw",
    "to_translated",
    "build_heightfield",
    "UnsupportedFormat",
    "build_mask",
    "load_image",
    "Pipeline",
    "generate_collider",
    "generate_colliders",
    "multi_image_edges",
    "single_image_edge",
    "get_registry",
    "shape_builder",
    "ConvexHull",
    "ConvexPolygon",
    "Heightfield",
    "Polyline",
    "ShapeDescriptor",
    "ShapeKind",
    "synthesize",
    "trace_multi",
    "trace_single",
]
