"""Shape builders. Importing this package registers one builder per ShapeKind."""

from collider_gen.engine.builders import convex, heightfield, polyline

__all__ = ["convex", "heightfield", "polyline"]
