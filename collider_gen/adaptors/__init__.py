"""Physics adaptors: interchangeable consumers of the shape descriptor contract."""

from collider_gen.adaptors.pymunk_adaptor import to_pymunk_shapes
from collider_gen.adaptors.shapely_adaptor import to_geometry

__all__ = ["to_pymunk_shapes", "to_geometry"]
