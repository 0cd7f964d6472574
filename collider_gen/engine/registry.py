"""Shape builder registry — every shape kind is a standalone function registered via decorator.

Usage:
    @shape_builder(kind=ShapeKind.CONVEX_HULL, description="Convex hull of the outline")
    def convex_hull(loop: BoundaryLoop) -> ConvexHull | None:
        ...

Adding a new shape kind = one enum member plus one decorated function.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from collider_gen.engine.shapes import ShapeKind

if TYPE_CHECKING:
    from collider_gen.engine.context import BoundaryLoop
    from collider_gen.engine.shapes import ShapeDescriptor

logger = logging.getLogger(__name__)

BuilderFn = Callable[["BoundaryLoop"], "ShapeDescriptor | None"]


@dataclass
class ShapeBuilderSpec:
    kind: ShapeKind
    fn: BuilderFn
    description: str = ""


class ShapeBuilderRegistry:
    """Registry of shape builders, one per kind."""

    def __init__(self) -> None:
        self._builders: dict[ShapeKind, ShapeBuilderSpec] = {}

    def register(self, spec: ShapeBuilderSpec) -> None:
        if spec.kind in self._builders:
            raise ValueError(f"Duplicate shape builder: {spec.kind.value}")
        self._builders[spec.kind] = spec
        logger.debug("Registered shape builder %s", spec.kind.value)

    def get(self, kind: ShapeKind) -> ShapeBuilderSpec:
        try:
            return self._builders[kind]
        except KeyError:
            raise KeyError(f"No shape builder registered for {kind!r}") from None

    def all(self) -> list[ShapeBuilderSpec]:
        return sorted(self._builders.values(), key=lambda s: s.kind.value)

    @property
    def kinds(self) -> list[ShapeKind]:
        return [s.kind for s in self.all()]

    @property
    def count(self) -> int:
        return len(self._builders)


# Module-level singleton
_registry = ShapeBuilderRegistry()


def get_registry() -> ShapeBuilderRegistry:
    return _registry


def shape_builder(*, kind: ShapeKind, description: str = ""):
    """Decorator to register a shape builder function."""

    def decorator(fn: BuilderFn) -> BuilderFn:
        _registry.register(ShapeBuilderSpec(kind=kind, fn=fn, description=description))
        return fn

    return decorator
