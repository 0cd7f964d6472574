"""Collider synthesizer — boundary loops to shape descriptors.

A single loop gives one descriptor or None. A sequence of loops gives one
slot per loop, in input order; slots are filled by index so the result is
the same whatever order the worker threads finish in.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import overload

import collider_gen.engine.builders  # noqa: F401  (registers builders)
from collider_gen.engine.context import BoundaryLoop
from collider_gen.engine.registry import ShapeBuilderRegistry, get_registry
from collider_gen.engine.shapes import ShapeDescriptor, ShapeKind

logger = logging.getLogger(__name__)


@overload
def synthesize(
    source: BoundaryLoop,
    kind: ShapeKind,
    *,
    max_workers: int | None = None,
    registry: ShapeBuilderRegistry | None = None,
) -> ShapeDescriptor | None: ...


@overload
def synthesize(
    source: Sequence[BoundaryLoop],
    kind: ShapeKind,
    *,
    max_workers: int | None = None,
    registry: ShapeBuilderRegistry | None = None,
) -> list[ShapeDescriptor | None]: ...


def synthesize(source, kind, *, max_workers=None, registry=None):
    """Build the requested shape kind from one loop or from each loop of a sequence."""
    if isinstance(source, BoundaryLoop):
        return synthesize_one(source, kind, registry=registry)
    return synthesize_many(source, kind, max_workers=max_workers, registry=registry)


def synthesize_one(
    loop: BoundaryLoop,
    kind: ShapeKind,
    *,
    registry: ShapeBuilderRegistry | None = None,
) -> ShapeDescriptor | None:
    spec = (registry or get_registry()).get(ShapeKind(kind))
    result = spec.fn(loop)
    if result is None:
        logger.debug("No %s for loop of %d points", spec.kind.value, len(loop))
    return result


def synthesize_many(
    loops: Sequence[BoundaryLoop],
    kind: ShapeKind,
    *,
    max_workers: int | None = None,
    registry: ShapeBuilderRegistry | None = None,
    parallel_min_regions: int = 2,
) -> list[ShapeDescriptor | None]:
    """One result per loop, in input order."""
    spec = (registry or get_registry()).get(ShapeKind(kind))
    results: list[ShapeDescriptor | None] = [None] * len(loops)

    if len(loops) < parallel_min_regions:
        for i, loop in enumerate(loops):
            results[i] = spec.fn(loop)
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            futures = {pool.submit(spec.fn, loop): i for i, loop in enumerate(loops)}
            for future in as_completed(futures):
                results[futures[future]] = future.result()

    absent = sum(1 for r in results if r is None)
    if absent:
        logger.debug("%d/%d regions produced no %s", absent, len(loops), spec.kind.value)
    return results
