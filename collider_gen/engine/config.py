"""Pipeline configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Controls how multi-region synthesis is scheduled."""

    # Thread pool size for per-region synthesis (None = executor default)
    max_workers: int | None = None
    # Below this many regions, synthesize inline without a pool
    parallel_min_regions: int = 2
