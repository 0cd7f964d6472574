"""FastAPI dependency injection."""

from __future__ import annotations

from collider_gen.config import Settings, settings
from collider_gen.engine.config import PipelineConfig
from collider_gen.engine.pipeline import Pipeline


def get_settings() -> Settings:
    return settings


def get_pipeline() -> Pipeline:
    return Pipeline(config=PipelineConfig(max_workers=get_settings().max_workers))
