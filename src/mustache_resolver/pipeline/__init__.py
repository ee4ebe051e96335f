"""Resolution pipeline and its builder."""

from __future__ import annotations

from mustache_resolver.pipeline.builder import DEFAULT_RESOLVER_NAMES, PipelineBuilder
from mustache_resolver.pipeline.pipeline import ResolutionPipeline

__all__ = ["DEFAULT_RESOLVER_NAMES", "PipelineBuilder", "ResolutionPipeline"]
