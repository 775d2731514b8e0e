"""Registries for pattern samples."""

from pattern_catalog.infrastructure.registry.sample_registry import SampleRegistry

__all__ = ["SampleRegistry"]
