"""High-level clients."""

from .artifacts_client import ArtifactsClient

__all__ = ["ArtifactsClient"]
