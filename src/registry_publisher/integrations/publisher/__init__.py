from registry_publisher.integrations.publisher.abc import ArtifactPublisher
from registry_publisher.integrations.publisher.dry_run import DryRunArtifactPublisher

__all__ = ["ArtifactPublisher", "DryRunArtifactPublisher"]
