from registry_publisher.integrations.installer.abc import ArtifactInstaller

__all__ = ["ArtifactInstaller"]
