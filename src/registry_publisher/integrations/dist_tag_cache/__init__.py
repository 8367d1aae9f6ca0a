from registry_publisher.integrations.dist_tag_cache.abc import DistTagCache

__all__ = ["DistTagCache"]
