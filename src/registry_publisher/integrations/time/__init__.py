from registry_publisher.integrations.time.abc import Time
from registry_publisher.integrations.time.real import RealTime

__all__ = ["RealTime", "Time"]
