"""Health plugin."""

from .schema import HealthStatus

__all__ = ["HealthStatus"]
