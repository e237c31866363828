from .resource_usage import memory_usage

__all__ = ["memory_usage"]
