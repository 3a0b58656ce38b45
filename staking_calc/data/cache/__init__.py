"""Response caching."""

from .disk_cache import DiskCache, CacheKeys

__all__ = ["DiskCache", "CacheKeys"]
