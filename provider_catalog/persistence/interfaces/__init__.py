from .stores import CacheEntry, DisplayNameStore

__all__ = ["CacheEntry", "DisplayNameStore"]
