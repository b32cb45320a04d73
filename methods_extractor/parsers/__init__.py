from .cache_manager import CacheManager, CacheStats
from .js_ts import (
    enumerate_methods,
    locate_export,
    resolve_identifier,
    unwind_assignment,
)

__all__ = [
    "CacheManager",
    "CacheStats",
    "enumerate_methods",
    "locate_export",
    "resolve_identifier",
    "unwind_assignment",
]
