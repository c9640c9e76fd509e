"""Keyed in-memory cache backing the camera directory."""
import logging
import time
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple
from collections import OrderedDict

logger = logging.getLogger(__name__)


class CameraCache:
    """
    In-memory LRU cache with per-entry TTL, partitioned by namespace.
    
    Namespaces used by the camera directory:
    - camera (exid → Camera)
    - camera_full (exid → Camera with associations)
    - cameras ("<username>_<include_shared>" → list of Camera)
    
    Values are stored as-is; callers must not mutate cached objects.
    """
    
    def __init__(
        self,
        max_size: int = 5000,
        ttl: int = 3600,
    ):
        """
        Initialize camera cache.
        
        Args:
            max_size: Maximum number of cache entries across all namespaces
            ttl: Entry lifetime in seconds; 0 keeps entries until evicted
        """
        self.max_size = max_size
        self.ttl = ttl
        
        # LRU cache: OrderedDict with ((namespace, key), (value, timestamp))
        self._cache: OrderedDict[Tuple[str, str], Tuple[Any, float]] = OrderedDict()
    
    def _is_expired(self, timestamp: float) -> bool:
        if self.ttl <= 0:
            return False
        return time.monotonic() - timestamp > self.ttl
    
    def _evict_lru(self) -> None:
        """Evict least recently used entry if cache is full."""
        while len(self._cache) >= self.max_size:
            self._cache.popitem(last=False)
    
    def get(self, namespace: str, key: str) -> Optional[Any]:
        """
        Get a cached value.
        
        Returns:
            Cached value or None on miss/expiry
        """
        cache_key = (namespace, key)
        
        if cache_key not in self._cache:
            return None
        
        value, timestamp = self._cache[cache_key]
        
        if self._is_expired(timestamp):
            del self._cache[cache_key]
            return None
        
        # Move to end (most recently used)
        self._cache.move_to_end(cache_key)
        
        logger.debug("Camera cache hit: %s/%s", namespace, key)
        return value
    
    def set(self, namespace: str, key: str, value: Any) -> None:
        cache_key = (namespace, key)
        self._cache.pop(cache_key, None)
        self._evict_lru()
        
        self._cache[cache_key] = (value, time.monotonic())
    
    async def get_or_store(
        self,
        namespace: str,
        key: str,
        loader: Callable[[], Awaitable[Any]],
    ) -> Optional[Any]:
        """
        Return the cached value or load, store and return it.
        
        A loader result of None is returned but not stored, so a camera
        created later is found on the next lookup. Concurrent misses may
        load twice; the last store wins.
        """
        value = self.get(namespace, key)
        if value is not None:
            return value
        
        value = await loader()
        if value is not None:
            self.set(namespace, key, value)
        return value
    
    def delete(self, namespace: str, key: str) -> None:
        """Evict a single entry; missing entries are ignored."""
        if self._cache.pop((namespace, key), None) is not None:
            logger.debug("Camera cache evicted: %s/%s", namespace, key)
    
    def clear(self) -> None:
        """Clear all cache entries."""
        self._cache.clear()
        logger.info("Camera cache cleared")
    
    def get_stats(self) -> Dict[str, Any]:
        """
        Get cache statistics.
        
        Returns:
            Dictionary with total and per-namespace entry counts
        """
        per_namespace: Dict[str, int] = {}
        for namespace, _ in self._cache.keys():
            per_namespace[namespace] = per_namespace.get(namespace, 0) + 1
        
        return {
            "total_entries": len(self._cache),
            "max_size": self.max_size,
            "namespaces": per_namespace,
        }
