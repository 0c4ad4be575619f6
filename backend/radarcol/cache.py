"""
Thread-safe caching of upstream responses.

Named TTLCache instances, each bounded in size and age. The contracts
list is keyed by its canonical query string, so identical filters share
an entry.
"""
import os
import threading

from cachetools import TTLCache

CONTRACTS_CACHE = "contracts"
CONTRACTS_CACHE_TTL = int(os.environ.get("CONTRACTS_CACHE_TTL", "60"))
CONTRACTS_CACHE_MAXSIZE = 256


class AppCache:
    """Application-wide cache registry. Thread-safe with size and TTL bounds."""

    def __init__(self):
        self._lock = threading.Lock()
        self._caches: dict[str, TTLCache] = {}

    def get_cache(self, name: str, maxsize: int = 128, ttl: int = 600) -> TTLCache:
        """Get or create a named TTLCache."""
        with self._lock:
            if name not in self._caches:
                self._caches[name] = TTLCache(maxsize=maxsize, ttl=ttl)
            return self._caches[name]

    def get(self, cache_name: str, key: str):
        """Return a cached value, or None if missing or expired."""
        with self._lock:
            cache = self._caches.get(cache_name)
            if cache is None:
                return None
            return cache.get(key)

    def set(self, cache_name: str, key: str, value, maxsize: int = 128, ttl: int = 600):
        """Store a value. A ttl of 0 disables caching for that call."""
        if ttl <= 0:
            return
        cache = self.get_cache(cache_name, maxsize=maxsize, ttl=ttl)
        with self._lock:
            cache[key] = value

    def invalidate(self, cache_name: str, key: str | None = None):
        """Drop one key, or the whole named cache when key is None."""
        with self._lock:
            cache = self._caches.get(cache_name)
            if cache is None:
                return
            if key is None:
                cache.clear()
            else:
                cache.pop(key, None)

    def stats(self) -> dict:
        """Return cache statistics for monitoring."""
        with self._lock:
            return {
                name: {"size": len(cache), "maxsize": cache.maxsize, "ttl": cache.ttl}
                for name, cache in self._caches.items()
            }


app_cache = AppCache()
