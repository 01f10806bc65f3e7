from .cache import CacheStore, MappingCacheStore, ResolutionCache, WeakClassCacheStore
from .name_former import NameFormer
from .resolver import AccessorResolver

__all__ = (
    "AccessorResolver",
    "CacheStore",
    "MappingCacheStore",
    "NameFormer",
    "ResolutionCache",
    "WeakClassCacheStore",
)
