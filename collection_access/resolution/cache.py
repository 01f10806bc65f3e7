import functools
import logging
import weakref
from collections.abc import MutableMapping
from typing import Any, Dict, Optional, Tuple

from typing_extensions import Protocol, runtime_checkable

from collection_access.types import AccessorDescriptor, CollectionKey

logger = logging.getLogger(__name__)


@runtime_checkable
class CacheStore(Protocol):
    """
    The external key-value store behind the resolution cache. Stores are
    treated as best-effort memoization: no ordering, durability or eviction
    guarantees are required.
    """

    def get(self, key: CollectionKey) -> Optional[AccessorDescriptor]:
        ...  # pragma: no cover

    def put(self, key: CollectionKey, descriptor: AccessorDescriptor) -> None:
        ...  # pragma: no cover


class MappingCacheStore:
    """
    A `CacheStore` that keeps descriptors in a mutable mapping (by default a
    new `dict`).
    """

    def __init__(self, mapping: Optional[MutableMapping] = None):
        self.mapping = {} if mapping is None else mapping

    def get(self, key: CollectionKey) -> Optional[AccessorDescriptor]:
        return self.mapping.get(key)

    def put(self, key: CollectionKey, descriptor: AccessorDescriptor) -> None:
        self.mapping[key] = descriptor

    def __len__(self):
        return len(self.mapping)


class WeakClassCacheStore:
    """
    A `CacheStore` that groups descriptors by class and holds classes weakly,
    so that entries for classes that are garbage collected (e.g. classes
    created dynamically in tests) vanish with them.

    Classes are matched by identity, so metaclasses that customize equality
    cannot make two classes share entries.
    """

    def __init__(self):
        self.classes: Dict[int, Tuple[weakref.ref, Dict[Any, AccessorDescriptor]]] = {}

    def _entries(self, cls: type, create: bool = False) -> Optional[Dict[Any, AccessorDescriptor]]:
        slot = self.classes.get(id(cls))
        if slot is not None and slot[0]() is cls:
            return slot[1]
        if not create:
            return None
        ref = weakref.ref(cls, functools.partial(self._discard, id(cls)))
        self.classes[id(cls)] = (ref, {})
        return self.classes[id(cls)][1]

    def _discard(self, ident: int, ref: weakref.ref):
        slot = self.classes.get(ident)
        if slot is not None and slot[0] is ref:
            del self.classes[ident]

    def get(self, key: CollectionKey) -> Optional[AccessorDescriptor]:
        entries = self._entries(key.cls)
        if entries is None:
            return None
        return entries.get((key.kind, key.collection))

    def put(self, key: CollectionKey, descriptor: AccessorDescriptor) -> None:
        self._entries(key.cls, create=True)[key.kind, key.collection] = descriptor

    def __len__(self):
        return sum(len(entries) for _, entries in list(self.classes.values()))


class ResolutionCache:
    """
    Memoizes accessor resolutions against an optional `CacheStore`.

    Without a store nothing is memoized and every lookup misses; this is a
    supported configuration that trades repeated resolution for not holding
    any state. Entries are never invalidated here; eviction, if any, is up to
    the store.
    """

    def __init__(self, store: Any = None):
        self.store = self.coerce_store(store)

    @staticmethod
    def coerce_store(store: Any) -> Optional[CacheStore]:
        if store is None or isinstance(store, CacheStore):
            return store
        if isinstance(store, MutableMapping):
            return MappingCacheStore(store)
        raise TypeError(
            f"Cache stores must implement `get` and `put` or be mutable mappings, not `{type(store).__name__}`."
        )

    @property
    def enabled(self) -> bool:
        return self.store is not None

    def get(self, key: CollectionKey) -> Optional[AccessorDescriptor]:
        if self.store is None:
            return None
        descriptor = self.store.get(key)
        logger.debug("Resolution cache %s for `%s`.", "miss" if descriptor is None else "hit", key)
        return descriptor

    def put(self, key: CollectionKey, descriptor: AccessorDescriptor) -> None:
        if self.store is not None:
            self.store.put(key, descriptor)
