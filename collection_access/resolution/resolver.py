import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from collection_access.types import AccessKind, AccessorDescriptor, CollectionKey
from collection_access.utils.introspection import (
    ClassIntrospector,
    ClassLevel,
    ReflectionIntrospector,
)
from collection_access.utils.naming import Inflector

from .cache import ResolutionCache
from .name_former import NameFormer

logger = logging.getLogger(__name__)


class AccessorResolver:
    """
    Resolves how a named collection can be reached on instances of a class.

    Resolution computes two independent results from one description of the
    class hierarchy, and caches them together in an `AccessorDescriptor`:

    - The method path: the first candidate accessor name (see `NameFormer`)
      declared publicly by the class or one of its ancestors. Classes are
      visited from most- to least-derived, and at each class the candidates
      are checked in template order. A candidate found to be declared
      non-publicly is discarded for good; it is not looked for again further
      up the hierarchy. If nothing is found and `dynamic_fallback` is enabled,
      the first candidate that was never seen is selected unverified, on the
      assumption that the object dispatches it dynamically (`__getattr__`).
    - The property path: whether the first class that declares a field named
      exactly after the collection declares it publicly.

    Resolution itself never fails: a descriptor with neither path simply
    records that the collection is not accessible.

    Attributes:
        name_former: Derives the candidate method names.
        introspector: Describes class hierarchies.
        cache: The `ResolutionCache` consulted before, and populated after,
            each resolution.
        dynamic_fallback: Whether to select unverified candidates when no
            declared accessor is found.
    """

    def __init__(
        self,
        *,
        templates: Optional[Mapping[Union[AccessKind, str], Iterable[str]]] = None,
        inflector: Optional[Inflector] = None,
        introspector: Optional[ClassIntrospector] = None,
        cache: Any = None,
        dynamic_fallback: bool = False,
    ):
        self.name_former = NameFormer(templates, inflector)
        self.introspector = introspector or ReflectionIntrospector()
        self.cache = cache if isinstance(cache, ResolutionCache) else ResolutionCache(cache)
        self.dynamic_fallback = dynamic_fallback

    def resolve(
        self, instance: Any, collection: str, kind: Union[AccessKind, str]
    ) -> AccessorDescriptor:
        key = CollectionKey(AccessKind.coerce(kind), type(instance), collection)

        descriptor = self.cache.get(key)
        if descriptor is not None:
            return descriptor

        hierarchy = list(self.introspector.hierarchy(key.cls))
        method_name, is_dynamic = self._find_method(
            hierarchy, self.name_former.form(collection, key.kind)
        )
        descriptor = AccessorDescriptor(
            method_name=method_name,
            is_property=self._is_property(hierarchy, collection),
            is_dynamic=is_dynamic,
        )
        logger.debug("Resolved `%s` to %r.", key, descriptor)

        self.cache.put(key, descriptor)
        return descriptor

    def _find_method(
        self, hierarchy: Sequence[ClassLevel], candidates: List[str]
    ) -> Tuple[Optional[str], bool]:
        remaining = list(candidates)
        for level in hierarchy:
            for candidate in list(remaining):
                if candidate not in level.methods:
                    continue
                if level.methods[candidate]:
                    return candidate, False
                remaining.remove(candidate)

        if self.dynamic_fallback and remaining:
            logger.debug(
                "No declared accessor among %s; falling back to dynamic dispatch of `%s`.",
                candidates,
                remaining[0],
            )
            return remaining[0], True
        return None, False

    @staticmethod
    def _is_property(hierarchy: Sequence[ClassLevel], collection: str) -> bool:
        for level in hierarchy:
            if collection in level.fields:
                return level.fields[collection]
        return False
