from .collection_accessor import CollectionAccessor
from .errors import (
    CollectionAccessError,
    CollectionNotExistError,
    DynamicDispatchError,
    InvalidCollectionError,
    InvalidSourceError,
)
from .resolution import (
    AccessorResolver,
    CacheStore,
    MappingCacheStore,
    NameFormer,
    ResolutionCache,
    WeakClassCacheStore,
)
from .types import (
    AccessKind,
    AccessorDescriptor,
    CAMEL_CASE_TEMPLATES,
    CollectionKey,
    DEFAULT_TEMPLATES,
)
from .utils.introspection import (
    ClassIntrospector,
    ClassLevel,
    ReflectionIntrospector,
    RegistryIntrospector,
)
from .utils.naming import InflectInflector, Inflector

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "CollectionAccessor",
    "AccessKind",
    "AccessorDescriptor",
    "AccessorResolver",
    "CacheStore",
    "ClassIntrospector",
    "ClassLevel",
    "CollectionKey",
    "MappingCacheStore",
    "NameFormer",
    "ReflectionIntrospector",
    "RegistryIntrospector",
    "ResolutionCache",
    "WeakClassCacheStore",
    "Inflector",
    "InflectInflector",
    "CAMEL_CASE_TEMPLATES",
    "DEFAULT_TEMPLATES",
    "CollectionAccessError",
    "CollectionNotExistError",
    "DynamicDispatchError",
    "InvalidCollectionError",
    "InvalidSourceError",
]
