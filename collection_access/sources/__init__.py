from .base import CollectionSource
from .mappings import MappingSource
from .objects import AttributeDispatchInvoker, DynamicInvoker, ObjectSource

__all__ = (
    "AttributeDispatchInvoker",
    "CollectionSource",
    "DynamicInvoker",
    "MappingSource",
    "ObjectSource",
)
