from .access_kind import AccessKind, CAMEL_CASE_TEMPLATES, DEFAULT_TEMPLATES
from .descriptor import AccessorDescriptor, CollectionKey
from .missing import MISSING

__all__ = (
    "AccessKind",
    "AccessorDescriptor",
    "CollectionKey",
    "CAMEL_CASE_TEMPLATES",
    "DEFAULT_TEMPLATES",
    "MISSING",
)
