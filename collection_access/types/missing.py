# Sentinel for attribute and cache lookups that come up empty


class _MissingType(type):
    """
    This metaclass is used to create singleton falsey classes for use as missing
    placeholder values, distinguishable from `None` (which is a legitimate
    collection value).
    """

    def __repr__(cls):
        return cls.__name__

    def __bool__(cls):
        return False

    def __call__(cls):
        return cls


class MISSING(metaclass=_MissingType):
    """
    Used to represent attributes or entries that are not present at all.
    """
