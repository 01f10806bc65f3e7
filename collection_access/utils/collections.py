from collections.abc import Mapping, MutableMapping, MutableSequence
from typing import Any


def is_list_like(value: Any) -> bool:
    return isinstance(value, MutableSequence)


def is_map_like(value: Any) -> bool:
    return isinstance(value, MutableMapping)


def is_collection(value: Any) -> bool:
    """
    Check whether `value` can be used as a collection, i.e. whether it is a
    mutable sequence or a (nested) mutable mapping.
    """
    return is_list_like(value) or is_map_like(value)


def strictly_equal(left: Any, right: Any) -> bool:
    """
    Compare two values without loose coercion: values must be the same object,
    or be of exactly the same type and compare equal. Lists, tuples and
    mappings are compared element-wise under the same rule, so that
    `[1] != [1.0]` and `{"a": 1} != {"a": True}`.
    """
    if left is right:
        return True
    if type(left) is not type(right):  # pylint: disable=unidiomatic-typecheck
        return False
    if isinstance(left, Mapping):
        return left.keys() == right.keys() and all(
            strictly_equal(value, right[key]) for key, value in left.items()
        )
    if isinstance(left, (list, tuple)):
        return len(left) == len(right) and all(map(strictly_equal, left, right))
    return left == right


def _items(collection):
    if is_map_like(collection):
        return collection.items()
    return enumerate(collection)


def contains_strict(collection: Any, value: Any) -> bool:
    """
    Check whether `value` is a member of `collection` (for mappings, one of
    its values) using `strictly_equal`.
    """
    return any(strictly_equal(item, value) for _, item in _items(collection))


def append_item(collection: Any, value: Any):
    """
    Append `value` to a collection. Mappings receive the value under the next
    free integer key: one more than the largest integer key, or `0`.
    """
    if is_map_like(collection):
        indices = [key for key in collection if type(key) is int]  # pylint: disable=unidiomatic-typecheck
        collection[max(indices) + 1 if indices else 0] = value
    else:
        collection.append(value)


def remove_first_strict(collection: Any, value: Any) -> bool:
    """
    Remove the first member of `collection` that is strictly equal to `value`.

    Returns:
        Whether a member was removed.
    """
    for key, item in _items(collection):
        if strictly_equal(item, value):
            del collection[key]
            return True
    return False
