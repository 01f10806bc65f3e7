import copy

from collection_access.types import MISSING


def test_missing():
    assert MISSING is not None
    assert bool(MISSING) is False
    assert repr(MISSING) == "MISSING"
    assert copy.copy(MISSING) is MISSING
    assert copy.deepcopy(MISSING) is MISSING
    assert MISSING() is MISSING
