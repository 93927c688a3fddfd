import copy
import pickle

from propbag.sentinel import NOT_FOUND, NotFound


def test_single_instance():
    assert NotFound() is NOT_FOUND
    assert copy.copy(NOT_FOUND) is NOT_FOUND
    assert copy.deepcopy([NOT_FOUND])[0] is NOT_FOUND
    assert pickle.loads(pickle.dumps(NOT_FOUND)) is NOT_FOUND


def test_never_equal_to_stored_values():
    for value in (None, False, 0, "", {}, [], object()):
        assert NOT_FOUND != value
    assert not NOT_FOUND
    assert repr(NOT_FOUND) == "NOT_FOUND"
