from collections.abc import MutableMapping

import pytest


class RecordingDict(MutableMapping):
    """A `dict` stand-in that records every key it is asked about."""

    def __init__(self, *args, **kwds):
        self._data = dict(*args, **kwds)
        self.touched = []

    def __getitem__(self, key):
        self.touched.append(("get", key))
        return self._data[key]

    def __setitem__(self, key, value):
        self.touched.append(("set", key))
        self._data[key] = value

    def __delitem__(self, key):
        del self._data[key]

    def __contains__(self, key):
        self.touched.append(("has", key))
        return key in self._data

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)


@pytest.fixture
def recording_dict():
    """The `RecordingDict` class, for building host objects in tests."""
    return RecordingDict
