from collections import OrderedDict
from types import SimpleNamespace

from propbag import cfg
from propbag.keywords import kw
from propbag.projection import select_keys, select_keys_


def test_only_present_keys_are_copied():
    o = {"a": 1, "c": None}
    result = select_keys(o, [kw("a"), "b", "c"])
    assert result == {"a": 1, "c": None}
    assert "b" not in result


def test_result_is_new_and_shallow():
    inner = {"x": 1}
    o = {"a": inner}
    result = select_keys(o, ["a"])
    assert result is not o
    assert result["a"] is inner


def test_key_order_follows_request():
    o = {"a": 1, "b": 2, "c": 3}
    assert list(select_keys(o, ["c", "a"])) == ["c", "a"]


def test_from_objects_and_none():
    assert select_keys(SimpleNamespace(a=1, b=2), ["b"]) == {"b": 2}
    assert select_keys(None, ["a"]) == {}


def test_select_keys_underscore_and_factory():
    with cfg.configure(container_factory=OrderedDict):
        result = select_keys_({"a": 1}, ["a", "z"])
    assert isinstance(result, OrderedDict)
    assert result == OrderedDict(a=1)
