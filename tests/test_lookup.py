from collections.abc import Mapping
from types import SimpleNamespace

import pytest

from propbag.keywords import kw
from propbag.lookup import Lookup, lookup
from propbag.path import get_in


def test_two_and_three_argument_get():
    view = lookup({"a": 1, "n": None})
    assert view.get(kw("a")) == 1
    assert view.get("missing") is None
    assert view.get("missing", "default") == "default"
    assert view.get("n", "default") is None


def test_item_access():
    view = Lookup({"a": 1})
    assert view[kw("a")] == 1
    with pytest.raises(KeyError):
        view["b"]


def test_is_a_read_only_mapping():
    view = Lookup({"a": 1, "b": 2})
    assert isinstance(view, Mapping)
    assert "a" in view
    assert kw("b") in view
    assert "c" not in view
    assert sorted(view) == ["a", "b"]
    assert len(view) == 2
    assert dict(view) == {"a": 1, "b": 2}
    with pytest.raises(TypeError):
        view["c"] = 3  # type: ignore[index]


class Point:
    __slots__ = ("x", "y")

    def __init__(self, x):
        self.x = x


@pytest.mark.parametrize("host", [SimpleNamespace(a=1, b=None), Point(1)])
def test_membership_iteration_and_length_agree(host):
    view = lookup(host)
    keys = list(view)
    assert len(view) == len(keys)
    assert all(key in view for key in keys)
    for key in ("a", "b", "x", "y", "__class__", "missing"):
        assert (key in view) == (key in keys)


def test_attribute_views():
    ns_view = lookup(SimpleNamespace(a=1, b=None))
    assert {k for k in ns_view if not k.startswith("_")} == {"a", "b"}
    assert ns_view["b"] is None

    point_view = lookup(Point(1))
    assert "x" in point_view
    assert "y" not in point_view
    assert point_view["x"] == 1
    with pytest.raises(KeyError):
        point_view["y"]


def test_unwrap():
    o = {"a": 1}
    view = lookup(o)
    assert view.obj is o
    assert view.unwrap() is o
    assert view is not o


def test_reads_follow_the_object():
    o = {}
    view = lookup(o)
    o["late"] = True
    assert view["late"] is True
    del view
    assert o == {"late": True}


def test_nested_lookup_through_views():
    o = {"a": lookup({"b": 1})}
    assert get_in(o, ["a", "b"]) == 1
    assert get_in(lookup(o), ["a", "b"], "none") == 1


def test_repr():
    assert repr(lookup({"a": 1})) == "Lookup({'a': 1})"
