"""Clojure-style `get`, `get_in`, `assoc_in`, `update_in` and `select_keys` for
mutable, dynamically keyed objects: `dict`s, `list`s and plain objects with
attributes.

```python
>>> import propbag as pb
>>> o = {"a": {"b": 1}}
>>> pb.get_in(o, [pb.kw("a"), pb.kw("b")])
1
>>> pb.get_in(o, ["a", "c"], "none")
'none'
>>> pb.assoc_in(o, ["a", "c"], 2)
{'a': {'b': 1, 'c': 2}}
>>> pb.update_in(o, ["a", "b"], lambda x: x + 10)
{'a': {'b': 11, 'c': 2}}
>>> pb.select_keys(o, ["a"])
{'a': {'b': 11, 'c': 2}}

```
"""

from . import etc, err, cfg, log
from .keywords import Keyword, kw, is_keyword
from .key import wrap_key, wrap_keys
from .sentinel import NOT_FOUND
from .path import (
    get,
    get_in,
    get_in_,
    get_value_by_keys,
    contains,
    unchecked_get,
)
from .mutate import (
    assoc,
    assoc_in,
    assoc_in_,
    update,
    update_in,
    update_in_,
    unchecked_set,
    obj,
)
from .projection import select_keys, select_keys_
from .lookup import Lookup, lookup
from .arr import push, unshift
from .dyn import call, apply
from .err import PropbagError, ArityError, EmptyPathError, ArgTypeError

__all__ = [
    "etc",
    "err",
    "cfg",
    "log",
    "Keyword",
    "kw",
    "is_keyword",
    "wrap_key",
    "wrap_keys",
    "NOT_FOUND",
    "get",
    "get_in",
    "get_in_",
    "get_value_by_keys",
    "contains",
    "unchecked_get",
    "assoc",
    "assoc_in",
    "assoc_in_",
    "update",
    "update_in",
    "update_in_",
    "unchecked_set",
    "obj",
    "select_keys",
    "select_keys_",
    "Lookup",
    "lookup",
    "push",
    "unshift",
    "call",
    "apply",
    "PropbagError",
    "ArityError",
    "EmptyPathError",
    "ArgTypeError",
]
