"""In-place `list` helpers that hand back the list, for chaining."""

from typing import MutableSequence, TypeVar

T = TypeVar("T")


def push(seq: MutableSequence[T], value: T) -> MutableSequence[T]:
    """
    >>> push([1, 2], 3)
    [1, 2, 3]
    """
    seq.append(value)
    return seq


def unshift(seq: MutableSequence[T], value: T) -> MutableSequence[T]:
    """
    >>> unshift([1, 2], 0)
    [0, 1, 2]
    """
    seq.insert(0, value)
    return seq
