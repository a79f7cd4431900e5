from __future__ import annotations
from typing import Callable, Iterable, List, TypeVar

from .maybe import ABSENT, Maybe, MaybeLike, Present

T = TypeVar("T")
U = TypeVar("U")


def values(items: Iterable[MaybeLike[T]]) -> List[T]:
    return [v.value for v in items if isinstance(v, Present)]


def sequence(items: Iterable[MaybeLike[T]]) -> Maybe[List[T]]:
    out: List[T] = []
    for v in items:
        if not isinstance(v, Present):
            return ABSENT
        out.append(v.value)
    return Present(out)


def traverse(f: Callable[[T], MaybeLike[U]], items: Iterable[T]) -> Maybe[List[U]]:
    # f is not called past the first absent result
    out: List[U] = []
    for x in items:
        r = f(x)
        if not isinstance(r, Present):
            return ABSENT
        out.append(r.value)
    return Present(out)


def first_present(items: Iterable[MaybeLike[T]]) -> Maybe[T]:
    for v in items:
        if isinstance(v, Present):
            return v
    return ABSENT
