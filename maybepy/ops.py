from __future__ import annotations
from typing import Any, Callable, List, Mapping, TypeVar

from .maybe import ABSENT, Maybe, MaybeLike, Present, normalize

A = TypeVar("A"); B = TypeVar("B"); C = TypeVar("C"); D = TypeVar("D"); E = TypeVar("E"); R = TypeVar("R")
T = TypeVar("T")


def is_present(v: MaybeLike[T]) -> bool:
    return isinstance(v, Present)


def is_absent(v: MaybeLike[T]) -> bool:
    return normalize(v) is ABSENT


def with_default(v: MaybeLike[T], fallback: T) -> T:
    return v.value if isinstance(v, Present) else fallback


def map(f: Callable[[A], R], v: MaybeLike[A]) -> Maybe[R]:
    if isinstance(v, Present):
        return Present(f(v.value))
    return ABSENT


def map_n(f: Callable[..., R], *values: MaybeLike[Any]) -> Maybe[R]:
    """Apply ``f`` to the unwrapped values when every input is present.

    All-or-nothing: if any input is absent (``ABSENT`` or ``None``) the
    result is ``ABSENT`` and ``f`` is never called. With no inputs ``f()``
    is called and its result wrapped.
    """
    args: List[Any] = []
    for v in values:
        if not isinstance(v, Present):
            return ABSENT
        args.append(v.value)
    return Present(f(*args))


def map2(f: Callable[[A, B], R], a: MaybeLike[A], b: MaybeLike[B]) -> Maybe[R]:
    return map_n(f, a, b)


def map3(f: Callable[[A, B, C], R], a: MaybeLike[A], b: MaybeLike[B], c: MaybeLike[C]) -> Maybe[R]:
    return map_n(f, a, b, c)


def map4(f: Callable[[A, B, C, D], R], a: MaybeLike[A], b: MaybeLike[B], c: MaybeLike[C], d: MaybeLike[D]) -> Maybe[R]:
    return map_n(f, a, b, c, d)


def map5(f: Callable[[A, B, C, D, E], R], a: MaybeLike[A], b: MaybeLike[B], c: MaybeLike[C], d: MaybeLike[D], e: MaybeLike[E]) -> Maybe[R]:
    return map_n(f, a, b, c, d, e)


def and_then(f: Callable[[A], Maybe[R]], v: MaybeLike[A]) -> Maybe[R]:
    if isinstance(v, Present):
        return f(v.value)
    return ABSENT


def _handler(handlers: Any, name: str) -> Callable[..., Any]:
    if isinstance(handlers, Mapping):
        return handlers[name]
    return getattr(handlers, name)


def case_of(handlers: Any, v: MaybeLike[A]) -> Any:
    """Run exactly one of ``handlers["present"](value)`` or ``handlers["absent"]()``.

    ``handlers`` is a mapping with ``present``/``absent`` keys or any object
    with attributes of those names.
    """
    match normalize(v):
        case Present(value):
            return _handler(handlers, "present")(value)
        case _:
            return _handler(handlers, "absent")()


def equals(a: MaybeLike[T], b: MaybeLike[T]) -> bool:
    a, b = normalize(a), normalize(b)
    if isinstance(a, Present) and isinstance(b, Present):
        return a.value == b.value
    return a is ABSENT and b is ABSENT
