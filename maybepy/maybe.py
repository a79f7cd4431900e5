from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, Optional, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


class _MaybeOps(Generic[T]):
    # Shared fluent surface; every method delegates to the free function in .ops
    __slots__ = ()

    def is_present(self) -> bool: return isinstance(self, Present)
    def is_absent(self) -> bool: return not self.is_present()

    def map(self, f: Callable[[T], U]) -> "Maybe[U]":
        from .ops import map as _map
        return _map(f, self)  # type: ignore[arg-type]

    def flat_map(self, f: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        from .ops import and_then
        return and_then(f, self)  # type: ignore[arg-type]

    def and_then(self, f: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        return self.flat_map(f)

    def get_or_else(self, default: U) -> T | U:
        from .ops import with_default
        return with_default(self, default)  # type: ignore[arg-type]

    def with_default(self, default: U) -> T | U:
        return self.get_or_else(default)

    def or_else(self, alternative: "Maybe[T]") -> "Maybe[T]":
        return self if self.is_present() else normalize(alternative)  # type: ignore[return-value]

    def filter(self, pred: Callable[[T], bool]) -> "Maybe[T]":
        if self.is_present() and pred(self.value):  # type: ignore[attr-defined]
            return self  # type: ignore[return-value]
        return ABSENT

    def case_of(self, handlers: Any) -> Any:
        from .ops import case_of
        return case_of(handlers, self)  # type: ignore[arg-type]


@dataclass(frozen=True)
class Present(_MaybeOps[T]):
    value: T


class Absent(_MaybeOps[Any]):
    __slots__ = ()
    _instance: ClassVar[Optional["Absent"]] = None

    def __new__(cls) -> "Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str: return "Absent"

    # one instance per process, also across copy and pickle
    def __copy__(self) -> "Absent": return self
    def __deepcopy__(self, _memo: Any) -> "Absent": return self
    def __reduce__(self) -> str: return "ABSENT"


ABSENT: Absent = Absent()

Maybe = Union[Present[T], Absent]
# What the boundary functions accept: a Maybe, or a bare None standing in for absence
MaybeLike = Union[Present[T], Absent, None]


def present(value: T) -> Maybe[T]:
    return Present(value)


def absent() -> Maybe[Any]:
    return ABSENT


def normalize(v: MaybeLike[T]) -> Maybe[T]:
    return ABSENT if v is None else v


def from_nullable(v: Optional[T]) -> Maybe[T]:
    return Present(v) if v is not None else ABSENT


def to_nullable(v: MaybeLike[T]) -> Optional[T]:
    return v.value if isinstance(v, Present) else None
