from __future__ import annotations
from typing import Callable, Tuple, Type, TypeVar

from .logger import logger
from .maybe import ABSENT, Maybe, Present

A = TypeVar("A")


def attempt(thunk: Callable[[], A], *exc_types: Type[BaseException]) -> Maybe[A]:
    """Run ``thunk`` and turn the listed exceptions into absence.

    ``exc_types`` defaults to ``(Exception,)``. Anything not listed
    propagates unchanged.

    Example:
        ```python
        port = attempt(lambda: int(raw), ValueError).get_or_else(8080)
        ```
    """
    catch: Tuple[Type[BaseException], ...] = exc_types or (Exception,)
    try:
        return Present(thunk())
    except catch as ex:
        logger.debug("attempt converted exception to absent", error=f"{type(ex).__name__}: {ex}")
        return ABSENT
