from __future__ import annotations
import sys, datetime as _dt, json
from typing import Optional, Dict, Any, TypeVar

from .maybe import Maybe, MaybeLike, Present, normalize

T = TypeVar("T")

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class ConsoleLogger:
    def __init__(self, name: str = "maybepy", level: str = "INFO", json_output: bool = False, context: Optional[Dict[str, Any]] = None):
        self.name = name
        self.level = _LEVELS.get(level.upper(), 20)
        self.json_output = json_output
        self.context = dict(context or {})

    def set_level(self, level: str) -> None:
        self.level = _LEVELS.get(level.upper(), self.level)

    def bind(self, **fields: Any) -> "ConsoleLogger":
        ctx = dict(self.context); ctx.update(fields)
        return ConsoleLogger(self.name, level=self.level_name, json_output=self.json_output, context=ctx)

    @property
    def level_name(self) -> str:
        for k, v in _LEVELS.items():
            if v == self.level: return k
        return "INFO"

    def enabled_for(self, level: str) -> bool:
        return _LEVELS[level] >= self.level

    def _log(self, level: str, msg: str, **fields: Any) -> None:
        if not self.enabled_for(level):
            return
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        data: Dict[str, Any] = {
            "ts": ts,
            "name": self.name,
            "level": level,
            "msg": msg,
        }
        all_fields: Dict[str, Any] = {}
        all_fields.update(self.context)
        all_fields.update(fields)
        if self.json_output:
            if all_fields:
                data["fields"] = all_fields
            print(json.dumps(data, separators=(",", ":"), default=repr), file=sys.stderr)
        else:
            extras = "".join([f" {k}={v!r}" for k, v in sorted(all_fields.items())]) if all_fields else ""
            print(f"[{ts}] {self.name} {level}: {msg}{extras}", file=sys.stderr)

    def debug(self, msg: str, **fields: Any) -> None: self._log("DEBUG", msg, **fields)
    def info(self, msg: str, **fields: Any) -> None: self._log("INFO", msg, **fields)
    def warn(self, msg: str, **fields: Any) -> None: self._log("WARN", msg, **fields)
    def error(self, msg: str, **fields: Any) -> None: self._log("ERROR", msg, **fields)


# Library-wide logger; quiet unless a caller lowers the level
logger = ConsoleLogger("maybepy", level="WARN")


def trace(label: str, v: MaybeLike[T], log: Optional[ConsoleLogger] = None, level: str = "DEBUG") -> Maybe[T]:
    """Log whether ``v`` is present and hand it back unchanged.

    Meant to be dropped into the middle of a pipeline while debugging::

        total = trace("total", map2(add, a, b), level="INFO")

    A bare ``None`` is logged as absent and returned as ``ABSENT``.
    """
    target = log or logger
    v = normalize(v)
    if isinstance(v, Present):
        target._log(level.upper(), f"{label}: present", value=v.value)
    else:
        target._log(level.upper(), f"{label}: absent")
    return v
