"""Stderr logger for reporting accumulated failures.

``Validation.log_failures`` hands the materialized failure list to
``ConsoleLogger.failures``, which writes one record per failure:

    [ts] signup WARN: rejected failure='age: required' index=0 total=2

or, with ``json_output=True``, one JSON object per line with the same keys
under ``fields``.
"""
from __future__ import annotations
import sys, datetime as _dt, json
from typing import Any, Dict, Iterable, Optional


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}
_ALIASES = {"WARNING": "WARN"}


def _level_name(level: str) -> str:
    name = level.upper()
    name = _ALIASES.get(name, name)
    if name not in _LEVELS:
        raise ValueError(f"unknown log level {level!r}, expected one of {', '.join(_LEVELS)}")
    return name


class ConsoleLogger:
    def __init__(self, name: str = "failchain", level: str = "INFO", json_output: bool = False, context: Optional[Dict[str, Any]] = None):
        self.name = name
        self.level = _LEVELS[_level_name(level)]
        self.json_output = json_output
        self.context = dict(context or {})

    def set_level(self, level: str) -> None:
        self.level = _LEVELS[_level_name(level)]

    def bind(self, **fields: Any) -> "ConsoleLogger":
        ctx = dict(self.context); ctx.update(fields)
        return ConsoleLogger(self.name, level=self.level_name, json_output=self.json_output, context=ctx)

    @property
    def level_name(self) -> str:
        for k, v in _LEVELS.items():
            if v == self.level: return k
        return "INFO"

    def enabled(self, level: str) -> bool:
        return _LEVELS[_level_name(level)] >= self.level

    def failures(self, failures: Iterable[Any], msg: str = "validation failed", level: str = "WARN") -> int:
        """Write one record per failure, in the given order. Returns how many were written."""
        if not self.enabled(level):
            return 0
        fs = list(failures)
        for i, f in enumerate(fs):
            self.log(level, msg, failure=f, index=i, total=len(fs))
        return len(fs)

    def log(self, level: str, msg: str, **fields: Any) -> None:
        level = _level_name(level)
        if _LEVELS[level] < self.level:
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

    def debug(self, msg: str, **fields: Any) -> None: self.log("DEBUG", msg, **fields)
    def info(self, msg: str, **fields: Any) -> None: self.log("INFO", msg, **fields)
    def warn(self, msg: str, **fields: Any) -> None: self.log("WARN", msg, **fields)
    def error(self, msg: str, **fields: Any) -> None: self.log("ERROR", msg, **fields)


_default: Optional[ConsoleLogger] = None


def default_logger() -> ConsoleLogger:
    global _default
    if _default is None:
        _default = ConsoleLogger()
    return _default
