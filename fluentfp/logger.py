from __future__ import annotations
import datetime as _dt
import json
import sys
from typing import Any, Dict, Optional, TextIO

from .mapper import Mapper
from .option import Option, OptionEncoder, getenv, lookup


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


def _level_number(level: str) -> Option[int]:
    return lookup(_LEVELS, level.upper(), int)


class ConsoleLogger:
    """Line logger for applications built on fluentfp.

    Writes one text or JSON line per record to ``stream`` (stderr when unset,
    looked up at write time so redirection works). Option-valued fields are
    logged as their value, or null when not ok.
    """

    def __init__(self, name: str = "fluentfp", level: str = "INFO", json_output: bool = False,
                 context: Optional[Dict[str, Any]] = None, stream: Optional[TextIO] = None):
        self.name = name
        self.level = _level_number(level).or_(_LEVELS["INFO"])
        self.json_output = json_output
        self.context = dict(context or {})
        self.stream = stream

    @classmethod
    def from_env(cls, name: str = "fluentfp", var: str = "FLUENTFP_LOG_LEVEL", json_output: bool = False) -> "ConsoleLogger":
        return cls(name, level=getenv(var).or_("INFO"), json_output=json_output)

    def set_level(self, level: str) -> None:
        # unknown names leave the level unchanged
        self.level = _level_number(level).or_(self.level)

    @property
    def level_name(self) -> str:
        return Mapper.from_iterable(_LEVELS.items()).find(lambda kv: kv[1] == self.level).map(lambda kv: kv[0]).or_("INFO")

    def enabled(self, level: str) -> bool:
        return _level_number(level).map(lambda n: n >= self.level).or_false()

    def bind(self, **fields: Any) -> "ConsoleLogger":
        return ConsoleLogger(self.name, level=self.level_name, json_output=self.json_output,
                             context={**self.context, **fields}, stream=self.stream)

    def _render(self, level: str, msg: str, fields: Dict[str, Any]) -> str:
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        if self.json_output:
            rec: Dict[str, Any] = {"ts": ts, "name": self.name, "level": level, "msg": msg}
            if fields:
                rec["fields"] = fields
            return json.dumps(rec, separators=(",", ":"), cls=OptionEncoder)
        extras = "".join(f" {k}={v}" for k, v in sorted(fields.items()))
        return f"[{ts}] {self.name} {level}: {msg}{extras}"

    def _log(self, level: str, msg: str, **fields: Any) -> None:
        if not self.enabled(level):
            return
        line = self._render(level, msg, {**self.context, **fields})
        print(line, file=self.stream if self.stream is not None else sys.stderr)

    def debug(self, msg: str, **fields: Any) -> None: self._log("DEBUG", msg, **fields)
    def info(self, msg: str, **fields: Any) -> None: self._log("INFO", msg, **fields)
    def warn(self, msg: str, **fields: Any) -> None: self._log("WARN", msg, **fields)
    def error(self, msg: str, **fields: Any) -> None: self._log("ERROR", msg, **fields)
