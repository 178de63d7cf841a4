"""Non-fatal build diagnostics collected while the translation table is built."""
from __future__ import annotations

import logging
import traceback
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


_LOG_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    code: str
    message: str
    line: int | None = None
    traceback: str = ""

    def __str__(self) -> str:
        where = f"line {self.line}: " if self.line is not None else ""
        return f"{self.severity.value.upper()} {where}{self.message}"

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "line": self.line,
        }
        if self.traceback:
            d["traceback"] = self.traceback
        return d


@dataclass
class Diagnostics:
    """Ordered collector of build diagnostics.

    Nothing is logged while collecting; call :meth:`log_to` at the boundary.
    """

    items: list[Diagnostic] = field(default_factory=list)

    def info(self, code: str, message: str, line: int | None = None) -> None:
        self.items.append(Diagnostic(Severity.INFO, code, message, line))

    def warning(self, code: str, message: str, line: int | None = None) -> None:
        self.items.append(Diagnostic(Severity.WARNING, code, message, line))

    def error(self, code: str, message: str, line: int | None = None) -> None:
        self.items.append(Diagnostic(Severity.ERROR, code, message, line))

    def exception(self, code: str, exc: BaseException, line: int | None = None) -> None:
        """Record an unexpected exception, keeping its formatted traceback."""
        tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        self.items.append(
            Diagnostic(Severity.ERROR, code, f"{type(exc).__name__}: {exc}", line, tb)
        )

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.items if d.severity is Severity.WARNING]

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.items if d.severity is Severity.ERROR]

    @property
    def has_errors(self) -> bool:
        return any(d.severity is Severity.ERROR for d in self.items)

    def by_code(self, code: str) -> list[Diagnostic]:
        return [d for d in self.items if d.code == code]

    def log_to(self, logger: logging.Logger) -> None:
        """Replay every diagnostic as a log record on *logger*."""
        for d in self.items:
            if d.traceback:
                logger.log(_LOG_LEVELS[d.severity], "%s\n%s", d, d.traceback.rstrip())
            else:
                logger.log(_LOG_LEVELS[d.severity], "%s", d)
