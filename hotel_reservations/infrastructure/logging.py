"""
Простая реализация логгера, выводящая сообщения в консоль.
"""

import json
import sys
from typing import Any, Optional, TextIO

from hotel_reservations.application import ports


class ConsoleLogger(ports.ILogger):
    """Логгер для консоли: info в stdout, остальное в stderr."""

    def __init__(
        self,
        verbose: bool = False,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ):
        self._verbose = verbose
        self._out = out
        self._err = err

    def _write(self, level: str, message: str, stream: TextIO, **kwargs: Any) -> None:
        print(f"[{level}] {message}", file=stream, flush=True)
        if kwargs:
            print(
                "  Context:",
                json.dumps(kwargs, default=str, indent=2, ensure_ascii=False),
                file=stream,
                flush=True,
            )

    def info(self, message: str, **kwargs: Any) -> None:
        self._write("INFO", message, self._out or sys.stdout, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._write("ERROR", message, self._err or sys.stderr, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._write("WARNING", message, self._err or sys.stderr, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        if self._verbose:
            self._write("DEBUG", message, self._err or sys.stderr, **kwargs)
