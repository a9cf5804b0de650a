from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, TextIO

SENSITIVE_TOKENS = ("token", "secret", "password", "api_key", "apikey")


class ChangeGateLogger:
    """JSON-lines logger that also raises CI annotations for problems."""

    def __init__(self, run_id: str, stream: TextIO | None = None):
        self.run_id = run_id
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stderr

    def info(self, message: str, **kwargs: Any) -> None:
        self._emit("info", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._emit("warning", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._emit("error", message, **kwargs)

    @contextmanager
    def stage(self, name: str) -> Iterator[None]:
        """Log start, end and duration of a step."""
        start = datetime.now(timezone.utc)
        self.info("stage_start", stage=name)
        status = "ok"
        try:
            yield
        except Exception as exc:
            status = "error"
            self.error("stage_error", stage=name, error=str(exc))
            raise
        finally:
            duration_ms = int((datetime.now(timezone.utc) - start).total_seconds() * 1000)
            self.info("stage_end", stage=name, duration_ms=duration_ms, status=status)

    def _emit(self, level: str, message: str, **kwargs: Any) -> None:
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "run_id": self.run_id,
            "message": message,
        }
        payload.update(self._sanitize(kwargs))

        out = self.stream
        out.write(json.dumps(payload, ensure_ascii=False, default=str) + "\n")
        if level in ("error", "warning"):
            out.write(f"::{level}::{message}\n")
        out.flush()

    @staticmethod
    def _sanitize(fields: Dict[str, Any]) -> Dict[str, Any]:
        return {
            key: "***" if ChangeGateLogger._is_sensitive_key(key) else value
            for key, value in fields.items()
        }

    @staticmethod
    def _is_sensitive_key(key: str) -> bool:
        lowered = key.lower()
        return any(token in lowered for token in SENSITIVE_TOKENS)
