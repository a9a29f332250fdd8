from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import PurePath
from typing import Any, Dict, Iterator


class FingerprintLogger:
    """Structured JSON logger with GitHub Actions integration."""

    def __init__(self, run_id: str, verbose: bool = False):
        self.run_id = run_id
        self.verbose = verbose
        self._stage_starts: dict[str, datetime] = {}

    def debug(self, message: str, **kwargs: Any) -> None:
        if self.verbose:
            self._emit("debug", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._emit("info", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._emit("warning", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._emit("error", message, **kwargs)

    @contextmanager
    def stage(self, name: str) -> Iterator[None]:
        """
        Context manager that tracks stage timing.

        Failures only mark the stage_end status; the caller reports the error.
        """
        start = datetime.now(timezone.utc)
        self._stage_starts[name] = start
        self.info("stage_start", stage=name)
        status = "ok"
        try:
            yield
        except Exception:
            status = "error"
            raise
        finally:
            end = datetime.now(timezone.utc)
            duration_ms = int((end - start).total_seconds() * 1000)
            self.info("stage_end", stage=name, duration_ms=duration_ms, status=status)

    def _emit(self, level: str, message: str, **kwargs: Any) -> None:
        """Emit structured JSON log + GitHub annotation for warnings and errors."""
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "run_id": self.run_id,
            "message": message,
        }
        payload.update(self._serialize(kwargs))

        sys.stderr.write(json.dumps(payload, ensure_ascii=False) + "\n")
        sys.stderr.flush()

        if level == "error":
            sys.stderr.write(f"::error::{message}\n")
            sys.stderr.flush()
        elif level == "warning":
            sys.stderr.write(f"::warning::{message}\n")
            sys.stderr.flush()

    @staticmethod
    def _serialize(fields: Dict[str, Any]) -> Dict[str, Any]:
        serialized: Dict[str, Any] = {}
        for key, value in fields.items():
            if isinstance(value, PurePath):
                serialized[key] = value.as_posix()
            else:
                serialized[key] = value
        return serialized
