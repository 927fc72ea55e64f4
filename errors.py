from __future__ import annotations

from typing import Any, Dict, Optional

CONFIG = "config"
MATCH = "match"
READ = "read"
WRITE = "write"


def ok(**kwargs: Any) -> Dict[str, Any]:
    """
    Единый формат успешного результата по файлу.
    """
    return {"ok": True, **kwargs}


def fail(error: Any, stage: Optional[str] = None, **kwargs: Any) -> Dict[str, Any]:
    """
    Единый формат ошибки по файлу: ok + error (+ stage).
    """
    payload: Dict[str, Any] = {"ok": False, "error": str(error)}
    if stage:
        payload["stage"] = stage
    payload.update(kwargs)
    return payload


class ReindentError(Exception):
    """
    Внутреннее исключение: конфигурация, поиск файлов, чтение/запись.
    """
    def __init__(
        self,
        error: Any,
        stage: Optional[str] = None,
        path: Optional[str] = None,
    ):
        super().__init__(str(error))
        self.error = str(error)
        self.stage = stage
        self.path = path

    def to_payload(self) -> Dict[str, Any]:
        extra = {"path": self.path} if self.path else {}
        return fail(self.error, stage=self.stage, **extra)
