from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ReindentOptions(BaseModel):
    """
    Параметры одного запуска (после слияния CLI и окружения).
    """
    smart: bool = False
    tab_size: int = Field(default=4, ge=1)
    recursive: bool = False
    verbose: bool = False
    home_directory: str = "."
    encoding: str = "utf-8"


class FailedFile(BaseModel):
    path: str
    error: str
    stage: Optional[str] = None


class RunSummary(BaseModel):
    matched: int = 0
    changed: int = 0
    elapsed_ms: int = 0
    failed: List[FailedFile] = Field(default_factory=list)

    @classmethod
    def from_results(cls, results: List[Dict[str, Any]], elapsed_ms: int) -> "RunSummary":
        failed = [
            FailedFile(path=r.get("path", "?"), error=r["error"], stage=r.get("stage"))
            for r in results
            if not r.get("ok")
        ]
        changed = sum(1 for r in results if r.get("ok") and r.get("changed"))
        return cls(matched=len(results), changed=changed, elapsed_ms=elapsed_ms, failed=failed)

    def line(self) -> str:
        return f"Changed {self.changed} files out of {self.matched} matched files in {self.elapsed_ms} ms."
