"""
Local JSON results store.

Keeps every assembled record in one file shaped ``{"resumes": [...]}``.
The pipeline only sees ``append`` and ``read_all``.
"""
from __future__ import annotations
import json
import threading
from pathlib import Path
from typing import Any, Dict, List

from utils import to_pretty_json


class JsonResultStore:
    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def read_all(self) -> List[Dict[str, Any]]:
        with self._lock:
            return self._load()["resumes"]

    def append(self, record: Dict[str, Any]) -> None:
        with self._lock:
            data = self._load()
            data["resumes"].append(record)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(to_pretty_json(data), encoding="utf-8")

    def _load(self) -> Dict[str, List[Dict[str, Any]]]:
        if not self.path.exists():
            return {"resumes": []}
        data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        data.setdefault("resumes", [])
        return data
