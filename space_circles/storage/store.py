from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol

import yaml

log = logging.getLogger(__name__)


class HighscoreStore(Protocol):
    """
    Key-value persistence for non-negative integers.
    `load` returns None when the key is absent or its value is unusable.
    """

    def load(self, key: str) -> Optional[int]:
        ...

    def save(self, key: str, value: int) -> None:
        ...


def parse_decimal(raw) -> Optional[int]:
    """Decimal text (or a plain int) -> non-negative int, else None."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw >= 0 else None
    if isinstance(raw, str):
        s = raw.strip()
        if s.isascii() and s.isdecimal():
            return int(s)
    return None


def _check_value(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"stored values must be non-negative integers, got {value!r}")


class MemoryStore:
    def __init__(self, initial: Optional[Dict[str, int]] = None):
        self.values: Dict[str, str] = {}
        for k, v in (initial or {}).items():
            self.save(k, v)

    def load(self, key: str) -> Optional[int]:
        return parse_decimal(self.values.get(key))

    def save(self, key: str, value: int) -> None:
        _check_value(value)
        self.values[key] = str(value)


class FileStore:
    """
    Values live in runtime/cache/storage/<profile>.yaml as decimal strings:

        highscore: "42"
    """

    def __init__(self, profile: str = "default", root: Path | None = None):
        if root is None:
            root = Path(__file__).resolve().parents[2] / "runtime" / "cache" / "storage"
        self.path = Path(root) / f"{profile}.yaml"

    def _read(self) -> Dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            log.warning("could not read %s: %s", self.path, e)
            return {}
        if data is None:
            return {}
        if not isinstance(data, dict):
            log.warning("ignoring %s: expected a mapping, got %s", self.path, type(data).__name__)
            return {}
        return data

    def load(self, key: str) -> Optional[int]:
        data = self._read()
        if key not in data:
            log.debug("no value stored for %r in %s", key, self.path)
            return None
        value = parse_decimal(data[key])
        if value is None:
            log.warning("ignoring malformed value for %r in %s: %r", key, self.path, data[key])
        return value

    def save(self, key: str, value: int) -> None:
        _check_value(value)
        data = self._read()
        data[key] = str(value)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False)
