from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


def _b(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    v2 = v.strip().lower()
    return v2 in ("1", "true", "yes", "on", "y")


def _ob(name: str) -> Optional[bool]:
    if os.getenv(name) is None:
        return None
    return _b(name, False)


def _i(name: str, default: int) -> int:
    try:
        return int(float(os.getenv(name, str(default))))
    except Exception:
        return default


def _dict_root() -> Path:
    return Path(os.getenv("PROOFTAG_DICT_ROOT", str(Path.cwd() / "data" / "dicts")))


@dataclass
class _Settings:
    # Directory holding <lang>/<lang>.tsv dictionary exports
    DICT_ROOT: Path = field(default_factory=_dict_root)
    # Priority of rule ids that no table registers
    DEFAULT_PRIORITY: int = field(default_factory=lambda: _i("PROOFTAG_DEFAULT_PRIORITY", 0))
    # Overrides each language's merge-or-replace choice for manual additions when set
    COMBINE_MANUAL: Optional[bool] = field(default_factory=lambda: _ob("PROOFTAG_COMBINE_MANUAL"))
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("PROOFTAG_LOG_LEVEL", "INFO").upper())


_SETTINGS = _Settings()


def get_settings() -> _Settings:
    return _SETTINGS


def reload_settings() -> _Settings:
    """Re-read the environment; used by tests and the CLI after env changes."""
    global _SETTINGS
    _SETTINGS = _Settings()
    return _SETTINGS
