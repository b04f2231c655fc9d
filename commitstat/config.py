"""
Runtime settings, read from the environment.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

ENV_GIT_TIMEOUT = "COMMITSTAT_GIT_TIMEOUT"
ENV_MAX_WORKERS = "COMMITSTAT_MAX_WORKERS"

DEFAULT_GIT_TIMEOUT = 60.0  # seconds
DEFAULT_MAX_WORKERS = 4


@dataclass(frozen=True)
class Settings:
    git_timeout: float = DEFAULT_GIT_TIMEOUT
    max_workers: int = DEFAULT_MAX_WORKERS

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        return cls(
            git_timeout=_positive(data.get("git_timeout"), float, DEFAULT_GIT_TIMEOUT),
            max_workers=_positive(data.get("max_workers"), int, DEFAULT_MAX_WORKERS),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "git_timeout": self.git_timeout,
            "max_workers": self.max_workers,
        }


def _positive(value: Any, kind: type, default):
    if value is None or value == "":
        return default
    try:
        converted = kind(value)
    except (TypeError, ValueError):
        return default
    return converted if converted > 0 else default


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings.from_dict({
        "git_timeout": env.get(ENV_GIT_TIMEOUT),
        "max_workers": env.get(ENV_MAX_WORKERS),
    })
