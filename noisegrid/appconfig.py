from __future__ import annotations

import os
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version
from typing import Mapping

DISTRIBUTION = "noise-functions-demo"

_TRUTHY = {"1", "true", "t", "yes", "y", "on"}


@dataclass(frozen=True)
class AppConfig:
    """Process-wide settings, resolved once at startup and passed down."""

    version: str = "0.0.0"
    debug: bool = False
    workers: int = 1

    @property
    def version_label(self) -> str:
        label = f"v{self.version}"
        return f"{label} (debug)" if self.debug else label


def _installed_version() -> str:
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return "0.0.0"


def _env_int(environ: Mapping[str, str], name: str, default: int, *, min_value: int, max_value: int) -> int:
    try:
        v = int(environ.get(name, str(default)))
    except ValueError:
        v = default
    return max(min_value, min(max_value, v))


def load_app_config(environ: Mapping[str, str] | None = None) -> AppConfig:
    """Read NOISE_DEMO_DEBUG and NOISE_DEMO_WORKERS (clamped to 1..32)."""

    environ = os.environ if environ is None else environ
    debug = str(environ.get("NOISE_DEMO_DEBUG", "0")).strip().lower() in _TRUTHY
    workers = _env_int(environ, "NOISE_DEMO_WORKERS", 1, min_value=1, max_value=32)
    return AppConfig(version=_installed_version(), debug=debug, workers=workers)
