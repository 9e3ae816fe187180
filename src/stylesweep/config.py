from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields

from stylesweep.errors import ConfigError

_ENV_PREFIX = "STYLESWEEP_"


@dataclass(frozen=True)
class StylesweepConfig:
    default_dialect: str = "jsx"
    host: str = "127.0.0.1"
    port: int = 5000
    download_name: str = "optimized.css"
    log_level: str = "WARNING"
    max_input_bytes: int = 2_000_000

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StylesweepConfig:
        """Build a config from ``STYLESWEEP_*`` variables (e.g. ``STYLESWEEP_PORT``)."""
        environ = os.environ if environ is None else environ
        overrides: dict[str, object] = {}
        for f in fields(cls):
            raw = environ.get(_ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            if f.type != "int":
                overrides[f.name] = raw
                continue
            try:
                overrides[f.name] = int(raw)
            except ValueError as exc:
                raise ConfigError(
                    f"{_ENV_PREFIX}{f.name.upper()} must be an integer, got {raw!r}"
                ) from exc
        return cls(**overrides)
