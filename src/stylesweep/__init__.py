"""Stylesweep: dialect-aware syntax checks and CSS cleanup for web sources."""
from __future__ import annotations

__version__ = "0.1.0"

from stylesweep.config import StylesweepConfig  # noqa: E402
from stylesweep.errors import ConfigError, StylesweepError  # noqa: E402
from stylesweep.extraction import extract_class_names  # noqa: E402
from stylesweep.model import DIALECTS, Dialect, get_dialect  # noqa: E402
from stylesweep.stylesheet import compute_stats, optimize, optimize_report, parse_rules  # noqa: E402
from stylesweep.validation import validate, validate_or_raise  # noqa: E402

__all__ = [
    "__version__",
    "StylesweepConfig",
    "StylesweepError",
    "ConfigError",
    "Dialect",
    "DIALECTS",
    "get_dialect",
    "validate",
    "validate_or_raise",
    "parse_rules",
    "extract_class_names",
    "optimize",
    "optimize_report",
    "compute_stats",
]
