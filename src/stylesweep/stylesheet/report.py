"""Caller-side optimization boundary: size statistics and error fallback."""

from __future__ import annotations

import logging
from collections.abc import Set

from stylesweep.model.css import OptimizationReport, OptimizationStats
from stylesweep.stylesheet.optimizer import optimize

logger = logging.getLogger(__name__)


def byte_size(text: str) -> int:
    """UTF-8 encoded length of *text*."""
    return len(text.encode("utf-8"))


def compute_stats(
    original: str, optimized: str, used_classes: Set[str] | None = None
) -> OptimizationStats:
    """Size accounting for an optimization of *original* into *optimized*.

    ``reduction`` is the percentage saved, rounded to one decimal. It is
    negative when the output grew and 0.0 for an empty original.
    """
    original_size = byte_size(original)
    optimized_size = byte_size(optimized)
    if original_size:
        reduction = round((1 - optimized_size / original_size) * 100, 1)
    else:
        reduction = 0.0
    return OptimizationStats(
        original_size=original_size,
        optimized_size=optimized_size,
        reduction=reduction,
        used_class_count=len(used_classes) if used_classes is not None else None,
    )


def optimize_report(css: str, used_classes: Set[str] | None = None) -> OptimizationReport:
    """Optimize *css* and report statistics, never raising.

    A failure inside the optimizer becomes a ``/* Error: ... */`` output
    with no statistics.
    """
    try:
        output = optimize(css, used_classes)
    except Exception as exc:
        logger.warning("CSS optimization failed: %s", exc)
        return OptimizationReport(output=f"/* Error: {exc} */", stats=None, error=str(exc))
    stats = compute_stats(css, output, used_classes)
    logger.info(
        "Optimized CSS: %d -> %d bytes (%.1f%%)",
        stats.original_size,
        stats.optimized_size,
        stats.reduction,
    )
    return OptimizationReport(output=output, stats=stats)
