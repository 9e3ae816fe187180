"""CSS model: parsed rules, media blocks, and optimization results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ParsedRule:
    """One ``selector { declarations }`` occurrence from the source text."""

    selector: str
    declarations: dict[str, str]


@dataclass(frozen=True)
class MediaBlock:
    """An ``@media`` block and the rules found inside it (one level deep)."""

    query: str
    rules: tuple[ParsedRule, ...] = ()


@dataclass(frozen=True)
class ParseResult:
    """Top-level rules and media blocks, each in discovery order."""

    rules: tuple[ParsedRule, ...] = ()
    media_blocks: tuple[MediaBlock, ...] = ()


@dataclass(frozen=True)
class OptimizationStats:
    """Size accounting for one optimization, derived from the two strings."""

    original_size: int
    optimized_size: int
    reduction: float
    used_class_count: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "original_size": self.original_size,
            "optimized_size": self.optimized_size,
            "reduction": self.reduction,
            "used_class_count": self.used_class_count,
        }


@dataclass(frozen=True)
class OptimizationReport:
    """Output of an optimize call as seen by a caller.

    ``stats`` is None and ``error`` holds the failure message when the
    optimizer raised; ``output`` then carries the message as a CSS comment.
    """

    output: str
    stats: OptimizationStats | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "output": self.output,
            "stats": self.stats.to_dict() if self.stats else None,
            "error": self.error,
        }
