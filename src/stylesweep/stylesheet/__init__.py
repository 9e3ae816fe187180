from stylesweep.stylesheet.optimizer import filter_unused, optimize, selector_classes, serialize_groups
from stylesweep.stylesheet.parser import group_rules, parse_declarations, parse_rules, strip_comments
from stylesweep.stylesheet.report import byte_size, compute_stats, optimize_report

__all__ = [
    "parse_rules",
    "parse_declarations",
    "strip_comments",
    "group_rules",
    "optimize",
    "filter_unused",
    "serialize_groups",
    "selector_classes",
    "optimize_report",
    "compute_stats",
    "byte_size",
]
